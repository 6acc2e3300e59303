"""Typed durations and monotonic time points."""

from __future__ import annotations

import math
import numbers
import sys
import time
from fractions import Fraction
from functools import total_ordering
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _coerce(rep: type, value: Any) -> int | float:
    if rep is int:
        return value if isinstance(value, int) else math.trunc(value)
    return float(value)


def _cast(count: int | float, from_period: Fraction, to_rep: type, to_period: Fraction) -> int | float:
    """Convert a tick count between periods, truncating toward zero for integer targets."""
    ratio = from_period / to_period
    if to_rep is int and isinstance(count, int):
        return _trunc_div(count * ratio.numerator, ratio.denominator)
    value = float(count)
    if ratio.denominator == 1:
        value *= ratio.numerator
    elif ratio.numerator == 1:
        value /= ratio.denominator
    else:
        value = value * ratio.numerator / ratio.denominator
    return _coerce(to_rep, value)


def _common_period(first: Fraction, second: Fraction) -> Fraction:
    return Fraction(
        math.gcd(first.numerator, second.numerator),
        math.lcm(first.denominator, second.denominator),
    )


@total_ordering
class Duration:
    """A span of time counted in ticks of ``period`` seconds.

    ``rep`` is the type of the tick count: ``int`` counts truncate toward
    zero on conversion, ``float`` counts keep fractions. The base class
    counts fractional seconds.
    """

    __slots__ = ("_count",)

    rep: type = float
    period: Fraction = Fraction(1)

    def __init__(self, value: int | float | Duration = 0) -> None:
        cls = type(self)
        if isinstance(value, Duration):
            self._count = _cast(value._count, value.period, cls.rep, cls.period)
        elif isinstance(value, numbers.Real):
            self._count = _coerce(cls.rep, value)
        else:
            raise TypeError(f"cannot make a duration from {type(value).__name__}")

    def count(self) -> int | float:
        """Return the number of ticks."""
        return self._count

    def is_zero(self) -> bool:
        return self._count == 0

    def is_negative(self) -> bool:
        return self._count < 0

    def is_positive(self) -> bool:
        return self._count > 0

    def absolute(self) -> Duration:
        """Return a duration of the same type with a non-negative count."""
        return type(self)(-self._count if self._count < 0 else self._count)

    @classmethod
    def zero(cls) -> Duration:
        return cls(0)

    @classmethod
    def min(cls) -> Duration:
        """Return the most negative representable duration."""
        return cls(_INT64_MIN if cls.rep is int else -sys.float_info.max)

    @classmethod
    def max(cls) -> Duration:
        """Return the largest representable duration."""
        return cls(_INT64_MAX if cls.rep is int else sys.float_info.max)

    def _in_common(self, other: Duration) -> tuple[type, Fraction, int | float, int | float]:
        common_rep = int if self.rep is int and other.rep is int else float
        common_period = _common_period(self.period, other.period)
        left = _cast(self._count, self.period, common_rep, common_period)
        right = _cast(other._count, other.period, common_rep, common_period)
        return common_rep, common_period, left, right

    @staticmethod
    def _seconds_result(total: int | float, period: Fraction, rep: type) -> Duration:
        result_type = _IntegralSeconds if rep is int else Seconds
        return result_type(_cast(total, period, rep, Fraction(1)))

    def __add__(self, other: Duration) -> Duration:
        """Sum in seconds; the count is fractional unless both counts are integral."""
        if not isinstance(other, Duration):
            return NotImplemented
        rep, period, left, right = self._in_common(other)
        return self._seconds_result(left + right, period, rep)

    def __sub__(self, other: Duration) -> Duration:
        """Difference in seconds; the count is fractional unless both counts are integral."""
        if not isinstance(other, Duration):
            return NotImplemented
        rep, period, left, right = self._in_common(other)
        return self._seconds_result(left - right, period, rep)

    def __mul__(self, scalar: int | float) -> Duration:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if self.rep is float or isinstance(scalar, float):
            return type(self)(float(self._count) * float(scalar))
        return type(self)(self._count * scalar)

    def __truediv__(self, scalar: int | float) -> Duration:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if self.rep is float or isinstance(scalar, float):
            return type(self)(float(self._count) / float(scalar))
        if isinstance(scalar, int):
            return type(self)(_trunc_div(self._count, scalar))
        return type(self)(self._count / scalar)

    def __iadd__(self, other: Duration) -> Duration:
        """Add ``other`` converted to this duration's own type."""
        if not isinstance(other, Duration):
            return NotImplemented
        return type(self)(self._count + _cast(other._count, other.period, self.rep, self.period))

    def __isub__(self, other: Duration) -> Duration:
        """Subtract ``other`` converted to this duration's own type."""
        if not isinstance(other, Duration):
            return NotImplemented
        return type(self)(self._count - _cast(other._count, other.period, self.rep, self.period))

    def __imul__(self, scalar: int | float) -> Duration:
        return self.__mul__(scalar)

    def __itruediv__(self, scalar: int | float) -> Duration:
        return self.__truediv__(scalar)

    def _exact(self) -> Fraction | float:
        if isinstance(self._count, float) and not math.isfinite(self._count):
            return self._count
        return Fraction(self._count) * self.period

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._exact() == other._exact()

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._exact() < other._exact()

    def __hash__(self) -> int:
        return hash(self._exact())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._count!r})"


class NanoSeconds(Duration):
    """Whole nanoseconds."""

    __slots__ = ()
    rep = int
    period = Fraction(1, 10**9)


class MicroSeconds(Duration):
    """Whole microseconds."""

    __slots__ = ()
    rep = int
    period = Fraction(1, 10**6)


class MilliSeconds(Duration):
    """Whole milliseconds."""

    __slots__ = ()
    rep = int
    period = Fraction(1, 1000)


class Seconds(Duration):
    """Fractional seconds."""

    __slots__ = ()
    rep = float
    period = Fraction(1)


class Minutes(Duration):
    """Fractional minutes."""

    __slots__ = ()
    rep = float
    period = Fraction(60)


class Hours(Duration):
    """Fractional hours."""

    __slots__ = ()
    rep = float
    period = Fraction(3600)


class _IntegralSeconds(Duration):
    __slots__ = ()
    rep = int
    period = Fraction(1)


@total_ordering
class TimePoint:
    """A point on the monotonic clock, held as nanosecond ticks since its epoch."""

    __slots__ = ("_ticks",)

    def __init__(self, ticks: int = 0) -> None:
        if not isinstance(ticks, int):
            raise TypeError(f"ticks must be int, not {type(ticks).__name__}")
        self._ticks = int(ticks)

    @property
    def ticks(self) -> int:
        """Nanoseconds since the clock's epoch."""
        return self._ticks

    @classmethod
    def now(cls) -> TimePoint:
        """Return the current time of the monotonic high-resolution clock."""
        return cls(time.perf_counter_ns())

    @classmethod
    def from_duration(cls, duration: Duration) -> TimePoint:
        """Return the time point ``duration`` after the epoch."""
        if not isinstance(duration, Duration):
            raise TypeError(f"expected a Duration, not {type(duration).__name__}")
        return cls(NanoSeconds(duration).count())

    def nanoseconds(self) -> NanoSeconds:
        return NanoSeconds(self._ticks)

    def microseconds(self) -> MicroSeconds:
        return MicroSeconds(self.nanoseconds())

    def milliseconds(self) -> MilliSeconds:
        return MilliSeconds(self.nanoseconds())

    def seconds(self) -> Seconds:
        return Seconds(self.nanoseconds())

    def minutes(self) -> Minutes:
        return Minutes(self.nanoseconds())

    def hours(self) -> Hours:
        return Hours(self.nanoseconds())

    def __add__(self, duration: Duration) -> TimePoint:
        if not isinstance(duration, Duration):
            return NotImplemented
        return TimePoint(self._ticks + NanoSeconds(duration).count())

    def __sub__(self, duration: Duration) -> TimePoint:
        if not isinstance(duration, Duration):
            return NotImplemented
        return TimePoint(self._ticks - NanoSeconds(duration).count())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._ticks == other._ticks

    def __lt__(self, other: TimePoint) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._ticks < other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __repr__(self) -> str:
        return f"TimePoint({self._ticks})"