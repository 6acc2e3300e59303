"""String formatting and UTF-8 conversion helpers."""

from __future__ import annotations

from typing import Any


class _Bool:
    """Formats a bool as ``true``/``false``, or as an integer under a numeric spec."""

    __slots__ = ("value",)

    def __init__(self, value: bool) -> None:
        self.value = value

    def _text(self) -> str:
        return "true" if self.value else "false"

    def __format__(self, spec: str) -> str:
        if not spec or spec == "s":
            return self._text()
        if spec[-1] == "s" or not any(ch.isalpha() for ch in spec[-1:]):
            if spec[-1:] not in "0123456789" or spec[-1] == "s":
                return format(self._text(), spec)
        return format(int(self.value), spec)

    def __str__(self) -> str:
        return self._text()

    __repr__ = __str__


def _wrap(value: Any) -> Any:
    return _Bool(value) if isinstance(value, bool) else value


def format_string(fmt: str, *args: Any, **kwargs: Any) -> str:
    """Format ``fmt`` with brace placeholders; booleans render as true/false."""
    return fmt.format(
        *(_wrap(arg) for arg in args),
        **{key: _wrap(value) for key, value in kwargs.items()},
    )


def convert(value: str | bytes | bytearray) -> str | bytes:
    """Convert between UTF-8 bytes and text.

    Bytes become text (invalid sequences are replaced) and text becomes
    UTF-8 bytes.
    """
    if isinstance(value, str):
        return value.encode("utf-8", "replace")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "replace")
    raise TypeError(f"cannot convert object of type {type(value).__name__}")


def to_string(value: int | float) -> str:
    """Render a number the way the standard numeric conversion does.

    Integers print in decimal, booleans as 1 or 0, floats with six decimals.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    raise TypeError(f"cannot convert object of type {type(value).__name__} to string")