"""Locks, condition variables and scoped locking."""

from __future__ import annotations

import numbers
import threading
import time
from collections import deque
from typing import Any, Callable, Protocol

from corvus.timing import Duration, Seconds


class Lockable(Protocol):
    def lock(self) -> None: ...

    def try_lock(self) -> bool: ...

    def unlock(self) -> None: ...


class CriticalSection:
    """A recursive in-process lock.

    ``spin_count`` is kept for reference; waiting threads always block.
    """

    def __init__(self, spin_count: int = 4000) -> None:
        if spin_count < 0:
            raise ValueError("spin_count must not be negative")
        self.spin_count = spin_count
        self._lock = threading.RLock()

    def lock(self) -> None:
        """Block until the lock is held."""
        self._lock.acquire()

    def try_lock(self) -> bool:
        """Take the lock if it is free or already ours; never blocks."""
        return self._lock.acquire(blocking=False)

    def unlock(self) -> None:
        """Release one level of ownership.

        Raises RuntimeError if the calling thread does not hold the lock.
        """
        self._lock.release()

    def __enter__(self) -> CriticalSection:
        self.lock()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unlock()


class Mutex:
    """A recursive lock owned by the thread that took it."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def lock(self) -> None:
        """Block until the lock is held."""
        self._lock.acquire()

    def try_lock(self) -> bool:
        """Take the lock if it is free or already ours; never blocks."""
        return self._lock.acquire(blocking=False)

    def unlock(self) -> None:
        """Release one level of ownership.

        Raises RuntimeError if the calling thread does not hold the lock.
        """
        self._lock.release()

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unlock()


def _timeout_seconds(timeout: Duration | float) -> float:
    if isinstance(timeout, Duration):
        seconds = Seconds(timeout).count()
    elif isinstance(timeout, numbers.Real) and not isinstance(timeout, bool):
        seconds = float(timeout)
    else:
        raise TypeError(f"timeout must be a Duration or seconds, not {type(timeout).__name__}")
    return max(seconds, 0.0)


class ConditionVariable:
    """Lets threads sleep on a held lock until notified.

    The lock passed to the wait methods must be held exactly once by the
    caller; it is released while waiting and held again on return.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._waiters: deque[threading.Lock] = deque()

    def notify_one(self) -> None:
        """Wake one waiting thread, if any."""
        with self._guard:
            if self._waiters:
                self._waiters.popleft().release()

    def notify_all(self) -> None:
        """Wake every waiting thread."""
        with self._guard:
            while self._waiters:
                self._waiters.popleft().release()

    def _wait_internal(self, section: Lockable, timeout: float | None) -> bool:
        waiter = threading.Lock()
        waiter.acquire()
        with self._guard:
            self._waiters.append(waiter)
        section.unlock()
        try:
            if timeout is None:
                signalled = waiter.acquire()
            else:
                signalled = waiter.acquire(timeout=timeout)
        finally:
            section.lock()
        if not signalled:
            with self._guard:
                try:
                    self._waiters.remove(waiter)
                except ValueError:
                    # Notified just as the timeout ran out.
                    signalled = True
        return signalled

    def wait(self, section: Lockable, predicate: Callable[[], bool] | None = None) -> None:
        """Wait until notified, or until ``predicate`` holds if one is given."""
        if predicate is None:
            self._wait_internal(section, None)
            return
        while not predicate():
            self._wait_internal(section, None)

    def wait_for(
        self,
        section: Lockable,
        timeout: Duration | float,
        predicate: Callable[[], bool] | None = None,
    ) -> bool:
        """Wait at most ``timeout`` (a Duration or seconds).

        Without a predicate, return whether a notification arrived; with
        one, return whether it held before the time ran out.
        """
        seconds = _timeout_seconds(timeout)
        if predicate is None:
            return self._wait_internal(section, seconds)
        deadline = time.monotonic() + seconds
        while not predicate():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            if not self._wait_internal(section, remaining):
                return False
        return True


class ScopedLock:
    """Holds a lock from construction until the ``with`` block ends or ``release``."""

    def __init__(self, lockable: Lockable) -> None:
        for method in ("lock", "unlock", "try_lock"):
            if not callable(getattr(lockable, method, None)):
                raise TypeError(f"{type(lockable).__name__} has no {method}() method")
        self._lockable = lockable
        lockable.lock()
        self._held = True

    def release(self) -> None:
        """Release the lock once; later calls do nothing."""
        if self._held:
            self._held = False
            self._lockable.unlock()

    def __enter__(self) -> Lockable:
        return self._lockable

    def __exit__(self, *exc_info: Any) -> None:
        self.release()