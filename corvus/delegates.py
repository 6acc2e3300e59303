"""Single-cast and multicast delegates with handle-based unbinding."""

from __future__ import annotations

import itertools
from functools import partial, total_ordering
from typing import Any, Callable


@total_ordering
class DelegateHandle:
    """Identifies one binding in a multicast delegate; id 0 is invalid."""

    __slots__ = ("id",)
    _ids = itertools.count(1)

    def __init__(self, handle_id: int = 0) -> None:
        self.id = handle_id

    @classmethod
    def new_handle(cls) -> DelegateHandle:
        """Return a handle with an id never given out before."""
        return cls(next(cls._ids))

    def is_valid(self) -> bool:
        """Return whether the handle has a non-zero id."""
        return self.id != 0

    def reset(self) -> None:
        """Make the handle invalid."""
        self.id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: DelegateHandle) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self.id})"


def _member_callable(obj: Any, method: Callable[..., Any] | str) -> Callable[..., Any]:
    if isinstance(method, str):
        bound = getattr(obj, method)
        if not callable(bound):
            raise TypeError(f"attribute {method!r} of {type(obj).__name__} is not callable")
        return bound
    if not callable(method):
        raise TypeError("method must be callable or the name of a method")
    return partial(method, obj)


def _require_callable(function: Any) -> None:
    if not callable(function):
        raise TypeError(f"object of type {type(function).__name__} is not callable")


class Delegate:
    """Holds at most one callable.

    ``return_type`` is None for delegates whose result is discarded; otherwise
    executing an unbound delegate returns ``return_type()``.
    """

    def __init__(self, return_type: type | None = None) -> None:
        self.return_type = return_type
        self._function: Callable[..., Any] | None = None

    def bind(self, function: Callable[..., Any]) -> None:
        """Bind ``function``, replacing any earlier binding."""
        _require_callable(function)
        self._function = function

    def bind_member(self, obj: Any, method: Callable[..., Any] | str) -> None:
        """Bind ``method`` (a function or method name) called on ``obj``."""
        self._function = _member_callable(obj, method)

    def execute(self, *args: Any) -> Any:
        """Call the bound function, or return the default value if unbound."""
        if self._function is None:
            return None if self.return_type is None else self.return_type()
        result = self._function(*args)
        return None if self.return_type is None else result

    def is_bound(self) -> bool:
        """Return whether a callable is bound."""
        return self._function is not None

    def unbind(self) -> None:
        """Remove the binding."""
        self._function = None


class MulticastDelegate:
    """Holds any number of callables, all called by ``broadcast``."""

    def __init__(self) -> None:
        self._functions: dict[int, Callable[..., Any]] = {}

    def add_binding(self, function: Callable[..., Any]) -> DelegateHandle:
        """Add ``function`` and return the handle that identifies it."""
        _require_callable(function)
        handle = DelegateHandle.new_handle()
        self._functions[handle.id] = function
        return handle

    def add_member_binding(self, obj: Any, method: Callable[..., Any] | str) -> DelegateHandle:
        """Add ``method`` (a function or method name) called on ``obj``."""
        return self.add_binding(_member_callable(obj, method))

    def remove_binding(self, handle: DelegateHandle) -> bool:
        """Remove the binding for ``handle`` and reset it; False if not bound."""
        if handle.id not in self._functions:
            return False
        del self._functions[handle.id]
        handle.reset()
        return True

    def clear(self) -> None:
        """Remove every binding."""
        self._functions.clear()

    def broadcast(self, *args: Any) -> None:
        """Call every bound function with ``args``; results are discarded."""
        for function in list(self._functions.values()):
            function(*args)

    def is_bound(self) -> bool:
        """Return whether any function is bound."""
        return bool(self._functions)

    def bindings_count(self) -> int:
        """Return the number of bindings."""
        return len(self._functions)

    def is_handle_bound(self, handle: DelegateHandle) -> bool:
        """Return whether ``handle`` identifies a current binding."""
        return handle.id in self._functions

    def __len__(self) -> int:
        return len(self._functions)