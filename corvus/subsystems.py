"""Subsystems and the collection that owns them, keyed by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator

from corvus.logger import LogChannel, LogSeverity, log
from corvus.names import Name

LOG_SUBSYSTEM = LogChannel(Name("Subsystem"), LogSeverity.ALL)


class Subsystem(ABC):
    """A part of the engine that is set up on registration and torn down on removal."""

    @abstractmethod
    def initialize(self) -> None:
        """Called once the subsystem has been registered."""

    @abstractmethod
    def deinitialize(self) -> None:
        """Called when the subsystem is unregistered or its collection shuts down."""


def type_name_without_prefix(cls: type) -> str:
    """Return the class name without its first character (the type prefix).

    Names of a single character are returned unchanged.
    """
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, not {type(cls).__name__}")
    name = cls.__name__
    return name[1:] if len(name) > 1 else name


SubsystemKey = Name | str | type


def _as_name(key: SubsystemKey) -> Name:
    if isinstance(key, Name):
        return key
    if isinstance(key, str):
        return Name(key)
    if isinstance(key, type):
        return Name(type_name_without_prefix(key))
    raise TypeError(f"subsystem key must be a Name, str or class, not {type(key).__name__}")


class SubsystemCollection:
    """Owns subsystems derived from ``base_type``, each under a unique name.

    Keys may be a Name, a string, or a subsystem class (named by
    ``type_name_without_prefix``).
    """

    def __init__(self, base_type: type[Subsystem] = Subsystem) -> None:
        if not (isinstance(base_type, type) and issubclass(base_type, Subsystem)):
            raise TypeError("base_type must be a subclass of Subsystem")
        self.base_type = base_type
        self._subsystems: dict[Name, Subsystem] = {}

    def is_registered(self, key: SubsystemKey) -> bool:
        """Return whether a subsystem is registered under ``key``."""
        return _as_name(key) in self._subsystems

    def get_subsystem(self, key: SubsystemKey) -> Subsystem | None:
        """Return the subsystem under ``key``, or None (with a warning) if absent."""
        name = _as_name(key)
        subsystem = self._subsystems.get(name)
        if subsystem is None:
            log(
                LOG_SUBSYSTEM,
                LogSeverity.WARN,
                "Unable to get subsystem. Subsystem '{}' is not registered",
                name.string,
            )
        return subsystem

    def register(self, key: SubsystemKey, subsystem: Subsystem) -> bool:
        """Register and initialize ``subsystem``; False if the name is taken."""
        if not isinstance(subsystem, self.base_type):
            raise TypeError(
                f"{type(subsystem).__name__} is not a {self.base_type.__name__}"
            )
        name = _as_name(key)
        if name in self._subsystems:
            log(
                LOG_SUBSYSTEM,
                LogSeverity.WARN,
                "Unable to register subsystem. Subsystem '{}' is already registered",
                name.string,
            )
            return False
        self._subsystems[name] = subsystem
        subsystem.initialize()
        return True

    def register_type(self, subsystem_type: type[Subsystem], *args: Any, **kwargs: Any) -> bool:
        """Construct ``subsystem_type`` with the given arguments and register it under its type name."""
        if not (isinstance(subsystem_type, type) and issubclass(subsystem_type, self.base_type)):
            raise TypeError(f"subsystem type must be a subclass of {self.base_type.__name__}")
        return self.register(subsystem_type, subsystem_type(*args, **kwargs))

    def unregister(self, key: SubsystemKey) -> bool:
        """Deinitialize and remove the subsystem under ``key``; False if absent."""
        name = _as_name(key)
        subsystem = self._subsystems.get(name)
        if subsystem is None:
            log(
                LOG_SUBSYSTEM,
                LogSeverity.WARN,
                "Unable to unregister subsystem. Subsystem '{}' is not registered",
                name.string,
            )
            return False
        subsystem.deinitialize()
        del self._subsystems[name]
        return True

    def for_each(self, function: Callable[[Name, Subsystem], Any]) -> None:
        """Call ``function(name, subsystem)`` for every registered subsystem."""
        for name, subsystem in list(self._subsystems.items()):
            function(name, subsystem)

    def shutdown(self) -> None:
        """Deinitialize every subsystem and empty the collection."""
        subsystems = list(self._subsystems.values())
        self._subsystems.clear()
        for subsystem in subsystems:
            subsystem.deinitialize()

    def __contains__(self, key: object) -> bool:
        try:
            return self.is_registered(key)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._subsystems)

    def __iter__(self) -> Iterator[Name]:
        return iter(list(self._subsystems))

    def __enter__(self) -> SubsystemCollection:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()