"""The engine singleton and its subsystems."""

from __future__ import annotations

import threading
from typing import Any, ClassVar

from corvus.subsystems import Subsystem, SubsystemCollection, SubsystemKey


class Engine:
    """The process-wide engine; owns the engine subsystems while initialized."""

    _instance: ClassVar[Engine | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._subsystems: SubsystemCollection | None = None

    @classmethod
    def get_instance(cls) -> Engine:
        """Return the engine, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def has_instance(cls) -> bool:
        """Return whether the engine currently exists."""
        return cls._instance is not None

    @classmethod
    def destroy_instance(cls) -> None:
        """Drop the engine, shutting down its subsystems."""
        with cls._instance_lock:
            instance, cls._instance = cls._instance, None
        if instance is not None:
            instance.shutdown()

    @property
    def is_initialized(self) -> bool:
        return self._subsystems is not None

    def initialize(self) -> None:
        """Start with a fresh, empty set of subsystems, shutting down any earlier set."""
        previous, self._subsystems = self._subsystems, SubsystemCollection()
        if previous is not None:
            previous.shutdown()

    def shutdown(self) -> None:
        """Deinitialize all subsystems and release them."""
        collection, self._subsystems = self._subsystems, None
        if collection is not None:
            collection.shutdown()

    def _collection(self) -> SubsystemCollection:
        if self._subsystems is None:
            raise RuntimeError("engine is not initialized")
        return self._subsystems

    def is_subsystem_registered(self, key: SubsystemKey) -> bool:
        return self._collection().is_registered(key)

    def get_subsystem(self, key: SubsystemKey) -> Subsystem | None:
        return self._collection().get_subsystem(key)

    def register_subsystem(self, key: SubsystemKey, subsystem: Subsystem) -> bool:
        return self._collection().register(key, subsystem)

    def register_subsystem_type(self, subsystem_type: type[Subsystem], *args: Any, **kwargs: Any) -> bool:
        return self._collection().register_type(subsystem_type, *args, **kwargs)

    def unregister_subsystem(self, key: SubsystemKey) -> bool:
        return self._collection().unregister(key)


def get_engine() -> Engine:
    """Return the engine singleton."""
    return Engine.get_instance()