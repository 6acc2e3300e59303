"""Interned names: strings identified by their FNV-1a hash."""

from __future__ import annotations

import threading

from corvus.hashing import fnv1a


class NameStringPool:
    """Maps name hashes to the strings they were made from.

    Hash 0 always maps to the empty string, and the first string registered
    for a hash is kept.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._strings: dict[int, str] = {0: ""}

    def is_registered(self, hash_value: int) -> bool:
        """Return whether a string is registered under ``hash_value``."""
        with self._lock:
            return hash_value in self._strings

    def register(self, hash_value: int, text: str) -> None:
        """Register ``text`` under ``hash_value`` unless something already is."""
        with self._lock:
            self._strings.setdefault(hash_value, text)

    def get_string(self, hash_value: int) -> str:
        """Return the string for ``hash_value``, or the empty string if unknown."""
        with self._lock:
            return self._strings.get(hash_value, "")

    def __contains__(self, hash_value: object) -> bool:
        return isinstance(hash_value, int) and self.is_registered(hash_value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._strings)


default_pool = NameStringPool()


class Name:
    """A string identified by its 32-bit FNV-1a hash.

    ``Name()`` is the invalid name with hash 0; any string, even an empty
    one, makes a valid name and is registered in the default pool.
    """

    __slots__ = ("_hash",)

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            self._hash = 0
            return
        if not isinstance(text, str):
            raise TypeError(f"name text must be str, not {type(text).__name__}")
        self._hash = fnv1a(text)
        default_pool.register(self._hash, text)

    @property
    def hash_value(self) -> int:
        """The hash identifying this name."""
        return self._hash

    @property
    def string(self) -> str:
        """The string this name was made from."""
        return default_pool.get_string(self._hash)

    def is_valid(self) -> bool:
        """Return whether this name has a non-zero hash."""
        return self._hash != 0

    def __int__(self) -> int:
        return self._hash

    def __index__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Name):
            return self._hash == other._hash
        if isinstance(other, int) and not isinstance(other, bool):
            return self._hash == other
        return NotImplemented

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"Name({self.string!r})" if self.is_valid() else "Name()"