"""128-bit globally unique identifiers made of four 32-bit words."""

from __future__ import annotations

import string
import struct
import uuid

_MASK = 0xFFFFFFFF
_DASH_POSITIONS = (8, 13, 18, 23)
_HEX_DIGITS = frozenset(string.hexdigits)


def _hex_digit(char: str) -> int:
    # Characters that are not hex digits count as zero.
    return int(char, 16) if char in _HEX_DIGITS else 0


def _hex_number(text: str) -> int:
    value = 0
    for char in text:
        value = (value * 16 + _hex_digit(char)) & _MASK
    return value


class Guid:
    """A GUID held as four unsigned 32-bit words; all zeros is invalid."""

    __slots__ = ("a", "b", "c", "d")

    def __init__(self, a: int = 0, b: int = 0, c: int = 0, d: int = 0) -> None:
        self.a = a & _MASK
        self.b = b & _MASK
        self.c = c & _MASK
        self.d = d & _MASK

    @classmethod
    def parse(cls, text: str) -> Guid:
        """Parse ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``.

        Raises ValueError if the length or dash positions are wrong.
        """
        if len(text) != 36 or any(text[position] != "-" for position in _DASH_POSITIONS):
            raise ValueError(f"malformed GUID string: {text!r}")
        return cls(
            _hex_number(text[0:8]),
            (_hex_number(text[9:13]) << 16) | _hex_number(text[14:18]),
            (_hex_number(text[19:23]) << 16) | _hex_number(text[24:28]),
            _hex_number(text[28:36]),
        )

    @classmethod
    def from_string(cls, text: str) -> Guid:
        """Parse ``text``, giving the invalid GUID if it is malformed."""
        try:
            return cls.parse(text)
        except ValueError:
            return cls()

    @classmethod
    def new_guid(cls) -> Guid:
        """Return a new random GUID."""
        return cls(*struct.unpack(">4I", uuid.uuid4().bytes))

    def is_valid(self) -> bool:
        """Return whether any word is non-zero."""
        return (self.a | self.b | self.c | self.d) != 0

    def invalidate(self) -> None:
        """Reset all four words to zero."""
        self.a = self.b = self.c = self.d = 0

    def to_string(self) -> str:
        """Return the lower-case dashed hexadecimal form."""
        return (
            f"{self.a:08x}-{self.b >> 16:04x}-{self.b & 0xFFFF:04x}-"
            f"{self.c >> 16:04x}-{self.c & 0xFFFF:04x}{self.d:08x}"
        )

    def _words(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Guid):
            return NotImplemented
        return self._words() == other._words()

    def __lt__(self, other: Guid) -> bool:
        if not isinstance(other, Guid):
            return NotImplemented
        return self._words() < other._words()

    def __gt__(self, other: Guid) -> bool:
        # Defined as "not less than", so equal GUIDs compare greater.
        if not isinstance(other, Guid):
            return NotImplemented
        return not self._words() < other._words()

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Guid({self.to_string()!r})"