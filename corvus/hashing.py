"""FNV-1a hashing of text and byte strings."""

from __future__ import annotations

_PARAMETERS = {
    32: (2166136261, 16777619),
    64: (14695981039346656037, 1099511628211),
}


def fnv1a(data: str | bytes | bytearray | memoryview, bits: int = 32) -> int:
    """Return the FNV-1a hash of ``data`` with a width of 32 or 64 bits.

    Text is hashed as its UTF-8 encoding.
    """
    try:
        offset_basis, prime = _PARAMETERS[bits]
    except KeyError:
        raise ValueError(f"unsupported FNV-1a width: {bits} (expected 32 or 64)") from None

    if isinstance(data, str):
        payload = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        payload = bytes(data)
    else:
        raise TypeError(f"cannot hash object of type {type(data).__name__}")

    mask = (1 << bits) - 1
    value = offset_basis
    for byte in payload:
        value ^= byte
        value = (value * prime) & mask
    return value