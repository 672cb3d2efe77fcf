"""Hashing helpers shared across the engine."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1

FNV_PRIME = 0x01000193
FNV_OFFSET = 0x811C9DC5
STRING_HASH_SEED = 7521


def fnv_hash(data: bytes, start: int = 0) -> int:
    """Hash raw bytes Fowler-Noll-Vo style, continuing from ``start``.

    The result is a 64-bit unsigned integer.
    """
    output = start & _MASK64
    for byte in bytes(data):
        output ^= byte
        output = (output * FNV_PRIME) & _MASK64
    return output ^ FNV_OFFSET


def string_hash(text: str, start: int = 0) -> int:
    """Hash a string (as UTF-8) with a djb2-style rolling hash.

    Bytes above 127 are treated as signed chars, so they subtract from the
    running value; the result wraps to 64 bits.
    """
    value = (start + STRING_HASH_SEED) & _MASK64
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = ((value << 5) + value + signed) & _MASK64
    return value


def combine(state: int, data: str | bytes | bytearray | memoryview) -> int:
    """Fold ``data`` into a running hash ``state`` and return the new state.

    Strings use :func:`string_hash`; raw bytes use :func:`fnv_hash`.
    """
    if isinstance(data, str):
        return string_hash(data, state)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return fnv_hash(bytes(data), state)
    raise TypeError(f"cannot hash value of type {type(data).__name__}")