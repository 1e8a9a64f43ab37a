"""Byte-buffer helpers modelled on the C memory functions.

Buffers are ``bytearray`` objects changed in place; read-only inputs may
be any bytes-like object. Searches return an index or ``None``.
"""

from __future__ import annotations

from typing import Optional


def _check_length(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if n > len(buffer):  # type: ignore[arg-type]
            raise ValueError("length exceeds buffer size")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value & 0xFF``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError("region exceeds buffer size")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value & 0xFF`` in ``data[:n]``."""
    _check_length(n, data)
    position = bytes(data[:n]).find(value & 0xFF)
    return None if position < 0 else position


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first pair that
    differs, or 0."""
    _check_length(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0