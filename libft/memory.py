"""Byte buffer operations on ``bytes`` and ``bytearray`` objects."""

from __future__ import annotations

import sys


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(nelem: int, elsize: int) -> bytearray:
    """Return a zero-filled buffer of ``nelem * elsize`` bytes.

    Raises OverflowError when the product would exceed the platform size limit.
    """
    if nelem < 0 or elsize < 0:
        raise ValueError("element count and size must not be negative")
    if nelem and elsize and nelem > sys.maxsize // elsize:
        raise OverflowError("requested size is too large")
    return bytearray(nelem * elsize)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c & 0xFF`` among the first
    ``n`` bytes of ``data``, or None if there is none."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, a, b)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap. Returns ``buffer``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c & 0xFF``; return it."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer