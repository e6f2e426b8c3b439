"""Byte buffer helpers working on ``bytearray`` and other byte sequences."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf``; the two regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dst_offset, src_offset) + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: Sequence[int], value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_count(n, data)
    target = value & 0xFF
    for index, byte in enumerate(data[:n]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)