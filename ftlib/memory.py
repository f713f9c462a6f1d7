"""Byte-buffer operations on mutable bytearrays."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")


def _check_span(buf, offset: int, length: int, what: str) -> None:
    if offset < 0:
        raise ValueError(f"{what} offset must not be negative, got {offset}")
    if offset + length > len(buf):
        raise ValueError(
            f"{what} range {offset}..{offset + length} exceeds buffer of {len(buf)} bytes"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_length(length)
    _check_span(buf, 0, length, "target")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == SIZE_MAX or size == SIZE_MAX:
        raise MemoryError("requested size is too large")
    return bytearray(count * size)


def memchr(buf, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first ``length`` bytes, or None."""
    _check_length(length)
    _check_span(buf, 0, length, "search")
    index = bytes(buf[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference at the first mismatch, else 0."""
    if length <= 0:
        return 0
    _check_span(first, 0, length, "first")
    _check_span(second, 0, length, "second")
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(length)
    if dst is src or length == 0:
        return dst
    _check_span(src, 0, length, "source")
    _check_span(dst, 0, length, "destination")
    dst[:length] = src[:length]
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``; ranges may overlap."""
    _check_length(length)
    _check_span(buf, src_offset, length, "source")
    _check_span(buf, dst_offset, length, "destination")
    if dst_offset != src_offset:
        buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf