"""Byte-buffer helpers: filling, searching, comparing and moving bytes."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: Buffer) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken mod 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, count)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(data: Buffer, value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``count``."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return index if index >= 0 else None


def compare_bytes(first: Buffer, second: Buffer, count: int) -> int:
    """Difference of the first differing bytes within ``count``, else 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def copy_bytes(dest: bytearray, src: Buffer, count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` into ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def move_bytes(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Move ``count`` bytes within ``buffer``; the ranges may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError("count must not be negative")
    if max(dest_offset, src_offset) + count > len(buffer):
        raise ValueError("range exceeds buffer length")
    buffer[dest_offset:dest_offset + count] = bytes(
        buffer[src_offset:src_offset + count]
    )
    return buffer