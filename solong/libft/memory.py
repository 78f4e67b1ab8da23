"""Byte-buffer helpers with C memory-function semantics."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError("length exceeds the buffer")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with ``value`` taken as an unsigned byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes to zero."""
    memset(buffer, 0, length)


def memchr(buffer: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, buffer)
    index = bytes(buffer[:length]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(first: Buffer, second: Buffer, length: int) -> int:
    """Difference of the first unequal bytes within ``length`` bytes, or 0."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if dest + length > len(buffer) or src + length > len(buffer):
        raise ValueError("length exceeds the buffer")
    buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)