"""String helpers with C string semantics, on Python strings and byte buffers."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, TypeVar

T = TypeVar("T")

NUL = "\0"


def _c_length(buffer: bytes | bytearray) -> int:
    """Length of the NUL-terminated string at the start of ``buffer``."""
    end = buffer.find(0)
    return len(buffer) if end == -1 else end


def _check_size(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dest):
        raise ValueError("size exceeds the destination buffer")


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    if char == NUL:
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    if char == NUL:
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters; return the difference of the first mismatch."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    for a, b in zip_longest(first[:limit], second[:limit], fillvalue=NUL):
        if a == NUL and b == NUL:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def strlcpy(dest: bytearray, src: bytes, size: int) -> int:
    """Copy ``src`` into ``dest`` with at most ``size`` bytes including the NUL.

    Returns the length of ``src``.
    """
    _check_size(dest, size)
    source_length = _c_length(src)
    if size:
        count = min(source_length, size - 1)
        dest[:count] = src[:count]
        dest[count] = 0
    return source_length


def strlcat(dest: bytearray, src: bytes, size: int) -> int:
    """Append ``src`` to the string in ``dest`` keeping the total within ``size`` bytes.

    Returns the length the full result would have had; when ``size`` is no
    larger than the current string, returns ``size`` plus the length of ``src``.
    """
    _check_size(dest, size)
    dest_length = _c_length(dest)
    source_length = _c_length(src)
    if size <= dest_length:
        return size + source_length
    count = min(source_length, size - 1 - dest_length)
    dest[dest_length:dest_length + count] = src[:count]
    dest[dest_length + count] = 0
    return dest_length + source_length


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buffer: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` on each item up to the first NUL.

    A value returned by ``func`` other than None replaces the item in place.
    """
    for index, item in enumerate(buffer):
        if item == 0 or item == NUL:
            break
        result = func(index, item)
        if result is not None:
            buffer[index] = result