"""A small printf with the conversions ``c s d i p u x X %``."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1
NULL_STRING = "(null)"


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >= 1 << (_INT_BITS - 1) else value


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p")
    return f"0x{address & _POINTER_MASK:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda value: str(_signed32(_as_int(value, "d"))),
    "i": lambda value: str(_signed32(_as_int(value, "i"))),
    "p": _pointer,
    "u": lambda value: str(_as_int(value, "u") & _UINT_MASK),
    "x": lambda value: f"{_as_int(value, 'x') & _UINT_MASK:x}",
    "X": lambda value: f"{_as_int(value, 'X') & _UINT_MASK:X}",
}


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the text.

    ``%%`` gives a percent sign, an unknown conversion character is
    written as itself, and a lone ``%`` at the end writes nothing.
    Integers are treated as 32-bit C ints.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            pieces.append(conversion)
        else:
            pieces.append(handler(_next_arg(remaining, conversion)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)