"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

_LLONG_MAX = 9223372036854775807
_ULLONG_MASK = (1 << 64) - 1
_INT_MASK = (1 << 32) - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _to_int32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit C int.

    Leading whitespace and one sign are skipped; parsing stops at the first
    non-digit. A positive value reaching the 64-bit limit gives -1, a
    negative one beyond it gives 0; other results wrap to 32 bits.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    total = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        total = (total * 10 + ord(char) - ord("0")) & _ULLONG_MASK
        if sign == 1 and total >= _LLONG_MAX:
            return -1
        if sign == -1 and total > _LLONG_MAX:
            return 0
    return _to_int32(total * sign)


def itoa(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit C int."""
    return str(_to_int32(number))