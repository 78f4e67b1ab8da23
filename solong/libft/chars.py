"""Character classification and case conversion on ASCII codes."""

from __future__ import annotations


def is_alpha(code: int) -> bool:
    """True for ASCII letters."""
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(code: int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= code <= ord("9")


def is_alnum(code: int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """Upper-case an ASCII lower-case letter; other codes pass through."""
    return code - 32 if ord("a") <= code <= ord("z") else code


def to_lower(code: int) -> int:
    """Lower-case an ASCII upper-case letter; other codes pass through."""
    return code + 32 if ord("A") <= code <= ord("Z") else code