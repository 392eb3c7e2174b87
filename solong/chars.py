"""Character classification, ASCII case mapping and integer/text conversion."""

from __future__ import annotations

import re
from typing import Union

CharLike = Union[str, int]

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone.

    A string argument gives a string back, an integer gives an integer.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement signed integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_leading(text: str, bits: int) -> int:
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap(value, bits)


def atoi(text: str) -> int:
    """Parse the leading decimal integer of text as a 32-bit signed value.

    Leading ASCII whitespace and one optional sign are skipped; parsing stops
    at the first non-digit. Text without digits gives 0. Values out of range
    wrap around as a 32-bit integer would.
    """
    return _parse_leading(text, 32)


def atoll(text: str) -> int:
    """Parse the leading decimal integer of text as a 64-bit signed value."""
    return _parse_leading(text, 64)


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading '-' if negative."""
    return f"{int(n):d}"