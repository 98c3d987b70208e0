"""Small numeric helpers: integer parsing and formatting, roots and minima."""

from __future__ import annotations

import math
from typing import Iterable, Optional

_WHITESPACE = frozenset(" \n\t\r\v\f")
_DIGITS = frozenset("0123456789")
_ULONG_MASK = (1 << 64) - 1
_LONG_MAX = 9223372036854775807
_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 1 << 31


def _to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of *value* as a signed integer."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit, and the result wraps to a 32-bit signed integer.  A magnitude
    reaching the 64-bit signed limit gives -1 for positive input and 0 for
    negative input past that limit.
    """
    chars = iter(text)
    current = next(chars, "")
    while current in _WHITESPACE and current:
        current = next(chars, "")
    negative = False
    if current in ("-", "+") and current:
        negative = current == "-"
        current = next(chars, "")
    value = 0
    while current and current in _DIGITS:
        value = (value * 10 + int(current)) & _ULONG_MASK
        if value >= _LONG_MAX and not negative:
            return -1
        if value > _LONG_MAX and negative:
            return 0
        current = next(chars, "")
    return _to_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(n)


def exact_sqrt(nb: int) -> int:
    """Return the integer square root of a perfect square, otherwise 0."""
    if nb < 1:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def min_value(values: Iterable[int]) -> int:
    """Return the smallest of *values*; an empty input raises ValueError."""
    items = list(values)
    if not items:
        raise ValueError("min_value() of an empty sequence")
    return min(items)


def absolute(value: float) -> float:
    """Absolute value as a float; negative zero is left unchanged."""
    value = float(value)
    return -value if value < 0 else value


def is_number(text: Optional[str]) -> bool:
    """True if every character is a digit or a minus sign followed by a digit."""
    if text is None:
        return False
    followers = list(text[1:]) + [""]
    return all(
        char in _DIGITS or (char == "-" and nxt in _DIGITS and nxt != "")
        for char, nxt in zip(text, followers)
    )