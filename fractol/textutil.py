"""Character classes, comparisons, searching, splitting and trimming of text."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Sequence, Union

Char = Union[str, int]

_SPACES = frozenset(" \n\t\r\v\f")
_TRIM_CHARS = " \n\t"


def _code(c: Char) -> int:
    """Code point of a one-character string, or the integer itself."""
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def _same_kind(original: Char, code: int) -> Char:
    return code if isinstance(original, int) else chr(code)


def is_space(c: Char) -> bool:
    """True for space, newline, tab, carriage return, vertical tab and form feed."""
    return chr(_code(c)) in _SPACES if 0 <= _code(c) < 0x110000 else False


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def split(text: str, sep: str) -> list[str]:
    """The non-empty runs of *text* between occurrences of the character *sep*."""
    _code(sep)
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Number of non-empty runs of *text* separated by the character *sep*."""
    return len(split(text, sep))


def trim(text: str) -> str:
    """Strip spaces, newlines and tabs from both ends."""
    return text.strip(_TRIM_CHARS)


def find(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of *needle*, 0 for an empty needle, else None."""
    index = haystack.find(needle)
    return index if index >= 0 else None


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Like find, but the match must lie entirely within the first *limit* characters."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def compare(s1: str, s2: str) -> int:
    """Difference of the first differing code points; a missing character counts as 0."""
    for a, b in zip_longest(s1, s2, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Like compare, looking at no more than the first *n* characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(s1[:n], s2[:n])


def sort_params(argv: Sequence[str]) -> list[str]:
    """Argument list with everything after the program name sorted by compare."""
    if not argv:
        return []
    return [argv[0], *sorted(argv[1:])]