"""Reading images in the XPM text format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .colornames import lookup
from .numbers import atoi

TRANSPARENT = 0xFF000000
NAME_BUFFER = 64
_UINT_MASK = 0xFFFFFFFF
_LONG_MAX = (1 << 63) - 1
_WORD_SPLIT = re.compile(r"[ \t]+")
_HEX_PREFIX = re.compile(r"[0-9a-fA-F]+")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """The XPM data is malformed or incomplete."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: packed 0xAARRGGBB pixels, row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Colour of the pixel at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Words of *text* separated by runs of spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_substring(text: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* in *text*, or None; a needle longer than *length* never matches."""
    if len(needle) > length:
        return None
    index = text.find(needle)
    return index if index >= 0 else None


def find_unquoted(text: str, needle: str, length: int) -> Optional[int]:
    """Like find_substring, skipping matches inside double-quoted strings."""
    if len(needle) > length:
        return None
    quoted = False
    for index, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, index):
            return index
    return None


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings by spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*", len(text))) is not None:
        rest = text[begin + 2:]
        end = find_substring(rest, "*/", len(rest))
        text = _blank(text, begin, (-1 if end is None else end) + 4)
    while (begin := find_unquoted(text, "//", len(text))) is not None:
        rest = text[begin + 2:]
        end = find_substring(rest, "\n", len(rest))
        text = _blank(text, begin, (-1 if end is None else end) + 3)
    return text


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & (1 << 31) else value


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Colour value of an XPM colour spec: "#RRGGBB" or a colour name.

    A name may be continued by *suffix* ("ghost" and "white").  Unknown names
    give 0; "none" gives -1 (transparent).
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        value = int(match.group(), 16) if match else 0
        return _to_int32(min(value, _LONG_MAX))
    if suffix is not None:
        name = f"{name} {suffix}"[: NAME_BUFFER - 1]
    color = lookup(name)
    return 0 if color is None else color


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definitions")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        suffix = words[at + 1] if at + 1 < len(words) else None
        color = text_to_rgb(words[at], suffix)
        key = line[:cpp]
        if direct:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    return palette


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its strings: header, colours, then pixel rows."""
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header values")
    palette = _read_palette(rows, ncolors, cpp)
    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(rows, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color & _UINT_MASK)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file: comments are dropped, quoted strings read."""
    cleaned = strip_comments(text)
    return parse_xpm_lines(match.group(1) for match in _QUOTED.finditer(cleaned))


def load_xpm(path: Union[str, Path]) -> XpmImage:
    """Read and decode an XPM file; OSError is raised if it cannot be read."""
    return parse_xpm_text(Path(path).read_bytes().decode("latin-1"))