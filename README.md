# fractol

Building blocks for drawing escape-time fractals. The package includes colour
palettes that turn iteration counts into RGB values, a reader for XPM images,
a table of X11 colour names, and some small helpers for text, numbers and
line-by-line input. It has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `fractol.colors`

- `get_rgb(red, green, blue)` packs three channels into a `0xRRGGBB` integer.
  Each channel is truncated to an integer, and the result wraps to 32 bits.
- `hsv_to_rgb(h, s, v)` converts a hue in degrees, plus a saturation and a value
  in `[0, 1]`, to a packed RGB value.
- `get_color(iteration, re, im, mode)` colours an escaped point. It uses a
  smoothed iteration count and one of five palettes:

  | mode | palette |
  |------|---------|
  | 0 | grey scale |
  | 1 | black to blue |
  | 2 | HSV, starting at 220° |
  | 3 | HSV, starting at 160° |
  | 4 | HSV, starting at 0° |

```python
from fractol.colors import get_rgb, hsv_to_rgb

get_rgb(255, 0, 0)        # 0xff0000
hsv_to_rgb(120, 1.0, 1.0) # 0x00ff00
```

### `fractol.colornames`

`lookup(name)` returns the `0xRRGGBB` value of an X11 colour name. Case is
ignored for ASCII letters. The name `"none"` returns `-1`, and an unknown name
returns `None`.

### `fractol.xpm`

Reads images in the XPM text format.

- `load_xpm(path)` reads and decodes a file.
- `parse_xpm_text(text)` decodes the text of a file. It removes comments, then
  reads the quoted strings.
- `parse_xpm_lines(lines)` decodes the strings themselves: first the header,
  then the colour definitions, then the pixel rows.

Each of these returns an `XpmImage`, which has `width`, `height`, a tuple of
`pixels`, and `pixel(x, y)`. Transparent pixels (colour `None`) come out as
`TRANSPARENT` (`0xFF000000`). Malformed data raises `XpmError`, which is a
subclass of `ValueError`.

The helpers `split_words`, `find_substring`, `find_unquoted`, `strip_comments`
and `text_to_rgb` are public too.

### `fractol.linereader`

- `LineReader` reads newline-terminated lines from any number of file
  descriptors, with a separate buffer for each. `next_line(fd)` returns one
  line as `bytes`, without the newline, or `None` at end of file.
- `iter_lines(fd, buffer_size)` yields every line of a descriptor.

### `fractol.numbers`

- `atoi` parses integers in the C style: leading whitespace and a sign are
  allowed, and the result wraps to a 32-bit signed value.
- `itoa` formats an integer as a string.
- `exact_sqrt` returns the root of a perfect square, or `0` for anything else.
- `min_value` returns the smallest value of a sequence.
- `absolute` returns the absolute value.
- `is_number` reports whether a string is made only of digits and minus signs.

### `fractol.textutil`

- ASCII character classes: `is_space`, `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`.
- Case conversion: `to_lower`, `to_upper`.
- Splitting, counting and trimming: `split`, `count_words`, `trim`.
- Searching: `find`, `find_within`.
- Comparing with C-style difference results: `compare`, `compare_prefix`.
- `sort_params` sorts an argument list, leaving the program name first.

## What the package does not do

There is no command to run. The package does not compute the Mandelbrot,
Julia, Newton or sine-Julia sets. It opens no window and handles no keyboard or
mouse input. It provides the colouring and the supporting utilities only.