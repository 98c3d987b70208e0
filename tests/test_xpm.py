import pytest

from fractol.colornames import lookup
from fractol.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    find_substring,
    find_unquoted,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

CHECKER = ["2 2 2 1", ". c #000000", "# c #FFFFFF", ".#", "#."]

XPM_FILE = """/* XPM */
static char *img[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1",
"a c #123456",
"b c None",
// the pixels
"ab"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_find_substring():
    assert find_substring("hello", "ll", 5) == 2
    assert find_substring("hello", "xy", 5) is None
    assert find_substring("hello", "hello", 3) is None


def test_find_unquoted_skips_quoted_text():
    text = '"/*" /*'
    assert find_unquoted(text, "/*", len(text)) == 5
    assert find_substring(text, "/*", len(text)) == 1


def test_strip_comments_keeps_length_and_quotes():
    text = '/* x */"a" "/* kept */" // gone\n"b"'
    cleaned = strip_comments(text)
    assert len(cleaned) == len(text)
    assert '"/* kept */"' in cleaned
    assert "x" not in cleaned and "gone" not in cleaned
    assert cleaned.endswith('"b"')


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("ghost", "white") == lookup("ghost white")
    assert text_to_rgb("None") == -1
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_checkerboard():
    image = parse_xpm_lines(CHECKER)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0x000000
    assert image.pixel(1, 0) == 0xFFFFFF
    assert image.pixel(0, 1) == image.pixel(1, 0)
    assert len(image.pixels) == 4


def test_transparent_pixel():
    image = parse_xpm_lines(["1 1 1 1", "x c none", "x"])
    assert image.pixel(0, 0) == TRANSPARENT


def test_duplicate_keys_depend_on_chars_per_pixel():
    short = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert short.pixel(0, 0) == 0x000002
    wide = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert wide.pixel(0, 0) == 0x000001


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 2 1", ". c #000000"],
        ["2 2"],
        CHECKER[:3],
        ["1 1 1 1", "x #000000", "x"],
        ["1 1 1 1", "x c", "x"],
        ["2 1 1 1", "x c #000000", "x"],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_parse_text_with_comments():
    image = parse_xpm_text(XPM_FILE)
    assert image == XpmImage(2, 1, (0x123456, TRANSPARENT))


def test_load_xpm_file(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text(XPM_FILE)
    assert load_xpm(path) == parse_xpm_text(XPM_FILE)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "missing.xpm")


def test_pixel_out_of_range():
    image = parse_xpm_lines(CHECKER)
    with pytest.raises(IndexError):
        image.pixel(2, 0)