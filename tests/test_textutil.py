import string

import pytest

from fractol.textutil import (
    compare,
    compare_prefix,
    count_words,
    find,
    find_within,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    sort_params,
    split,
    to_lower,
    to_upper,
    trim,
)


@pytest.mark.parametrize("c", [" ", "\n", "\t", "\r", "\v", "\f"])
def test_is_space_accepts_whitespace(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", "\0", "_"])
def test_is_space_rejects_others(c):
    assert is_space(c) is False


def test_character_classes_match_ascii_sets():
    for code in range(200):
        c = chr(code)
        assert is_digit(c) == (c in string.digits)
        assert is_alpha(c) == (c in string.ascii_letters)
        assert is_alnum(c) == (c in string.ascii_letters + string.digits)
        assert is_ascii(c) == (code <= 127)
        assert is_print(c) == (32 <= code <= 126)


def test_classes_accept_integer_codes():
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("7")) is False
    assert is_ascii(-1) is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_digit("12")


def test_case_conversion_round_trip():
    for c in string.ascii_uppercase:
        assert to_upper(to_lower(c)) == c
        assert to_lower(c) == c.lower()
    for c in "1!é ":
        assert to_lower(c) == c
        assert to_upper(c) == c


def test_case_conversion_keeps_int_type():
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("q")) == ord("Q")


def test_split_and_count_words():
    text = "  hello  world "
    assert split(text, " ") == ["hello", "world"]
    assert count_words(text, " ") == len(split(text, " "))
    assert split("", "*") == []
    assert count_words("***", "*") == 0


def test_split_words_never_contain_separator():
    words = split("a,,b,c,,,dd,", ",")
    assert all(w and "," not in w for w in words)
    assert "".join(words) == "a,,b,c,,,dd,".replace(",", "")


def test_trim_only_spaces_newlines_tabs():
    assert trim(" \t\nabc def\n ") == "abc def"
    assert trim("\rabc\r") == "\rabc\r"
    assert trim("   ") == ""


def test_find():
    assert find("hello world", "world") == "hello world".index("world")
    assert find("hello", "") == 0
    assert find("hello", "xyz") is None


def test_find_within_limit():
    hay = "abcdef"
    assert find_within(hay, "cd", 4) == hay.index("cd")
    assert find_within(hay, "cd", 3) is None
    assert find_within(hay, "", 0) == 0
    with pytest.raises(ValueError):
        find_within(hay, "a", -1)


def test_compare_values():
    assert compare("abc", "abc") == 0
    assert compare("abc", "abd") == ord("c") - ord("d")
    assert compare("abc", "ab") == ord("c")
    assert compare("ab", "abc") == -ord("c")


def test_compare_sign_matches_ordering():
    words = ["", "a", "ab", "b", "B", "abc", "zz"]
    for a in words:
        for b in words:
            result = compare(a, b)
            assert (result < 0) == (a < b)
            assert (result == 0) == (a == b)


def test_compare_prefix():
    assert compare_prefix("abcx", "abcy", 3) == 0
    assert compare_prefix("abcx", "abcy", 4) == ord("x") - ord("y")
    assert compare_prefix("a", "b", 0) == 0
    with pytest.raises(ValueError):
        compare_prefix("a", "b", -2)


def test_sort_params_keeps_program_name():
    argv = ["prog", "zeta", "alpha", "Mid", "alpha"]
    result = sort_params(argv)
    assert result[0] == "prog"
    assert sorted(result[1:]) == result[1:]
    assert sorted(result) == sorted(argv)
    assert argv == ["prog", "zeta", "alpha", "Mid", "alpha"]
    assert sort_params([]) == []