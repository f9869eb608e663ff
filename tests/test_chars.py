import string

import pytest

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ASCII = range(0, 128)


def test_is_alpha_matches_ascii_letters():
    for code in range(-5, 300):
        assert is_alpha(code) == (0 <= code < 128 and chr(code) in string.ascii_letters)


def test_is_digit_matches_ascii_digits():
    for code in range(-5, 300):
        assert is_digit(code) == (0 <= code < 128 and chr(code) in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_matches_printable_range():
    for code in ASCII:
        expected = chr(code) in string.printable and chr(code) not in "\t\n\r\x0b\x0c"
        assert is_print(code) == expected


def test_is_space_matches_whitespace():
    for code in ASCII:
        assert is_space(code) == (chr(code) in string.whitespace)


def test_accepts_characters():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_space("\t") is True
    assert is_print("\n") is False


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion_round_trip():
    for ch in string.ascii_lowercase:
        assert to_upper(ch) == ch.upper()
        assert to_lower(to_upper(ch)) == ch


def test_case_conversion_leaves_others_alone():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(200) == 200