import pytest

from pushswap.chars import to_upper
from pushswap.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  42 -7   13 ", " ") == ["42", "-7", "13"]


def test_split_only_separators():
    assert split("     ", " ") == []


def test_split_no_separator():
    assert split("12345", " ") == ["12345"]


def test_split_roundtrip_with_single_separators():
    words = ["a", "bb", "ccc"]
    assert split(" ".join(words), " ") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_finds_first():
    s = "banana"
    assert strchr(s, "a") == s.index("a")


def test_strchr_missing():
    assert strchr("banana", "z") is None


def test_strchr_nul_matches_end():
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_finds_last():
    s = "banana"
    index = strrchr(s, "a")
    assert s[index] == "a"
    assert "a" not in s[index + 1:]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == 3
    assert strrchr("abc", "q") is None


def test_strjoin_concatenates():
    joined = strjoin("push", "swap")
    assert joined.startswith("push")
    assert joined.endswith("swap")
    assert len(joined) == len("push") + len("swap")


def test_strlcpy_truncates_and_terminates():
    src = b"hello world"
    buf = bytearray(5)
    assert strlcpy(buf, src, 5) == len(src)
    assert bytes(buf[:4]) == src[:4]
    assert buf[4] == 0


def test_strlcpy_size_zero_leaves_buffer():
    buf = bytearray(b"xyz")
    assert strlcpy(buf, b"abc", 0) == 3
    assert buf == bytearray(b"xyz")


def test_strlcpy_rejects_size_beyond_buffer():
    with pytest.raises(IndexError):
        strlcpy(bytearray(2), b"abc", 3)


def test_strlcat_appends_within_size():
    buf = bytearray(b"ab\0\0\0\0\0\0")
    assert strlcat(buf, b"cd", len(buf)) == 4
    assert bytes(buf[:5]) == b"ab" + b"cd" + b"\0"


def test_strlcat_truncates():
    buf = bytearray(b"ab\0\0")
    result = strlcat(buf, b"cdef", 4)
    assert result == len(b"ab") + len(b"cdef")
    assert bytes(buf[:3]) == b"abc"
    assert buf[3] == 0


def test_strlcat_full_destination():
    buf = bytearray(b"abcd")
    assert strlcat(buf, b"xy", 3) == 3 + 2
    assert buf == bytearray(b"abcd")


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, ch: to_upper(ch) if i % 2 == 0 else ch)
    assert len(result) == 4
    assert result[0] == to_upper("a")
    assert result[1] == "b"


def test_strmapi_identity():
    assert strmapi("stack", lambda i, ch: ch) == "stack"


def test_striteri_in_place():
    chars = list("abc")
    assert striteri(chars, lambda i, ch: to_upper(ch)) is None
    assert "".join(chars) == "abc".upper()


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_limited_prefix():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_sign_and_antisymmetry():
    forward = strncmp("abc", "abd", 3)
    assert forward < 0
    assert strncmp("abd", "abc", 3) == -forward


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strnstr_found_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")


def test_strnstr_match_past_length():
    assert strnstr("Foo Bar Baz", "Bar", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strtrim_both_ends():
    trimmed = strtrim("xyxhelloyx", "xy")
    assert trimmed == "hello"


def test_strtrim_all_removed_and_empty_set():
    assert strtrim("aaaa", "a") == ""
    assert strtrim(" a ", "") == " a "


def test_substr_ranges():
    s = "push_swap"
    assert substr(s, 5, 4) == "swap"
    assert substr(s, 5, 100) == "swap"
    assert substr(s, 100, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)