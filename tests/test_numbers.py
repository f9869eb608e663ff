import pytest

from pushswap.numbers import INT_MAX, INT_MIN, atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 123456, INT_MAX, INT_MIN])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_no_digits_gives_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == INT_MIN
    assert atoi("-2147483648") == INT_MIN


def test_atoi_matches_int_in_range():
    for text in ["0", "7", "-99", "2147483647", "  300"]:
        assert atoi(text) == int(text)