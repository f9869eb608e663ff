"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

from .chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    Parsing stops at the first non-digit; text with no digits yields 0.
    Values outside the 32-bit range wrap around.
    """
    rest = text.lstrip("".join(chr(c) for c in (32, 9, 10, 11, 12, 13)))
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _to_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


__all__ = ["atoi", "itoa", "INT_MIN", "INT_MAX", "is_space"]