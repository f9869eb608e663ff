"""Turning command-line arguments into the initial stack of integers."""

from __future__ import annotations

from typing import Iterable

from .chars import is_digit
from .dll import DoublyLinkedList
from .errors import ErrorKind, PushSwapError
from .numbers import INT_MAX, INT_MIN
from .strings import split


def parse_number(token: str) -> int:
    """Parse one token of an optional sign followed by decimal digits.

    Raises PushSwapError for anything that is not an integer or does not
    fit in 32 bits.
    """
    negative = token.startswith("-")
    digits = token[1:] if token[:1] in ("+", "-") else token
    if not digits or not all(is_digit(ch) for ch in digits):
        raise PushSwapError(ErrorKind.NOT_INTEGER)
    value = int(digits)
    if negative:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise PushSwapError(ErrorKind.OVERFLOW)
    return value


def parse_args(args: Iterable[str]) -> DoublyLinkedList:
    """Build a stack from arguments, each holding space-separated integers.

    The first number read ends up on top. An argument with no numbers,
    an invalid number or a repeated value raises PushSwapError.
    """
    stack = DoublyLinkedList()
    for arg in args:
        tokens = split(arg, " ")
        if not tokens:
            raise PushSwapError(ErrorKind.GENERIC)
        for token in tokens:
            value = parse_number(token)
            if value in stack:
                raise PushSwapError(ErrorKind.DUPLICATE)
            stack.append(value)
    return stack