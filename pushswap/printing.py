"""A small printf and helpers that write text to a stream."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from .numbers import itoa

_ULONG_MAX = 2**64 - 1
_HEX_SPECS = {"x": "x", "X": "X", "u": "d"}


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def format_hex(n: int, spec: str) -> str:
    """Format an unsigned number as hex ('x', 'X') or decimal ('u')."""
    if spec not in _HEX_SPECS:
        raise ValueError(f"unknown number format {spec!r}")
    if n < 0:
        raise ValueError("number must not be negative")
    if n > _ULONG_MAX:
        raise OverflowError(f"{n} does not fit in an unsigned long")
    return format(n, _HEX_SPECS[spec])


def format_pointer(address: int | None) -> str:
    """Format an address as 0x-prefixed hex; a null address gives "(nil)"."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address, "x")


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"expected a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        return _char(_next_arg(args))
    if spec == "s":
        text = _next_arg(args)
        return "(null)" if text is None else text
    if spec == "p":
        return format_pointer(_next_arg(args))
    if spec in ("d", "i"):
        return itoa(_int32(_next_arg(args)))
    if spec in _HEX_SPECS:
        return format_hex(_next_arg(args) & 0xFFFFFFFF, spec)
    if spec == "%":
        return "%"
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in fmt.

    Unknown conversions produce nothing; a lone '%' at the end is kept.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    remaining = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        else:
            pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write the expanded fmt to out (stdout by default); return its length."""
    text = format_string(fmt, *args)
    _stream(out).write(text)
    return len(text)


def put_char(c: str | int, out: TextIO | None = None) -> None:
    """Write one character."""
    _stream(out).write(_char(c))


def put_str(s: str | None, out: TextIO | None = None) -> None:
    """Write s; None writes nothing."""
    if s is None:
        return
    _stream(out).write(s)


def put_endl(s: str | None, out: TextIO | None = None) -> None:
    """Write s followed by a newline; None writes nothing."""
    if s is None:
        return
    _stream(out).write(s + "\n")


def put_nbr(n: int, out: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit integer."""
    _stream(out).write(itoa(n))