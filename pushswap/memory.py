"""Byte-buffer helpers working on bytearrays in place."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check(buf: bytes | bytearray, n: int, start: int = 0) -> None:
    if n < 0 or start < 0:
        raise ValueError("sizes and offsets must not be negative")
    if start + n > len(buf):
        raise IndexError(f"range {start}..{start + n} exceeds buffer of {len(buf)} bytes")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c."""
    _check(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("sizes must not be negative")
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError("requested size overflows")
    return bytearray(total)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c within n bytes, or None."""
    _check(buf, n)
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, else 0."""
    _check(a, n)
    _check(b, n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest."""
    _check(dest, n)
    _check(src, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest; overlap is safe."""
    _check(buf, n, dest)
    _check(buf, n, src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf