"""String helpers: splitting, searching, trimming and bounded copies."""

from __future__ import annotations

from itertools import chain
from typing import Callable, MutableSequence


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _until_nul(data: bytes | bytearray) -> bytes:
    return bytes(data).split(b"\0", 1)[0]


def split(s: str, c: str) -> list[str]:
    """Split s on the separator c, dropping empty pieces."""
    return [word for word in s.split(_char(c)) if word]


def strchr(s: str, c: str) -> int | None:
    """Index of the first c in s; the NUL character matches the end of s."""
    if _char(c) == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last c in s; the NUL character matches the end of s."""
    if _char(c) == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result >= size means truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise IndexError(f"size {size} exceeds buffer of {len(dst)} bytes")
    text = _until_nul(src)
    if size > 0:
        piece = text[:size - 1]
        dst[:len(piece)] = piece
        dst[len(piece)] = 0
    return len(text)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append src to the NUL-terminated string in dst within size bytes.

    Returns the length of the string it tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise IndexError(f"size {size} exceeds buffer of {len(dst)} bytes")
    text = _until_nul(src)
    terminator = bytes(dst[:size]).find(b"\0")
    dstlen = size if terminator < 0 else terminator
    if dstlen == size:
        return size + len(text)
    piece = text[:size - dstlen - 1]
    end = dstlen + len(piece)
    dst[dstlen:end] = piece
    dst[end] = 0
    return dstlen + len(text)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for each char of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each item of s in place with f(index, item)."""
    for index, ch in enumerate(s):
        s[index] = f(index, ch)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    codes1 = chain(map(ord, s1), [0])
    codes2 = chain(map(ord, s2), [0])
    for a, b in zip(codes1, codes2):
        if n == 0:
            break
        if a != b or a == 0:
            return a - b
        n -= 1
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little within the first length characters of big, or None."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters in charset from both ends of s."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]