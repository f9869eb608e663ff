"""Error kinds reported while reading the stack from the command line."""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """The reasons the program stops with an error."""

    GENERIC = 0
    TOO_FEW_ARGUMENTS = 1
    NOT_INTEGER = 2
    OVERFLOW = 3
    DUPLICATE = 4


_MESSAGES = {
    ErrorKind.TOO_FEW_ARGUMENTS: "Error: to few arguments",
    ErrorKind.NOT_INTEGER: "Error: non integer input detected",
    ErrorKind.OVERFLOW: "Error: int overflow",
    ErrorKind.DUPLICATE: "Error: duplicate detected",
}


def error_message(kind: ErrorKind | int) -> str:
    """Return the message for kind; unknown kinds give the plain "Error"."""
    try:
        kind = ErrorKind(kind)
    except ValueError:
        return "Error"
    return _MESSAGES.get(kind, "Error")


class PushSwapError(Exception):
    """Raised when the input cannot be turned into a stack."""

    def __init__(self, kind: ErrorKind | int = ErrorKind.GENERIC) -> None:
        try:
            kind = ErrorKind(kind)
        except ValueError:
            kind = ErrorKind.GENERIC
        self.kind = kind
        super().__init__(error_message(kind))