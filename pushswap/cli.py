"""The command that reads a stack from its arguments and runs a fixed sequence."""

from __future__ import annotations

import sys
from typing import Sequence

from .errors import ErrorKind, PushSwapError, error_message
from .operations import PushSwap
from .parsing import parse_args
from .printing import printf, put_str


def _report(kind: ErrorKind) -> None:
    message = error_message(kind)
    if kind is ErrorKind.TOO_FEW_ARGUMENTS:
        message += "\n"
    put_str(message, out=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command on argv (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _report(ErrorKind.TOO_FEW_ARGUMENTS)
        return 0
    try:
        stack_a = parse_args(args)
    except PushSwapError as error:
        _report(error.kind)
        return 0

    game = PushSwap(stack_a, None, sys.stdout)
    game.pa()
    game.pa()
    game.pa()
    game.sa()
    game.pb()
    game.ss()

    printf("\nstack_a:\n")
    for value in game.a:
        printf("%d\n", value)
    printf("\nstack_b:\n")
    for value in game.b:
        printf("%d\n", value)
    return 0


if __name__ == "__main__":
    sys.exit(main())