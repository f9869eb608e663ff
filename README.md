# pushswap

This package models the push/swap puzzle. The puzzle has two stacks, `a` and
`b`, and a fixed set of operations on them. You give it a list of distinct
integers, and they go onto stack `a`. The operations move values between the
stacks and within each stack, and each operation prints its name as it runs.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pushswap 3 2 1
pushswap "5 -4 12" 7
```

An argument may hold several numbers separated by spaces. Each number is read
in order, and the first number read ends up on top of stack `a`.

Every number must pass three checks:

- It is an optional `+` or `-` followed by decimal digits.
- It fits in a signed 32-bit integer.
- It does not repeat an earlier number.

The command prints a message on standard error and stops if any of these
checks fails. The messages are:

- `Error: non integer input detected`
- `Error: int overflow`
- `Error: duplicate detected`

Two other cases stop the command:

- An argument that holds no numbers at all gives `Error`.
- Running the command with no arguments gives `Error: to few arguments`.

The exit status is 0 in every case.

When the input is valid, the command runs this fixed sequence:

```
pa pa pa sa pb ss
```

It prints the name of each operation that took effect. It then prints
`stack_a:` and `stack_b:`, each on its own line after a blank line and
followed by that stack's values, one per line, from top to bottom.

## Library

```python
from pushswap.parsing import parse_args
from pushswap.operations import PushSwap

a = parse_args(["3 2 1"])   # a DoublyLinkedList: 3 on top
game = PushSwap(a)
game.sa()    # prints "sa"; a is now 2 3 1
game.pa()    # prints "pa"; moves the top of a onto b
game.rra()   # prints "rra"; moves the bottom of a to its top
print(list(game.a), list(game.b))
```

### `PushSwap(a=None, b=None, out=None)`

`PushSwap` holds the two stacks as `DoublyLinkedList`s. The first node of each
list is the top of that stack. You can pass the stacks as lists or as any
other iterable.

Each operation writes its name and a newline to `out`, which is standard
output by default. It returns whether it changed anything.

| Operation | Effect | When its name is written |
| --- | --- | --- |
| `sa`, `sb` | Swap the two top values of `a` or of `b`. | Only if the stack had at least two values. |
| `ss` | Does both swaps. | If either swap took effect. |
| `pa` | Moves the top of `a` onto `b`. | Only if the source stack was not empty. |
| `pb` | Moves the top of `b` onto `a`. | Only if the source stack was not empty. |
| `ra`, `rb`, `rr` | Move the top value to the bottom (of `a`, `b`, or both). | Always, even if nothing moved. |
| `rra`, `rrb`, `rrr` | Move the bottom value to the top (of `a`, `b`, or both). | Always, even if nothing moved. |

### Parsing and errors

- `pushswap.parsing.parse_number(token)` parses one token.
- `pushswap.parsing.parse_args(args)` builds the stack from a sequence of
  arguments.

Both raise `pushswap.errors.PushSwapError` on bad input. The error's `kind` is
an `ErrorKind`, one of these:

- `GENERIC`
- `TOO_FEW_ARGUMENTS`
- `NOT_INTEGER`
- `OVERFLOW`
- `DUPLICATE`

`error_message(kind)` returns the text for each kind.

### Helper modules

- `pushswap.dll`: `DoublyLinkedList` and `Node`. The list supports:
  - adding: `append`, `appendleft`, `insert_after`
  - removing: `popleft`, `remove`, `clear`
  - searching: `find`
  - reordering: `reverse`
  - iteration both ways, `len` and `in`
- `pushswap.linked_list`: a singly linked `LinkedList` of `ListNode`s, with
  `add_front`, `add_back`, `last`, `clear`, `for_each` and `map`.
- `pushswap.strings`: C-style string helpers:
  - `split`, `substr`, `strjoin`, `strtrim`
  - `strchr`, `strrchr`, `strnstr`, `strncmp`
  - `strmapi`, `striteri`
  - `strlcpy` and `strlcat`, which work on `bytearray`s
- `pushswap.chars`: ASCII tests (`is_alpha`, `is_digit`, `is_space` and
  others) and the case conversions `to_lower` and `to_upper`.
- `pushswap.numbers`: `atoi` (32-bit, wraps around) and `itoa`.
- `pushswap.memory`: in-place `bytearray` helpers:
  - `memset`, `bzero`, `calloc`
  - `memchr`, `memcmp`
  - `memcpy`, `memmove`
- `pushswap.printing`: a small `printf` and `format_string` supporting
  `%c %s %p %d %i %u %x %X %%`. It also has `format_hex`, `format_pointer`,
  `put_char`, `put_str`, `put_endl` and `put_nbr`.
- `pushswap.lines`: `LineReader`, which reads a text or binary stream line by
  line in chunks of `buffer_size` (42 by default).

## What it does not do

The package does not solve the puzzle. It has no sorting algorithm and never
works out a sequence of operations that sorts stack `a`. The `pushswap`
command only runs the fixed sequence shown above and prints the two stacks.