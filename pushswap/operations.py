"""The stack operations of the puzzle, each announcing itself by name."""

from __future__ import annotations

from typing import Any, Iterable, TextIO

from .dll import DoublyLinkedList
from .printing import put_endl


def _as_stack(values: Iterable[Any] | None) -> DoublyLinkedList:
    if isinstance(values, DoublyLinkedList):
        return values
    return DoublyLinkedList(() if values is None else values)


class PushSwap:
    """Two stacks, ``a`` and ``b``, whose first node is the top.

    Every operation that takes effect writes its name and a newline to
    ``out`` (standard output by default). Swaps and pushes that cannot
    happen write nothing; rotations always write their name.
    """

    def __init__(
        self,
        a: Iterable[Any] | None = None,
        b: Iterable[Any] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.a = _as_stack(a)
        self.b = _as_stack(b)
        self.out = out

    def _emit(self, name: str) -> None:
        put_endl(name, out=self.out)

    @staticmethod
    def _swap(stack: DoublyLinkedList) -> bool:
        if len(stack) < 2:
            return False
        top = stack.popleft()
        stack.insert_after(stack.first, top)
        return True

    @staticmethod
    def _push(source: DoublyLinkedList, target: DoublyLinkedList) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: DoublyLinkedList) -> bool:
        if len(stack) < 2:
            return False
        stack.append(stack.popleft())
        return True

    @staticmethod
    def _reverse_rotate(stack: DoublyLinkedList) -> bool:
        if len(stack) < 2:
            return False
        stack.appendleft(stack.remove(stack.last))
        return True

    def sa(self) -> bool:
        """Swap the two top values of a."""
        done = self._swap(self.a)
        if done:
            self._emit("sa")
        return done

    def sb(self) -> bool:
        """Swap the two top values of b."""
        done = self._swap(self.b)
        if done:
            self._emit("sb")
        return done

    def ss(self) -> bool:
        """Swap the tops of both stacks; announced if either changed."""
        done_a = self._swap(self.a)
        done_b = self._swap(self.b)
        done = done_a or done_b
        if done:
            self._emit("ss")
        return done

    def pa(self) -> bool:
        """Move the top of a onto b."""
        done = self._push(self.a, self.b)
        if done:
            self._emit("pa")
        return done

    def pb(self) -> bool:
        """Move the top of b onto a."""
        done = self._push(self.b, self.a)
        if done:
            self._emit("pb")
        return done

    def ra(self) -> bool:
        """Move the top of a to its bottom."""
        done = self._rotate(self.a)
        self._emit("ra")
        return done

    def rb(self) -> bool:
        """Move the top of b to its bottom."""
        done = self._rotate(self.b)
        self._emit("rb")
        return done

    def rr(self) -> bool:
        """Rotate both stacks."""
        done_a = self._rotate(self.a)
        done_b = self._rotate(self.b)
        self._emit("rr")
        return done_a or done_b

    def rra(self) -> bool:
        """Move the bottom of a to its top."""
        done = self._reverse_rotate(self.a)
        self._emit("rra")
        return done

    def rrb(self) -> bool:
        """Move the bottom of b to its top."""
        done = self._reverse_rotate(self.b)
        self._emit("rrb")
        return done

    def rrr(self) -> bool:
        """Reverse-rotate both stacks."""
        done_a = self._reverse_rotate(self.a)
        done_b = self._reverse_rotate(self.b)
        self._emit("rrr")
        return done_a or done_b