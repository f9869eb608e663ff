"""A singly linked list with helpers to grow, walk, map and clear it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator


@dataclass(eq=False)
class ListNode:
    """One link of a LinkedList."""

    value: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list; ``head`` is its first node, or None when empty."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for value in values:
            self.add_back(value)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, value: Any) -> ListNode:
        """Put value at the front and return its node."""
        node = ListNode(value, self.head)
        self.head = node
        return node

    def add_back(self, value: Any) -> ListNode:
        """Put value at the back and return its node."""
        node = ListNode(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> ListNode | None:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, handing each value to delete, last node first."""
        nodes = list(self._nodes())
        for node in reversed(nodes):
            if delete is not None:
                delete(node.value)
            node.next = None
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every value from front to back."""
        for value in self:
            f(value)

    def map(self, f: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding f(value) for every value, in order."""
        return LinkedList(f(value) for value in self)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"