"""A doubly linked list of values, walked from its first to its last node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One link of a DoublyLinkedList."""

    value: Any
    prev: Node | None = None
    next: Node | None = None
    _owner: DoublyLinkedList | None = field(default=None, repr=False, compare=False)


class DoublyLinkedList:
    """A doubly linked list with direct access to both ends.

    ``first`` is the front of the list and ``last`` its back; both are None
    when the list is empty.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.first: Node | None = None
        self.last: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _adopt(self, value: Any) -> Node:
        self._size += 1
        return Node(value, _owner=self)

    def _check_owner(self, node: Node) -> None:
        if node._owner is not self:
            raise ValueError("node does not belong to this list")

    def append(self, value: Any) -> Node:
        """Add value at the back and return its node."""
        node = self._adopt(value)
        if self.last is None:
            self.first = node
        else:
            node.prev = self.last
            self.last.next = node
        self.last = node
        return node

    def appendleft(self, value: Any) -> Node:
        """Add value at the front and return its node."""
        node = self._adopt(value)
        if self.first is None:
            self.last = node
        else:
            node.next = self.first
            self.first.prev = node
        self.first = node
        return node

    def popleft(self) -> Any:
        """Remove the front node and return its value."""
        if self.first is None:
            raise IndexError("pop from an empty list")
        return self.remove(self.first)

    def find(self, value: Any) -> Node | None:
        """Return the first node holding value, or None."""
        node = self.first
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def insert_after(self, node: Node, value: Any) -> Node:
        """Insert value right after node and return the new node."""
        self._check_owner(node)
        new = self._adopt(value)
        new.prev = node
        new.next = node.next
        if node.next is not None:
            node.next.prev = new
        else:
            self.last = new
        node.next = new
        return new

    def remove(self, node: Node) -> Any:
        """Unlink node from the list and return its value."""
        self._check_owner(node)
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.first = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.last = node.prev
        node.prev = node.next = None
        node._owner = None
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        node = self.first
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self.first, self.last = self.last, self.first

    def clear(self) -> None:
        """Remove every node."""
        node = self.first
        while node is not None:
            following = node.next
            node.prev = node.next = None
            node._owner = None
            node = following
        self.first = self.last = None
        self._size = 0

    def _nodes(self) -> Iterator[Node]:
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.last
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"