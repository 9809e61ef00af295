"""A doubly linked list with head and tail insertion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class DNode:
    """A node of a doubly linked list."""

    data: Any
    next: Optional["DNode"] = None
    prev: Optional["DNode"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list keeping both its head and its tail."""

    def __init__(self) -> None:
        self.head: Optional[DNode] = None
        self.tail: Optional[DNode] = None

    def _nodes(self) -> Iterator[DNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def prepend(self, data: Any) -> DNode:
        """Add a value at the head and return its node."""
        node = DNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        return node

    def append(self, data: Any) -> DNode:
        """Add a value at the tail and return its node."""
        node = DNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def search(self, data: Any) -> Optional[DNode]:
        """Return the first node holding the value, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    def remove(self, data: Any) -> None:
        """Unlink the first node holding the value; do nothing if absent."""
        node = self.search(data)
        if node is None:
            return
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "DLList: " + "".join(f"{value} " for value in self)

    def split(self, x: Any, y: Any) -> "DoublyLinkedList":
        """Copy the run from the first ``x`` to the next ``y`` into a new list.

        Each value is added at the head of the new list, so the run comes
        out reversed. Raises ValueError if either end is missing.
        """
        node = self.search(x)
        if node is None:
            raise ValueError(f"{x!r} not in list")
        result = DoublyLinkedList()
        while node is not None:
            result.prepend(node.data)
            if node.data == y:
                return result
            node = node.next
        raise ValueError(f"{y!r} not found after {x!r}")