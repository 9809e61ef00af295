"""A singly linked list of values with a handful of list exercises."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain
from typing import Any, Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list whose plain insert adds at the head."""

    def __init__(self) -> None:
        self.head: Optional[ListNode] = None

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def insert(self, data: Any) -> ListNode:
        """Add a value at the head and return its node."""
        self.head = ListNode(data, self.head)
        return self.head

    def search(self, data: Any) -> Optional[ListNode]:
        """Return the first node holding the value, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    def remove(self, data: Any) -> None:
        """Unlink the first node holding the value; do nothing if absent."""
        previous: Optional[ListNode] = None
        for node in self._nodes():
            if node.data == data:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "List: " + "".join(f"{value} " for value in self)

    def total(self) -> Any:
        """Return the sum of all values, 0 for an empty list."""
        return sum(self)

    def maximum(self) -> Any:
        """Return the largest value, never less than -1 (also the empty result)."""
        return max(chain((-1,), self))

    def reversed_values(self) -> list:
        """Return the values from tail to head."""
        return list(self)[::-1]

    def similar(self, other: "LinkedList") -> bool:
        """Tell whether both lists hold the same values in the same order."""
        return list(self) == list(other)

    def append(self, data: Any) -> ListNode:
        """Add a value at the tail and return its node."""
        node = ListNode(data)
        tail = None
        for tail in self._nodes():
            pass
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def insert_sorted(self, data: Any) -> ListNode:
        """Insert before the first value not smaller than ``data``."""
        previous: Optional[ListNode] = None
        for node in self._nodes():
            if not node.data < data:
                break
            previous = node
        if previous is None:
            return self.insert(data)
        new = ListNode(data, previous.next)
        previous.next = new
        return new