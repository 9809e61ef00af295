"""Priority queues backed by binary heaps in Python lists."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

from dsbasics.heap import build_max_heap, build_min_heap, max_heapify, min_heapify, parent


class _HeapQueue:
    _before: Callable[[Any, Any], bool]

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.items: list = list(items)

    def __len__(self) -> int:
        return len(self.items)

    def _top(self) -> Any:
        if not self.items:
            raise IndexError("heap underflow")
        return self.items[0]

    def _pop_top(self, heapify: Callable[[list, int], None]) -> Any:
        top = self._top()
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            heapify(self.items, 0)
        return top

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"heap index {index} out of range")

    def _sift_up(self, index: int) -> None:
        items = self.items
        while index > 0 and self._before(items[index], items[parent(index)]):
            up = parent(index)
            items[index], items[up] = items[up], items[index]
            index = up


class MaxPriorityQueue(_HeapQueue):
    """A max-priority queue: the largest key comes out first."""

    _before = staticmethod(operator.gt)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__(items)
        build_max_heap(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def maximum(self) -> Any:
        """Return the largest key without removing it."""
        return self._top()

    def extract(self) -> Any:
        """Remove and return the largest key; IndexError when empty."""
        return self._pop_top(max_heapify)

    def increase_key(self, index: int, key: Any) -> None:
        """Raise the key at ``index``; ValueError if ``key`` is lower."""
        self._check_index(index)
        if key < self.items[index]:
            raise ValueError("new key is lower than actual key")
        self.items[index] = key
        self._sift_up(index)

    def insert(self, key: Any) -> None:
        """Add a key to the queue."""
        self.items.append(key)
        self._sift_up(len(self.items) - 1)


class MinPriorityQueue(_HeapQueue):
    """A min-priority queue: the smallest key comes out first."""

    _before = staticmethod(operator.lt)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__(items)
        build_min_heap(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def minimum(self) -> Any:
        """Return the smallest key without removing it."""
        return self._top()

    def extract(self) -> Any:
        """Remove and return the smallest key; IndexError when empty."""
        return self._pop_top(min_heapify)

    def decrease_key(self, index: int, key: Any) -> None:
        """Lower the key at ``index``; ValueError if ``key`` is higher."""
        self._check_index(index)
        if key > self.items[index]:
            raise ValueError("new key is higher than actual key")
        self.items[index] = key
        self._sift_up(index)

    def insert(self, key: Any) -> None:
        """Add a key to the queue."""
        self.items.append(key)
        self._sift_up(len(self.items) - 1)