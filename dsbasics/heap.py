"""Binary heap helpers over Python lists, using 0-based array positions."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, Optional


def parent(i: int) -> int:
    """Return the position of the parent of position ``i``; the root is its own."""
    return (i - 1) // 2 if i > 0 else 0


def left(i: int) -> int:
    """Return the position of the left child of position ``i``."""
    return 2 * i + 1


def right(i: int) -> int:
    """Return the position of the right child of position ``i``."""
    return 2 * i + 2


def _heapify(
    items: list,
    index: int,
    size: Optional[int],
    before: Callable[[Any, Any], bool],
) -> None:
    limit = len(items) if size is None else size
    while True:
        top = index
        for child in (left(index), right(index)):
            if child < limit and before(items[child], items[top]):
                top = child
        if top == index:
            return
        items[top], items[index] = items[index], items[top]
        index = top


def max_heapify(items: list, index: int, size: Optional[int] = None) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a max-heap."""
    _heapify(items, index, size, operator.gt)


def min_heapify(items: list, index: int, size: Optional[int] = None) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a min-heap."""
    _heapify(items, index, size, operator.lt)


def build_max_heap(items: list) -> None:
    """Rearrange ``items`` in place into a max-heap."""
    for index in reversed(range(len(items) // 2)):
        max_heapify(items, index)


def build_min_heap(items: list) -> None:
    """Rearrange ``items`` in place into a min-heap."""
    for index in reversed(range(len(items) // 2)):
        min_heapify(items, index)


def format_array(items: Iterable[Any]) -> str:
    """Render items as the array printout: a label, then each value and a space."""
    return "array: " + "".join(f"{value} " for value in items)