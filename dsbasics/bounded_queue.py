"""A fixed-capacity FIFO queue and a few exercises built on it."""

from __future__ import annotations

import random
import sys
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any, Optional

_REEL_CAPACITY = 10
_REEL_VALUES = range(1, 10)


class QueueFullError(OverflowError):
    """Raised when adding to a queue that is already full."""


class QueueEmptyError(IndexError):
    """Raised when reading from a queue that holds nothing."""


class BoundedQueue:
    """A first-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("queue capacity must not be negative")
        self.capacity = capacity
        self._items: deque = deque()

    def is_full(self) -> bool:
        """Tell whether no more values fit."""
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._items

    def front(self) -> Any:
        """Return the oldest value without removing it."""
        if not self._items:
            raise QueueEmptyError("empty queue")
        return self._items[0]

    def enqueue(self, data: Any) -> None:
        """Add a value at the back."""
        if self.is_full():
            raise QueueFullError("full queue")
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the oldest value."""
        if not self._items:
            raise QueueEmptyError("empty queue")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "Queue: " + "".join(f"{value} " for value in self)


def _drain(queue: BoundedQueue) -> Iterator[Any]:
    while not queue.is_empty():
        yield queue.dequeue()


def split_odd_even(queue: BoundedQueue) -> tuple[BoundedQueue, BoundedQueue]:
    """Empty ``queue`` into an odd-values queue and an even-values queue."""
    odd = BoundedQueue(queue.capacity)
    even = BoundedQueue(queue.capacity)
    for data in _drain(queue):
        (even if data % 2 == 0 else odd).enqueue(data)
    return odd, even


def merge(a: BoundedQueue, b: BoundedQueue) -> BoundedQueue:
    """Empty two ordered queues into one ordered queue; ties take from ``b``."""
    result = BoundedQueue(a.capacity + b.capacity)
    while not a.is_empty() and not b.is_empty():
        source = a if a.front() < b.front() else b
        result.enqueue(source.dequeue())
    for rest in (a, b):
        for data in _drain(rest):
            result.enqueue(data)
    return result


def josephus(size: int, death: int) -> list[int]:
    """Return the order in which people 1..size fall, every ``death``-th counted."""
    circle = BoundedQueue(max(size, 0))
    for person in range(1, size + 1):
        circle.enqueue(person)
    fallen = []
    while not circle.is_empty():
        for _ in range(death - 1):
            circle.enqueue(circle.dequeue())
        fallen.append(circle.dequeue())
    return fallen


def reverse(queue: BoundedQueue) -> BoundedQueue:
    """Empty ``queue`` into a new queue holding its values in reverse order."""
    values = list(_drain(queue))
    result = BoundedQueue(queue.capacity)
    for data in reversed(values):
        result.enqueue(data)
    return result


def _spin_reel(rng: Any) -> int:
    reel = BoundedQueue(_REEL_CAPACITY)
    for value in _REEL_VALUES:
        reel.enqueue(value)
    for _ in range(rng.randrange(len(_REEL_VALUES))):
        reel.dequeue()
    return reel.dequeue()


def casino_round(rng: Any) -> tuple[int, int, int]:
    """Spin three reels of the values 1..9 and return what each shows."""
    return _spin_reel(rng), _spin_reel(rng), _spin_reel(rng)


def play_casino(
    rng: Optional[Any] = None,
    prompt: Callable[[], Any] = input,
    write: Callable[[str], Any] = sys.stdout.write,
) -> tuple[int, int, int]:
    """Spin rounds until all three reels match, waiting on ``prompt`` between them."""
    rng = random.Random() if rng is None else rng
    while True:
        result = casino_round(rng)
        write("".join(f"{value} " for value in result))
        if len(set(result)) == 1:
            write("--> you won!")
            return result
        write("--> try again\n")
        prompt()