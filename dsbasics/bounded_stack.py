"""A fixed-capacity LIFO stack and a few exercises built on it."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is already full."""


class StackEmptyError(IndexError):
    """Raised when popping from a stack that holds nothing."""


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("stack capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def is_full(self) -> bool:
        """Tell whether no more values fit."""
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._items

    def push(self, data: Any) -> None:
        """Put a value on top."""
        if self.is_full():
            raise StackFullError("full stack")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("empty stack")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "Stack: " + "".join(f"{value} " for value in self)


def _drain(stack: BoundedStack) -> Iterator[Any]:
    while not stack.is_empty():
        yield stack.pop()


def remove_even(stack: BoundedStack) -> None:
    """Drop the even values from ``stack``, keeping the odd ones in order."""
    odd = BoundedStack(stack.capacity)
    for data in _drain(stack):
        if data % 2 != 0:
            odd.push(data)
    for data in _drain(odd):
        stack.push(data)


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repeats.

    Only primes below ``n`` are tried, so ``n`` must be 1 or composite;
    ValueError otherwise.
    """
    if n < 1:
        raise ValueError(f"cannot factor {n}")
    factors = []
    rest = n
    for divisor in range(2, n):
        if rest == 1:
            break
        while rest % divisor == 0:
            rest //= divisor
            factors.append(divisor)
    if rest != 1:
        raise ValueError(f"{n} has no prime factor below itself")
    return factors


def format_factorization(n: int) -> str:
    """Render the factorization as printed: largest factor first, each with ' * '."""
    return f"{n} = " + "".join(f"{factor} * " for factor in reversed(prime_factors(n)))


def play_game(
    stack_a: BoundedStack,
    stack_b: BoundedStack,
    prompt: Callable[[], Any] = input,
    write: Callable[[str], Any] = sys.stdout.write,
) -> str:
    """Play the card game between two stacks and return the winner, "A" or "B".

    Each round both players reveal their top card; the higher card's owner
    hands over as many cards as the difference, while they last. The first
    player to run out of cards wins.
    """
    write(f"{stack_a}\n")
    write(f"{stack_b}\n")
    while not stack_a.is_empty() and not stack_b.is_empty():
        n1, n2 = stack_a.pop(), stack_b.pop()
        write(f"n1: {n1} n2: {n2} ")
        prompt()
        if n1 > n2:
            giver, taker, count = stack_a, stack_b, n1 - n2
        else:
            giver, taker, count = stack_b, stack_a, n2 - n1
        for _ in range(count):
            if giver.is_empty():
                break
            taker.push(giver.pop())
        write(f"{stack_a}\n")
        write(f"{stack_b}\n")
    if stack_a.is_empty():
        write("player A wins")
        return "A"
    write("player B wins")
    return "B"