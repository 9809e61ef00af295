import random

import pytest

from dsbasics.heap import parent
from dsbasics.priority_queue import MaxPriorityQueue, MinPriorityQueue


def _valid(items, before):
    return all(not before(items[i], items[parent(i)]) for i in range(1, len(items)))


def _drain(queue):
    return [queue.extract() for _ in range(len(queue))]


def test_min_queue_insert_smaller_key_becomes_minimum():
    queue = MinPriorityQueue([10 - i for i in range(10)])
    assert queue.minimum() == 1
    queue.insert(0)
    assert len(queue) == 11
    assert queue.minimum() == 0
    assert _valid(queue.items, lambda a, b: a < b)


def test_max_queue_extracts_in_descending_order():
    data = [4, 1, 7, 3, 9, 2, 8]
    queue = MaxPriorityQueue(data)
    assert queue.maximum() == 9
    assert _drain(queue) == sorted(data, reverse=True)
    assert len(queue) == 0


def test_min_queue_extracts_in_ascending_order():
    data = [4, 1, 7, 3, 9, 2, 8]
    queue = MinPriorityQueue(data)
    assert _drain(queue) == sorted(data)


@pytest.mark.parametrize("seed", range(4))
def test_random_inserts_keep_order(seed):
    rng = random.Random(seed)
    data = [rng.randint(-100, 100) for _ in range(30)]
    max_queue = MaxPriorityQueue()
    min_queue = MinPriorityQueue()
    for value in data:
        max_queue.insert(value)
        min_queue.insert(value)
    assert _drain(max_queue) == sorted(data, reverse=True)
    assert _drain(min_queue) == sorted(data)


def test_increase_key_moves_up():
    queue = MaxPriorityQueue([5, 4, 3, 2, 1])
    last = len(queue) - 1
    queue.increase_key(last, 50)
    assert queue.maximum() == 50
    assert _valid(queue.items, lambda a, b: a > b)


def test_decrease_key_moves_up():
    queue = MinPriorityQueue([1, 2, 3, 4, 5])
    queue.decrease_key(4, -7)
    assert queue.minimum() == -7
    assert _valid(queue.items, lambda a, b: a < b)


def test_increase_key_rejects_lower_key():
    queue = MaxPriorityQueue([5, 4, 3])
    with pytest.raises(ValueError, match="lower than actual key"):
        queue.increase_key(0, 1)


def test_decrease_key_rejects_higher_key():
    queue = MinPriorityQueue([1, 2, 3])
    with pytest.raises(ValueError, match="higher than actual key"):
        queue.decrease_key(0, 10)


def test_key_change_rejects_bad_index():
    with pytest.raises(IndexError):
        MaxPriorityQueue([1]).increase_key(3, 9)
    with pytest.raises(IndexError):
        MinPriorityQueue([1]).decrease_key(-1, 0)


def test_empty_queues_underflow():
    with pytest.raises(IndexError, match="heap underflow"):
        MaxPriorityQueue().extract()
    with pytest.raises(IndexError, match="heap underflow"):
        MinPriorityQueue().extract()
    with pytest.raises(IndexError, match="heap underflow"):
        MaxPriorityQueue().maximum()
    with pytest.raises(IndexError, match="heap underflow"):
        MinPriorityQueue().minimum()


def test_constructor_copies_input():
    data = [3, 1, 2]
    queue = MaxPriorityQueue(data)
    queue.extract()
    assert data == [3, 1, 2]