# dsbasics

Small, readable implementations of classic data structures and a few
exercises built on them. Pure Python, no dependencies.

## Contents

| Module | What it offers |
| --- | --- |
| `dsbasics.traversal` | `pre_order`, `in_order`, `post_order` generators over any node with `data`, `left` and `right`; `format_values` renders values each followed by a space |
| `dsbasics.binary_tree` | `TreeNode` (a dataclass with `data`, `left`, `right`) and `height` |
| `dsbasics.avl_tree` | `AvlNode`, `AvlTree`, `insert`, `rotate_left`, `rotate_right`, `height`, `balance_factor` |
| `dsbasics.linked_list` | `ListNode`, `LinkedList` |
| `dsbasics.dllist` | `DNode`, `DoublyLinkedList` |
| `dsbasics.heap` | `parent`, `left`, `right`, `max_heapify`, `min_heapify`, `build_max_heap`, `build_min_heap`, `format_array` |
| `dsbasics.priority_queue` | `MaxPriorityQueue`, `MinPriorityQueue` |
| `dsbasics.graph` | `MatrixGraph`, an undirected weighted adjacency matrix |
| `dsbasics.bounded_queue` | `BoundedQueue`, `QueueFullError`, `QueueEmptyError`, `split_odd_even`, `merge`, `reverse`, `josephus`, `casino_round`, `play_casino` |
| `dsbasics.bounded_stack` | `BoundedStack`, `StackFullError`, `StackEmptyError`, `remove_even`, `prime_factors`, `format_factorization`, `play_game` |

## Install

```
pip install .
```

## Examples

### Trees

```python
from dsbasics.avl_tree import AvlTree
from dsbasics.binary_tree import TreeNode, height
from dsbasics.traversal import format_values, in_order

tree = AvlTree()
for value in (10, 20, 30, 40, 50, 25):
    tree.insert(value)          # duplicates are ignored
tree.in_order()                 # [10, 20, 25, 30, 40, 50]
tree.pre_order()                # [30, 20, 10, 25, 40, 50]
tree.post_order()               # [10, 25, 20, 50, 40, 30]

root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
format_values(in_order(root))   # "4 2 5 1 3 "
height(root)                    # 3
```

### Linked lists

`LinkedList.insert` adds at the head; `append` adds at the tail;
`insert_sorted` inserts before the first value not smaller than the new one.
`search` returns the node or `None`; `remove` does nothing if the value is
absent. There are also `total`, `maximum` (never below -1, which is also the
result for an empty list), `reversed_values` and `similar`.

```python
from dsbasics.linked_list import LinkedList

items = LinkedList()
for value in (10, 20, 30):
    items.insert(value)
str(items)                      # "List: 30 20 10 "
items.remove(20)
list(items), len(items)         # ([30, 10], 2)
```

`DoublyLinkedList` has `prepend`, `append`, `search`, `remove` and
`split(x, y)`, which copies the run from the first `x` to the next `y` into a
new list in reverse order and raises `ValueError` if either end is missing.

### Heaps and priority queues

```python
from dsbasics.heap import build_min_heap, format_array
from dsbasics.priority_queue import MaxPriorityQueue

values = list(range(1, 11))
build_min_heap(values)          # in place
format_array(values)            # "array: 1 2 3 ... "

queue = MaxPriorityQueue([3, 9, 4])
queue.insert(7)
queue.extract()                 # 9
queue.maximum()                 # 7
```

`extract`, `maximum` and `minimum` raise `IndexError` on an empty queue.
`increase_key` raises `ValueError` if the new key is lower,
`decrease_key` if it is higher, and both raise `IndexError` for a position
outside the heap.

### Graph

```python
from dsbasics.graph import MatrixGraph

graph = MatrixGraph(3)
graph.add_edge(0, 1, 2)
graph.add_edge(0, 2, 9)
graph.add_edge(2, 1, 10)
print(graph)
```

prints

```
Graph: 
     0 1 2 
     | | | 
0--  0 2 9 
1--  2 0 10 
2--  9 10 0 
```

`add_edge` defaults to weight 1, counts edges in `graph.edges`, and raises
`IndexError` for a vertex outside `0..size-1`.

### Bounded queues and stacks

```python
from dsbasics.bounded_queue import BoundedQueue, QueueFullError, josephus
from dsbasics.bounded_stack import format_factorization, prime_factors

queue = BoundedQueue(2)
queue.enqueue(1)
queue.enqueue(3)
queue.is_full()                 # True
try:
    queue.enqueue(5)
except QueueFullError:
    pass
queue.dequeue()                 # 1

josephus(5, 2)                  # [2, 4, 1, 5, 3]
prime_factors(12)               # [2, 2, 3]
format_factorization(12)        # "12 = 3 * 2 * 2 * "
```

`prime_factors` only tries primes below `n`, so it raises `ValueError` for a
prime or for `n < 1`. `merge` empties two ordered queues into one, `reverse`
empties a queue into a reversed copy, `split_odd_even` empties a queue into
an odd and an even queue, and `remove_even` drops the even values from a
stack. Full and empty containers raise `QueueFullError`, `QueueEmptyError`,
`StackFullError` or `StackEmptyError`.

### Games

`play_casino(rng, prompt, write)` spins three reels of 1..9 until all match,
calling `prompt()` between rounds and returning the winning triple;
`casino_round(rng)` spins once. `play_game(stack_a, stack_b, prompt, write)`
plays a card-pile game between two stacks and returns `"A"` or `"B"`. Both
default to `input` and `sys.stdout.write`; pass your own callables to drive
them without a terminal.

## What it does not do

This is a library only: it installs no command-line program. The graph is
available only as an adjacency matrix; there is no adjacency-list graph.

## Running the tests

```
pip install .[test]
pytest
```