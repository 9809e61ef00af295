"""Classic data structures: binary and AVL trees, linked lists, heaps, priority queues, a matrix graph, bounded queues and stacks."""

__version__ = "0.1.0"