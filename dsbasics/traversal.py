"""Depth-first traversals over binary tree nodes.

Any node with ``data``, ``left`` and ``right`` attributes works; ``None``
stands for an empty subtree.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


def pre_order(node: Optional[Any]) -> Iterator[Any]:
    """Yield node values root first, then the left and right subtrees."""
    if node is None:
        return
    yield node.data
    yield from pre_order(node.left)
    yield from pre_order(node.right)


def in_order(node: Optional[Any]) -> Iterator[Any]:
    """Yield node values left subtree first, then the root, then the right."""
    if node is None:
        return
    yield from in_order(node.left)
    yield node.data
    yield from in_order(node.right)


def post_order(node: Optional[Any]) -> Iterator[Any]:
    """Yield node values of both subtrees before the root."""
    if node is None:
        return
    yield from post_order(node.left)
    yield from post_order(node.right)
    yield node.data


def format_values(values: Iterable[Any]) -> str:
    """Render values as the traversal printout: each followed by a space."""
    return "".join(f"{value} " for value in values)