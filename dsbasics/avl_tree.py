"""A self-balancing AVL tree of comparable values; duplicates are ignored."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from dsbasics.traversal import in_order, post_order, pre_order


@dataclass
class AvlNode:
    """An AVL node storing the height of its subtree."""

    data: Any
    left: Optional["AvlNode"] = None
    right: Optional["AvlNode"] = None
    height: int = 1


def height(node: Optional[AvlNode]) -> int:
    """Return the stored height of a subtree, 0 when empty."""
    return 0 if node is None else node.height


def balance_factor(node: Optional[AvlNode]) -> int:
    """Return left height minus right height, 0 when empty."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _refresh_height(node: AvlNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_left(node: AvlNode) -> AvlNode:
    """Rotate the subtree left and return its new root."""
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh_height(node)
    _refresh_height(pivot)
    return pivot


def rotate_right(node: AvlNode) -> AvlNode:
    """Rotate the subtree right and return its new root."""
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh_height(node)
    _refresh_height(pivot)
    return pivot


def insert(node: Optional[AvlNode], data: Any) -> AvlNode:
    """Insert a value into the subtree, rebalance, and return its new root."""
    if node is None:
        return AvlNode(data)
    if data < node.data:
        node.left = insert(node.left, data)
    elif data > node.data:
        node.right = insert(node.right, data)
    else:
        return node

    _refresh_height(node)
    balance = balance_factor(node)

    if balance > 1 and data < node.left.data:
        return rotate_right(node)
    if balance < -1 and data > node.right.data:
        return rotate_left(node)
    if balance > 1 and data > node.left.data:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1 and data < node.right.data:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class AvlTree:
    """An AVL tree holding its root; starts empty."""

    def __init__(self) -> None:
        self.root: Optional[AvlNode] = None

    def insert(self, data: Any) -> None:
        """Add a value, keeping the tree balanced."""
        self.root = insert(self.root, data)

    def pre_order(self) -> list:
        """Values in pre-order."""
        return list(pre_order(self.root))

    def in_order(self) -> list:
        """Values in order, which is ascending."""
        return list(in_order(self.root))

    def post_order(self) -> list:
        """Values in post-order."""
        return list(post_order(self.root))