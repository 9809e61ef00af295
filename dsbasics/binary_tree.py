"""A plain binary tree built node by node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node; children default to empty subtrees."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def height(node: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))