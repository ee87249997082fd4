"""
Binary tree node and structural helpers.

Nodes compare by identity: two distinct nodes holding equal values are
different nodes. The engine borrows nodes for the duration of a call and
never keeps references afterwards.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node with an opaque value and optional children."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def is_leaf(node: TreeNode) -> bool:
    """True if the node has no children."""
    return node.left is None and node.right is None


def count_nodes(root: TreeNode | None) -> int:
    """
    Count nodes reachable from ``root``.

    Args:
        root: Root node, or None for the empty tree

    Returns:
        Number of nodes (0 for the empty tree)
    """
    if root is None:
        return 0

    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        count += 1
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return count


def tree_height(root: TreeNode | None) -> int:
    """
    Number of levels in the tree.

    Counted level by level, so the result is not bounded by the interpreter
    recursion limit. Use it to decide whether the recursive traversals are
    safe for a given tree.

    Args:
        root: Root node, or None for the empty tree

    Returns:
        Height in levels: 0 for the empty tree, 1 for a lone root
    """
    if root is None:
        return 0

    height = 0
    queue: deque[TreeNode] = deque([root])
    while queue:
        height += 1
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return height
