"""
Anti-clockwise boundary traversal of a binary tree.
"""

from typing import Any

from .base import TreeNode, is_leaf


def boundary_traversal(root: TreeNode | None) -> list[Any]:
    """
    Walk the outer boundary of the tree anti-clockwise.

    Order:
        1. The root
        2. Left boundary top-down: from root.left, follow the left child
           (or the right child when there is no left one), excluding leaves
        3. All leaves left to right
        4. Right boundary bottom-up: from root.right, follow the right child
           (or the left child when there is no right one), excluding leaves

    Boundary walks stop at a leaf, so no value appears twice. A tree of a
    single node yields just the root.

    Args:
        root: Root node, or None for the empty tree

    Returns:
        Values in boundary order

    Example:
        >>> root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5, TreeNode(7))),
        ...                 TreeNode(3, None, TreeNode(6)))
        >>> boundary_traversal(root)
        [1, 2, 4, 7, 6, 3]
    """
    if root is None:
        return []

    result = [root.value]
    result.extend(_left_boundary(root.left))
    result.extend(_leaves(root.left))
    result.extend(_leaves(root.right))
    result.extend(reversed(_right_boundary(root.right)))
    return result


def _left_boundary(node: TreeNode | None) -> list[Any]:
    values = []
    while node is not None and not is_leaf(node):
        values.append(node.value)
        node = node.left if node.left is not None else node.right
    return values


def _right_boundary(node: TreeNode | None) -> list[Any]:
    """Right boundary top-down; the caller reverses it."""
    values = []
    while node is not None and not is_leaf(node):
        values.append(node.value)
        node = node.right if node.right is not None else node.left
    return values


def _leaves(node: TreeNode | None) -> list[Any]:
    """Leaf values left to right, via a pre-order walk on an explicit stack."""
    if node is None:
        return []

    values = []
    stack = [node]
    while stack:
        current = stack.pop()
        if is_leaf(current):
            values.append(current.value)
            continue
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return values
