"""
Morris in-order traversal.

Visits a binary tree in order using O(1) auxiliary space by temporarily
threading each node's in-order predecessor back to it through the
predecessor's (empty) ``right`` slot. Every thread is removed on the second
visit, so a completed walk leaves the tree exactly as it found it.

If the walk is interrupted (an exception, including KeyboardInterrupt, is
raised mid-walk) the remaining walk is completed without emitting values,
which removes every outstanding thread before the exception propagates.

Not safe for concurrent traversals of the same tree: two walks would see
each other's threads.
"""

import logging
from typing import Any

from .base import TreeNode

logger = logging.getLogger(__name__)


def morris_inorder(root: TreeNode | None) -> list[Any]:
    """
    In-order traversal without a stack or recursion.

    Args:
        root: Root node, or None for the empty tree

    Returns:
        Values in in-order, same as inorder(root)

    Example:
        >>> root = TreeNode(2, TreeNode(1), TreeNode(3))
        >>> morris_inorder(root)
        [1, 2, 3]
        >>> root.left.right is None
        True
    """
    result: list[Any] = []
    current = root

    try:
        while current is not None:
            current = _morris_step(current, result)
    finally:
        if current is not None:
            # Interrupted mid-walk: finish silently to remove all threads
            logger.warning("morris_inorder interrupted, unwinding threads from %r",
                           current.value)
            while current is not None:
                current = _morris_step(current, None)

    return result


def _morris_step(current: TreeNode, result: list[Any] | None) -> TreeNode | None:
    """
    Advance the walk by one move and return the next node.

    Restartable from any node: whatever threads exist, repeating steps from
    ``current`` until None removes all of them.
    """
    if current.left is None:
        if result is not None:
            result.append(current.value)
        return current.right

    predecessor = _find_predecessor(current)

    if predecessor.right is None:
        # First visit: thread predecessor -> current, descend left
        predecessor.right = current
        return current.left

    # Second visit: the left subtree is done, remove the thread
    predecessor.right = None
    if result is not None:
        result.append(current.value)
    return current.right


def _find_predecessor(node: TreeNode) -> TreeNode:
    """Rightmost node of the left subtree, stopping at an existing thread."""
    predecessor = node.left
    while predecessor.right is not None and predecessor.right is not node:
        predecessor = predecessor.right
    return predecessor
