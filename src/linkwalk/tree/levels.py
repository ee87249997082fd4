"""
Breadth-first binary tree traversals.

All strategies walk the tree with a FIFO frontier, left child enqueued
before right. Grouped forms delimit levels by snapshotting the frontier
size at the start of each level.
"""

import logging
from collections import deque
from collections.abc import Iterator
from typing import Any

from .base import TreeNode

logger = logging.getLogger(__name__)


def level_order(root: TreeNode | None) -> list[Any]:
    """
    Flat level-order traversal.

    Example:
        >>> root = TreeNode(1, TreeNode(2), TreeNode(3, TreeNode(4)))
        >>> level_order(root)
        [1, 2, 3, 4]
    """
    result: list[Any] = []
    if root is None:
        return result

    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)

        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)

    return result


def level_order_by_level(root: TreeNode | None) -> list[list[Any]]:
    """
    Level-order traversal grouped by depth.

    Returns:
        One list per level, top to bottom; each list left to right
    """
    return list(iter_levels(root))


def iter_levels(root: TreeNode | None) -> Iterator[list[Any]]:
    """
    Lazily yield one list of values per level.

    Same order as level_order_by_level(). Only the current frontier is held
    in memory, which makes this the cheaper choice for very wide trees when
    the caller consumes levels one at a time.
    """
    if root is None:
        return

    queue: deque[TreeNode] = deque([root])
    while queue:
        level_size = len(queue)
        current_level = []

        for _ in range(level_size):
            node = queue.popleft()
            current_level.append(node.value)

            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

        yield current_level


def zigzag_level_order(root: TreeNode | None) -> list[list[Any]]:
    """
    Level-order traversal alternating direction per level.

    The root level is left to right, the next right to left, and so on.

    Example:
        >>> root = TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3, None, TreeNode(5)))
        >>> zigzag_level_order(root)
        [[1], [3, 2], [4, 5]]
    """
    result = []
    for depth, level in enumerate(iter_levels(root)):
        if depth % 2 == 1:
            level.reverse()
        result.append(level)
    return result


def vertical_order(root: TreeNode | None) -> list[list[Any]]:
    """
    Group values by vertical column.

    The root sits in column 0; a left child is one column left of its parent
    and a right child one column right. Columns are assigned during a
    breadth-first walk, so within a column values appear top to bottom, and
    left to right within the same level.

    Returns:
        One list per occupied column, leftmost column first

    Example:
        >>> root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
        >>> vertical_order(root)
        [[4], [2], [1, 5], [3]]
    """
    if root is None:
        return []

    columns: dict[int, list[Any]] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])

    while queue:
        node, column = queue.popleft()
        columns.setdefault(column, []).append(node.value)

        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("vertical_order: %d columns, from %d to %d",
                     len(columns), min(columns), max(columns))
    return [columns[column] for column in sorted(columns)]
