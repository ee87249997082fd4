"""
Depth-first binary tree traversals.

Each order comes in two forms with identical output:
- preorder / inorder / postorder: recursive reference implementations,
  recursion depth equals the tree height
- *_iterative: explicit-stack versions, safe for arbitrarily deep trees

An absent root yields an empty list.
"""

import logging
from collections import deque
from collections.abc import Callable
from typing import Any

from ..errors import RecursionDepthExceeded
from .base import TreeNode

logger = logging.getLogger(__name__)


# === RECURSIVE ===


def preorder(root: TreeNode | None) -> list[Any]:
    """
    Pre-order traversal: root, left subtree, right subtree.

    Raises:
        RecursionDepthExceeded: If the tree is too deep for the interpreter
            stack; use preorder_iterative() instead
    """
    result: list[Any] = []

    def _visit(node: TreeNode | None) -> None:
        if node is None:
            return
        result.append(node.value)
        _visit(node.left)
        _visit(node.right)

    _run_recursive(_visit, root, "preorder")
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """
    In-order traversal: left subtree, root, right subtree.

    For a binary search tree this yields values in sorted order.

    Raises:
        RecursionDepthExceeded: If the tree is too deep for the interpreter
            stack; use inorder_iterative() or morris_inorder() instead
    """
    result: list[Any] = []

    def _visit(node: TreeNode | None) -> None:
        if node is None:
            return
        _visit(node.left)
        result.append(node.value)
        _visit(node.right)

    _run_recursive(_visit, root, "inorder")
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """
    Post-order traversal: left subtree, right subtree, root.

    Raises:
        RecursionDepthExceeded: If the tree is too deep for the interpreter
            stack; use postorder_iterative() instead
    """
    result: list[Any] = []

    def _visit(node: TreeNode | None) -> None:
        if node is None:
            return
        _visit(node.left)
        _visit(node.right)
        result.append(node.value)

    _run_recursive(_visit, root, "postorder")
    return result


def _run_recursive(
    visit: Callable[[TreeNode | None], None],
    root: TreeNode | None,
    operation: str,
) -> None:
    try:
        visit(root)
    except RecursionError as exc:
        raise RecursionDepthExceeded(
            f"{operation} exceeded the interpreter recursion limit; "
            f"use {operation}_iterative() instead"
        ) from exc


# === ITERATIVE ===


def preorder_iterative(root: TreeNode | None) -> list[Any]:
    """
    Pre-order traversal with an explicit stack.

    The right child is pushed before the left so the left subtree is popped
    (and emitted) first.
    """
    result: list[Any] = []
    if root is None:
        return result

    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)

        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)

    return result


def inorder_iterative(root: TreeNode | None) -> list[Any]:
    """
    In-order traversal with an explicit stack.

    Descends left pushing every node, pops and emits the deepest one, then
    continues from its right child.
    """
    result: list[Any] = []
    stack: list[TreeNode] = []
    current = root

    while current is not None or stack:
        # Go as far left as possible
        while current is not None:
            stack.append(current)
            current = current.left

        current = stack.pop()
        result.append(current.value)
        current = current.right

    return result


def postorder_iterative(root: TreeNode | None) -> list[Any]:
    """
    Post-order traversal with an explicit stack.

    Pops nodes in root-right-left order and prepends each value, which
    leaves the result in left-right-root order.
    """
    result: deque[Any] = deque()
    if root is None:
        return []

    stack = [root]
    while stack:
        node = stack.pop()
        result.appendleft(node.value)

        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)

    logger.debug("postorder_iterative emitted %d values", len(result))
    return list(result)
