"""
Binary tree traversal handlers.

This package provides traversals over TreeNode structures:
- depth_first: pre/in/post order, recursive and iterative
- levels: level order (flat, grouped, lazy), zigzag, vertical columns
- boundary: anti-clockwise boundary walk
- morris: constant-space in-order with link restoration

Every traversal accepts None as the empty tree and returns an empty list.
"""

from .base import (
    TreeNode,
    count_nodes,
    is_leaf,
    tree_height,
)
from .boundary import boundary_traversal
from .depth_first import (
    inorder,
    inorder_iterative,
    postorder,
    postorder_iterative,
    preorder,
    preorder_iterative,
)
from .levels import (
    iter_levels,
    level_order,
    level_order_by_level,
    vertical_order,
    zigzag_level_order,
)
from .morris import morris_inorder

__all__ = [
    # Node type and helpers
    "TreeNode",
    "is_leaf",
    "count_nodes",
    "tree_height",
    # Depth-first handlers
    "preorder",
    "inorder",
    "postorder",
    "preorder_iterative",
    "inorder_iterative",
    "postorder_iterative",
    "morris_inorder",
    # Breadth-first handlers
    "level_order",
    "level_order_by_level",
    "iter_levels",
    "zigzag_level_order",
    "vertical_order",
    # Boundary
    "boundary_traversal",
]
