"""
linkwalk - Traversal and search over binary trees and graphs.

Depth-first, breadth-first, bidirectional and Morris traversal strategies,
plus cycle detection, topological ordering, connected components and
unweighted shortest paths over plain adjacency lists.

Subpackages:
    linkwalk.tree   - TreeNode traversals
    linkwalk.graph  - adjacency-list search and analysis
"""

import logging

from .config import TraversalConfig, default_config, load_config
from .errors import (
    ConfigError,
    GraphCycleError,
    GraphPreconditionError,
    InvalidAdjacencyError,
    InvalidVertexError,
    LinkwalkError,
    RecursionDepthExceeded,
    SafetyLimitExceeded,
)
from .graph import (
    bfs,
    bidirectional_search,
    connected_components,
    count_connected_components,
    dfs,
    dfs_iterative,
    has_cycle,
    shortest_path,
    topological_sort,
)
from .tree import (
    TreeNode,
    boundary_traversal,
    inorder,
    level_order,
    morris_inorder,
    postorder,
    preorder,
    vertical_order,
    zigzag_level_order,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Configuration
    "TraversalConfig",
    "default_config",
    "load_config",
    # Exceptions
    "LinkwalkError",
    "ConfigError",
    "SafetyLimitExceeded",
    "RecursionDepthExceeded",
    "GraphPreconditionError",
    "InvalidAdjacencyError",
    "InvalidVertexError",
    "GraphCycleError",
    # Tree
    "TreeNode",
    "preorder",
    "inorder",
    "postorder",
    "morris_inorder",
    "level_order",
    "zigzag_level_order",
    "boundary_traversal",
    "vertical_order",
    # Graph
    "dfs",
    "dfs_iterative",
    "bfs",
    "has_cycle",
    "shortest_path",
    "bidirectional_search",
    "topological_sort",
    "count_connected_components",
    "connected_components",
]
