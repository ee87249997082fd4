"""
Graph search handlers.

This package provides traversal and search over adjacency views:
- traversal: DFS (recursive and iterative) and BFS, eager and lazy
- pathfinding: BFS shortest path and bidirectional search
- network: cycle detection, topological sort, connected components

Vertices are dense integer ids 0..n-1. An adjacency view is either a list
of neighbor lists or a mapping keyed by 0..n-1.
"""

from .base import (
    NO_PARENT,
    Adjacency,
    VertexId,
    adjacency_from_networkx,
    reconstruct_path,
    reversed_adjacency,
    to_networkx,
    validate_adjacency,
    validate_vertex,
    # Result TypedDicts for type hints
    ComponentsResult,
)
from .network import (
    connected_components,
    count_connected_components,
    find_cycle,
    has_cycle,
    topological_sort,
)
from .pathfinding import (
    bidirectional_search,
    shortest_path,
)
from .traversal import (
    bfs,
    dfs,
    dfs_iterative,
    iter_bfs,
    iter_dfs,
)

__all__ = [
    # Types and constants
    "Adjacency",
    "VertexId",
    "NO_PARENT",
    # Result TypedDicts
    "ComponentsResult",
    # Base functions
    "validate_adjacency",
    "validate_vertex",
    "reconstruct_path",
    "reversed_adjacency",
    # NetworkX interop
    "adjacency_from_networkx",
    "to_networkx",
    # Traversal handlers
    "dfs",
    "dfs_iterative",
    "iter_dfs",
    "bfs",
    "iter_bfs",
    # Pathfinding handlers
    "shortest_path",
    "bidirectional_search",
    # Network handlers
    "has_cycle",
    "find_cycle",
    "topological_sort",
    "count_connected_components",
    "connected_components",
]
