"""
Core graph infrastructure shared by all search handlers.

This module provides the foundation for the graph engine:
- Adjacency type aliases (sequence-of-lists or mapping form)
- TypedDict definitions for structured results
- Eager validation of adjacency views and vertex ids
- Predecessor-chain path reconstruction
- Conversion to and from NetworkX graphs

The engine treats adjacency data as read-only. Visited sets, frontiers and
predecessor maps are created per call and discarded at return.
"""

import logging
import operator
from collections.abc import Hashable, Mapping, Sequence
from typing import TypedDict, Union

import networkx as nx

from ..config import TraversalConfig, resolve_config
from ..errors import InvalidAdjacencyError, InvalidVertexError
from ..guards import check_limits

logger = logging.getLogger(__name__)

# Vertex ids are dense integers 0..n-1
VertexId = int

# Either [[1, 3], [2, 4], ...] or {0: [1, 3], 1: [2, 4], ...}
Adjacency = Union[Sequence[Sequence[VertexId]], Mapping[VertexId, Sequence[VertexId]]]

# Sentinel for "no predecessor" in parent maps
NO_PARENT = -1


# === TYPED RESULT DICTIONARIES ===


class ComponentsResult(TypedDict):
    """Result type for connected_components()."""

    components: list[list[VertexId]]
    """Vertex lists in discovery order, largest component first."""

    component_count: int
    """Number of components of at least min_size vertices."""

    largest_component_size: int
    """Size of the largest component (0 for an empty graph)."""

    isolated_vertices: list[VertexId]
    """Vertices with no incident edges in either direction."""


# === VALIDATION ===


def vertex_count(adjacency: Adjacency) -> int:
    """Number of vertices in the adjacency view."""
    return len(adjacency)


def validate_adjacency(adjacency: Adjacency) -> None:
    """
    Check an adjacency view is well formed.

    Mapping views must be keyed by exactly 0..n-1. Every neighbor id must be
    an int in 0..n-1. Self-loops and parallel edges are allowed.

    Args:
        adjacency: Adjacency view to check

    Raises:
        InvalidAdjacencyError: If the view is malformed
    """
    n = len(adjacency)

    if isinstance(adjacency, Mapping):
        expected = set(range(n))
        keys = set(adjacency.keys())
        if keys != expected:
            bad = sorted(repr(k) for k in keys - expected)
            raise InvalidAdjacencyError(
                f"Adjacency mapping must be keyed by 0..{n - 1}; unexpected keys: "
                f"{', '.join(bad) or 'none'}"
            )

    for vertex in range(n):
        neighbors = adjacency[vertex]
        if isinstance(neighbors, (str, bytes)) or not isinstance(neighbors, Sequence):
            raise InvalidAdjacencyError(
                f"Neighbors of vertex {vertex} must be a sequence, "
                f"got {type(neighbors).__name__}"
            )
        for neighbor in neighbors:
            if not _is_vertex_id(neighbor, n):
                raise InvalidAdjacencyError(
                    f"Vertex {vertex} lists neighbor {neighbor!r}, "
                    f"which is not in 0..{n - 1}"
                )


def validate_vertex(vertex: VertexId, n: int) -> None:
    """
    Check a vertex id is in range.

    Raises:
        InvalidVertexError: If the id is not an int in 0..n-1
    """
    if not _is_vertex_id(vertex, n):
        raise InvalidVertexError(vertex, n)


def _is_vertex_id(value: object, n: int) -> bool:
    # bool is an int subclass but never a meaningful vertex id
    if isinstance(value, bool):
        return False
    # Accept int-like ids (e.g. numpy integers) that support __index__
    try:
        index = operator.index(value)
    except TypeError:
        return False
    return 0 <= index < n


def prepare(
    adjacency: Adjacency,
    *vertices: VertexId,
    config: TraversalConfig | None = None,
) -> TraversalConfig:
    """
    Apply limits and (optionally) validation before a graph operation.

    Args:
        adjacency: Adjacency view the operation will read
        *vertices: Start/end vertex ids the operation was given
        config: Traversal configuration

    Returns:
        The resolved configuration, for further use by the caller

    Raises:
        SafetyLimitExceeded: If the vertex count exceeds max_vertices
        InvalidAdjacencyError: If validation is on and the view is malformed
        InvalidVertexError: If validation is on and a vertex id is out of range
    """
    config = resolve_config(config)
    n = len(adjacency)
    check_limits(n, config)

    if config.validate_inputs:
        validate_adjacency(adjacency)
        for vertex in vertices:
            validate_vertex(vertex, n)

    return config


# === PATH RECONSTRUCTION ===


def reconstruct_path(parent: list[VertexId], end: VertexId) -> list[VertexId]:
    """
    Walk predecessor links from ``end`` back to the root and reverse.

    Args:
        parent: Map of vertex id to discovering predecessor (NO_PARENT for
                the root and for undiscovered vertices)
        end: Last vertex of the path

    Returns:
        Path from the root of the predecessor chain to ``end``
    """
    path: list[VertexId] = []
    at = end
    while at != NO_PARENT:
        path.append(at)
        at = parent[at]
    path.reverse()
    return path


def reversed_adjacency(adjacency: Adjacency) -> list[list[VertexId]]:
    """
    Build the reverse of an adjacency view as a new list.

    Neighbor order follows source-vertex order, so the result is
    deterministic. The input is not modified.
    """
    n = len(adjacency)
    reverse: list[list[VertexId]] = [[] for _ in range(n)]
    for vertex in range(n):
        for neighbor in adjacency[vertex]:
            reverse[neighbor].append(vertex)
    return reverse


# === NETWORKX INTEROP ===


def adjacency_from_networkx(G: nx.Graph) -> tuple[list[list[VertexId]], list[Hashable]]:
    """
    Convert a NetworkX graph to an adjacency view.

    Nodes are relabelled 0..n-1 in G's node iteration order; neighbor lists
    follow G's adjacency order. For undirected graphs each edge appears in
    both endpoints' lists. Multigraph parallel edges collapse to one entry.

    Args:
        G: Any NetworkX graph (directed or undirected)

    Returns:
        Tuple of (adjacency, labels) where labels[i] is the original node
        for vertex id i

    Example:
        >>> G = nx.path_graph(["a", "b", "c"])
        >>> adjacency, labels = adjacency_from_networkx(G)
        >>> adjacency
        [[1], [0, 2], [1]]
        >>> labels
        ['a', 'b', 'c']
    """
    labels: list[Hashable] = list(G.nodes())
    index = {node: i for i, node in enumerate(labels)}
    adjacency = [[index[neighbor] for neighbor in G.adj[node]] for node in labels]
    logger.debug(
        "Converted %s with %d nodes and %d edges",
        type(G).__name__, G.number_of_nodes(), G.number_of_edges(),
    )
    return adjacency, labels


def to_networkx(adjacency: Adjacency, directed: bool = True) -> nx.Graph:
    """
    Build a NetworkX graph from an adjacency view.

    Every vertex is added, including isolated ones. Parallel edges collapse.

    Args:
        adjacency: Adjacency view
        directed: Build a DiGraph (True) or an undirected Graph (False)

    Returns:
        nx.DiGraph or nx.Graph with nodes 0..n-1
    """
    G = nx.DiGraph() if directed else nx.Graph()
    G.add_nodes_from(range(len(adjacency)))
    for vertex in range(len(adjacency)):
        for neighbor in adjacency[vertex]:
            G.add_edge(vertex, neighbor)
    return G
