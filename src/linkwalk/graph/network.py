"""
Whole-graph analysis handlers.

Provides cycle detection, topological ordering and connected components.
Unlike the single-source traversals, these scan every vertex as a potential
DFS/BFS root so that disconnected parts of the graph are covered.

The depth-first scans here run on an explicit stack, so they are not bound
by the interpreter recursion limit.
"""

import logging
from collections import deque
from collections.abc import Callable, Iterator

from ..config import TraversalConfig
from ..errors import GraphCycleError
from .base import Adjacency, ComponentsResult, VertexId, prepare

logger = logging.getLogger(__name__)

# Vertex states for the cycle-guarded DFS
_UNVISITED = 0
_ON_PATH = 1  # On the current DFS path (recursion-stack mark)
_FINISHED = 2  # Visited, all descendants explored


def has_cycle(adjacency: Adjacency, config: TraversalConfig | None = None) -> bool:
    """
    Check whether a directed graph contains a cycle.

    Runs DFS from every unvisited vertex in id order. An edge to a vertex on
    the current DFS path is a back edge and proves a cycle; an edge to a
    finished vertex is a cross or forward edge and does not.

    Args:
        adjacency: Adjacency view (directed)
        config: Traversal configuration

    Returns:
        True if any cycle (including a self-loop) exists, False otherwise.
        The empty graph has no cycle.

    Example:
        >>> has_cycle([[1, 3], [2, 4], [], [], [3, 5], []])
        False
        >>> has_cycle([[1], [2], [0]])
        True
    """
    return bool(find_cycle(adjacency, config))


def find_cycle(adjacency: Adjacency, config: TraversalConfig | None = None) -> list[VertexId]:
    """
    Find one cycle in a directed graph.

    Uses the same scan as has_cycle() and stops at the first back edge.

    Args:
        adjacency: Adjacency view (directed)
        config: Traversal configuration

    Returns:
        Vertices of the cycle in path order ``[v, ..., u]``, where the edge
        ``u -> v`` closes it; ``[]`` if the graph is acyclic

    Example:
        >>> find_cycle([[1], [2], [3], [1]])
        [1, 2, 3]
    """
    prepare(adjacency, config=config)
    return _guarded_dfs(adjacency)


def topological_sort(
    adjacency: Adjacency,
    strict: bool = False,
    config: TraversalConfig | None = None,
) -> list[VertexId]:
    """
    Order vertices so that every edge points forward.

    Post-order DFS: each vertex is prepended to the result once all of its
    neighbors are finished. The same on-path guard as has_cycle() runs
    alongside; a cycle anywhere invalidates the whole ordering.

    Args:
        adjacency: Adjacency view (directed)
        strict: Raise GraphCycleError on a cycle instead of returning []
        config: Traversal configuration

    Returns:
        Permutation of all vertex ids such that u precedes v for every edge
        u -> v; ``[]`` for the empty graph, and for a cyclic graph when
        ``strict`` is False

    Raises:
        GraphCycleError: If ``strict`` is True and the graph has a cycle.
            The exception's ``cycle`` attribute holds the offending vertices.

    Example:
        >>> topological_sort([[1, 3], [2, 4], [], [], [3, 5], []])
        [0, 1, 4, 5, 3, 2]
    """
    prepare(adjacency, config=config)

    order: deque[VertexId] = deque()
    cycle = _guarded_dfs(adjacency, on_finish=order.appendleft)

    if cycle:
        logger.debug("topological_sort: cycle %s found, ordering invalid", cycle)
        if strict:
            raise GraphCycleError(cycle)
        return []

    return list(order)


def _guarded_dfs(
    adjacency: Adjacency,
    on_finish: Callable[[VertexId], None] | None = None,
) -> list[VertexId]:
    """
    DFS over all roots with recursion-stack marking.

    Calls ``on_finish`` for each vertex in post-order. Returns the first
    cycle found (stopping immediately), or [] after a full scan.
    """
    n = len(adjacency)
    state = [_UNVISITED] * n

    for root in range(n):
        if state[root] != _UNVISITED:
            continue

        state[root] = _ON_PATH
        # Each entry is [vertex, index of next neighbor to examine]
        stack: list[list[int]] = [[root, 0]]

        while stack:
            top = stack[-1]
            vertex, cursor = top
            neighbors = adjacency[vertex]

            if cursor < len(neighbors):
                top[1] = cursor + 1
                neighbor = neighbors[cursor]

                if state[neighbor] == _UNVISITED:
                    state[neighbor] = _ON_PATH
                    stack.append([neighbor, 0])
                elif state[neighbor] == _ON_PATH:
                    # Back edge: the cycle is the path segment from neighbor to vertex
                    path = [entry[0] for entry in stack]
                    cycle = path[path.index(neighbor):]
                    logger.debug("Back edge %d -> %d closes cycle of length %d",
                                 vertex, neighbor, len(cycle))
                    return cycle
            else:
                state[vertex] = _FINISHED
                stack.pop()
                if on_finish is not None:
                    on_finish(vertex)

    return []


def count_connected_components(
    adjacency: Adjacency,
    config: TraversalConfig | None = None,
) -> int:
    """
    Count connected components of an undirected graph.

    Every time a vertex not yet reached by an earlier sweep is found (in id
    order), the count goes up by one and its whole reachable set is marked.
    The adjacency is expected to list each undirected edge in both
    directions.

    Args:
        adjacency: Adjacency view (undirected)
        config: Traversal configuration

    Returns:
        Number of components; 0 for the empty graph

    Example:
        >>> count_connected_components(
        ...     {0: [1, 2], 1: [0, 3], 2: [0, 3], 3: [1, 2], 4: [5, 6], 5: [4], 6: [4]}
        ... )
        2
    """
    prepare(adjacency, config=config)
    return sum(1 for _ in _component_sweep(adjacency))


def connected_components(
    adjacency: Adjacency,
    min_size: int = 1,
    config: TraversalConfig | None = None,
) -> ComponentsResult:
    """
    Find connected components of an undirected graph.

    Useful for identifying isolated clusters or verifying connectivity.

    Args:
        adjacency: Adjacency view (undirected)
        min_size: Minimum component size to return (default 1)
        config: Traversal configuration

    Returns:
        ComponentsResult dict with:
            - components: vertex lists (each in BFS discovery order from its
              lowest-id vertex), sorted by size descending; ties keep
              discovery order
            - component_count: number of components returned
            - largest_component_size: size of the largest one returned
            - isolated_vertices: vertices with no incident edges
    """
    prepare(adjacency, config=config)

    components = [c for c in _component_sweep(adjacency) if len(c) >= min_size]
    components.sort(key=len, reverse=True)

    # Find isolated vertices (no edges in or out)
    has_incoming = [False] * len(adjacency)
    for vertex in range(len(adjacency)):
        for neighbor in adjacency[vertex]:
            has_incoming[neighbor] = True
    isolated = [v for v in range(len(adjacency)) if not adjacency[v] and not has_incoming[v]]

    logger.debug(
        "connected_components: %d components (min_size=%d), %d isolated",
        len(components), min_size, len(isolated),
    )

    return {
        "components": components,
        "component_count": len(components),
        "largest_component_size": len(components[0]) if components else 0,
        "isolated_vertices": isolated,
    }


def _component_sweep(adjacency: Adjacency) -> Iterator[list[VertexId]]:
    """Yield each component, rooted at its lowest unvisited id, as BFS order."""
    visited = [False] * len(adjacency)

    for root in range(len(adjacency)):
        if visited[root]:
            continue

        visited[root] = True
        component = [root]
        queue: deque[VertexId] = deque([root])
        while queue:
            vertex = queue.popleft()
            for neighbor in adjacency[vertex]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    component.append(neighbor)
                    queue.append(neighbor)

        yield component
