"""
Depth-first and breadth-first graph traversal.

All traversals visit neighbors in the adjacency list's given order and
return (or lazily yield) vertex ids in visitation order. Only vertices
reachable from the start vertex are visited.

- dfs: recursive reference implementation (depth bounded by the input)
- dfs_iterative / iter_dfs: explicit-stack DFS with identical output
- bfs / iter_bfs: FIFO frontier, vertices marked when enqueued
"""

import logging
from collections import deque
from collections.abc import Iterator

from ..config import TraversalConfig
from ..errors import RecursionDepthExceeded
from ..guards import check_recursion_budget, recursion_budget
from .base import Adjacency, VertexId, prepare

logger = logging.getLogger(__name__)


def dfs(
    adjacency: Adjacency,
    start: VertexId,
    config: TraversalConfig | None = None,
) -> list[VertexId]:
    """
    Recursive depth-first search in pre-order.

    Marks a vertex, emits it, then recurses into each unvisited neighbor in
    list order. Recursion depth can reach the number of reachable vertices;
    prefer dfs_iterative() for large or path-like graphs.

    When the graph has more vertices than the recursion budget, an
    iterative pre-pass measures the deepest DFS path from ``start`` and the
    recursion guard judges that depth instead. Wide, shallow graphs
    therefore run without a warning.

    Args:
        adjacency: Adjacency view (vertex id -> ordered neighbor ids)
        start: Starting vertex id
        config: Traversal configuration

    Returns:
        Vertex ids in DFS order, starting with ``start``

    Raises:
        InvalidVertexError: If ``start`` is out of range (validation on)
        RecursionDepthExceeded: If the interpreter stack runs out, or up
            front when recursion_guard is "raise" and the graph may not fit

    Example:
        >>> graph = [[1, 3], [2, 4], [], [], [3, 5], []]
        >>> dfs(graph, 0)
        [0, 1, 2, 4, 3, 5]
    """
    config = prepare(adjacency, start, config=config)

    depth_bound = len(adjacency)
    if config.recursion_guard != "off" and depth_bound > recursion_budget(config):
        # Vertex count is too coarse; measure the actual recursion depth
        depth_bound = _dfs_depth(adjacency, start)
    check_recursion_budget(depth_bound, "dfs", config)

    visited = [False] * len(adjacency)
    result: list[VertexId] = []

    def _visit(vertex: VertexId) -> None:
        visited[vertex] = True
        result.append(vertex)
        for neighbor in adjacency[vertex]:
            if not visited[neighbor]:
                _visit(neighbor)

    try:
        _visit(start)
    except RecursionError as exc:
        raise RecursionDepthExceeded(
            f"dfs exceeded the interpreter recursion limit after visiting "
            f"{len(result):,} vertices; use dfs_iterative() instead"
        ) from exc

    logger.debug("dfs from %d visited %d of %d vertices", start, len(result), len(adjacency))
    return result


def dfs_iterative(
    adjacency: Adjacency,
    start: VertexId,
    config: TraversalConfig | None = None,
) -> list[VertexId]:
    """
    Depth-first search with an explicit stack.

    Produces exactly the same order as dfs(): the stack top advances to its
    first unvisited neighbor (in list order), or is popped when none remain.

    Args:
        adjacency: Adjacency view
        start: Starting vertex id
        config: Traversal configuration

    Returns:
        Vertex ids in DFS order
    """
    result = list(iter_dfs(adjacency, start, config))
    logger.debug(
        "dfs_iterative from %d visited %d of %d vertices",
        start, len(result), len(adjacency),
    )
    return result


def iter_dfs(
    adjacency: Adjacency,
    start: VertexId,
    config: TraversalConfig | None = None,
) -> Iterator[VertexId]:
    """
    Lazily yield vertices in DFS order.

    Inputs are validated when this function is called, not when the first
    vertex is requested. Each stack entry carries a cursor into its neighbor
    list, so every list is scanned once in total; this does not change the
    visitation order relative to rescanning from the front.

    Args:
        adjacency: Adjacency view
        start: Starting vertex id
        config: Traversal configuration

    Returns:
        Iterator over vertex ids in DFS order
    """
    prepare(adjacency, start, config=config)
    return _dfs_walk(adjacency, start)


def _dfs_walk(adjacency: Adjacency, start: VertexId) -> Iterator[VertexId]:
    visited = [False] * len(adjacency)
    # Each entry is [vertex, index of next neighbor to examine]
    stack: list[list[int]] = [[start, 0]]
    visited[start] = True
    yield start

    while stack:
        top = stack[-1]
        vertex, cursor = top
        neighbors = adjacency[vertex]

        # Advance to the first unvisited neighbor
        while cursor < len(neighbors) and visited[neighbors[cursor]]:
            cursor += 1
        top[1] = cursor

        if cursor < len(neighbors):
            neighbor = neighbors[cursor]
            visited[neighbor] = True
            yield neighbor
            stack.append([neighbor, 0])
        else:
            # No unvisited neighbors, backtrack
            stack.pop()


def _dfs_depth(adjacency: Adjacency, start: VertexId) -> int:
    """Deepest stack reached by _dfs_walk, i.e. the recursion depth dfs() needs."""
    visited = [False] * len(adjacency)
    stack: list[list[int]] = [[start, 0]]
    visited[start] = True
    deepest = 1

    while stack:
        top = stack[-1]
        vertex, cursor = top
        neighbors = adjacency[vertex]

        while cursor < len(neighbors) and visited[neighbors[cursor]]:
            cursor += 1
        top[1] = cursor

        if cursor < len(neighbors):
            neighbor = neighbors[cursor]
            visited[neighbor] = True
            stack.append([neighbor, 0])
            deepest = max(deepest, len(stack))
        else:
            stack.pop()

    return deepest


def bfs(
    adjacency: Adjacency,
    start: VertexId,
    config: TraversalConfig | None = None,
) -> list[VertexId]:
    """
    Breadth-first search from ``start``.

    Vertices are marked visited when enqueued, so none is enqueued twice
    even with parallel edges or self-loops.

    Args:
        adjacency: Adjacency view
        start: Starting vertex id
        config: Traversal configuration

    Returns:
        Vertex ids in BFS order

    Example:
        >>> graph = [[1, 3], [2, 4], [], [], [3, 5], []]
        >>> bfs(graph, 0)
        [0, 1, 3, 2, 4, 5]
    """
    result = list(iter_bfs(adjacency, start, config))
    logger.debug("bfs from %d visited %d of %d vertices", start, len(result), len(adjacency))
    return result


def iter_bfs(
    adjacency: Adjacency,
    start: VertexId,
    config: TraversalConfig | None = None,
) -> Iterator[VertexId]:
    """
    Lazily yield vertices in BFS order.

    Inputs are validated when this function is called. Abandoning the
    iterator early is safe: all state is local to the iterator.
    """
    prepare(adjacency, start, config=config)
    return _bfs_walk(adjacency, start)


def _bfs_walk(adjacency: Adjacency, start: VertexId) -> Iterator[VertexId]:
    visited = [False] * len(adjacency)
    queue: deque[VertexId] = deque([start])
    visited[start] = True

    while queue:
        vertex = queue.popleft()
        yield vertex

        for neighbor in adjacency[vertex]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
