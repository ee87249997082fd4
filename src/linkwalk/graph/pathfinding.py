"""
Unweighted shortest-path handlers.

Implements BFS-based path reconstruction from predecessor maps:
- shortest_path: single-source BFS with early exit on first discovery
- bidirectional_search: alternating forward/backward BFS meeting in the middle

"No path" is a valid outcome and is reported as an empty list.
"""

import logging
from collections import deque
from typing import Literal

from ..config import TraversalConfig
from .base import (
    NO_PARENT,
    Adjacency,
    VertexId,
    prepare,
    reconstruct_path,
    reversed_adjacency,
)

logger = logging.getLogger(__name__)

BackwardMode = Literal["as_given", "reversed"]


def shortest_path(
    adjacency: Adjacency,
    start: VertexId,
    end: VertexId,
    config: TraversalConfig | None = None,
) -> list[VertexId]:
    """
    Find a shortest (fewest-edges) path using BFS.

    Records each vertex's discovering predecessor and stops the moment
    ``end`` is first discovered; in BFS, first discovery is at the shortest
    distance.

    Args:
        adjacency: Adjacency view
        start: Starting vertex id
        end: Target vertex id
        config: Traversal configuration

    Returns:
        List of vertex ids from start to end inclusive; ``[start]`` when
        start == end; ``[]`` when end is unreachable

    Example:
        >>> graph = [[1, 3], [2, 4], [], [], [3, 5], []]
        >>> shortest_path(graph, 0, 5)
        [0, 1, 4, 5]
    """
    prepare(adjacency, start, end, config=config)

    if start == end:
        return [start]

    n = len(adjacency)
    visited = [False] * n
    parent = [NO_PARENT] * n

    queue: deque[VertexId] = deque([start])
    visited[start] = True

    while queue:
        vertex = queue.popleft()

        for neighbor in adjacency[vertex]:
            if not visited[neighbor]:
                visited[neighbor] = True
                parent[neighbor] = vertex
                queue.append(neighbor)

                if neighbor == end:
                    path = reconstruct_path(parent, end)
                    logger.debug("shortest_path %d -> %d: %d hops", start, end, len(path) - 1)
                    return path

    logger.debug("shortest_path %d -> %d: no path", start, end)
    return []


def bidirectional_search(
    adjacency: Adjacency,
    start: VertexId,
    end: VertexId,
    backward: BackwardMode = "as_given",
    config: TraversalConfig | None = None,
) -> list[VertexId]:
    """
    Find a shortest path by searching from both ends at once.

    Alternates one BFS step from the start side and one from the end side.
    A step expands the side's entire current frontier level. Every newly
    discovered vertex is checked against the other side's visited set; the
    first hit is the intersection point. Because each side's visited set is
    always a complete BFS ball, that first hit lies on a shortest path, so
    the result has the same length as shortest_path() would give.

    The two sides keep independent visited/predecessor state. Each side only
    reads the other's visited set.

    Args:
        adjacency: Adjacency view
        start: Starting vertex id
        end: Target vertex id
        backward: How the end side walks the graph:
            - "as_given": follow the adjacency as given (undirected graphs,
              or adjacency views that already encode reverse edges)
            - "reversed": follow a per-call reversed copy of the adjacency,
              giving correct paths on directed graphs
        config: Traversal configuration

    Returns:
        List of vertex ids from start to end inclusive; ``[start]`` when
        start == end; ``[]`` when either frontier empties without meeting

    Example:
        >>> graph = {0: [1, 2], 1: [0, 3], 2: [0, 3], 3: [1, 2],
        ...          4: [5, 6], 5: [4], 6: [4]}
        >>> bidirectional_search(graph, 0, 3)
        [0, 1, 3]
        >>> bidirectional_search(graph, 0, 6)
        []
    """
    if backward not in ("as_given", "reversed"):
        raise ValueError(f"Unknown backward mode: {backward}")

    prepare(adjacency, start, end, config=config)

    if start == end:
        return [start]

    n = len(adjacency)
    backward_adjacency = reversed_adjacency(adjacency) if backward == "reversed" else adjacency

    # Forward BFS state
    frontier_forward: deque[VertexId] = deque([start])
    visited_forward = [False] * n
    parent_forward = [NO_PARENT] * n
    visited_forward[start] = True

    # Backward BFS state
    frontier_backward: deque[VertexId] = deque([end])
    visited_backward = [False] * n
    parent_backward = [NO_PARENT] * n
    visited_backward[end] = True

    intersection = NO_PARENT
    steps = 0

    while frontier_forward and frontier_backward:
        steps += 1
        intersection = _bfs_level_step(
            adjacency, frontier_forward, visited_forward, parent_forward, visited_backward
        )
        if intersection != NO_PARENT:
            break

        intersection = _bfs_level_step(
            backward_adjacency, frontier_backward, visited_backward, parent_backward,
            visited_forward,
        )
        if intersection != NO_PARENT:
            break

    if intersection == NO_PARENT:
        logger.debug("bidirectional_search %d -> %d: no path after %d steps", start, end, steps)
        return []

    logger.debug(
        "bidirectional_search %d -> %d: frontiers met at %d after %d steps",
        start, end, intersection, steps,
    )
    return _splice_paths(parent_forward, parent_backward, intersection)


def _bfs_level_step(
    adjacency: Adjacency,
    frontier: deque[VertexId],
    visited: list[bool],
    parent: list[VertexId],
    other_visited: list[bool],
) -> VertexId:
    """
    Expand one full BFS level of one side.

    Returns the first newly discovered vertex already visited by the other
    side, or NO_PARENT if the level produced no intersection. On a hit the
    remaining frontier is left as is; the search stops anyway.
    """
    for _ in range(len(frontier)):
        vertex = frontier.popleft()

        for neighbor in adjacency[vertex]:
            if not visited[neighbor]:
                visited[neighbor] = True
                parent[neighbor] = vertex
                frontier.append(neighbor)

                if other_visited[neighbor]:
                    return neighbor

    return NO_PARENT


def _splice_paths(
    parent_forward: list[VertexId],
    parent_backward: list[VertexId],
    intersection: VertexId,
) -> list[VertexId]:
    """Join start->intersection and intersection->end without repeating the meeting vertex."""
    path = reconstruct_path(parent_forward, intersection)

    at = parent_backward[intersection]
    while at != NO_PARENT:
        path.append(at)
        at = parent_backward[at]

    return path
