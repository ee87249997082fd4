"""
Exception classes for linkwalk.

Empty inputs and missing paths are valid outcomes and never raise; these
exceptions cover precondition violations and exceeded limits only.
"""


class LinkwalkError(Exception):
    """Base exception for all linkwalk errors."""

    pass


class ConfigError(LinkwalkError):
    """Raised when configuration is missing, unparseable, or invalid."""

    pass


class SafetyLimitExceeded(LinkwalkError):
    """Raised when an operation would exceed a configured safety limit."""

    pass


class RecursionDepthExceeded(SafetyLimitExceeded):
    """Raised when a recursive variant runs out of interpreter stack."""

    pass


class GraphPreconditionError(LinkwalkError, ValueError):
    """Base class for malformed graph inputs."""

    pass


class InvalidAdjacencyError(GraphPreconditionError):
    """Raised when an adjacency view has dangling ids or bad keys."""

    pass


class InvalidVertexError(GraphPreconditionError):
    """Raised when a start or end vertex is outside 0..n-1."""

    def __init__(self, vertex: object, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} is not in the graph (valid ids: 0..{vertex_count - 1})"
            if vertex_count
            else f"Vertex {vertex!r} is not in the graph (graph is empty)"
        )


class GraphCycleError(GraphPreconditionError):
    """Raised by strict topological sort when the graph has a cycle."""

    def __init__(self, cycle: list[int]):
        self.cycle = cycle
        rendered = " -> ".join(str(v) for v in [*cycle, cycle[0]]) if cycle else "?"
        super().__init__(f"Graph contains a cycle: {rendered}")
