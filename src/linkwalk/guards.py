"""
Runtime guards for recursive traversal variants.

The recursive forms (dfs, preorder, inorder, postorder) are reference
implementations whose depth is bounded only by the input. These guards
decide up front whether an input of a given size fits in the interpreter's
recursion budget, and apply the configured policy when it may not.
"""

import sys
import warnings
from dataclasses import dataclass
from typing import Literal

from .config import TraversalConfig, resolve_config
from .errors import RecursionDepthExceeded, SafetyLimitExceeded


@dataclass
class GuardResult:
    """Result of runtime guard checks."""

    safe_to_proceed: bool
    recommended_action: Literal[
        "recurse",  # Input fits in the recursion budget
        "iterate",  # Use the iterative variant instead
    ]
    reason: str
    budget: int


def recursion_budget(config: TraversalConfig | None = None) -> int:
    """Frames available to a recursive variant under the current limit."""
    config = resolve_config(config)
    return max(sys.getrecursionlimit() - config.recursion_headroom, 0)


def check_recursion_budget(
    worst_case_depth: int,
    operation: str,
    config: TraversalConfig | None = None,
) -> GuardResult:
    """
    Check whether a recursive variant may exhaust the call stack.

    ``worst_case_depth`` is an upper bound on recursion depth (the vertex
    count for graph DFS). When it exceeds the budget the configured policy
    applies: "warn" emits a RuntimeWarning, "raise" raises
    RecursionDepthExceeded, "off" does nothing.

    Args:
        worst_case_depth: Upper bound on the recursion depth of the call
        operation: Name of the calling operation (used in messages)
        config: Traversal configuration

    Returns:
        GuardResult with a recommendation

    Raises:
        RecursionDepthExceeded: If the policy is "raise" and the input may
            not fit
    """
    config = resolve_config(config)
    budget = recursion_budget(config)

    if config.recursion_guard == "off" or worst_case_depth <= budget:
        return GuardResult(
            safe_to_proceed=True,
            recommended_action="recurse",
            reason=f"Depth bound {worst_case_depth:,} within budget of {budget:,} frames.",
            budget=budget,
        )

    reason = (
        f"{operation} may recurse {worst_case_depth:,} levels deep, "
        f"budget is {budget:,} frames. Use the iterative variant instead."
    )
    if config.recursion_guard == "raise":
        raise RecursionDepthExceeded(reason)

    warnings.warn(reason, RuntimeWarning, stacklevel=3)
    return GuardResult(
        safe_to_proceed=False,
        recommended_action="iterate",
        reason=reason,
        budget=budget,
    )


def check_limits(vertex_count: int, config: TraversalConfig | None = None) -> None:
    """
    Check the input hasn't exceeded the configured vertex limit.

    Args:
        vertex_count: Number of vertices in the input graph
        config: Traversal configuration

    Raises:
        SafetyLimitExceeded: If max_vertices is set and exceeded
    """
    config = resolve_config(config)
    if config.max_vertices is not None and vertex_count > config.max_vertices:
        raise SafetyLimitExceeded(
            f"Graph has {vertex_count:,} vertices, exceeds limit {config.max_vertices:,}"
        )
