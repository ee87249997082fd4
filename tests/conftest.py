"""
Shared fixtures and builders for the linkwalk test suite.
"""

from collections import deque

import pytest

from linkwalk.tree import TreeNode


def build_tree(values: list) -> TreeNode | None:
    """
    Build a binary tree from a level-order literal.

    None marks an absent child; trailing absent children may be omitted.
    Example: [1, 2, 3, None, 4] is 1 with children 2 and 3, and 2 has a
    right child 4.
    """
    if not values or values[0] is None:
        return None

    root = TreeNode(values[0])
    queue = deque([root])
    i = 1
    while queue and i < len(values):
        node = queue.popleft()
        if i < len(values) and values[i] is not None:
            node.left = TreeNode(values[i])
            queue.append(node.left)
        i += 1
        if i < len(values) and values[i] is not None:
            node.right = TreeNode(values[i])
            queue.append(node.right)
        i += 1
    return root


def left_chain(depth: int) -> TreeNode | None:
    """A degenerate tree where every node has only a left child."""
    root = None
    for value in range(depth, 0, -1):
        root = TreeNode(value, left=root)
    return root


def link_snapshot(root: TreeNode | None) -> list[tuple[int, int | None, int | None]]:
    """
    Capture the link structure of a tree by node identity.

    Walks by level order without relying on any linkwalk traversal, so it
    can check whether a traversal left the links untouched.
    """
    snapshot = []
    if root is None:
        return snapshot
    seen = {id(root)}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = id(node.left) if node.left is not None else None
        right = id(node.right) if node.right is not None else None
        snapshot.append((id(node), left, right))
        for child in (node.left, node.right):
            # A leftover thread would point back at a visited node
            if child is not None and id(child) not in seen:
                seen.add(id(child))
                queue.append(child)
    return snapshot


# Level-order literals covering the interesting shapes
TREE_SHAPES = {
    "single": [1],
    "full": [1, 2, 3, 4, 5, 6, 7],
    "sample": [1, 2, 3, 4, 5, None, 6, None, None, 7],
    "left_only": [1, 2, None, 3, None, 4],
    "right_only": [1, None, 2, None, 3, None, 4],
    "zigzag_shape": [1, 2, None, None, 3, 4],
    "bst": [8, 4, 12, 2, 6, 10, 14, 1, 3, 5, 7],
}


@pytest.fixture
def sample_tree():
    """Sample tree: 1 -> (2 -> (4, 5 -> (7,)), 3 -> (, 6))."""
    return build_tree(TREE_SHAPES["sample"])


@pytest.fixture(params=sorted(TREE_SHAPES))
def any_tree(request):
    """Each tree shape in turn."""
    return build_tree(TREE_SHAPES[request.param])


@pytest.fixture
def directed_graph():
    """Directed acyclic graph: 0->1, 0->3, 1->2, 1->4, 4->3, 4->5."""
    return [[1, 3], [2, 4], [], [], [3, 5], []]


@pytest.fixture
def undirected_graph():
    """Two undirected components: a 4-cycle {0,1,2,3} and a star {4,5,6}."""
    return {
        0: [1, 2],
        1: [0, 3],
        2: [0, 3],
        3: [1, 2],
        4: [5, 6],
        5: [4],
        6: [4],
    }


@pytest.fixture
def cyclic_graph():
    """Directed graph with the cycle 1 -> 2 -> 3 -> 1 behind vertex 0."""
    return [[1], [2], [3], [1]]
