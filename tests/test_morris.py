"""
Tests for Morris in-order traversal and its link restoration guarantee.
"""

import logging
import sys

import pytest

from linkwalk.tree import TreeNode, inorder, morris, morris_inorder

from conftest import TREE_SHAPES, build_tree, left_chain, link_snapshot


class TestMorrisInorder:
    """Tests for morris_inorder output."""

    def test_empty_tree(self):
        """Absent root returns []."""
        assert morris_inorder(None) == []

    def test_matches_recursive_inorder(self, any_tree):
        """Output equals the recursive in-order traversal."""
        assert morris_inorder(any_tree) == inorder(any_tree)

    def test_sample_tree(self, sample_tree):
        """Known in-order of the sample tree."""
        assert morris_inorder(sample_tree) == [4, 2, 7, 5, 1, 3, 6]

    def test_deep_chain(self):
        """Runs without recursion on trees deeper than the recursion limit."""
        depth = sys.getrecursionlimit() * 2
        assert morris_inorder(left_chain(depth)) == list(range(depth, 0, -1))


class TestMorrisRestoration:
    """The tree's links are identical before and after a walk."""

    def test_links_restored_after_walk(self, any_tree):
        """No thread survives a completed walk."""
        before = link_snapshot(any_tree)
        morris_inorder(any_tree)
        assert link_snapshot(any_tree) == before

    def test_repeated_walks_agree(self, sample_tree):
        """A second walk sees the same tree as the first."""
        assert morris_inorder(sample_tree) == morris_inorder(sample_tree)

    @pytest.mark.parametrize("shape", sorted(TREE_SHAPES))
    @pytest.mark.parametrize("fail_at", [1, 2, 3, 5])
    def test_links_restored_after_interruption(self, monkeypatch, shape, fail_at):
        """An exception mid-walk propagates and leaves no thread behind."""
        root = build_tree(TREE_SHAPES[shape])
        before = link_snapshot(root)

        original = morris._find_predecessor
        calls = {"count": 0}

        def failing_find_predecessor(node):
            calls["count"] += 1
            if calls["count"] == fail_at:
                raise KeyboardInterrupt
            return original(node)

        monkeypatch.setattr(morris, "_find_predecessor", failing_find_predecessor)

        if calls_needed(root) < fail_at:
            # Walk finishes before the injected failure point
            morris_inorder(root)
        else:
            with pytest.raises(KeyboardInterrupt):
                morris_inorder(root)

        assert link_snapshot(root) == before
        monkeypatch.undo()
        assert morris_inorder(root) == inorder(root)

    def test_unwinding_is_logged(self, monkeypatch, caplog):
        """Interrupted walks log a warning while unwinding."""
        root = build_tree([1, 2, 3, 4, 5])
        original = morris._find_predecessor
        calls = {"count": 0}

        def failing_find_predecessor(node):
            calls["count"] += 1
            if calls["count"] == 2:
                raise RuntimeError("interrupted")
            return original(node)

        monkeypatch.setattr(morris, "_find_predecessor", failing_find_predecessor)

        with caplog.at_level(logging.WARNING, logger="linkwalk.tree.morris"):
            with pytest.raises(RuntimeError, match="interrupted"):
                morris_inorder(root)

        assert "unwinding" in caplog.text


def calls_needed(root: TreeNode | None) -> int:
    """Predecessor lookups a complete walk makes: two per node with a left child."""
    if root is None:
        return 0
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.left is not None:
            count += 2
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return count
