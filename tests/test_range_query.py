"""
Tests for the split-node range query.

The walk is pinned to the results it gives on known shapes rather than
checked against a brute-force filter; it is not a general range search.
"""

import pytest

from redblack.models.sortedcontainers import RedBlackTree
from redblack.query import get_split_node, nodes_in_range, values_in_range


class TestSampleTree:
    """Tests against the hand-built range tree."""

    def test_sample_shape(self, sample_tree):
        """Test the fixture's top levels."""
        root = sample_tree.root
        assert root.key == 49
        assert root.left.key == 23
        assert root.right.key == 80
        assert root.left.parent is root

    def test_fixture_query(self, sample_tree):
        """Test the pinned result for [19, 77]."""
        assert sample_tree.values_in_range(19, 77) == [37, 23, 19, 59, 70]

    def test_fixture_nodes(self, sample_tree):
        """Test that collected nodes mix subtree roots and leaves."""
        nodes = nodes_in_range(sample_tree.root, 19, 77)
        assert [n.leaf for n in nodes] == [False, True, True, False, True]

    def test_split_node(self, sample_tree):
        """Test that the root is the split node when it lies in range."""
        assert get_split_node(sample_tree.root, 19, 77) is sample_tree.root

    def test_split_below_root(self, sample_tree):
        """Test a split node found by descending left."""
        split = get_split_node(sample_tree.root, 1, 5)
        assert split.key == 3 and not split.leaf
        assert values_in_range(sample_tree.root, 1, 5) == [3]

    def test_descent_never_turns_right_past_a_left_child(self, sample_tree):
        """Test that keys reachable only through right turns are missed."""
        assert get_split_node(sample_tree.root, 60, 65) is None
        assert sample_tree.values_in_range(60, 65) == []

    def test_no_split_node(self, sample_tree):
        """Test an interval below every key."""
        assert sample_tree.values_in_range(0, 2) == []


class TestRangeQueryEdgeCases:
    """Edge cases for the range query."""

    def test_empty_tree(self):
        """Test querying an empty tree."""
        assert RedBlackTree().values_in_range(0, 100) == []

    def test_inverted_bounds(self, sample_tree):
        """Test that lo > hi gives nothing."""
        assert sample_tree.values_in_range(77, 19) == []

    def test_non_int_bounds(self, sample_tree):
        """Test that bounds must be ints."""
        with pytest.raises(TypeError):
            sample_tree.values_in_range(1.5, 10)
        with pytest.raises(TypeError):
            values_in_range(sample_tree.root, 1, "10")

    def test_single_node(self):
        """Test a split node with no children."""
        tree = RedBlackTree()
        tree.put(5, None)
        assert tree.values_in_range(1, 10) == [5]
        assert tree.values_in_range(6, 10) == []

    def test_balanced_tree_reports_subtree_roots(self, small_tree):
        """Test that collected subtrees are reported by their root key."""
        # 2(1, 4(3, 6(5, 7)))
        assert small_tree.values_in_range(1, 7) == [1, 3, 5, 7]

    def test_query_does_not_mutate(self, small_tree, assert_valid):
        """Test that the query leaves the tree untouched."""
        before = list(small_tree)
        small_tree.values_in_range(2, 6)
        assert list(small_tree) == before
        assert_valid(small_tree)
