"""
Shared pytest fixtures for Red-Black Tree tests.
"""

import pytest

from redblack.diagnostics import trace_off
from redblack.models.node import Color
from redblack.models.sortedcontainers import RedBlackTree
from redblack.query.sample import build_sample_range_tree


def check_red_black(tree: RedBlackTree) -> int:
    """
    Assert every red-black property of `tree` and return its black height.

    Written against the raw node links so it shares no code with the tree.
    """
    root = tree.root
    if root is None:
        return 0

    assert root.parent is None, "root has a parent"
    assert root.color == Color.BLACK, "root is red"

    keys = []

    def walk(node, parent):
        if node is None:
            return 0

        assert node.parent is parent, f"broken parent link at {node}"
        if node.color == Color.RED:
            for child in (node.left, node.right):
                assert child is None or child.color == Color.BLACK, (
                    f"red node {node} has red child {child}"
                )

        left_height = walk(node.left, node)
        keys.append(node.key)
        right_height = walk(node.right, node)

        assert left_height == right_height, f"black height differs under {node}"
        return left_height + (1 if node.color == Color.BLACK else 0)

    height = walk(root, None)

    for smaller, larger in zip(keys, keys[1:]):
        assert tree.comparator(smaller, larger) < 0, f"{smaller} !< {larger}"

    return height


@pytest.fixture
def assert_valid():
    """Provide the independent invariant checker."""
    return check_red_black


@pytest.fixture
def tree():
    """Provide a fresh, empty int-keyed tree."""
    return RedBlackTree()


@pytest.fixture
def small_tree():
    """Provide a tree holding 1..7 inserted in ascending order."""
    t = RedBlackTree()
    for i in range(1, 8):
        t.put(i, f"value{i}")
    return t


@pytest.fixture
def sample_tree():
    """Provide the hand-built range query fixture tree."""
    return build_sample_range_tree()


@pytest.fixture
def tracing():
    """Make sure any trace sink a test installs is removed afterwards."""
    yield
    trace_off()
