"""
Split-node range query over integer-keyed trees.

The query mirrors the one-dimensional range tree search: find a split
node, then walk one path down its left side and one down its right
side, collecting the subtrees that hang inside the interval. A walk
ends at a leaf-flagged or childless node.

Limits:
- The split node is the first node met whose key lies in [lo, hi],
  found by descending left whenever a left child exists and right
  otherwise. It is not the node where the search paths for lo and hi
  diverge, so on general trees in-range nodes can be missed and
  out-of-range subtrees collected.
- Each collected subtree is reported by its root key only.
- Walks are iterative and always descend, so they end within the
  height of the tree, but nothing ties that height to the balance of
  the tree they run on.

Hand-built range trees (see redblack.query.sample) satisfy the shape the
walk expects. Do not rely on the result for arbitrary red-black trees.
"""

import logging

from redblack.models.node import Node

logger = logging.getLogger(__name__)


def _in_range(node: Node, lo: int, hi: int) -> bool:
    return lo <= node.key <= hi


def _is_terminal(node: Node) -> bool:
    return node.leaf or node.is_leaf()


def get_split_node(node: Node | None, lo: int, hi: int) -> Node | None:
    """
    Return the first node on the descent whose key lies in [lo, hi].

    Args:
        node: Subtree root to start from.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The split node, or None when the descent runs out of nodes.
    """
    while node is not None:
        if _in_range(node, lo, hi):
            logger.debug(f"Found split node {node}")
            return node
        node = node.left if node.left is not None else node.right
    return None


def nodes_in_range(root: Node | None, lo: int, hi: int) -> list[Node]:
    """
    Collect the nodes that cover [lo, hi], in collection order.

    Left path nodes come first, then right path nodes. Each collected
    node stands for the subtree it roots.

    Args:
        root: Root of the tree to query.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        List of collected nodes; empty if no split node exists.

    Raises:
        TypeError: If lo or hi is not an int.
    """
    if not isinstance(lo, int) or not isinstance(hi, int):
        raise TypeError(
            f"range bounds must be int, got {type(lo).__name__} and {type(hi).__name__}"
        )

    logger.debug(f"Query values between {lo} and {hi}")
    if lo > hi:
        return []

    split = get_split_node(root, lo, hi)
    if split is None:
        logger.debug("Couldn't find split node")
        return []

    if _is_terminal(split):
        return [split]

    collected: list[Node] = []

    # Going left
    current = split.left
    while current is not None and not _is_terminal(current):
        if lo <= current.key:
            if current.right is not None:
                collected.append(current.right)
            current = current.left
        else:
            current = current.right

    if current is not None and _in_range(current, lo, hi):
        collected.append(current)

    # Going right
    current = split.right
    while current is not None and not _is_terminal(current):
        if current.key <= hi:
            if current.left is not None:
                collected.append(current.left)
            current = current.right
        else:
            current = current.left

    if current is not None and _in_range(current, lo, hi):
        collected.append(current)

    return collected


def values_in_range(root: Node | None, lo: int, hi: int) -> list[int]:
    """Keys of nodes_in_range(root, lo, hi), in the same order."""
    keys = [node.key for node in nodes_in_range(root, lo, hi)]
    logger.debug(f"Values in range [{lo}, {hi}] -> {keys}")
    return keys
