"""
JSON snapshot of a tree's shape for offline inspection.
"""

import json
from pathlib import Path
from typing import Any

from redblack.models.node import Node
from redblack.models.sortedcontainers import RedBlackTree


def node_to_dict(node: Node | None) -> dict[str, Any] | None:
    if node is None:
        return None
    return {
        "key": node.key,
        "leftNode": node_to_dict(node.left),
        "rightNode": node_to_dict(node.right),
        "isLeaf": node.leaf,
    }


def snapshot(tree: RedBlackTree) -> dict[str, Any]:
    """
    Describe the tree as nested dicts.

    Args:
        tree: Tree to describe. Only keys, child links and leaf flags
            are recorded; payloads and colors are not.

    Returns:
        {"root": node} where each node is
        {"key", "leftNode", "rightNode", "isLeaf"}.
    """
    return {"root": node_to_dict(tree.root)}


def dumps(tree: RedBlackTree) -> str:
    return json.dumps(snapshot(tree), indent=" ")


def write_snapshot(tree: RedBlackTree, path: str | Path = "tree.json") -> Path:
    """Write the snapshot as JSON to `path` and return the path."""
    path = Path(path)
    path.write_text(dumps(tree), encoding="utf-8")
    return path
