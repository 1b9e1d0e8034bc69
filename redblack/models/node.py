"""
Node, Color and Direction for the Red-Black Tree.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1

    def __str__(self) -> str:
        return "Black" if self is Color.BLACK else "Red"


class Direction(IntEnum):
    """Side of a parent a key sits on (or would be attached to)."""

    LEFT = 0
    RIGHT = 1
    NONE = 2  # Root position, no parent

    def __str__(self) -> str:
        if self is Direction.LEFT:
            return "left"
        if self is Direction.RIGHT:
            return "right"
        return "center"


@dataclass(eq=False)
class Node:
    """
    Node in the Red-Black Tree.

    Attributes:
        key: Comparator-ordered key.
        payload: Value mapped to the key, overwritten in place on re-put.
        color: RED for freshly attached nodes.
        left: Left child, owned by this node.
        right: Right child, owned by this node.
        parent: Back-reference used only to navigate during fix-up.
        leaf: Marker used by hand-built range query trees.
    """

    key: Any
    payload: Any = None
    color: Color = Color.RED
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)
    parent: "Node | None" = field(default=None, repr=False)
    leaf: bool = False

    def __str__(self) -> str:
        return f"({self.key!r} : {self.color})"

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def is_red(node: Node | None) -> bool:
    """A missing node counts as black."""
    return node is not None and node.color == Color.RED


def minimum(node: Node) -> Node:
    """Return the node holding the smallest key under `node`."""
    while node.left is not None:
        node = node.left
    return node
