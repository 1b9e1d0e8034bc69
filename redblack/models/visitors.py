"""
Stock visitors: node counting and inorder shape serialization.
"""

from io import StringIO

from redblack.interfaces.visitor import Visitor
from redblack.models.node import Node


class CountingVisitor(Visitor):
    """Counts the nodes in a tree."""

    def __init__(self) -> None:
        self.count = 0

    def visit(self, node: Node | None) -> None:
        if node is None:
            return

        self.visit(node.left)
        self.count += 1
        self.visit(node.right)


class InorderVisitor(Visitor):
    """
    Serializes a tree inorder, keeping its shape.

    Each node is written as "(" left key right ")" and every missing
    child as ".", so two trees serialize equally only when they hold the
    same keys in the same arrangement. Colors are not recorded.

    The buffer accumulates across calls; use a fresh visitor per walk.
    """

    NIL = "."

    def __init__(self) -> None:
        self._buffer = StringIO()

    def visit(self, node: Node | None) -> None:
        if node is None:
            self._buffer.write(self.NIL)
            return

        self._buffer.write("(")
        self.visit(node.left)
        self._buffer.write(str(node.key))
        self.visit(node.right)
        self._buffer.write(")")

    def __str__(self) -> str:
        return self._buffer.getvalue()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InorderVisitor):
            return NotImplemented
        return str(self) == str(other)

    __hash__ = None
