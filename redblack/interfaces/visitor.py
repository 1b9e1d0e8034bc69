"""
Visitor and Visitable protocols for walking a tree.
"""

from abc import ABC, abstractmethod

from redblack.models.node import Node


class Visitor(ABC):
    """
    Protocol for objects that walk a tree node by node.

    The walk hands the visitor the root only; the visitor decides how to
    recurse. Absent children are passed as None so a visitor can record
    the shape of the tree and not just its keys.
    """

    @abstractmethod
    def visit(self, node: Node | None) -> None:
        """
        Visit a node or an empty position.

        Args:
            node: The node, or None for a missing child.
        """
        pass


class Visitable(ABC):
    """Protocol for structures that accept a Visitor."""

    @abstractmethod
    def walk(self, visitor: Visitor) -> None:
        """Apply `visitor` starting at the root."""
        pass
