"""
Sorted container implementations.
"""

from redblack.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree"]
