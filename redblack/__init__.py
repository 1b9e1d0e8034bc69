"""
Ordered key-payload mapping backed by a Red-Black Tree.

This package provides:
- put(key, payload) - O(log N) insert or overwrite
- get(key) / has(key) - O(log N) lookup
- delete(key) - O(log N) removal
- Sorted iteration, sync and async, optionally bounded to [start, end)
- values_in_range(lo, hi) - split-node range query over integer keys
- walk(visitor) - visitor-based traversal (counting, inorder shape)
"""

from redblack.models import (
    Color,
    Direction,
    DisallowedKeyKindError,
    InvalidKeyError,
    NilKeyError,
    Node,
    int_comparator,
    natural_comparator,
    string_comparator,
)
from redblack.models.sortedcontainers import RedBlackTree
from redblack.models.visitors import CountingVisitor, InorderVisitor

__all__ = [
    "Color",
    "CountingVisitor",
    "Direction",
    "DisallowedKeyKindError",
    "InorderVisitor",
    "InvalidKeyError",
    "NilKeyError",
    "Node",
    "RedBlackTree",
    "int_comparator",
    "natural_comparator",
    "string_comparator",
]
