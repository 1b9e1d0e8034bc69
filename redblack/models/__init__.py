"""
Data models for the Red-Black Tree.
"""

from redblack.models.comparators import (
    Comparator,
    int_comparator,
    natural_comparator,
    string_comparator,
)
from redblack.models.exceptions import (
    DisallowedKeyKindError,
    InvalidKeyError,
    NilKeyError,
)
from redblack.models.keys import validate_key
from redblack.models.node import Color, Direction, Node

__all__ = [
    "Color",
    "Comparator",
    "Direction",
    "DisallowedKeyKindError",
    "InvalidKeyError",
    "NilKeyError",
    "Node",
    "int_comparator",
    "natural_comparator",
    "string_comparator",
    "validate_key",
]
