"""
Comparator functions for ordering tree keys.

A comparator returns a negative number, zero or a positive number when
its first argument is less than, equal to or greater than the second.
Comparators must define a strict total order over the keys they are
given; a tree built on anything weaker has undefined shape.
"""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def int_comparator(o1: Any, o2: Any) -> int:
    """Compare two ints. Raises TypeError for anything else."""
    if not isinstance(o1, int) or not isinstance(o2, int):
        raise TypeError(
            f"int_comparator expects int keys, got {type(o1).__name__} "
            f"and {type(o2).__name__}"
        )
    if o1 > o2:
        return 1
    if o1 < o2:
        return -1
    return 0


def string_comparator(o1: Any, o2: Any) -> int:
    """Compare two strings by the byte order of their UTF-8 encoding."""
    if not isinstance(o1, str) or not isinstance(o2, str):
        raise TypeError(
            f"string_comparator expects str keys, got {type(o1).__name__} "
            f"and {type(o2).__name__}"
        )
    b1 = o1.encode("utf-8")
    b2 = o2.encode("utf-8")
    return (b1 > b2) - (b1 < b2)


def natural_comparator(o1: Any, o2: Any) -> int:
    """Compare using the keys' own ordering operators."""
    return (o1 > o2) - (o1 < o2)
