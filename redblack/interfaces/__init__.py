"""
Abstract base classes and protocols for ordered containers.
"""

from redblack.interfaces.range_iterable import RangeIterable
from redblack.interfaces.sorted_container import SortedContainer
from redblack.interfaces.visitor import Visitable, Visitor

__all__ = ["RangeIterable", "SortedContainer", "Visitable", "Visitor"]
