"""
Read-only queries layered on top of the tree.
"""

from redblack.query.range_query import get_split_node, nodes_in_range, values_in_range

__all__ = ["get_split_node", "nodes_in_range", "values_in_range"]
