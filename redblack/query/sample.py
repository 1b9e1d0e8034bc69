"""
The worked range query example: a hand-built range tree over 12 keys.

Internal nodes route the search; the bottom level repeats every key as
a leaf-flagged node. The tree is not red-black and must not be mutated.

                          49
                 /                  \\
               23                    80
            /      \\              /      \\
          10        37          62        89
         /  \\      /  \\        /  \\        \\
        3    19   30  [49]    59    70      100
       / \\  / \\  / \\       / \\  / \\     /
    [3][10][19][23][30][37][59][62][70][80] [100]
"""

from redblack.models.node import Node
from redblack.models.sortedcontainers import RedBlackTree


def _leaf(key: int) -> Node:
    return Node(key=key, leaf=True)


def _inner(key: int, left: Node | None = None, right: Node | None = None) -> Node:
    node = Node(key=key, left=left, right=right)
    for child in (left, right):
        if child is not None:
            child.parent = node
    return node


def build_sample_range_tree() -> RedBlackTree:
    """Build the fixture tree rooted at 49, with subtrees at 23 and 80."""
    node3 = _inner(3, _leaf(3), _leaf(10))
    node19 = _inner(19, _leaf(19), _leaf(23))
    node30 = _inner(30, _leaf(30), _leaf(37))
    node59 = _inner(59, _leaf(59), _leaf(62))
    node70 = _inner(70, _leaf(70), _leaf(80))
    node100 = _inner(100, left=_leaf(100))

    node10 = _inner(10, node3, node19)
    node37 = _inner(37, node30, _leaf(49))
    node62 = _inner(62, node59, node70)
    node89 = _inner(89, right=node100)

    node23 = _inner(23, node10, node37)
    node80 = _inner(80, node62, node89)

    return RedBlackTree.from_root(_inner(49, node23, node80))
