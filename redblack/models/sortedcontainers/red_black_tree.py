"""
Red-Black Tree implementation of an ordered key-payload mapping.

Keys are ordered by a caller-supplied comparator. Lookup, insert and
delete are O(log N); iteration is in comparator order.
"""

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

from redblack.interfaces.sorted_container import SortedContainer
from redblack.interfaces.visitor import Visitable, Visitor
from redblack.models.comparators import Comparator, int_comparator
from redblack.models.exceptions import InvalidKeyError
from redblack.models.keys import validate_key
from redblack.models.node import Color, Direction, Node, is_red, minimum
from redblack.models.visitors import CountingVisitor
from redblack.query import range_query


class RedBlackTree(SortedContainer, Visitable):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained after every put and delete:
    1. Root is always black
    2. Red nodes cannot have red children (missing children count as black)
    3. Every path from a node to a missing descendant has the same
       number of black nodes
    4. Left subtree keys compare less, right subtree keys greater

    The tree is not synchronized; callers serialize access themselves.
    """

    def __init__(
        self,
        comparator: Comparator = int_comparator,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize an empty tree.

        Args:
            comparator: Total order over keys, returning <0, 0 or >0.
                Defaults to int_comparator.
            logger: Receives structural trace events at DEBUG.
                Defaults to this module's logger.
        """
        self._root: Node | None = None
        self._cmp = comparator
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @classmethod
    def with_comparator(
        cls, comparator: Comparator, logger: logging.Logger | None = None
    ) -> "RedBlackTree":
        return cls(comparator=comparator, logger=logger)

    @classmethod
    def from_root(
        cls,
        root: Node | None,
        comparator: Comparator = int_comparator,
        logger: logging.Logger | None = None,
    ) -> "RedBlackTree":
        """
        Wrap an already linked node structure.

        No invariant is checked. Meant for hand-built fixtures such as
        range query trees; mutating such a tree gives undefined results.
        """
        tree = cls(comparator=comparator, logger=logger)
        tree._root = root
        return tree

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def comparator(self) -> Comparator:
        return self._cmp

    def put(self, key: Any, payload: Any) -> None:
        """Insert or overwrite a key-payload pair. O(log N)"""
        try:
            validate_key(key)
        except InvalidKeyError as e:
            self._logger.debug(f"put was prematurely aborted: {e}")
            raise

        if self._root is None:
            self._root = Node(key=key, payload=payload, color=Color.BLACK)
            self._logger.debug(f"Added {self._root} as root node")
            return

        node, parent, direction = self._locate(key)
        if node is not None:
            self._logger.debug(f"put: overwriting payload of {node}")
            node.payload = payload
            return

        new_node = Node(key=key, payload=payload, parent=parent)
        if direction == Direction.LEFT:
            parent.left = new_node
        else:
            parent.right = new_node

        self._logger.debug(f"Added {new_node} to {direction} of parent {parent}")
        self._fix_insert(new_node)

    def get(self, key: Any) -> tuple[bool, Any]:
        """Retrieve payload by key. O(log N)"""
        node = self._find_node(key, "get")
        if node is None:
            return False, None
        return True, node.payload

    def has(self, key: Any) -> bool:
        return self._find_node(key, "has") is not None

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def get_parent(self, key: Any) -> tuple[bool, Node | None, Direction]:
        """
        Locate `key` and report where it hangs.

        Args:
            key: The key to look up.

        Returns:
            (found, parent, direction). When found, `parent` holds the
            key's node on side `direction`; a key held by the root has
            no parent and Direction.NONE. When not found, `parent` is the
            node the key would be attached to and `direction` the side.
        """
        try:
            validate_key(key)
        except InvalidKeyError as e:
            self._logger.debug(f"get_parent was prematurely aborted: {e}")
            return False, None, Direction.NONE

        node, parent, direction = self._locate(key)
        return node is not None, parent, direction

    def delete(self, key: Any) -> bool:
        """Remove a key-payload pair. O(log N)"""
        node = self._find_node(key, "delete")
        if node is None:
            self._logger.debug(f"delete: no node exists for key {key!r}")
            return False

        self._logger.debug(f"delete: attempt to delete {node}")
        self._delete_node(node)
        return True

    def size(self) -> int:
        visitor = CountingVisitor()
        self.walk(visitor)
        return visitor.count

    def __len__(self) -> int:
        return self.size()

    def walk(self, visitor: Visitor) -> None:
        visitor.visit(self._root)

    def values_in_range(self, lo: int, hi: int) -> list[int]:
        """
        Collect keys of an integer-keyed tree using the split-node query.

        See redblack.query.range_query for the walk and its limits.
        """
        return range_query.values_in_range(self._root, lo, hi)

    def rotate_left(self, x: Node | None) -> None:
        """
        Promote x.right into x's position.

        x.right's left subtree becomes x's right subtree. A missing x or
        x.right makes this a logged no-op.
        """
        if x is None:
            self._logger.debug("rotate_left: None cannot be rotated. Noop")
            return
        if x.right is None:
            self._logger.debug(f"rotate_left: {x} has no right subtree. Noop")
            return
        self._logger.debug(f"rotate left of {x}")

        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x

        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y

        y.left = x
        x.parent = y

    def rotate_right(self, y: Node | None) -> None:
        """Mirror of rotate_left: promote y.left into y's position."""
        if y is None:
            self._logger.debug("rotate_right: None cannot be rotated. Noop")
            return
        if y.left is None:
            self._logger.debug(f"rotate_right: {y} has no left subtree. Noop")
            return
        self._logger.debug(f"rotate right of {y}")

        x = y.left
        y.left = x.right
        if x.right is not None:
            x.right.parent = y

        x.parent = y.parent
        if y.parent is None:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x

        x.right = y
        y.parent = x

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self._root, self._cmp, start, end)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncRangeIterator(_RangeIterator(self._root, self._cmp, start, end))

    def _find_node(self, key: Any, operation: str) -> Node | None:
        """Validate `key` and return its node, or None."""
        try:
            validate_key(key)
        except InvalidKeyError as e:
            self._logger.debug(f"{operation} was prematurely aborted: {e}")
            return None

        node, _, _ = self._locate(key)
        return node

    def _locate(self, key: Any) -> tuple[Node | None, Node | None, Direction]:
        """
        Descend from the root comparing `key` at each node.

        Returns (node, parent, direction): the matching node or None,
        the last node above it, and the side of that parent the key is
        on or would be attached to.
        """
        parent = None
        direction = Direction.NONE
        current = self._root

        while current is not None:
            order = self._cmp(key, current.key)
            if order == 0:
                return current, parent, direction

            parent = current
            if order < 0:
                current = current.left
                direction = Direction.LEFT
            else:
                current = current.right
                direction = Direction.RIGHT

        return None, parent, direction

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        self._logger.debug(f"fixup new node {node}")

        while is_red(node.parent):
            parent = node.parent
            # A red parent is never the root, so the grandparent exists.
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right

                if is_red(uncle):
                    # Case 1: Uncle is red
                    self._logger.debug(f"insert case 1 at {node}")
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.right:
                    # Case 2: Node is an inner child
                    self._logger.debug(f"insert case 2 at {node}")
                    node = parent
                    self.rotate_left(node)
                    parent = node.parent

                # Case 3: Node is an outer child
                self._logger.debug(f"insert case 3 at {node}")
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self.rotate_right(grandparent)
            else:
                uncle = grandparent.left

                if is_red(uncle):
                    self._logger.debug(f"insert case 1 (mirrored) at {node}")
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.left:
                    self._logger.debug(f"insert case 2 (mirrored) at {node}")
                    node = parent
                    self.rotate_right(node)
                    parent = node.parent

                self._logger.debug(f"insert case 3 (mirrored) at {node}")
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self.rotate_left(grandparent)

        self._root.color = Color.BLACK

    def _transplant(self, u: Node, v: Node | None) -> None:
        """Replace the subtree rooted at u with the one rooted at v."""
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v

        if v is not None:
            v.parent = u.parent

    def _delete_node(self, z: Node) -> None:
        """Unlink z, then restore the black height if a black node left."""
        original_color = z.color

        if z.left is None:
            self._logger.debug(f"delete: {z} has no left child")
            x = z.right
            x_parent = z.parent
            self._transplant(z, z.right)
        elif z.right is None:
            self._logger.debug(f"delete: {z} has no right child")
            x = z.left
            x_parent = z.parent
            self._transplant(z, z.left)
        else:
            y = minimum(z.right)
            self._logger.debug(f"delete: {z} has two children, successor {y}")
            original_color = y.color
            x = y.right

            if y.parent is z:
                x_parent = y
                if x is not None:
                    x.parent = y
            else:
                x_parent = y.parent
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y

            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        z.left = z.right = z.parent = None

        if original_color == Color.BLACK:
            self._fix_delete(x, x_parent)

    def _fix_delete(self, x: Node | None, parent: Node | None) -> None:
        """
        Fix Red-Black Tree properties after delete.

        x carries an extra black. It may be None, an empty slot below
        `parent`, so the loop tracks the parent explicitly instead of
        reading x.parent.
        """
        self._logger.debug(f"fixup delete at {x} under {parent}")

        while x is not self._root and not is_red(x):
            if x is parent.left:
                sibling = parent.right

                if is_red(sibling):
                    # Case 1: Sibling is red
                    self._logger.debug("delete case 1")
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self.rotate_left(parent)
                    sibling = parent.right

                if not is_red(sibling.left) and not is_red(sibling.right):
                    # Case 2: Both of sibling's children are black
                    self._logger.debug("delete case 2")
                    sibling.color = Color.RED
                    x = parent
                    parent = x.parent
                    continue

                if not is_red(sibling.right):
                    # Case 3: Far child black, near child red
                    self._logger.debug("delete case 3")
                    sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self.rotate_right(sibling)
                    sibling = parent.right

                # Case 4: Far child red
                self._logger.debug("delete case 4")
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self.rotate_left(parent)
                x = self._root
                parent = None
            else:
                sibling = parent.left

                if is_red(sibling):
                    self._logger.debug("delete case 1 (mirrored)")
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self.rotate_right(parent)
                    sibling = parent.left

                if not is_red(sibling.left) and not is_red(sibling.right):
                    self._logger.debug("delete case 2 (mirrored)")
                    sibling.color = Color.RED
                    x = parent
                    parent = x.parent
                    continue

                if not is_red(sibling.left):
                    self._logger.debug("delete case 3 (mirrored)")
                    sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self.rotate_left(sibling)
                    sibling = parent.left

                self._logger.debug("delete case 4 (mirrored)")
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self.rotate_right(parent)
                x = self._root
                parent = None

        if x is not None:
            x.color = Color.BLACK


class _RangeIterator(Iterator[tuple[Any, Any]]):
    """Inorder iterator over [start, end) of a Red-Black Tree."""

    def __init__(
        self,
        root: Node | None,
        comparator: Comparator,
        start: Any | None,
        end: Any | None,
    ) -> None:
        self._stack: list[Node] = []
        self._cmp = comparator
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and self._cmp(node.key, self._end) >= 0:
            self._stack.clear()
            raise StopIteration

        result = (node.key, node.payload)

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return result

    def _push_left_path(self, node: Node | None, start: Any | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and self._cmp(node.key, start) < 0:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[tuple[Any, Any]]):
    """Async view of a _RangeIterator (in-memory, no I/O)."""

    def __init__(self, inner: _RangeIterator) -> None:
        self._inner = inner

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
