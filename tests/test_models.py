"""
Tests for data models: Node, Color, Direction, comparators, key validation and visitors.
"""

import weakref

import pytest

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
    validate_key,
)
from redblack.models.node import is_red, minimum
from redblack.models.sortedcontainers import RedBlackTree
from redblack.models.visitors import CountingVisitor, InorderVisitor


class TestNode:
    """Tests for Node, Color and Direction."""

    def test_new_node_is_red(self):
        """Test that a node defaults to red with no links."""
        node = Node(key=5)
        assert node.color == Color.RED
        assert node.left is None and node.right is None and node.parent is None
        assert not node.leaf

    def test_str(self):
        """Test node string rendering."""
        assert str(Node(key=5, color=Color.BLACK)) == "(5 : Black)"
        assert str(Node(key="a")) == "('a' : Red)"

    def test_repr_skips_links(self):
        """Test repr does not recurse through parent back-references."""
        parent = Node(key=2)
        child = Node(key=1, parent=parent)
        parent.left = child

        assert "key=1" in repr(child)
        assert "parent" not in repr(child)

    def test_is_leaf(self):
        """Test structural leaf detection."""
        node = Node(key=1)
        assert node.is_leaf()
        node.left = Node(key=0, parent=node)
        assert not node.is_leaf()

    def test_is_red_treats_none_as_black(self):
        """Test that a missing node counts as black."""
        assert not is_red(None)
        assert is_red(Node(key=1))
        assert not is_red(Node(key=1, color=Color.BLACK))

    def test_minimum(self):
        """Test minimum follows left links."""
        root = Node(key=5)
        root.left = Node(key=3, parent=root)
        root.left.left = Node(key=1, parent=root.left)
        assert minimum(root).key == 1
        assert minimum(root.left.left).key == 1

    def test_enum_strings(self):
        """Test Color and Direction string forms."""
        assert str(Color.RED) == "Red"
        assert str(Color.BLACK) == "Black"
        assert str(Direction.LEFT) == "left"
        assert str(Direction.RIGHT) == "right"
        assert str(Direction.NONE) == "center"


class TestComparators:
    """Tests for the stock comparators."""

    def test_int_comparator(self):
        """Test int ordering."""
        assert int_comparator(1, 2) == -1
        assert int_comparator(2, 1) == 1
        assert int_comparator(7, 7) == 0

    def test_int_comparator_rejects_other_types(self):
        """Test that non-int keys raise TypeError."""
        with pytest.raises(TypeError):
            int_comparator("1", 2)
        with pytest.raises(TypeError):
            int_comparator(1.5, 2)

    def test_string_comparator(self):
        """Test byte-wise string ordering."""
        assert string_comparator("abc", "abd") == -1
        assert string_comparator("b", "a") == 1
        assert string_comparator("same", "same") == 0
        assert string_comparator("Z", "a") == -1
        assert string_comparator("é", "z") == 1

    def test_string_comparator_rejects_other_types(self):
        """Test that non-str keys raise TypeError."""
        with pytest.raises(TypeError):
            string_comparator(b"a", "a")

    def test_natural_comparator(self):
        """Test ordering via the keys' own operators."""
        assert natural_comparator((1, "a"), (1, "b")) == -1
        assert natural_comparator(2.5, 2) == 1
        assert natural_comparator("x", "x") == 0


class TestKeyValidation:
    """Tests for key validation."""

    @pytest.mark.parametrize("key", [0, -3, 1.5, "", "key", b"raw", (1, 2), True])
    def test_allowed_keys(self, key):
        """Test that scalar and immutable keys pass."""
        validate_key(key)

    def test_none_key(self):
        """Test that None raises NilKeyError."""
        with pytest.raises(NilKeyError):
            validate_key(None)

    @pytest.mark.parametrize(
        "key, kind",
        [
            ([1, 2], "list"),
            ({"a": 1}, "dict"),
            ({1, 2}, "set"),
            (frozenset({1}), "frozenset"),
            (bytearray(b"x"), "bytearray"),
            (lambda: None, "function"),
            (len, "builtin_function_or_method"),
            (iter([1]), "list_iterator"),
            (object(), "object"),
        ],
    )
    def test_disallowed_keys(self, key, kind):
        """Test that non-comparable composites raise DisallowedKeyKindError."""
        with pytest.raises(DisallowedKeyKindError) as exc_info:
            validate_key(key)
        assert exc_info.value.kind == kind

    def test_weak_reference_key(self):
        """Test that reference handles are rejected."""
        target = Node(key=1)
        with pytest.raises(DisallowedKeyKindError):
            validate_key(weakref.ref(target))

    def test_errors_share_base(self):
        """Test that both errors are InvalidKeyError."""
        assert issubclass(NilKeyError, InvalidKeyError)
        assert issubclass(DisallowedKeyKindError, InvalidKeyError)


class TestVisitors:
    """Tests for CountingVisitor and InorderVisitor."""

    def test_counting_empty(self):
        """Test counting an empty tree."""
        visitor = CountingVisitor()
        RedBlackTree().walk(visitor)
        assert visitor.count == 0

    def test_counting(self, small_tree):
        """Test counting a populated tree."""
        visitor = CountingVisitor()
        small_tree.walk(visitor)
        assert visitor.count == 7

    def test_inorder_empty(self):
        """Test that an empty tree serializes to the null marker."""
        visitor = InorderVisitor()
        RedBlackTree().walk(visitor)
        assert str(visitor) == "."

    def test_inorder_shape(self):
        """Test that serialization records shape."""
        tree = RedBlackTree()
        for key in (1, 2, 3):
            tree.put(key, None)

        visitor = InorderVisitor()
        tree.walk(visitor)
        assert str(visitor) == "((.1.)2(.3.))"

    def test_inorder_equality(self):
        """Test that equal shapes compare equal and different shapes do not."""

        def serialize(keys):
            tree = RedBlackTree()
            for key in keys:
                tree.put(key, None)
            visitor = InorderVisitor()
            tree.walk(visitor)
            return visitor

        assert serialize([1, 2, 3]) == serialize([2, 1, 3])
        assert serialize([1, 2]) != serialize([2, 1])
        assert str(serialize([1, 2])) == "(.1(.2.))"
        assert str(serialize([2, 1])) == "((.1.)2.)"

    def test_inorder_not_equal_to_other_types(self):
        """Test comparison against a non-visitor."""
        visitor = InorderVisitor()
        visitor.visit(None)
        assert (visitor == ".") is False
