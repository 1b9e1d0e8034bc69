"""
Key validation run before every tree access.
"""

import weakref
from collections.abc import Iterator, Mapping, MutableSequence, Set

from redblack.models.exceptions import DisallowedKeyKindError, NilKeyError

# Containers whose contents can change after the key is placed in the tree.
_DISALLOWED_TYPES = (
    Mapping,
    MutableSequence,
    Set,
    bytearray,
    memoryview,
    Iterator,
    weakref.ReferenceType,
)


def validate_key(key: object) -> None:
    """
    Check that `key` may be stored in a tree.

    Args:
        key: Candidate key.

    Raises:
        NilKeyError: If the key is None.
        DisallowedKeyKindError: If the key is a callable, a mapping, a
            mutable or set-like container, an iterator, a weak reference
            or a bare object() instance.
    """
    if key is None:
        raise NilKeyError()

    if type(key) is object or callable(key) or isinstance(key, _DISALLOWED_TYPES):
        raise DisallowedKeyKindError(key)
