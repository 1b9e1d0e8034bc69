"""
Custom exceptions for the Red-Black Tree.
"""


class InvalidKeyError(Exception):
    """
    Raised when a key fails validation.

    Validation happens before the tree is touched, so a failed call
    leaves the tree exactly as it was.
    """


class NilKeyError(InvalidKeyError):
    """Raised when None is used as a key."""

    def __init__(self) -> None:
        super().__init__("The literal None is not allowed as a key")


class DisallowedKeyKindError(InvalidKeyError):
    """
    Raised when a key is of a kind that cannot be ordered stably.

    Covers callables, mappings, mutable containers, iterators and other
    handles whose identity or contents may change under the tree.
    """

    def __init__(self, key: object):
        """
        Initialize disallowed key error.

        Args:
            key: The rejected key.
        """
        self.kind = type(key).__name__
        super().__init__(f"Disallowed key type: {self.kind}")
