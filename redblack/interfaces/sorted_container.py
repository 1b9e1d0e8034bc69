"""
SortedContainer abstract base class for ordered key-payload mappings.
"""

from abc import abstractmethod
from typing import Any

from redblack.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-payload containers.

    Provides O(log N) operations for put, get, and delete.
    Inherits range iteration capabilities from RangeIterable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def put(self, key: Any, payload: Any) -> None:
        """
        Insert or overwrite a key-payload pair.

        Args:
            key: The key to insert/update.
            payload: The payload to associate with the key.

        Raises:
            InvalidKeyError: If the key fails validation.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> tuple[bool, Any]:
        """
        Retrieve the payload for a given key.

        Args:
            key: The key to look up.

        Returns:
            (True, payload) if found, (False, None) otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-payload pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-payload pairs.

        Returns:
            The count of entries in the container.
        """
        pass
