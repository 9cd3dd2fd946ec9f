"""
OrderedContainer abstract base class for key-ordered entry storage.
"""

from abc import abstractmethod

from olelo.interfaces.range_iterable import RangeIterable
from olelo.models.entry import Entry


class OrderedContainer(RangeIterable):
    """
    Abstract base class for containers holding entries sorted by key.

    Provides O(log N) insertion, lookup and neighbour queries.
    Inherits ordered iteration from RangeIterable.

    Implementations:
    - BalancedTree: left-leaning red-black tree
    """

    @abstractmethod
    def insert(self, entry: Entry) -> bool:
        """
        Insert an entry keyed by entry.key.

        An entry whose key is already stored is discarded and the stored
        entry is left untouched.

        Args:
            entry: The entry to insert.

        Returns:
            True if the entry was stored, False if its key was already present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, key: str) -> Entry | None:
        """
        Retrieve the entry stored under key.

        Args:
            key: The Hawaiian phrase to look up.

        Returns:
            The entry if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def member(self, key: str) -> bool:
        """Return True if an entry is stored under key. O(log N)"""
        pass

    @abstractmethod
    def first(self) -> Entry:
        """
        Return the entry with the smallest key.

        Raises:
            EmptyTreeError: If the container holds no entries.
        """
        pass

    @abstractmethod
    def last(self) -> Entry:
        """
        Return the entry with the largest key.

        Raises:
            EmptyTreeError: If the container holds no entries.
        """
        pass

    @abstractmethod
    def predecessor(self, reference: str | Entry) -> Entry | None:
        """
        Return the entry with the greatest key strictly less than reference.

        Args:
            reference: A key, or an entry whose key is used.

        Returns:
            The neighbouring entry, or None if nothing is smaller.
        """
        pass

    @abstractmethod
    def successor(self, reference: str | Entry) -> Entry | None:
        """
        Return the entry with the least key strictly greater than reference.

        Args:
            reference: A key, or an entry whose key is used.

        Returns:
            The neighbouring entry, or None if nothing is larger.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored entries.

        Time complexity: O(1)
        """
        pass
