"""
Dictionary - Main proverb dictionary API.
"""

import logging
import threading
from collections.abc import Iterable

from olelo.interfaces.ordered_container import OrderedContainer
from olelo.models.entry import Entry
from olelo.models.sortedcontainers import BalancedTree
from olelo.models.word_index import WordIndex

logger = logging.getLogger(__name__)


class Dictionary:
    """
    Bilingual ʻōlelo noʻeau dictionary.

    Provides:
    - insert(entry): Add an entry (duplicate Hawaiian phrases are discarded)
    - member(key) / search(key): Exact phrase lookup
    - first() / last(): Alphabetically first and last entries
    - predecessor(ref) / successor(ref): Neighbouring entries
    - me_hua(word): Entries whose Hawaiian phrase contains word
    - with_word(word): Entries whose English translation contains word

    Architecture:
    - Phrase order lives in an OrderedContainer (balanced tree by default)
    - Word lookups go to a WordIndex sharing the same Entry objects
    - A reentrant lock serializes writers with readers, since tree rotations
      relink several nodes non-atomically
    """

    def __init__(
        self,
        container: OrderedContainer | None = None,
        word_index: WordIndex | None = None,
    ) -> None:
        """
        Initialize the dictionary.

        Args:
            container: Ordered storage for entries. Defaults to a new BalancedTree.
            word_index: Word lookup index. Defaults to a new WordIndex.
        """
        if container is not None and not isinstance(container, OrderedContainer):
            raise TypeError(
                f"container must be an OrderedContainer, got {type(container).__name__}"
            )
        if word_index is not None and not isinstance(word_index, WordIndex):
            raise TypeError(
                f"word_index must be a WordIndex, got {type(word_index).__name__}"
            )

        self._container = container if container is not None else BalancedTree()
        self._word_index = word_index if word_index is not None else WordIndex()
        self._lock = threading.RLock()

    def insert(self, entry: Entry) -> bool:
        """
        Add an entry to the dictionary.

        Args:
            entry: The entry to add.

        Returns:
            True if added, False if an entry with the same Hawaiian phrase
            already exists (the existing entry is kept unchanged).
        """
        with self._lock:
            if not self._container.insert(entry):
                return False
            self._word_index.add_entry(entry)
            return True

    def batch_insert(self, entries: Iterable[Entry]) -> list[bool]:
        """
        Add multiple entries.

        Args:
            entries: Entries to add, in order.

        Returns:
            List of insert results for each entry.

        Raises:
            TypeError: If any item is not an Entry. Nothing is inserted.
        """
        batch = list(entries)
        for position, entry in enumerate(batch):
            if not isinstance(entry, Entry):
                raise TypeError(
                    f"batch item {position} must be an Entry, got {type(entry).__name__}"
                )

        with self._lock:
            results = [self.insert(entry) for entry in batch]

        logger.debug(
            "Batch insert: %d added, %d duplicates discarded",
            results.count(True),
            results.count(False),
        )
        return results

    def member(self, key: str) -> bool:
        with self._lock:
            return self._container.member(key)

    def search(self, key: str) -> Entry | None:
        with self._lock:
            return self._container.search(key)

    def first(self) -> Entry:
        """Alphabetically first entry. Raises EmptyTreeError when empty."""
        with self._lock:
            return self._container.first()

    def last(self) -> Entry:
        """Alphabetically last entry. Raises EmptyTreeError when empty."""
        with self._lock:
            return self._container.last()

    def predecessor(self, reference: str | Entry) -> Entry | None:
        with self._lock:
            return self._container.predecessor(reference)

    def successor(self, reference: str | Entry) -> Entry | None:
        with self._lock:
            return self._container.successor(reference)

    def me_hua(self, word: str) -> list[Entry]:
        """Entries whose Hawaiian phrase contains word ("me ka hua", with the word)."""
        with self._lock:
            return self._word_index.search_hawaiian(word)

    def with_word(self, word: str) -> list[Entry]:
        """Entries whose English translation contains word."""
        with self._lock:
            return self._word_index.search_english(word)

    def entries(self, start: str | None = None, end: str | None = None) -> list[Entry]:
        """
        Snapshot of entries with keys in [start, end).

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, runs to the end.

        Returns:
            List of entries in sorted order.
        """
        with self._lock:
            return list(self._container.iterator(start, end))

    def size(self) -> int:
        with self._lock:
            return self._container.size()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Entry):
            key = key.key
        if not isinstance(key, str):
            return False
        return self.member(key)
