"""
WordIndex - maps individual words to the entries that contain them.
"""

import logging

from olelo.models.entry import Entry

logger = logging.getLogger(__name__)


class WordIndex:
    """
    Unordered multi-map from whitespace-separated tokens to entries.

    Hawaiian phrases and English translations are indexed in separate
    tables. Matching is exact and case-sensitive. Entries are held by
    identity, so the index shares the objects stored in the tree instead
    of copying them.
    """

    def __init__(self) -> None:
        self._hawaiian: dict[str, dict[int, Entry]] = {}
        self._english: dict[str, dict[int, Entry]] = {}
        self._entries: dict[int, Entry] = {}

    def add_entry(self, entry: Entry) -> None:
        """
        Index every word of the entry's phrase and translation.

        Args:
            entry: The entry to index. Adding the same object twice is a no-op.
        """
        if id(entry) in self._entries:
            return

        self._entries[id(entry)] = entry
        self._add_to_table(entry.key, entry, self._hawaiian)
        self._add_to_table(entry.translation, entry, self._english)
        logger.debug("Indexed entry %r", entry.key)

    def search_hawaiian(self, word: str) -> list[Entry]:
        """Entries whose Hawaiian phrase contains word, in indexing order."""
        return self._lookup(word, self._hawaiian)

    def search_english(self, word: str) -> list[Entry]:
        """Entries whose English translation contains word, in indexing order."""
        return self._lookup(word, self._english)

    def size(self) -> int:
        return len(self._entries)

    def _add_to_table(
        self, text: str, entry: Entry, table: dict[str, dict[int, Entry]]
    ) -> None:
        # str.split() without arguments drops empty tokens from leading,
        # trailing and repeated whitespace
        for word in text.split():
            table.setdefault(word, {})[id(entry)] = entry

    @staticmethod
    def _lookup(word: str, table: dict[str, dict[int, Entry]]) -> list[Entry]:
        entries = table.get(word)
        if not entries:
            return []
        return list(entries.values())
