"""
Data models for the dictionary.

The ordered containers live in olelo.models.sortedcontainers and are not
re-exported here, since they depend on olelo.interfaces, which in turn
depends on Entry.
"""

from olelo.models.entry import Entry
from olelo.models.exceptions import EmptyTreeError
from olelo.models.word_index import WordIndex

__all__ = [
    "Entry",
    "EmptyTreeError",
    "WordIndex",
]
