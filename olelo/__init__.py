"""
In-memory bilingual ʻōlelo noʻeau (proverb) dictionary.

This package provides:
- insert(entry) - O(log N) balanced tree insert plus word indexing
- member(key) / search(key) - Exact lookup by Hawaiian phrase
- first() / last() - Alphabetical range edges
- predecessor(ref) / successor(ref) - Neighbouring phrases
- me_hua(word) / with_word(word) - Exact word lookup in either language
"""

from olelo.dictionary import Dictionary
from olelo.models.entry import Entry
from olelo.models.exceptions import EmptyTreeError

__all__ = ["Dictionary", "Entry", "EmptyTreeError"]
