"""
Dictionary facade composing the ordered tree and the word index.
"""

from olelo.dictionary.dictionary import Dictionary

__all__ = ["Dictionary"]
