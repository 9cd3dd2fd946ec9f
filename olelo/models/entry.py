"""
Entry - a single proverb with its translation and explanations.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Entry:
    """
    An ʻōlelo noʻeau stored in the dictionary.

    Equality, hashing and ordering use the Hawaiian phrase only, so two
    entries with the same key compare equal even when their translations
    differ.

    Attributes:
        key: The Hawaiian phrase. Sole ordering key (code-point order).
        translation: The English translation.
        key_explanation: Notes on the Hawaiian phrase.
        translation_explanation: Notes on the English translation.
    """

    key: str
    translation: str = field(compare=False)
    key_explanation: str = field(default="", compare=False)
    translation_explanation: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise ValueError(f"key must be a string, got {type(self.key).__name__}")
        if not self.key:
            raise ValueError("key cannot be empty")
        if not isinstance(self.translation, str):
            raise ValueError(
                f"translation must be a string, got {type(self.translation).__name__}"
            )
