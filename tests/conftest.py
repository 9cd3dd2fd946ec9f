"""
Shared pytest fixtures for dictionary tests.
"""

import pytest

from olelo.dictionary import Dictionary
from olelo.models.entry import Entry
from olelo.models.sortedcontainers import BalancedTree


@pytest.fixture
def tree():
    """Provide a fresh, empty BalancedTree."""
    return BalancedTree()


@pytest.fixture
def dictionary():
    """Provide a fresh, empty Dictionary."""
    return Dictionary()


@pytest.fixture
def aloha():
    return Entry(
        key="Aloha kekahi i kekahi",
        translation="Love one another",
        key_explanation="He ʻōlelo aʻo no ke aloha.",
        translation_explanation="A reminder to care for each other.",
    )


@pytest.fixture
def olelo_saying():
    return Entry(key="I ka ʻōlelo no ke ola", translation="In language there is life")


@pytest.fixture
def sample_entries():
    """Provide a handful of proverbs in no particular order."""
    return [
        Entry(key="Pūpūkahi i holomua", translation="Unite in order to progress"),
        Entry(key="Aloha kekahi i kekahi", translation="Love one another"),
        Entry(key="ʻAʻohe pau ka ʻike i ka hālau hoʻokahi",
              translation="Not all knowledge is learned in one school"),
        Entry(key="I ka ʻōlelo no ke ola", translation="In language there is life"),
        Entry(key="Ma ka hana ka ʻike", translation="In working one learns"),
    ]


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [Entry(key=f"key{i:04d}", translation=f"value{i}") for i in range(1000)]
