"""
Left-leaning Red-Black Tree implementation for key-ordered entry storage.

Insertion, lookup and neighbour queries are O(log N).
"""

import logging
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from enum import IntEnum

from olelo.interfaces.ordered_container import OrderedContainer
from olelo.models.entry import Entry
from olelo.models.exceptions import EmptyTreeError

logger = logging.getLogger(__name__)


class Color(IntEnum):
    """Color of the link from a node's parent to the node."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """Node in the tree. Owns its children; there is no parent link."""

    entry: Entry
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None

    @property
    def key(self) -> str:
        return self.entry.key


class BalancedTree(OrderedContainer):
    """
    Left-leaning Red-Black Tree implementation of OrderedContainer.

    Properties maintained:
    1. Keys in a left subtree are smaller, keys in a right subtree larger
    2. Red links lean left and never appear twice in a row
    3. Every path from root to an absent child crosses the same number of black links
    4. Root is always black

    Absent children are never materialized; they count as black.
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    def insert(self, entry: Entry) -> bool:
        """Insert entry unless its key is already present. O(log N)"""
        if not isinstance(entry, Entry):
            raise TypeError(f"expected Entry, got {type(entry).__name__}")

        size_before = self._size
        self._root = self._insert(self._root, entry)
        self._root.color = Color.BLACK

        if self._size == size_before:
            logger.debug("Discarded duplicate key %r", entry.key)
            return False

        logger.debug("Inserted key %r (size=%d)", entry.key, self._size)
        return True

    def search(self, key: str) -> Entry | None:
        """Retrieve entry by key. O(log N)"""
        node = self._find_node(key)
        return node.entry if node else None

    def member(self, key: str) -> bool:
        return self._find_node(key) is not None

    def first(self) -> Entry:
        if self._root is None:
            raise EmptyTreeError("first")

        node = self._root
        while node.left is not None:
            node = node.left
        return node.entry

    def last(self) -> Entry:
        if self._root is None:
            raise EmptyTreeError("last")

        node = self._root
        while node.right is not None:
            node = node.right
        return node.entry

    def predecessor(self, reference: str | Entry) -> Entry | None:
        """Greatest entry with a key strictly less than reference. O(log N)"""
        key = _reference_key(reference)
        candidate = None
        current = self._root

        while current is not None:
            if key > current.key:
                # Everything further right is still a closer candidate
                candidate = current
                current = current.right
            else:
                current = current.left

        return candidate.entry if candidate else None

    def successor(self, reference: str | Entry) -> Entry | None:
        """Least entry with a key strictly greater than reference. O(log N)"""
        key = _reference_key(reference)
        candidate = None
        current = self._root

        while current is not None:
            if key < current.key:
                candidate = current
                current = current.left
            else:
                current = current.right

        return candidate.entry if candidate else None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return self._height(self._root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Entry]:
        return self.iterator()

    def iterator(
        self, start: str | None = None, end: str | None = None
    ) -> Iterator[Entry]:
        return self._iter_range(start, end)

    def __aiter__(self) -> AsyncIterator[Entry]:
        return self.async_iterator()

    def async_iterator(
        self, start: str | None = None, end: str | None = None
    ) -> AsyncIterator[Entry]:
        return self._aiter_range(start, end)

    def _iter_range(self, start: str | None, end: str | None) -> Iterator[Entry]:
        """
        In-order walk over keys in [start, end) with an explicit stack.

        The stack holds the ancestors still waiting to be yielded, smallest
        on top. Subtrees entirely below start are never entered.
        """
        pending: list[Node] = []
        node = self._root

        while True:
            while node is not None:
                if start is not None and node.key < start:
                    node = node.right
                else:
                    pending.append(node)
                    node = node.left

            if not pending:
                return

            node = pending.pop()
            if end is not None and node.key >= end:
                return

            yield node.entry
            # Everything in the right subtree is already >= start
            node = node.right
            start = None

    async def _aiter_range(
        self, start: str | None, end: str | None
    ) -> AsyncIterator[Entry]:
        # In-memory walk, nothing to await
        for entry in self._iter_range(start, end):
            yield entry

    def _insert(self, node: Node | None, entry: Entry) -> Node:
        """Insert into the subtree rooted at node and return its new root."""
        if node is None:
            self._size += 1
            return Node(entry=entry)

        if entry.key < node.key:
            node.left = self._insert(node.left, entry)
        elif entry.key > node.key:
            node.right = self._insert(node.right, entry)
        else:
            # Existing entry wins
            return node

        return self._balance(node)

    def _balance(self, node: Node) -> Node:
        """Restore the left-leaning invariants at node after an insert below it."""
        if self._is_red(node.right) and not self._is_red(node.left):
            node = self._rotate_left(node)

        if self._is_red(node.left) and self._is_red(node.left.left):
            node = self._rotate_right(node)

        if self._is_red(node.left) and self._is_red(node.right):
            self._flip_colors(node)

        return node

    def _find_node(self, key: str) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _height(self, node: Node | None) -> int:
        if node is None:
            return 0
        return 1 + max(self._height(node.left), self._height(node.right))

    @staticmethod
    def _is_red(node: Node | None) -> bool:
        if node is None:
            return False
        return node.color == Color.RED

    @staticmethod
    def _rotate_left(node: Node) -> Node:
        """Left rotation. Turns a right-leaning red link into a left-leaning one."""
        right_child = node.right
        node.right = right_child.left
        right_child.left = node
        right_child.color = node.color
        node.color = Color.RED
        return right_child

    @staticmethod
    def _rotate_right(node: Node) -> Node:
        """Right rotation."""
        left_child = node.left
        node.left = left_child.right
        left_child.right = node
        left_child.color = node.color
        node.color = Color.RED
        return left_child

    @staticmethod
    def _flip_colors(node: Node) -> None:
        """Split a temporary 4-node: node turns red, both children black."""
        node.color = Color.RED
        node.left.color = Color.BLACK
        node.right.color = Color.BLACK


def _reference_key(reference: str | Entry) -> str:
    if isinstance(reference, Entry):
        return reference.key
    return reference

