"""
Invariant checks shared by the tree and dictionary tests.
"""

import math

from olelo.models.sortedcontainers import BalancedTree, Color, Node


def inorder_keys(node: Node | None) -> list[str]:
    """Keys of the subtree rooted at node, in-order."""
    keys: list[str] = []
    stack: list[Node] = []
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        keys.append(node.key)
        node = node.right
    return keys


def black_height(node: Node | None) -> int:
    """
    Black height of the subtree rooted at node.

    Fails the calling test if two paths disagree, or if a red link leans
    right or follows another red link.
    """
    if node is None:
        return 1

    if node.right is not None:
        assert node.right.color == Color.BLACK, f"right-leaning red link at {node.key!r}"
    if node.color == Color.RED and node.left is not None:
        assert node.left.color == Color.BLACK, f"two red links in a row at {node.key!r}"

    left = black_height(node.left)
    right = black_height(node.right)
    assert left == right, f"black height mismatch at {node.key!r}: {left} != {right}"
    return left + (1 if node.color == Color.BLACK else 0)


def assert_invariants(tree: BalancedTree) -> None:
    """Check ordering, colouring and height bound of a tree."""
    root = tree._root
    keys = inorder_keys(root)

    assert keys == sorted(set(keys))
    assert len(keys) == tree.size()

    if root is not None:
        assert root.color == Color.BLACK
    black_height(root)

    assert tree.height() <= 2 * math.log2(tree.size() + 1)
