"""
Ordered container implementations for the dictionary.
"""

from olelo.models.sortedcontainers.balanced_tree import BalancedTree, Color, Node

__all__ = ["BalancedTree", "Color", "Node"]
