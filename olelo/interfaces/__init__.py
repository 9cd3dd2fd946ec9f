"""
Abstract base classes and protocols for the dictionary.
"""

from olelo.interfaces.range_iterable import RangeIterable
from olelo.interfaces.ordered_container import OrderedContainer

__all__ = ["RangeIterable", "OrderedContainer"]
