"""
Custom exceptions for the dictionary.
"""


class EmptyTreeError(Exception):
    """
    Raised when a range-edge query is made against an empty tree.

    There is no meaningful first or last entry to return, and a placeholder
    would break callers that rely on key ordering.
    """

    def __init__(self, operation: str):
        """
        Initialize empty tree error.

        Args:
            operation: Name of the query that was attempted.
        """
        self.operation = operation
        super().__init__(f"{operation}() called on an empty tree")
