"""Exception classes for pipegrid.

The codec itself degrades gracefully (bad input becomes an empty or padded
grid), so exceptions only signal contract violations by callers.
"""

from __future__ import annotations


class PipegridError(Exception):
    """Base exception for all pipegrid errors.

    Subclass this for specific error categories.
    """

    pass


class GridIndexError(PipegridError, IndexError):
    """A mutation addressed a row or column that does not exist.

    Also an ``IndexError`` so callers that already guard list access keep
    working.
    """

    def __init__(self, axis: str, index: int, size: int) -> None:
        """Initialize index error.

        Args:
            axis: "row" or "column"
            index: The offending index
            size: Number of rows or columns in the grid at the time
        """
        self.axis = axis
        self.index = index
        self.size = size
        super().__init__(f"{axis} index {index} out of range (size {size})")


class SelectionError(PipegridError):
    """An editing action needs a selected row or cell and none is set."""

    def __init__(self, action: str, needs: str) -> None:
        """Initialize selection error.

        Args:
            action: Name of the attempted action (e.g., "remove_row")
            needs: What must be selected first ("row" or "cell")
        """
        self.action = action
        self.needs = needs
        super().__init__(f"'{action}' requires a selected {needs}")


class SerializationError(PipegridError):
    """A grid snapshot dict or JSON document is malformed."""

    pass
