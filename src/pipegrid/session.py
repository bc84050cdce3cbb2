"""Editing session over one table block.

TableSession is the UI-independent half of a table widget: it owns the
Grid parsed from a block, tracks what the user has selected, runs the
toolbar actions through pipegrid.mutations, and hands canonical text to a
save callback after every change. Rendering, event wiring and save
debouncing stay with the caller.

Selection follows objects rather than indices, so inserting a row above
the selected one keeps the same row selected at its new position.

Example:
    >>> saved = []
    >>> session = TableSession("| A | B |\\n| --- | --- |\\n| 1 | 2 |", on_save=saved.append)
    >>> session.select(1, 0)
    >>> session.set_cell_value("line one\\nline two")
    True
    >>> saved[-1].splitlines()[-1]
    '| line one<br line/>line two | 2 |'

Thread Safety:
    Not thread-safe. One session per widget.

"""

from __future__ import annotations

from collections.abc import Callable

from pipegrid import mutations
from pipegrid.codec import decode_cell_value, encode_cell_value
from pipegrid.errors import GridIndexError, SelectionError
from pipegrid.grid import Cell, Grid, Row
from pipegrid.parser import parse_table
from pipegrid.serializer import serialize, to_fenced_block
from pipegrid.utils.logger import get_logger

logger = get_logger(__name__)

SaveCallback = Callable[[str], None]


class TableSession:
    """Grid plus selection state and a save hook.

    Args:
        source: Body of the table block
        on_save: Called with the serialized table after each change

    """

    __slots__ = ("_cell", "_grid", "_on_save", "_row")

    def __init__(self, source: str | None, on_save: SaveCallback | None = None) -> None:
        self._grid = parse_table(source)
        self._on_save = on_save
        self._row: Row | None = None
        self._cell: Cell | None = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def text(self) -> str:
        """Canonical table text for the current grid."""
        return serialize(self._grid)

    @property
    def fenced_text(self) -> str:
        """Current table wrapped in its fenced code block."""
        return to_fenced_block(self._grid)

    # =========================================================================
    # Selection
    # =========================================================================

    def select(self, row: int, column: int | None = None) -> None:
        """Select a row, and optionally one of its cells (and so its column).

        Raises:
            GridIndexError: If ``row`` or ``column`` is out of range
        """
        if not 0 <= row < self._grid.row_count:
            raise GridIndexError("row", row, self._grid.row_count)
        if column is not None and not 0 <= column < self._grid.column_count:
            raise GridIndexError("column", column, self._grid.column_count)
        target = self._grid.rows[row]
        self._row = target
        self._cell = target.cells[column] if column is not None else None

    def clear_selection(self) -> None:
        self._row = None
        self._cell = None

    @property
    def selected_row(self) -> int | None:
        return self._row.position if self._row is not None else None

    @property
    def selected_column(self) -> int | None:
        return self._cell.position if self._cell is not None else None

    @property
    def selected_cell(self) -> Cell | None:
        return self._cell

    def _require_row(self, action: str) -> Row:
        if self._row is None:
            raise SelectionError(action, "row")
        return self._row

    def _require_cell(self, action: str) -> Cell:
        if self._cell is None:
            raise SelectionError(action, "cell")
        return self._cell

    # =========================================================================
    # Toolbar actions
    # =========================================================================

    def toggle_header(self) -> bool:
        """Flip the selected row between header and body."""
        head = mutations.toggle_header(
            self._grid, self._require_row("toggle_header").position
        )
        self.save()
        return head

    def remove_row(self) -> None:
        row = self._require_row("remove_row")
        mutations.remove_row(self._grid, row.position)
        self.clear_selection()
        self.save()

    def remove_column(self) -> None:
        cell = self._require_cell("remove_column")
        mutations.remove_column(self._grid, cell.position)
        self._cell = None
        self.save()

    def insert_left(self) -> None:
        mutations.insert_column_left(
            self._grid, self._require_cell("insert_left").position
        )
        self.save()

    def insert_right(self) -> None:
        mutations.insert_column_right(
            self._grid, self._require_cell("insert_right").position
        )
        self.save()

    def insert_above(self) -> None:
        mutations.insert_row_above(
            self._grid, self._require_row("insert_above").position
        )
        self.save()

    def insert_below(self) -> None:
        mutations.insert_row_below(
            self._grid, self._require_row("insert_below").position
        )
        self.save()

    def append_row(self) -> None:
        mutations.append_row(self._grid)
        self.save()

    def append_column(self) -> None:
        mutations.append_column(self._grid)
        self.save()

    # =========================================================================
    # Cell editing
    # =========================================================================

    def edit_text(self) -> str:
        """Decoded value of the selected cell, ready for a text editor."""
        return decode_cell_value(self._require_cell("edit_text").value)

    def set_cell_value(self, text: str) -> bool:
        """Store editor text in the selected cell.

        Returns:
            True if the stored value changed (and a save was issued)
        """
        cell = self._require_cell("set_cell_value")
        value = encode_cell_value(text)
        if cell.value == value:
            return False
        cell.value = value
        self.save()
        return True

    def copy_cell(self) -> str:
        """Text to place on the clipboard for the selected cell."""
        return self.edit_text()

    def paste_cell(self, text: str) -> bool:
        """Replace the selected cell with clipboard text."""
        return self.set_cell_value(text)

    # =========================================================================
    # Persistence
    # =========================================================================

    def save(self) -> str:
        """Serialize the grid and pass it to the save callback.

        Returns:
            The serialized table text
        """
        text = serialize(self._grid)
        logger.debug(
            "Saving table: %d rows x %d columns",
            self._grid.row_count,
            self._grid.column_count,
        )
        if self._on_save is not None:
            self._on_save(text)
        return text


__all__ = [
    "SaveCallback",
    "TableSession",
]
