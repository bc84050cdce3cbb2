"""Structural edits on a Grid.

Each operation changes the row/cell lists, then reindexes before returning,
so callers never observe stale positions or a ragged grid. Column edits
loop over every row inside one call, which keeps the grid rectangular by
construction.

Indices are validated up front: an out-of-range index raises
GridIndexError and leaves the grid untouched. There is no rollback beyond
that; one call is one complete edit.

Example:
    >>> grid = parse_table("| a | b |\\n| c | d |")
    >>> row = insert_row_above(grid, 1)
    >>> grid.values()
    [['a', 'b'], ['', ''], ['c', 'd']]

"""

from __future__ import annotations

from pipegrid.errors import GridIndexError
from pipegrid.grid import Cell, Grid, Row
from pipegrid.utils.logger import get_logger

logger = get_logger(__name__)


def _check_row(grid: Grid, index: int, *, allow_end: bool = False) -> None:
    upper = len(grid.rows) + (1 if allow_end else 0)
    if not 0 <= index < upper:
        raise GridIndexError("row", index, len(grid.rows))


def _check_column(grid: Grid, index: int, *, allow_end: bool = False) -> None:
    upper = grid.column_count + (1 if allow_end else 0)
    if not 0 <= index < upper:
        raise GridIndexError("column", index, grid.column_count)


def remove_row(grid: Grid, index: int) -> None:
    """Delete the row at ``index``."""
    _check_row(grid, index)
    del grid.rows[index]
    grid.reindex()
    logger.debug("Removed row %d", index)


def remove_column(grid: Grid, index: int) -> None:
    """Delete the cell at ``index`` from every row."""
    _check_column(grid, index)
    for row in grid.rows:
        del row.cells[index]
    grid.reindex()
    logger.debug("Removed column %d", index)


def insert_column(grid: Grid, index: int) -> None:
    """Insert an empty cell at ``index`` in every row.

    ``index`` may equal ``column_count`` to add a column at the end.
    """
    _check_column(grid, index, allow_end=True)
    for row in grid.rows:
        row.cells.insert(index, Cell())
    grid.reindex()
    logger.debug("Inserted column at %d", index)


def insert_column_left(grid: Grid, index: int) -> None:
    """Insert an empty column to the left of column ``index``."""
    _check_column(grid, index)
    insert_column(grid, index)


def insert_column_right(grid: Grid, index: int) -> None:
    """Insert an empty column to the right of column ``index``."""
    _check_column(grid, index)
    insert_column(grid, index + 1)


def insert_row(grid: Grid, index: int) -> Row:
    """Insert an empty, non-header row at ``index``.

    ``index`` may equal ``row_count`` to add a row at the end.

    Returns:
        The new row
    """
    _check_row(grid, index, allow_end=True)
    row = Row.empty(grid.column_count)
    grid.rows.insert(index, row)
    grid.reindex()
    logger.debug("Inserted row at %d", index)
    return row


def insert_row_above(grid: Grid, index: int) -> Row:
    """Insert an empty row above row ``index``."""
    _check_row(grid, index)
    return insert_row(grid, index)


def insert_row_below(grid: Grid, index: int) -> Row:
    """Insert an empty row below row ``index``."""
    _check_row(grid, index)
    return insert_row(grid, index + 1)


def append_column(grid: Grid) -> None:
    """Add an empty column after the last one.

    A grid with no rows still widens, so a following append_row gets the
    new column.
    """
    width = grid.column_count + 1
    for row in grid.rows:
        row.cells.append(Cell())
    grid.reindex()
    grid.column_count = width
    logger.debug("Appended column, now %d columns", grid.column_count)


def append_row(grid: Grid) -> Row:
    """Add an empty row after the last one.

    Returns:
        The new row
    """
    return insert_row(grid, len(grid.rows))


def toggle_header(grid: Grid, index: int) -> bool:
    """Flip the header flag of row ``index``.

    Returns:
        The row's new ``head`` value
    """
    _check_row(grid, index)
    row = grid.rows[index]
    row.head = not row.head
    grid.reindex()
    logger.debug("Row %d head=%s", index, row.head)
    return row.head


__all__ = [
    "append_column",
    "append_row",
    "insert_column",
    "insert_column_left",
    "insert_column_right",
    "insert_row",
    "insert_row_above",
    "insert_row_below",
    "remove_column",
    "remove_row",
    "toggle_header",
]
