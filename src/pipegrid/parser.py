"""Table parser: text block to Grid.

Two input shapes are accepted:

Pipe tables, one row per line, with separator lines marking headers::

    | A | B |
    | --- | --- |
    | 1 | 2 |

Compact size specs, for text with no ``|`` at all: ``3x2``,
``3 columns x 2 rows`` and the like produce an empty grid of that size
(columns first).

Separator lines (and blank lines, which tokenize to nothing) are never
stored as rows. Instead the row right above one is flagged ``head``, found
with a one-line lookahead while streaming over the lines. Rows shorter
than the widest row are padded with empty cells.

Thread Safety:
    Parser instances are single-use. Configuration is read from ContextVar.

"""

from __future__ import annotations

import re

from pipegrid.grid import Cell, Grid, Row
from pipegrid.tokenizer import CELL_DELIMITER, is_separator_row, tokenize_line
from pipegrid.utils.logger import get_logger

logger = get_logger(__name__)

# <columns> <junk> x <junk> <rows>; junk may not contain a pipe.
_COMPACT_SIZE = re.compile(r"([0-9]+)[^|]*?x[^|]*?([0-9]+)", re.IGNORECASE)


def parse_compact_size(text: str) -> tuple[int, int] | None:
    """Read a compact ``<columns>x<rows>`` size spec.

    Returns:
        (columns, rows) when both are positive, else None
    """
    if CELL_DELIMITER in text:
        return None
    match = _COMPACT_SIZE.search(text)
    if match is None:
        return None
    columns, rows = int(match.group(1)), int(match.group(2))
    if columns <= 0 or rows <= 0:
        return None
    return columns, rows


class TableParser:
    """Parse a table text block into a Grid.

    Usage:
        >>> grid = TableParser("| A | B |\\n| --- | --- |\\n| 1 | 2 |").parse()
        >>> grid.row_count, grid.column_count, grid.rows[0].head
        (2, 2, True)

    """

    __slots__ = ("_source",)

    def __init__(self, source: str | None) -> None:
        self._source = source or ""

    def parse(self) -> Grid:
        """Parse the source.

        Returns:
            A reindexed, rectangular Grid. Empty when the source is empty.
        """
        if not self._source:
            return Grid()

        size = parse_compact_size(self._source)
        if size is not None:
            columns, rows = size
            logger.debug("Compact size spec: %d columns x %d rows", columns, rows)
            return self._empty_grid(columns, rows)

        grid = Grid(rows=self._parse_rows())
        grid.reindex().pad()
        logger.debug(
            "Parsed table: %d rows x %d columns", grid.row_count, grid.column_count
        )
        return grid

    def _parse_rows(self) -> list[Row]:
        rows: list[Row] = []
        # The last materialized row, while it is still directly above the
        # line being read.
        previous: Row | None = None
        for line in self._source.strip().split("\n"):
            tokens = tokenize_line(line.removesuffix("\r"))
            # Blank lines tokenize to [] and count as separators.
            if is_separator_row(tokens):
                if previous is not None:
                    previous.head = True
                previous = None
                continue
            previous = Row(cells=[Cell(value=token) for token in tokens])
            rows.append(previous)
        return rows

    @staticmethod
    def _empty_grid(columns: int, rows: int) -> Grid:
        return Grid(
            rows=[Row.empty(columns, position=r) for r in range(rows)],
            row_count=rows,
            column_count=columns,
        )


def parse_table(source: str | None) -> Grid:
    """Parse a table text block into a Grid.

    Args:
        source: Body of a table code block (without fences)

    Returns:
        Grid; empty for empty input
    """
    return TableParser(source).parse()


__all__ = [
    "TableParser",
    "parse_compact_size",
    "parse_table",
]
