"""Grid model for pipe tables.

A Grid owns its Rows, a Row owns its Cells. Positions and counts are
derived data: structural edits (see pipegrid.mutations) change the lists
and then call :meth:`Grid.reindex` to bring them back in line.

Model:
Grid
├── rows: list[Row]
│   ├── head: bool
│   └── cells: list[Cell]
│       ├── value: str   (encoded, see pipegrid.codec)
│       └── row: int     (owning row's position, resolved via Grid.row_of)
├── row_count
└── column_count

Invariants after reindex:
- every row holds ``column_count`` cells (mutations keep this by construction)
- ``row.position`` and ``cell.position`` match list positions
- ``cell.row`` matches the owning row's position

Thread Safety:
    Grids are mutable and not shared. One owner at a time.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class Cell:
    """One table cell.

    ``row`` is the position of the owning row, not a reference to it, so
    there is no ownership cycle between rows and cells.

    """

    value: str = ""
    position: int = 0
    row: int = 0


@dataclass(slots=True)
class Row:
    """An ordered run of cells plus the header flag."""

    cells: list[Cell] = field(default_factory=list)
    head: bool = False
    position: int = 0

    @classmethod
    def empty(cls, length: int, position: int = 0) -> Row:
        """Create a non-header row of ``length`` empty cells."""
        return cls(
            cells=[Cell(position=i, row=position) for i in range(length)],
            position=position,
        )

    def pad_to(self, length: int) -> Row:
        """Append empty cells until the row holds ``length`` cells."""
        for i in range(len(self.cells), length):
            self.cells.append(Cell(position=i, row=self.position))
        return self

    def values(self) -> list[str]:
        return [cell.value for cell in self.cells]


@dataclass(slots=True)
class Grid:
    """Rectangular table of rows.

    Attributes:
        rows: Rows in display order
        row_count: Number of rows, refreshed by reindex
        column_count: Widest row's cell count, refreshed by reindex

    """

    rows: list[Row] = field(default_factory=list)
    row_count: int = 0
    column_count: int = 0

    @classmethod
    def from_values(
        cls,
        values: list[list[str]],
        heads: list[bool] | None = None,
    ) -> Grid:
        """Build a padded, reindexed grid from row-major cell values.

        Args:
            values: One list of (already encoded) values per row
            heads: Optional header flag per row
        """
        rows = [
            Row(cells=[Cell(value=value) for value in row_values])
            for row_values in values
        ]
        if heads is not None:
            for row, head in zip(rows, heads, strict=True):
                row.head = head
        return cls(rows=rows).reindex().pad()

    def reindex(self) -> Grid:
        """Restore positions and counts after a structural change.

        Returns:
            self for chaining
        """
        column_count = 0
        for row_position, row in enumerate(self.rows):
            row.position = row_position
            for cell_position, cell in enumerate(row.cells):
                cell.position = cell_position
                cell.row = row_position
            if column_count < len(row.cells):
                column_count = len(row.cells)
        self.row_count = len(self.rows)
        self.column_count = column_count
        return self

    def pad(self) -> Grid:
        """Pad every row to ``column_count`` cells."""
        for row in self.rows:
            row.pad_to(self.column_count)
        return self

    def cell(self, row: int, column: int) -> Cell:
        """Return the cell at (row, column)."""
        return self.rows[row].cells[column]

    def row_of(self, cell: Cell) -> Row:
        """Resolve a cell's owning row."""
        return self.rows[cell.row]

    def column(self, index: int) -> list[Cell]:
        """Return the cells of one column, top to bottom."""
        return [row.cells[index] for row in self.rows]

    def values(self) -> list[list[str]]:
        """Return cell values as nested lists, row-major."""
        return [row.values() for row in self.rows]

    def is_rectangular(self) -> bool:
        return all(len(row.cells) == self.column_count for row in self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __bool__(self) -> bool:
        # Empty grids are truthy.
        return True


__all__ = [
    "Cell",
    "Grid",
    "Row",
]
