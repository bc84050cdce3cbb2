"""Serialize a Grid back into canonical pipe-table text.

Canonical form, one row per line::

    | A | B |
    | --- | --- |
    | 1 | 2 |

Every value is padded with exactly one space on each side; a header row is
followed by a separator line as wide as the grid. This is the only form
guaranteed to survive parse -> serialize -> parse unchanged.

Thread Safety:
    Pure functions. Separator text and newline come from the active
    GridConfig.

"""

from __future__ import annotations

from pipegrid.config import get_grid_config
from pipegrid.grid import Grid, Row

FENCE = "```"


def _format_line(fields: list[str]) -> str:
    return "|" + "|".join(f" {field} " for field in fields) + "|"


def serialize_row(row: Row) -> str:
    """Render one row as a pipe-delimited line (no separator)."""
    return _format_line(row.values())


def serialize(grid: Grid) -> str:
    """Render a grid as canonical table text.

    Returns:
        Table text without a trailing newline; ``""`` for an empty grid
    """
    config = get_grid_config()
    separator = _format_line([config.separator_field] * grid.column_count)
    lines: list[str] = []
    for row in grid.rows:
        lines.append(serialize_row(row))
        if row.head:
            lines.append(separator)
    return config.newline.join(lines)


def to_fenced_block(grid: Grid, info: str | None = None) -> str:
    """Wrap the serialized grid in a fenced code block.

    This is the text that replaces the existing block in the document.

    Args:
        grid: Grid to serialize
        info: Fence info string (defaults to the configured ``fence_info``)
    """
    config = get_grid_config()
    if info is None:
        info = config.fence_info
    newline = config.newline
    return f"{FENCE}{info}{newline}{serialize(grid)}{newline}{FENCE}"


__all__ = [
    "serialize",
    "serialize_row",
    "to_fenced_block",
]
