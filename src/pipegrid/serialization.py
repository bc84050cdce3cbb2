"""Grid snapshots: JSON round-trip for pipegrid grids.

Converts a Grid to/from a JSON-compatible dict. Useful for:
- Caching a parsed grid next to the document it came from
- Sending grid state to a front end that renders the table
- Debugging and inspection

Positions and counts are derived data, so a snapshot stores only the rows'
head flags and cell values. ``from_dict`` pads and reindexes.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from pipegrid import parse_table
    from pipegrid.serialization import to_json, from_json

    grid = parse_table("| A |\\n| --- |\\n| 1 |")
    restored = from_json(to_json(grid))
    assert restored == grid

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from pipegrid.errors import SerializationError
from pipegrid.grid import Cell, Grid, Row

_GRID_TYPE = "Grid"


def to_dict(grid: Grid) -> dict[str, Any]:
    """Convert a grid to a JSON-compatible dict.

    Includes a ``_type`` discriminator and the counts for readability.

    """
    return {
        "_type": _GRID_TYPE,
        "row_count": grid.row_count,
        "column_count": grid.column_count,
        "rows": [{"head": row.head, "cells": row.values()} for row in grid.rows],
    }


def from_dict(data: dict[str, Any]) -> Grid:
    """Rebuild a grid from a dict produced by to_dict.

    Counts in the dict are ignored; they are recomputed from the rows.

    Raises:
        SerializationError: If the dict is not a grid snapshot.

    """
    if not isinstance(data, dict):
        msg = f"Expected dict, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name != _GRID_TYPE:
        msg = f"Expected {_GRID_TYPE!r} snapshot, got {type_name!r}"
        raise SerializationError(msg)

    raw_rows = data.get("rows")
    if not isinstance(raw_rows, list):
        msg = "Grid snapshot 'rows' must be a list"
        raise SerializationError(msg)

    rows: list[Row] = []
    for number, raw in enumerate(raw_rows):
        cells = raw.get("cells") if isinstance(raw, dict) else None
        if not isinstance(cells, list) or not all(isinstance(v, str) for v in cells):
            msg = f"Row {number}: 'cells' must be a list of strings"
            raise SerializationError(msg)
        rows.append(
            Row(cells=[Cell(value=value) for value in cells], head=bool(raw.get("head")))
        )

    return Grid(rows=rows).reindex().pad()


def to_json(grid: Grid, *, indent: int | None = None) -> str:
    """Serialize a grid to a JSON string (sorted keys)."""
    return json.dumps(to_dict(grid), sort_keys=True, indent=indent)


def from_json(data: str) -> Grid:
    """Deserialize a grid from a JSON string.

    Raises:
        SerializationError: If the JSON is invalid or not a grid snapshot.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid grid JSON: {e}") from e
    if not isinstance(raw, dict):
        msg = f"Expected JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)
    return from_dict(raw)


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
