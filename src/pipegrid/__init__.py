"""
pipegrid: editable grids over pipe-delimited text tables

Parses the body of a table code block into a rectangular grid, applies
row/column edits, and writes the grid back as canonical pipe-table text.
Zero runtime dependencies.

Quick Start:
    >>> from pipegrid import parse, serialize
    >>> grid = parse("| A | B |\\n| --- | --- |\\n| 1 | 2 |")
    >>> grid.row_count, grid.column_count
    (2, 2)
    >>> print(serialize(grid))
    | A | B |
    | --- | --- |
    | 1 | 2 |

    >>> # Size-only blocks create an empty table
    >>> parse("3x2").values()
    [['', '', ''], ['', '', '']]

    >>> # Interactive editing with a save hook
    >>> from pipegrid import TableSession
    >>> session = TableSession("2x2", on_save=print)
    >>> session.select(0)
    >>> session.toggle_header()
    |  |  |
    | --- | --- |
    |  |  |
    True

Installation:
    pip install pipegrid
"""

from pipegrid.codec import decode_cell_value, encode_cell_value
from pipegrid.config import (
    GridConfig,
    get_grid_config,
    grid_config_context,
    reset_grid_config,
    set_grid_config,
)
from pipegrid.errors import (
    GridIndexError,
    PipegridError,
    SelectionError,
    SerializationError,
)
from pipegrid.grid import Cell, Grid, Row
from pipegrid.mutations import (
    append_column,
    append_row,
    insert_column_left,
    insert_column_right,
    insert_row_above,
    insert_row_below,
    remove_column,
    remove_row,
    toggle_header,
)
from pipegrid.parser import TableParser, parse_compact_size, parse_table
from pipegrid.serialization import from_dict, from_json, to_dict, to_json
from pipegrid.serializer import serialize, to_fenced_block
from pipegrid.session import TableSession
from pipegrid.tokenizer import is_separator_row, tokenize_line

__version__ = "0.1.0"


def parse(source: str | None) -> Grid:
    """Parse a table block body into a Grid.

    Args:
        source: Pipe-table text or a compact size spec such as ``"3x2"``

    Returns:
        Grid (empty for empty input)

    """
    return parse_table(source)


def roundtrip(source: str | None) -> str:
    """Parse and re-serialize, yielding the canonical form of ``source``.

    Example:
        >>> roundtrip("|a|b|\\n|-|-|\\n|1|2|")
        '| a | b |\\n| --- | --- |\\n| 1 | 2 |'

    """
    return serialize(parse_table(source))


__all__ = [
    # Parsing and serialization
    "parse",
    "parse_table",
    "parse_compact_size",
    "roundtrip",
    "serialize",
    "to_fenced_block",
    "TableParser",
    # Tokenizer
    "tokenize_line",
    "is_separator_row",
    # Model
    "Cell",
    "Grid",
    "Row",
    # Mutations
    "append_column",
    "append_row",
    "insert_column_left",
    "insert_column_right",
    "insert_row_above",
    "insert_row_below",
    "remove_column",
    "remove_row",
    "toggle_header",
    # Codec
    "decode_cell_value",
    "encode_cell_value",
    # Session
    "TableSession",
    # Snapshots
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration
    "GridConfig",
    "get_grid_config",
    "grid_config_context",
    "reset_grid_config",
    "set_grid_config",
    # Errors
    "GridIndexError",
    "PipegridError",
    "SelectionError",
    "SerializationError",
    # Version
    "__version__",
]
