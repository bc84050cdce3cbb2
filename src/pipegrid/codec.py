"""Cell value codec.

A table row is one line of text, so a stored cell value must not hold a
raw line break, and a literal backtick must not read as a code span
boundary. Values are kept encoded in the grid and decoded only for
editing::

    >>> encode_cell_value("a\\nb `c`")
    'a<br line/>b \\\\`c\\\\`'
    >>> decode_cell_value(encode_cell_value("a\\nb `c`"))
    'a\\nb `c`'

``\\r\\n`` and a lone ``\\r`` are line breaks too and encode to the same
marker, so they decode as ``\\n``. ``decode(encode(x)) == x`` holds for any
``x`` without a carriage return that does not already contain the marker.
Encoding is not idempotent: callers must decode a stored value before
re-encoding an edit of it.

"""

from __future__ import annotations

from pipegrid.config import get_grid_config

LINE_BREAK = "\n"
LINE_BREAKS = ("\r\n", "\r", "\n")
BACKTICK = "`"
ESCAPED_BACKTICK = "\\`"


def encode_cell_value(text: str) -> str:
    """Escape editor text for storage in a single table row."""
    marker = get_grid_config().line_break_marker
    for line_break in LINE_BREAKS:
        text = text.replace(line_break, marker)
    return text.replace(BACKTICK, ESCAPED_BACKTICK)


def decode_cell_value(value: str) -> str:
    """Restore editor text from a stored cell value."""
    marker = get_grid_config().line_break_marker
    return value.replace(marker, LINE_BREAK).replace(ESCAPED_BACKTICK, BACKTICK)


__all__ = [
    "decode_cell_value",
    "encode_cell_value",
]
