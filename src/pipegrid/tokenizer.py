"""Line tokenizer for pipe tables.

Splits one line of text into cell strings on ``|``, except where the pipe
sits inside a bracket, quote or code span::

    >>> tokenize_line("a | `b|c` | d")
    ['a', '`b|c`', 'd']

The scanner holds a single active delimiter (no stack): while one kind is
open, every other opener is plain text and only the matching closer ends
it. Code spans open with a run of backticks and close on a run of the same
length, so a span opened with two backticks can hold a single literal
backtick. A backslash directly before a backtick escapes it, which keeps
backticks written by the cell codec from opening spans; any other
backslash is plain text.

Unbalanced delimiters swallow the rest of the line; that is treated as
content, never as an error.

Thread Safety:
    All functions are pure. The active nesting pairs come from the
    context-local GridConfig.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from pipegrid.config import get_grid_config

CELL_DELIMITER = "|"
ESCAPE = "\\"
CODE_TICK = "`"

_SEPARATOR_TOKEN = re.compile(r"-+")


def _run_length(line: str, start: int, char: str) -> int:
    """Count consecutive ``char`` starting at ``start``."""
    end = start
    while end < len(line) and line[end] == char:
        end += 1
    return end - start


def tokenize_line(
    line: str,
    nesting_pairs: Iterable[tuple[str, str]] | None = None,
) -> list[str]:
    """Split a table line into trimmed cell strings.

    A cell is emitted when its raw buffer is non-empty, so ``||`` yields no
    cell while ``|  |`` yields one empty cell.

    Args:
        line: One line of table text (no line break)
        nesting_pairs: (opener, closer) pairs; defaults to the active config

    Returns:
        Cell strings in order; empty list for an empty line
    """
    if nesting_pairs is None:
        nesting_pairs = get_grid_config().nesting_pairs
    closers = dict(nesting_pairs)

    cells: list[str] = []
    buffer: list[str] = []
    closer: str | None = None
    tick_run = 0
    pos = 0
    length = len(line)

    while pos < length:
        char = line[pos]

        if char == ESCAPE and line.startswith(CODE_TICK, pos + 1):
            buffer.append(line[pos : pos + 2])
            pos += 2
            continue

        if closer is None:
            if char == CELL_DELIMITER:
                if buffer:
                    cells.append("".join(buffer).strip())
                    buffer = []
                pos += 1
                continue
            if char in closers:
                closer = closers[char]
                if char == CODE_TICK:
                    tick_run = _run_length(line, pos, CODE_TICK)
                    buffer.append(line[pos : pos + tick_run])
                    pos += tick_run
                    continue
        elif char == CODE_TICK and closer == CODE_TICK:
            run = _run_length(line, pos, CODE_TICK)
            buffer.append(line[pos : pos + run])
            pos += run
            if run == tick_run:
                closer = None
            continue
        elif char == closer:
            closer = None

        buffer.append(char)
        pos += 1

    if buffer:
        cells.append("".join(buffer).strip())
    return cells


def is_separator_row(tokens: Sequence[str]) -> bool:
    """Return True if every token is one or more hyphens.

    The check is vacuously true for an empty token list, so a blank line
    marks the row above it as a header just like a separator line does.
    """
    return all(_SEPARATOR_TOKEN.fullmatch(token) for token in tokens)


__all__ = [
    "CELL_DELIMITER",
    "is_separator_row",
    "tokenize_line",
]
