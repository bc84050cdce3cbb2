"""ContextVar-based grid configuration for pipegrid.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The tokenizer, codec, parser and serializer read the active config, so one
thread can parse with custom delimiters while another uses the defaults.

Usage:
    from pipegrid.config import GridConfig, grid_config_context
    from pipegrid import parse

    with grid_config_context(GridConfig(fence_info="table")):
        grid = parse(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Openers and the closer that ends them. Kinds never nest inside each other.
DEFAULT_NESTING_PAIRS: tuple[tuple[str, str], ...] = (
    ("[", "]"),
    ("(", ")"),
    ("{", "}"),
    ("`", "`"),
    ("'", "'"),
    ('"', '"'),
)


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Immutable codec configuration.

    Attributes:
        line_break_marker: Tag that stands in for a line break inside a cell
        separator_field: Text of each field in a header separator line
        newline: Line separator used when serializing
        fence_info: Info string of the fenced block that holds a table
        nesting_pairs: (opener, closer) pairs whose contents never split cells

    """

    line_break_marker: str = "<br line/>"
    separator_field: str = "---"
    newline: str = "\n"
    fence_info: str = "tb"
    nesting_pairs: tuple[tuple[str, str], ...] = DEFAULT_NESTING_PAIRS

    @classmethod
    def from_dict(cls, config_dict: dict) -> "GridConfig":
        """Create GridConfig from dictionary.

        Unknown keys are silently ignored. ``nesting_pairs`` may be given as
        any iterable of two-item sequences (e.g., lists loaded from JSON).

        Example:
            >>> config = GridConfig.from_dict({"fence_info": "table", "x": 1})
            >>> config.fence_info
            'table'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "nesting_pairs" in filtered:
            filtered["nesting_pairs"] = tuple(
                (opener, closer) for opener, closer in filtered["nesting_pairs"]
            )
        return cls(**filtered)


_DEFAULT_CONFIG: GridConfig = GridConfig()

_grid_config: ContextVar[GridConfig] = ContextVar(
    "grid_config",
    default=_DEFAULT_CONFIG,
)


def get_grid_config() -> GridConfig:
    """Get current grid configuration (thread-local)."""
    return _grid_config.get()


def set_grid_config(config: GridConfig) -> None:
    """Set grid configuration for current context.

    Only affects the current thread's context.
    """
    _grid_config.set(config)


def reset_grid_config() -> None:
    """Reset to the default configuration."""
    _grid_config.set(_DEFAULT_CONFIG)


@contextmanager
def grid_config_context(config: GridConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with grid_config_context(GridConfig(separator_field="-")):
        ...     text = serialize(grid)
    """
    previous = _grid_config.get()
    _grid_config.set(config)
    try:
        yield
    finally:
        _grid_config.set(previous)


__all__ = [
    "DEFAULT_NESTING_PAIRS",
    "GridConfig",
    "get_grid_config",
    "set_grid_config",
    "reset_grid_config",
    "grid_config_context",
]
