"""Input readers for the puzzle solvers."""

from .loader import (
    InputFormatError,
    load_grid,
    load_lines,
    read_lines,
    read_lines_regex,
)

__all__ = [
    "InputFormatError",
    "load_grid",
    "load_lines",
    "read_lines",
    "read_lines_regex",
]
