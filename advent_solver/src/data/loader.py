"""Line-oriented readers turning puzzle input text into Python structures."""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, TextIO, TypeVar

from advent_solver.src.core.grid import Grid

T = TypeVar("T")

logger = logging.getLogger(__name__)


class InputFormatError(ValueError):
    """Raised when puzzle input does not have the expected shape."""


def read_lines(stream: TextIO, parser: Callable[[str], T]) -> List[T]:
    """Parse every non-blank line of ``stream`` with ``parser``.

    Lines are stripped of surrounding whitespace before parsing. Exceptions
    raised by ``parser`` propagate unchanged.
    """

    out: List[T] = []
    for line in stream:
        trimmed = line.strip()
        if trimmed:
            out.append(parser(trimmed))
    logger.debug("parsed %d lines", len(out))
    return out


def read_lines_regex(stream: TextIO, pattern: str, parser: Callable[[re.Match[str]], T]) -> List[T]:
    """Match every non-blank line against ``pattern`` and parse the match.

    Raises
    ------
    InputFormatError
        If a line does not match. The message carries the 1-based number of
        the offending non-blank line.
    """

    expr = re.compile(pattern)
    lineno = 0

    def parse(line: str) -> T:
        nonlocal lineno
        lineno += 1
        match = expr.match(line)
        if match is None:
            raise InputFormatError(f"No regex match on line {lineno}")
        return parser(match)

    return read_lines(stream, parse)


def load_lines(stream: TextIO, convert: Callable[[str], T] = str) -> List[T]:  # type: ignore[assignment]
    """Convert every non-blank line with ``convert`` (``int``, ``str``, ...)."""

    def parse(line: str) -> T:
        try:
            return convert(line)
        except ValueError as exc:
            raise InputFormatError(f"Unable to parse line {line!r}: {exc}") from exc

    return read_lines(stream, parse)


def load_grid(stream: TextIO, convert: Callable[[str], T]) -> Grid[T]:
    """Load a grid with one cell per character.

    Width and height come from the input: every non-blank line is a row and
    all rows must have the same length. ``convert`` maps a single character to
    a cell value and may raise ``ValueError``, ``KeyError`` or ``TypeError``
    for characters it does not accept.
    """

    data: List[T] = []
    width: Optional[int] = None
    for line in stream:
        trimmed = line.strip()
        if not trimmed:
            continue

        if width is None:
            width = len(trimmed)
        elif width != len(trimmed):
            raise InputFormatError("Grid rows are not allowed to vary in width")

        for ch in trimmed:
            try:
                data.append(convert(ch))
            except (ValueError, KeyError, TypeError) as exc:
                raise InputFormatError(f"Invalid grid character {ch!r}") from exc

    grid = Grid.from_flat_data(data, width or 0)
    logger.debug("loaded %dx%d grid", grid.width, grid.height)
    return grid


__all__ = [
    "InputFormatError",
    "read_lines",
    "read_lines_regex",
    "load_lines",
    "load_grid",
]
