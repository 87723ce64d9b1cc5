from __future__ import annotations

"""Helper utilities for command line scripts."""

import io
import sys
from pathlib import Path
from typing import TextIO


def input_path(inputs_dir: str | Path, number: int) -> Path:
    """Return the default input location for problem ``number`` (``inputs/01``)."""
    return Path(inputs_dir) / f"{number:02}"


def open_input(source: str | Path) -> TextIO:
    """Open ``source`` for reading; ``-`` selects standard input.

    The whole input is read eagerly so the returned stream can be parsed more
    than once and no file handle is left open.
    """
    if str(source) == "-":
        return io.StringIO(sys.stdin.read())
    return io.StringIO(Path(source).read_text(encoding="utf-8"))


def format_duration(seconds: float) -> str:
    """Render ``seconds`` with a unit that keeps the value readable."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"
