"""Shared shape of a puzzle module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO

Solver = Callable[[Any], Any]


@dataclass(frozen=True)
class Problem:
    """One day's puzzle: an input loader and up to two solvers.

    Parameters
    ----------
    name:
        Short human-readable title used in diagnostics.
    load_input:
        Callable turning the raw input stream into the parsed structure both
        solvers consume.
    solve1, solve2:
        Part solvers. A missing part is ``None`` and is skipped by the runner.
    """

    name: str
    load_input: Callable[[TextIO], Any]
    solve1: Optional[Solver] = None
    solve2: Optional[Solver] = None

    def parts(self) -> list[tuple[int, Solver]]:
        """Return ``(part_number, solver)`` for each solver that is present."""
        return [(n, s) for n, s in ((1, self.solve1), (2, self.solve2)) if s is not None]
