"""Registry of the daily puzzles, indexed by 1-based problem number."""

from __future__ import annotations

from typing import List

from . import p01, p02, p03, p04, p05
from .base import Problem, Solver

PROBLEMS: List[Problem] = [
    p01.PROBLEM,
    p02.PROBLEM,
    p03.PROBLEM,
    p04.PROBLEM,
    p05.PROBLEM,
]


def get_problem(number: int) -> Problem:
    """Return the problem with 1-based ``number``.

    Raises ``ValueError`` for ``0`` and ``KeyError`` for numbers that are not
    registered.
    """
    if number == 0:
        raise ValueError("Problem numbers are 1-based. Use #1 for the first problem.")
    if not 1 <= number <= len(PROBLEMS):
        raise KeyError(number)
    return PROBLEMS[number - 1]


__all__ = ["PROBLEMS", "Problem", "Solver", "get_problem"]
