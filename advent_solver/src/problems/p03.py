"""Day 3: part numbers and gear ratios on an engine schematic.

Schematic cells are ``int`` for digits, ``None`` for empty space (``.``) and the
character itself for any symbol.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import List, Optional, Set, TextIO, Union

from advent_solver.src.core.grid import Grid, GridPoint
from advent_solver.src.data.loader import load_grid

from .base import Problem

Cell = Union[int, str, None]


def parse_cell(ch: str) -> Cell:
    if ch in string.digits:
        return int(ch)
    if ch == ".":
        return None
    return ch


def is_symbol(value: Cell) -> bool:
    return isinstance(value, str)


def load_input(stream: TextIO) -> Grid[Cell]:
    return load_grid(stream, parse_cell)


@dataclass
class NumberMap:
    """Part numbers of a schematic and which number occupies each cell.

    ``number_ids`` has the schematic's shape; a cell holds the index into
    ``numbers`` of the multi-digit number covering it, or ``None``.
    """

    numbers: List[int]
    number_ids: Grid[Optional[int]]

    @classmethod
    def from_grid(cls, grid: Grid[Cell]) -> "NumberMap":
        numbers: List[int] = []
        number_ids: Grid[Optional[int]] = Grid.filled_like(grid, None)

        for y in range(grid.height):
            accum: Optional[int] = None
            for x, value in enumerate(grid.row_iter(y)):
                if isinstance(value, int):
                    accum = value if accum is None else accum * 10 + value
                    number_ids.set(x, y, len(numbers))
                elif accum is not None:
                    numbers.append(accum)
                    accum = None
            if accum is not None:
                numbers.append(accum)

        return cls(numbers, number_ids)

    def adjacent_ids(self, point: GridPoint[Cell]) -> Set[int]:
        """Return the ids of the numbers touching ``point`` in any of 8 directions."""
        ids = (self.number_ids.get(*n.coords) for n in point.neighbors())
        return {i for i in ids if i is not None}


def solve1(grid: Grid[Cell]) -> int:
    number_map = NumberMap.from_grid(grid)
    used_ids: Set[int] = set()
    for cell in grid.points():
        if is_symbol(cell.value):
            used_ids |= number_map.adjacent_ids(cell)
    return sum(number_map.numbers[i] for i in used_ids)


def solve2(grid: Grid[Cell]) -> int:
    number_map = NumberMap.from_grid(grid)
    total = 0
    for gear in grid.find("*"):
        ids = number_map.adjacent_ids(gear)
        if len(ids) == 2:
            total += math.prod(number_map.numbers[i] for i in ids)
    return total


PROBLEM = Problem(name="Gear Ratios", load_input=load_input, solve1=solve1, solve2=solve2)
