"""Day 2: cube games drawn from a bag of red, green and blue cubes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, TextIO, Tuple

from advent_solver.src.data.loader import InputFormatError, read_lines

from .base import Problem

Turn = Tuple[int, int, int]

COLOURS = ("red", "green", "blue")
BAG: Turn = (12, 13, 14)


@dataclass
class Game:
    id: int
    records: List[Turn]

    def plausible_for_start(self, start: Turn) -> bool:
        """Return ``True`` if every turn could be drawn from a bag holding ``start``."""
        return all(all(n <= limit for n, limit in zip(turn, start)) for turn in self.records)

    def min_cubes(self) -> Turn:
        """Return the fewest cubes of each colour that make the game possible."""
        red = max((t[0] for t in self.records), default=0)
        green = max((t[1] for t in self.records), default=0)
        blue = max((t[2] for t in self.records), default=0)
        return red, green, blue


def parse_game(line: str) -> Game:
    """Parse ``Game N: 3 blue, 4 red; 1 red, 2 green`` into a :class:`Game`."""
    head, sep, tail = line.partition(":")
    if not sep:
        raise InputFormatError("Input missing colon")
    _, sep, game_id = head.partition(" ")
    if not sep:
        raise InputFormatError("Input missing game ID")
    try:
        ident = int(game_id)
    except ValueError as exc:
        raise InputFormatError(f"Invalid game ID {game_id!r}") from exc

    records: List[Turn] = []
    for part in tail.split(";"):
        turn = [0, 0, 0]
        for subpart in part.split(","):
            count, sep, colour = subpart.strip().partition(" ")
            if not sep:
                raise InputFormatError("Input missing turn information")
            if colour not in COLOURS:
                raise InputFormatError(f"Invalid entry type {colour!r}")
            try:
                turn[COLOURS.index(colour)] += int(count)
            except ValueError as exc:
                raise InputFormatError(f"Invalid cube count {count!r}") from exc
        records.append((turn[0], turn[1], turn[2]))

    return Game(id=ident, records=records)


def load_input(stream: TextIO) -> List[Game]:
    return read_lines(stream, parse_game)


def solve1(games: List[Game]) -> int:
    return sum(g.id for g in games if g.plausible_for_start(BAG))


def solve2(games: List[Game]) -> int:
    return sum(math.prod(g.min_cubes()) for g in games)


PROBLEM = Problem(name="Cube Conundrum", load_input=load_input, solve1=solve1, solve2=solve2)
