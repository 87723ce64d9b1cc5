"""Day 4: scratchcards."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, TextIO

from advent_solver.src.data.loader import read_lines_regex

from .base import Problem

CARD_PATTERN = r"^Card +(\d+): +((?:\d+ +)*)\|((?: +\d+)*)$"


def _bitset(numbers: str) -> int:
    bits = 0
    for n in numbers.split():
        bits |= 1 << int(n)
    return bits


@dataclass
class Card:
    """A single scratch card.

    Numbers are at most two digits, so both sides are stored as integer
    bitsets.
    """

    id: int
    winning: int
    numbers: int

    def count_matches(self) -> int:
        return bin(self.winning & self.numbers).count("1")


def parse_card(match: re.Match[str]) -> Card:
    return Card(id=int(match.group(1)), winning=_bitset(match.group(2)), numbers=_bitset(match.group(3)))


def load_input(stream: TextIO) -> List[Card]:
    return read_lines_regex(stream, CARD_PATTERN, parse_card)


def solve1(cards: List[Card]) -> int:
    return sum(1 << (wins - 1) for wins in map(Card.count_matches, cards) if wins > 0)


def solve2(cards: List[Card]) -> int:
    # copies[i] is how many instances of card i end up being processed
    copies = [1] * len(cards)
    for idx, card in enumerate(cards):
        end = min(idx + 1 + card.count_matches(), len(cards))
        for won in range(idx + 1, end):
            copies[won] += copies[idx]
    return sum(copies)


PROBLEM = Problem(name="Scratchcards", load_input=load_input, solve1=solve1, solve2=solve2)
