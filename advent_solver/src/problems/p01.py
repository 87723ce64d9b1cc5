"""Day 1: recover calibration values from amended document lines."""

from __future__ import annotations

import re
from typing import Iterable, List, TextIO

from advent_solver.src.data.loader import load_lines

from .base import Problem

SPELLED_DIGITS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_PLAIN = re.compile(r"\d")
# lookahead so overlapping words such as "eightwo" yield both digits
_SPELLED = re.compile(r"(?=(\d|" + "|".join(SPELLED_DIGITS) + r"))")


def load_input(stream: TextIO) -> List[str]:
    return load_lines(stream)


def plain_digits(line: str) -> List[int]:
    """Return the ASCII digits of ``line`` in order."""
    return [int(m.group(0)) for m in _PLAIN.finditer(line)]


def all_digits(line: str) -> List[int]:
    """Return ASCII and spelled-out digits of ``line`` in order of appearance."""
    out = []
    for m in _SPELLED.finditer(line):
        token = m.group(1)
        out.append(int(token) if token.isdigit() else SPELLED_DIGITS[token])
    return out


def calibration(digits: List[int]) -> int:
    """Combine the first and last digit into a two-digit value."""
    if not digits:
        raise ValueError("invalid input line")
    return digits[0] * 10 + digits[-1]


def _total(lines: Iterable[str], extract) -> int:
    return sum(calibration(extract(line)) for line in lines)


def solve1(lines: List[str]) -> int:
    return _total(lines, plain_digits)


def solve2(lines: List[str]) -> int:
    return _total(lines, all_digits)


PROBLEM = Problem(name="Trebuchet?!", load_input=load_input, solve1=solve1, solve2=solve2)
