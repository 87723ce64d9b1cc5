"""Day 5: follow seeds through the almanac's chain of range maps."""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from itertools import groupby
from typing import Iterator, List, Sequence, TextIO, Tuple

from advent_solver.src.data.loader import InputFormatError

from .base import Problem

logger = logging.getLogger(__name__)

MAP_COUNT = 7

Span = Tuple[int, int]


@dataclass(frozen=True)
class MapEntry:
    src: int
    dst: int
    length: int

    @property
    def src_end(self) -> int:
        return self.src + self.length


class RangeMap:
    """Piecewise translation from one almanac category to the next.

    Values covered by an entry move by ``dst - src``; all other values map to
    themselves.
    """

    def __init__(self, name: str, entries: Sequence[MapEntry]) -> None:
        self.name = name
        self.entries = sorted(entries, key=lambda e: e.src)
        self._starts = [e.src for e in self.entries]

    def map_one(self, value: int) -> int:
        """Map a single source value to the destination domain."""
        idx = bisect_right(self._starts, value) - 1
        if idx >= 0:
            entry = self.entries[idx]
            if value < entry.src_end:
                return entry.dst + (value - entry.src)
        return value

    def map_range(self, start: int, length: int) -> Iterator[Span]:
        """Split ``[start, start + length)`` along the entries and map each piece.

        Yields ``(dst_start, length)`` spans covering the whole input range.
        """
        end = start + length
        cursor = start
        first = max(bisect_right(self._starts, start) - 1, 0)
        for entry in self.entries[first:]:
            if cursor >= end:
                return
            if entry.src_end <= cursor:
                continue
            if entry.src > cursor:
                gap_end = min(entry.src, end)
                yield cursor, gap_end - cursor
                cursor = gap_end
                if cursor >= end:
                    return
            piece_end = min(entry.src_end, end)
            if piece_end > cursor:
                yield entry.dst + (cursor - entry.src), piece_end - cursor
                cursor = piece_end
        if cursor < end:
            yield cursor, end - cursor

    def __repr__(self) -> str:
        return f"RangeMap({self.name!r}, entries={len(self.entries)})"


@dataclass
class Almanac:
    seeds: List[int]
    maps: List[RangeMap]

    def location(self, seed: int) -> int:
        value = seed
        for range_map in self.maps:
            value = range_map.map_one(value)
        return value

    def location_spans(self, spans: List[Span]) -> List[Span]:
        for range_map in self.maps:
            spans = [piece for span in spans for piece in range_map.map_range(*span)]
        return spans


def _parse_ints(text: str) -> List[int]:
    try:
        return [int(tok) for tok in text.split()]
    except ValueError as exc:
        raise InputFormatError(f"Invalid number in {text!r}") from exc


def parse_map(lines: List[str]) -> RangeMap:
    if not lines or not lines[0].endswith(" map:"):
        raise InputFormatError("Invalid map format")
    entries = []
    for line in lines[1:]:
        numbers = _parse_ints(line)
        if len(numbers) != 3:
            raise InputFormatError(f"Invalid line syntax: {line!r}")
        dst, src, length = numbers
        entries.append(MapEntry(src=src, dst=dst, length=length))
    return RangeMap(lines[0][: -len(" map:")], entries)


def load_input(stream: TextIO) -> Almanac:
    lines = [line.strip() for line in stream]
    blocks = [list(group) for filled, group in groupby(lines, key=bool) if filled]
    if not blocks:
        raise InputFormatError("Missing seeds")

    head, sep, seed_text = blocks[0][0].partition(" ")
    if not sep or head != "seeds:":
        raise InputFormatError("Missing seed separator")
    seeds = _parse_ints(seed_text)

    map_blocks = blocks[1:]
    if len(map_blocks) < MAP_COUNT:
        raise InputFormatError("Missing required map")
    if len(map_blocks) > MAP_COUNT:
        logger.warning("ignoring %d extra map blocks", len(map_blocks) - MAP_COUNT)
    maps = [parse_map(block) for block in map_blocks[:MAP_COUNT]]
    return Almanac(seeds=seeds, maps=maps)


def solve1(almanac: Almanac) -> int:
    if not almanac.seeds:
        raise ValueError("No input")
    return min(almanac.location(seed) for seed in almanac.seeds)


def solve2(almanac: Almanac) -> int:
    if len(almanac.seeds) % 2 != 0:
        raise ValueError("Seed ranges must come in (start, length) pairs")
    pairs = list(zip(almanac.seeds[::2], almanac.seeds[1::2]))
    spans = almanac.location_spans(pairs)
    if not spans:
        raise ValueError("No ranges")
    return min(start for start, _ in spans)


PROBLEM = Problem(
    name="If You Give A Seed A Fertilizer",
    load_input=load_input,
    solve1=solve1,
    solve2=solve2,
)
