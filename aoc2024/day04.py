"""aoc2024.day04
=================

Day 4: Ceres Search. A brute-force word search over a rectangular letter grid.

Every cell is tried as a starting point in each of the eight compass and
diagonal directions. Matches are recorded independently per start cell and
direction, so nothing is merged: a palindromic word read from both ends would
count twice.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .constants import MAS_PATTERN, XMAS_PATTERN
from .inputs import ParseError, numbered_lines
from .types import Answer, Coord, Pattern, Point
from .utils import count_if, create_counter

DAY = 4
TITLE = "Ceres Search"

# Reverse, zero, forward. X and Y take any of these independently.
STEPS = (-1, 0, 1)
DIRECTIONS: Tuple[Coord, ...] = tuple(
    (step_x, step_y) for step_x in STEPS for step_y in STEPS if (step_x, step_y) != (0, 0)
)

logger = logging.getLogger(__name__)


class WordMatch:
    """Ordered cells whose letters spell a pattern along one direction."""

    def __init__(self, points: Sequence[Point]) -> None:
        if not points:
            raise ValueError("a match needs at least one point")
        self.points: Tuple[Point, ...] = tuple(points)

    def __repr__(self) -> str:
        word = "".join(point.letter for point in self.points)
        return f"WordMatch({word!r}, start={self.start.coord}, end={self.end.coord})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordMatch):
            return NotImplemented
        return self.points == other.points

    def __hash__(self) -> int:
        return hash(self.points)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def center_point(self) -> Point:
        """The middle cell of the walk, e.g. the ``A`` of ``MAS``."""

        return self.points[len(self.points) // 2]

    @property
    def is_diagonal(self) -> bool:
        return self.start.x != self.end.x and self.start.y != self.end.y


class Grid:
    """Rectangular grid of single characters indexed as ``(x, y)``."""

    def __init__(self, text: str) -> None:
        rows = numbered_lines(text)
        if not rows:
            raise ParseError("grid is empty")
        width = len(rows[0][1])
        for line_number, row in rows:
            if len(row) != width:
                raise ParseError(f"expected {width} letters, got {len(row)}", line_number)
        self.cells = np.array([list(row) for _, row in rows], dtype="<U1")

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def letter_at(self, x: int, y: int) -> str:
        return str(self.cells[y, x])

    def find_all_matches(self, pattern: Pattern) -> List[WordMatch]:
        """Every occurrence of ``pattern`` in reading order of start cells.

        Parameters
        ----------
        pattern:
            Expected letters, one per visited cell.

        Returns
        -------
        list[WordMatch]
            One entry per successful (start cell, direction) walk.
        """

        matches: List[WordMatch] = []
        for y in range(self.height):
            for x in range(self.width):
                matches.extend(self.find_matches_at_position(x, y, pattern))
        logger.debug("found %d matches of %s", len(matches), "".join(pattern))
        return matches

    def find_matches_at_position(self, x: int, y: int, pattern: Pattern) -> Iterator[WordMatch]:
        for step_x, step_y in DIRECTIONS:
            match = self.find_match_in_direction(x, y, step_x, step_y, pattern)
            if match is not None:
                yield match

    def find_match_in_direction(
        self,
        start_x: int,
        start_y: int,
        step_x: int,
        step_y: int,
        pattern: Pattern,
    ) -> Optional[WordMatch]:
        x, y = start_x, start_y
        points: List[Point] = []
        for expected in pattern:
            if not self.is_in_bounds(x, y) or self.letter_at(x, y) != expected:
                return None
            points.append(Point(expected, x, y))
            x += step_x
            y += step_y
        if not points:
            return None
        return WordMatch(points)


def count_x_shaped_patterns(matches: Sequence[WordMatch]) -> int:
    """Count centers crossed by at least two diagonal matches."""

    centers = create_counter(match.center_point.coord for match in matches if match.is_diagonal)
    return count_if(centers.values(), lambda count: count > 1)


def parse_input(text: str) -> Grid:
    return Grid(text)


def solve_part1(grid: Grid) -> int:
    return len(grid.find_all_matches(XMAS_PATTERN))


def solve_part2(grid: Grid) -> int:
    return count_x_shaped_patterns(grid.find_all_matches(MAS_PATTERN))


def solve(text: str) -> Tuple[Answer, Answer]:
    grid = parse_input(text)
    return (
        Answer(1, "XMAS occurrences", solve_part1(grid)),
        Answer(2, "X-MAS patterns", solve_part2(grid)),
    )


__all__ = [
    "DAY",
    "TITLE",
    "DIRECTIONS",
    "WordMatch",
    "Grid",
    "count_x_shaped_patterns",
    "parse_input",
    "solve_part1",
    "solve_part2",
    "solve",
]
