"""aoc2024.types
=================

Type aliases and lightweight data structures shared by the day solvers. The
module stays definitions-only so that importing it never triggers runtime side
effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

# ---------------------------------------------------------------------------
# Puzzle data representations
# ---------------------------------------------------------------------------
LevelSequence = List[int]
Coord = Tuple[int, int]
Pattern = Sequence[str]


@dataclass
class LocationLists:
    """The two columns of location IDs from the day 1 input.

    Parameters
    ----------
    list1, list2:
        Integers in input order. Both lists come from the same lines, so a
        well-formed input always yields lists of equal length.
    """

    list1: List[int] = field(default_factory=list)
    list2: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class Point:
    """A single visited grid cell together with the letter found there."""

    letter: str
    x: int
    y: int

    @property
    def coord(self) -> Coord:
        return self.x, self.y


@dataclass(frozen=True)
class Answer:
    """One labelled puzzle answer as printed by the CLI."""

    part: int
    label: str
    value: int

    def render(self) -> str:
        return f"Part {self.part} - {self.label}: {self.value}"


__all__ = [
    "LevelSequence",
    "Coord",
    "Pattern",
    "LocationLists",
    "Point",
    "Answer",
]
