"""aoc2024.day02
=================

Day 2: Red-Nosed Reports. A report is safe when its levels move monotonically
in steps of one to three; the Problem Dampener tolerates a single bad level.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .inputs import ParseError, numbered_lines, parse_int
from .types import Answer, LevelSequence
from .utils import count_if

DAY = 2
TITLE = "Red-Nosed Reports"

logger = logging.getLogger(__name__)


def _differences(sequence: Sequence[int]) -> np.ndarray:
    # Object dtype so steps between extreme levels stay exact.
    return np.diff(np.asarray(sequence, dtype=object))


def is_strictly_increasing(sequence: Sequence[int]) -> bool:
    """Every step goes up by 1, 2 or 3."""

    diffs = _differences(sequence)
    return bool(np.all((diffs >= 1) & (diffs <= 3)))


def is_strictly_decreasing(sequence: Sequence[int]) -> bool:
    """Every step goes down by 1, 2 or 3."""

    diffs = _differences(sequence)
    return bool(np.all((diffs <= -1) & (diffs >= -3)))


def is_sequence_safe(sequence: Sequence[int]) -> bool:
    """Return ``True`` for reports that satisfy the reactor safety rules.

    Empty and single-level reports have no adjacent pairs and are safe.
    """

    return is_strictly_increasing(sequence) or is_strictly_decreasing(sequence)


def can_be_made_safe(sequence: Sequence[int]) -> bool:
    """Check whether dropping one level makes ``sequence`` safe.

    Every position is tried; reports are short enough that the quadratic cost
    does not matter.
    """

    levels = list(sequence)
    return any(
        is_sequence_safe(levels[:index] + levels[index + 1:])
        for index in range(len(levels))
    )


def count_safe_sequences(sequences: Sequence[LevelSequence]) -> int:
    return count_if(sequences, is_sequence_safe)


def count_safe_sequences_with_dampener(sequences: Sequence[LevelSequence]) -> int:
    unsafe = [sequence for sequence in sequences if not is_sequence_safe(sequence)]
    return count_safe_sequences(sequences) + count_if(unsafe, can_be_made_safe)


def parse_input(text: str) -> List[LevelSequence]:
    """One report per line, levels separated by whitespace."""

    sequences: List[LevelSequence] = []
    for line_number, line in numbered_lines(text):
        tokens = line.split()
        if not tokens:
            raise ParseError("empty report", line_number)
        sequences.append([parse_int(token, line_number) for token in tokens])
    logger.debug("parsed %d reports", len(sequences))
    return sequences


def solve_part1(sequences: Sequence[LevelSequence]) -> int:
    return count_safe_sequences(sequences)


def solve_part2(sequences: Sequence[LevelSequence]) -> int:
    return count_safe_sequences_with_dampener(sequences)


def solve(text: str) -> Tuple[Answer, Answer]:
    sequences = parse_input(text)
    return (
        Answer(1, "Safe Sequences", solve_part1(sequences)),
        Answer(2, "Safe Sequences with Dampener", solve_part2(sequences)),
    )


__all__ = [
    "DAY",
    "TITLE",
    "is_strictly_increasing",
    "is_strictly_decreasing",
    "is_sequence_safe",
    "can_be_made_safe",
    "count_safe_sequences",
    "count_safe_sequences_with_dampener",
    "parse_input",
    "solve_part1",
    "solve_part2",
    "solve",
]
