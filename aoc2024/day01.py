"""aoc2024.day01
=================

Day 1: Historian Hysteria. Compares two columns of location IDs, first by the
distance between their sorted pairs and then by a frequency-weighted similarity
score.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np

from .inputs import ParseError, numbered_lines, parse_int
from .types import Answer, LocationLists
from .utils import create_counter

DAY = 1
TITLE = "Historian Hysteria"

logger = logging.getLogger(__name__)


def calculate_total_distance(list1: Sequence[int], list2: Sequence[int]) -> int:
    """Sum of absolute differences between both lists once each is sorted.

    Raises
    ------
    ValueError
        If the lists differ in length.
    """

    if len(list1) != len(list2):
        raise ValueError(f"location lists differ in length: {len(list1)} != {len(list2)}")
    if not list1:
        return 0
    # Object arrays keep exact Python ints; int64 differences can overflow.
    left = np.sort(np.asarray(list1, dtype=object))
    right = np.sort(np.asarray(list2, dtype=object))
    return int(np.abs(left - right).sum())


def calculate_similarity_score(list1: Sequence[int], list2: Sequence[int]) -> int:
    """Each value of ``list1`` weighted by how often it appears in ``list2``."""

    frequencies1 = create_counter(list1)
    frequencies2 = create_counter(list2)
    return sum(value * count1 * frequencies2[value] for value, count1 in frequencies1.items())


def parse_input(text: str) -> LocationLists:
    """Split each line into a left and a right location ID."""

    lists = LocationLists()
    for line_number, line in numbered_lines(text):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) != 2:
            raise ParseError(f"expected two location IDs, got {len(tokens)} tokens", line_number)
        lists.list1.append(parse_int(tokens[0], line_number))
        lists.list2.append(parse_int(tokens[1], line_number))
    logger.debug("parsed %d location pairs", len(lists.list1))
    return lists


def solve_part1(lists: LocationLists) -> int:
    return calculate_total_distance(lists.list1, lists.list2)


def solve_part2(lists: LocationLists) -> int:
    return calculate_similarity_score(lists.list1, lists.list2)


def solve(text: str) -> Tuple[Answer, Answer]:
    lists = parse_input(text)
    return (
        Answer(1, "Total Distance", solve_part1(lists)),
        Answer(2, "Similarity Score", solve_part2(lists)),
    )


__all__ = [
    "DAY",
    "TITLE",
    "calculate_total_distance",
    "calculate_similarity_score",
    "parse_input",
    "solve_part1",
    "solve_part2",
    "solve",
]
