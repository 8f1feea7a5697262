"""aoc2024.day03
=================

Day 3: Mull It Over. Scans corrupted memory for well-formed ``mul(a,b)``
instructions, optionally honouring ``do()`` / ``don't()`` switches.
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from .types import Answer

DAY = 3
TITLE = "Mull It Over"

# Operands are 1-3 ASCII digits; ``\d`` would also accept other Unicode digits.
MULTIPLICATION_PATTERN = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
CONTROL_PATTERN = re.compile(r"(do\(\)|don't\(\))")
ENABLE_TOKEN = "do()"
DISABLE_TOKEN = "don't()"

logger = logging.getLogger(__name__)


def process_multiplication_instructions(text: str) -> int:
    """Sum the products of every ``mul(a,b)`` found in ``text``.

    Matches are taken left to right and never overlap.
    """

    return sum(int(left) * int(right) for left, right in MULTIPLICATION_PATTERN.findall(text))


def enabled_sections(text: str) -> List[str]:
    """Return the pieces of ``text`` that are executed while enabled.

    Parameters
    ----------
    text:
        Raw memory dump.

    Returns
    -------
    list[str]
        Sections in original order. Control tokens themselves are never part of
        the result. Everything before the first token counts as enabled.
    """

    is_enabled = True
    sections: List[str] = []
    for section in CONTROL_PATTERN.split(text):
        if section == ENABLE_TOKEN:
            is_enabled = True
        elif section == DISABLE_TOKEN:
            is_enabled = False
        elif is_enabled and section:
            sections.append(section)
    return sections


def process_controlled_instructions(text: str) -> int:
    """Like :func:`process_multiplication_instructions`, skipping disabled code."""

    return sum(process_multiplication_instructions(section) for section in enabled_sections(text))


def solve_part1(text: str) -> int:
    return process_multiplication_instructions(text)


def solve_part2(text: str) -> int:
    return process_controlled_instructions(text)


def solve(text: str) -> Tuple[Answer, Answer]:
    logger.debug("scanning %d characters of memory", len(text))
    return (
        Answer(1, "Total of all multiplications", solve_part1(text)),
        Answer(2, "Total of enabled multiplications", solve_part2(text)),
    )


__all__ = [
    "DAY",
    "TITLE",
    "MULTIPLICATION_PATTERN",
    "CONTROL_PATTERN",
    "process_multiplication_instructions",
    "enabled_sections",
    "process_controlled_instructions",
    "solve_part1",
    "solve_part2",
    "solve",
]
