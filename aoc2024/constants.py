"""aoc2024.constants
====================

Global constants shared by the solvers. Keeping them here avoids import cycles
between the day modules and the command-line entry point, and makes it easy to
discover where inputs are looked up.
"""

from __future__ import annotations

from typing import Tuple

INPUTS_DIR = "inputs"
INPUT_TEMPLATE = "day{day:02d}.txt"

XMAS_PATTERN: Tuple[str, ...] = ("X", "M", "A", "S")
MAS_PATTERN: Tuple[str, ...] = ("M", "A", "S")

__all__ = ["INPUTS_DIR", "INPUT_TEMPLATE", "XMAS_PATTERN", "MAS_PATTERN"]
