"""aoc2024.solvers
===================

Central registry mapping puzzle days to solver modules. The CLI looks days up
here so that adding a new day only means writing its module and listing it
below.
"""

from __future__ import annotations

from types import ModuleType
from typing import Dict

from . import day01, day02, day03, day04

SOLVER_REGISTRY: Dict[int, ModuleType] = {
    module.DAY: module
    for module in (day01, day02, day03, day04)
}


def get_solver(day: int) -> ModuleType:
    """Lookup ``day`` in :data:`SOLVER_REGISTRY` with a helpful error."""

    try:
        return SOLVER_REGISTRY[day]
    except KeyError as exc:
        raise KeyError(f"No solver for day {day}. Available days: {sorted(SOLVER_REGISTRY)}") from exc


__all__ = ["SOLVER_REGISTRY", "get_solver"]
