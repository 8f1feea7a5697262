"""aoc2024.cli
===============

Command-line entry point: read a day's input, run its solver and print both
answers. Input problems are logged to stderr and reported through the exit
status instead of a traceback.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import INPUTS_DIR
from .inputs import PuzzleInputError, input_path, read_input
from .logging_utils import configure_logging
from .solvers import SOLVER_REGISTRY, get_solver
from .types import Answer

logger = logging.getLogger(__name__)


def run_day(day: int, path: Optional[Path] = None, inputs_dir: str = INPUTS_DIR) -> Tuple[Answer, Answer]:
    """Solve ``day`` from ``path`` (or the conventional input location).

    Raises
    ------
    KeyError
        If no solver is registered for ``day``.
    PuzzleInputError
        If the input cannot be read or parsed.
    """

    solver = get_solver(day)
    source = path if path is not None else input_path(day, inputs_dir)
    logger.debug("day %d (%s): reading %s", day, solver.TITLE, source)
    text = read_input(source)
    return solver.solve(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("aoc2024", description="Advent of Code 2024 solutions")
    parser.add_argument("day", nargs="?", type=int, choices=sorted(SOLVER_REGISTRY), help="Puzzle day to solve")
    parser.add_argument("--all", action="store_true", help="Solve every available day in order")
    parser.add_argument("--input", type=Path, default=None, help="Input file (defaults to <inputs-dir>/dayNN.txt)")
    parser.add_argument("--inputs-dir", default=INPUTS_DIR, help="Directory holding dayNN.txt input files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: List[str] | None = None) -> int:
    """Parse CLI arguments, solve the requested days and return an exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.all == (args.day is not None):
        parser.error("give exactly one of a day or --all")
    if args.all and args.input is not None:
        parser.error("--input cannot be combined with --all")
    configure_logging(args.verbose)

    days = sorted(SOLVER_REGISTRY) if args.all else [args.day]
    status = 0
    for day in days:
        try:
            answers = run_day(day, args.input, args.inputs_dir)
        except PuzzleInputError as exc:
            logger.error("day %d failed: %s", day, exc)
            status = 1
            continue
        if args.all:
            print(f"Day {day}: {get_solver(day).TITLE}")
        for answer in answers:
            print(answer.render())
    return status


__all__ = ["main", "run_day", "build_parser"]
