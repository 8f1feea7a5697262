"""Public package interface for the Advent of Code 2024 solutions."""

from .cli import main, run_day

__all__ = ["main", "run_day"]
