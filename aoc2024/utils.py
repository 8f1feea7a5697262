"""aoc2024.utils
=================

The two helpers shared between solvers: predicate counting and frequency
counting.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable, Hashable, Iterable, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def count_if(items: Iterable[T], predicate: Callable[[T], object]) -> int:
    """Return how many elements of ``items`` satisfy ``predicate``.

    Parameters
    ----------
    items:
        Any iterable; it is consumed once.
    predicate:
        Called with each element. Truthy results are counted.

    Returns
    -------
    int
        Number of matching elements. Empty inputs return ``0``.
    """

    return sum(1 for item in items if predicate(item))


def create_counter(items: Iterable[H]) -> Counter[H]:
    """Build a mapping from each distinct value to its number of occurrences.

    Missing keys read as ``0``, so callers can look up values that never
    appeared without a guard.
    """

    return Counter(items)


__all__ = ["count_if", "create_counter"]
