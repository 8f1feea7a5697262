"""aoc2024.inputs
==================

Locating, reading and tokenising puzzle inputs, plus the exceptions raised when
that fails. Solvers raise these errors; only :mod:`aoc2024.cli` catches them.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .constants import INPUT_TEMPLATE, INPUTS_DIR

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# ASCII digits with an optional leading minus.
INTEGER_PATTERN = re.compile(r"-?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class PuzzleInputError(Exception):
    """Base class for anything wrong with a puzzle input."""


class InputReadError(PuzzleInputError):
    """The input file is missing, unreadable or not valid UTF-8."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"cannot read input file {str(path)!r}: {reason}")
        self.path = Path(path)


class ParseError(PuzzleInputError, ValueError):
    """A line of the input does not have the expected shape."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def input_path(day: int, inputs_dir: PathLike = INPUTS_DIR) -> Path:
    """Return the conventional location of the input file for ``day``."""

    return Path(inputs_dir) / INPUT_TEMPLATE.format(day=day)


def read_input(path: PathLike) -> str:
    """Read ``path`` fully into memory as UTF-8 text.

    Raises
    ------
    InputReadError
        When the file cannot be opened or decoded. The original exception is
        chained as ``__cause__``.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InputReadError(path, "no such file") from exc
    except UnicodeDecodeError as exc:
        raise InputReadError(path, "not valid UTF-8") from exc
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc
    logger.debug("read %d characters from %s", len(text), path)
    return text


def numbered_lines(text: str) -> List[Tuple[int, str]]:
    """Pair each line of ``text`` with its 1-based line number.

    Blank lines before the first and after the last non-blank line are dropped;
    numbering always refers to the untouched file. Blank lines in between are
    kept so callers can decide whether they are allowed.
    """

    lines = list(enumerate(text.splitlines(), start=1))
    while lines and not lines[0][1].strip():
        lines.pop(0)
    while lines and not lines[-1][1].strip():
        lines.pop()
    return lines


def parse_int(token: str, line_number: Optional[int] = None) -> int:
    """Convert ``token`` to ``int`` or raise :class:`ParseError`.

    Only plain decimal integers that fit in a signed 64-bit value are accepted.
    """

    if not INTEGER_PATTERN.fullmatch(token):
        raise ParseError(f"expected an integer, got {token!r}", line_number)
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(f"integer out of range: {token}", line_number)
    return value


__all__ = [
    "PuzzleInputError",
    "InputReadError",
    "ParseError",
    "input_path",
    "read_input",
    "numbered_lines",
    "parse_int",
]
