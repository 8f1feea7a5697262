"""aoc2024.logging_utils
=========================

Logging setup for the command-line entry point. Answers are printed to stdout;
everything diagnostic goes through :mod:`logging` to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(verbose: bool = False) -> None:
    """Attach a single stderr handler to the root logger.

    Calling the function again replaces the handler instead of stacking a
    second one, so repeated CLI invocations in one process log each record once.
    """

    global _handler

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = ["LOG_FORMAT", "configure_logging"]
