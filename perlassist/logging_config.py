"""Logging setup for the perlassist CLI.

Log records go to stderr so they never mix with results on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_VERBOSITY_LEVELS: dict[int, int] = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


def level_for_verbosity(verbosity: int) -> int:
    """Map 0=quiet 1=normal 2=verbose 3=debug onto a logging level."""
    return _VERBOSITY_LEVELS[max(0, min(verbosity, 3))]


def configure_logging(verbosity: int = 1, *, force: bool = False) -> None:
    """
    Configure the ``perlassist`` logger once.

    Args:
        verbosity: Output verbosity (0-3), see ``level_for_verbosity``.
        force: When True, replace handlers installed by an earlier call.
    """
    logger = logging.getLogger("perlassist")
    logger.setLevel(level_for_verbosity(verbosity))

    if logger.handlers and not force:
        return

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbosity >= 3,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
