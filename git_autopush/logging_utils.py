"""
Logging helpers for git-autopush.

Progress and confirmation lines are printed directly by the workflow;
log records carry the diagnostic detail (git argv, stderr of failed
commands) and always go to stderr so they never mix with git output
echoed on stdout.
"""

from __future__ import annotations

import logging
import sys


def level_for(verbosity: int) -> int:
    """
    Map a verbosity count to a logging level.

    verbosity == 0 -> WARNING
    verbosity >= 1 -> INFO
    """

    if verbosity <= 0:
        return logging.WARNING
    return logging.INFO


def configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=level_for(verbosity),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
