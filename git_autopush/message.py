"""
Commit message acquisition.

A message passed on the command line is validated as-is. Without one,
the user is prompted through a read_line callable, which defaults to
the builtin input() and can be swapped for a scripted source.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .errors import CommitMessageError, InputError

LOG = logging.getLogger(__name__)

PROMPT = "Enter commit message: "

ReadLine = Callable[[str], str]


def validate_commit_message(message: str) -> str:
    """
    Reject messages that are empty after trimming.

    The trim is for validation only; the original string is returned.
    """

    if not message.strip():
        raise CommitMessageError("Commit message cannot be empty")
    return message


def prompt_commit_message(read_line: ReadLine = input) -> str:
    """
    Ask for a commit message until a non-empty line is entered.

    An empty line asks again. A line of only whitespace is not empty
    and goes on to validation, where it is rejected.
    """

    print("→ Commit message required")
    while True:
        try:
            entered = read_line(PROMPT)
        except (EOFError, OSError) as exc:
            raise InputError(f"Failed to read input: {str(exc) or 'end of input'}") from exc
        if entered:
            return validate_commit_message(entered)
        LOG.info("Empty commit message entered; prompting again")


def acquire_commit_message(
    message: Optional[str] = None,
    read_line: ReadLine = input,
) -> str:
    if message is not None:
        return validate_commit_message(message)
    return prompt_commit_message(read_line)
