"""
Custom exception types used across git-autopush.

Every failure in the workflow is terminal. Each step raises one of these
at the point of detection and the CLI turns it into a single error line
and a non-zero exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .git_adapter import StepResult


class GitAutopushError(Exception):
    """Base class for all git-autopush specific errors."""


class NotARepositoryError(GitAutopushError):
    """Raised when the working directory is not a git working tree."""


class GitInvocationError(GitAutopushError):
    """Raised when the git executable cannot be started."""


class GitCommandError(GitAutopushError):
    """Raised when git runs but exits with a non-zero status."""

    def __init__(self, message: str, result: Optional["StepResult"] = None) -> None:
        super().__init__(message)
        self.result = result


class NothingToCommitError(GitCommandError):
    """Raised when a commit is attempted with nothing staged."""


class CommitMessageError(GitAutopushError):
    """Raised when a commit message is empty after trimming."""


class InputError(GitAutopushError):
    """Raised when the interactive prompt cannot read a line."""
