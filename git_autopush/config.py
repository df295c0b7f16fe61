"""
Configuration model for git-autopush.

The CLI constructs a Config instance and passes it down into the
workflow so behavior can be adjusted without relying on global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "main"


@dataclass(frozen=True)
class Config:
    """
    Options for a single git-autopush run.

    message is None when the user should be prompted for one.
    remote_branch is None when the default branch should be pushed.
    """

    message: Optional[str] = None
    remote_branch: Optional[str] = None
    verbose: bool = False

    @property
    def branch(self) -> str:
        return self.remote_branch or DEFAULT_BRANCH

    @property
    def verbosity(self) -> int:
        return 1 if self.verbose else 0
