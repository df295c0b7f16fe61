"""
Precondition checks for git-autopush.

These run before any git command so that invoking the tool outside a
repository fails fast without touching anything.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .errors import NotARepositoryError

GIT_MARKER = ".git"


def ensure_git_repository(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Verify that path (default: the current directory) is a working tree root.

    The check looks for a .git entry only. It may be a directory or, for
    linked worktrees and submodules, a file.
    """

    root = Path(path) if path is not None else Path.cwd()
    if not (root / GIT_MARKER).exists():
        raise NotARepositoryError("Not a git repository. No .git directory found.")
    return root
