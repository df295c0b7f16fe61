"""
Git integration for git-autopush.

Every git invocation goes through run_git, which captures both output
streams and returns a StepResult without judging the exit status. The
step functions below decide what counts as failure and accept a runner
argument so callers (and tests) can substitute their own.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config import DEFAULT_REMOTE
from .errors import GitCommandError, GitInvocationError, NothingToCommitError

LOG = logging.getLogger(__name__)

NOTHING_TO_COMMIT = "nothing to commit"


@dataclass
class StepResult:
    """
    Outcome of one git invocation.

    stdout and stderr are decoded as UTF-8; undecodable bytes are
    replaced rather than raising.
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""
    args: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.returncode == 0


GitRunner = Callable[..., StepResult]


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def run_git(args: List[str], cwd: Optional[str] = None) -> StepResult:
    """
    Run a git command and return its StepResult.

    A non-zero exit status is reported through the result, not raised.
    GitInvocationError is raised only when git cannot be executed at all.
    """

    cmd = ["git", *args]
    LOG.info("Running git command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            capture_output=True,
        )
    except OSError as exc:
        subcommand = args[0] if args else ""
        raise GitInvocationError(f"Failed to execute git {subcommand}: {exc}") from exc

    result = StepResult(
        returncode=completed.returncode,
        stdout=_decode(completed.stdout),
        stderr=_decode(completed.stderr),
        args=cmd,
    )
    if not result.ok:
        LOG.info("git exited with %d, stderr: %s", result.returncode, result.stderr)
    return result


def stage_all(cwd: Optional[str] = None, runner: GitRunner = run_git) -> StepResult:
    """
    Stage every change in the working tree, with no path filters.
    """

    result = runner(["add", "."], cwd=cwd)
    if not result.ok:
        raise GitCommandError(f"git add failed: {result.stderr}", result)
    return result


def commit_signed_off(
    message: str,
    cwd: Optional[str] = None,
    runner: GitRunner = run_git,
) -> StepResult:
    """
    Create a commit with the given message and a Signed-off-by trailer.

    Only stderr is inspected to tell "nothing to commit" apart from
    other failures.
    """

    result = runner(["commit", "-s", "-m", message], cwd=cwd)
    if not result.ok:
        if NOTHING_TO_COMMIT in result.stderr:
            raise NothingToCommitError("Nothing to commit, working tree clean", result)
        raise GitCommandError(f"git commit failed: {result.stderr}", result)
    return result


def push(
    branch: str,
    remote: str = DEFAULT_REMOTE,
    cwd: Optional[str] = None,
    runner: GitRunner = run_git,
) -> StepResult:
    """
    Push branch to the named remote.
    """

    result = runner(["push", remote, branch], cwd=cwd)
    if not result.ok:
        raise GitCommandError(f"git push failed: {result.stderr}", result)
    return result
