"""
High-level orchestration for git-autopush.

The workflow is strictly linear:
  - check that the directory is a git working tree,
  - stage all changes,
  - acquire a commit message,
  - commit with a sign-off, and
  - push to origin.

Each step must succeed before the next one runs. Failures propagate as
GitAutopushError subclasses; nothing already done is rolled back.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT_REMOTE, Config
from .git_adapter import GitRunner, StepResult, commit_signed_off, push, run_git, stage_all
from .message import ReadLine, acquire_commit_message
from .preflight import ensure_git_repository

LOG = logging.getLogger(__name__)


def _echo(text: str) -> None:
    if text:
        print(text)


def _stage(config: Config, cwd: Optional[str], runner: GitRunner) -> StepResult:
    print("→ Running git add .")
    result = stage_all(cwd=cwd, runner=runner)
    if config.verbose:
        _echo(result.stdout)
    print("✓ Staged all changes")
    return result


def _commit(
    config: Config,
    message: str,
    cwd: Optional[str],
    runner: GitRunner,
) -> StepResult:
    print(f'→ Committing with message: "{message}"')
    result = commit_signed_off(message, cwd=cwd, runner=runner)
    if config.verbose:
        print(result.stdout)
    print("✓ Commit created")
    return result


def _push(config: Config, cwd: Optional[str], runner: GitRunner) -> StepResult:
    branch = config.branch
    print(f"→ Pushing to {DEFAULT_REMOTE}/{branch}")
    result = push(branch, remote=DEFAULT_REMOTE, cwd=cwd, runner=runner)
    if config.verbose:
        # git push reports progress on stderr even when it succeeds.
        _echo(result.stdout)
        _echo(result.stderr)
    print(f"✓ Pushed to {DEFAULT_REMOTE}/{branch}")
    return result


def run_workflow(
    config: Config,
    cwd: Optional[str] = None,
    runner: GitRunner = run_git,
    read_line: ReadLine = input,
) -> None:
    """
    Stage, commit and push according to the configuration.

    cwd defaults to the current directory. runner and read_line are the
    seams for git and for the interactive prompt respectively.
    """

    ensure_git_repository(cwd)
    LOG.info("Working tree found; staging changes")

    _stage(config, cwd, runner)
    LOG.info("Changes staged; acquiring commit message")

    message = acquire_commit_message(config.message, read_line=read_line)
    LOG.info("Commit message acquired")

    _commit(config, message, cwd, runner)
    LOG.info("Commit created; pushing %s", config.branch)

    _push(config, cwd, runner)

    print()
    print("✓ Successfully pushed the code!")
