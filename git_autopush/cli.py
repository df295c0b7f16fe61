"""
Command-line interface for git-autopush.

This module is responsible for argument parsing and delegating to the
workflow module. It is the only place where errors become exit codes.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import DEFAULT_BRANCH, Config
from .errors import GitAutopushError
from .logging_utils import configure_logging
from .workflow import run_workflow

PROG = "ga"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Automates Git add, commit, and push workflow.",
    )

    parser.add_argument(
        "-m",
        "--message",
        help="Commit message (if not provided, you'll be prompted).",
    )
    parser.add_argument(
        "-o",
        "--origin",
        dest="remote_branch",
        metavar="BRANCH",
        help=f"Branch on origin to push to (default: {DEFAULT_BRANCH}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print verbose output from git commands.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def _tolerate_unencodable_output() -> None:
    """
    Let progress glyphs degrade to "?" on consoles that cannot encode them.
    """

    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = Config(
        message=args.message,
        remote_branch=args.remote_branch,
        verbose=args.verbose,
    )

    configure_logging(verbosity=config.verbosity)
    _tolerate_unencodable_output()

    try:
        run_workflow(config)
    except KeyboardInterrupt:
        return 130
    except GitAutopushError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        print(f"{PROG}: unexpected error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
