#!/usr/bin/env python3
"""
taskq command interpreter - reads a script from stdin and prints the results.

Script format:
    <number of commands>
    add "<description>" [#tag ...]
    done <id>
    search [word ...] [#tag ...]

Usage:
    python -m taskq [--input FILE] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from taskq.core.errors import ScriptFormatError
from taskq.core.logging import configure_logging
from taskq.domain.session import Session
from taskq.settings import settings


def run(lines: Iterable[str], out: TextIO, err: TextIO) -> int:
    """Run a script, writing output lines to out and error lines to err."""
    session = Session()
    try:
        for outcome in session.iter_script(lines):
            for line in outcome.output:
                print(line, file=out)
            if not outcome.ok:
                print(outcome.error_line, file=err)
    except ScriptFormatError as exc:
        print(f"Error: {exc}", file=err)
        return 2
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskq",
        description="Todo command interpreter with fuzzy search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--input",
        type=str,
        help="Read the script from this file instead of standard input",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or settings.log_level)

    if args.input:
        try:
            with open(args.input, encoding="utf-8") as fh:
                return run(fh, sys.stdout, sys.stderr)
        except OSError as exc:
            print(f"Error: cannot read {args.input}: {exc}", file=sys.stderr)
            return 1

    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
