"""
Module: cli

Purpose:
    Command line interface for fortune-kind. Parses arguments, builds the
    FortuneConfig from the environment and FilterCriteria from flags,
    runs the pipeline and prints the result.

Key Functions:
    - build_parser(): Argument parser definition
    - criteria_from_args(): Translate parsed flags into FilterCriteria
    - main(): Console entry point, returns the exit status

Exit Status:
    0  fortune printed (or search ran)
    1  nothing matched, or a fortune path was missing/unreadable
    2  invalid arguments (argparse)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from fortune_kind import __version__
from fortune_kind.core.models import Category, FortuneCollection, FortuneEntry

from .config import FortuneConfig
from .controller import draw_fortune, find_fortunes
from .loading import LoaderError
from .search import SearchError
from .selection import FilterCriteria, short_length_for_level

logger = logging.getLogger(__name__)

PROG = "fortune-kind"

# Asking for a short fortune this many times gets a reply instead
SHORT_PATIENCE = 255
SHORT_PATIENCE_REPLY = "WE GET IT, YOU WANT A SHORT FORTUNE"

EXIT_OK = 0
EXIT_FAILURE = 1


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Print a random fortune. A new kinda fortune.",
        epilog=(
            "Fortunes are read from PATH, or from $FORTUNE_DIR (and $FORTUNE_OFF_DIR "
            "for unkind fortunes) when no PATH is given."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        metavar="PATH",
        help="Fortune file or directory of fortune files",
    )
    parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="Shows all fortunes, including unkind.",
    )
    parser.add_argument(
        "-u", "-o", "--unkind",
        action="store_true",
        help="Shows only unkind fortunes.",
    )
    parser.add_argument(
        "-m", "--find",
        metavar="PATTERN",
        help="Finds fortunes matching regex query.",
    )
    parser.add_argument(
        "-i", "--ignore-case",
        action="store_true",
        help="Makes --find case-insensitive.",
    )
    parser.add_argument(
        "-n", "--length",
        type=_non_negative_int,
        metavar="N",
        help="Finds a fortune that is at most N characters long.",
    )
    parser.add_argument(
        "-s", "--short",
        action="count",
        default=0,
        help="Shows a short aphorism. Repeat for shorter ones (-ss is very short).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the random choice for reproducible output.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    """
    Translate parsed flags into FilterCriteria.

    When both --short and --length are given the smaller limit wins.
    """
    limits = [limit for limit in (short_length_for_level(args.short), args.length) if limit is not None]
    return FilterCriteria(
        max_length=min(limits) if limits else None,
        category=Category.UNKIND if args.unkind else Category.STANDARD,
        include_unkind=args.all,
        source_path=args.path,
    )


def present_fortune(entry: FortuneEntry, stream: TextIO) -> None:
    stream.write(f"{entry.text}\n")


def present_matches(matches: FortuneCollection, stream: TextIO) -> None:
    """Print matches in fortune-file format, each followed by a % line."""
    for entry in matches:
        stream.write(f"{entry.text.strip()}\n%\n")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=f"{PROG}: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run fortune-kind and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.short >= SHORT_PATIENCE:
        print(SHORT_PATIENCE_REPLY)
        return EXIT_OK

    config = FortuneConfig.from_env()
    criteria = criteria_from_args(args)
    logger.debug(f"Config: {config}")
    logger.debug(f"Criteria: {criteria}")

    try:
        if args.find is not None:
            matches = find_fortunes(config, criteria, args.find, ignore_case=args.ignore_case)
            present_matches(matches, sys.stdout)
            return EXIT_OK

        result = draw_fortune(config, criteria, seed=args.seed)
    except (LoaderError, SearchError) as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if result.is_empty:
        print(f"{PROG}: No fortunes matched.", file=sys.stderr)
        return EXIT_FAILURE

    present_fortune(result.entry, sys.stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
