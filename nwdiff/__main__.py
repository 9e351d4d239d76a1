"""
nwdiff Entry Point
==================

Command-line interface: compares two files line by line and prints a
token-level alignment for every line that differs.

Usage:
    python -m nwdiff <file1> <file2> [--char] [--tags] [--tags-type SAM|PAF] [--stats]
"""
import argparse
import logging
import sys
from .comparator import LineComparator
from .formats import Schema
from .input_controller import InputController
from .models import Granularity
from .stats import DiffStats
from .visualizer import ConsoleRenderer

logger = logging.getLogger("nwdiff")


def resolve_schema(args):
    """
    Picks the column schema for field attribution.

    Returns:
        Schema or None: None when attribution is disabled.
    """
    if args.tags_type:
        schema = Schema.from_name(args.tags_type)
        if schema is None:
            logger.warning("unknown tags-type '%s', using basic tags", args.tags_type)
            return Schema.NONE
        return schema
    if args.tags:
        return Schema.NONE
    return None


def build_parser():
    parser = argparse.ArgumentParser(
        prog="nwdiff",
        description="nwdiff: token-level line comparison using Needleman-Wunsch alignment")
    parser.add_argument("file1", help="First file")
    parser.add_argument("file2", help="Second file")
    parser.add_argument("-c", "--char", action="store_true", help="Compare characters instead of words")
    parser.add_argument("-t", "--tags", action="store_true", help="Treat lines as tabular records (column report needs --tags-type)")
    parser.add_argument("--tags-type", help="Column schema for --tags (SAM or PAF)")
    parser.add_argument("--stats", action="store_true", help="Print a summary after the diffs")
    parser.add_argument("--no-color", action="store_true", help="Plain output without ANSI colors")
    parser.add_argument("-j", "--jobs", type=int, default=1, help="Worker threads used for alignment")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv=None):
    """
    Main execution function.

    1. Parses command line arguments.
    2. Builds the session stats (with field attribution if requested).
    3. Streams line pairs through the comparator.
    4. Prints each differing line, then the optional summary.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr)

    stats = DiffStats.for_schema(resolve_schema(args))
    granularity = Granularity.CHAR if args.char else Granularity.WORD
    comparator = LineComparator(granularity)
    renderer = ConsoleRenderer(color=not args.no_color)
    controller = InputController()

    try:
        pairs = controller.pairs(args.file1, args.file2)
        for diff in comparator.run(pairs, stats, jobs=args.jobs):
            print(renderer.format_diff(diff))
    except OSError as e:
        logger.error("cannot read input: %s", e)
        return 1

    if args.stats:
        print()
        print(renderer.format_summary(stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())
