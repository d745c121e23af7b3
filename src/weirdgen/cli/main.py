"""Main CLI dispatcher for weirdgen.

This module provides the main command-line interface for weirdgen,
dispatching commands to the sampling and weight-table sub-modules.
"""

import argparse
import logging
import sys

from weirdgen import __version__
from weirdgen.errors import WeirdgenError

from .sample import add_sample_parser, run_sample
from .tables import add_tables_parser, run_tables

LOG = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the weirdgen CLI.

    Returns:
        int: Exit code (0 for success, non-zero for error).
    """
    parser = argparse.ArgumentParser(
        description="weirdgen - edge-case biased random values", prog="weirdgen"
    )

    parser.add_argument("--version", action="version", version="weirdgen {}".format(__version__))
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Debug output")

    subparsers = parser.add_subparsers(
        dest="command", help="Available commands", required=True
    )

    add_sample_parser(subparsers)
    add_tables_parser(subparsers)

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.debug else logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        if args.command == "sample":
            return run_sample(args)
        elif args.command == "tables":
            return run_tables(args)
    except WeirdgenError as e:
        LOG.debug("command %s failed", args.command, exc_info=True)
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
