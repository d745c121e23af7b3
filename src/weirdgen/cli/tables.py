"""
Weight table listing for the weirdgen CLI.
"""

import sys

from weirdgen.ieee754 import FloatFormat
from weirdgen.primitives import parse_type
from weirdgen.weights import DEFAULT_FLOAT_WEIGHTS, DEFAULT_SIGNED_WEIGHTS, DEFAULT_UNSIGNED_WEIGHTS


def add_tables_parser(subparsers):
    """Add tables subcommand parser."""
    parser = subparsers.add_parser("tables", help="Show the built-in weight tables")
    parser.add_argument("type", nargs="?", help="Only show the table used for this type")
    return parser


def run_tables(args, out=None):
    out = out or sys.stdout
    if args.type:
        kind = parse_type(args.type)
        table = DEFAULT_FLOAT_WEIGHTS if isinstance(kind, FloatFormat) else kind.default_weights
        tables = [(args.type, table)]
    else:
        tables = [
            ("float", DEFAULT_FLOAT_WEIGHTS),
            ("signed integer", DEFAULT_SIGNED_WEIGHTS),
            ("unsigned integer", DEFAULT_UNSIGNED_WEIGHTS),
        ]

    for name, table in tables:
        print("{} (total weight {})".format(name, table.total), file=out)
        for category, weight in table.entries:
            print("  {:<20} {:>6} {:>8.2%}".format(category.value, weight, weight / table.total), file=out)
    return 0
