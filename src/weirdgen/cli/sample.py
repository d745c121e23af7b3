"""
Sampling command for the weirdgen CLI.

Prints generated values one per line as ``category<TAB>value``, optionally
followed by the hexadecimal bit pattern. With ``--stats`` it prints, for
each category, how often it was drawn next to its expected share.
"""

import sys
from collections import Counter
from functools import partial

from weirdgen.categories import FloatCategory, IntCategory
from weirdgen.errors import WeightTableError
from weirdgen.generator import WeirdGenerator
from weirdgen.ieee754 import FloatFormat
from weirdgen.primitives import parse_type, type_names
from weirdgen.weights import DEFAULT_FLOAT_WEIGHTS, WeightTable


def add_sample_parser(subparsers):
    """Add sample subcommand parser."""
    parser = subparsers.add_parser("sample", help="Print weird values of a primitive type")
    parser.add_argument(
        "type",
        help="Type to generate: {} (or iN/uN for any width)".format(", ".join(type_names()))
    )
    parser.add_argument("-n", "--count", type=int, default=10, help="Number of values (default: 10)")
    parser.add_argument(
        "--seed",
        type=lambda text: int(text, 0),
        help="Seed for a reproducible sequence (decimal or 0x-prefixed hex)"
    )
    parser.add_argument(
        "--weights",
        metavar="FILE",
        help="JSON object mapping category names to weights, replacing the default table"
    )
    parser.add_argument("--bits", action="store_true", help="Also print the raw bit pattern")
    parser.add_argument("--stats", action="store_true", help="Print category counts instead of values")
    return parser


def load_weights(path, family):
    """Read a weight table from a JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise WeightTableError("cannot read weight table {}: {}".format(path, e)) from e
    return WeightTable.from_json(family, text)


def run_sample(args, out=None):
    out = out or sys.stdout
    kind = parse_type(args.type)
    is_float = isinstance(kind, FloatFormat)
    family = FloatCategory if is_float else IntCategory

    gen = WeirdGenerator(seed=args.seed)
    if args.weights:
        gen.install_weights(kind, load_weights(args.weights, family))

    if is_float:
        draw = partial(gen.sample_float, kind.width)
        table = gen.weights_for(kind) or DEFAULT_FLOAT_WEIGHTS
    else:
        draw = partial(gen.sample_integer, kind.width, kind.signed)
        table = gen.weights_for(kind) or kind.default_weights

    if args.stats:
        counts = Counter(draw().category for _ in range(args.count))
        print_stats(counts, table, args.count, out)
        return 0

    digits = (kind.width + 3) // 4
    for _ in range(args.count):
        sample = draw()
        line = "{}\t{!r}".format(sample.category.value, sample.value)
        if args.bits:
            line += "\t0x{:0{}x}".format(sample.bits, digits)
        print(line, file=out)
    return 0


def print_stats(counts, table, total, out):
    print("{:<20} {:>10} {:>9} {:>9}".format("category", "count", "observed", "expected"), file=out)
    for category, weight in table.entries:
        observed = counts.get(category, 0) / total if total else 0.0
        print("{:<20} {:>10} {:>8.2%} {:>8.2%}".format(
            category.value, counts.get(category, 0), observed, weight / table.total), file=out)
