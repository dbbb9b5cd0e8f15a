from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from fraclab.errors import FractionError, ParseError
from fraclab.fraction import FractionKind
from fraclab.menu import FractionMenu
from fraclab.prompt import parse_number
from fraclab.util import EPSILON, fmt_value

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _number(text: str) -> float:
    """argparse type reading a finite real number the way the menu does."""
    try:
        return parse_number(text)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _add_fraction_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "kind",
        choices=[kind.name.lower() for kind in FractionKind],
        help="fraction variant",
    )
    parser.add_argument(
        "coefficients",
        nargs="+",
        type=_number,
        metavar="COEFF",
        help="coefficients in order (a for simple; a1 a2 a3 for continued)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fraclab",
        description="Evaluate simple and continued fractions.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=4,
        help="digits printed after the decimal point (default: 4)",
    )
    parser.add_argument(
        "--tolerance",
        type=_number,
        default=EPSILON,
        help=f"magnitude treated as zero (default: {EPSILON:g})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="shortcut for --log-level DEBUG"
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("menu", help="interactive menu (default)")

    eval_parser = subparsers.add_parser("eval", help="evaluate a fraction at one point")
    _add_fraction_arguments(eval_parser)
    eval_parser.add_argument("-x", type=_number, required=True, help="evaluation point")

    table_parser = subparsers.add_parser("table", help="tabulate a fraction over a range")
    _add_fraction_arguments(table_parser)
    table_parser.add_argument("--start", type=_number, required=True)
    table_parser.add_argument("--stop", type=_number, required=True)
    table_parser.add_argument("--num", type=int, default=11, help="number of points (default: 11)")
    return parser


def run_eval(args: argparse.Namespace) -> int:
    kind = FractionKind.from_name(args.kind)
    fraction = kind.create(*args.coefficients, tolerance=args.tolerance)
    result = fraction.evaluate(args.x)
    print(f"Result: {fmt_value(result, args.precision)}")
    return 0


def run_table(args: argparse.Namespace) -> int:
    kind = FractionKind.from_name(args.kind)
    fraction = kind.create(*args.coefficients, tolerance=args.tolerance)
    xs = np.linspace(args.start, args.stop, args.num)
    print(fraction.describe())
    print(f"{'x':>14}  {'f(x)':>14}")
    for x, y in zip(xs, fraction.sample(xs)):
        print(f"{fmt_value(x, args.precision):>14}  {fmt_value(y, args.precision):>14}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, args.log_level),
        format=LOG_FORMAT,
    )
    if args.precision < 0:
        parser.error("--precision must be non-negative")
    if args.tolerance <= 0:
        parser.error("--tolerance must be positive")
    if args.command == "table" and args.num < 0:
        parser.error("--num must be non-negative")

    match args.command:
        case None | "menu":
            FractionMenu(precision=args.precision, tolerance=args.tolerance).run()
            return 0
        case "eval" | "table":
            kind = FractionKind.from_name(args.kind)
            if len(args.coefficients) != len(kind.coefficient_names):
                parser.error(
                    f"{args.kind} takes coefficients {' '.join(kind.coefficient_names)}"
                )
            try:
                return run_eval(args) if args.command == "eval" else run_table(args)
            except FractionError as e:
                logger.info("%s: %s", type(e).__name__, e)
                print(f"Error: {e}", file=sys.stderr)
                return 1
    assert False, "unreachable"


if __name__ == "__main__":
    sys.exit(main())
