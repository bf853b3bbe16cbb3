"""Entrypoint that evaluates a unit expression given on the command line."""

import argparse
import logging
import sys

from . import unit
from .errors import UnitError


def run(argv: list[str] | None = None) -> int:
    """Parse an expression, optionally convert it, and print the result."""
    parser = argparse.ArgumentParser(
        prog="unit-arithmetic",
        description="Unit Arithmetic: Evaluate and convert values with units.",
    )
    parser.add_argument("expression", help='Value with units, e.g. "5 km / h"')
    target = parser.add_mutually_exclusive_group()
    target.add_argument("-t", "--to", metavar="UNIT", help="Convert to these units")
    target.add_argument("--si", action="store_true", help="Convert to SI base units")
    target.add_argument(
        "-s", "--system", metavar="NAME", help="Convert to a unit system, e.g. cgs"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = unit(args.expression)
        if args.to:
            result = result.to(args.to)
        elif args.si:
            result = result.to_si()
        elif args.system:
            result = result.to_system(args.system)
    except UnitError as e:
        print(f"{e.code}: {e.message}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(run())
