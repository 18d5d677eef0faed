"""Print the instructions that sort the numbers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ArgumentError, parse_arguments
from pushswap.solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers and write a sorting sequence to stdout."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        solve(values, sys.stdout)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    return 0