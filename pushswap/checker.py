"""Check whether a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from pushswap.operations import InstructionError, Stacks, parse_instruction
from pushswap.parsing import ArgumentError, check_duplicates, parse_arguments


def read_instructions(stream: TextIO) -> list[str]:
    """Read every line of the stream, keeping each line's newline."""
    return list(stream)


def run_instructions(values: Iterable[int], lines: Iterable[str]) -> Stacks:
    """Apply each instruction line to fresh stacks and return them.

    Raises InstructionError at the first line that is not an instruction.
    """
    stacks = Stacks(a=values)
    for line in lines:
        stacks.apply(parse_instruction(line))
    return stacks


def check(values: Sequence[int], lines: Iterable[str]) -> str:
    """Return "OK" if the instructions leave a sorted and b empty, else "KO".

    Raises ArgumentError if a value repeats and InstructionError for a line
    that is not an instruction.
    """
    check_duplicates(values)
    reference = sorted(values)
    stacks = run_instructions(values, lines)
    if stacks.b:
        return "KO"
    return "OK" if list(stacks.a) == reference else "KO"


def main(argv: Sequence[str] | None = None) -> int:
    """Read the numbers from the arguments and instructions from stdin."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        check_duplicates(values)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    lines = read_instructions(sys.stdin)
    try:
        verdict = check(values, lines)
    except InstructionError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(f"{verdict}\n")
    return 0