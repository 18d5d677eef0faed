"""The two stacks and the eleven instructions that act on them.

A stack is a deque whose left end is the top.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum


class InstructionError(ValueError):
    """Raised for a line that is not a known instruction."""


class Instruction(Enum):
    """An instruction; its value is the name written on a line."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def swap(stack: deque) -> bool:
    """Swap the two top elements. Return False if there were fewer than two."""
    if len(stack) < 2:
        return False
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)
    return True


def push(source: deque, target: deque) -> bool:
    """Move the top of source onto target. Return False if source was empty."""
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def rotate(stack: deque) -> bool:
    """Move the top element to the bottom. Return False if nothing moved."""
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def reverse_rotate(stack: deque) -> bool:
    """Move the bottom element to the top. Return False if nothing moved."""
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


_BY_NAME = {instruction.value: instruction for instruction in Instruction}


def parse_instruction(line: str) -> Instruction:
    """Read one input line, newline included, as an instruction."""
    if not line.endswith("\n"):
        raise InstructionError(f"unterminated instruction: {line!r}")
    try:
        return _BY_NAME[line[:-1]]
    except KeyError:
        raise InstructionError(f"unknown instruction: {line!r}") from None


@dataclass
class Stacks:
    """Stack a, holding the numbers to sort, and the helper stack b."""

    a: deque = field(default_factory=deque)
    b: deque = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.a = deque(self.a)
        self.b = deque(self.b)

    def apply(self, instruction: Instruction) -> bool:
        """Carry out an instruction; return whether any element moved."""
        if instruction is Instruction.SA:
            return swap(self.a)
        if instruction is Instruction.SB:
            return swap(self.b)
        if instruction is Instruction.SS:
            moved_a = swap(self.a)
            moved_b = swap(self.b)
            return moved_a or moved_b
        if instruction is Instruction.PA:
            return push(self.b, self.a)
        if instruction is Instruction.PB:
            return push(self.a, self.b)
        if instruction is Instruction.RA:
            return rotate(self.a)
        if instruction is Instruction.RB:
            return rotate(self.b)
        if instruction is Instruction.RR:
            moved_a = rotate(self.a)
            moved_b = rotate(self.b)
            return moved_a or moved_b
        if instruction is Instruction.RRA:
            return reverse_rotate(self.a)
        if instruction is Instruction.RRB:
            return reverse_rotate(self.b)
        if instruction is Instruction.RRR:
            moved_a = reverse_rotate(self.a)
            moved_b = reverse_rotate(self.b)
            return moved_a or moved_b
        raise InstructionError(f"unknown instruction: {instruction!r}")