"""Finding a sequence of instructions that sorts stack a."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import TextIO

from pushswap.operations import Instruction, Stacks
from pushswap.output import InstructionWriter
from pushswap.parsing import check_duplicates


class Machine:
    """The two stacks, reporting every instruction that moves something."""

    def __init__(self, values: Iterable[int], emit: Callable[[Instruction], None]) -> None:
        self.stacks = Stacks(a=deque(values))
        self._emit = emit

    @property
    def a(self) -> deque:
        return self.stacks.a

    @property
    def b(self) -> deque:
        return self.stacks.b

    def perform(self, instruction: Instruction) -> bool:
        """Apply an instruction; report it only if an element moved."""
        moved = self.stacks.apply(instruction)
        if moved:
            self._emit(instruction)
        return moved


def size_chunk(low: int, high: int, stack: Iterable[int]) -> int:
    """Count the elements of the stack lying in the closed range [low, high]."""
    return sum(1 for value in stack if low <= value <= high)


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether the values never decrease from first to last."""
    return all(left <= right for left, right in pairwise(values))


def sort_three(machine: Machine, ref: Sequence[int], start: int, end: int) -> None:
    """Sort the three elements of a, which are ref[start], ref[start+1], ref[end]."""
    first = machine.a[0]
    last = machine.a[-1]
    lowest, middle, highest = ref[start], ref[start + 1], ref[end]
    if first == highest and last == middle:
        machine.perform(Instruction.RA)
    elif first == highest and last == lowest:
        machine.perform(Instruction.RA)
        machine.perform(Instruction.SA)
    elif first == middle and last == lowest:
        machine.perform(Instruction.RRA)
    elif first == middle and last == highest:
        machine.perform(Instruction.SA)
    elif first == lowest and last == middle:
        machine.perform(Instruction.RRA)
        machine.perform(Instruction.SA)


def _chunk_offset(size: int) -> int:
    if size <= 10:
        return 5
    if size <= 150:
        return size // 8
    return size // 13


def push_all_to_b(machine: Machine, ref: Sequence[int], size: int) -> None:
    """Move everything but the three largest values to b, chunk by chunk.

    Chunks grow outwards from the median; values below the median are rotated
    to the bottom of b once values above it have arrived there.
    """
    middle = size // 2
    offset = _chunk_offset(size)
    end = min(middle + offset, size - 1)
    start = max(middle - offset, 0)
    upper_size = size_chunk(ref[middle], ref[end], machine.a)
    lower_size = size_chunk(ref[start], ref[middle - 1], machine.a)
    b_split = False

    while len(machine.a) > 3:
        top = machine.a[0]
        if ref[size - 3] <= top <= ref[size - 1]:
            machine.perform(Instruction.RA)
        elif ref[start] <= top <= ref[middle - 1]:
            machine.perform(Instruction.PB)
            if b_split or any(value >= ref[middle] for value in machine.b):
                b_split = True
                machine.perform(Instruction.RB)
            lower_size -= 1
        elif ref[middle] <= top <= ref[end]:
            machine.perform(Instruction.PB)
            upper_size -= 1
        else:
            machine.perform(Instruction.RA)

        if lower_size <= 0:
            start = max(start - offset, 0)
            lower_size = size_chunk(ref[start], ref[middle - 1], machine.a)
        if upper_size <= 0:
            end = min(end + offset, size - 1)
            upper_size = size_chunk(ref[middle], ref[end], machine.a)


@dataclass
class _Placement:
    """Bookkeeping while values return to a, from the largest down."""

    b_size: int
    up: int = 0
    down: int = 0
    i: int = 4


def _index_of(stack: deque, value: int) -> int:
    try:
        return stack.index(value)
    except ValueError:
        return -1


def _put_target(machine: Machine, state: _Placement) -> None:
    while state.up > 1:
        state.up -= 1
        state.down += 1
        machine.perform(Instruction.RA)
    machine.perform(Instruction.PA)
    state.b_size -= 1
    state.i += 1
    if state.up == 1:
        machine.perform(Instruction.SA)


def _find_target(machine: Machine, state: _Placement, target: int) -> None:
    if machine.a[0] == target:
        state.up -= 1
    else:
        machine.perform(Instruction.RRA)
        state.down -= 1
    state.i += 1


def _put_target_inplace(machine: Machine, state: _Placement, target: int) -> None:
    if not state.down or machine.a[-1] < machine.b[0]:
        while machine.a[0] < machine.b[0]:
            machine.perform(Instruction.RA)
            state.up -= 1
            state.down += 1
        machine.perform(Instruction.PA)
        state.up += 1
        state.b_size -= 1
    elif state.b_size > 1 and machine.b[1] == target:
        machine.perform(Instruction.SB)
    else:
        machine.perform(Instruction.RB)


def push_all_to_a(machine: Machine, ref: Sequence[int], size: int) -> None:
    """Bring every value back from b so that a ends up sorted."""
    state = _Placement(b_size=len(machine.b))
    while machine.b or state.up or state.down:
        target = ref[size - state.i]
        index = _index_of(machine.b, target)
        if index == 0:
            _put_target(machine, state)
        elif index == -1:
            _find_target(machine, state, target)
        elif index > state.b_size // 2:
            while machine.b[0] != target:
                machine.perform(Instruction.RRB)
        else:
            _put_target_inplace(machine, state, target)


def solve(values: Sequence[int], stream: TextIO) -> None:
    """Write to the stream the instructions that sort the values.

    Raises ArgumentError if a value repeats. Nothing is written when the
    values are already in order.
    """
    check_duplicates(values)
    if is_sorted(values):
        return
    size = len(values)
    ref = sorted(values)
    writer = InstructionWriter(stream)
    machine = Machine(values, writer.emit)
    if size == 3:
        sort_three(machine, ref, 0, 2)
    elif size == 2:
        machine.perform(Instruction.SA)
    else:
        push_all_to_b(machine, ref, size)
        sort_three(machine, ref, size - 3, size - 1)
        push_all_to_a(machine, ref, size)
    writer.flush()