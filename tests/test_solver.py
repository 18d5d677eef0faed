import io
import random
from collections import deque
from itertools import permutations

import pytest

from pushswap.operations import Instruction, Stacks, parse_instruction
from pushswap.parsing import ArgumentError
from pushswap.solver import (
    Machine,
    is_sorted,
    push_all_to_a,
    push_all_to_b,
    size_chunk,
    solve,
    sort_three,
)


def _replay(values, text):
    stacks = Stacks(a=values)
    for line in text.splitlines(keepends=True):
        stacks.apply(parse_instruction(line))
    return stacks


def _solve(values):
    stream = io.StringIO()
    solve(values, stream)
    return stream.getvalue()


def test_size_chunk_counts_closed_range():
    assert size_chunk(2, 6, deque([5, 1, 9, 3, 6, 2])) == 4


def test_size_chunk_empty_stack():
    assert size_chunk(0, 10, deque()) == 0


def test_is_sorted():
    assert is_sorted([1, 2, 3])
    assert is_sorted([])
    assert not is_sorted([2, 1, 3])


def test_machine_reports_only_moves():
    emitted = []
    machine = Machine([1], emitted.append)
    assert machine.perform(Instruction.SA) is False
    assert emitted == []
    assert machine.perform(Instruction.PB) is True
    assert emitted == [Instruction.PB]
    assert list(machine.b) == [1]
    assert list(machine.a) == []


@pytest.mark.parametrize("order", list(permutations([1, 2, 3])))
def test_sort_three_sorts_every_order(order):
    emitted = []
    machine = Machine(order, emitted.append)
    sort_three(machine, [1, 2, 3], 0, 2)
    assert list(machine.a) == [1, 2, 3]
    assert len(emitted) <= 2


@pytest.mark.parametrize(
    "values, expected",
    [([2, 1, 3], "sa\n"), ([3, 1, 2], "ra\n"), ([2, 3, 1], "rra\n"), ([2, 1], "sa\n")],
)
def test_small_inputs(values, expected):
    assert _solve(values) == expected


def test_sorted_input_writes_nothing():
    assert _solve([1, 2, 3, 4, 5]) == ""
    assert _solve([42]) == ""


def test_duplicates_are_rejected():
    with pytest.raises(ArgumentError):
        _solve([3, 1, 3])


@pytest.mark.parametrize("size", [3, 4, 5, 6])
def test_every_permutation_is_sorted(size):
    for order in permutations(range(size)):
        stacks = _replay(order, _solve(list(order)))
        assert list(stacks.a) == list(range(size)), order
        assert not stacks.b


@pytest.mark.parametrize("seed, size", [(1, 10), (2, 25), (3, 50), (4, 100), (5, 160)])
def test_random_inputs_are_sorted(seed, size):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), size)
    stacks = _replay(values, _solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_phases_leave_largest_three_then_sorted():
    rng = random.Random(7)
    values = rng.sample(range(100), 30)
    ref = sorted(values)
    machine = Machine(values, lambda instruction: None)
    push_all_to_b(machine, ref, len(values))
    assert sorted(machine.a) == ref[-3:]
    assert sorted(machine.b) == ref[:-3]
    sort_three(machine, ref, len(values) - 3, len(values) - 1)
    push_all_to_a(machine, ref, len(values))
    assert list(machine.a) == ref
    assert not machine.b


def test_negative_values_are_sorted():
    values = [-5, 3, -2147483648, 2147483647, 0, -1]
    stacks = _replay(values, _solve(values))
    assert list(stacks.a) == sorted(values)