# pushswap

Sort a list of integers with two stacks, `a` and `b`, using only a small set
of instructions. The package provides two commands:

- `push-swap` prints a sequence of instructions that sorts its arguments.
- `push-swap-checker` reads instructions from standard input, runs them on its
  arguments and reports whether the result is sorted.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Instructions

Stack `a` starts with the numbers in the order given, the first one on top.
Stack `b` starts empty.

| Instruction  | Effect                                          |
|--------------|-------------------------------------------------|
| `sa`, `sb`   | swap the top two elements of `a` / `b`          |
| `ss`         | `sa` and `sb` together                          |
| `pa`, `pb`   | move the top of `b` onto `a` / of `a` onto `b`  |
| `ra`, `rb`   | rotate `a` / `b` up (top goes to the bottom)    |
| `rr`         | `ra` and `rb` together                          |
| `rra`, `rrb` | rotate `a` / `b` down (bottom goes to the top)  |
| `rrr`        | `rra` and `rrb` together                        |

An instruction that has nothing to move (for example `sa` with fewer than two
elements in `a`) does nothing.

## Usage

Numbers may be given as separate arguments or in one quoted argument; they
are joined and split on spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

One instruction is printed per line. When an `a` instruction is followed
directly by its `b` counterpart (or the other way round), the pair is
printed as the combined instruction: `sa`+`sb` as `ss`, `ra`+`rb` as `rr`,
`rra`+`rrb` as `rrr`. Input that is already in order produces no output.

Check a solution by piping it into the checker with the same numbers:

```
push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
```

The checker expects each instruction on its own line, ending in a newline. It
prints `OK` when stack `a` ends up sorted in ascending order and `b` is empty,
and `KO` otherwise.

### Errors and exit status

- With no arguments, both commands exit with status 1 and print nothing.
- A word that is not a whole 32-bit integer (an optional sign followed by
  digits, within -2147483648..2147483647), or a number given twice, makes
  either command print `Error` to standard error and exit with status 1.
- An unknown or unterminated instruction line makes the checker print
  `Error` to standard error instead of a verdict; it still exits with
  status 0.

## Library use

```python
import io
from pushswap.solver import solve

out = io.StringIO()
solve([3, 2, 1], out)
print(out.getvalue())   # "ra\nsa\n"
```

```python
from pushswap.checker import check

check([2, 1], ["sa\n"])   # "OK"
check([2, 1], ["pb\n"])   # "KO"
```

The modules:

- `pushswap.parsing`: `parse_int`, `is_zero`, `parse_arguments` and
  `check_duplicates`; invalid input raises `ArgumentError` (a `ValueError`).
- `pushswap.operations`: the `Instruction` enum, the `Stacks` dataclass with
  its `apply` method, the single-stack operations `swap`, `push`, `rotate` and
  `reverse_rotate`, and `parse_instruction`, which raises `InstructionError`
  for a line that is not an instruction.
- `pushswap.output`: `InstructionWriter`, which writes instructions to a
  stream and merges pairs into `ss`, `rr` and `rrr`; call `flush()` at the end.
- `pushswap.solver`: `solve(values, stream)` and the pieces it is built from
  (`Machine`, `is_sorted`, `size_chunk`, `sort_three`, `push_all_to_b`,
  `push_all_to_a`).
- `pushswap.checker`: `read_instructions`, `run_instructions`, `check` and
  the `main` behind `push-swap-checker`.
- `pushswap.cli`: the `main` behind `push-swap`.