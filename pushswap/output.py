"""Writing instructions, merging pairs that act on both stacks at once."""

from __future__ import annotations

from typing import TextIO

from pushswap.operations import Instruction

_COMBINED = {
    frozenset({Instruction.SA, Instruction.SB}): Instruction.SS,
    frozenset({Instruction.RA, Instruction.RB}): Instruction.RR,
    frozenset({Instruction.RRA, Instruction.RRB}): Instruction.RRR,
}


class InstructionWriter:
    """Write one instruction per line, holding each back by one step.

    An instruction is kept pending until the next one arrives. If the two are
    the a and b forms of the same operation, the combined instruction is
    written in their place.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Instruction | None = None

    def _write(self, instruction: Instruction) -> None:
        self._stream.write(f"{instruction}\n")

    def emit(self, instruction: Instruction) -> None:
        """Accept the next instruction, writing whatever is settled."""
        pending = self._pending
        if pending is None:
            self._pending = instruction
            return
        combined = _COMBINED.get(frozenset((pending, instruction)))
        if combined is not None:
            self._write(combined)
            self._pending = None
        else:
            self._write(pending)
            self._pending = instruction

    def flush(self) -> None:
        """Write the instruction still held back, if there is one."""
        if self._pending is not None:
            self._write(self._pending)
            self._pending = None