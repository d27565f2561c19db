from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .instructions import Instruction, decode

ProgramSource = Union[bytes, bytearray, memoryview, str]


class ProgramTable:
    """Decoded instruction sequence plus the cursor the dispatcher advances.

    The sequence is fixed once built; only the cursor changes, and only the
    VM assigns it.
    """

    def __init__(self, instructions: Sequence[Instruction]):
        self._instructions: Tuple[Instruction, ...] = tuple(instructions)
        self.cursor = 0

    @classmethod
    def build(cls, raw: ProgramSource) -> "ProgramTable":
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        decoded = (decode(byte) for byte in bytes(raw))
        return cls([inst for inst in decoded if inst is not None])

    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        return self._instructions

    def current_instruction(self, cursor: Optional[int] = None) -> Optional[Instruction]:
        if cursor is None:
            cursor = self.cursor
        if 0 <= cursor < len(self._instructions):
            return self._instructions[cursor]
        return None

    def find_unmatched_bracket(self) -> Optional[int]:
        """Index of the first bracket without a partner, if any."""
        opened: List[int] = []
        for index, inst in enumerate(self._instructions):
            if inst is Instruction.LOOP_START:
                opened.append(index)
            elif inst is Instruction.LOOP_END:
                if not opened:
                    return index
                opened.pop()
        if opened:
            return opened[0]
        return None

    def source(self) -> str:
        return "".join(inst.symbol for inst in self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self._instructions[index]

    def __repr__(self) -> str:
        return f"ProgramTable({self.source()!r}, cursor={self.cursor})"


__all__ = ["ProgramTable", "ProgramSource"]
