from __future__ import annotations

from enum import Enum
from typing import Optional


class Instruction(Enum):
    MOVE_POINTER_FORWARD = ord(">")   # >  pointer += 1
    MOVE_POINTER_BACKWARD = ord("<")  # <  pointer -= 1
    INCREMENT_CELL = ord("+")         # +  cell = (cell + 1) % 256
    DECREMENT_CELL = ord("-")         # -  cell = (cell - 1) % 256
    OUTPUT_CELL = ord(".")            # .  write cell
    INPUT_CELL = ord(",")             # ,  read into cell
    LOOP_START = ord("[")             # [  jump past matching ] if cell == 0
    LOOP_END = ord("]")               # ]  jump back to matching [ if cell != 0

    @property
    def symbol(self) -> str:
        return chr(self.value)

    def __str__(self):
        return self.symbol


_BY_BYTE = {inst.value: inst for inst in Instruction}


def decode(byte: int) -> Optional[Instruction]:
    """Map a source byte to its instruction, or None for comment bytes."""
    return _BY_BYTE.get(byte)


__all__ = ["Instruction", "decode"]
