from __future__ import annotations

from typing import List

from .vm_errors import TapeBoundsError

TAPE_SIZE = 30 * 1024


class Tape:
    """Fixed-size byte tape and the data pointer into it.

    Pointer motion is never checked; touching a cell while the pointer is
    outside the tape raises TapeBoundsError.
    """

    def __init__(self, size: int = TAPE_SIZE):
        if size <= 0:
            raise ValueError("tape size must be positive")
        self.cells = bytearray(size)
        self.pointer = 0

    @property
    def size(self) -> int:
        return len(self.cells)

    def move_forward(self) -> None:
        self.pointer += 1

    def move_backward(self) -> None:
        self.pointer -= 1

    def increment_cell(self) -> None:
        index = self._index()
        self.cells[index] = (self.cells[index] + 1) % 256

    def decrement_cell(self) -> None:
        index = self._index()
        self.cells[index] = (self.cells[index] - 1) % 256

    def read_cell(self) -> int:
        return self.cells[self._index()]

    def write_cell(self, value: int) -> None:
        self.cells[self._index()] = value % 256

    def in_bounds(self) -> bool:
        return 0 <= self.pointer < len(self.cells)

    def window(self, start: int, length: int) -> List[int]:
        start = max(0, start)
        return list(self.cells[start:start + length])

    def _index(self) -> int:
        # bytearray would silently alias negative indices
        if not self.in_bounds():
            raise TapeBoundsError(
                f"data pointer {self.pointer} outside tape [0, {len(self.cells)})"
            )
        return self.pointer


__all__ = ["Tape", "TAPE_SIZE"]
