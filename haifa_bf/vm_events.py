from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .instructions import Instruction


@dataclass(frozen=True)
class TraceFrame:
    """Where the VM was when an instruction ran (or failed)."""

    pc: int
    instruction: Instruction | None
    pointer: int
    cell: int | None


@dataclass
class VMStateSnapshot:
    pc: int
    pointer: int
    cell: int | None
    steps: int
    halted: bool
    window: Sequence[int] = field(default_factory=list)
    window_start: int = 0


__all__ = ["TraceFrame", "VMStateSnapshot"]
