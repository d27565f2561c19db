from __future__ import annotations

from .vm_events import TraceFrame


class VMRuntimeError(RuntimeError):
    """Runtime error raised by the tape VM with the frame it stopped in."""

    def __init__(self, message: str, frame: TraceFrame | None = None):
        super().__init__(message)
        self.message = message
        self.frame = frame

    def __str__(self) -> str:
        if self.frame is None:
            return self.message
        return f"pc {self.frame.pc}: {self.message}"


class MalformedProgramError(VMRuntimeError):
    """A bracket with no partner, reported before execution starts."""

    def __init__(self, message: str, index: int):
        super().__init__(message)
        self.index = index


class TapeBoundsError(VMRuntimeError):
    pass


__all__ = ["VMRuntimeError", "MalformedProgramError", "TapeBoundsError"]
