from __future__ import annotations

from .vm_events import TraceFrame, VMStateSnapshot


def format_trace_frame(frame: TraceFrame) -> str:
    symbol = frame.instruction.symbol if frame.instruction is not None else "<end>"
    cell = "?" if frame.cell is None else str(frame.cell)
    return f"[PC={frame.pc}] '{symbol}' ptr={frame.pointer} cell={cell}"


def format_snapshot(snapshot: VMStateSnapshot) -> str:
    state = "halted" if snapshot.halted else "running"
    cells = " ".join(f"{value:3d}" for value in snapshot.window)
    return (
        f"{state} pc={snapshot.pc} ptr={snapshot.pointer} steps={snapshot.steps}\n"
        f"  tape[{snapshot.window_start}:]: {cells}"
    )


__all__ = ["format_trace_frame", "format_snapshot"]
