from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, TextIO, Union

from .event_format import format_trace_frame
from .instructions import Instruction
from .io_bridge import ByteIO
from .program import ProgramSource, ProgramTable
from .tape import Tape
from .vm_errors import MalformedProgramError, VMRuntimeError
from .vm_events import TraceFrame, VMStateSnapshot


class BrainfuckVM:
    def __init__(
        self,
        program: Union[ProgramTable, ProgramSource],
        *,
        tape: Optional[Tape] = None,
        io: Optional[ByteIO] = None,
        strict: bool = False,
        trace_stream: Optional[TextIO] = None,
    ):
        if not isinstance(program, ProgramTable):
            program = ProgramTable.build(program)
        if strict:
            index = program.find_unmatched_bracket()
            if index is not None:
                raise MalformedProgramError(
                    f"unmatched '{program[index].symbol}' at instruction {index}", index
                )
        self.program = program
        self.tape = tape if tape is not None else Tape()
        self.io = io if io is not None else ByteIO()
        self.trace_stream = trace_stream
        self.steps = 0
        self.halted = False
        # Instruction dispatch table; a handler returns the next cursor or
        # None to fall through to cursor + 1
        self._handlers: Dict[Instruction, Callable[[], Optional[int]]] = {
            Instruction.MOVE_POINTER_FORWARD: self._op_MOVE_POINTER_FORWARD,
            Instruction.MOVE_POINTER_BACKWARD: self._op_MOVE_POINTER_BACKWARD,
            Instruction.INCREMENT_CELL: self._op_INCREMENT_CELL,
            Instruction.DECREMENT_CELL: self._op_DECREMENT_CELL,
            Instruction.OUTPUT_CELL: self._op_OUTPUT_CELL,
            Instruction.INPUT_CELL: self._op_INPUT_CELL,
            Instruction.LOOP_START: self._op_LOOP_START,
            Instruction.LOOP_END: self._op_LOOP_END,
        }

    @property
    def pc(self) -> int:
        return self.program.cursor

    # -------------------- Debug helpers --------------------
    def current_frame(self) -> TraceFrame:
        tape = self.tape
        return TraceFrame(
            pc=self.program.cursor,
            instruction=self.program.current_instruction(),
            pointer=tape.pointer,
            cell=tape.cells[tape.pointer] if tape.in_bounds() else None,
        )

    def snapshot_state(self, radius: int = 8) -> VMStateSnapshot:
        frame = self.current_frame()
        start = max(0, self.tape.pointer - radius)
        return VMStateSnapshot(
            pc=frame.pc,
            pointer=frame.pointer,
            cell=frame.cell,
            steps=self.steps,
            halted=self.halted,
            window=self.tape.window(start, 2 * radius + 1),
            window_start=start,
        )

    def _wrap_runtime_error(self, exc: Exception) -> VMRuntimeError:
        message = str(exc) or exc.__class__.__name__
        return VMRuntimeError(message, self.current_frame())

    # -------------------- Execution --------------------
    def step(self):
        """Executes a single instruction."""
        inst = self.program.current_instruction()
        if inst is None:
            self.halted = True
            return "halt"

        handler = self._handlers[inst]
        try:
            target = handler()
        except VMRuntimeError as exc:
            if exc.frame is None:
                exc.frame = self.current_frame()
            raise
        except Exception as exc:
            raise self._wrap_runtime_error(exc) from exc

        self.program.cursor = self.program.cursor + 1 if target is None else target
        self.steps += 1
        return None

    def run(self, debug=False):
        while self.program.cursor < len(self.program):
            if debug:
                stream = self.trace_stream if self.trace_stream is not None else sys.stderr
                print(format_trace_frame(self.current_frame()), file=stream)
            if self.step() == "halt":
                break
        self.halted = True
        return self.steps

    # -------------------- Bracket matching --------------------
    def scan_forward(self, index: int) -> Optional[int]:
        """Cursor just past the ']' closing the '[' at index, or None."""
        depth = 0
        instructions = self.program.instructions
        for i in range(index + 1, len(instructions)):
            inst = instructions[i]
            if inst is Instruction.LOOP_START:
                depth += 1
            elif inst is Instruction.LOOP_END:
                if depth == 0:
                    return i + 1
                depth -= 1
        return None

    def scan_backward(self, index: int) -> Optional[int]:
        """Cursor just past the '[' opening the ']' at index, or None."""
        depth = 0
        instructions = self.program.instructions
        for i in range(index - 1, -1, -1):
            inst = instructions[i]
            if inst is Instruction.LOOP_END:
                depth += 1
            elif inst is Instruction.LOOP_START:
                if depth == 0:
                    return i + 1
                depth -= 1
        return None

    # -------------------- Instruction handlers --------------------
    def _op_MOVE_POINTER_FORWARD(self):
        self.tape.move_forward()

    def _op_MOVE_POINTER_BACKWARD(self):
        self.tape.move_backward()

    def _op_INCREMENT_CELL(self):
        self.tape.increment_cell()

    def _op_DECREMENT_CELL(self):
        self.tape.decrement_cell()

    def _op_OUTPUT_CELL(self):
        self.io.write_byte(self.tape.read_cell())

    def _op_INPUT_CELL(self):
        self.tape.write_cell(self.io.read_byte())

    def _op_LOOP_START(self):
        if self.tape.read_cell() == 0:
            # no partner yields None: fall through
            return self.scan_forward(self.program.cursor)

    def _op_LOOP_END(self):
        if self.tape.read_cell() != 0:
            return self.scan_backward(self.program.cursor)


__all__ = ["BrainfuckVM"]
