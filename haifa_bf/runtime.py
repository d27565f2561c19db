from __future__ import annotations

import io
import pathlib
from typing import BinaryIO, Optional, TextIO

from .io_bridge import ByteIO
from .program import ProgramSource, ProgramTable
from .tape import TAPE_SIZE, Tape
from .vm import BrainfuckVM

HELLO_WORLD = (
    b">+++++++++[<++++++++>-]<.>+++++++[<++++>-]<+.+++++++..+++.>>>++++++++[<++++>-]<."
    b">>>++++++++++[<+++++++++>-]<---.<<<<.+++.------.--------.>>+.>++++++++++."
)


def compile_source(source: ProgramSource) -> ProgramTable:
    return ProgramTable.build(source)


def run_source(
    source: ProgramSource,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    newline: Optional[bytes] = None,
    tape_size: int = TAPE_SIZE,
    strict: bool = False,
    debug: bool = False,
    trace_stream: Optional[TextIO] = None,
) -> BrainfuckVM:
    vm = BrainfuckVM(
        compile_source(source),
        tape=Tape(tape_size),
        io=ByteIO(stdin, stdout, newline=newline),
        strict=strict,
        trace_stream=trace_stream,
    )
    vm.run(debug=debug)
    return vm


def run_script(path: str, **kwargs) -> BrainfuckVM:
    data = pathlib.Path(path).read_bytes()
    return run_source(data, **kwargs)


def execute(
    source: ProgramSource,
    input_data: bytes = b"",
    *,
    newline: bytes = b"\n",
    tape_size: int = TAPE_SIZE,
    strict: bool = False,
) -> bytes:
    """Run a program against in-memory streams and return what it wrote."""
    out = io.BytesIO()
    run_source(
        source,
        stdin=io.BytesIO(input_data),
        stdout=out,
        newline=newline,
        tape_size=tape_size,
        strict=strict,
    )
    return out.getvalue()


__all__ = ["HELLO_WORLD", "compile_source", "run_source", "run_script", "execute"]
