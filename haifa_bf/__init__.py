from .instructions import Instruction, decode
from .io_bridge import ByteIO
from .program import ProgramTable
from .runtime import HELLO_WORLD, compile_source, execute, run_script, run_source
from .tape import TAPE_SIZE, Tape
from .vm import BrainfuckVM
from .vm_errors import MalformedProgramError, TapeBoundsError, VMRuntimeError

__all__ = [
    "run_source",
    "run_script",
    "execute",
    "compile_source",
    "BrainfuckVM",
    "ProgramTable",
    "Tape",
    "ByteIO",
    "Instruction",
    "decode",
    "HELLO_WORLD",
    "TAPE_SIZE",
    "VMRuntimeError",
    "MalformedProgramError",
    "TapeBoundsError",
]
