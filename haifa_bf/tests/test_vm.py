import io

import pytest

from haifa_bf import (
    HELLO_WORLD,
    BrainfuckVM,
    ByteIO,
    MalformedProgramError,
    Tape,
    TapeBoundsError,
    VMRuntimeError,
    execute,
)
from haifa_bf.instructions import Instruction


def make_vm(source, data=b"", **kwargs):
    out = io.BytesIO()
    vm = BrainfuckVM(source, io=ByteIO(io.BytesIO(data), out, newline=b"\n"), **kwargs)
    return vm, out


# ---------------- end-to-end scenarios ----------------

def test_increment_then_output():
    assert execute(b"+++.") == b"\x03"


def test_echo_one_byte():
    assert execute(b",.", b"A") == b"A"


def test_echo_at_end_of_input_writes_zero():
    assert execute(b",.") == b"\x00"


def test_simple_multiplication_loop():
    assert execute(b"++[>++++<-]>.") == b"\x08"


def test_comment_bytes_have_no_effect():
    plain = b"++[>++++<-]>.,."
    noisy = b"a++ [>++++<-]\n>comment.,x."
    assert execute(noisy, b"q") == execute(plain, b"q")


def test_hello_world():
    assert execute(HELLO_WORLD) == b"Hello World!\n"


def test_newline_uses_configured_terminator():
    assert execute(b"++++++++++.", newline=b"\r\n") == b"\r\n"


def test_input_newlines_are_stored_as_ten():
    assert execute(b",.,.", b"\r\n", newline=b"|") == b"||"


# ---------------- loops ----------------

def test_zero_guard_skips_body():
    assert execute(b"[.]+.") == b"\x01"


def test_loop_resumes_after_closing_bracket():
    vm, out = make_vm(b"++[-]")
    vm.run()
    assert vm.tape.read_cell() == 0
    assert vm.pc == 5
    assert vm.steps == 7


def test_skip_routes_past_inner_pair():
    assert execute(b"[[-]>]+.") == b"\x01"


@pytest.mark.parametrize(
    "source, expected",
    [
        (b"+++[>++[>+++<-]<-]>>.", 18),
        (b"++[>++[>++[>+<-]<-]<-]>>>.", 8),
        (b"+++[>+++[>+++[>+++<-]<-]<-]>>>.", 81),
    ],
)
def test_nested_loops_count_correctly(source, expected):
    assert execute(source) == bytes((expected,))


def test_scans_match_partner_brackets():
    vm, _ = make_vm(b"[[]]")
    assert vm.scan_forward(0) == 4
    assert vm.scan_forward(1) == 3
    assert vm.scan_backward(3) == 1
    assert vm.scan_backward(2) == 2


def test_scans_report_missing_partner():
    vm, _ = make_vm(b"[+]]")
    assert vm.scan_backward(3) is None
    vm, _ = make_vm(b"[[+]")
    assert vm.scan_forward(0) is None


def test_unmatched_brackets_fall_through():
    assert execute(b"+]+.") == b"\x02"
    assert execute(b"[+.") == b"\x01"


def test_strict_mode_rejects_unmatched_brackets():
    with pytest.raises(MalformedProgramError) as info:
        BrainfuckVM(b"+[-", strict=True, io=ByteIO(io.BytesIO(), io.BytesIO()))
    assert info.value.index == 1
    with pytest.raises(MalformedProgramError):
        execute(b"]", strict=True)


# ---------------- state, errors and tracing ----------------

def test_step_reports_halt():
    vm, _ = make_vm(b"+")
    assert vm.step() is None
    assert vm.step() == "halt"
    assert vm.halted


def test_empty_program_halts_immediately():
    vm, out = make_vm(b"just a comment")
    assert vm.run() == 0
    assert out.getvalue() == b""


def test_runs_do_not_share_state():
    first, _ = make_vm(b"+++")
    second, _ = make_vm(b"+")
    first.run()
    second.run()
    assert first.tape.read_cell() == 3
    assert second.tape.read_cell() == 1


def test_tape_bounds_violation_keeps_earlier_output():
    vm, out = make_vm(b"+.<.")
    with pytest.raises(TapeBoundsError) as info:
        vm.run()
    assert out.getvalue() == b"\x01"
    assert info.value.frame.pc == 3
    assert info.value.frame.pointer == -1
    assert info.value.frame.cell is None


def test_small_tape():
    vm, _ = make_vm(b">>+", tape=Tape(2))
    with pytest.raises(TapeBoundsError):
        vm.run()


class BrokenOutput(io.RawIOBase):
    def writable(self):
        return True

    def write(self, data):
        raise OSError("broken pipe")


def test_output_failure_aborts_run():
    vm = BrainfuckVM(b"+.+", io=ByteIO(io.BytesIO(), BrokenOutput(), newline=b"\n"))
    with pytest.raises(VMRuntimeError) as info:
        vm.run()
    assert isinstance(info.value.__cause__, OSError)
    assert info.value.frame.instruction is Instruction.OUTPUT_CELL
    assert "broken pipe" in str(info.value)
    assert vm.tape.read_cell() == 1


def test_debug_trace_lines():
    trace = io.StringIO()
    vm, _ = make_vm(b"+>", trace_stream=trace)
    vm.run(debug=True)
    lines = trace.getvalue().splitlines()
    assert lines == [
        "[PC=0] '+' ptr=0 cell=0",
        "[PC=1] '>' ptr=0 cell=1",
    ]


def test_snapshot_state():
    vm, _ = make_vm(b"+++>++")
    vm.run()
    snapshot = vm.snapshot_state(radius=2)
    assert snapshot.halted
    assert snapshot.pointer == 1
    assert snapshot.cell == 2
    assert snapshot.steps == 6
    assert snapshot.window_start == 0
    assert snapshot.window == [3, 2, 0, 0, 0]
