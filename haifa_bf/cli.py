from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Optional

from .event_format import format_snapshot
from .runtime import HELLO_WORLD, run_source
from .tape import TAPE_SIZE
from .vm_errors import VMRuntimeError


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="haifa-bf", description="Run tape programs on the byte VM")
    parser.add_argument("script", nargs="?", help="Path to program source")
    parser.add_argument("-e", "--execute", dest="inline", help="Execute program text")
    parser.add_argument("--hello", action="store_true", help="Run the built-in hello world program")
    parser.add_argument("--input", "-i", dest="input_path", help="Read program input from file instead of stdin")
    parser.add_argument("--trace", action="store_true", help="Print every executed instruction to stderr")
    parser.add_argument("--strict", action="store_true", help="Reject programs with unmatched brackets")
    parser.add_argument("--tape-size", type=int, default=TAPE_SIZE, help="Number of tape cells")
    parser.add_argument("--stats", action="store_true", help="Print step count and final state to stderr")
    args = parser.parse_args(argv)

    sources = [bool(args.script), args.inline is not None, args.hello]
    if sum(sources) != 1:
        parser.error("give exactly one of script, --execute or --hello")
        return 1

    input_file = None
    try:
        if args.hello:
            source = HELLO_WORLD
        elif args.inline is not None:
            source = args.inline.encode("utf-8")
        else:
            source = pathlib.Path(args.script).read_bytes()

        if args.input_path:
            input_file = open(args.input_path, "rb")
        vm = run_source(
            source,
            stdin=input_file,
            tape_size=args.tape_size,
            strict=args.strict,
            debug=args.trace,
        )
        if args.stats:
            print(format_snapshot(vm.snapshot_state()), file=sys.stderr)
        return 0
    except (VMRuntimeError, OSError, ValueError) as exc:
        print(f"bf execution failed: {exc}", file=sys.stderr)
        return 1
    finally:
        if input_file is not None:
            input_file.close()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
