from __future__ import annotations

import os
import sys
from typing import BinaryIO, Optional

NEWLINE = 10
CARRIAGE_RETURN = 13
EOF = 0


def _binary(stream):
    # text streams such as sys.stdin expose their byte layer as .buffer
    return getattr(stream, "buffer", stream)


class ByteIO:
    """Single-byte input/output used by the ',' and '.' instructions.

    Output turns value 10 into the platform line terminator. Input maps
    end-of-stream to 0 and both CR and LF to 10. Stream errors propagate.
    """

    def __init__(
        self,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
        *,
        newline: Optional[bytes] = None,
    ):
        self.stdin = _binary(stdin if stdin is not None else sys.stdin)
        self.stdout = _binary(stdout if stdout is not None else sys.stdout)
        self.newline = newline if newline is not None else os.linesep.encode("ascii")
        self.bytes_read = 0
        self.bytes_written = 0

    def write_byte(self, value: int) -> None:
        if value == NEWLINE:
            self.stdout.write(self.newline)
        else:
            self.stdout.write(bytes((value,)))
        self.stdout.flush()
        self.bytes_written += 1

    def read_byte(self) -> int:
        data = self.stdin.read(1)
        if not data:
            return EOF
        self.bytes_read += 1
        value = data[0]
        if value in (NEWLINE, CARRIAGE_RETURN):
            return NEWLINE
        return value


__all__ = ["ByteIO", "NEWLINE", "CARRIAGE_RETURN", "EOF"]
