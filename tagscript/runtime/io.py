"""Console streams used by output and input tags."""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleIO:
    """Line-oriented wrapper over the interpreter's stdin/stdout."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    @property
    def stdout(self) -> TextIO:
        return self._stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def read_line(self) -> str:
        """Read one line without its terminator. End of input reads as ""."""
        self._stdout.flush()
        line = self._stdin.readline()
        return line.rstrip("\r\n")
