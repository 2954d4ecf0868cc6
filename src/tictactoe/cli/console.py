"""Concrete consoles: the real terminal and an in-memory script."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from tictactoe.game.interfaces import IConsole


class TerminalConsole(IConsole):
    """Reads *stdin* line by line and writes straight to *stdout*."""

    __slots__ = ("_stdin", "_stdout")

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.removesuffix("\n").removesuffix("\r")


class ScriptedConsole(IConsole):
    """Feeds pre-recorded lines and captures all output.

    Lets tests script a whole game.
    """

    __slots__ = ("_lines", "_output", "prompts_read")

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self._output: list[str] = []
        self.prompts_read = 0

    @property
    def output(self) -> str:
        return "".join(self._output)

    @property
    def remaining(self) -> list[str]:
        return list(self._lines)

    def write(self, text: str) -> None:
        self._output.append(text)

    def read_line(self) -> str:
        if not self._lines:
            raise EOFError
        self.prompts_read += 1
        return self._lines.pop(0)
