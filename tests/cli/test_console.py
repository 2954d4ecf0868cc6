"""Tests for the console adapters."""

import io

import pytest

from tictactoe.cli.console import ScriptedConsole, TerminalConsole


class TestTerminalConsole:
    def test_read_strips_newline_only(self) -> None:
        console = TerminalConsole(stdin=io.StringIO(" a1 \nb2\r\n"), stdout=io.StringIO())
        assert console.read_line() == " a1 "
        assert console.read_line() == "b2"

    def test_last_line_without_newline(self) -> None:
        console = TerminalConsole(stdin=io.StringIO("q"), stdout=io.StringIO())
        assert console.read_line() == "q"

    def test_eof(self) -> None:
        console = TerminalConsole(stdin=io.StringIO(""), stdout=io.StringIO())
        with pytest.raises(EOFError):
            console.read_line()

    def test_write(self) -> None:
        out = io.StringIO()
        TerminalConsole(stdin=io.StringIO(), stdout=out).write("hello")
        assert out.getvalue() == "hello"


class TestScriptedConsole:
    def test_feeds_lines_in_order(self) -> None:
        console = ScriptedConsole(["a1", "q"])
        assert console.read_line() == "a1"
        assert console.remaining == ["q"]
        assert console.prompts_read == 1

    def test_eof_when_exhausted(self) -> None:
        with pytest.raises(EOFError):
            ScriptedConsole([]).read_line()

    def test_captures_output(self) -> None:
        console = ScriptedConsole([])
        console.write("a")
        console.write("b")
        assert console.output == "ab"
