"""Terminal front end: rendering, console adapters and the play loop."""

from tictactoe.cli.console import ScriptedConsole, TerminalConsole
from tictactoe.cli.render import CLEAR_SCREEN, render_board
from tictactoe.cli.session import TerminalSession
from tictactoe.cli.strings import ENGLISH, Strings

__all__ = [
    "CLEAR_SCREEN",
    "ENGLISH",
    "ScriptedConsole",
    "Strings",
    "TerminalConsole",
    "TerminalSession",
    "render_board",
]
