"""Core domain layer — pure tic-tac-toe logic with zero external dependencies.

Quick start::

    from tictactoe.core import Board, Mark, find_winning_line, parse_cell

    board = Board()
    for name in ("A1", "B2", "C3"):
        board.place(parse_cell(name), Mark.X)
    print(find_winning_line(board, Mark.X))   # (0, 4, 8)
"""

from tictactoe.core.board import Board
from tictactoe.core.enums import Mark
from tictactoe.core.errors import (
    CellOccupiedError,
    MalformedInputError,
    RoundNotActiveError,
    TicTacToeError,
)
from tictactoe.core.notation import (
    Command,
    PlaceCommand,
    QuitCommand,
    RestartCommand,
    parse_command,
)
from tictactoe.core.rules import WINNING_LINES, Line, find_winning_line
from tictactoe.core.types import (
    CELL_COUNT,
    Cell,
    cell_name,
    col_of,
    make_cell,
    parse_cell,
    row_of,
)

__all__ = [
    # Enums
    "Mark",
    # Types / helpers
    "CELL_COUNT",
    "Cell",
    "Line",
    "cell_name",
    "col_of",
    "make_cell",
    "parse_cell",
    "row_of",
    # Errors
    "CellOccupiedError",
    "MalformedInputError",
    "RoundNotActiveError",
    "TicTacToeError",
    # Domain objects
    "Board",
    "WINNING_LINES",
    "find_winning_line",
    # Input grammar
    "Command",
    "PlaceCommand",
    "QuitCommand",
    "RestartCommand",
    "parse_command",
]
