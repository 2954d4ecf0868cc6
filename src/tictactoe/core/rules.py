"""Win detection over the eight fixed lines of the board."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from tictactoe.core.enums import Mark
from tictactoe.core.types import A1, A2, A3, B1, B2, B3, C1, C2, C3, Cell

if TYPE_CHECKING:
    from tictactoe.core.board import Board

Line: TypeAlias = tuple[Cell, Cell, Cell]

# Evaluation order matters: the first complete line is the one highlighted.
WINNING_LINES: tuple[Line, ...] = (
    # Rows, top to bottom
    (A1, A2, A3),
    (B1, B2, B3),
    (C1, C2, C3),
    # Columns, left to right
    (A1, B1, C1),
    (A2, B2, C2),
    (A3, B3, C3),
    # Diagonals
    (A1, B2, C3),
    (A3, B2, C1),
)


def find_winning_line(board: Board, mark: Mark) -> Line | None:
    """Return the first line fully held by *mark*, or ``None``.

    Only the player who just moved should be checked: a move can never
    complete the opponent's line. The board is not modified.
    """
    if mark == Mark.EMPTY:
        raise ValueError("Cannot evaluate a win for EMPTY")
    for line in WINNING_LINES:
        if all(board[cell] == mark for cell in line):
            return line
    return None
