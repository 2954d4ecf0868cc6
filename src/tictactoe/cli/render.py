"""Board → text rendering.

Everything here is a pure function of its arguments, so rendering the same
board twice yields the same string.
"""

from __future__ import annotations

from collections.abc import Collection

from colorama import Cursor, Fore, Style
from colorama.ansi import clear_screen

from tictactoe.core.board import Board
from tictactoe.core.types import BOARD_SIZE, COLUMN_DIGITS, ROW_LETTERS, Cell, make_cell

CLEAR_SCREEN = clear_screen() + Cursor.POS(1, 1)  # erase display, cursor to top-left
GREEN = Fore.GREEN
RESET = Style.RESET_ALL

_FRAME = "  +-----------"
_ROW_SEPARATOR = "  | ---+---+---"


def cell_text(board: Board, cell: Cell, highlight: Collection[Cell], color: bool) -> str:
    """Single-character cell content, wrapped in green when highlighted."""
    symbol = board[cell].symbol
    if color and cell in highlight:
        return f"{GREEN}{symbol}{RESET}"
    return symbol


def render_board(
    board: Board,
    highlight: Collection[Cell] = frozenset(),
    *,
    color: bool = True,
) -> str:
    """Labelled grid, e.g.::

            1   2   3
          +-----------
        A | X | O |
          | ---+---+---
        ...
    """
    lines = ["", "    " + "   ".join(COLUMN_DIGITS), _FRAME]
    for row in range(BOARD_SIZE):
        cells = [
            cell_text(board, make_cell(row, col), highlight, color)
            for col in range(BOARD_SIZE)
        ]
        lines.append(f"{ROW_LETTERS[row]} | " + " | ".join(cells))
        if row < BOARD_SIZE - 1:
            lines.append(_ROW_SEPARATOR)
    lines.append(_FRAME)
    return "\n".join(lines) + "\n\n"
