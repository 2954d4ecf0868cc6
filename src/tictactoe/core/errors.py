"""Exceptions raised by the game core.

All of them are recoverable: the terminal session reports the problem and
asks the same player again.
"""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for game errors."""


class MalformedInputError(TicTacToeError):
    """Input line matches no cell reference or command."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed input: {text!r}")
        self.text = text


class CellOccupiedError(TicTacToeError):
    """A mark was placed on a cell that already holds one."""

    def __init__(self, cell: int) -> None:
        from tictactoe.core.types import cell_name

        super().__init__(f"Cell {cell_name(cell)} is already taken")
        self.cell = cell


class RoundNotActiveError(TicTacToeError):
    """A move was submitted while no round is in progress."""
