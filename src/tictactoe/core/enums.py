"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    """Content of a single cell."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    @property
    def opposite(self) -> Mark:
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        """Single display character; a blank for an empty cell."""
        return " " if self == Mark.EMPTY else self.name

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_char(cls, char: str) -> Mark:
        """Parse ``'X'``, ``'O'`` (any case) or ``'.'`` for an empty cell."""
        try:
            return _CHAR_MAP[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid mark character: {char!r}") from None


_CHAR_MAP: dict[str, Mark] = {".": Mark.EMPTY, "X": Mark.X, "O": Mark.O}
