"""Input-line grammar.

One line per prompt, matched exactly (no trimming)::

    A1 .. C3   place a mark (case-insensitive)
    q / Q      quit the game
    r / R      restart the current round
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from tictactoe.core.errors import MalformedInputError
from tictactoe.core.types import Cell, parse_cell

QUIT_TOKENS = frozenset({"q", "Q"})
RESTART_TOKENS = frozenset({"r", "R"})


@dataclass(frozen=True, slots=True)
class PlaceCommand:
    cell: Cell


@dataclass(frozen=True, slots=True)
class QuitCommand:
    pass


@dataclass(frozen=True, slots=True)
class RestartCommand:
    pass


Command: TypeAlias = PlaceCommand | QuitCommand | RestartCommand


def parse_command(text: str) -> Command:
    """Interpret one line of player input.

    Raises:
        MalformedInputError: *text* is not a cell reference, ``q`` or ``r``.
    """
    if text in QUIT_TOKENS:
        return QuitCommand()
    if text in RESTART_TOKENS:
        return RestartCommand()
    try:
        return PlaceCommand(parse_cell(text))
    except MalformedInputError:
        raise MalformedInputError(text) from None
