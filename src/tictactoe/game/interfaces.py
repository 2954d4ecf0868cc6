"""Abstract interfaces and state enums for the game layer.

The controller and session depend on ``IConsole`` rather than on real
stdin/stdout, so tests can script a whole game in memory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

# ── Round FSM states ─────────────────────────────────────────────────────────


class RoundPhase(IntEnum):
    """Finite-state-machine states for a round (and the game around it)."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()
    GAME_OVER = auto()

    @property
    def is_round_over(self) -> bool:
        return self in (RoundPhase.WON, RoundPhase.TIED)


class TurnOutcome(IntEnum):
    """Classification of one completed turn."""

    PLACED = auto()
    RESTART = auto()
    QUIT = auto()
    WIN = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IConsole(ABC):
    """Line-oriented terminal the session talks to."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Emit *text* as-is (no newline added)."""

    @abstractmethod
    def read_line(self) -> str:
        """Read one line without its trailing newline.

        Raises:
            EOFError: input is exhausted.
        """
