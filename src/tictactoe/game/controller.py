"""GameController — drives rounds turn by turn.

Interprets one input line per call, applies it to the current round and
classifies the result. Finished rounds are announced via a callback so the
terminal session can show the result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.enums import Mark
from tictactoe.core.errors import RoundNotActiveError
from tictactoe.core.notation import (
    PlaceCommand,
    QUIT_TOKENS,
    QuitCommand,
    RestartCommand,
    parse_command,
)
from tictactoe.core.types import Cell
from tictactoe.game.interfaces import RoundPhase, TurnOutcome
from tictactoe.game.state import DEFAULT_FIRST_MARK, RoundState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

RoundOverCallback = Callable[[RoundState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_round_over: list[RoundOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a game of successive rounds between X and O.

    ``submit`` raises :class:`~tictactoe.core.errors.MalformedInputError`
    or :class:`~tictactoe.core.errors.CellOccupiedError` for a rejected
    line. In that case nothing changed: the same player simply tries again.
    A won or tied round is announced through ``events.on_round_over``.
    """

    __slots__ = ("_round", "_first_mark", "_game_over", "_rounds_started", "events")

    def __init__(self, first_mark: Mark = DEFAULT_FIRST_MARK) -> None:
        self._first_mark = first_mark
        self._round: RoundState | None = None
        self._game_over = False
        self._rounds_started = 0
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def round(self) -> RoundState:
        if self._round is None:
            raise RuntimeError("No round has been started")
        return self._round

    @property
    def phase(self) -> RoundPhase:
        if self._game_over:
            return RoundPhase.GAME_OVER
        if self._round is None:
            return RoundPhase.NOT_STARTED
        return self._round.phase

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def rounds_started(self) -> int:
        return self._rounds_started

    @property
    def first_mark(self) -> Mark:
        return self._first_mark

    # ── Round lifecycle ──────────────────────────────────────────────────

    def new_round(self) -> RoundState:
        """Discard the current board and start over with the first mover."""
        self._round = RoundState(first_mark=self._first_mark)
        self._rounds_started += 1
        _LOGGER.debug(
            "round %d started, %s moves first", self._rounds_started, self._first_mark
        )
        return self._round

    def submit(self, text: str) -> TurnOutcome:
        """Play one line of input for the side to move."""
        if self._game_over:
            raise RoundNotActiveError("Game is over")

        match parse_command(text):
            case QuitCommand():
                self.quit()
                return TurnOutcome.QUIT
            case RestartCommand():
                _LOGGER.info("round %d abandoned by restart", self._rounds_started)
                self.new_round()
                return TurnOutcome.RESTART
            case PlaceCommand(cell=cell):
                return self._place(cell)

    def continue_after_round(self, text: str) -> bool:
        """Answer the end-of-round prompt: ``q`` quits, anything else replays."""
        if text in QUIT_TOKENS:
            self.quit()
            return False
        self.new_round()
        return True

    def quit(self) -> None:
        if self._game_over:
            return
        _LOGGER.info("game over after %d round(s)", self._rounds_started)
        self._game_over = True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _place(self, cell: Cell) -> TurnOutcome:
        state = self.round
        record = state.apply_move(cell)
        _LOGGER.debug("move %s", record)

        if state.phase == RoundPhase.WON:
            _LOGGER.info("%s wins round %d", state.winner, self._rounds_started)
            self._emit_round_over(state)
            return TurnOutcome.WIN
        if state.phase == RoundPhase.TIED:
            _LOGGER.info("round %d tied", self._rounds_started)
            self._emit_round_over(state)
        return TurnOutcome.PLACED

    def _emit_round_over(self, state: RoundState) -> None:
        for cb in self.events.on_round_over:
            cb(state)
