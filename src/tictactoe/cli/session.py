"""TerminalSession — the render → read → validate → mutate loop."""

from __future__ import annotations

import logging

from tictactoe.cli.render import CLEAR_SCREEN, render_board
from tictactoe.cli.strings import ENGLISH, Strings
from tictactoe.core.errors import CellOccupiedError, MalformedInputError
from tictactoe.game.controller import GameController
from tictactoe.game.interfaces import IConsole, TurnOutcome
from tictactoe.game.state import RoundState
from tictactoe.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


class TerminalSession:
    """Plays rounds on *console* until a player quits.

    End of input is treated like ``q``. The exit code is always 0.
    """

    __slots__ = (
        "_console",
        "_settings",
        "_strings",
        "_controller",
        "_pending_error",
        "_finished_round",
    )

    def __init__(
        self,
        console: IConsole,
        settings: GameSettings | None = None,
        strings: Strings = ENGLISH,
    ) -> None:
        self._console = console
        self._settings = settings if settings is not None else GameSettings()
        self._strings = strings
        self._controller = GameController(first_mark=self._settings.first_mark)
        self._pending_error: str | None = None
        self._finished_round: RoundState | None = None
        self._controller.events.on_round_over.append(self._on_round_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    def run(self) -> int:
        try:
            self._play()
        except EOFError:
            _LOGGER.info("end of input, quitting")
            self._controller.quit()
        except KeyboardInterrupt:
            _LOGGER.info("interrupted, quitting")
            self._controller.quit()
        self._clear()
        return 0

    # ── Loop ─────────────────────────────────────────────────────────────

    def _play(self) -> None:
        ctrl = self._controller
        ctrl.new_round()
        while not ctrl.is_game_over:
            self._play_turn()
            if self._finished_round is not None:
                state, self._finished_round = self._finished_round, None
                self._end_of_round(state)

    def _on_round_over(self, state: RoundState) -> None:
        self._finished_round = state

    def _play_turn(self) -> TurnOutcome:
        """Prompt the side to move until one line is accepted."""
        state = self._controller.round
        while True:
            self._show_turn(state)
            text = self._console.read_line()
            try:
                return self._controller.submit(text)
            except MalformedInputError:
                _LOGGER.debug("rejected input %r", text)
                self._pending_error = self._strings.error_bad_response
            except CellOccupiedError as exc:
                _LOGGER.debug("rejected move: %s", exc)
                self._pending_error = self._strings.error_already_taken

    def _end_of_round(self, state: RoundState) -> None:
        s = self._strings
        self._clear()
        if state.winner is not None:
            self._console.write(s.win_banner(str(state.winner)) + "\n")
        else:
            self._console.write(s.banner_tie + "\n")
        self._console.write(self._render(state))
        self._console.write(s.continue_prompt)
        self._controller.continue_after_round(self._console.read_line())

    # ── Output helpers ───────────────────────────────────────────────────

    def _show_turn(self, state: RoundState) -> None:
        self._clear()
        if self._pending_error is not None:
            self._console.write(self._pending_error + "\n")
            self._pending_error = None
        self._console.write(self._render(state))
        self._console.write(self._strings.turn_prompt(str(state.side_to_move)))

    def _render(self, state: RoundState) -> str:
        return render_board(
            state.board, state.winning_cells, color=self._settings.use_color
        )

    def _clear(self) -> None:
        if self._settings.clear_screen:
            self._console.write(CLEAR_SCREEN)
