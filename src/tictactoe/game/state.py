"""Round state machine — board, side to move, phase and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from tictactoe.core.board import Board
from tictactoe.core.enums import Mark
from tictactoe.core.errors import RoundNotActiveError
from tictactoe.core.rules import find_winning_line
from tictactoe.core.types import Cell, cell_name
from tictactoe.game.interfaces import RoundPhase

DEFAULT_FIRST_MARK = Mark.O


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    mark: Mark
    cell: Cell
    ply: int  # 1-based

    def __str__(self) -> str:
        return f"{self.ply}. {self.mark.name} {cell_name(self.cell)}"


@dataclass
class RoundState:
    """One round: created empty, played to a win or tie, then discarded.

    This is a pure data/logic class — no I/O.
    """

    first_mark: Mark = DEFAULT_FIRST_MARK
    board: Board = field(default_factory=Board, init=False)
    side_to_move: Mark = field(init=False)
    phase: RoundPhase = field(default=RoundPhase.IN_PROGRESS, init=False)
    winner: Mark | None = field(default=None, init=False)
    winning_cells: frozenset[Cell] = field(default_factory=frozenset, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.first_mark == Mark.EMPTY:
            raise ValueError("First mover must be X or O")
        self.side_to_move = self.first_mark

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def ply_count(self) -> int:
        return len(self.move_history)

    @property
    def is_over(self) -> bool:
        return self.phase.is_round_over

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, cell: Cell) -> MoveRecord:
        """Place the side to move's mark on *cell* and update the phase.

        On a win the completed line becomes :attr:`winning_cells` and the
        side to move stays the winner. Otherwise the turn passes, unless the
        board is now full (tie).

        Raises:
            RoundNotActiveError: the round already ended.
            CellOccupiedError: *cell* is taken; nothing changes.
        """
        if self.phase != RoundPhase.IN_PROGRESS:
            raise RoundNotActiveError(f"Round is {self.phase.name}, not in progress")

        mark = self.side_to_move
        self.board.place(cell, mark)
        record = MoveRecord(mark=mark, cell=cell, ply=self.ply_count + 1)
        self.move_history.append(record)

        line = find_winning_line(self.board, mark)
        if line is not None:
            self.winner = mark
            self.winning_cells = frozenset(line)
            self.phase = RoundPhase.WON
        elif self.board.is_full():
            self.phase = RoundPhase.TIED
        else:
            self.side_to_move = mark.opposite
        return record
