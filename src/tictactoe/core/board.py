"""Board - mark placement on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterator

from tictactoe.core.enums import Mark
from tictactoe.core.errors import CellOccupiedError
from tictactoe.core.types import CELL_COUNT, Cell, is_valid_cell, make_cell


class Board:
    """Mutable 9-cell board. Cells only ever go from EMPTY to X or O."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Mark] = [Mark.EMPTY] * CELL_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Mark:
        if not is_valid_cell(cell):
            raise IndexError(f"Cell index out of range: {cell}")
        return self._cells[cell]

    def __iter__(self) -> Iterator[Mark]:
        return iter(self._cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def at(self, row: int, col: int) -> Mark:
        """Mark at (row, column), both 0-based."""
        return self[make_cell(row, col)]

    def is_empty(self, cell: Cell) -> bool:
        return self[cell] == Mark.EMPTY

    # -- Mutation -------------------------------------------------------------

    def place(self, cell: Cell, mark: Mark) -> None:
        """Put *mark* on an empty *cell*.

        Raises:
            CellOccupiedError: the cell already holds a mark.
        """
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place an empty mark")
        if not self.is_empty(cell):
            raise CellOccupiedError(cell)
        self._cells[cell] = mark

    # -- Query helpers ------------------------------------------------------

    def empty_cells(self) -> list[Cell]:
        return [cell for cell, mark in enumerate(self._cells) if mark == Mark.EMPTY]

    def filled_count(self) -> int:
        return CELL_COUNT - len(self.empty_cells())

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells

    # -- Serialisation --------------------------------------------------------

    def to_string(self) -> str:
        """Compact row-major form, ``'.'`` for empty, e.g. ``'X...O....'``."""
        return "".join("." if m == Mark.EMPTY else m.name for m in self._cells)

    @classmethod
    def from_string(cls, layout: str) -> Board:
        """Build a board from the compact form produced by :meth:`to_string`.

        Whitespace and ``'/'`` row separators are ignored, so
        ``"XO./.X./..O"`` is accepted too.
        """
        chars = [c for c in layout if not c.isspace() and c != "/"]
        if len(chars) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {len(chars)}: {layout!r}")
        b = cls()
        b._cells = [Mark.from_char(c) for c in chars]
        return b
