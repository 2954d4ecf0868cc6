"""Cell type alias and coordinate helpers.

Board layout (row-major, rows lettered, columns numbered)::

    A1=0, A2=1, A3=2
    B1=3, B2=4, B3=5
    C1=6, C2=7, C3=8
"""

from __future__ import annotations

from typing import TypeAlias

from tictactoe.core.errors import MalformedInputError

Cell: TypeAlias = int  # 0–8

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

ROW_LETTERS = "ABC"
COLUMN_DIGITS = "123"


def row_of(cell: Cell) -> int:
    """Row index 0–2 (A–C)."""
    return cell // BOARD_SIZE


def col_of(cell: Cell) -> int:
    """Column index 0–2 (1–3)."""
    return cell % BOARD_SIZE


def make_cell(row: int, col: int) -> Cell:
    """Create cell from row (0–2) and column (0–2)."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Cell coordinates out of range: ({row}, {col})")
    return row * BOARD_SIZE + col


def is_valid_cell(cell: int) -> bool:
    """Check whether integer is a valid cell index."""
    return 0 <= cell < CELL_COUNT


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. 0 → 'A1', 8 → 'C3'."""
    if not is_valid_cell(cell):
        raise ValueError(f"Invalid cell index: {cell}")
    return ROW_LETTERS[row_of(cell)] + COLUMN_DIGITS[col_of(cell)]


def parse_cell(name: str) -> Cell:
    """Parse cell name, case-insensitive, e.g. 'b2' → 4.

    No surrounding whitespace is tolerated.
    """
    if (
        len(name) != 2
        or name[0].upper() not in ROW_LETTERS
        or name[1] not in COLUMN_DIGITS
    ):
        raise MalformedInputError(name)
    return make_cell(ROW_LETTERS.index(name[0].upper()), COLUMN_DIGITS.index(name[1]))


# ── Named cell constants ────────────────────────────────────────────────────

A1, A2, A3 = range(0, 3)
B1, B2, B3 = range(3, 6)
C1, C2, C3 = range(6, 9)
