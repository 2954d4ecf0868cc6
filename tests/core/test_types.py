"""Tests for cell coordinates and names."""

import pytest

from tictactoe.core.errors import MalformedInputError
from tictactoe.core.types import (
    A1, A2, A3, B1, B2, B3, C1, C2, C3,
    CELL_COUNT,
    cell_name,
    col_of,
    is_valid_cell,
    make_cell,
    parse_cell,
    row_of,
)

ALL_CELLS = {
    "A1": A1, "A2": A2, "A3": A3,
    "B1": B1, "B2": B2, "B3": B3,
    "C1": C1, "C2": C2, "C3": C3,
}


class TestCellMapping:
    def test_row_major_order(self) -> None:
        assert [A1, A2, A3, B1, B2, B3, C1, C2, C3] == list(range(CELL_COUNT))

    def test_make_cell_covers_every_cell(self) -> None:
        cells = [make_cell(r, c) for r in range(3) for c in range(3)]
        assert cells == list(range(9))

    def test_row_and_col_roundtrip(self) -> None:
        for cell in range(CELL_COUNT):
            assert make_cell(row_of(cell), col_of(cell)) == cell

    @pytest.mark.parametrize(("row", "col"), [(-1, 0), (3, 0), (0, 3), (0, -1)])
    def test_make_cell_out_of_range(self, row: int, col: int) -> None:
        with pytest.raises(ValueError):
            make_cell(row, col)

    def test_is_valid_cell(self) -> None:
        assert is_valid_cell(0)
        assert is_valid_cell(8)
        assert not is_valid_cell(9)
        assert not is_valid_cell(-1)


class TestCellNames:
    @pytest.mark.parametrize(("name", "cell"), sorted(ALL_CELLS.items()))
    def test_cell_name(self, name: str, cell: int) -> None:
        assert cell_name(cell) == name

    @pytest.mark.parametrize(("name", "cell"), sorted(ALL_CELLS.items()))
    def test_parse_upper_and_lower(self, name: str, cell: int) -> None:
        assert parse_cell(name) == cell
        assert parse_cell(name.lower()) == cell

    @pytest.mark.parametrize("bad", ["", "A", "A4", "D1", "A11", " a1", "a1 ", "1A", "A0"])
    def test_parse_rejects(self, bad: str) -> None:
        with pytest.raises(MalformedInputError):
            parse_cell(bad)

    def test_cell_name_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            cell_name(9)
