"""Tests for GameSettings and the command line."""

import pytest

from tictactoe.core.enums import Mark
from tictactoe.settings import GameSettings, parse_args


class TestParseArgs:
    def test_defaults(self) -> None:
        assert parse_args([]) == GameSettings()

    def test_default_first_mover_is_o(self) -> None:
        assert parse_args([]).first_mark == Mark.O

    @pytest.mark.parametrize("value", ["x", "X"])
    def test_first(self, value: str) -> None:
        assert parse_args(["--first", value]).first_mark == Mark.X

    def test_display_flags(self) -> None:
        settings = parse_args(["--no-color", "--no-clear"])
        assert settings.use_color is False
        assert settings.clear_screen is False

    def test_log_level(self) -> None:
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_invalid_first(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--first", "Z"])
