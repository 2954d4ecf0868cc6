"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from tictactoe.game.controller import GameController
from tictactoe.settings import GameSettings


@pytest.fixture
def controller() -> GameController:
    """A controller with its first round already started (O to move)."""
    ctrl = GameController()
    ctrl.new_round()
    return ctrl


@pytest.fixture
def plain_settings() -> GameSettings:
    """Settings without escape sequences, so output is easy to assert on."""
    return GameSettings(use_color=False, clear_screen=False)
