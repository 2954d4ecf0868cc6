"""User-configurable settings and their command-line form."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from tictactoe import __version__
from tictactoe.core.enums import Mark

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Rules
    first_mark: Mark = Mark.O

    # Display
    use_color: bool = True
    clear_screen: bool = True

    # Diagnostics (written to stderr)
    log_level: str = "WARNING"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Two-player tic-tac-toe in the terminal.",
    )
    parser.add_argument(
        "--first",
        choices=("X", "O"),
        type=str.upper,
        default=GameSettings.first_mark.name,
        help="mark that moves first in every round (default: %(default)s)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="do not highlight the winning line in green",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="do not clear the screen before each redraw",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=GameSettings.log_level,
        help="diagnostic log level on stderr (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> GameSettings:
    """Build :class:`GameSettings` from command-line arguments."""
    args = build_parser().parse_args(argv)
    return GameSettings(
        first_mark=Mark[args.first],
        use_color=not args.no_color,
        clear_screen=not args.no_clear,
        log_level=args.log_level,
    )
