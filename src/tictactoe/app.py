"""Application entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from colorama import just_fix_windows_console

from tictactoe.settings import GameSettings, parse_args

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(settings: GameSettings) -> None:
    """Send diagnostics to stderr so they never mix with the board."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


def run(settings: GameSettings) -> int:
    """Play on the real terminal with *settings*."""
    from tictactoe.cli.console import TerminalConsole
    from tictactoe.cli.session import TerminalSession

    _LOGGER.debug("starting with %s", settings)
    return TerminalSession(TerminalConsole(), settings).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the game. Returns the process exit code."""
    settings = parse_args(argv)
    _configure_logging(settings)
    just_fix_windows_console()
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
