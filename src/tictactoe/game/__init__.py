"""Game management layer — controller, round state machine, console seam.

Quick start::

    from tictactoe.game import GameController, TurnOutcome

    ctrl = GameController()
    ctrl.new_round()
    ctrl.submit("b2")   # O plays B2
    ctrl.submit("a1")   # X plays A1
"""

from tictactoe.game.controller import GameController, GameEvents
from tictactoe.game.interfaces import IConsole, RoundPhase, TurnOutcome
from tictactoe.game.state import DEFAULT_FIRST_MARK, MoveRecord, RoundState

__all__ = [
    # Interfaces
    "IConsole",
    "RoundPhase",
    "TurnOutcome",
    # Concrete
    "DEFAULT_FIRST_MARK",
    "GameController",
    "GameEvents",
    "MoveRecord",
    "RoundState",
]
