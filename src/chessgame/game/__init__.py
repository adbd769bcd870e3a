"""Game session layer — click handling, selection and status messages.

Quick start::

    from chessgame.core import Position
    from chessgame.game import GameController

    ctrl = GameController()
    ctrl.click(Position(4, 6))
    ctrl.click(Position(4, 4))
"""

from chessgame.game.controller import GameController, GameEvents

__all__ = [
    "GameController",
    "GameEvents",
]
