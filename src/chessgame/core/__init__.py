"""Core rule engine — pure chess logic with zero external dependencies.

Quick start::

    from chessgame.core import Board, Position

    board = Board.initial()
    result = board.move_piece(Position(4, 6), Position(4, 4))
    print(result, board.current_turn)
"""

from chessgame.core.board import Board
from chessgame.core.enums import Color, MoveResult, PieceType
from chessgame.core.history import MoveHistory, MoveRecord, restore
from chessgame.core.move_generator import pseudo_legal_moves
from chessgame.core.piece import Piece, PieceView
from chessgame.core.position import BOARD_SIZE, Position, in_bounds

__all__ = [
    # Enums
    "Color",
    "MoveResult",
    "PieceType",
    # Coordinates
    "BOARD_SIZE",
    "Position",
    "in_bounds",
    # Domain objects
    "Board",
    "MoveHistory",
    "MoveRecord",
    "Piece",
    "PieceView",
    "pseudo_legal_moves",
    "restore",
]
