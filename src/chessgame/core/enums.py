"""Core enumerations for the rule engine."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    """The six piece variants."""

    ROOK = 1
    KNIGHT = 2
    BISHOP = 3
    QUEEN = 4
    KING = 5
    PAWN = 6


class MoveResult(IntEnum):
    """Outcome of :meth:`Board.move_piece`.

    ``INVALID`` covers every rejection path; the other members mean the move
    was committed and classify the position of the new side to move.
    """

    INVALID = 0
    SUCCESS = 1
    CHECK = 2
    CHECKMATE = 3
    STALEMATE = 4

    @property
    def is_committed(self) -> bool:
        return self != MoveResult.INVALID

    @property
    def ends_game(self) -> bool:
        return self in (MoveResult.CHECKMATE, MoveResult.STALEMATE)
