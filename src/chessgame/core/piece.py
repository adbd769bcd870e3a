"""Piece value type and factory."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chessgame.core.enums import Color, PieceType
from chessgame.core.move_generator import pseudo_legal_moves
from chessgame.core.position import Position

if TYPE_CHECKING:
    from chessgame.core.board import Board

_LETTERS: dict[PieceType, str] = {
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
    PieceType.PAWN: "P",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

# Rank a pawn must land on to promote.
_PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``position`` and ``has_moved`` change as the piece moves; the board that
    holds the piece is its only owner.
    """

    piece_type: PieceType
    color: Color
    position: Position
    has_moved: bool = False

    # ── Factory ──────────────────────────────────────────────────────────

    @classmethod
    def create(cls, piece_type: PieceType, color: Color, position: Position) -> Piece:
        """Fresh, unmoved piece."""
        return cls(piece_type, color, position)

    # ── Rules ────────────────────────────────────────────────────────────

    def valid_moves(self, board: Board) -> list[Position]:
        """Pseudo-legal targets; own-king safety is checked by the board."""
        return pseudo_legal_moves(self, board)

    def is_promotion(self) -> bool:
        return (
            self.piece_type == PieceType.PAWN
            and self.position.y == _PROMOTION_RANK[self.color]
        )

    def clone(self) -> Piece:
        return replace(self)

    def view(self) -> PieceView:
        return PieceView(self.piece_type, self.color, self.position)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter, uppercase = white, lowercase = black."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]


@dataclass(frozen=True, slots=True)
class PieceView:
    """Read-only snapshot handed to the presentation layer."""

    piece_type: PieceType
    color: Color
    position: Position

    @property
    def symbol(self) -> str:
        return _UNICODE[(self.color, self.piece_type)]
