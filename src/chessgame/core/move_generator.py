"""Pseudo-legal move generation, one function per piece type.

Nothing here mutates the board or looks at whose turn it is; filtering out
moves that expose the mover's king is done by :class:`Board`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessgame.core.enums import Color, PieceType
from chessgame.core.position import BOARD_SIZE, Position

if TYPE_CHECKING:
    from chessgame.core.board import Board
    from chessgame.core.piece import Piece


ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# White moves towards y == 0, black towards y == 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def can_move_to(board: Board, target: Position, own_color: Color) -> bool:
    """On the board and either empty or holding an enemy piece."""
    if not target.in_bounds:
        return False
    occupant = board.piece_at(target)
    return occupant is None or occupant.color != own_color


# -- Piece-specific generators ------------------------------------------


def _gen_sliding(
    piece: Piece, board: Board, directions: tuple[tuple[int, int], ...]
) -> list[Position]:
    moves: list[Position] = []
    origin = piece.position
    for dx, dy in directions:
        for step in range(1, BOARD_SIZE):
            target = origin.offset(dx * step, dy * step)
            if not target.in_bounds:
                break
            occupant = board.piece_at(target)
            if occupant is None:
                moves.append(target)
                continue
            if occupant.color != piece.color:
                moves.append(target)
            break
    return moves


def _gen_stepping(
    piece: Piece, board: Board, offsets: tuple[tuple[int, int], ...]
) -> list[Position]:
    moves: list[Position] = []
    for dx, dy in offsets:
        target = piece.position.offset(dx, dy)
        if can_move_to(board, target, piece.color):
            moves.append(target)
    return moves


def _gen_rook(piece: Piece, board: Board) -> list[Position]:
    return _gen_sliding(piece, board, ROOK_DIRS)


def _gen_bishop(piece: Piece, board: Board) -> list[Position]:
    return _gen_sliding(piece, board, BISHOP_DIRS)


def _gen_queen(piece: Piece, board: Board) -> list[Position]:
    return _gen_sliding(piece, board, QUEEN_DIRS)


def _gen_knight(piece: Piece, board: Board) -> list[Position]:
    return _gen_stepping(piece, board, KNIGHT_OFFSETS)


def _gen_king(piece: Piece, board: Board) -> list[Position]:
    return _gen_stepping(piece, board, KING_OFFSETS)


def _gen_pawn(piece: Piece, board: Board) -> list[Position]:
    moves: list[Position] = []
    direction = PAWN_DIRECTION[piece.color]
    origin = piece.position

    one_step = origin.offset(0, direction)
    if one_step.in_bounds and board.piece_at(one_step) is None:
        moves.append(one_step)
        two_step = origin.offset(0, 2 * direction)
        if (
            origin.y == PAWN_START_RANK[piece.color]
            and two_step.in_bounds
            and board.piece_at(two_step) is None
        ):
            moves.append(two_step)

    # Diagonal steps are captures only; there is no en passant.
    for dx in (-1, 1):
        target = origin.offset(dx, direction)
        if not target.in_bounds:
            continue
        occupant = board.piece_at(target)
        if occupant is not None and occupant.color != piece.color:
            moves.append(target)

    return moves


_GENERATORS: dict[PieceType, Callable[[Piece, Board], list[Position]]] = {
    PieceType.ROOK: _gen_rook,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
    PieceType.PAWN: _gen_pawn,
}


def pseudo_legal_moves(piece: Piece, board: Board) -> list[Position]:
    """Squares *piece* could move to, ignoring the safety of its own king."""
    return _GENERATORS[piece.piece_type](piece, board)
