"""Board - 8x8 grid of pieces plus turn/game-over state, with the rules on top."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from chessgame.core.enums import Color, MoveResult, PieceType
from chessgame.core.history import MoveHistory, MoveRecord, restore
from chessgame.core.piece import Piece, PieceView
from chessgame.core.position import BOARD_SIZE, Position

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board that owns its pieces.

    :meth:`move_piece` is the only state transition used during play; every
    rejected move leaves the board exactly as it was.
    """

    __slots__ = ("_squares", "current_turn", "game_over", "winner", "history")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        self.current_turn = Color.WHITE
        self.game_over = False
        self.winner: Color | None = None
        self.history = MoveHistory()

    # -- Setup --------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        board = cls()
        board.initialize()
        return board

    def initialize(self) -> None:
        """Reset to the standard 32-piece layout with white to move."""
        self.clear()
        for x, piece_type in enumerate(_BACK_RANK):
            self.place_piece(Piece.create(piece_type, Color.BLACK, Position(x, 0)))
            self.place_piece(Piece.create(PieceType.PAWN, Color.BLACK, Position(x, 1)))
            self.place_piece(Piece.create(PieceType.PAWN, Color.WHITE, Position(x, 6)))
            self.place_piece(Piece.create(piece_type, Color.WHITE, Position(x, 7)))

    def clear(self) -> None:
        """Empty board, white to move, no history."""
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self.current_turn = Color.WHITE
        self.game_over = False
        self.winner = None
        self.history.clear()

    def copy(self) -> Board:
        """Independent copy of pieces and turn state, without history."""
        board = Board()
        board._squares = [p.clone() if p is not None else None for p in self._squares]
        board.current_turn = self.current_turn
        board.game_over = self.game_over
        board.winner = self.winner
        return board

    def place_piece(self, piece: Piece) -> None:
        """Put *piece* on its own ``position``. For building custom positions."""
        pos = piece.position
        if not pos.in_bounds:
            raise ValueError(f"Square {pos} is off the board")
        if self._squares[pos.index] is not None:
            raise ValueError(f"Square {pos} is already occupied")
        self._squares[pos.index] = piece

    def remove_piece(self, pos: Position) -> Piece | None:
        piece = self.piece_at(pos)
        if piece is not None:
            self._squares[pos.index] = None
        return piece

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        if not pos.in_bounds:
            raise IndexError(f"Square {pos} is off the board")
        return self._squares[pos.index]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        if not pos.in_bounds:
            raise IndexError(f"Square {pos} is off the board")
        self._squares[pos.index] = piece

    def piece_at(self, pos: Position) -> Piece | None:
        """The piece on *pos*; None for empty or off-board squares."""
        if not pos.in_bounds:
            return None
        return self._squares[pos.index]

    def get_piece_at(self, pos: Position) -> PieceView | None:
        """Read-only view of the piece on *pos* for the presentation layer."""
        piece = self.piece_at(pos)
        return piece.view() if piece is not None else None

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces on the board, row by row; optionally only *color*'s."""
        return [
            piece
            for piece in self._squares
            if piece is not None and (color is None or piece.color == color)
        ]

    # -- Check detection ----------------------------------------------------

    def find_king(self, color: Color) -> Position | None:
        """Square of *color*'s king, or None if it is missing."""
        for piece in self._squares:
            if (
                piece is not None
                and piece.piece_type == PieceType.KING
                and piece.color == color
            ):
                return piece.position
        return None

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by any opposing piece?"""
        king_pos = self.find_king(color)
        if king_pos is None:
            return False
        return any(
            king_pos in attacker.valid_moves(self)
            for attacker in self.pieces(color.opposite)
        )

    @contextmanager
    def _trial_move(self, piece: Piece, to_pos: Position) -> Iterator[None]:
        """Move *piece* to *to_pos* for the duration of the block.

        The board is restored on every exit path, including exceptions.
        """
        origin = piece.position
        captured = self._squares[to_pos.index]
        self._squares[to_pos.index] = piece
        self._squares[origin.index] = None
        piece.position = to_pos
        try:
            yield
        finally:
            piece.position = origin
            self._squares[origin.index] = piece
            self._squares[to_pos.index] = captured

    def _is_safe_move(self, piece: Piece, to_pos: Position) -> bool:
        with self._trial_move(piece, to_pos):
            return not self.is_in_check(piece.color)

    def legal_moves(self, pos: Position) -> list[Position]:
        """Targets of the piece on *pos* that keep its own king safe."""
        piece = self.piece_at(pos)
        if piece is None:
            return []
        return [
            target
            for target in piece.valid_moves(self)
            if self._is_safe_move(piece, target)
        ]

    def has_legal_moves(self, color: Color) -> bool:
        """Does *color* have at least one move that keeps its king safe?"""
        for piece in self.pieces(color):
            for target in piece.valid_moves(self):
                if self._is_safe_move(piece, target):
                    return True
        return False

    # -- State transitions --------------------------------------------------

    def move_piece(self, from_pos: Position, to_pos: Position) -> MoveResult:
        """Try to move the piece on *from_pos* to *to_pos*."""
        if self.game_over:
            return self._reject("game is over", from_pos, to_pos)
        if not (from_pos.in_bounds and to_pos.in_bounds):
            return self._reject("off the board", from_pos, to_pos)
        piece = self._squares[from_pos.index]
        if piece is None:
            return self._reject("empty source square", from_pos, to_pos)
        if piece.color != self.current_turn:
            return self._reject("not this side's turn", from_pos, to_pos)
        if to_pos not in piece.valid_moves(self):
            return self._reject("not a valid target", from_pos, to_pos)

        moved_snapshot = piece.clone()
        captured = self._squares[to_pos.index]
        mover = self.current_turn

        self._squares[to_pos.index] = piece
        self._squares[from_pos.index] = None
        piece.position = to_pos
        piece.has_moved = True
        try:
            promoted = piece.is_promotion()
            if promoted:
                self._squares[to_pos.index] = Piece.create(
                    PieceType.QUEEN, piece.color, to_pos
                )
            self_check = self.is_in_check(mover)
        except BaseException:
            self._revert(piece, moved_snapshot, captured)
            raise

        if self_check:
            self._revert(piece, moved_snapshot, captured)
            return self._reject("leaves own king in check", from_pos, to_pos)

        if captured is not None and captured.piece_type == PieceType.KING:
            _LOGGER.warning(
                "%s king captured on %s; position was not reachable by legal play",
                captured.color,
                to_pos,
            )

        self.current_turn = mover.opposite
        self.history.push(
            MoveRecord(
                from_pos=from_pos,
                to_pos=to_pos,
                moved_piece=moved_snapshot,
                captured_piece=captured.clone() if captured is not None else None,
                promoted=promoted,
                previous_turn=mover,
            )
        )
        result = self._classify(mover)
        _LOGGER.debug("%s moved %s -> %s: %s", mover, from_pos, to_pos, result.name)
        return result

    def undo_last_move(self) -> bool:
        """Revert the most recent committed move. False if there is none."""
        record = self.history.pop()
        if record is None:
            return False
        restore(record, self)
        _LOGGER.debug("Undid %s -> %s", record.from_pos, record.to_pos)
        return True

    def _revert(self, piece: Piece, snapshot: Piece, captured: Piece | None) -> None:
        """Take back an uncommitted move, promotion included.

        The original pawn object goes back to its square, so callers holding
        a reference to it still see the board's piece.
        """
        to_pos = piece.position
        piece.position = snapshot.position
        piece.has_moved = snapshot.has_moved
        self._squares[snapshot.position.index] = piece
        self._squares[to_pos.index] = captured

    def _classify(self, mover: Color) -> MoveResult:
        side = self.current_turn
        in_check = self.is_in_check(side)
        if self.has_legal_moves(side):
            return MoveResult.CHECK if in_check else MoveResult.SUCCESS

        self.game_over = True
        if in_check:
            self.winner = mover
            return MoveResult.CHECKMATE
        self.winner = None
        return MoveResult.STALEMATE

    @staticmethod
    def _reject(reason: str, from_pos: Position, to_pos: Position) -> MoveResult:
        _LOGGER.debug("Rejected %s -> %s: %s", from_pos, to_pos, reason)
        return MoveResult.INVALID

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.current_turn == other.current_turn
            and self.game_over == other.game_over
            and self.winner == other.winner
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            row = []
            for x in range(BOARD_SIZE):
                piece = self._squares[y * BOARD_SIZE + x]
                row.append(str(piece) if piece else ".")
            rows.append(f"{y} {' '.join(row)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
