"""Tests for move legality, check, checkmate and stalemate via Board.move_piece."""

import random

import pytest

from chessgame.core.board import Board
from chessgame.core.enums import Color, MoveResult, PieceType
from chessgame.core.piece import Piece
from chessgame.core.position import Position


def _board(
    *pieces: tuple[PieceType, Color, int, int],
    turn: Color = Color.WHITE,
) -> Board:
    """Helper: custom position with *turn* to move."""
    board = Board()
    for piece_type, color, x, y in pieces:
        board.place_piece(Piece.create(piece_type, color, Position(x, y)))
    board.current_turn = turn
    return board


def _play(board: Board, *moves: tuple[int, int, int, int]) -> list[MoveResult]:
    return [
        board.move_piece(Position(fx, fy), Position(tx, ty)) for fx, fy, tx, ty in moves
    ]


# Fool's mate: 1.f3 e5 2.g4 Qh4#
FOOLS_MATE = (
    (5, 6, 5, 5),
    (4, 1, 4, 3),
    (6, 6, 6, 4),
    (3, 0, 7, 4),
)


class TestMovePiece:
    def test_opening_pawn_push(self) -> None:
        board = Board.initial()
        result = board.move_piece(Position(4, 6), Position(4, 4))
        assert result == MoveResult.SUCCESS
        assert board.current_turn == Color.BLACK
        moved = board.piece_at(Position(4, 4))
        assert moved is not None and moved.has_moved
        assert moved.position == Position(4, 4)
        assert board.piece_at(Position(4, 6)) is None
        assert len(board.history) == 1

    def test_capture_replaces_target(self) -> None:
        board = Board.initial()
        _play(board, (4, 6, 4, 4), (3, 1, 3, 3))
        assert board.move_piece(Position(4, 4), Position(3, 3)) == MoveResult.SUCCESS
        taken = board.piece_at(Position(3, 3))
        assert taken is not None and taken.color == Color.WHITE
        assert len(board.pieces(Color.BLACK)) == 15


class TestRejection:
    @pytest.mark.parametrize(
        "from_pos, to_pos",
        [
            (Position(0, 7), Position(0, 6)),  # own piece on target
            (Position(4, 1), Position(4, 3)),  # black piece on white's turn
            (Position(4, 4), Position(4, 3)),  # empty source
            (Position(4, 6), Position(4, 3)),  # not a pawn move
            (Position(8, 6), Position(4, 4)),  # source off the board
            (Position(4, 6), Position(4, -1)),  # target off the board
            (Position(4, 6), Position(4, 6)),  # no-op
        ],
    )
    def test_invalid_moves_do_not_mutate(self, from_pos: Position, to_pos: Position) -> None:
        board = Board.initial()
        before = board.copy()
        assert board.move_piece(from_pos, to_pos) == MoveResult.INVALID
        assert board == before
        assert board.current_turn == Color.WHITE
        assert len(board.history) == 0

    def test_pinned_piece_cannot_expose_king(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.BISHOP, Color.WHITE, 4, 6),
            (PieceType.ROOK, Color.BLACK, 4, 0),
            (PieceType.KING, Color.BLACK, 0, 0),
        )
        before = board.copy()
        assert board.move_piece(Position(4, 6), Position(3, 5)) == MoveResult.INVALID
        assert board == before
        assert len(board.history) == 0

    def test_king_cannot_step_into_attack(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.ROOK, Color.BLACK, 3, 0),
            (PieceType.KING, Color.BLACK, 7, 0),
        )
        assert board.move_piece(Position(4, 7), Position(3, 7)) == MoveResult.INVALID
        assert board.move_piece(Position(4, 7), Position(5, 7)) == MoveResult.SUCCESS

    def test_must_answer_check(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.PAWN, Color.WHITE, 0, 6),
            (PieceType.ROOK, Color.BLACK, 4, 0),
            (PieceType.KING, Color.BLACK, 0, 0),
        )
        assert board.is_in_check(Color.WHITE)
        assert board.move_piece(Position(0, 6), Position(0, 5)) == MoveResult.INVALID
        assert board.move_piece(Position(4, 7), Position(3, 7)) == MoveResult.SUCCESS

    def test_moves_rejected_after_game_over(self) -> None:
        board = Board.initial()
        _play(board, *FOOLS_MATE)
        assert board.game_over
        assert board.move_piece(Position(0, 6), Position(0, 5)) == MoveResult.INVALID


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not board.is_in_check(Color.WHITE)
        assert not board.is_in_check(Color.BLACK)

    def test_missing_king_is_never_in_check(self) -> None:
        board = _board((PieceType.QUEEN, Color.BLACK, 0, 0))
        assert not board.is_in_check(Color.WHITE)

    def test_rook_check_with_escape(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.ROOK, Color.WHITE, 0, 7),
            (PieceType.KING, Color.BLACK, 4, 0),
        )
        result = board.move_piece(Position(0, 7), Position(0, 0))
        assert result == MoveResult.CHECK
        assert board.is_in_check(Color.BLACK)
        assert board.has_legal_moves(Color.BLACK)
        assert not board.game_over

    def test_legal_moves_filters_exposing_moves(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.ROOK, Color.WHITE, 4, 6),
            (PieceType.QUEEN, Color.BLACK, 4, 0),
            (PieceType.KING, Color.BLACK, 0, 0),
        )
        # The pinned rook may only slide along the pin line.
        assert set(board.legal_moves(Position(4, 6))) == {
            Position(4, y) for y in range(0, 6)
        }
        assert board.legal_moves(Position(3, 3)) == []
        assert board.legal_moves(Position(-1, 3)) == []


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = Board.initial()
        results = _play(board, *FOOLS_MATE)
        assert results == [
            MoveResult.SUCCESS,
            MoveResult.SUCCESS,
            MoveResult.SUCCESS,
            MoveResult.CHECKMATE,
        ]
        assert board.game_over
        assert board.winner == Color.BLACK
        assert board.current_turn == Color.WHITE
        assert board.is_in_check(Color.WHITE)
        assert not board.has_legal_moves(Color.WHITE)

    def test_back_rank_mate(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 3, 2),
            (PieceType.ROOK, Color.WHITE, 0, 7),
            (PieceType.KING, Color.BLACK, 3, 0),
        )
        assert board.move_piece(Position(0, 7), Position(0, 0)) == MoveResult.CHECKMATE
        assert board.game_over
        assert board.winner == Color.WHITE

    def test_has_legal_moves_leaves_board_untouched(self) -> None:
        board = Board.initial()
        _play(board, *FOOLS_MATE[:3])
        before = board.copy()
        assert board.has_legal_moves(Color.BLACK)
        assert board.has_legal_moves(Color.WHITE)
        assert board == before


def _raise_in_check(self: Board, color: Color) -> bool:
    raise RuntimeError("check detection failed")


class TestErrorsRestoreBoard:
    def test_has_legal_moves(self, monkeypatch: pytest.MonkeyPatch) -> None:
        board = Board.initial()
        before = board.copy()
        monkeypatch.setattr(Board, "is_in_check", _raise_in_check)
        with pytest.raises(RuntimeError):
            board.has_legal_moves(Color.WHITE)
        assert board == before

    def test_legal_moves(self, monkeypatch: pytest.MonkeyPatch) -> None:
        board = Board.initial()
        before = board.copy()
        monkeypatch.setattr(Board, "is_in_check", _raise_in_check)
        with pytest.raises(RuntimeError):
            board.legal_moves(Position(6, 7))
        assert board == before
        assert board.piece_at(Position(6, 7)) is not None

    def test_move_piece(self, monkeypatch: pytest.MonkeyPatch) -> None:
        board = Board.initial()
        before = board.copy()
        pawn = board.piece_at(Position(4, 6))
        monkeypatch.setattr(Board, "is_in_check", _raise_in_check)
        with pytest.raises(RuntimeError):
            board.move_piece(Position(4, 6), Position(4, 4))
        assert board == before
        assert board.piece_at(Position(4, 6)) is pawn
        assert len(board.history) == 0

    def test_move_piece_with_promotion(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pawn = Piece(PieceType.PAWN, Color.WHITE, Position(0, 1), has_moved=True)
        board = _board(
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.KING, Color.BLACK, 7, 3),
            (PieceType.KNIGHT, Color.BLACK, 1, 0),
        )
        board.place_piece(pawn)
        before = board.copy()
        monkeypatch.setattr(Board, "is_in_check", _raise_in_check)
        with pytest.raises(RuntimeError):
            board.move_piece(Position(0, 1), Position(1, 0))
        assert board == before
        assert board.piece_at(Position(0, 1)) is pawn


class TestStalemate:
    def test_queen_smothers_king(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 5, 2),
            (PieceType.QUEEN, Color.WHITE, 6, 3),
            (PieceType.KING, Color.BLACK, 7, 0),
        )
        result = board.move_piece(Position(6, 3), Position(6, 2))
        assert result == MoveResult.STALEMATE
        assert board.game_over
        assert board.winner is None
        assert not board.is_in_check(Color.BLACK)
        assert not board.has_legal_moves(Color.BLACK)


class TestPromotion:
    def test_white_pawn_becomes_queen(self) -> None:
        pawn = Piece(PieceType.PAWN, Color.WHITE, Position(0, 1), has_moved=True)
        board = _board(
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.KING, Color.BLACK, 7, 3),
        )
        board.place_piece(pawn)
        assert board.move_piece(Position(0, 1), Position(0, 0)) == MoveResult.SUCCESS
        queen = board.piece_at(Position(0, 0))
        assert queen == Piece(PieceType.QUEEN, Color.WHITE, Position(0, 0))
        record = board.history.peek()
        assert record is not None and record.promoted

    def test_black_pawn_becomes_queen(self) -> None:
        board = _board(
            (PieceType.PAWN, Color.BLACK, 2, 6),
            (PieceType.KING, Color.BLACK, 7, 0),
            (PieceType.KING, Color.WHITE, 4, 4),
            turn=Color.BLACK,
        )
        assert board.move_piece(Position(2, 6), Position(2, 7)) == MoveResult.SUCCESS
        queen = board.get_piece_at(Position(2, 7))
        assert queen is not None
        assert queen.piece_type == PieceType.QUEEN
        assert queen.color == Color.BLACK

    def test_promotion_can_give_check(self) -> None:
        board = _board(
            (PieceType.PAWN, Color.WHITE, 1, 1),
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.KING, Color.BLACK, 7, 0),
        )
        assert board.move_piece(Position(1, 1), Position(1, 0)) == MoveResult.CHECK

    def test_self_check_reverts_promotion(self) -> None:
        board = _board(
            (PieceType.KING, Color.WHITE, 0, 1),
            (PieceType.PAWN, Color.WHITE, 1, 1),
            (PieceType.ROOK, Color.BLACK, 7, 1),
            (PieceType.KING, Color.BLACK, 4, 5),
        )
        pawn = board.piece_at(Position(1, 1))
        before = board.copy()
        assert board.move_piece(Position(1, 1), Position(1, 0)) == MoveResult.INVALID
        assert board == before
        assert board.piece_at(Position(1, 1)) is pawn
        assert board.piece_at(Position(1, 0)) is None

    def test_capture_promotion_undo_restores_both(self) -> None:
        board = _board(
            (PieceType.PAWN, Color.WHITE, 1, 1),
            (PieceType.ROOK, Color.BLACK, 0, 0),
            (PieceType.KING, Color.WHITE, 4, 7),
            (PieceType.KING, Color.BLACK, 7, 3),
        )
        before = board.copy()
        assert board.move_piece(Position(1, 1), Position(0, 0)).is_committed
        promoted = board.get_piece_at(Position(0, 0))
        assert promoted is not None and promoted.piece_type == PieceType.QUEEN
        assert board.undo_last_move()
        assert board == before


class TestProperties:
    """Brute-force every pseudo-legal move along random games."""

    @staticmethod
    def _pseudo_moves(board: Board) -> list[tuple[Position, Position]]:
        return [
            (piece.position, target)
            for piece in board.pieces(board.current_turn)
            for target in piece.valid_moves(board)
        ]

    @pytest.mark.slow
    @pytest.mark.parametrize("seed", [1, 7, 2024])
    def test_legality_turns_and_undo(self, seed: int) -> None:
        rng = random.Random(seed)
        board = Board.initial()

        for _ in range(24):
            if board.game_over:
                break
            snapshot = board.copy()
            mover = board.current_turn
            committed: list[tuple[Position, Position]] = []

            for from_pos, to_pos in self._pseudo_moves(board):
                result = board.move_piece(from_pos, to_pos)
                if result.is_committed:
                    assert not board.is_in_check(mover)
                    assert board.current_turn == mover.opposite
                    committed.append((from_pos, to_pos))
                    assert board.undo_last_move()
                else:
                    assert board.current_turn == mover
                assert board == snapshot

            if not committed:
                break
            from_pos, to_pos = rng.choice(committed)
            assert board.move_piece(from_pos, to_pos).is_committed
