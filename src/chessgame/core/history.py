"""Move history: one record per committed move, undone last-in first-out."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessgame.core.enums import Color
from chessgame.core.piece import Piece
from chessgame.core.position import Position

if TYPE_CHECKING:
    from chessgame.core.board import Board


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Everything needed to put the board back as it was before a move.

    ``moved_piece`` and ``captured_piece`` are clones taken before the move,
    so they carry the original ``position`` and ``has_moved`` values.
    """

    from_pos: Position
    to_pos: Position
    moved_piece: Piece
    captured_piece: Piece | None
    promoted: bool
    previous_turn: Color


class MoveHistory:
    """Append/pop-only stack of :class:`MoveRecord`."""

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[MoveRecord] = []

    def push(self, record: MoveRecord) -> None:
        self._records.append(record)

    def pop(self) -> MoveRecord | None:
        """Remove and return the newest record, or None when empty."""
        if not self._records:
            return None
        return self._records.pop()

    def peek(self) -> MoveRecord | None:
        return self._records[-1] if self._records else None

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __iter__(self) -> Iterator[MoveRecord]:
        """Oldest first."""
        return iter(self._records)


def restore(record: MoveRecord, board: Board) -> None:
    """Apply the inverse of *record* to *board*.

    The record is trusted: it mirrors a position that was legal when it was
    taken, so nothing is re-validated here.
    """
    board[record.from_pos] = record.moved_piece.clone()
    captured = record.captured_piece
    board[record.to_pos] = captured.clone() if captured is not None else None
    board.current_turn = record.previous_turn
    board.game_over = False
    board.winner = None
