"""GameController — click-driven game session on top of the rule engine.

Turns "the user clicked this square" into rule-engine calls, keeps the
current selection and a one-line status message, and notifies listeners via
simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgame.core.board import Board
from chessgame.core.enums import Color, MoveResult
from chessgame.core.position import Position

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Position, Position, MoveResult], None]  # from, to, result
UndoCallback = Callable[[], None]
GameOverCallback = Callable[["Color | None"], None]  # winner, None = draw
SelectionCallback = Callable[["Position | None"], None]
StatusCallback = Callable[[str], None]
NewGameCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Status texts ─────────────────────────────────────────────────────────────

STATUS_UNDO_OK = "Undo successful!"
STATUS_UNDO_EMPTY = "No moves to undo!"
STATUS_STALEMATE = "Stalemate! Game ended in a draw."


def checkmate_text(winner: Color) -> str:
    return f"Checkmate! {winner} wins!"


def check_text(color: Color) -> str:
    return f"{color} is in check!"


def turn_text(color: Color) -> str:
    return f"Turn: {color}"


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Select-then-move interaction over a single :class:`Board`.

    The first click on one of the side-to-move's pieces selects it; the next
    click tries to move it there. A failed move keeps the selection unless the
    click was on the selected square (deselect) or on another own piece
    (reselect).
    """

    __slots__ = ("_board", "_selected", "_status", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()
        self._selected: Position | None = None
        self._status = ""
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selected(self) -> Position | None:
        return self._selected

    @property
    def status(self) -> str:
        """Transient message for the last action; the game-over text wins."""
        if self._board.game_over:
            return self.game_over_text()
        return self._status

    @property
    def turn_text(self) -> str:
        return turn_text(self._board.current_turn)

    def game_over_text(self) -> str:
        if not self._board.game_over:
            return ""
        winner = self._board.winner
        if winner is None:
            return STATUS_STALEMATE
        return checkmate_text(winner)

    def selection_targets(self) -> list[Position]:
        """Legal targets of the selected piece, for highlighting."""
        if self._selected is None:
            return []
        return self._board.legal_moves(self._selected)

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._board.initialize()
        self._selected = None
        self._status = ""
        _LOGGER.info("New game started")
        for cb in self.events.on_new_game:
            cb()

    def click(self, pos: Position) -> MoveResult | None:
        """Handle a click on *pos*. Returns the move result if a move was tried."""
        self._set_status("")
        board = self._board
        if board.game_over:
            return None

        if self._selected is None:
            if self._is_own_piece(pos):
                self._set_selected(pos)
            return None

        from_pos = self._selected
        result = board.move_piece(from_pos, pos)
        if result.is_committed:
            self._set_selected(None)
            if result == MoveResult.CHECK:
                self._set_status(check_text(board.current_turn))
            self._emit_move(from_pos, pos, result)
            if result.ends_game:
                _LOGGER.info("Game over: %s", self.game_over_text())
                self._emit_game_over(board.winner)
            return result

        if pos == from_pos:
            self._set_selected(None)
        elif self._is_own_piece(pos):
            self._set_selected(pos)
        return result

    def undo(self) -> bool:
        """Take back the last move. Not available once the game has ended."""
        if self._board.game_over:
            return False
        if not self._board.undo_last_move():
            self._set_status(STATUS_UNDO_EMPTY)
            return False
        self._set_selected(None)
        self._set_status(STATUS_UNDO_OK)
        for cb in self.events.on_undo:
            cb()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_own_piece(self, pos: Position) -> bool:
        piece = self._board.get_piece_at(pos)
        return piece is not None and piece.color == self._board.current_turn

    def _set_selected(self, pos: Position | None) -> None:
        if pos == self._selected:
            return
        self._selected = pos
        for cb in self.events.on_selection_changed:
            cb(pos)

    def _set_status(self, text: str) -> None:
        if text == self._status:
            return
        self._status = text
        for cb in self.events.on_status_changed:
            cb(text)

    def _emit_move(
        self, from_pos: Position, to_pos: Position, result: MoveResult
    ) -> None:
        for cb in self.events.on_move:
            cb(from_pos, to_pos, result)

    def _emit_game_over(self, winner: Color | None) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
