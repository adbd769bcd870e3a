"""MainWindow — board plus turn/status labels and game actions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessgame.core.enums import Color, MoveResult
from chessgame.core.position import Position
from chessgame.game.controller import GameController
from chessgame.ui.board_scene import BoardScene
from chessgame.ui.board_view import BoardView
from chessgame.ui.settings import AppSettings
from chessgame.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

UNDO_HINT = "Press 'U' to Undo"

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chess Game")
        self._settings = settings if settings is not None else AppSettings()
        self._controller = controller if controller is not None else GameController()

        self._setup_ui()
        self._setup_actions()
        self._apply_settings()
        self._connect_signals()
        self._connect_game_events()
        self._refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._board_view.board_scene

    @property
    def turn_label(self) -> QLabel:
        return self._turn_label

    @property
    def status_label(self) -> QLabel:
        return self._status_label

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        tile = self._settings.tile_size
        self._board_view = BoardView(BoardScene(tile_size=tile))
        root.addWidget(self._board_view, stretch=1)

        info = QHBoxLayout()
        self._turn_label = QLabel()
        info.addWidget(self._turn_label)
        info.addStretch()
        self._hint_label = QLabel(UNDO_HINT)
        self._hint_label.setObjectName("hintLabel")
        info.addWidget(self._hint_label)
        root.addLayout(info)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        root.addWidget(self._status_label)

        buttons = QHBoxLayout()
        self._btn_new = QPushButton("New game")
        self._btn_new.setMinimumHeight(36)
        buttons.addWidget(self._btn_new)
        self._btn_undo = QPushButton("Undo")
        self._btn_undo.setMinimumHeight(36)
        buttons.addWidget(self._btn_undo)
        root.addLayout(buttons)

        self.resize(8 * tile + 12, 8 * tile + 140)

    def _setup_actions(self) -> None:
        self._act_undo = QAction("Undo", self)
        self._act_undo.setShortcut(QKeySequence("U"))
        self.addAction(self._act_undo)

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut(QKeySequence("Ctrl+N"))
        self.addAction(self._act_new_game)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    def _connect_signals(self) -> None:
        self.board_scene.square_clicked.connect(self._on_square_clicked)
        self._btn_undo.clicked.connect(self._on_undo)
        self._act_undo.triggered.connect(self._on_undo)
        self._btn_new.clicked.connect(self._on_new_game)
        self._act_new_game.triggered.connect(self._on_new_game)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_undo, self._refresh)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(events.on_selection_changed, self._on_selection_changed)
        self._replace_callback(events.on_status_changed, self._on_status_changed)
        self._replace_callback(events.on_new_game, self._refresh)

    @staticmethod
    def _replace_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, pos: Position) -> None:
        result = self._controller.click(pos)
        if result == MoveResult.INVALID:
            _LOGGER.debug("Click on %s did not produce a move", pos)

    def _on_undo(self) -> None:
        self._controller.undo()

    def _on_new_game(self) -> None:
        self._controller.new_game()

    # ── Game events ──────────────────────────────────────────────────────

    def _on_game_move(
        self, from_pos: Position, to_pos: Position, result: MoveResult
    ) -> None:
        _LOGGER.debug("Move %s -> %s: %s", from_pos, to_pos, result.name)
        self._refresh()

    def _on_game_over(self, winner: Color | None) -> None:
        _LOGGER.info("Game over, winner: %s", winner if winner is not None else "none")
        self._refresh()

    def _on_selection_changed(self, pos: Position | None) -> None:
        del pos
        self._refresh()

    def _on_status_changed(self, text: str) -> None:
        del text
        self._status_label.setText(self._controller.status)

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        ctrl = self._controller
        board = ctrl.board
        self.board_scene.sync(board, ctrl.selected, ctrl.selection_targets())
        self._turn_label.setText(ctrl.turn_text)
        self._status_label.setText(ctrl.status)
        self._btn_undo.setEnabled(not board.game_over)
        self._act_undo.setEnabled(not board.game_over)
