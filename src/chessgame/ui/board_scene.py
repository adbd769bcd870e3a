"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgame.core.board import Board
from chessgame.core.enums import Color
from chessgame.core.position import BOARD_SIZE, Position
from chessgame.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights and piece glyphs.

    The scene holds no game state of its own: :meth:`sync` redraws from a
    :class:`Board` and the current selection.

    Signals:
        square_clicked(Position): Emitted on every left click, with the
            square under the cursor. Clicks off the board yield an
            out-of-bounds position, which the rule engine rejects.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None, tile_size: int = TILE) -> None:
        super().__init__(parent)
        self._tile = tile_size
        self._theme = BoardTheme.default()
        self._show_coordinates = True
        self._show_legal_moves = True

        self._square_items: list[QGraphicsRectItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}

        self._board: Board | None = None
        self._selected: Position | None = None
        self._targets: list[Position] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def tile_size(self) -> int:
        return self._tile

    @property
    def piece_items(self) -> dict[Position, QGraphicsSimpleTextItem]:
        return self._piece_items

    def sync(
        self,
        board: Board,
        selected: Position | None = None,
        targets: list[Position] | None = None,
    ) -> None:
        """Redraw pieces and highlights from *board*."""
        self._board = board
        self._selected = selected
        self._targets = list(targets or [])
        self._sync_pieces()
        self._sync_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target overlays."""
        self._show_legal_moves = visible
        self._redraw()

    def position_at(self, point: QPointF) -> Position:
        """Scene point → board square (may be off the board)."""
        return Position(int(point.x() // self._tile), int(point.y() // self._tile))

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.square_clicked.emit(self.position_at(event.scenePos()))
        event.accept()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        self._clear_items(self._square_items)
        self._clear_items(self._coord_items)

        t = self._tile
        font = QFont("Helvetica Neue", max(9, t // 8))

        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                is_light = (x + y) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(x * t, y * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items.append(rect)

                text_color = (
                    self._theme.coord_on_light if is_light else self._theme.coord_on_dark
                )
                # Rank numbers (left edge), file letters (bottom edge)
                if x == 0:
                    rank = str(BOARD_SIZE - y)
                    self._add_coord(rank, x * t + 2, y * t + 1, font, text_color)
                if y == BOARD_SIZE - 1:
                    letter = chr(ord("a") + x)
                    px, py = x * t + t - 12, y * t + t - 16
                    self._add_coord(letter, px, py, font, text_color)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, px: float, py: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(px, py)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _redraw(self) -> None:
        if self._board is not None:
            self._sync_pieces()
            self._sync_highlights()

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self._tile
        font = QFont("DejaVu Sans", int(t * 0.6))
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                pos = Position(x, y)
                piece = self._board.get_piece_at(pos)
                if piece is None:
                    continue
                item = QGraphicsSimpleTextItem(piece.symbol)
                item.setFont(font)
                fill = (
                    self._theme.white_piece
                    if piece.color == Color.WHITE
                    else self._theme.black_piece
                )
                item.setBrush(QBrush(fill))
                item.setPen(QPen(QColor(0, 0, 0), 1))
                bounds = item.boundingRect()
                item.setPos(
                    x * t + (t - bounds.width()) / 2,
                    y * t + (t - bounds.height()) / 2,
                )
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[pos] = item

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        board = self._board
        if board is None:
            return

        side = board.current_turn
        if board.is_in_check(side):
            king_pos = board.find_king(side)
            if king_pos is not None:
                self._add_highlight(king_pos, QBrush(self._theme.highlight_check))

        if self._selected is not None and self._selected.in_bounds:
            outline = self._add_highlight(self._selected, QBrush(Qt.BrushStyle.NoBrush))
            outline.setPen(QPen(self._theme.selection, 4))
            outline.setZValue(0.9)

        if self._show_legal_moves:
            for target in self._targets:
                self._add_highlight(target, QBrush(self._theme.highlight_to))

    def _add_highlight(self, pos: Position, brush: QBrush) -> QGraphicsRectItem:
        """Create an overlay rectangle on a square."""
        t = self._tile
        rect = QGraphicsRectItem(pos.x * t, pos.y * t, t, t)
        rect.setBrush(brush)
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        self._highlight_items.append(rect)
        return rect

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
