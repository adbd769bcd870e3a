"""Visual theme constants and QSS styles."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    selection: QColor  # outline around the selected piece
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    white_piece: QColor
    black_piece: QColor
    coord_on_light: QColor  # coordinate text on light squares
    coord_on_dark: QColor  # coordinate text on dark squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selection=QColor(0, 228, 48),  # green outline
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
            coord_on_light=QColor(181, 136, 99),
            coord_on_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            selection=QColor(0, 228, 48),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
            coord_on_light=QColor(140, 162, 173),
            coord_on_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            selection=QColor(255, 214, 0),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
            coord_on_light=QColor(112, 149, 120),
            coord_on_dark=QColor(236, 238, 220),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names give the default."""
        factory = THEME_NAMES.get(name)
        return factory() if factory is not None else cls.default()


THEME_NAMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Green": BoardTheme.green,
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #f5f5f5;
}

QLabel {
    color: #000000;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#statusLabel {
    color: #e62937;
    font-size: 20px;
    font-weight: bold;
}

QLabel#hintLabel {
    color: #505050;
}

QPushButton {
    background: #e0e0e0;
    color: #202020;
    border: 1px solid #b0b0b0;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #d0d0d0;
}
QPushButton:disabled {
    color: #909090;
}
"""
