"""User-configurable presentation settings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from chessgame.ui.theme import THEME_NAMES

_LOGGER = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

ENV_THEME = "CHESSGAME_THEME"
ENV_SHOW_COORDINATES = "CHESSGAME_SHOW_COORDINATES"
ENV_SHOW_LEGAL_MOVES = "CHESSGAME_SHOW_LEGAL_MOVES"
ENV_TILE_SIZE = "CHESSGAME_TILE_SIZE"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    tile_size: int = 80  # px per square

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> AppSettings:
        """Build settings from ``CHESSGAME_*`` variables.

        Bad values are logged and replaced by the defaults.
        """
        settings = cls()

        theme = environ.get(ENV_THEME)
        if theme is not None:
            if theme in THEME_NAMES:
                settings.board_theme = theme
            else:
                _LOGGER.warning(
                    "Unknown board theme %r, using %s", theme, settings.board_theme
                )

        settings.show_coordinates = _parse_bool(
            environ, ENV_SHOW_COORDINATES, settings.show_coordinates
        )
        settings.show_legal_moves = _parse_bool(
            environ, ENV_SHOW_LEGAL_MOVES, settings.show_legal_moves
        )

        raw_tile = environ.get(ENV_TILE_SIZE)
        if raw_tile is not None:
            try:
                tile = int(raw_tile)
            except ValueError:
                tile = 0
            if tile >= 16:
                settings.tile_size = tile
            else:
                _LOGGER.warning(
                    "Invalid %s=%r, using %d", ENV_TILE_SIZE, raw_tile, settings.tile_size
                )

        return settings


def _parse_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = environ.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    _LOGGER.warning("Invalid %s=%r, using %s", key, raw, default)
    return default
