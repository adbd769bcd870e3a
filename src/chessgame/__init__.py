"""Two-player chess with move legality, check detection and undo."""

__version__ = "0.1.0"
