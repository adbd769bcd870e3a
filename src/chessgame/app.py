"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from chessgame.ui.settings import AppSettings
from chessgame.ui.theme import THEME_NAMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chessgame", description="Two-player chess.")
    parser.add_argument("--theme", choices=sorted(THEME_NAMES), help="board colour scheme")
    parser.add_argument(
        "--no-coordinates",
        action="store_true",
        help="hide rank and file labels",
    )
    parser.add_argument(
        "--no-legal-moves",
        action="store_true",
        help="do not highlight the selected piece's legal targets",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    """Environment first, then command-line overrides."""
    settings = AppSettings.from_env(os.environ)
    if args.theme:
        settings.board_theme = args.theme
    if args.no_coordinates:
        settings.show_coordinates = False
    if args.no_legal_moves:
        settings.show_legal_moves = False
    return settings


def main(argv: list[str] | None = None) -> None:
    """Launch the chess window."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from chessgame.ui.bootstrap import run_application

    sys.exit(run_application(sys.argv[:1], settings_from_args(args)))


if __name__ == "__main__":
    main()
