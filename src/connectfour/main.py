from __future__ import annotations

import argparse
import logging

from connectfour import config
from connectfour.game.controller import GameController
from connectfour.ui.terminal import run_game

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect-four", description="Two-player Connect Four in the terminal.")
    ap.add_argument("--rows", type=int, default=config.ROWS, help="Number of board rows")
    ap.add_argument("--cols", type=int, default=config.COLS, help="Number of board columns")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Don't clear the screen between moves")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="[%(asctime)s] %(levelname)s: %(message)s")

    if args.rows < 1 or args.cols < 1:
        ap.error("--rows and --cols must be at least 1")

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    logger.info("Starting %dx%d game", args.rows, args.cols)
    game = GameController(rows=args.rows, cols=args.cols)

    try:
        run_game(game)
    except KeyboardInterrupt:
        print()
        return 130

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
