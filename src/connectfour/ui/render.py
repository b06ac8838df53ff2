from __future__ import annotations
from typing import Optional, Iterable, Set

from connectfour import config
from connectfour.game.controller import GameController
from connectfour.types import CellState, Coord
from connectfour.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_GREEN, FG_RED, FG_YELLOW, REVERSE

PIECES = {
    CellState.EMPTY: ("·", FG_GRAY),
    CellState.PLAYER1: ("X", FG_RED),
    CellState.PLAYER2: ("O", FG_YELLOW),
}


def _piece(cell: CellState, highlighted: bool = False) -> str:
    ch, color = PIECES[cell]
    if not highlighted:
        return c(ch, color)
    if not config.USE_COLOR:
        return "*"
    return c(ch, REVERSE, BOLD, FG_GREEN)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(game: GameController, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()
    open_cols = set(game.valid_moves())

    nums = " ".join(
        str(i + 1) if i in open_cols else c(str(i + 1), FG_GRAY)
        for i in range(game.cols)
    )
    lines = ["   " + nums]

    for r in range(game.rows):
        parts = [_piece(game.cell_state(r, col), (r, col) in hl) for col in range(game.cols)]
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(c("   " + "—" * (2 * game.cols - 1), DIM))
    return lines


def render(game: GameController, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    if highlight is None:
        highlight = game.winning_line

    print(c("CONNECT 4", BOLD))
    print(c(status or game.current_status_message(), FG_CYAN))

    for line in board_lines(game, highlight):
        print(line)

    if not game.is_over:
        print(c(f"   Enter 1-{game.cols} to drop. Enter q to quit.", DIM))
