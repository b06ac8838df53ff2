from __future__ import annotations
from typing import Callable, Optional

from connectfour.game.controller import GameController
from connectfour.game.state import GameStatus
from connectfour.ui.prompts import parse_move
from connectfour.ui.render import render


def run_game(game: GameController, read: Callable[[str], str] = input) -> Optional[GameStatus]:
    """
    Hot-seat loop: render, read a column, apply it. Returns the final status,
    or None if a player quit (q or end of input).
    """
    status = ""

    while not game.is_over:
        render(game, status)
        player = int(game.current_player)

        try:
            raw = read(f"Player {player} move: ")
        except EOFError:
            raw = "q"

        try:
            move = parse_move(raw, game.cols, game.valid_moves())
            if move is None:
                render(game, "Game quit.")
                return None

            result = game.apply_move(move)
            status = "" if result.is_terminal else f"Player {player} chose {int(move) + 1}. {game.current_status_message()}"

        except ValueError as e:
            status = str(e)

    render(game)
    return game.status
