from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from connectfour.game.state import GameState, GameStatus
from connectfour.types import Coord, Player


@dataclass(frozen=True, slots=True)
class MoveResult:
    row: int
    col: int
    player: Player              # who made the move
    status: GameStatus
    next_player: Player         # unchanged when the move ended the game
    winning_line: Optional[Tuple[Coord, ...]] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


def status_message(state: GameState) -> str:
    if state.status is GameStatus.PLAYER1_WON:
        return "Player 1 Wins!!!"
    if state.status is GameStatus.PLAYER2_WON:
        return "Player 2 Wins!!!"
    if state.status is GameStatus.TIED:
        return "Tie Game"
    return f"Player {int(state.current)}'s turn..."
