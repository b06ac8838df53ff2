from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from connectfour.core.board import Board
from connectfour.types import CellState, Coord, Player


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    PLAYER1_WON = "player1_won"
    PLAYER2_WON = "player2_won"
    TIED = "tied"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS

    @classmethod
    def won_by(cls, player: Player) -> "GameStatus":
        return cls.PLAYER1_WON if player == CellState.PLAYER1 else cls.PLAYER2_WON


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player = CellState.PLAYER1
    status: GameStatus = GameStatus.IN_PROGRESS
    winning_line: Optional[Tuple[Coord, ...]] = None
