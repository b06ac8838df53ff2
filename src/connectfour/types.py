# src/connectfour/types.py

from __future__ import annotations
from enum import IntEnum
from typing import NewType, Tuple


class CellState(IntEnum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2


Player = CellState  # only PLAYER1 / PLAYER2 are valid players
Move = NewType("Move", int)   # column index 0..cols-1
Coord = Tuple[int, int]       # (row, col), row 0 is the top


def other(player: Player) -> Player:
    return CellState.PLAYER2 if player == CellState.PLAYER1 else CellState.PLAYER1
