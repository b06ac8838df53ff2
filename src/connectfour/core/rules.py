from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from connectfour.config import CONNECT_N
from connectfour.core.board import Board
from connectfour.types import CellState, Coord, Player


@dataclass(frozen=True, slots=True)
class NoWinner:
    pass


@dataclass(frozen=True, slots=True)
class Win:
    player: Player
    line: Tuple[Coord, ...]


Outcome = Union[NoWinner, Win]

NO_WINNER = NoWinner()


def _run(board: Board, r: int, c: int, dr: int, dc: int, n: int) -> Optional[Win]:
    g = board.grid
    p = g[r][c]
    if p == CellState.EMPTY:
        return None
    if all(g[r + i * dr][c + i * dc] == p for i in range(1, n)):
        return Win(p, tuple((r + i * dr, c + i * dc) for i in range(n)))
    return None


def evaluate(board: Board, n: int = CONNECT_N) -> Outcome:
    """
    Scan every start position in the four orientations and return the first
    line of n same-player tokens, or NO_WINNER.
    """
    rows, cols = board.rows, board.cols

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            w = _run(board, r, c, 0, 1, n)
            if w is not None:
                return w

    # Vertical, listed bottom-up
    for r in range(rows - 1, n - 2, -1):
        for c in range(cols):
            w = _run(board, r, c, -1, 0, n)
            if w is not None:
                return w

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            w = _run(board, r, c, 1, 1, n)
            if w is not None:
                return w

    # Diagonal up-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            w = _run(board, r, c, -1, 1, n)
            if w is not None:
                return w

    return NO_WINNER


def winner(board: Board) -> Optional[Player]:
    res = evaluate(board)
    return res.player if isinstance(res, Win) else None


def is_tie(board: Board) -> bool:
    return board.is_full() and winner(board) is None
