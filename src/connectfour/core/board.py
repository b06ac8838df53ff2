# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from connectfour.config import ROWS, COLS
from connectfour.errors import ColumnFullError
from connectfour.types import CellState, Player, Move


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[CellState]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be at least 1x1.")
        if not self.grid:
            self.grid = [[CellState.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]
        elif len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError("Grid does not match board dimensions.")
        else:
            # CellState() rejects anything that is not 0, 1 or 2
            self.grid = [[CellState(v) for v in row] for row in self.grid]

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [row[:] for row in self.grid])

    def state_at(self, row: int, col: int) -> CellState:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside the board.")
        return self.grid[row][col]

    def is_column_full(self, col: Move) -> bool:
        c = self._check_col(col)
        return all(row[c] != CellState.EMPTY for row in self.grid)

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if not self.is_column_full(Move(c))]

    def is_full(self) -> bool:
        return all(cell != CellState.EMPTY for row in self.grid for cell in row)

    def drop_token(self, col: Move, player: Player) -> int:
        """
        Place player's token in the lowest empty row of col and return that row.
        Raises ColumnFullError (board untouched) if the column has no room.
        """
        c = self._check_col(col)
        if player == CellState.EMPTY:
            raise ValueError("Cannot drop an empty token.")

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] == CellState.EMPTY:
                self.grid[r][c] = CellState(player)
                return r

        raise ColumnFullError(c)

    def _check_col(self, col: Move) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        return c
