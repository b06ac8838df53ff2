# src/connectfour/errors.py

from __future__ import annotations


class ConnectFourError(Exception):
    """Base class for recoverable game errors."""


class ColumnFullError(ConnectFourError, ValueError):
    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column + 1} is full.")
        self.column = column


class GameOverError(ConnectFourError, RuntimeError):
    def __init__(self, message: str = "Game is over. No more moves.") -> None:
        super().__init__(message)
