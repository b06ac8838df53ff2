from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from connectfour.config import ROWS, COLS
from connectfour.core.board import Board
from connectfour.core.rules import Win, evaluate
from connectfour.errors import GameOverError
from connectfour.game.results import MoveResult, status_message
from connectfour.game.state import GameState, GameStatus
from connectfour.types import CellState, Coord, Move, Player, other

logger = logging.getLogger(__name__)


class GameController:
    """
    Owns one game session: the board, whose turn it is and the game status.

    A front end calls apply_move(column) for each input and reads the board
    back through cell_state() and current_status_message(). Start a new game
    by building a new controller.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS) -> None:
        self.state = GameState(board=Board(rows, cols))

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def rows(self) -> int:
        return self.state.board.rows

    @property
    def cols(self) -> int:
        return self.state.board.cols

    @property
    def current_player(self) -> Player:
        return self.state.current

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def is_over(self) -> bool:
        return self.state.status.is_terminal

    @property
    def winning_line(self) -> Optional[Tuple[Coord, ...]]:
        return self.state.winning_line

    def cell_state(self, row: int, col: int) -> CellState:
        return self.state.board.state_at(row, col)

    def valid_moves(self) -> List[Move]:
        if self.is_over:
            return []
        return self.state.board.valid_moves()

    def current_status_message(self) -> str:
        return status_message(self.state)

    def apply_move(self, col: Move) -> MoveResult:
        state = self.state
        if state.status.is_terminal:
            raise GameOverError()

        player = state.current
        row = state.board.drop_token(col, player)
        logger.debug("Player %d dropped in column %d, row %d", int(player), int(col), row)

        outcome = evaluate(state.board)
        if isinstance(outcome, Win):
            state.status = GameStatus.won_by(outcome.player)
            state.winning_line = outcome.line
            logger.info("Player %d wins with %s", int(outcome.player), list(outcome.line))
        elif state.board.is_full():
            state.status = GameStatus.TIED
            logger.info("Board full, tie game")
        else:
            state.current = other(player)

        return MoveResult(
            row=row,
            col=int(col),
            player=player,
            status=state.status,
            next_player=state.current,
            winning_line=state.winning_line,
        )
