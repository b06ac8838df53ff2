"""Tests for GameController: turns, terminal states and rejected moves."""

import pytest

from connectfour.errors import ColumnFullError, ConnectFourError, GameOverError
from connectfour.game.controller import GameController
from connectfour.game.state import GameStatus
from connectfour.types import CellState

P1 = CellState.PLAYER1
P2 = CellState.PLAYER2

# Pairs a column whose bottom token is Player 2's with one starting with
# Player 1 so the turn order lines up; the finished board has no four in a row.
TIE_MOVES = (
    [0, 2, 2, 2, 2, 2, 2, 0, 0, 0, 0, 0]
    + [1, 3, 3, 3, 3, 3, 3, 1, 1, 1, 1, 1]
    + [4, 6, 6, 6, 6, 6, 6, 4, 4, 4, 4, 4]
    + [5] * 6
)


def play(game, moves):
    result = None
    for col in moves:
        result = game.apply_move(col)
    return result


def snapshot(game):
    return [[game.cell_state(r, c) for c in range(game.cols)] for r in range(game.rows)]


class TestInitialState:

    def test_defaults(self):
        game = GameController()
        assert game.rows == 6
        assert game.cols == 7
        assert game.current_player == P1
        assert game.status is GameStatus.IN_PROGRESS
        assert not game.is_over
        assert game.winning_line is None
        assert game.current_status_message() == "Player 1's turn..."

    def test_custom_size(self):
        game = GameController(rows=4, cols=5)
        assert (game.rows, game.cols) == (4, 5)
        assert game.valid_moves() == [0, 1, 2, 3, 4]

    def test_controllers_are_independent(self):
        a = GameController()
        b = GameController()
        a.apply_move(0)
        assert b.cell_state(5, 0) == CellState.EMPTY
        assert b.current_player == P1


class TestTurnOrder:

    def test_strict_alternation(self):
        game = GameController()
        expected = [P1, P2, P1, P2, P1]
        for col, player in zip([0, 1, 2, 3, 4], expected):
            assert game.current_player == player
            result = game.apply_move(col)
            assert result.player == player
            assert result.next_player == (P2 if player == P1 else P1)
            assert game.cell_state(result.row, col) == player

    def test_status_message_follows_turn(self):
        game = GameController()
        game.apply_move(3)
        assert game.current_status_message() == "Player 2's turn..."
        game.apply_move(3)
        assert game.current_status_message() == "Player 1's turn..."

    def test_move_result_fields(self):
        game = GameController()
        result = game.apply_move(2)
        assert result.row == 5
        assert result.col == 2
        assert result.status is GameStatus.IN_PROGRESS
        assert not result.is_terminal
        assert result.winning_line is None


class TestRejectedMoves:

    def test_full_column_keeps_turn_and_board(self):
        game = GameController()
        play(game, [0] * 6)
        before = snapshot(game)

        with pytest.raises(ColumnFullError):
            game.apply_move(0)

        assert snapshot(game) == before
        assert game.current_player == P1
        assert 0 not in game.valid_moves()

    def test_out_of_range_column(self):
        game = GameController()
        with pytest.raises(ValueError):
            game.apply_move(7)
        assert game.current_player == P1

    def test_errors_share_a_base_class(self):
        assert issubclass(ColumnFullError, ConnectFourError)
        assert issubclass(GameOverError, ConnectFourError)


class TestWin:

    def test_vertical_win_in_column_zero(self):
        """Player 1 stacks column 0 while Player 2 plays column 6."""
        game = GameController()
        result = play(game, [0, 6, 0, 6, 0, 6, 0])

        assert result.status is GameStatus.PLAYER1_WON
        assert result.is_terminal
        assert result.winning_line == ((5, 0), (4, 0), (3, 0), (2, 0))
        assert game.winning_line == result.winning_line
        assert game.current_status_message() == "Player 1 Wins!!!"
        assert game.current_player == P1

    def test_horizontal_win_for_player_two(self):
        game = GameController()
        result = play(game, [6, 0, 6, 1, 5, 2, 5, 3])
        assert result.status is GameStatus.PLAYER2_WON
        assert result.player == P2
        assert result.winning_line == ((5, 0), (5, 1), (5, 2), (5, 3))
        assert game.current_status_message() == "Player 2 Wins!!!"

    def test_diagonal_win(self):
        game = GameController()
        # P1 builds (5,0) (4,1) (3,2) (2,3)
        result = play(game, [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3])
        assert result.status is GameStatus.PLAYER1_WON
        assert sorted(result.winning_line) == [(2, 3), (3, 2), (4, 1), (5, 0)]

    def test_win_on_last_cell_is_not_a_tie(self):
        game = GameController(rows=1, cols=7)
        result = play(game, [0, 4, 1, 5, 2, 6, 3])
        assert game.board.is_full()
        assert result.status is GameStatus.PLAYER1_WON

    def test_no_moves_after_win(self):
        game = GameController()
        play(game, [0, 6, 0, 6, 0, 6, 0])
        before = snapshot(game)

        with pytest.raises(GameOverError):
            game.apply_move(3)

        assert snapshot(game) == before
        assert game.status is GameStatus.PLAYER1_WON
        assert game.valid_moves() == []


class TestTie:

    def test_full_board_without_line_ties(self):
        game = GameController()
        results = [game.apply_move(col) for col in TIE_MOVES]

        assert len(TIE_MOVES) == 42
        assert all(r.status is GameStatus.IN_PROGRESS for r in results[:-1])
        assert results[-1].status is GameStatus.TIED
        assert results[-1].winning_line is None
        assert game.current_status_message() == "Tie Game"

    def test_tie_board_pattern(self):
        game = GameController()
        play(game, TIE_MOVES)
        for r in range(6):
            height = 5 - r
            for c in range(7):
                expected = P1 if (height + c // 2) % 2 == 0 else P2
                assert game.cell_state(r, c) == expected

    def test_no_moves_after_tie(self):
        game = GameController()
        play(game, TIE_MOVES)
        with pytest.raises(GameOverError):
            game.apply_move(0)
        assert game.status is GameStatus.TIED
