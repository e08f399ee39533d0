"""
Tests for the win checker and the move validator.
"""

from engine.board import Board, Mark
from engine.move_validator import MoveValidator
from engine.win_checker import MatchStatus, WinChecker


def test_horizontal_win():
    checker = WinChecker()
    board = Board.from_string("XXX/O_O/___")
    assert checker.check_winner(board) == Mark.X
    assert checker.winning_line(board) == (0, 1, 2)


def test_vertical_win():
    checker = WinChecker()
    board = Board.from_string("OX_/OX_/O_X")
    result = checker.evaluate(board)
    assert result.status == MatchStatus.O_WON
    assert result.winner == Mark.O
    assert result.line == (0, 3, 6)
    assert result.is_over


def test_diagonal_win():
    checker = WinChecker()
    board = Board.from_string("XO_/_XO/__X")
    assert checker.check_winner(board) == Mark.X
    assert checker.winning_line(board) == (0, 4, 8)


def test_no_winner_in_progress():
    checker = WinChecker()
    board = Board.from_string("XO_/_O_/__X")
    result = checker.evaluate(board)
    assert result.status == MatchStatus.IN_PROGRESS
    assert result.winner is None
    assert not result.is_over
    assert not checker.is_terminal(board)


def test_draw():
    checker = WinChecker()
    board = Board.from_string("XOX/XOO/OXX")
    assert checker.check_draw(board)
    result = checker.evaluate(board)
    assert result.status == MatchStatus.DRAW
    assert result.is_draw
    assert result.line is None


def test_full_board_with_winner_is_not_a_draw():
    checker = WinChecker()
    board = Board.from_string("XOX/OXO/XOX")
    assert not checker.check_draw(board)
    assert checker.evaluate(board).status == MatchStatus.X_WON


def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(Board(), 1, 1)
    assert result.is_valid
    assert result.index == 4
    assert result.error_message is None


def test_validator_rejects_occupied_cell():
    board = Board.from_string("____X____")
    result = MoveValidator().validate_move(board, 1, 1)
    assert not result.is_valid
    assert "occupied" in result.error_message


def test_validator_rejects_out_of_range():
    result = MoveValidator().validate_move(Board(), 5, 5)
    assert not result.is_valid
    assert result.index is None


def test_validator_rejects_moves_after_game_over():
    board = Board.from_string("XXX/OO_/___")
    result = MoveValidator().validate_move(board, 1, 2)
    assert not result.is_valid
    assert "over" in result.error_message
    assert MoveValidator().get_valid_moves(board) == []


def test_validator_parses_text():
    validator = MoveValidator()
    assert validator.validate_text(Board(), " 3", "1 ").index == 6
    assert not validator.validate_text(Board(), "a", "1").is_valid
    assert not validator.validate_text(Board(), "0", "1").is_valid
    assert not validator.validate_text(Board(), "", "").is_valid


def test_valid_moves_are_empty_cells():
    board = Board.from_string("X___O____")
    assert MoveValidator().get_valid_moves(board) == [1, 2, 3, 5, 6, 7, 8]
