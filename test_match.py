"""
Tests for the match controller.
"""

import numpy as np
import pytest

from engine.board import Board, Mark
from engine.errors import ConfigurationError, IllegalMove, MatchOver
from engine.match import Match, MoveRecord
from engine.players import MinimaxPlayer, RandomPlayer
from engine.win_checker import MatchStatus


class ScriptedPlayer:
    """Plays a fixed list of cells, recording the boards it was shown."""

    def __init__(self, mark, moves):
        self.mark = mark
        self.moves = list(moves)
        self.boards = []

    def select_move(self, board):
        self.boards.append(board)
        return self.moves.pop(0)


def test_players_alternate_starting_with_x():
    x = ScriptedPlayer(Mark.X, [4, 0, 8])
    o = ScriptedPlayer(Mark.O, [1, 2])
    match = Match(x, o)

    assert match.current_mark == Mark.X
    assert match.play_turn() == MoveRecord(Mark.X, 4, 0)
    assert match.current_mark == Mark.O
    assert match.play_turn() == MoveRecord(Mark.O, 1, 1)
    assert match.current_player is x


def test_x_wins():
    x = ScriptedPlayer(Mark.X, [0, 4, 8])
    o = ScriptedPlayer(Mark.O, [1, 2])
    match = Match(x, o)

    result = match.play()

    assert result.status == MatchStatus.X_WON
    assert result.winner == Mark.X
    assert result.line == (0, 4, 8)
    assert [record.index for record in match.history] == [0, 1, 4, 2, 8]
    assert match.is_over()


def test_draw():
    # X O X / X O O / O X X
    x = ScriptedPlayer(Mark.X, [0, 2, 3, 7, 8])
    o = ScriptedPlayer(Mark.O, [1, 4, 5, 6])
    result = Match(x, o).play()
    assert result.status == MatchStatus.DRAW
    assert result.winner is None


def test_players_get_a_copy_of_the_board():
    x = ScriptedPlayer(Mark.X, [4])
    o = ScriptedPlayer(Mark.O, [0])
    match = Match(x, o)
    match.play_turn()

    shown = x.boards[0]
    assert shown is not match.board
    assert shown.is_empty_cell(4)
    assert not match.board.is_empty_cell(4)


def test_illegal_move_from_player_propagates():
    x = ScriptedPlayer(Mark.X, [4])
    o = ScriptedPlayer(Mark.O, [4])
    match = Match(x, o)
    match.play_turn()
    before = match.board.copy()

    with pytest.raises(IllegalMove):
        match.play_turn()

    assert match.board == before
    assert len(match.history) == 1


def test_turn_after_game_over_raises():
    board = Board.from_string("XXX/OO_/___")
    match = Match(ScriptedPlayer(Mark.X, []), ScriptedPlayer(Mark.O, [5]), board=board)
    assert match.is_over()
    with pytest.raises(MatchOver):
        match.play_turn()


def test_starting_position_decides_who_moves():
    board = Board.from_string("X________")
    match = Match(ScriptedPlayer(Mark.X, []), ScriptedPlayer(Mark.O, [4]), board=board)
    assert match.current_mark == Mark.O


def test_players_must_have_matching_marks():
    with pytest.raises(ConfigurationError):
        Match(ScriptedPlayer(Mark.O, []), ScriptedPlayer(Mark.X, []))


def test_on_turn_callback():
    seen = []
    x = ScriptedPlayer(Mark.X, [0, 1, 2])
    o = ScriptedPlayer(Mark.O, [3, 4])
    Match(x, o).play(on_turn=lambda match, record: seen.append(record.index))
    assert seen == [0, 3, 1, 4, 2]


def test_minimax_against_itself_draws():
    match = Match(MinimaxPlayer(Mark.X), MinimaxPlayer(Mark.O))
    result = match.play()
    assert result.status == MatchStatus.DRAW
    assert len(match.history) == 9


def test_minimax_never_loses_to_random_as_o():
    for seed in range(4):
        match = Match(RandomPlayer(Mark.X, rng=np.random.default_rng(seed)), MinimaxPlayer(Mark.O))
        result = match.play()
        assert result.winner != Mark.X
