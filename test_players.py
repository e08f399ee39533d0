"""
Tests for the move policies.
"""

import numpy as np
import pytest

from engine.board import Board, Mark
from engine.config import PlayerKind
from engine.errors import ConfigurationError, SearchOnFullBoard
from engine.players import HumanPlayer, MinimaxPlayer, MixedPlayer, RandomPlayer, create_player


def test_random_player_with_one_empty_cell():
    board = Board.from_string("XOX/OXO/_OX")
    player = RandomPlayer(Mark.X, rng=np.random.default_rng(0))
    for _ in range(1000):
        assert player.select_move(board) == 6


def test_random_player_only_picks_empty_cells():
    board = Board.from_string("X_O/_X_/O__")
    player = RandomPlayer(Mark.X, rng=np.random.default_rng(1))
    picks = {player.select_move(board) for _ in range(300)}
    assert picks == set(board.empty_cells())


def test_random_player_is_repeatable_with_seed():
    board = Board()
    a = RandomPlayer(Mark.X, rng=np.random.default_rng(42))
    b = RandomPlayer(Mark.X, seed=42)
    assert [a.select_move(board) for _ in range(20)] == [b.select_move(board) for _ in range(20)]


def test_random_player_on_full_board_raises():
    with pytest.raises(SearchOnFullBoard):
        RandomPlayer(Mark.O).select_move(Board.from_string("XOX/XOO/OXX"))


def test_minimax_player_blocks():
    player = MinimaxPlayer(Mark.O)
    board = Board.from_string("XX_/OO_/___")
    assert player.select_move(board) == 5
    assert player.last_result.score == 10


def test_minimax_player_does_not_touch_board():
    board = Board.from_string("X________")
    MinimaxPlayer(Mark.O).select_move(board)
    assert board == Board.from_string("X________")


def test_minimax_player_verbose_prints(capsys):
    MinimaxPlayer(Mark.O, verbose=True).select_move(Board.from_string("OO_/OXX/_XX"))
    out = capsys.readouterr().out
    assert "evaluated 2 positions" in out
    assert "Best move: 2" in out


def test_minimax_player_on_full_board_raises():
    with pytest.raises(SearchOnFullBoard):
        MinimaxPlayer(Mark.X).select_move(Board.from_string("XOX/XOO/OXX"))


def test_human_player_asks_again_on_bad_cells():
    answers = iter([4, 9, -1, 2])
    messages = []
    player = HumanPlayer(Mark.O, lambda board, mark: next(answers), on_invalid=messages.append)

    board = Board.from_string("____X____")
    assert player.select_move(board) == 2
    assert len(messages) == 3


def test_human_player_passes_mark_to_reader():
    seen = []

    def reader(board, mark):
        seen.append(mark)
        return 0

    HumanPlayer(Mark.X, reader).select_move(Board())
    assert seen == [Mark.X]


def test_mixed_player_extremes():
    board = Board.from_string("XX_/OO_/___")
    optimal = MixedPlayer(Mark.O, rng=np.random.default_rng(3), optimal_rate=1.0)
    assert all(optimal.select_move(board) == 5 for _ in range(5))

    random_only = MixedPlayer(Mark.O, rng=np.random.default_rng(3), optimal_rate=0.0)
    picks = {random_only.select_move(board) for _ in range(200)}
    assert picks == set(board.empty_cells())


def test_mixed_player_rejects_bad_rate():
    with pytest.raises(ConfigurationError):
        MixedPlayer(Mark.X, optimal_rate=1.5)


def test_create_player():
    rng = np.random.default_rng(0)
    assert isinstance(create_player("random", Mark.X, rng=rng), RandomPlayer)
    assert isinstance(create_player(PlayerKind.MINIMAX, Mark.O), MinimaxPlayer)
    assert isinstance(create_player("Medium", Mark.O, rng=rng), MixedPlayer)

    human = create_player("human", Mark.X, read_move=lambda board, mark: 0)
    assert isinstance(human, HumanPlayer)
    assert human.mark == Mark.X
    assert create_player("random", Mark.X, rng=rng).rng is rng


def test_create_player_errors():
    with pytest.raises(ConfigurationError):
        create_player("robot", Mark.X)
    with pytest.raises(ConfigurationError):
        create_player("human", Mark.X)
