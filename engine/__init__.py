"""
Tic-tac-toe engine.
Handles the board, rules, minimax search, and the players.
"""

__version__ = "1.0.0"

from .errors import (
    TicTacToeError,
    IllegalMove,
    SearchOnFullBoard,
    MatchOver,
    ConfigurationError,
)
from .board import Board, Mark, WINNING_LINES, index_to_row_col, row_col_to_index
from .config import GameConfig, GameMode, PlayerKind, parse_game_mode, parse_player_kind
from .win_checker import WinChecker, GameResult, MatchStatus
from .move_validator import MoveValidator, ValidationResult
from .search import MinimaxSearch, SearchResult, best_move, minimax
from .players import HumanPlayer, RandomPlayer, MinimaxPlayer, MixedPlayer, create_player
from .match import Match, MoveRecord
