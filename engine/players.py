"""
Move policies for tic-tac-toe.
Each player picks a cell for its mark; the match controller applies it.
"""

from typing import Callable, Optional

import numpy as np

from .board import Board, Mark
from .config import GameConfig, PlayerKind, parse_player_kind
from .errors import ConfigurationError, SearchOnFullBoard
from .search import SearchResult, best_move

# Input collaborator: given the board and the mark to play, returns a cell index
MoveReader = Callable[[Board, Mark], int]


def _make_rng(rng: Optional[np.random.Generator], seed: Optional[int]) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(GameConfig.RANDOM_SEED if seed is None else seed)


def _random_empty_cell(board: Board, rng: np.random.Generator) -> int:
    empty_cells = board.empty_cells()
    if not empty_cells:
        raise SearchOnFullBoard("No empty cell to play")
    return int(empty_cells[rng.integers(len(empty_cells))])


class HumanPlayer:
    """
    A player whose moves come from outside, usually the keyboard.

    The reader is asked again until it returns an empty cell.
    """

    kind = PlayerKind.HUMAN

    def __init__(
        self,
        mark: Mark,
        read_move: MoveReader,
        on_invalid: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the human player.

        Args:
            mark: The mark this player places.
            read_move: Returns the chosen cell index for a board.
            on_invalid: Called with a message when the reader returns an
                unplayable cell.
        """
        self.mark = mark
        self.read_move = read_move
        self.on_invalid = on_invalid

    def select_move(self, board: Board) -> int:
        if board.is_full():
            raise SearchOnFullBoard("No empty cell to play")

        while True:
            index = self.read_move(board, self.mark)
            if board.is_empty_cell(index):
                return int(index)
            if self.on_invalid is not None:
                self.on_invalid(f"Cell {index!r} is not available. Try again.")


class RandomPlayer:
    """
    A computer player that picks a uniformly random empty cell.
    """

    kind = PlayerKind.RANDOM

    def __init__(
        self,
        mark: Mark,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the random player.

        Args:
            mark: The mark this player places.
            rng: Random generator to draw from. Inject one for repeatable games.
            seed: Seed for a new generator when ``rng`` is not given.
        """
        self.mark = mark
        self.rng = _make_rng(rng, seed)

    def select_move(self, board: Board) -> int:
        return _random_empty_cell(board, self.rng)


class MinimaxPlayer:
    """
    A computer player that plays the minimax move.

    The player will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    kind = PlayerKind.MINIMAX

    def __init__(self, mark: Mark, verbose: bool = GameConfig.DEBUG_MODE):
        """
        Initialize the minimax player.

        Args:
            mark: The mark this player optimizes for.
            verbose: Print search statistics after every move.
        """
        self.mark = mark
        self.verbose = verbose
        self.last_result: Optional[SearchResult] = None

    def select_move(self, board: Board) -> int:
        """
        Get the best move for the board.

        Raises:
            SearchOnFullBoard: If the board has no empty cells.
        """
        result = best_move(board, self.mark)
        self.last_result = result

        if self.verbose:
            print(
                f"{self.mark.symbol} evaluated {result.positions_evaluated} positions. "
                f"Best move: {result.move} (score: {result.score})"
            )

        return result.move


class MixedPlayer:
    """
    A computer player that is sometimes optimal, sometimes random.
    """

    kind = PlayerKind.MEDIUM

    def __init__(
        self,
        mark: Mark,
        rng: Optional[np.random.Generator] = None,
        optimal_rate: float = GameConfig.MEDIUM_OPTIMAL_RATE,
        seed: Optional[int] = None
    ):
        """
        Initialize the mixed player.

        Args:
            mark: The mark this player places.
            rng: Random generator used for both the coin flip and random moves.
            optimal_rate: Chance (0-1) of playing the minimax move.
            seed: Seed for a new generator when ``rng`` is not given.
        """
        if not 0.0 <= optimal_rate <= 1.0:
            raise ConfigurationError(f"optimal_rate must be between 0 and 1, got {optimal_rate}")

        self.mark = mark
        self.rng = _make_rng(rng, seed)
        self.optimal_rate = optimal_rate

    def select_move(self, board: Board) -> int:
        if self.rng.random() < self.optimal_rate:
            return best_move(board, self.mark).move
        return _random_empty_cell(board, self.rng)


def create_player(
    kind,
    mark: Mark,
    read_move: Optional[MoveReader] = None,
    on_invalid: Optional[Callable[[str], None]] = None,
    rng: Optional[np.random.Generator] = None,
    verbose: bool = GameConfig.DEBUG_MODE
):
    """
    Build a player of the given kind.

    Args:
        kind: PlayerKind or its name ("human", "random", "medium", "minimax").
        mark: The mark the player places.
        read_move: Input collaborator, required for human players.
        on_invalid: Message callback for human players.
        rng: Random generator for random and medium players.
        verbose: Print search statistics (minimax players).

    Returns:
        A player with ``mark`` and ``select_move(board)``.

    Raises:
        ConfigurationError: For unknown kinds or a human without a reader.
    """
    kind = parse_player_kind(kind)

    if kind == PlayerKind.HUMAN:
        if read_move is None:
            raise ConfigurationError("A human player needs a move reader")
        return HumanPlayer(mark, read_move, on_invalid)
    if kind == PlayerKind.RANDOM:
        return RandomPlayer(mark, rng=rng)
    if kind == PlayerKind.MEDIUM:
        return MixedPlayer(mark, rng=rng)
    return MinimaxPlayer(mark, verbose=verbose)
