"""
Minimax search for tic-tac-toe.
Explores every continuation of a board to find the optimal move.
"""

from dataclasses import dataclass

from .board import Board, Mark
from .config import GameConfig
from .errors import SearchOnFullBoard


@dataclass(frozen=True)
class SearchResult:
    """Best move found by the search and its score."""
    move: int                     # Cell index (0-8)
    score: int                    # Between -WIN_SCORE and WIN_SCORE
    positions_evaluated: int = 0  # Number of minimax calls made


class MinimaxSearch:
    """
    Exhaustive minimax search for one mark.

    Scores are from the point of view of ``mark``: a win is worth
    ``WIN_SCORE - depth`` and a loss ``depth - WIN_SCORE``, so faster
    wins and slower losses are preferred. There is no pruning; the
    whole tree below the given board is searched.
    """

    def __init__(self, mark: Mark):
        """
        Initialize the search.

        Args:
            mark: The mark to optimize for.
        """
        self.mark = mark
        self.opponent = mark.opposite()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def best_move(self, board: Board) -> SearchResult:
        """
        Get the best move for ``self.mark`` on the given board.

        The board is never modified; every candidate is tried on a copy.
        Ties go to the lowest cell index.

        Args:
            board: Current board.

        Returns:
            SearchResult with the chosen cell index and its score.

        Raises:
            SearchOnFullBoard: If there are no empty cells.
        """
        self.positions_evaluated = 0

        valid_moves = board.empty_cells()
        if not valid_moves:
            raise SearchOnFullBoard("Cannot search a board with no empty cells")

        best_score = None
        best_move = valid_moves[0]

        for index in valid_moves:
            new_board = board.with_move(index, self.mark)
            score = self.minimax(new_board, depth=0, is_maximizing=False)

            if best_score is None or score > best_score:
                best_score = score
                best_move = index

        return SearchResult(
            move=best_move,
            score=best_score,
            positions_evaluated=self.positions_evaluated,
        )

    def minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Score a board by searching all continuations.

        Args:
            board: Board to evaluate. Not modified.
            depth: Plies played since the root move.
            is_maximizing: True if ``self.mark`` moves next.

        Returns:
            The score of the position for ``self.mark``.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if board.has_won(self.mark):
            return GameConfig.WIN_SCORE - depth
        if board.has_won(self.opponent):
            return depth - GameConfig.WIN_SCORE
        if board.is_full():
            return GameConfig.DRAW_SCORE

        if is_maximizing:
            max_score = -GameConfig.WIN_SCORE - 1
            for index in board.empty_cells():
                new_board = board.with_move(index, self.mark)
                max_score = max(max_score, self.minimax(new_board, depth + 1, False))
            return max_score
        else:
            min_score = GameConfig.WIN_SCORE + 1
            for index in board.empty_cells():
                new_board = board.with_move(index, self.opponent)
                min_score = min(min_score, self.minimax(new_board, depth + 1, True))
            return min_score


def best_move(board: Board, mark: Mark) -> SearchResult:
    """Find the optimal move for ``mark``. See MinimaxSearch.best_move."""
    return MinimaxSearch(mark).best_move(board)


def minimax(board: Board, depth: int, is_maximizing: bool, mark: Mark) -> int:
    """Score ``board`` for ``mark``. See MinimaxSearch.minimax."""
    return MinimaxSearch(mark).minimax(board, depth, is_maximizing)
