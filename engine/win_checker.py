"""
Win checker for tic-tac-toe.
Checks if a mark has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import WINNING_LINES, Board, Mark


class MatchStatus(Enum):
    """Where a match stands."""
    IN_PROGRESS = "in_progress"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """Result of evaluating a board."""
    status: MatchStatus
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None   # Winning line, if any

    @property
    def is_over(self) -> bool:
        return self.status != MatchStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == MatchStatus.DRAW


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        for mark in (Mark.X, Mark.O):
            if board.has_won(mark):
                return mark
        return None

    def winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The three cell indices of the first complete line, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has won."""
        return board.is_full() and self.check_winner(board) is None

    def is_terminal(self, board: Board) -> bool:
        """True if the board is full or either mark has won."""
        return board.is_full() or self.check_winner(board) is not None

    def evaluate(self, board: Board) -> GameResult:
        """
        Work out the result of a board.

        Args:
            board: The board to evaluate.

        Returns:
            GameResult with status, winner and winning line.
        """
        winner = self.check_winner(board)

        if winner is not None:
            status = MatchStatus.X_WON if winner == Mark.X else MatchStatus.O_WON
            return GameResult(status=status, winner=winner, line=self.winning_line(board))
        if board.is_full():
            return GameResult(status=MatchStatus.DRAW)
        return GameResult(status=MatchStatus.IN_PROGRESS)
