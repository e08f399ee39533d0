"""
Move validator for tic-tac-toe.
Validates moves typed in by a human before they reach the board.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import BOARD_SIZE, Board, row_col_to_index
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None   # Cell index, set when valid


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Row and column must be on the board
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move given as a 0-based row and column.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, error_message and index.
        """
        # Check if game is over
        if self.win_checker.is_terminal(board):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row + 1}, {col + 1}). Must be 1-{BOARD_SIZE}."
            )

        index = row_col_to_index(row, col)

        # Check if cell is empty
        if not board.is_empty_cell(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row + 1}, {col + 1}) is already occupied by {board[index].symbol}"
            )

        return ValidationResult(is_valid=True, index=index)

    def validate_text(self, board: Board, row_text: str, col_text: str) -> ValidationResult:
        """
        Validate a move typed as 1-based row and column numbers.

        Args:
            board: Current board.
            row_text: Row as typed by the user ("1"-"3").
            col_text: Column as typed by the user ("1"-"3").

        Returns:
            ValidationResult.
        """
        try:
            row = int(row_text.strip()) - 1
            col = int(col_text.strip()) - 1
        except (ValueError, AttributeError):
            return ValidationResult(
                is_valid=False,
                error_message=f"Please type numbers between 1 and {BOARD_SIZE}."
            )

        return self.validate_move(board, row, col)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves.

        Returns:
            Cell indices, empty if the game is over.
        """
        if self.win_checker.is_terminal(board):
            return []
        return board.empty_cells()
