"""
Exceptions raised by the tic-tac-toe engine.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class IllegalMove(TicTacToeError):
    """
    A move targeted an occupied cell or an index outside 0-8.

    The board the move was attempted on is left unchanged.
    """

    def __init__(self, index, reason: Optional[str] = None):
        self.index = index
        self.reason = reason or "illegal move"
        super().__init__(f"Illegal move at index {index!r}: {self.reason}")


class SearchOnFullBoard(TicTacToeError):
    """A move was requested for a board with no empty cells."""

    def __init__(self, message: str = "No empty cells left on the board"):
        super().__init__(message)


class MatchOver(TicTacToeError):
    """A turn was requested after the match already finished."""


class ConfigurationError(TicTacToeError):
    """Invalid game mode, player kind, or player/mark assignment."""
