"""
Match controller for tic-tac-toe.
Alternates two players on one board until the game is decided.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from .board import Board, Mark
from .config import GameConfig
from .errors import ConfigurationError, MatchOver
from .win_checker import GameResult, WinChecker


@dataclass(frozen=True)
class MoveRecord:
    """
    A move in the game.
    """
    mark: Mark      # Who made the move
    index: int      # Cell index (0-8)
    ply: int        # Which move this is, counting from 0


class Match:
    """
    Runs one game between two players.

    Game flow:
    1. X's player picks a cell on a copy of the board
    2. The move is applied to the match board
    3. Turn passes to O, and so on
    4. Stop when someone wins or the board is full

    A player returning an illegal cell is a bug in that player, so the
    IllegalMove from the board is not caught here.
    """

    def __init__(self, x_player, o_player, board: Optional[Board] = None):
        """
        Set up a match.

        Args:
            x_player: Player placing X. Moves first on an empty board.
            o_player: Player placing O.
            board: Starting board. Defaults to an empty board.
        """
        if x_player.mark != Mark.X or o_player.mark != Mark.O:
            raise ConfigurationError(
                f"Players must play X then O, got {x_player.mark.symbol} and {o_player.mark.symbol}"
            )

        self.players = {Mark.X: x_player, Mark.O: o_player}
        self.board = board if board is not None else Board()
        self.win_checker = WinChecker()
        self.history: List[MoveRecord] = []

        # On a board that is already in progress, the side with fewer marks moves
        if self.board.count(Mark.X) > self.board.count(Mark.O):
            self.current_mark = Mark.O
        else:
            self.current_mark = GameConfig.FIRST_MARK

    @property
    def current_player(self):
        return self.players[self.current_mark]

    def status(self) -> GameResult:
        """Evaluate the match board."""
        return self.win_checker.evaluate(self.board)

    def is_over(self) -> bool:
        return self.win_checker.is_terminal(self.board)

    def play_turn(self) -> MoveRecord:
        """
        Play a single ply.

        Returns:
            The move that was made.

        Raises:
            MatchOver: If the game is already decided.
            IllegalMove: If the player picked an unplayable cell.
        """
        if self.is_over():
            raise MatchOver("The match is already over")

        mark = self.current_mark
        index = self.current_player.select_move(self.board.copy())
        self.board.apply(index, mark)

        record = MoveRecord(mark=mark, index=int(index), ply=len(self.history))
        self.history.append(record)

        self.current_mark = mark.opposite()
        return record

    def play(
        self,
        on_turn: Optional[Callable[["Match", MoveRecord], None]] = None
    ) -> GameResult:
        """
        Play until the game is decided.

        Args:
            on_turn: Called after every move with the match and the move.

        Returns:
            The final GameResult.
        """
        while not self.is_over():
            record = self.play_turn()
            if on_turn is not None:
                on_turn(self, record)

        return self.status()
