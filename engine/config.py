"""
Game configuration for tic-tac-toe.
Scores, defaults, and the game modes offered by the menu.
"""

from enum import Enum
from typing import Optional, Tuple, Union

from .board import BOARD_SIZE, CELL_COUNT, Mark
from .errors import ConfigurationError


class PlayerKind(Enum):
    """The kinds of participant that can take a seat."""
    HUMAN = "human"
    RANDOM = "random"      # Uniformly random legal moves
    MEDIUM = "medium"      # Mix of random and minimax moves
    MINIMAX = "minimax"    # Full minimax, never loses


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the computer players.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = BOARD_SIZE
    CELL_COUNT = CELL_COUNT

    # X always moves first
    FIRST_MARK = Mark.X

    # ==================== SEARCH SETTINGS ====================
    # Terminal scores; wins and losses are adjusted by search depth
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== COMPUTER PLAYER SETTINGS ====================
    # Seed for the random number generator (None = fresh entropy)
    RANDOM_SEED: Optional[int] = None

    # Chance that the medium player picks the minimax move
    MEDIUM_OPTIMAL_RATE = 0.5

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_SYMBOL = " "

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False


class GameMode(Enum):
    """Menu choices, as (menu number, X kind, O kind)."""
    HUMAN_VS_HUMAN = (1, PlayerKind.HUMAN, PlayerKind.HUMAN)
    HUMAN_VS_MINIMAX = (2, PlayerKind.HUMAN, PlayerKind.MINIMAX)
    HUMAN_VS_RANDOM = (3, PlayerKind.HUMAN, PlayerKind.RANDOM)
    MINIMAX_VS_MINIMAX = (4, PlayerKind.MINIMAX, PlayerKind.MINIMAX)
    EXIT = (5, None, None)

    @property
    def choice(self) -> int:
        return self.value[0]

    @property
    def players(self) -> Tuple[Optional[PlayerKind], Optional[PlayerKind]]:
        """(X kind, O kind) for this mode."""
        return self.value[1], self.value[2]

    @property
    def label(self) -> str:
        labels = {
            GameMode.HUMAN_VS_HUMAN: "Human vs. Human",
            GameMode.HUMAN_VS_MINIMAX: "Human vs. Computer (Minimax)",
            GameMode.HUMAN_VS_RANDOM: "Human vs. Computer (Random)",
            GameMode.MINIMAX_VS_MINIMAX: "Computer (Minimax) vs. Computer (Minimax)",
            GameMode.EXIT: "Exit Program",
        }
        return labels[self]


def parse_game_mode(choice: Union[int, str]) -> GameMode:
    """
    Turn a menu choice into a GameMode.

    Args:
        choice: Menu number, as an int or the text the user typed.

    Returns:
        The matching GameMode.

    Raises:
        ConfigurationError: If the choice is not one of the menu numbers.
    """
    try:
        number = int(str(choice).strip())
    except ValueError:
        raise ConfigurationError(f"Invalid choice: {choice!r}") from None

    for mode in GameMode:
        if mode.choice == number:
            return mode

    raise ConfigurationError(f"Invalid choice: {choice!r}")


def parse_player_kind(name: Union[str, PlayerKind]) -> PlayerKind:
    """Look up a PlayerKind by name, e.g. "minimax"."""
    if isinstance(name, PlayerKind):
        return name
    try:
        return PlayerKind(str(name).strip().lower())
    except ValueError:
        valid = ", ".join(kind.value for kind in PlayerKind)
        raise ConfigurationError(f"Unknown player kind {name!r} (expected one of: {valid})") from None
