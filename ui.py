"""
Console UI for tic-tac-toe.

Shows:
- The game mode menu
- The board, with 1-based row and column numbers
- Prompts for human moves
- The final result
"""

from typing import Callable, List

from engine.board import BOARD_SIZE, Board, Mark, index_to_row_col
from engine.config import GameConfig, GameMode, parse_game_mode
from engine.match import Match, MoveRecord
from engine.move_validator import MoveValidator
from engine.win_checker import GameResult

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

PLAYER_NUMBERS = {Mark.X: 1, Mark.O: 2}


def render_board(board: Board) -> str:
    """
    Draw the board as text.

    Returns:
        A multi-line string, e.g.::

                1   2   3
              ┌───┬───┬───┐
            1 │ X │ O │   │
              ├───┼───┼───┤
            ...
    """
    grid = board.grid()
    header = "    " + "   ".join(str(col + 1) for col in range(BOARD_SIZE))
    top = "  ┌" + "┬".join(["───"] * BOARD_SIZE) + "┐"
    middle = "  ├" + "┼".join(["───"] * BOARD_SIZE) + "┤"
    bottom = "  └" + "┴".join(["───"] * BOARD_SIZE) + "┘"

    lines: List[str] = [header, top]
    for row in range(BOARD_SIZE):
        cells = [f" {grid[row, col] or GameConfig.EMPTY_SYMBOL} " for col in range(BOARD_SIZE)]
        lines.append(f"{row + 1} │" + "│".join(cells) + "│")
        if row < BOARD_SIZE - 1:
            lines.append(middle)
    lines.append(bottom)

    return "\n".join(lines)


def print_board(board: Board, output_fn: OutputFn = print):
    """Print the board to console."""
    output_fn("\n" + render_board(board) + "\n")


def print_menu(output_fn: OutputFn = print):
    """Print the game mode options."""
    output_fn("Choose your game mode.")
    for mode in GameMode:
        output_fn(f"({mode.choice}) {mode.label}")


def read_menu_choice(input_fn: InputFn = input) -> GameMode:
    """
    Read a menu choice.

    Raises:
        ConfigurationError: If the choice is not on the menu.
    """
    return parse_game_mode(input_fn("> "))


def read_human_move(
    board: Board,
    mark: Mark,
    input_fn: InputFn = input,
    output_fn: OutputFn = print
) -> int:
    """
    Ask a human for a move until a playable cell is given.

    Args:
        board: Current board.
        mark: The mark being played.
        input_fn: Reads one line of input.
        output_fn: Shows prompts and errors.

    Returns:
        The chosen cell index (0-8).
    """
    validator = MoveValidator()

    while True:
        row_text = input_fn(f"Player {PLAYER_NUMBERS[mark]} ({mark.symbol}) - Select a row (1-{BOARD_SIZE}): ")
        col_text = input_fn(f"Player {PLAYER_NUMBERS[mark]} ({mark.symbol}) - Select a column (1-{BOARD_SIZE}): ")

        result = validator.validate_text(board, row_text, col_text)
        if result.is_valid:
            return result.index

        output_fn(f"Invalid move. Try again. ({result.error_message})")


def make_move_reader(input_fn: InputFn = input, output_fn: OutputFn = print):
    """Bind read_human_move to the given input and output functions."""
    def reader(board: Board, mark: Mark) -> int:
        return read_human_move(board, mark, input_fn=input_fn, output_fn=output_fn)
    return reader


def announce_turn(match: Match, output_fn: OutputFn = print):
    mark = match.current_mark
    output_fn(f"Player {PLAYER_NUMBERS[mark]}'s turn ({mark.symbol})")


def announce_move(record: MoveRecord, output_fn: OutputFn = print):
    row, col = index_to_row_col(record.index)
    output_fn(f"Player {PLAYER_NUMBERS[record.mark]} ({record.mark.symbol}) plays {row + 1}|{col + 1}")


def announce_result(result: GameResult, output_fn: OutputFn = print):
    """Print the game result."""
    if result.winner is not None:
        output_fn(f"Winner is: Player {PLAYER_NUMBERS[result.winner]}({result.winner.symbol})")
    elif result.is_draw:
        output_fn("A draw!")
    else:
        output_fn("The game is not over yet.")
