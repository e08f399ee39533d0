"""
Main orchestration script for console tic-tac-toe.

This script ties together:
- The menu and command line options (who plays X and O)
- Engine (board, win checker, players)
- Console UI (board display, human input, result)

Run this script to play tic-tac-toe in a terminal!
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from engine.board import Mark
from engine.config import GameConfig, GameMode, PlayerKind, parse_player_kind
from engine.errors import ConfigurationError
from engine.match import Match, MoveRecord
from engine.players import create_player
from engine.win_checker import GameResult

import ui


class TicTacToeGame:
    """
    Console controller for one game of tic-tac-toe.

    Game flow:
    1. Show the board and whose turn it is
    2. The current player picks a move (keyboard or computer)
    3. The move is applied and announced
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        x_kind: PlayerKind,
        o_kind: PlayerKind,
        seed: Optional[int] = None,
        debug: bool = GameConfig.DEBUG_MODE,
        input_fn=input,
        output_fn=print
    ):
        """
        Initialize the game.

        Args:
            x_kind: Who plays X (moves first).
            o_kind: Who plays O.
            seed: Seed for the computer players' random choices.
            debug: Print search statistics for minimax players.
            input_fn: Reads a line of input from the human.
            output_fn: Writes a line of output.
        """
        self.output = output_fn
        self.rng = np.random.default_rng(GameConfig.RANDOM_SEED if seed is None else seed)

        reader = ui.make_move_reader(input_fn, output_fn)
        players = {
            mark: create_player(
                kind,
                mark,
                read_move=reader,
                on_invalid=output_fn,
                rng=self.rng,
                verbose=debug,
            )
            for mark, kind in ((Mark.X, x_kind), (Mark.O, o_kind))
        }
        self.match = Match(players[Mark.X], players[Mark.O])

        self.output(f"Player 1: {Mark.X.symbol} ({x_kind.value})")
        self.output(f"Player 2: {Mark.O.symbol} ({o_kind.value})")

    def start(self) -> GameResult:
        """Play the game to the end and show the result."""
        ui.print_board(self.match.board, self.output)
        ui.announce_turn(self.match, self.output)

        result = self.match.play(on_turn=self._after_turn)

        self._show_game_result(result)
        return result

    def _after_turn(self, match: Match, record: MoveRecord):
        ui.announce_move(record, self.output)
        ui.print_board(match.board, self.output)
        if not match.is_over():
            ui.announce_turn(match, self.output)

    def _show_game_result(self, result: GameResult):
        self.output("\n" + "=" * 40)
        self.output("   GAME OVER!")
        self.output("=" * 40)
        ui.announce_result(result, self.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tic-tac-toe with a minimax computer player")
    parser.add_argument(
        "--mode",
        type=int,
        choices=[mode.choice for mode in GameMode],
        help="Menu choice to use instead of asking (1-5)"
    )
    parser.add_argument(
        "--x",
        dest="x_kind",
        choices=[kind.value for kind in PlayerKind],
        help="Who plays X (overrides --mode)"
    )
    parser.add_argument(
        "--o",
        dest="o_kind",
        choices=[kind.value for kind in PlayerKind],
        help="Who plays O (overrides --mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Random seed for the computer players"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=GameConfig.DEBUG_MODE,
        help="Print minimax search statistics"
    )
    return parser


def resolve_players(args, input_fn=input, output_fn=print):
    """
    Work out who plays X and O.

    Returns:
        (x_kind, o_kind), or None if the user chose to exit.

    Raises:
        ConfigurationError: On an invalid menu choice.
    """
    if args.x_kind or args.o_kind:
        default_x, default_o = GameMode.HUMAN_VS_MINIMAX.players
        x_kind = parse_player_kind(args.x_kind) if args.x_kind else default_x
        o_kind = parse_player_kind(args.o_kind) if args.o_kind else default_o
        return x_kind, o_kind

    if args.mode is not None:
        mode = next(mode for mode in GameMode if mode.choice == args.mode)
    else:
        ui.print_menu(output_fn)
        mode = ui.read_menu_choice(input_fn)

    if mode == GameMode.EXIT:
        return None
    return mode.players


def main(argv: Optional[List[str]] = None, input_fn=input, output_fn=print) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        players = resolve_players(args, input_fn, output_fn)
    except ConfigurationError as e:
        output_fn(f"{e}. Exiting ...")
        return 1

    if players is None:
        output_fn("Exiting the game. Goodbye!")
        return 0

    x_kind, o_kind = players
    game = TicTacToeGame(
        x_kind,
        o_kind,
        seed=args.seed,
        debug=args.debug,
        input_fn=input_fn,
        output_fn=output_fn,
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        output_fn("\n\nGame interrupted by user.")
    finally:
        output_fn("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
