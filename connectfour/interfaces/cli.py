"""
cli.py - Command-line interface for playing Connect Four

This module provides the terminal front end for the engine: it reads the
player configuration from command-line options, forwards column choices to
GameEngine.drop_piece and draws the board and results from what the engine
reports.
"""

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from connectfour.debug import debug, DebugLevel
from connectfour.game.rules import DropResult, GameEngine, GameState
from connectfour.utils import (DEFAULT_WIDTH, DEFAULT_HEIGHT, Cell, DropOutcome,
                               InvalidConfigurationError)

QUIT = 'q'
RESTART = 'r'


@dataclass
class PlayerConfig:
    """The two player identifiers and the board size for a game."""
    player1: Any = "red"
    player2: Any = "yellow"
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'PlayerConfig':
        return cls(player1=args.player1, player2=args.player2,
                   width=args.width, height=args.height)

    def start(self, engine: GameEngine) -> GameState:
        """Start a new game on `engine` with this configuration."""
        return engine.start_game(self.player1, self.player2, self.width, self.height)


class TerminalRenderer:
    """
    Draws an engine's board and move results as text.

    The renderer only reads through the engine's query methods and the
    DropResult values handed to it; it never changes the game.
    """

    def __init__(self, engine: GameEngine):
        self.engine = engine

    def symbols(self) -> Dict[Cell, str]:
        """
        Pick a one-character symbol per player.

        Player 1 gets the upper-cased first character of its identifier and
        player 2 the lower-cased one; X/O are used when those would clash.
        """
        state = self.engine.state
        if state is None:
            return {}

        first = str(state.players[0])[:1].upper()
        second = str(state.players[1])[:1].lower()
        if not first.strip() or not second.strip() or first == second:
            return {Cell.FIRST: "X", Cell.SECOND: "O"}
        return {Cell.FIRST: first, Cell.SECOND: second}

    def draw_board(self) -> str:
        board = self.engine.board
        if board is None:
            return ""
        return board.render(self.symbols())

    def describe(self, result: DropResult) -> str:
        """Text shown to the players after a drop."""
        if result.outcome == DropOutcome.IGNORED:
            return "That column can't be played."
        if result.outcome == DropOutcome.WIN:
            return f"Player {result.winner} won!"
        if result.outcome == DropOutcome.TIE:
            return "Tie!"
        return f"Player {self.engine.current_player()} to move."

    def show_board(self):
        print(self.draw_board())

    def show_result(self, result: DropResult):
        if not result.ignored:
            print(self.draw_board())
        print(self.describe(result))


class SimpleCLI:
    """Command-line interface for playing and benchmarking Connect Four."""

    def __init__(self):
        self.engine = GameEngine()
        self.renderer = TerminalRenderer(self.engine)
        self.config: Optional[PlayerConfig] = None
        self.args = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            default='warning', help='Logging verbosity')
        parser.add_argument('--log_file', type=str, default=None,
                            help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        play_parser.add_argument('--player1', default='red', help='Identifier of the first player')
        play_parser.add_argument('--player2', default='yellow', help='Identifier of the second player')
        play_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
        play_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')
        benchmark_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH)
        benchmark_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT)
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the logging options."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line; returns an exit status."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.config = PlayerConfig.from_args(self.args)
                self.play_game()
            elif self.args.command == 'benchmark':
                self.benchmark()
            else:
                print("Please specify a command. Use --help for options.")
                return 1
        except InvalidConfigurationError as e:
            debug.error(f"Invalid configuration: {e}", "cli")
            print(f"Error: {e}", file=sys.stderr)
            return 2
        return 0

    def start(self) -> None:
        self.config.start(self.engine)
        print(f"New game: {self.config.player1} vs {self.config.player2}")
        self.renderer.show_board()

    def play_game(self) -> None:
        """Play a game, reading each move from standard input."""
        self.start()
        print(f"Enter a column number (0-{self.engine.board.width - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")

        while self.engine.is_active():
            move = self.get_move()
            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESTART:
                print("Game restarted.")
                self.start()
                continue

            result = self.engine.drop_piece(move)
            debug.debug(f"Column {move} -> {result.outcome.value}", "cli")
            self.renderer.show_result(result)

    def get_move(self) -> Optional[Union[int, str]]:
        """
        Read a move from the current player.

        Returns:
            A column index, QUIT, RESTART, or None if the input was not understood
        """
        try:
            user_input = input(f"{self.engine.current_player()}'s move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def benchmark(self) -> None:
        """Time board setup, single drops and whole random games."""
        iterations = max(1, self.args.iterations)
        width, height = self.args.width, self.args.height
        print(f"Running benchmark with {iterations} iterations...")

        engine = GameEngine()
        debug.start_timer("start_game")
        for _ in range(iterations):
            engine.start_game("X", "O", width, height)
        elapsed = debug.end_timer("start_game", "cli")
        print(f"Starting games: {elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per game")

        drops = 0
        games = 0
        debug.start_timer("games")
        for _ in range(iterations):
            engine.start_game("X", "O", width, height)
            games += 1
            while engine.is_active():
                engine.drop_piece(random.choice(engine.valid_moves()))
                drops += 1
        elapsed = debug.end_timer("games", "cli")
        print(f"Played {games} random games with {drops} drops: "
              f"{elapsed:.6f} seconds total, {elapsed / drops * 1000:.6f} ms per drop")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
