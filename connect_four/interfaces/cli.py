"""
cli.py - Command-line interface for the Connect Four rules engine

This module provides a text console for playing a two-player game at one
keyboard, replaying a list of moves, and running the built-in validation
scenarios.
"""

import argparse
import sys
from typing import Dict, List, NamedTuple, Optional, Sequence

from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board
from connect_four.utils import COLS, ROWS, GameResult


class Scenario(NamedTuple):
    """A sequence of moves with the expected final grid."""
    moves: List[int]
    expected: str
    ended: bool


def _grid(*rows: str) -> str:
    return "\n".join(rows)


EMPTY_ROW = "| | | | | | | |"

SCENARIOS: Dict[str, Scenario] = {
    'column overflow': Scenario(
        [3] * (ROWS + 1),
        _grid("| | | |X| | | |",
              "| | | |O| | | |",
              "| | | |X| | | |",
              "| | | |O| | | |",
              "| | | |X| | | |",
              "| | | |O| | | |"),
        True),
    'out of range': Scenario([-1], _grid(*[EMPTY_ROW] * ROWS), True),
    'vertical': Scenario(
        [3, 2, 3, 2, 3, 2, 3, 2],
        _grid(EMPTY_ROW,
              EMPTY_ROW,
              "| | | |O| | | |",
              "| | |X|O| | | |",
              "| | |X|O| | | |",
              "| | |X|O| | | |"),
        True),
    'horizontal': Scenario(
        [0, 0, 1, 1, 2, 2, 3, 3],
        _grid(EMPTY_ROW,
              EMPTY_ROW,
              EMPTY_ROW,
              EMPTY_ROW,
              "|X|X|X| | | | |",
              "|O|O|O|O| | | |"),
        True),
    'diagonal up-right': Scenario(
        [0, 1, 1, 0, 2, 2, 2, 3, 3, 3, 3],
        _grid(EMPTY_ROW,
              EMPTY_ROW,
              "| | | |O| | | |",
              "| | |O|X| | | |",
              "|X|O|X|O| | | |",
              "|O|X|O|X| | | |"),
        True),
    'diagonal up-left': Scenario(
        [5, 6, 6, 5, 3, 3, 3, 3, 6, 4, 4, 4],
        _grid(EMPTY_ROW,
              EMPTY_ROW,
              "| | | |X| | | |",
              "| | | |O|X| |O|",
              "| | | |X|O|X|O|",
              "| | | |O|X|O|X|"),
        True),
}


def parse_moves(text: str) -> List[int]:
    """
    Parse a comma-separated list of columns.

    Raises:
        ValueError: if any entry is not an integer
    """
    return [int(part) for part in text.split(',') if part.strip()]


def replay_moves(moves: Sequence[int]) -> Board:
    """Apply moves to a fresh board and return it."""
    board = Board()
    for column in moves:
        board.place_token(column)
    return board


def describe_result(board: Board) -> str:
    """Short status line for a board."""
    if board.game_result == GameResult.WIN:
        return f"won by {board.winner}"
    if board.game_result == GameResult.INVALID_MOVE:
        return "ended by invalid move"
    return "in progress"


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self):
        """Initialize the CLI."""
        self.board = Board()
        self.parser = self._build_parser()
        self.args = None

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four rules engine')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug_level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log_file', type=str, help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game at one keyboard')

        replay_parser = subparsers.add_parser('replay', help='Replay a list of moves')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help='Comma-separated columns, e.g. 3,2,3,2')

        subparsers.add_parser('test_all', help='Run all validation scenarios')

        return parser

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit status
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
            return 0
        elif self.args.command == 'replay':
            return self.replay()
        elif self.args.command == 'test_all':
            return 0 if self.run_all_tests() else 1

        self.parser.print_help()
        return 1

    def play_game(self) -> None:
        """Play a Connect Four game with two players taking turns."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLS - 1}) to drop a token, 'q' to quit.")
        print("Any other column number ends the game.")

        self.board = Board()
        print(self.board.render())

        while not self.board.is_game_ended():
            move = self.get_human_move()
            if move is None:
                print("Quitting game.")
                return

            self.board.place_token(move)
            print(self.board.render())

        print("Game over!")
        if self.board.game_result == GameResult.WIN:
            print(f"Player {self.board.winner} wins!")
        else:
            print("Invalid move, the game is over.")

    def get_human_move(self) -> Optional[int]:
        """
        Read a column from the current player.

        Returns:
            Column index, or None if the player quits
        """
        while True:
            try:
                user_input = input(f"Player {self.board.current_player}, your move: ").strip().lower()
            except EOFError:
                return None

            if user_input == 'q':
                return None

            try:
                return int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or 'q'.")

    def replay(self) -> int:
        """Replay the moves given with --moves and print the result."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            debug.error(f"Bad move list {self.args.moves!r}: {e}", "cli")
            self.parser.error(f"invalid --moves value: {self.args.moves!r}")

        self.board = replay_moves(moves)
        print(self.board.render())
        print(describe_result(self.board))
        return 0

    def run_all_tests(self) -> bool:
        """
        Run every validation scenario.

        Returns:
            True if all scenarios pass
        """
        passed = 0
        for name, scenario in SCENARIOS.items():
            board = replay_moves(scenario.moves)
            ok = board.render() == scenario.expected and board.is_game_ended() == scenario.ended
            passed += ok
            print(f"{'PASS' if ok else 'FAIL'}: {name}")
            if not ok:
                debug.error(f"Scenario '{name}' failed:\n{board.render()}", "cli")

        print(f"{passed}/{len(SCENARIOS)} scenarios passed")
        return passed == len(SCENARIOS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
