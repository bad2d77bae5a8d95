"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which holds the grid, the turn order
and the game result. Moves go through place_token; an illegal move ends the
game just like four in a row does.
"""

from typing import Optional

import numpy as np

from connect_four.debug import debug
from connect_four.game.rules import find_connect_four
from connect_four.utils import (ROWS, COLS, STARTING_TOKEN, GameResult, Token,
                                empty_grid, render_grid)


class Board:
    """
    Represents a Connect Four game board.

    The grid is a fixed (ROWS, COLS) array with row 0 at the bottom, and
    ``heights`` counts the tokens stacked in each column, so the next token
    in a column always lands at ``grid[heights[col], col]``.
    """

    def __init__(self):
        """Initialize an empty board with the first player to move."""
        debug.debug("Initializing new Board", "board")
        self.grid = empty_grid()
        self.heights = np.zeros(COLS, dtype=np.int8)
        self.current_player = STARTING_TOKEN
        self.game_result = GameResult.IN_PROGRESS
        self.winner: Optional[Token] = None

    def is_game_ended(self) -> bool:
        """Check whether the game has ended, by a win or by an invalid move."""
        return self.game_result.is_game_over()

    def column_height(self, column: int) -> int:
        """Number of tokens in a column (0 for a column outside the board)."""
        if not 0 <= column < COLS:
            return 0
        return int(self.heights[column])

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a move is valid.

        Args:
            column: The column to drop a token into (0-indexed)

        Returns:
            True if the game is in progress, the column exists and it is not full
        """
        if self.is_game_ended():
            return False

        return 0 <= column < COLS and self.heights[column] < ROWS

    def place_token(self, column: int) -> None:
        """
        Drop the current player's token into a column.

        An out-of-range column or a full column ends the game without
        placing anything. Calls after the game has ended do nothing.

        Args:
            column: The column to drop a token into (0-indexed)
        """
        if self.is_game_ended():
            debug.debug(f"Ignoring move in column {column}: game is over", "board")
            return

        if not self.is_valid_move(column):
            debug.debug(f"Invalid move in column {column} by {self.current_player}", "board")
            self._end_game(GameResult.INVALID_MOVE)
            return

        row = int(self.heights[column])
        debug.trace(f"Placing {self.current_player} at ({column}, {row})", "board")
        self.grid[row, column] = self.current_player.value
        self.heights[column] += 1
        self.current_player = self.current_player.other()

        debug.start_timer("win_check")
        winner = find_connect_four(self.grid)
        debug.end_timer("win_check", "board")

        if winner is not None:
            self.winner = winner
            self._end_game(GameResult.WIN)

    def _end_game(self, result: GameResult) -> None:
        self.game_result = result
        if result == GameResult.WIN:
            debug.info(f"Player {self.winner} connects four", "board")
        else:
            debug.info("Game ended by an invalid move", "board")

    def render(self) -> str:
        """
        Render the board as text.

        Returns:
            One |c0|...|c6| line per row, top row first, no trailing newline
        """
        return render_grid(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
