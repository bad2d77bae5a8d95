"""
utils.py - Constants, enumerations and helpers for the Connect Four rules engine

This module provides the board dimensions, the token and result enumerations,
and the text rendering shared by the board and the console interface.
"""

from enum import Enum, auto
from typing import List

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a line to win


class Token(Enum):
    """Enumeration representing the two player tokens and the empty cell."""
    EMPTY = 0
    O = 1    # First player
    X = 2    # Second player

    def other(self) -> 'Token':
        """Get the opposing token."""
        if self == Token.O:
            return Token.X
        elif self == Token.X:
            return Token.O
        return Token.EMPTY

    @property
    def symbol(self) -> str:
        if self == Token.EMPTY:
            return " "
        return self.name

    def __str__(self):
        return self.symbol


# The first mover is fixed by the rules
STARTING_TOKEN = Token.O


class GameResult(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    WIN = auto()
    INVALID_MOVE = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class Orientation(Enum):
    """Orientations of the lines scanned for four in a row."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_UP_RIGHT = auto()
    DIAGONAL_UP_LEFT = auto()


# Column step for each diagonal orientation; rows always step up by one
DIAGONAL_STEPS = {
    Orientation.DIAGONAL_UP_RIGHT: 1,
    Orientation.DIAGONAL_UP_LEFT: -1,
}


def empty_grid() -> np.ndarray:
    """
    Create an empty grid.

    Returns:
        A (ROWS, COLS) integer array with row 0 at the bottom
    """
    return np.full((ROWS, COLS), Token.EMPTY.value, dtype=np.int8)


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index (0 is the bottom row)
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def render_grid(grid: np.ndarray) -> str:
    """
    Render a grid as pipe-delimited rows, top row first.

    Args:
        grid: The game grid, row 0 at the bottom

    Returns:
        ROWS lines of the form |c0|c1|...|c6| joined by newlines
    """
    lines: List[str] = []
    for row in range(ROWS - 1, -1, -1):
        cells = [Token(int(grid[row, col])).symbol for col in range(COLS)]
        lines.append("|" + "|".join(cells) + "|")
    return "\n".join(lines)
