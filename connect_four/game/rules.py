"""
rules.py - Line extraction and four-in-a-row detection for Connect Four

The functions here are pure queries over a grid array of shape (ROWS, COLS)
with row 0 at the bottom. Win detection enumerates every maximal line on the
board (columns, rows and both diagonal directions) and scans each one for a
run of CONNECT_N identical tokens.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.utils import (ROWS, COLS, CONNECT_N, DIAGONAL_STEPS, Orientation,
                                Token, is_valid_position)

Line = List[int]


def extract_column(grid: np.ndarray, col: int) -> Line:
    """Cells of a column, bottom to top."""
    return [int(grid[row, col]) for row in range(ROWS)]


def extract_row(grid: np.ndarray, row: int) -> Line:
    """Cells of a row, left to right."""
    return [int(grid[row, col]) for col in range(COLS)]


def extract_diagonal(grid: np.ndarray, col: int, row: int, step: int) -> Line:
    """
    Walk a diagonal from a starting cell until it leaves the board.

    Args:
        grid: The game grid
        col: Starting column
        row: Starting row
        step: Column increment per row climbed (1 for up-right, -1 for up-left)

    Returns:
        Cells along the diagonal, starting cell first
    """
    line = []
    while is_valid_position(row, col):
        line.append(int(grid[row, col]))
        row += 1
        col += step
    return line


def diagonal_starts(orientation: Orientation) -> List[Tuple[int, int]]:
    """
    Starting cells (col, row) for every diagonal of one direction.

    Every bottom-edge cell starts a diagonal. The remaining diagonals start on
    the side edge the direction walks away from, skipping row 0 since the
    corner cell is already a bottom-edge start.
    """
    step = DIAGONAL_STEPS[orientation]
    anchor_col = 0 if step > 0 else COLS - 1

    starts = [(col, 0) for col in range(COLS)]
    starts.extend((anchor_col, row) for row in range(1, ROWS))
    return starts


def diagonals(grid: np.ndarray, orientation: Orientation) -> List[Line]:
    """All diagonals of one direction, each walked upwards."""
    step = DIAGONAL_STEPS[orientation]
    return [extract_diagonal(grid, col, row, step) for col, row in diagonal_starts(orientation)]


def all_lines(grid: np.ndarray) -> Iterator[Tuple[Orientation, Line]]:
    """
    Enumerate every maximal line on the board.

    Yields:
        (orientation, line) pairs: all columns, then all rows, then the
        up-right diagonals and finally the up-left diagonals
    """
    for col in range(COLS):
        yield Orientation.VERTICAL, extract_column(grid, col)

    for row in range(ROWS):
        yield Orientation.HORIZONTAL, extract_row(grid, row)

    for orientation in (Orientation.DIAGONAL_UP_RIGHT, Orientation.DIAGONAL_UP_LEFT):
        for line in diagonals(grid, orientation):
            yield orientation, line


def longest_run(line: Sequence[int]) -> Tuple[Token, int]:
    """
    Find the longest run of identical tokens in a line.

    Empty cells never form a run.

    Returns:
        (token, length) of the first longest run, or (Token.EMPTY, 0) for a
        line without tokens
    """
    best_token, best_length = Token.EMPTY, 0
    current, length = Token.EMPTY.value, 0

    for cell in line:
        if cell == Token.EMPTY.value:
            current, length = Token.EMPTY.value, 0
            continue

        if cell == current:
            length += 1
        else:
            current, length = cell, 1

        if length > best_length:
            best_token, best_length = Token(current), length

    return best_token, best_length


def line_has_run(line: Sequence[int], length: int = CONNECT_N) -> bool:
    """Check whether a line holds at least ``length`` identical tokens in a row."""
    return longest_run(line)[1] >= length


def find_connect_four(grid: np.ndarray) -> Optional[Token]:
    """
    Scan the whole board for four in a row.

    Returns:
        The token owning the first line found with a run of CONNECT_N or
        more, or None if there is no such line
    """
    for orientation, line in all_lines(grid):
        token, length = longest_run(line)
        if length >= CONNECT_N:
            debug.trace(f"{orientation.name} line {line} has a run of {length} {token}", "rules")
            return token
    return None


def has_connect_four(grid: np.ndarray) -> bool:
    """Check whether either player has four in a row anywhere on the board."""
    return find_connect_four(grid) is not None
