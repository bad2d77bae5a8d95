"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board state machine and the line-based
win detection rules.
"""

from connect_four.game.board import Board
from connect_four.game.rules import find_connect_four, has_connect_four

__all__ = ['Board', 'find_connect_four', 'has_connect_four']
