"""
connect_four - Rules engine for Connect Four

This package provides the board state machine for Connect Four: gravity
drops, turn order, win detection along every line of the board and a
textual rendering of the grid, plus a small console for playing and
replaying games.
"""

# Version number
__version__ = '0.1.0'
