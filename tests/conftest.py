import os
import sys

import pytest

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def debug_manager():
    """The shared debug manager, restored to quiet defaults afterwards."""
    yield debug
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")
