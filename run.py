#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four rules engine console

Examples:

    # Play a two-player game at one keyboard
    python run.py play

    # Replay a game and print the final grid
    python run.py replay --moves 3,2,3,2,3,2,3

    # Run all validation scenarios with debug logging
    python run.py --debug_level debug test_all
"""

import sys

from connect_four.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
