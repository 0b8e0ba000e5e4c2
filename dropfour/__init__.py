"""
dropfour - Two-player drop-four game for the terminal

This package provides the board model, the turn engine with its win
detection, and a terminal interface for two players sharing a keyboard.
"""

# Version number
__version__ = '0.1.0'
