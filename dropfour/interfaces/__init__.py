"""
dropfour.interfaces - User interfaces for the game

This package contains the terminal renderer, the move reader
and the command-line entry point.
"""

# Don't import anything here to avoid circular imports
__all__ = []
