"""
utils.py - Constants, enumerations and value types for the dropfour game

This module provides the board dimensions, the player and result enumerations,
the cell coordinate type and the offset tables used by win detection.
"""

from enum import Enum, auto
from typing import Dict, List, NamedTuple, Optional, Tuple

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
CAPACITY = ROWS * COLS

# Grid value of an unoccupied cell
EMPTY = 0


class Player(Enum):
    """Enumeration representing the two players."""
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        return Player.ONE

    @classmethod
    def from_value(cls, value: int) -> Optional['Player']:
        """Map a grid value back to a player, or None for an empty cell."""
        if value == EMPTY:
            return None
        return cls(int(value))

    def __str__(self):
        if self == Player.ONE:
            return "one"
        return "two"


class Coordinate(NamedTuple):
    """A cell on the board, 1-indexed. Row 1 is the top row, row 6 the bottom."""
    column: int
    row: int

    def offset(self, d_column: int, d_row: int) -> 'Coordinate':
        return Coordinate(self.column + d_column, self.row + d_row)


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()
    QUIT = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        return cls.PLAYER_TWO_WIN


class Direction(Enum):
    """Enumeration representing the axes scanned for four in a row."""
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    HORIZONTAL = auto()
    VERTICAL = auto()


# Ordered (column, row) offsets scanned along each axis, relative to the
# piece just placed. Dict order is the order axes are tried.
AXIS_OFFSETS: Dict[Direction, List[Tuple[int, int]]] = {
    Direction.DIAGONAL_DOWN: [(-3, -3), (-2, -2), (-1, -1), (0, 0), (1, 1), (2, 2), (3, 3)],
    Direction.DIAGONAL_UP: [(-3, 3), (-2, 2), (-1, 1), (0, 0), (1, -1), (2, -2), (3, -3)],
    Direction.HORIZONTAL: [(-3, 0), (-2, 0), (-1, 0), (0, 0), (1, 0), (2, 0), (3, 0)],
    # Nothing can sit above a freshly dropped piece, so only look beneath it
    Direction.VERTICAL: [(0, 3), (0, 2), (0, 1), (0, 0)],
}


def is_valid_column(column: int) -> bool:
    """Check if a column number is on the board."""
    return 1 <= column <= COLS


def is_valid_position(column: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        column: Column number (1-indexed)
        row: Row number (1-indexed, 1 is the top row)

    Returns:
        True if position is valid, False otherwise
    """
    return 1 <= column <= COLS and 1 <= row <= ROWS
