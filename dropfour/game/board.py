"""
board.py - Board representation for the dropfour game

This module implements the Board class which stores which player occupies
each cell, computes where a dropped piece lands and answers cell lookups.
The board only ever grows through place(), which keeps pieces stacked from
the bottom row up.
"""

import numpy as np
from typing import List, Optional

from dropfour.debug import debug
from dropfour.utils import (ROWS, COLS, CAPACITY, EMPTY, Player, Coordinate,
                            is_valid_column, is_valid_position)


class ColumnFull(Exception):
    """Raised when a piece is dropped into a column that has no room left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class Board:
    """
    Represents the game board.

    Cells are held in a (COLS, ROWS) numpy grid indexed by (column - 1, row - 1),
    holding EMPTY or the occupying player's value.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.debug("Initializing new Board", "board")
        self.grid = np.full((COLS, ROWS), EMPTY, dtype=np.int8)
        self.moves_made: List[int] = []
        self.last_move: Optional[Coordinate] = None

    def _check_column(self, column: int) -> None:
        if not is_valid_column(column):
            raise ValueError(f"Column {column} is outside 1-{COLS}")

    def column_height(self, column: int) -> int:
        """
        Get the number of pieces stacked in a column.

        Args:
            column: The column to check (1-indexed)

        Returns:
            The number of occupied cells, 0 to ROWS
        """
        self._check_column(column)
        return int(np.count_nonzero(self.grid[column - 1]))

    def is_column_full(self, column: int) -> bool:
        return self.column_height(column) == ROWS

    def next_drop_row(self, column: int) -> int:
        """
        Get the row a piece dropped into the column would land on.

        Args:
            column: The column to drop into (1-indexed)

        Returns:
            The lowest empty row in the column

        Raises:
            ColumnFull: if the column has no empty cell
        """
        height = self.column_height(column)
        if height == ROWS:
            debug.debug(f"Column {column} is full", "board")
            raise ColumnFull(column)
        return ROWS - height

    def place(self, column: int, player: Player) -> Coordinate:
        """
        Drop a piece for player into the column.

        Args:
            column: The column to drop into (1-indexed)
            player: The player who owns the piece

        Returns:
            The coordinate the piece landed on

        Raises:
            ColumnFull: if the column has no empty cell; the board is unchanged
        """
        row = self.next_drop_row(column)
        coordinate = Coordinate(column, row)

        debug.trace(f"Placing piece for player {player} at {coordinate}", "board")
        self.grid[column - 1, row - 1] = player.value
        self.moves_made.append(column)
        self.last_move = coordinate
        return coordinate

    def occupant(self, coordinate: Coordinate) -> Optional[Player]:
        """
        Look up who occupies a cell.

        Args:
            coordinate: The cell to look up; cells off the board are empty

        Returns:
            The occupying player, or None for an empty cell
        """
        column, row = coordinate
        if not is_valid_position(column, row):
            return None
        return Player.from_value(self.grid[column - 1, row - 1])

    def is_full(self) -> bool:
        """Check if every cell on the board is occupied."""
        return len(self) == CAPACITY

    def __len__(self) -> int:
        return int(np.count_nonzero(self.grid))

    def render(self) -> str:
        """
        Render the board as plain ASCII, one line per row, top row first.

        Returns:
            String representation of the board
        """
        symbols = {EMPTY: ".", Player.ONE.value: "1", Player.TWO.value: "2"}
        lines = ["+" + "".join(str(c) for c in range(1, COLS + 1)) + "+"]
        for row in range(ROWS):
            lines.append("|" + "".join(symbols[int(v)] for v in self.grid[:, row]) + "|")
        lines.append("+" + "-" * COLS + "+")
        return "\n".join(lines)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
