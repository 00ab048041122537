"""
board.py - Board representation for Connect Four

This module implements the Board class: a grid of cells with gravity drops,
fullness checks and the four-in-a-row scan. It knows nothing about players
or turns; the engine in rules.py owns those.
"""

from typing import Dict, List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (DEFAULT_WIDTH, DEFAULT_HEIGHT, Cell, Coord,
                               find_winning_line, render_board_ascii,
                               validate_dimensions)


class Board:
    """
    A Connect Four grid of `height` rows by `width` columns.

    Row 0 is the top and row `height - 1` the bottom. Pieces are only ever
    written at the lowest empty row of a column, so occupied cells in a
    column are always contiguous from the bottom.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        """
        Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidConfigurationError: If a dimension is not a positive integer
        """
        self.width, self.height = validate_dimensions(width, height)
        debug.debug(f"Initializing {self.width}x{self.height} board", "board")
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def in_bounds(self, column) -> bool:
        """True if `column` is an integer column index on this board."""
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.width

    def cell_at(self, row: int, col: int) -> Cell:
        return Cell(int(self.grid[row, col]))

    def find_spot_for_col(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped in `column` would land on.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full or off the board
        """
        if not self.in_bounds(column):
            return None

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Cell.EMPTY.value:
                return row
        return None

    def is_valid_column(self, column: int) -> bool:
        return self.find_spot_for_col(column) is not None

    def valid_columns(self) -> List[int]:
        """Columns that can still take a piece."""
        return [col for col in range(self.width)
                if self.grid[0, col] == Cell.EMPTY.value]

    def place(self, column: int, cell: Cell) -> Optional[int]:
        """
        Drop a piece owned by `cell` into `column`.

        Args:
            column: The column to drop into (0-indexed)
            cell: The seat that owns the new piece

        Returns:
            The row the piece landed on, or None if nothing was placed
        """
        if cell == Cell.EMPTY:
            raise ValueError("Cannot place an empty cell")

        row = self.find_spot_for_col(column)
        if row is None:
            debug.debug(f"No spot in column {column}", "board")
            return None

        debug.trace(f"Placing {cell.name} at ({row}, {column})", "board")
        self.grid[row, column] = cell.value
        return row

    def column_height(self, column: int) -> int:
        """Number of pieces in a column."""
        return int(np.count_nonzero(self.grid[:, column] != Cell.EMPTY.value))

    def is_full(self) -> bool:
        return not np.any(self.grid == Cell.EMPTY.value)

    def winning_line(self, cell: Cell) -> Optional[List[Coord]]:
        """Coordinates of a four-in-a-row owned by `cell`, or None."""
        return find_winning_line(self.grid, cell)

    def has_win(self, cell: Cell) -> bool:
        return self.winning_line(cell) is not None

    def get_state(self) -> np.ndarray:
        """
        Get the current grid.

        Returns:
            A copy of the grid, so callers cannot move pieces behind the board's back
        """
        return self.grid.copy()

    def render(self, symbols: Optional[Dict[Cell, str]] = None) -> str:
        return render_board_ascii(self.grid, symbols)

    def __str__(self) -> str:
        return self.render()
