"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the board defaults, the cell/outcome enumerations, the
configuration error type and the four-in-a-row scan shared by the board and
the engine.
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

# Game constants
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win

Coord = Tuple[int, int]


class InvalidConfigurationError(ValueError):
    """Raised when a board is requested with unusable dimensions."""


class Cell(Enum):
    """State of a single board cell: empty, or owned by one of the two seats."""
    EMPTY = 0
    FIRST = 1   # Seat of player 1
    SECOND = 2  # Seat of player 2

    def other(self) -> 'Cell':
        """Get the opposing seat."""
        if self == Cell.FIRST:
            return Cell.SECOND
        elif self == Cell.SECOND:
            return Cell.FIRST
        return Cell.EMPTY

    def __str__(self):
        if self == Cell.EMPTY:
            return " "
        elif self == Cell.FIRST:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Lifecycle of a game."""
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WIN = auto()
    TIE = auto()

    def is_game_over(self) -> bool:
        return self in (GameStatus.WIN, GameStatus.TIE)


class DropOutcome(Enum):
    """What a single drop did to the game."""
    IGNORED = "ignored"
    CONTINUE = "continue"
    WIN = "win"
    TIE = "tie"


class Direction(Enum):
    """Directions a line can run from its starting cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); row grows downward
DIRECTION_VECTORS: Dict[Direction, Coord] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def validate_dimensions(width, height) -> Tuple[int, int]:
    """
    Check that board dimensions are positive integers.

    Args:
        width: Number of columns
        height: Number of rows

    Returns:
        The (width, height) pair as ints

    Raises:
        InvalidConfigurationError: If either dimension is unusable
    """
    for name, value in (("width", width), ("height", height)):
        # bool is an int subclass but never a sensible dimension
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidConfigurationError(f"{name} must be positive, got {value}")
    return int(width), int(height)


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is on the board, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def line_from(row: int, col: int, direction: Direction, length: int = CONNECT_N) -> List[Coord]:
    """Coordinates of a line of `length` cells starting at (row, col); may leave the board."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * k, col + dc * k) for k in range(length)]


def is_line_owned(grid: np.ndarray, line: Sequence[Coord], value: int) -> bool:
    """True iff every coordinate of `line` is on the board and holds `value`."""
    height, width = grid.shape
    return all(
        is_valid_position(r, c, height, width) and grid[r, c] == value
        for r, c in line
    )


def find_winning_line(grid: np.ndarray, cell: Cell) -> Optional[List[Coord]]:
    """
    Scan the board for four-in-a-row owned by `cell`.

    Every cell is tried as the start of a line in each of the four
    directions; the scan stops at the first complete line.

    Args:
        grid: The board grid (height x width) of Cell values
        cell: The seat to check for

    Returns:
        The coordinates of the first winning line found, or None
    """
    if cell == Cell.EMPTY:
        return None

    value = cell.value
    height, width = grid.shape
    for row in range(height):
        for col in range(width):
            if grid[row, col] != value:
                continue
            for direction in DIRECTION_VECTORS:
                line = line_from(row, col, direction)
                if is_line_owned(grid, line, value):
                    return line
    return None


def render_board_ascii(grid: np.ndarray, symbols: Optional[Dict[Cell, str]] = None) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The board grid
        symbols: Optional single-character symbol per Cell (defaults to X/O)

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    symbols = symbols or {}
    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"

    result = [border]
    for row in range(height):
        cells = []
        for col in range(width):
            cell = Cell(int(grid[row, col]))
            cells.append(symbols.get(cell, str(cell)))
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap past 9 so each stays one character wide
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)
