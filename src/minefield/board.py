"""
Board module for Minesweeper.

Generates the mine grid: random mine placement, adjacent mine counts,
and the preset difficulty configurations.
"""
import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MINE = -1

Position = Tuple[int, int]


class BoardConfigError(ValueError):
    """Raised when a board cannot be generated from the given settings."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_dimensions(self.rows, self.cols, self.num_mines)

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    def generate(self, rng: Optional[random.Random] = None) -> np.ndarray:
        """Generate a fresh board for this configuration."""
        return generate_board(self.rows, self.cols, self.num_mines, rng)


def validate_dimensions(rows: int, cols: int, num_mines: int) -> None:
    """Ensure a board of this size can hold the requested mines."""
    if rows < 1 or cols < 1:
        raise BoardConfigError("Board dimensions must be positive")
    if num_mines < 0:
        raise BoardConfigError("Number of mines cannot be negative")
    max_mines = rows * cols - 1
    if num_mines > max_mines:
        raise BoardConfigError(f"Too many mines (max {max_mines})")


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)


# ============================================================================
# Neighbor Utilities
# ============================================================================

def neighbors(row: int, col: int, rows: int, cols: int) -> List[Position]:
    """
    Get valid neighboring cell positions.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        rows: Board height.
        cols: Board width.

    Returns:
        List of (row, col) tuples for the up to 8 in-bounds neighbors.
    """
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < rows and 0 <= new_col < cols:
                result.append((new_row, new_col))
    return result


# ============================================================================
# Board Generation
# ============================================================================

def place_mines(
    rows: int, cols: int, num_mines: int, rng: Optional[random.Random] = None
) -> Set[Position]:
    """
    Pick distinct mine positions by rejection sampling.

    A uniformly random cell is drawn until ``num_mines`` distinct cells
    have been chosen.
    """
    validate_dimensions(rows, cols, num_mines)
    rng = rng or random
    mines: Set[Position] = set()
    while len(mines) < num_mines:
        mines.add((rng.randrange(rows), rng.randrange(cols)))
    return mines


def count_adjacent_mines(grid: np.ndarray, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    rows, cols = grid.shape
    count = 0
    for neighbor_row, neighbor_col in neighbors(row, col, rows, cols):
        if grid[neighbor_row, neighbor_col] == MINE:
            count += 1
    return count


def build_board(
    rows: int, cols: int, mine_positions: Iterable[Position]
) -> np.ndarray:
    """
    Build a board with mines at the given positions.

    Returns:
        Read-only int8 array where -1 marks a mine and 0-8 is the
        number of adjacent mines.
    """
    grid = np.zeros((rows, cols), dtype=np.int8)
    for row, col in mine_positions:
        grid[row, col] = MINE

    for row in range(rows):
        for col in range(cols):
            if grid[row, col] != MINE:
                grid[row, col] = count_adjacent_mines(grid, row, col)

    grid.flags.writeable = False
    return grid


def generate_board(
    rows: int,
    cols: int,
    num_mines: int,
    rng: Optional[random.Random] = None,
) -> np.ndarray:
    """
    Generate a random board.

    Raises:
        BoardConfigError: If the board cannot hold ``num_mines`` mines.
    """
    mines = place_mines(rows, cols, num_mines, rng)
    logger.debug("Generated %dx%d board with %d mines", rows, cols, num_mines)
    return build_board(rows, cols, mines)


def mine_positions(board: np.ndarray) -> Set[Position]:
    """Get the set of positions holding a mine."""
    return {(int(row), int(col)) for row, col in np.argwhere(board == MINE)}
