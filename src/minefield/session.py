"""
Game session module for Minesweeper.

Implements cell opening (flood fill), flag toggling and win detection
over an explicit session struct.
"""
import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional, Set

import numpy as np

from .board import MINE, BoardConfig, Position, neighbors


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    SELECTING_DIFFICULTY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Direction(Enum):
    """Cursor movement as a (row, col) delta."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


# ============================================================================
# Game Actions
# ============================================================================

def open_cell(
    board: np.ndarray,
    opened: Set[Position],
    flagged: Set[Position],
    row: int,
    col: int,
) -> bool:
    """
    Open a cell, flooding outward from cells with no adjacent mines.

    Opened and flagged cells are left untouched. A mine is recorded as
    opened and reported to the caller, which must end the game.

    Args:
        board: Board produced by ``generate_board``.
        opened: Opened positions, updated in place.
        flagged: Flagged positions.
        row: Row index to open.
        col: Column index to open.

    Returns:
        True if a mine was opened, False otherwise.
    """
    start = (row, col)
    if start in opened or start in flagged:
        return False

    if board[row, col] == MINE:
        opened.add(start)
        return True

    rows, cols = board.shape
    stack: List[Position] = [start]
    while stack:
        position = stack.pop()
        if position in opened or position in flagged:
            continue
        opened.add(position)
        if board[position] != 0:
            continue
        for neighbor in neighbors(position[0], position[1], rows, cols):
            if neighbor not in opened and neighbor not in flagged:
                stack.append(neighbor)
    return False


def toggle_flag(
    flagged: Set[Position], opened: Set[Position], row: int, col: int
) -> bool:
    """
    Toggle flag on a cell.

    Returns:
        True if flag was toggled, False if the cell is opened.
    """
    position = (row, col)
    if position in opened:
        return False
    if position in flagged:
        flagged.remove(position)
    else:
        flagged.add(position)
    return True


def is_won(
    board: np.ndarray,
    opened: Set[Position],
    flagged: Set[Position],
    num_mines: int,
    require_correct_flags: bool = False,
) -> bool:
    """
    Check the win condition.

    The board is won once opened and flagged cells cover it and the number
    of flags equals the number of mines. With ``require_correct_flags``
    every flag must also sit on a mine.
    """
    if len(opened) + len(flagged) != board.size:
        return False
    if len(flagged) != num_mines:
        return False
    if require_correct_flags:
        return all(board[position] == MINE for position in flagged)
    return True


# ============================================================================
# Session
# ============================================================================

@dataclass
class GameSession:
    """
    State of a single game.

    Attributes:
        config: Board configuration the session was created from.
        board: Generated board.
        opened: Opened positions.
        flagged: Flagged positions.
        cursor: Current cursor position.
        state: Current game state.
        strict_flags: Require flags to sit on mines to win.
    """

    config: BoardConfig
    board: np.ndarray = field(repr=False, compare=False)
    opened: Set[Position] = field(default_factory=set)
    flagged: Set[Position] = field(default_factory=set)
    cursor: Position = (0, 0)
    state: GameState = GameState.PLAYING
    strict_flags: bool = False
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    started_at: Optional[float] = None

    def __post_init__(self) -> None:
        if self.board.shape != (self.config.rows, self.config.cols):
            raise ValueError(
                f"Board shape {self.board.shape} does not match "
                f"{self.config.rows}x{self.config.cols} configuration"
            )
        if self.started_at is None:
            self.started_at = self.clock()

    @classmethod
    def new(
        cls,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        strict_flags: bool = False,
    ) -> "GameSession":
        """Start a session on a freshly generated board."""
        session = cls(
            config=config,
            board=config.generate(rng),
            clock=clock,
            strict_flags=strict_flags,
        )
        logger.info(
            "Started %dx%d game with %d mines",
            config.rows, config.cols, config.num_mines,
        )
        return session

    # ========================================================================
    # Input Actions
    # ========================================================================

    def move_cursor(self, direction: Direction) -> Position:
        """Move the cursor one cell, clamped to the board."""
        delta_row, delta_col = direction.value
        row = min(max(self.cursor[0] + delta_row, 0), self.config.rows - 1)
        col = min(max(self.cursor[1] + delta_col, 0), self.config.cols - 1)
        self.cursor = (row, col)
        return self.cursor

    def toggle_flag(self) -> bool:
        """Toggle the flag under the cursor."""
        if not self.is_playing:
            return False
        return toggle_flag(self.flagged, self.opened, *self.cursor)

    def open(self) -> bool:
        """
        Open the cell under the cursor.

        Returns:
            True if a mine was hit and the game is lost.
        """
        if not self.is_playing:
            return False
        hit_mine = open_cell(self.board, self.opened, self.flagged, *self.cursor)
        if hit_mine:
            self.state = GameState.LOST
            logger.info("Mine hit at %s after %ds", self.cursor, self.elapsed_seconds)
        return hit_mine

    def check_win(self) -> bool:
        """Re-evaluate the win condition, moving to WON when satisfied."""
        if not self.is_playing:
            return self.state == GameState.WON
        if is_won(
            self.board,
            self.opened,
            self.flagged,
            self.config.num_mines,
            require_correct_flags=self.strict_flags,
        ):
            self.state = GameState.WON
            logger.info("Game won in %ds", self.elapsed_seconds)
            return True
        return False

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.state == GameState.PLAYING

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the session started."""
        return int(self.clock() - self.started_at)

    @property
    def remaining_flags(self) -> int:
        """Mines not yet accounted for by a flag."""
        return self.config.num_mines - len(self.flagged)
