"""
Rendering for the terminal game.

Defines the renderer interface the game loop notifies, and a
terminal implementation built on rich.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Set

import numpy as np
from rich.console import Console
from rich.text import Text

from minefield import MINE
from minefield.board import Position


# ============================================================================
# Constants
# ============================================================================

CURSOR = "▓ "
HIDDEN = "~ "
EMPTY = "  "
FLAG = "🚩"
MINE_GLYPH = "🚀"

NUMBER_STYLES = {
    1: "blue",
    2: "green",
    3: "red",
    4: "magenta",
    5: "cyan",
    6: "white",
    7: "yellow",
    8: "black",
}


# ============================================================================
# Renderer Interface
# ============================================================================

class Renderer(ABC):
    """
    Abstract base class for game views.

    The game loop only calls these as notifications and never inspects
    what they produce.
    """

    @abstractmethod
    def draw(
        self,
        seconds: int,
        board: np.ndarray,
        opened: Set[Position],
        flagged: Set[Position],
        cursor: Position,
    ) -> None:
        """Draw the in-progress view."""

    @abstractmethod
    def draw_lost(self, seconds: int, board: np.ndarray) -> None:
        """Draw the whole board after a mine was hit."""

    @abstractmethod
    def draw_won(
        self,
        seconds: int,
        board: np.ndarray,
        opened: Set[Position],
        flagged: Set[Position],
    ) -> None:
        """Draw the final board after a win."""

    @abstractmethod
    def draw_remaining_flags(self, remaining: int) -> None:
        """Report how many flags are left to place."""


# ============================================================================
# Terminal Renderer
# ============================================================================

class TerminalRenderer(Renderer):
    """Renderer that clears the screen and redraws the board with rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def draw(
        self,
        seconds: int,
        board: np.ndarray,
        opened: Set[Position],
        flagged: Set[Position],
        cursor: Position,
    ) -> None:
        self._header(seconds)
        rows, cols = board.shape
        for row in range(rows):
            cells = []
            for col in range(cols):
                if (row, col) == cursor:
                    cells.append(Text(CURSOR))
                else:
                    cells.append(self._cell(board, opened, flagged, row, col))
            self._print_row(cells)

    def draw_lost(self, seconds: int, board: np.ndarray) -> None:
        self._header(seconds)
        for row_values in board:
            self._print_row([_value_text(int(value)) for value in row_values])
        self.console.print("You lost! 😭😭😭")

    def draw_won(
        self,
        seconds: int,
        board: np.ndarray,
        opened: Set[Position],
        flagged: Set[Position],
    ) -> None:
        self._header(seconds)
        rows, cols = board.shape
        for row in range(rows):
            self._print_row(
                [self._cell(board, opened, flagged, row, col) for col in range(cols)]
            )
        self.console.print("You won! 🎉🎉🎉")

    def draw_remaining_flags(self, remaining: int) -> None:
        self.console.print(f"Remaining flags: {FLAG}x {remaining}")

    def _header(self, seconds: int) -> None:
        self.console.clear()
        self.console.print(f"Time: {seconds} seconds")

    def _print_row(self, cells: List[Text]) -> None:
        self.console.print(Text(" ").join(cells), soft_wrap=True)

    @staticmethod
    def _cell(
        board: np.ndarray,
        opened: Set[Position],
        flagged: Set[Position],
        row: int,
        col: int,
    ) -> Text:
        """Text for a cell as seen during play."""
        if (row, col) in opened:
            return _value_text(int(board[row, col]))
        if (row, col) in flagged:
            return Text(FLAG)
        return Text(HIDDEN)


def _value_text(value: int) -> Text:
    """Text for a revealed board value."""
    if value == MINE:
        return Text(MINE_GLYPH)
    if value == 0:
        return Text(EMPTY)
    return Text(f"{value} ", style=NUMBER_STYLES[value])
