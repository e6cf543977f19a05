"""
Minesweeper board engine.

Provides board generation, cell opening, flagging and win detection.
"""
from .board import (
    MINE,
    BoardConfig,
    BoardConfigError,
    EASY,
    MEDIUM,
    HARD,
    build_board,
    generate_board,
    mine_positions,
    neighbors,
)
from .session import (
    Direction,
    GameSession,
    GameState,
    is_won,
    open_cell,
    toggle_flag,
)

__all__ = [
    "MINE",
    "BoardConfig",
    "BoardConfigError",
    "EASY",
    "MEDIUM",
    "HARD",
    "build_board",
    "generate_board",
    "mine_positions",
    "neighbors",
    "Direction",
    "GameSession",
    "GameState",
    "is_won",
    "open_cell",
    "toggle_flag",
]
