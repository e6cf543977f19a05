"""
Terminal front end for Minesweeper.

Provides key decoding, rendering, difficulty selection and the game loop.
"""
from .app import Minesweeper
from .difficulty import DIFFICULTIES, DIFFICULTY_NAMES, select_difficulty
from .keys import Key, cbreak, decode_keys
from .loop import GameLoop
from .renderer import Renderer, TerminalRenderer

__all__ = [
    "Minesweeper",
    "DIFFICULTIES",
    "DIFFICULTY_NAMES",
    "select_difficulty",
    "Key",
    "cbreak",
    "decode_keys",
    "GameLoop",
    "Renderer",
    "TerminalRenderer",
]
