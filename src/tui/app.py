"""
Terminal Minesweeper application.

Ties together difficulty selection, the game session and the event loop.
"""
import asyncio
import logging
import random
from typing import Optional

from rich.console import Console

from minefield import BoardConfig, GameSession, GameState

from .difficulty import select_difficulty
from .loop import GameLoop
from .renderer import Renderer, TerminalRenderer


logger = logging.getLogger(__name__)


LOGO = r"""
        __  __ _
        |  \/  (_)
        | \  / |_ _ __   ___  _____      _____  ___ _ __   ___ _ __
        | |\/| | | '_ \ / _ \/ __\ \ /\ / / _ \/ _ \ '_ \ / _ \ '__|
        | |  | | | | | |  __/\__ \\ V  V /  __/  __/ |_) |  __/ |
        |_|  |_|_|_| |_|\___||___/ \_/\_/ \___|\___| .__/ \___|_|
                                                    | |
                                                    |_|
"""


class Minesweeper:
    """Single-player terminal Minesweeper game."""

    def __init__(
        self,
        console: Optional[Console] = None,
        renderer: Optional[Renderer] = None,
        difficulty: Optional[BoardConfig] = None,
        strict_flags: bool = False,
        rng: Optional[random.Random] = None,
        input_fd: Optional[int] = None,
        tick_interval: float = 1.0,
    ) -> None:
        """
        Initialize the game.

        Args:
            console: Console for the logo and difficulty prompt.
            renderer: Game view (default: ``TerminalRenderer`` on ``console``).
            difficulty: Preset to play; prompts for one when omitted.
            strict_flags: Require flags to sit on mines to win.
            rng: Random source for mine placement.
            input_fd: Descriptor keys are read from (default: stdin).
            tick_interval: Seconds between timer redraws.
        """
        self.console = console or Console()
        self.renderer = renderer or TerminalRenderer(self.console)
        self.difficulty = difficulty
        self.strict_flags = strict_flags
        self.rng = rng
        self.input_fd = input_fd
        self.tick_interval = tick_interval
        self.session: Optional[GameSession] = None

    def name(self) -> str:
        return "Minesweeper"

    @property
    def state(self) -> GameState:
        """Current state, selecting a difficulty until a session exists."""
        if self.session is None:
            return GameState.SELECTING_DIFFICULTY
        return self.session.state

    def start(self) -> GameState:
        """
        Show the logo, pick a difficulty and play one game.

        Returns:
            Final state of the session.
        """
        self.console.print(LOGO, markup=False, highlight=False)
        config = self.difficulty or select_difficulty(self.console)
        self.session = GameSession.new(
            config, rng=self.rng, strict_flags=self.strict_flags
        )
        game_loop = GameLoop(
            self.session,
            self.renderer,
            input_fd=self.input_fd,
            tick_interval=self.tick_interval,
        )
        return asyncio.run(game_loop.run())
