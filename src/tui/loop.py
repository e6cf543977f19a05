"""
Event loop for the terminal game.

Key presses and the periodic redraw tick share one asyncio loop, so
input handling and redraws never interleave.
"""
import asyncio
import contextlib
import logging
import os
import sys
from typing import Optional

from minefield import Direction, GameSession, GameState

from .keys import Key, cbreak, decode_keys
from .renderer import Renderer


logger = logging.getLogger(__name__)


MOVES = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

READ_SIZE = 64


class GameLoop:
    """
    Drives a game session from keyboard input.

    Game play:
        - Arrow keys move the cursor.
        - 'f' flags or un-flags the cell under the cursor.
        - Space opens the cell under the cursor.
        - Ctrl+C exits.
    """

    def __init__(
        self,
        session: GameSession,
        renderer: Renderer,
        input_fd: Optional[int] = None,
        tick_interval: float = 1.0,
    ) -> None:
        """
        Initialize the loop.

        Args:
            session: Session to play.
            renderer: View notified after every change and on each tick.
            input_fd: Descriptor keys are read from (default: stdin).
            tick_interval: Seconds between timer redraws.
        """
        self.session = session
        self.renderer = renderer
        self.input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self.tick_interval = tick_interval
        self.interrupted = False
        self._finished: Optional[asyncio.Future] = None
        self._ticker: Optional[asyncio.Task] = None

    @property
    def is_finished(self) -> bool:
        return self.interrupted or not self.session.is_playing

    def handle_key(self, key: Key) -> None:
        """Apply one key press to the session and notify the renderer."""
        if self.is_finished:
            return
        session = self.session
        logger.debug("Key %s at %s", key.name, session.cursor)

        if key is Key.INTERRUPT:
            self.interrupted = True
            return
        if key in MOVES:
            session.move_cursor(MOVES[key])
        elif key is Key.FLAG:
            session.toggle_flag()
        elif key is Key.OPEN and session.open():
            self.renderer.draw_lost(session.elapsed_seconds, session.board)
            return

        self.redraw()
        if session.check_win():
            self.renderer.draw_won(
                session.elapsed_seconds,
                session.board,
                session.opened,
                session.flagged,
            )
            return
        self.renderer.draw_remaining_flags(session.remaining_flags)

    def redraw(self) -> None:
        """Draw the in-progress view."""
        session = self.session
        self.renderer.draw(
            session.elapsed_seconds,
            session.board,
            session.opened,
            session.flagged,
            session.cursor,
        )

    async def run(self) -> GameState:
        """
        Play until the game is won, lost or interrupted.

        Returns:
            State of the session when the loop stopped.
        """
        loop = asyncio.get_running_loop()
        self._finished = loop.create_future()

        with cbreak(self.input_fd):
            self.redraw()
            self.renderer.draw_remaining_flags(self.session.remaining_flags)
            loop.add_reader(self.input_fd, self._on_input)
            self._ticker = asyncio.create_task(self._tick())
            try:
                await self._finished
            finally:
                loop.remove_reader(self.input_fd)
                self._ticker.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await self._ticker

        logger.info("Game loop stopped in state %s", self.session.state.name)
        return self.session.state

    def _on_input(self) -> None:
        data = os.read(self.input_fd, READ_SIZE)
        if not data:
            logger.debug("Input closed")
            self.interrupted = True
        for key in decode_keys(data.decode(errors="ignore")):
            self.handle_key(key)
        if self.is_finished:
            # No redraw may follow the final view
            self._ticker.cancel()
            if not self._finished.done():
                self._finished.set_result(None)

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self.tick_interval)
            if self.is_finished:
                return
            self.redraw()
