"""
Pytest configuration and shared fixtures.
"""
import io
import sys
from pathlib import Path
from typing import Any, List, Tuple

import pytest
from rich.console import Console

# Add src and the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from minefield import BoardConfig, GameSession, build_board
from tui import Renderer


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingRenderer(Renderer):
    """Renderer that records every notification."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def draw(self, seconds, board, opened, flagged, cursor) -> None:
        self.calls.append(("draw", (seconds, set(opened), set(flagged), cursor)))

    def draw_lost(self, seconds, board) -> None:
        self.calls.append(("draw_lost", (seconds,)))

    def draw_won(self, seconds, board, opened, flagged) -> None:
        self.calls.append(("draw_won", (seconds, set(opened), set(flagged))))

    def draw_remaining_flags(self, remaining) -> None:
        self.calls.append(("draw_remaining_flags", (remaining,)))

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.calls]


def make_session(rows, cols, mines, clock=None, strict_flags=False):
    """Session on a board with mines at fixed positions."""
    return GameSession(
        config=BoardConfig(rows, cols, len(mines)),
        board=build_board(rows, cols, mines),
        clock=clock or FakeClock(),
        strict_flags=strict_flags,
    )


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_board():
    """2x2 board with a single mine at (0, 0)."""
    return build_board(2, 2, [(0, 0)])


@pytest.fixture
def empty_board():
    """3x3 board without mines for flood testing."""
    return build_board(3, 3, [])


@pytest.fixture
def walled_board():
    """
    5x5 board with a column of mines splitting it.

        0 2 -1 2 0
        0 3 -1 3 0
        0 3 -1 3 0
        0 3 -1 3 0
        0 2 -1 2 0
    """
    return build_board(5, 5, [(row, 2) for row in range(5)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def corner_session(clock: FakeClock) -> GameSession:
    """2x2 session with a mine at (0, 0)."""
    return make_session(2, 2, [(0, 0)], clock=clock)


@pytest.fixture
def empty_session(clock: FakeClock) -> GameSession:
    """3x3 session without mines."""
    return make_session(3, 3, [], clock=clock)


@pytest.fixture
def recorder() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def console() -> Console:
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)
