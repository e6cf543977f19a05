"""
Keyboard input for the terminal game.

Decodes raw terminal input into game keys and manages cbreak mode.
"""
import os
import termios
import tty
from contextlib import contextmanager
from enum import Enum, auto
from typing import Iterator, List


class Key(Enum):
    """Keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    FLAG = auto()
    OPEN = auto()
    INTERRUPT = auto()


# Final byte of "ESC [ x" and "ESC O x" cursor key sequences
ARROWS = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
}

SINGLE_KEYS = {
    "f": Key.FLAG,
    "F": Key.FLAG,
    " ": Key.OPEN,
    "\x03": Key.INTERRUPT,
}


def decode_keys(data: str) -> List[Key]:
    """
    Decode a chunk of terminal input.

    Args:
        data: Characters read from the terminal, possibly several keys.

    Returns:
        Recognized keys in input order; anything else is dropped.
    """
    keys = []
    index = 0
    while index < len(data):
        char = data[index]
        if char == "\x1b" and data[index + 1:index + 2] in ("[", "O"):
            arrow = ARROWS.get(data[index + 2:index + 3])
            if arrow is not None:
                keys.append(arrow)
                index += 3
                continue
        key = SINGLE_KEYS.get(char)
        if key is not None:
            keys.append(key)
        index += 1
    return keys


@contextmanager
def cbreak(fd: int) -> Iterator[None]:
    """Put a terminal in cbreak mode, restoring its settings on exit."""
    if not os.isatty(fd):
        yield
        return
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
