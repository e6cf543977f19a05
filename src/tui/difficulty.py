"""
Difficulty selection prompt.
"""
import logging
from typing import Callable, Dict, Optional, Tuple

from rich.console import Console

from minefield import EASY, HARD, MEDIUM, BoardConfig


logger = logging.getLogger(__name__)


# Menu number -> (label, config)
DIFFICULTIES: Dict[int, Tuple[str, BoardConfig]] = {
    1: ("Easy", EASY),
    2: ("Medium", MEDIUM),
    3: ("Hard", HARD),
}

DIFFICULTY_NAMES: Dict[str, BoardConfig] = {
    label.lower(): config for label, config in DIFFICULTIES.values()
}


def select_difficulty(
    console: Console,
    ask: Optional[Callable[[str], str]] = None,
) -> BoardConfig:
    """
    Ask the user to choose a difficulty level until the answer is valid.

    Args:
        console: Console the menu and errors are printed to.
        ask: Reads one answer given a prompt (default: ``console.input``).

    Returns:
        Configuration of the chosen preset.
    """
    ask = ask or console.input
    console.print("Select difficulty level:")
    for number, (label, config) in DIFFICULTIES.items():
        console.print(
            f"{number}. {label} {config.rows}x{config.cols} "
            f"with {config.num_mines} mines"
        )

    while True:
        answer = ask("Choose a difficulty level: ")
        try:
            choice = int(answer)
        except ValueError:
            console.print("Invalid difficulty")
            continue

        if choice not in DIFFICULTIES:
            console.print("Invalid difficulty, please try again")
            continue

        label, config = DIFFICULTIES[choice]
        logger.info("Selected %s difficulty", label)
        return config
