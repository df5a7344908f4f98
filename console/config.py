"""
Console configuration for terminal TicTacToe.
All the settings for drawing the board, prompting the player,
and clearing the terminal on each supported platform.
"""

import logging
import platform
from typing import Dict, List, Optional

from logic.game_state import Mark


class UnsupportedPlatformError(Exception):
    """Raised when there is no known way to clear the terminal."""


class ConsoleConfig:
    """
    Configuration class for console settings.
    Build one with ConsoleConfig.for_platform() when the program starts.
    """

    # ==================== BOARD SYMBOLS ====================
    SYMBOLS: Dict[Mark, str] = {
        Mark.HUMAN: "X",
        Mark.AI: "O",
        Mark.EMPTY: " ",
    }
    ROW_SEPARATOR = "-----------"

    # ==================== TEXT ====================
    TITLE = "Tic-tac-toe"
    SUBTITLE = "\twith the minimax algorithm"
    BANNER_RULE = "-" * 35
    FIRST_MOVER_PROMPT = "Would you like to go first or second? [1 / 2] "
    MOVE_PROMPT = "Where would you like to move? [1 - 9] "
    INVALID_PROMPT = "Invalid. "

    # ==================== SCREEN CLEARING ====================
    # Keyed by platform.system().lower()
    CLEAR_COMMANDS: Dict[str, List[str]] = {
        "linux": ["clear"],
        "darwin": ["clear"],
        "windows": ["cmd", "/c", "cls"],
    }

    # ==================== LOGGING ====================
    # Kept at WARNING so log lines do not scroll the board away;
    # set to logging.INFO to see LogicConfig.LOG_SEARCH_STATS output
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def __init__(self, platform_name: str, clear_command: List[str]):
        self.platform_name = platform_name
        self.clear_command = list(clear_command)

    @classmethod
    def for_platform(cls, platform_name: Optional[str] = None) -> "ConsoleConfig":
        """
        Build the console configuration for a host platform.

        Args:
            platform_name: e.g. "linux" or "windows". Defaults to the
                platform this process runs on.

        Returns:
            A ConsoleConfig holding that platform's clear-screen command.

        Raises:
            UnsupportedPlatformError: If the platform is not in CLEAR_COMMANDS.
        """
        if platform_name is None:
            platform_name = platform.system()
        name = platform_name.lower()

        command = cls.CLEAR_COMMANDS.get(name)
        if command is None:
            raise UnsupportedPlatformError(f"Unsupported platform: {platform_name!r}")

        return cls(name, command)

    def symbol(self, mark: int) -> str:
        """Get the character drawn for a cell value."""
        try:
            return self.SYMBOLS[Mark(int(mark))]
        except ValueError:
            return "?"
