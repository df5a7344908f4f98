"""
Screen output for terminal TicTacToe.
Clears the terminal and draws the board and game messages.
"""

import subprocess
import sys
from typing import Callable, Optional, TextIO, Tuple

import numpy as np

from logic.game_state import Mark
from .config import ConsoleConfig


class Screen:
    """
    Draws the game on a text terminal.
    """

    def __init__(
        self,
        config: ConsoleConfig,
        out: Optional[TextIO] = None,
        runner: Optional[Callable] = None
    ):
        """
        Initialize the screen.

        Args:
            config: Console configuration (symbols, clear command).
            out: Where to write (default: sys.stdout at call time).
            runner: Runs the clear command; subprocess.run unless testing.
        """
        self.config = config
        self._out = out
        self._runner = runner or subprocess.run

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def clear(self):
        """Clear the terminal."""
        self.out.flush()
        self._runner(self.config.clear_command, check=False)

    def render_board(self, board: np.ndarray) -> str:
        """
        Render the board as text.

        Args:
            board: The 9-cell board.

        Returns:
            Three rows of cells separated by divider lines.
        """
        rows = []
        for start in (0, 3, 6):
            a, b, c = (self.config.symbol(cell) for cell in board[start:start + 3])
            rows.append(f" {a} | {b} | {c} ")
        return f"\n{rows[0]}\n{self.config.ROW_SEPARATOR}\n{rows[1]}\n" \
               f"{self.config.ROW_SEPARATOR}\n{rows[2]}\n"

    def show_board(self, board: np.ndarray):
        """Clear the terminal and print the board."""
        self.clear()
        print(self.render_board(board), file=self.out)

    def show_banner(self):
        print(self.config.TITLE, file=self.out)
        print(self.config.SUBTITLE, file=self.out)
        print(f"Human: {self.config.SYMBOLS[Mark.HUMAN]}", file=self.out)
        print(f"Machine: {self.config.SYMBOLS[Mark.AI]}", file=self.out)
        print(self.config.BANNER_RULE, file=self.out)

    def show_result(self, outcome: int, line: Optional[Tuple[int, int, int]] = None):
        """
        Print the final result.

        Args:
            outcome: +1 AI won, -1 human won, 0 draw.
            line: The winning cells (0-8), if any.
        """
        if outcome == Mark.AI:
            print("AI win.", file=self.out)
        elif outcome == Mark.HUMAN:
            print("HUMAN win.", file=self.out)
        else:
            print("Draw.", file=self.out)

        if line is not None:
            cells = ", ".join(str(index + 1) for index in line)
            print(f"Winning line: {cells}", file=self.out)
