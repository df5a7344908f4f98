"""
Keyboard input for terminal TicTacToe.
Reads the human's choices from stdin and keeps asking until they are valid.
"""

import sys
from typing import Callable, Optional, TextIO

from logic.game_state import GameState
from logic.move_validator import MoveValidator
from .config import ConsoleConfig


class MoveReader:
    """
    Reads and validates what the human types.

    There is no limit on retries: invalid input is answered with a
    fresh prompt. End of input (EOFError) is passed on to the caller.
    """

    def __init__(
        self,
        validator: Optional[MoveValidator] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None
    ):
        self.validator = validator or MoveValidator()
        self._input = input_fn or input
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def ask_first_mover(self) -> bool:
        """
        Ask whether the human wants to go first.

        Returns:
            True if the human moves first, False if the AI does.
        """
        while True:
            answer = self._input(ConsoleConfig.FIRST_MOVER_PROMPT).strip()
            if answer == "1":
                return True
            if answer == "2":
                return False

    def read_move(self, game_state: GameState) -> int:
        """
        Read the human's next move.

        Args:
            game_state: Current game state.

        Returns:
            Index (0-8) of an empty cell.
        """
        prompt = ConsoleConfig.MOVE_PROMPT
        while True:
            result = self.validator.parse_move(self._input(prompt), game_state)
            print(file=self.out)
            if result.is_valid:
                return result.index
            prompt = f"{ConsoleConfig.INVALID_PROMPT}{result.error_message} "
