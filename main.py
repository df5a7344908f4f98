"""
Main entry point for terminal TicTacToe.

This script ties together:
- Logic (game state, move validation, minimax AI)
- Console (screen output, keyboard input)

Run this script to play TicTacToe against the computer!
"""

import logging
import sys
from typing import Optional

# Logic imports
from logic.game_state import GameState, Mark
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer

# Console imports
from console.config import ConsoleConfig, UnsupportedPlatformError
from console.screen import Screen
from console.input_reader import MoveReader


logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    Main controller for one game of TicTacToe.

    Game flow:
    1. Ask the human whether to go first or second
    2. Human (X) types a cell number 1-9
    3. AI (O) answers with the minimax move
    4. Redraw the board after every move
    5. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        config: ConsoleConfig,
        screen: Optional[Screen] = None,
        reader: Optional[MoveReader] = None,
        ai: Optional[AIPlayer] = None
    ):
        """
        Initialize the game.

        Args:
            config: Console configuration for this platform.
            screen: Output (default: a Screen on stdout).
            reader: Input (default: a MoveReader on stdin).
            ai: The computer opponent (default: AIPlayer for Mark.AI).
        """
        self.config = config
        self.screen = screen or Screen(config)
        self.reader = reader or MoveReader()
        self.ai = ai or AIPlayer(Mark.AI)

        self.game_state = GameState()
        self.win_checker = WinChecker()

    def start(self) -> int:
        """
        Play one game to the end.

        Returns:
            The outcome: +1 AI won, -1 human won, 0 draw.
        """
        self.screen.clear()
        self.screen.show_banner()

        human_first = self.reader.ask_first_mover()
        self.game_state.current_player = Mark.HUMAN if human_first else Mark.AI
        logger.info("New game, %s moves first", self.game_state.current_player.name)

        self.screen.show_board(self.game_state.board)
        while not self.game_state.is_game_over:
            if self.game_state.current_player == Mark.HUMAN:
                self._human_move()
            else:
                self._ai_move()

            self.win_checker.update_game_state(self.game_state)
            self.screen.show_board(self.game_state.board)

        return self._show_game_result()

    def _human_move(self):
        index = self.reader.read_move(self.game_state)
        self.game_state.make_move(index)
        logger.debug("Human played cell %d", index)

    def _ai_move(self):
        index = self.ai.get_best_move(self.game_state)

        if index is None:
            logger.error("AI could not find a move!")
            self.game_state.is_game_over = True
            return

        self.game_state.make_move(index)
        logger.debug("AI played cell %d", index)

    def _show_game_result(self) -> int:
        """Show the final result and return the outcome code."""
        winner = self.game_state.winner
        outcome = int(winner) if winner is not None else 0

        self.screen.show_result(
            outcome,
            self.win_checker.get_winning_line(self.game_state)
        )
        return outcome


def main():
    """Main entry point."""
    logging.basicConfig(
        level=ConsoleConfig.LOG_LEVEL,
        format=ConsoleConfig.LOG_FORMAT
    )

    try:
        config = ConsoleConfig.for_platform()
    except UnsupportedPlatformError as e:
        # Without a way to clear the screen the game cannot be shown
        logger.critical("%s", e)
        sys.exit(1)

    game = TicTacToeGame(config)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
