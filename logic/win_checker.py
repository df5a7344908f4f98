"""
Win checker for terminal TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

import numpy as np

from .game_state import GameState, Mark, is_full


# All possible winning lines, in the order they are checked:
# columns first, then rows, then the two diagonals
WINNING_LINES = np.array([
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
])


def _winning_line_index(board: np.ndarray) -> Optional[int]:
    """Index into WINNING_LINES of the first completed line, or None."""
    cells = board[WINNING_LINES]
    complete = (cells[:, 0] != Mark.EMPTY) & (cells == cells[:, :1]).all(axis=1)
    hits = np.flatnonzero(complete)
    if hits.size == 0:
        return None
    return int(hits[0])


def evaluate(board: np.ndarray) -> int:
    """
    Score a board from the AI's point of view.

    Tests the three columns, the three rows and the two diagonals,
    and reports the mark on the first line that is complete.

    Args:
        board: The 9-cell board.

    Returns:
        +1 if the AI has a line, -1 if the human has one, 0 otherwise.
    """
    line = _winning_line_index(board)
    if line is None:
        return 0
    return int(board[WINNING_LINES[line][0]])


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        outcome = evaluate(game_state.board)
        if outcome == 0:
            return None
        return Mark(outcome)

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(game_state) is not None:
            return False
        return is_full(game_state.board)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.is_game_over = True
        elif self.check_draw(game_state):
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The three cell indices of the line, or None.
        """
        line = _winning_line_index(game_state.board)
        if line is None:
            return None
        a, b, c = WINNING_LINES[line]
        return int(a), int(b), int(c)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Column win for the AI
    game1 = GameState(board=np.array([1, -1, 0, 1, -1, 0, 1, 0, 0], dtype=np.int8))
    winner = checker.check_winner(game1)
    print(f"Test 1 (column): winner = {winner}, line = {checker.get_winning_line(game1)}")
    assert winner == Mark.AI

    # Test 2: Diagonal win for the human
    game2 = GameState(board=np.array([-1, 1, 0, 1, -1, 0, 0, 0, -1], dtype=np.int8))
    winner = checker.check_winner(game2)
    print(f"Test 2 (diagonal): winner = {winner}")
    assert winner == Mark.HUMAN

    # Test 3: Draw (full board, no winner)
    game3 = GameState(board=np.array([-1, 1, -1, -1, 1, 1, 1, -1, -1], dtype=np.int8))
    is_draw = checker.check_draw(game3)
    print(f"Test 3 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
