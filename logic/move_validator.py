"""
Move validator for terminal TicTacToe.
Validates the moves typed in by the human player.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import GameState, Mark, BOARD_SIZE


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The move is a cell number 1-9 (top-left is 1, bottom-right is 9)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def parse_move(self, text: str, game_state: GameState) -> ValidationResult:
        """
        Parse and validate a move typed by the human.

        Args:
            text: Raw input, e.g. "5".
            game_state: Current game state.

        Returns:
            ValidationResult with the 0-based cell index when valid.
        """
        try:
            number = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message="Please type a number 1..9."
            )

        return self.validate_move(game_state, number)

    def validate_move(self, game_state: GameState, number: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            number: Cell number (1-9).

        Returns:
            ValidationResult with is_valid, index and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 1 <= number <= BOARD_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {number}. Must be 1-9."
            )

        index = number - 1
        if game_state.board[index] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {number} is already occupied."
            )

        return ValidationResult(is_valid=True, index=index)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell numbers (1-9).
        """
        if game_state.is_game_over:
            return []

        return [index + 1 for index in game_state.get_empty_cells()]


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    game = GameState()
    validator = MoveValidator()

    # Test valid move
    result = validator.parse_move("5", game)
    print(f"Move 5: valid={result.is_valid}, index={result.index}")
    assert result.is_valid

    # Make the move
    game.make_move(result.index)

    # Test invalid move (same cell)
    result = validator.parse_move("5", game)
    print(f"Move 5 again: valid={result.is_valid}, error={result.error_message}")
    assert not result.is_valid

    # Test out of range
    result = validator.parse_move("12", game)
    print(f"Move 12: valid={result.is_valid}, error={result.error_message}")
    assert not result.is_valid

    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
