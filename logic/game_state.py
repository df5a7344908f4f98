"""
Game state management for terminal TicTacToe.
Tracks the board, the player to move, and the move history.

The board is a flat numpy array of 9 cells laid out row by row:

     0 | 1 | 2
    -----------
     3 | 4 | 5
    -----------
     6 | 7 | 8
"""

import logging
from enum import IntEnum
from typing import Optional, List
from dataclasses import dataclass, field

import numpy as np


logger = logging.getLogger(__name__)

BOARD_SIZE = 9


class Mark(IntEnum):
    """
    What a cell can hold.

    The values double as the payoff encoding used by the search:
    +1 means the AI wins, -1 means the human wins, 0 is a draw.
    """
    EMPTY = 0
    HUMAN = -1
    AI = 1

    def opposite(self) -> "Mark":
        """Get the other player's mark (EMPTY stays EMPTY)."""
        return Mark(-self.value)


def new_board() -> np.ndarray:
    """Create an empty 9-cell board."""
    return np.zeros(BOARD_SIZE, dtype=np.int8)


def empty_cells(board: np.ndarray) -> List[int]:
    """
    Get all empty cells on the board.

    Returns:
        Cell indices (0-8) in increasing order.
    """
    return [int(i) for i in np.flatnonzero(board == Mark.EMPTY)]


def count_empty(board: np.ndarray) -> int:
    """Number of empty cells left on the board."""
    return int(np.count_nonzero(board == Mark.EMPTY))


def is_full(board: np.ndarray) -> bool:
    return count_empty(board) == 0


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Half-move number in the game (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Current player
    - How many empty cells are left (kept in step with the board)
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: np.ndarray = field(default_factory=new_board)

    # Current player's turn
    current_player: Mark = Mark.HUMAN

    # Empty cells left; the search relies on this matching the board
    empty_count: int = BOARD_SIZE

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            logger.warning("Game is already over!")
            return False

        if not 0 <= index < BOARD_SIZE:
            logger.warning("Cell %d is off the board!", index)
            return False

        if self.board[index] != Mark.EMPTY:
            logger.warning("Cell %d is already occupied!", index)
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))
        self.empty_count -= 1

        # Winner detection is left to WinChecker
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            empty_count=self.empty_count,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Human opens in the centre, AI answers in a corner, and so on
    for index in (4, 0, 2, 6, 3):
        print(f"{game.current_player.name} moves to {index}")
        game.make_move(index)

    print(game.board.reshape(3, 3))
    print(f"Empty cells: {game.get_empty_cells()} ({game.empty_count} left)")

    print("\nGame state test done!")
