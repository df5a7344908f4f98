"""
AI player for terminal TicTacToe.
Uses the Minimax algorithm (optionally with alpha-beta pruning)
to choose the best move.
"""

import logging
from typing import Optional
from dataclasses import dataclass

import numpy as np

from .config import LogicConfig
from .game_state import GameState, Mark, empty_cells
from .win_checker import evaluate


logger = logging.getLogger(__name__)

# Stand-in for infinity; only needs to sit outside the payoff range {-1, 0, 1}
INF = 2


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a search.

    move is None at terminal positions, where there is nothing to play.
    payoff is +1 (AI wins), 0 (draw) or -1 (human wins).
    """
    move: Optional[int]
    payoff: int


@dataclass
class SearchStats:
    """Counters filled in while searching."""
    positions: int = 0


def search(
    board: np.ndarray,
    player: Mark,
    empty_count: int,
    pruning: bool = False,
    stats: Optional[SearchStats] = None
) -> SearchResult:
    """
    Find the game-theoretically best move for the player to move.

    The AI maximizes the payoff and the human minimizes it. Every branch
    is played out on its own copy of the board, so the board passed in
    is never modified.

    Without pruning, ties go to the last cell (in index order) whose payoff
    matches the best one. With pruning, the first cell reaching the best
    payoff is kept, because cut-off siblings only report a bound.

    Args:
        board: The 9-cell board.
        player: Mark.AI or Mark.HUMAN, whoever moves next.
        empty_count: Number of empty cells on the board. Must match the
            board; it is trusted, not recomputed.
        pruning: Use alpha-beta pruning. The payoff is the same either way.
        stats: Optional counters to fill in.

    Returns:
        SearchResult with the chosen cell (0-8) and its payoff.
    """
    return _minimax(board, Mark(player), empty_count, -INF, INF, pruning, stats)


def _minimax(
    board: np.ndarray,
    player: Mark,
    empty_count: int,
    alpha: int,
    beta: int,
    pruning: bool,
    stats: Optional[SearchStats]
) -> SearchResult:
    if stats is not None:
        stats.positions += 1

    # Check terminal states
    evaluation = evaluate(board)
    if evaluation != 0:
        return SearchResult(None, evaluation)
    if empty_count == 0:
        return SearchResult(None, 0)

    maximizing = player == Mark.AI
    best_move = None
    best_val = -INF if maximizing else INF

    for index in empty_cells(board):
        child = board.copy()
        child[index] = player
        value = _minimax(
            child, player.opposite(), empty_count - 1, alpha, beta, pruning, stats
        ).payoff

        if not pruning:
            best_val = max(value, best_val) if maximizing else min(value, best_val)
            if value == best_val:
                best_move = index
            continue

        improved = value > best_val if maximizing else value < best_val
        if improved:
            best_val, best_move = value, index

        if maximizing:
            alpha = max(alpha, best_val)
        else:
            beta = min(beta, best_val)
        if alpha >= beta:
            break  # Prune

    return SearchResult(best_move, best_val)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        player: Mark = Mark.AI,
        use_pruning: bool = LogicConfig.USE_PRUNING
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: AI)
            use_pruning: Search with alpha-beta pruning.
        """
        self.player = player
        self.use_pruning = use_pruning

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index (0-8) of the best move, or None if no move can be made.
        """
        self.positions_evaluated = 0

        if game_state.current_player != self.player:
            logger.warning("It's not %s's turn!", self.player.name)
            return None

        if game_state.empty_count == 0:
            return None

        stats = SearchStats()
        result = search(
            game_state.board,
            self.player,
            game_state.empty_count,
            pruning=self.use_pruning,
            stats=stats
        )
        self.positions_evaluated = stats.positions

        if LogicConfig.LOG_SEARCH_STATS:
            logger.info(
                "AI evaluated %d positions. Best move: %s (payoff: %d)",
                self.positions_evaluated, result.move, result.payoff
            )

        return result.move


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.AI)

    # Test 1: AI should block a winning move
    game = GameState()
    for index in (0, 4, 1):
        game.make_move(index)
    print(game.board.reshape(3, 3))
    print("\nHuman is about to win with cell 2!")

    move = ai.get_best_move(game)
    print(f"AI's move: {move} ({ai.positions_evaluated} positions)")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    game2 = GameState(current_player=Mark.AI)
    for index in (0, 3, 1, 4):
        game2.make_move(index)
    print(game2.board.reshape(3, 3))

    move = AIPlayer(Mark.AI, use_pruning=True).get_best_move(game2)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
