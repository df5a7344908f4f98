"""
Logic module for terminal TicTacToe.
Handles game state, rules, and the minimax AI opponent.
"""

from .game_state import GameState, Mark, Move, new_board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, evaluate
from .ai_player import AIPlayer, SearchResult, search
from .config import LogicConfig
