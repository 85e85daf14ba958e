"""
Logic module for N x N tic-tac-toe.
Handles game state, move history, rules and winner detection.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, HistoryEntry, Move, MoveListItem, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import BoardEvaluation, WinChecker, WinningLine, evaluate_board
