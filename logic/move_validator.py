"""
Move validator for tic-tac-toe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Game must not be over (no winner, board not full)
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move on the board on display.

        Args:
            game_state: Current game state.
            row: Row to play (0-based).
            col: Column to play (0-based).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        winner = self.win_checker.check_winner(game_state)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {winner.value} won."
            )

        if self.win_checker.check_draw(game_state):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over! The result is drawn."
            )

        size = game_state.board_size
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position (row: {row + 1} col: {col + 1}). Must be 1-{size}."
            )

        piece = game_state.squares[row * size + col]
        if piece is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell (row: {row + 1} col: {col + 1}) is already occupied by {piece}"
            )

        return ValidationResult(is_valid=True)

    def validate_index(self, game_state: GameState, index: int) -> ValidationResult:
        """Validate a move given as a flat cell index."""
        cell_count = game_state.board_size ** 2
        if not 0 <= index < cell_count:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{cell_count - 1}."
            )
        row, col = divmod(index, game_state.board_size)
        return self.validate_move(game_state, row, col)

    def validate_board_size(self, size: int) -> ValidationResult:
        if size not in GameConfig.BOARD_SIZES:
            choices = ", ".join(str(s) for s in GameConfig.BOARD_SIZES)
            return ValidationResult(
                is_valid=False,
                error_message=f"Unsupported board size {size}. Choose one of {choices}."
            )
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions.
        """
        if self.win_checker.check_winner(game_state) is not None:
            return []
        return game_state.get_empty_cells()
