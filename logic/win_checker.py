"""
Win checker for N x N tic-tac-toe.
Finds the winner of a board and rebuilds the line that won it.
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .game_state import Player


# Order in which lines are scanned. The first full line found wins.
LINE_KINDS = ("row", "column", "diagonal", "reverse-diagonal")


@dataclass(frozen=True)
class WinningLine:
    """A full line of one player's symbols."""
    kind: str                   # "row", "column", "diagonal" or "reverse-diagonal"
    index: Optional[int]        # Row/column number, None for diagonals
    cells: Tuple[int, ...]      # Flat cell indices, in board order


@dataclass(frozen=True)
class BoardEvaluation:
    """
    Result of evaluating a board.

    winner and winning_line are both None while nobody has won.
    """
    size: int
    winner: Optional[Player] = None
    winning_line: Optional[WinningLine] = None

    @property
    def is_won(self) -> bool:
        return self.winner is not None

    def highlight_mask(self) -> List[Optional[str]]:
        """
        Mark the winning cells.

        Returns:
            List of length size**2 holding the winner's symbol on every
            cell of the winning line and None everywhere else.
        """
        mask: List[Optional[str]] = [None] * (self.size ** 2)
        if self.winning_line is not None:
            for index in self.winning_line.cells:
                mask[index] = self.winner.value
        return mask


def board_size_for(cell_count: int) -> int:
    """Side length of a square board with cell_count cells."""
    size = math.isqrt(cell_count) if cell_count > 0 else 0
    if size == 0 or size * size != cell_count:
        raise ValueError(
            f"A board needs a positive square number of cells, got {cell_count}"
        )
    return size


def winning_cells(kind: str, size: int, index: Optional[int] = None) -> Tuple[int, ...]:
    """
    Rebuild the flat cell indices of a line.

    Args:
        kind: One of LINE_KINDS.
        size: Board side length.
        index: Row or column number (ignored for diagonals).

    Returns:
        Tuple of flat indices into a row-major board.
    """
    if kind in ("row", "column") and index is None:
        raise ValueError(f"A {kind} needs an index")
    if kind == "row":
        return tuple(range(index * size, index * size + size))
    if kind == "column":
        return tuple(range(index, size ** 2, size))
    if kind == "diagonal":
        return tuple(range(0, size ** 2, size + 1))
    if kind == "reverse-diagonal":
        return tuple(range(size - 1, size ** 2 - 1, size - 1))
    raise ValueError(f"Unknown line kind: {kind!r}")


def _symbol(value) -> Optional[str]:
    """Normalize a cell value to "X", "O" or None."""
    if isinstance(value, Player):
        return value.value
    if value is None or value in (Player.X.value, Player.O.value):
        return value
    raise ValueError(f"Invalid cell value: {value!r}")


def _lines(board: np.ndarray) -> Iterator[Tuple[str, Optional[int], np.ndarray]]:
    size = board.shape[0]
    for row in range(size):
        yield "row", row, board[row, :]
    for col in range(size):
        yield "column", col, board[:, col]
    yield "diagonal", None, board.diagonal()
    yield "reverse-diagonal", None, np.fliplr(board).diagonal()


def _line_owner(line: np.ndarray) -> Optional[Player]:
    for player in (Player.X, Player.O):
        if np.all(line == player.value):
            return player
    return None


def evaluate_board(squares: Sequence[Optional[str]]) -> BoardEvaluation:
    """
    Evaluate a flat, row-major N x N board.

    Rows are scanned top to bottom, then columns left to right, then the
    main diagonal, then the reverse diagonal. The first full line decides
    the winner.

    Args:
        squares: N*N cells holding "X", "O" (or a Player) or None.

    Returns:
        BoardEvaluation with the winner and winning line, if any.
    """
    cells = [_symbol(value) for value in squares]
    size = board_size_for(len(cells))
    board = np.array(cells, dtype=object).reshape(size, size)

    for kind, index, line in _lines(board):
        winner = _line_owner(line)
        if winner is not None:
            line_cells = winning_cells(kind, size, index)
            return BoardEvaluation(size, winner, WinningLine(kind, index, line_cells))

    return BoardEvaluation(size)


class WinChecker:
    """
    Checks for win conditions on a GameState.

    Win condition: all N cells of a row, column or diagonal hold the
    same symbol.
    """

    def check_winner(self, game_state) -> Optional[Player]:
        """
        Check if there's a winner on the board currently shown.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return evaluate_board(game_state.squares).winner

    def get_winning_line(self, game_state) -> Optional[WinningLine]:
        """Get the winning line if there is one."""
        return evaluate_board(game_state.squares).winning_line

    def check_draw(self, game_state) -> bool:
        """
        A draw is a full board with no winner.
        """
        if self.check_winner(game_state) is not None:
            return False
        return all(cell is not None for cell in game_state.squares)


# Quick test
if __name__ == "__main__":
    print("Testing evaluate_board...")

    # Horizontal win on 3x3
    result = evaluate_board(["X", "X", "X",
                             "O", "O", None,
                             None, None, None])
    print(f"Test 1 (row): winner = {result.winner}, line = {result.winning_line}")
    assert result.winner == Player.X

    # Reverse diagonal on 4x4
    squares = [None] * 16
    for index in (3, 6, 9, 12):
        squares[index] = "O"
    result = evaluate_board(squares)
    print(f"Test 2 (reverse diagonal): winner = {result.winner}, line = {result.winning_line}")
    assert result.winning_line.cells == (3, 6, 9, 12)

    # No winner
    result = evaluate_board([None] * 25)
    print(f"Test 3 (empty 5x5): winner = {result.winner}")
    assert result.winner is None

    print("\nevaluate_board test done!")
