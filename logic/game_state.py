"""
Game state management for tic-tac-toe.
Tracks the board size, the move history and whose turn it is.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-based)
    col: int                # Column (0-based)
    index: int              # Flat cell index (row * size + col)
    move_number: int        # Position in the history (1 = first move)

    def label(self) -> str:
        """Human readable position, e.g. " (row: 2 col: 3)"."""
        return f" (row: {self.row + 1} col: {self.col + 1})"


@dataclass(frozen=True)
class HistoryEntry:
    """One board in the history, plus the move that produced it."""
    squares: Tuple[Optional[str], ...]
    last_move: Optional[Move] = None

    @classmethod
    def empty(cls, board_size: int) -> "HistoryEntry":
        return cls(squares=(None,) * (board_size ** 2))


@dataclass(frozen=True)
class MoveListItem:
    """An entry of the moves list shown to the players."""
    step: int
    text: str
    is_current: bool


@dataclass
class GameState:
    """
    The complete state of the game.

    Tracks:
    - The board size (N for an N x N board)
    - Every board since the game started (history[0] is the empty board)
    - Which step of the history is on display
    - Whose turn it is
    - Whether the moves list is shown newest first
    """

    board_size: int = GameConfig.DEFAULT_BOARD_SIZE
    history: List[HistoryEntry] = field(default_factory=list)
    step_number: int = 0
    x_is_next: bool = True
    moves_reversed: bool = False

    def __post_init__(self):
        if self.board_size not in GameConfig.BOARD_SIZES:
            raise ValueError(
                f"Unsupported board size {self.board_size}. "
                f"Choose one of {GameConfig.BOARD_SIZES}"
            )
        if not self.history:
            self.history = [HistoryEntry.empty(self.board_size)]
        if not 0 <= self.step_number < len(self.history):
            raise ValueError(
                f"No step {self.step_number}. Choose 0-{len(self.history) - 1}"
            )

    @property
    def current(self) -> HistoryEntry:
        """The history entry on display."""
        return self.history[self.step_number]

    @property
    def squares(self) -> Tuple[Optional[str], ...]:
        """The board on display, flat and row-major."""
        return self.current.squares

    @property
    def current_player(self) -> Player:
        return Player.X if self.x_is_next else Player.O

    @property
    def evaluation(self):
        """Winner and winning line of the board on display."""
        from .win_checker import evaluate_board
        return evaluate_board(self.squares)

    @property
    def winner(self) -> Optional[Player]:
        return self.evaluation.winner

    @property
    def winning_line(self):
        return self.evaluation.winning_line

    @property
    def number_of_moves(self) -> int:
        return sum(1 for cell in self.squares if cell is not None)

    @property
    def is_board_full(self) -> bool:
        return self.number_of_moves == self.board_size ** 2

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_board_full

    def make_move(self, index: int) -> bool:
        """
        Play the current player's symbol on a cell of the board on display.

        Any history after the displayed step is thrown away when the move
        is accepted.

        Args:
            index: Flat cell index (0 to size**2 - 1).

        Returns:
            True if move was successful, False otherwise.
        """
        if not 0 <= index < self.board_size ** 2:
            print(f"Cell {index} is outside the {self.board_size}x{self.board_size} board!")
            return False

        row, col = divmod(index, self.board_size)

        # Check if game is over
        if self.evaluation.is_won:
            print("Game is already over!")
            return False

        # Check if cell is empty
        if self.squares[index] is not None:
            print(f"Cell (row: {row + 1} col: {col + 1}) is already occupied!")
            return False

        history = self.history[:self.step_number + 1]
        squares = list(self.squares)
        squares[index] = self.current_player.value

        move = Move(
            player=self.current_player,
            row=row,
            col=col,
            index=index,
            move_number=len(history)
        )
        self.history = history + [HistoryEntry(tuple(squares), move)]
        self.step_number = len(history)
        self.x_is_next = not self.x_is_next

        return True

    def make_move_at(self, row: int, col: int) -> bool:
        """Same as make_move, with a 0-based (row, col) position."""
        if not (0 <= row < self.board_size and 0 <= col < self.board_size):
            print(f"Invalid position (row: {row + 1} col: {col + 1}). Must be 1-{self.board_size}.")
            return False
        return self.make_move(row * self.board_size + col)

    def jump_to(self, step: int):
        """Show the board as it was after `step` moves."""
        if not 0 <= step < len(self.history):
            raise ValueError(f"No step {step}. Choose 0-{len(self.history) - 1}")
        self.step_number = step
        self.x_is_next = step % 2 == 0

    def reverse_moves(self):
        """Toggle the moves list between ascending and descending order."""
        self.moves_reversed = not self.moves_reversed

    def new_game(self):
        """Start over on the current board size."""
        self.history = [HistoryEntry.empty(self.board_size)]
        self.step_number = 0
        self.x_is_next = True
        self.moves_reversed = False

    def change_board_size(self, size: int):
        """Switch to a new board size. This always starts a new game."""
        if size not in GameConfig.BOARD_SIZES:
            raise ValueError(
                f"Unsupported board size {size}. Choose one of {GameConfig.BOARD_SIZES}"
            )
        self.board_size = size
        self.new_game()

    def status(self) -> str:
        winner = self.winner
        if winner is not None:
            return f"Winner: {winner.value}"
        if self.is_board_full:
            return "Result is drawn"
        return f"Next player: {self.current_player.value}"

    def move_descriptions(self) -> List[MoveListItem]:
        """
        Build the moves list.

        Returns:
            One MoveListItem per history entry, newest first when
            moves_reversed is set.
        """
        items = []
        for step, entry in enumerate(self.history):
            if step == 0:
                text = "Go to game start"
            else:
                text = f"Go to move #{step}{entry.last_move.label()}"
            items.append(MoveListItem(step, text, step == self.step_number))

        if self.moves_reversed:
            items.reverse()
        return items

    def reverse_order_label(self) -> str:
        """Caption for the button that flips the moves list."""
        if self.moves_reversed:
            return "Change To Ascending Order"
        return "Change To Descending Order"

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board on display.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for index, cell in enumerate(self.squares):
            if cell is None:
                empty.append(divmod(index, self.board_size))
        return empty

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board_size=self.board_size,
            history=list(self.history),
            step_number=self.step_number,
            x_is_next=self.x_is_next,
            moves_reversed=self.moves_reversed
        )

    def format_board(self) -> str:
        """
        Render the board on display as text.

        Rows and columns are numbered from 1. Cells of the winning line
        are wrapped in brackets, e.g. "[X]".
        """
        size = self.board_size
        mask = self.evaluation.highlight_mask()

        lines = ["   " + " ".join(f"{col + 1:^3}" for col in range(size))]
        lines.append("   ┌" + "┬".join("───" for _ in range(size)) + "┐")

        for row in range(size):
            cells = []
            for col in range(size):
                index = row * size + col
                piece = self.squares[index]
                if piece is None:
                    cells.append("   ")
                elif mask[index] is not None:
                    cells.append(f"[{piece}]")
                else:
                    cells.append(f" {piece} ")
            lines.append(f"{row + 1:>2} │" + "│".join(cells) + "│")

            if row < size - 1:
                lines.append("   ├" + "┼".join("───" for _ in range(size)) + "┤")

        lines.append("   └" + "┴".join("───" for _ in range(size)) + "┘")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.format_board())
        print(f"\n{self.status()}  (total moves: {self.number_of_moves})")
