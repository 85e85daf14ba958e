"""
Main entry point for N x N tic-tac-toe.

This script ties together:
- Logic (game state, move history, move validation, winner detection)
- The Tkinter UI (default) or a console session (--no-ui)

Run this script to play tic-tac-toe against a friend!
"""

from typing import Callable, List, Optional

from logic.config import GameConfig
from logic.game_state import GameState
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker


HELP_TEXT = """Commands:
  <row> <col>   play a cell, rows and columns start at 1 (e.g. "2 3")
  jump <n>      go back to move #n (0 = game start)
  reverse       flip the order of the moves list
  history       show the moves list
  new           start a new game
  size <n>      new game on an n x n board ({sizes})
  help          show this text
  quit          leave the game"""


class ConsoleGame:
    """
    Console session for two players sharing a keyboard.

    Game flow:
    1. The board and whose turn it is are printed
    2. The current player types a command
    3. Moves are validated, played, and the board is printed again
    4. Repeat until someone quits
    """

    PROMPT = "> "

    def __init__(self, board_size: int = GameConfig.DEFAULT_BOARD_SIZE):
        """
        Initialize the console game.

        Args:
            board_size: N for an N x N board.
        """
        self.game_state = GameState(board_size)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.is_running = False

    def start(self, read_line: Optional[Callable[[str], str]] = None):
        """
        Run the command loop until "quit" or end of input.

        Args:
            read_line: Function returning the next line typed by the players
                (defaults to input).
        """
        print("\n" + "="*60)
        print("   Tic-Tac-Toe - Console")
        print("="*60)
        print("Type 'help' for a list of commands.")

        if read_line is None:
            read_line = input

        self.game_state.print_board()

        self.is_running = True
        while self.is_running:
            try:
                line = read_line(self.PROMPT)
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str):
        """
        Handle one line of input.

        Args:
            line: The raw command typed by a player.
        """
        parts = line.strip().lower().split()
        if not parts:
            return

        command, args = parts[0], parts[1:]

        try:
            if command in ("quit", "exit", "q"):
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "help":
                print(HELP_TEXT.format(sizes=", ".join(str(s) for s in GameConfig.BOARD_SIZES)))
            elif command == "jump":
                self._jump(args)
            elif command == "reverse":
                self.game_state.reverse_moves()
                self._show_history()
            elif command == "history":
                self._show_history()
            elif command == "new":
                self._new_game()
            elif command == "size":
                self._change_size(args)
            elif command.isdigit():
                self._play(parts)
            else:
                print(f"Unknown command: {command!r}. Type 'help' for a list of commands.")
        except ValueError as e:
            print(f"ERROR: {e}")

    def _play(self, parts: List[str]):
        """
        Play the current player's symbol at a 1-based (row, col).
        """
        if len(parts) != 2:
            raise ValueError("Enter a move as '<row> <col>', e.g. '2 3'")

        row, col = int(parts[0]) - 1, int(parts[1]) - 1

        result = self.validator.validate_move(self.game_state, row, col)
        if not result.is_valid:
            print(f"Invalid move: {result.error_message}")
            return

        player = self.game_state.current_player
        if self.game_state.make_move_at(row, col):
            move = self.game_state.current.last_move
            print(f"\n>>> {player.value} played move #{move.move_number}{move.label()}")
            self.game_state.print_board()

            if self.game_state.is_game_over:
                self._show_game_result()

    def _jump(self, args: List[str]):
        if len(args) != 1:
            raise ValueError("Enter a step to jump to, e.g. 'jump 2'")

        step = int(args[0])
        self.game_state.jump_to(step)
        print(f"\nJumped to {'game start' if step == 0 else f'move #{step}'}")
        self.game_state.print_board()

    def _new_game(self):
        print("\nStarting a new game...")
        self.game_state.new_game()
        self.game_state.print_board()

    def _change_size(self, args: List[str]):
        if len(args) != 1:
            raise ValueError("Enter a board size, e.g. 'size 4'")

        size = int(args[0])
        result = self.validator.validate_board_size(size)
        if not result.is_valid:
            print(f"Invalid size: {result.error_message}")
            return

        print(f"\nBoard size set to: {size}x{size} (new game)")
        self.game_state.change_board_size(size)
        self.game_state.print_board()

    def _show_history(self):
        print("\nMoves list:")
        for item in self.game_state.move_descriptions():
            marker = "→" if item.is_current else " "
            print(f"  {marker} {item.text}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        winner = self.win_checker.check_winner(self.game_state)
        if winner is not None:
            line = self.win_checker.get_winning_line(self.game_state)
            print(f"\n🏆 {winner.value} wins with a full {line.kind}!")
        elif self.win_checker.check_draw(self.game_state):
            print("\n🤝 It's a draw! Good game!")

        print("Type 'new' to play again or 'jump <n>' to revisit a move.")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="N x N Tic-Tac-Toe")
    parser.add_argument(
        "--size",
        type=int,
        choices=GameConfig.BOARD_SIZES,
        default=GameConfig.DEFAULT_BOARD_SIZE,
        help="Board size N for an N x N board"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args(argv)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Tic-Tac-Toe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(board_size=args.size)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(board_size=args.size)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
