"""
Tic-Tac-Toe UI
A graphical interface for N x N tic-tac-toe using Tkinter.

Shows:
- The board as a grid of buttons (winning line in red)
- Game status and total number of moves
- The moves list, which jumps back to any earlier step
- New game and board size selection
"""

import tkinter as tk
from tkinter import ttk
from typing import List

from logic.config import GameConfig
from logic.game_state import GameState, MoveListItem


class TicTacToeUI:
    """
    Main UI class for the game.
    """

    def __init__(self, board_size: int = GameConfig.DEFAULT_BOARD_SIZE):
        """Initialize the UI."""
        self.game_state = GameState(board_size)
        self.board_cells: List[tk.Button] = []
        self.move_items: List[MoveListItem] = []

        self._create_ui()
        self._build_board()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.WINDOW_BG)
        self.root.minsize(700, 450)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        font = GameConfig.FONT_FAMILY
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.WINDOW_BG)
        style.configure('TLabel', background=GameConfig.WINDOW_BG, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=(font, 12), foreground='#ffd700')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 10))

        self.board_frame = ttk.Frame(left_frame)
        self.board_frame.pack(pady=10)

        # Right panel - game info
        right_frame = ttk.Frame(main_frame, width=320)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.total_moves_label = ttk.Label(right_frame, text="Total moves: 0")
        self.total_moves_label.pack()

        # Moves list section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(right_frame, text="Moves list:", font=(font, 11, 'italic')).pack()

        self.reverse_btn = tk.Button(
            right_frame,
            text="",
            font=(font, 10, 'bold'),
            bg='#6366f1',
            fg='white',
            command=self._reverse_moves
        )
        self.reverse_btn.pack(pady=5)

        list_frame = ttk.Frame(right_frame)
        list_frame.pack(fill=tk.BOTH, expand=True)

        scrollbar = ttk.Scrollbar(list_frame, orient=tk.VERTICAL)
        self.moves_list = tk.Listbox(
            list_frame,
            font=(font, 10),
            bg=GameConfig.CELL_BG,
            fg='white',
            activestyle='none',
            yscrollcommand=scrollbar.set
        )
        scrollbar.configure(command=self.moves_list.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.moves_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.moves_list.bind('<<ListboxSelect>>', self._on_move_selected)

        # Control section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        tk.Button(
            right_frame,
            text="🔄 New Game",
            font=(font, 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=14,
            command=self._new_game
        ).pack(pady=5)

        ttk.Label(right_frame, text="Choose board size below.").pack()
        ttk.Label(right_frame, text="(will result in a new game)").pack()

        self.size_var = tk.StringVar(value=GameConfig.size_label(self.game_state.board_size))
        size_box = ttk.Combobox(
            right_frame,
            textvariable=self.size_var,
            values=[GameConfig.size_label(size) for size in GameConfig.BOARD_SIZES],
            state='readonly',
            width=10
        )
        size_box.pack(pady=5)
        size_box.bind('<<ComboboxSelected>>', self._on_size_selected)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _build_board(self):
        """(Re)create the grid of cell buttons for the current board size."""
        for cell in self.board_cells:
            cell.destroy()
        self.board_cells = []

        size = self.game_state.board_size
        for index in range(size ** 2):
            row, col = divmod(index, size)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=GameConfig.cell_font(size),
                width=GameConfig.cell_width(size),
                bg=GameConfig.CELL_BG,
                fg=GameConfig.CELL_FG,
                activebackground=GameConfig.CELL_BG,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=1, pady=1)
            self.board_cells.append(cell)

    def _refresh(self):
        """Redraw the board, status and moves list from the game state."""
        squares = self.game_state.squares
        mask = self.game_state.evaluation.highlight_mask()

        for index, cell in enumerate(self.board_cells):
            color = GameConfig.WINNING_FG if mask[index] is not None else GameConfig.CELL_FG
            cell.configure(text=squares[index] or "", fg=color, activeforeground=color)

        self.status_label.configure(text=self.game_state.status())
        self.total_moves_label.configure(text=f"Total moves: {self.game_state.number_of_moves}")
        self.reverse_btn.configure(text=self.game_state.reverse_order_label())

        self.move_items = self.game_state.move_descriptions()
        self.moves_list.delete(0, tk.END)
        for position, item in enumerate(self.move_items):
            self.moves_list.insert(tk.END, item.text)
            if item.is_current:
                self.moves_list.itemconfigure(position, background=GameConfig.CURRENT_MOVE_BG, foreground='black')

    def _on_cell_click(self, index: int):
        if self.game_state.make_move(index):
            self._refresh()

    def _on_move_selected(self, event):
        selection = self.moves_list.curselection()
        if not selection:
            return
        item = self.move_items[selection[0]]
        self.game_state.jump_to(item.step)
        self._refresh()

    def _reverse_moves(self):
        self.game_state.reverse_moves()
        self._refresh()

    def _new_game(self):
        """Reset the game."""
        print("Starting a new game...")
        self.game_state.new_game()
        self._refresh()

    def _on_size_selected(self, event):
        size = int(self.size_var.get().split(" x ")[0])
        print(f"Board size set to: {size}x{size}")
        self.game_state.change_board_size(size)
        self._build_board()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe UI")
    parser.add_argument(
        "--size",
        type=int,
        choices=GameConfig.BOARD_SIZES,
        default=GameConfig.DEFAULT_BOARD_SIZE,
        help="Board size N for an N x N board"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   Tic-Tac-Toe UI")
    print("="*60)
    print(f"   Board: {args.size}x{args.size}")
    print("="*60 + "\n")

    ui = TicTacToeUI(board_size=args.size)
    ui.run()


if __name__ == "__main__":
    main()
