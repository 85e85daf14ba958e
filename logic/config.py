"""
Game configuration for tic-tac-toe.
Board sizes, symbols, and the look of the desktop window.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the game!
    """

    # ==================== BOARD SETTINGS ====================
    # Sizes offered in the board-size selector (N for an N x N board)
    BOARD_SIZES = [3, 4, 5, 6, 7, 8, 9, 10, 20]
    DEFAULT_BOARD_SIZE = 3

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    WINDOW_BG = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_FG = 'white'
    WINNING_FG = 'red'          # Cells of the winning line
    CURRENT_MOVE_BG = '#00d4ff'  # Current step in the moves list
    FONT_FAMILY = 'Segoe UI'

    @classmethod
    def size_label(cls, size: int) -> str:
        """Text shown for a size in the selector (e.g. "4 x 4")."""
        return f"{size} x {size}"

    @classmethod
    def cell_font(cls, size: int):
        """
        Font for the board buttons.
        Bigger boards get a smaller font so the window still fits.
        """
        if size <= 5:
            points = 24
        elif size <= 10:
            points = 14
        else:
            points = 9
        return (cls.FONT_FAMILY, points, 'bold')

    @classmethod
    def cell_width(cls, size: int) -> int:
        """Button width in characters."""
        return 4 if size <= 5 else 2
