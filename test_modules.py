"""
Tests for the console front-end and the command line entry point.
These drive the game the way a player would, one command at a time.
"""

import main
from logic.config import GameConfig
from logic.game_state import Player
from main import ConsoleGame


def scripted(*lines):
    """Return a read_line function that types `lines` then hits end of input."""
    remaining = list(lines)

    def read_line(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


def test_config():
    assert GameConfig.DEFAULT_BOARD_SIZE in GameConfig.BOARD_SIZES
    assert GameConfig.BOARD_SIZES[0] == 3
    assert GameConfig.BOARD_SIZES[-1] == 20
    assert GameConfig.size_label(4) == "4 x 4"
    assert GameConfig.cell_font(20)[1] < GameConfig.cell_font(3)[1]


def test_console_full_game(capsys):
    game = ConsoleGame()
    game.start(scripted("1 1", "2 1", "1 2", "2 2", "1 3"))

    out = capsys.readouterr().out
    assert game.game_state.winner == Player.X
    assert "X played move #1 (row: 1 col: 1)" in out
    assert "Winner: X" in out
    assert "GAME OVER!" in out
    assert "full row" in out


def test_console_draw(capsys):
    game = ConsoleGame()
    for line in ("1 1", "1 2", "1 3", "2 2", "2 1", "2 3", "3 2", "3 1", "3 3"):
        game.handle_command(line)

    out = capsys.readouterr().out
    assert game.game_state.status() == "Result is drawn"
    assert "It's a draw" in out


def test_console_rejects_bad_moves(capsys):
    game = ConsoleGame()
    game.handle_command("2 2")
    game.handle_command("2 2")
    game.handle_command("4 1")
    game.handle_command("2")
    game.handle_command("2 x")

    out = capsys.readouterr().out
    assert "Invalid move: Cell (row: 2 col: 2) is already occupied by X" in out
    assert "Invalid move: Invalid position (row: 4 col: 1)" in out
    assert out.count("ERROR:") == 2
    assert game.game_state.number_of_moves == 1


def test_console_jump_and_history(capsys):
    game = ConsoleGame()
    for line in ("1 1", "2 2", "3 3"):
        game.handle_command(line)

    game.handle_command("jump 1")
    assert game.game_state.step_number == 1
    assert game.game_state.current_player == Player.O

    game.handle_command("history")
    out = capsys.readouterr().out
    assert "Jumped to move #1" in out
    assert "→ Go to move #1 (row: 1 col: 1)" in out
    assert "Go to move #3 (row: 3 col: 3)" in out

    game.handle_command("jump 9")
    assert "ERROR: No step 9" in capsys.readouterr().out


def test_console_reverse(capsys):
    game = ConsoleGame()
    game.handle_command("1 1")
    game.handle_command("reverse")

    out = capsys.readouterr().out
    assert game.game_state.moves_reversed
    assert out.index("Go to move #1") < out.index("Go to game start")


def test_console_new_game_and_size(capsys):
    game = ConsoleGame()
    game.handle_command("1 1")
    game.handle_command("new")
    assert game.game_state.number_of_moves == 0

    game.handle_command("size 5")
    assert game.game_state.board_size == 5

    game.handle_command("size 11")
    out = capsys.readouterr().out
    assert "Invalid size: Unsupported board size 11" in out
    assert game.game_state.board_size == 5


def test_console_help_unknown_and_quit(capsys):
    game = ConsoleGame()
    game.start(scripted("help", "dance", "", "quit", "1 1"))

    out = capsys.readouterr().out
    assert "jump <n>" in out
    assert "Unknown command: 'dance'" in out
    assert "Game quit by user." in out
    assert not game.is_running
    assert game.game_state.number_of_moves == 0


def test_main_console_mode(monkeypatch, capsys):
    lines = iter(["1 1", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    main.main(["--no-ui", "--size", "4"])

    out = capsys.readouterr().out
    assert "X played move #1 (row: 1 col: 1)" in out
    assert "Goodbye!" in out
