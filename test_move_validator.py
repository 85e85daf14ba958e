"""Tests for move validation."""

from logic.game_state import GameState
from logic.move_validator import MoveValidator


def test_valid_move():
    result = MoveValidator().validate_move(GameState(), 1, 1)
    assert result.is_valid
    assert result.error_message is None


def test_occupied_cell():
    game = GameState()
    game.make_move_at(1, 1)
    result = MoveValidator().validate_move(game, 1, 1)
    assert not result.is_valid
    assert "occupied by X" in result.error_message


def test_out_of_range():
    validator = MoveValidator()
    game = GameState(board_size=4)
    assert validator.validate_move(game, 3, 3).is_valid
    result = validator.validate_move(game, 4, 0)
    assert not result.is_valid
    assert "Must be 1-4" in result.error_message
    assert not validator.validate_index(game, 16).is_valid
    assert validator.validate_index(game, 15).is_valid


def test_game_over_after_win():
    game = GameState()
    for index in (0, 3, 1, 4, 2):
        game.make_move(index)
    validator = MoveValidator()
    result = validator.validate_move(game, 2, 2)
    assert not result.is_valid
    assert "X won" in result.error_message
    assert validator.get_valid_moves(game) == []


def test_game_over_after_draw():
    game = GameState()
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        game.make_move(index)
    result = MoveValidator().validate_index(game, 0)
    assert not result.is_valid
    assert "drawn" in result.error_message


def test_board_size():
    validator = MoveValidator()
    assert validator.validate_board_size(20).is_valid
    result = validator.validate_board_size(12)
    assert not result.is_valid
    assert "3, 4, 5" in result.error_message


def test_get_valid_moves():
    game = GameState()
    game.make_move_at(0, 0)
    moves = MoveValidator().get_valid_moves(game)
    assert len(moves) == 8
    assert (0, 0) not in moves
