"""
Tests for the board and move legality.
"""

import numpy as np
import pytest

from engine import Board, ConfigError, Mark, MoveValidator


@pytest.mark.parametrize("size, win_length", [(2, 2), (3, 2), (4, 5), (5, 1)])
def test_invalid_geometry_is_rejected(size, win_length):
    with pytest.raises(ConfigError):
        Board(size, win_length)


def test_win_length_defaults_to_size():
    board = Board(4)
    assert board.size == 4
    assert board.win_length == 4


def test_new_board_is_empty():
    board = Board(5, 4)
    assert board.move_count() == 0
    assert not board.is_full()
    assert len(board.empty_cells()) == 25
    assert all(mark == Mark.EMPTY for mark in board.snapshot().values())


def test_every_empty_cell_is_legal_until_set():
    validator = MoveValidator()
    board = Board(4, 3)

    for row, col in board.empty_cells():
        assert validator.is_legal_move(board, row, col)
        board.set(row, col, Mark.X if (row + col) % 2 else Mark.O)
        assert not validator.is_legal_move(board, row, col)

    assert board.is_full()
    assert board.move_count() == 16


def test_out_of_range_is_illegal():
    validator = MoveValidator()
    board = Board(3)
    for row, col in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
        assert not validator.is_legal_move(board, row, col)
        result = validator.validate_move(board, row, col)
        assert not result.is_valid
        assert "Invalid position" in result.error_message


@pytest.mark.parametrize("row, col", [(1.5, 0), ("1", 0), (True, 0), (0, None)])
def test_non_integer_coordinates_are_illegal(row, col):
    validator = MoveValidator()
    board = Board(3)
    assert not validator.is_legal_move(board, row, col)
    result = validator.validate_move(board, row, col)
    assert not result.is_valid
    assert "must be integers" in result.error_message


def test_numpy_integer_coordinates_are_legal():
    assert MoveValidator().is_legal_move(Board(3), np.int64(1), np.int64(2))


def test_validate_move_reports_game_over_first():
    result = MoveValidator().validate_move(Board(3), 0, 0, game_over=True)
    assert not result.is_valid
    assert result.game_over


def test_set_on_occupied_cell_is_an_error():
    board = Board(3)
    board.set(1, 1, Mark.X)
    with pytest.raises(AssertionError):
        board.set(1, 1, Mark.O)
    assert board.get(1, 1) == Mark.X


def test_set_off_board_is_an_error():
    board = Board(3)
    with pytest.raises(AssertionError):
        board.set(-1, 0, Mark.X)
    with pytest.raises(AssertionError):
        board.set(0, 3, Mark.X)
    assert board.move_count() == 0


def test_clone_shares_nothing():
    board = Board.from_rows(["X..", ".O.", "..."])
    copy = board.clone()
    assert copy == board

    copy.set(2, 2, Mark.X)
    assert board.get(2, 2) == Mark.EMPTY
    assert copy != board


def test_with_mark_leaves_original_untouched():
    board = Board(3)
    placed = board.with_mark(0, 2, Mark.O)
    assert placed.get(0, 2) == Mark.O
    assert board.get(0, 2) == Mark.EMPTY


def test_from_rows():
    board = Board.from_rows(["XO_", " x.", "..o"], win_length=3)
    assert board.get(0, 0) == Mark.X
    assert board.get(0, 1) == Mark.O
    assert board.get(1, 1) == Mark.X
    assert board.get(2, 2) == Mark.O
    assert board.move_count() == 4


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ConfigError):
        Board.from_rows(["XO.", "X.", "..."])


def test_geometry_helpers_odd_board():
    board = Board(3)
    assert board.corners() == [(0, 0), (0, 2), (2, 0), (2, 2)]
    assert board.center() == (1, 1)
    assert board.edge_cells() == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_geometry_helpers_even_board():
    board = Board(4)
    assert board.center() is None
    assert board.corners() == [(0, 0), (0, 3), (3, 0), (3, 3)]
    assert board.edge_cells() == [(0, 1), (0, 2), (1, 0), (1, 3), (2, 0), (2, 3), (3, 1), (3, 2)]


def test_render_shows_marks_and_labels():
    text = Board.from_rows(["X..", ".O.", "..."]).render()
    lines = text.splitlines()
    assert lines[0].split() == ["0", "1", "2"]
    assert lines[1].split() == ["0", "X", ".", "."]
    assert lines[2].split() == ["1", ".", "O", "."]


def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X
    assert Mark.EMPTY.opposite() == Mark.EMPTY
