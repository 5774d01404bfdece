"""
Tests for win detection, draw detection and classification.
"""

import numpy as np
import pytest

from engine import Board, Draw, InProgress, Mark, Move, Win, WinChecker


@pytest.fixture
def checker():
    return WinChecker()


def test_horizontal_win(checker):
    board = Board.from_rows([
        ".XXX.",
        ".....",
        "OOO..",
        ".....",
        ".....",
    ], win_length=4)
    assert checker.check_win_through(board, 0, 0, Mark.X)
    assert checker.check_win_through(board, 0, 4, Mark.X)
    assert not checker.check_win_through(board, 0, 0, Mark.O)


def test_vertical_win(checker):
    board = Board.from_rows([
        "O...",
        "O...",
        "O...",
        "....",
    ])
    assert checker.find_line_through(board, 3, 0, Mark.O) == ((0, 0), (1, 0), (2, 0), (3, 0))


def test_diagonal_down_right_win(checker):
    board = Board.from_rows([
        ".....",
        ".X...",
        "..X..",
        "...X.",
        ".....",
    ], win_length=4)
    assert checker.find_line_through(board, 4, 4, Mark.X) == ((1, 1), (2, 2), (3, 3), (4, 4))


def test_diagonal_down_left_win(checker):
    board = Board.from_rows([
        "....O",
        "...O.",
        ".....",
        ".O...",
        ".....",
    ], win_length=4)
    assert checker.find_line_through(board, 2, 2, Mark.O) == ((0, 4), (1, 3), (2, 2), (3, 1))


def test_no_false_win_across_a_gap(checker):
    board = Board.from_rows([
        "XX.X",
        "....",
        "....",
        "....",
    ])
    assert not checker.check_win_through(board, 1, 2, Mark.X)
    assert checker.winning_moves(board, Mark.X) == [(0, 2)]


def test_horizontal_is_reported_before_vertical(checker):
    board = Board.from_rows([
        ".XX",
        "X..",
        "X..",
    ])
    line = checker.find_line_through(board, 0, 0, Mark.X)
    assert line == ((0, 0), (0, 1), (0, 2))


def test_earliest_window_start_is_reported(checker):
    board = Board.from_rows([
        "XX.XX.",
        "......",
        "......",
        "......",
        "......",
        "......",
    ], win_length=3)
    assert checker.find_line_through(board, 0, 2, Mark.X) == ((0, 0), (0, 1), (0, 2))


def test_full_scan_finds_winner_and_line(checker):
    board = Board.from_rows([
        "X.O",
        "XO.",
        "O.X",
    ])
    winner, line = checker.find_winning_line(board)
    assert winner == Mark.O
    assert line == ((0, 2), (1, 1), (2, 0))
    assert checker.check_winner_full(board) == Mark.O


def test_full_scan_without_winner(checker):
    board = Board.from_rows([
        "XX.",
        "OO.",
        "...",
    ])
    assert checker.check_winner_full(board) == Mark.EMPTY
    assert checker.find_winning_line(board) == (Mark.EMPTY, None)


def test_full_scan_respects_win_length(checker):
    board = Board.from_rows([
        "OOO..",
        ".....",
        ".....",
        ".....",
        ".....",
    ], win_length=4)
    assert checker.check_winner_full(board) == Mark.EMPTY


@pytest.mark.parametrize("size, win_length", [(3, 3), (4, 4), (5, 4), (6, 5), (7, 3)])
def test_anchored_and_full_scan_agree(checker, size, win_length):
    rng = np.random.default_rng(size * 100 + win_length)

    for _ in range(15):
        board = Board(size, win_length)
        player = Mark.X
        while not board.is_full():
            empty_cells = board.empty_cells()
            row, col = empty_cells[int(rng.integers(len(empty_cells)))]

            anchored = checker.check_win_through(board, row, col, player)
            board.set(row, col, player)
            full = checker.check_winner_full(board)

            assert anchored == (full == player)
            if anchored:
                break
            assert full == Mark.EMPTY
            player = player.opposite()


def test_full_board_without_line_is_draw(checker):
    board = Board.from_rows([
        "XOX",
        "XOO",
        "OXX",
    ])
    assert checker.is_draw(board)
    assert checker.classify(board, Move(2, 2, Mark.X)) == Draw()


def test_classify_win(checker):
    board = Board.from_rows([
        "XXX",
        "OO.",
        "...",
    ])
    outcome = checker.classify(board, Move(0, 2, Mark.X))
    assert outcome == Win(player=Mark.X, winning_line=((0, 0), (0, 1), (0, 2)))


def test_classify_in_progress(checker):
    board = Board.from_rows([
        "X..",
        "...",
        "...",
    ])
    assert checker.classify(board, Move(0, 0, Mark.X)) == InProgress(next_to_move=Mark.O)


def test_win_on_last_cell_is_not_a_draw(checker):
    board = Board.from_rows([
        "XOX",
        "OXO",
        "OXX",
    ])
    assert not checker.is_draw(board)
    assert isinstance(checker.classify(board, Move(2, 2, Mark.X)), Win)


def test_count_threats(checker):
    board = Board.from_rows([
        ".OO.",
        "...O",
        "...O",
        "XX..",
    ])
    assert checker.count_threats(board, 0, 3, Mark.O) == 2
    assert checker.count_threats(board, 0, 0, Mark.O) == 1
    assert checker.count_threats(board, 1, 0, Mark.X) == 0


def test_threats_sharing_a_cell_count_once(checker):
    board = Board.from_rows([
        "X...O",
        ".....",
        "..X..",
        ".....",
        "O...X",
    ], win_length=4)
    assert checker.count_threats(board, 1, 1, Mark.X) == 1


def test_overlapping_windows_on_one_axis_are_one_threat(checker):
    board = Board.from_rows([
        "X..X.",
        ".....",
        ".....",
        ".....",
        ".....",
    ], win_length=3)
    # (0, 0)-(0, 2) and (0, 1)-(0, 3) are both finished by (0, 2)
    assert checker.count_threats(board, 0, 1, Mark.X) == 1
