"""
Win checker for the N-in-a-row game.
Checks if a player has won or if the game is a draw.
"""

from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Mark
from .outcome import Draw, GameOutcome, InProgress, Move, Win

Line = Tuple[Tuple[int, int], ...]

# Axis directions in detection order:
# horizontal, vertical, diagonal down-right, diagonal down-left
AXES = [(0, 1), (1, 0), (1, 1), (1, -1)]


@lru_cache(maxsize=None)
def _all_windows(size: int, win_length: int) -> Tuple[Tuple[Line, ...], np.ndarray, np.ndarray]:
    """
    Every run of win_length cells on a size x size board.

    Ordered by axis, then by start cell in row-major order.

    Returns:
        (lines, row_index, col_index) where the index arrays have shape
        (number of lines, win_length) for fancy indexing into Board.cells.
    """
    lines = []
    for dr, dc in AXES:
        for row in range(size):
            for col in range(size):
                end_row = row + dr * (win_length - 1)
                end_col = col + dc * (win_length - 1)
                if 0 <= end_row < size and 0 <= end_col < size:
                    lines.append(tuple((row + dr * k, col + dc * k) for k in range(win_length)))

    index = np.array(lines, dtype=np.intp)
    return tuple(lines), index[:, :, 0], index[:, :, 1]


class WinChecker:
    """
    Checks for win conditions.

    Win condition: win_length marks of the same player in a row
    (horizontally, vertically, or diagonally).
    """

    # ==================== ANCHORED DETECTION ====================

    def _windows_through(self, board: Board, row: int, col: int):
        """
        Yield every in-bounds window of win_length cells that contains (row, col).

        Order: axis (see AXES), then window start position along the axis.
        """
        n = board.win_length
        for dr, dc in AXES:
            for back in range(n - 1, -1, -1):
                start_row = row - dr * back
                start_col = col - dc * back
                end_row = start_row + dr * (n - 1)
                end_col = start_col + dc * (n - 1)
                if board.in_bounds(start_row, start_col) and board.in_bounds(end_row, end_col):
                    yield tuple((start_row + dr * k, start_col + dc * k) for k in range(n))

    def find_line_through(self, board: Board, row: int, col: int, player: Mark) -> Optional[Line]:
        """
        Find a winning run through (row, col), treating that cell as holding player.

        Returns:
            The first winning line found, or None.
        """
        for line in self._windows_through(board, row, col):
            if all((r, c) == (row, col) or board.cells[r, c] == player for r, c in line):
                return line
        return None

    def check_win_through(self, board: Board, row: int, col: int, player: Mark) -> bool:
        """True iff player at (row, col) completes a run of win_length."""
        return self.find_line_through(board, row, col, player) is not None

    def count_threats(self, board: Board, row: int, col: int, player: Mark) -> int:
        """
        Count the one-move-from-winning threats created by player at (row, col).

        A threat is a line through (row, col) holding win_length - 1 of
        player's marks and exactly one empty cell. Lines that share the same
        empty cell count once, since a single reply there blocks all of them.
        So when win_length < size, two overlapping windows on one axis that
        are finished by the same cell are a single threat, not a fork.

        Returns:
            Number of distinct cells that would complete a threat.
        """
        finishing_cells = set()
        for line in self._windows_through(board, row, col):
            empties = []
            blocked = False
            for r, c in line:
                if (r, c) == (row, col):
                    continue
                mark = board.cells[r, c]
                if mark == Mark.EMPTY:
                    empties.append((r, c))
                elif mark != player:
                    blocked = True
                    break
            if not blocked and len(empties) == 1:
                finishing_cells.add(empties[0])
        return len(finishing_cells)

    # ==================== FULL-BOARD DETECTION ====================

    def find_winning_line(self, board: Board) -> Tuple[Mark, Optional[Line]]:
        """
        Scan the whole board for a completed run.

        Returns:
            (winning mark, line) for the first run found, or (Mark.EMPTY, None).
        """
        lines, rows, cols = _all_windows(board.size, board.win_length)
        values = board.cells[rows, cols]
        first = values[:, 0]
        complete = (first != Mark.EMPTY) & np.all(values == first[:, None], axis=1)

        if not complete.any():
            return Mark.EMPTY, None

        index = int(np.argmax(complete))
        return Mark(int(first[index])), lines[index]

    def check_winner_full(self, board: Board) -> Mark:
        """The mark forming a complete run anywhere on the board, or Mark.EMPTY."""
        winner, _ = self.find_winning_line(board)
        return winner

    def is_draw(self, board: Board) -> bool:
        """Board is full and nobody has won."""
        return board.is_full() and self.check_winner_full(board) == Mark.EMPTY

    # ==================== CLASSIFICATION ====================

    def classify(self, board: Board, last_move: Move) -> GameOutcome:
        """
        Classify the board right after last_move was placed on it.

        Returns:
            Win, Draw, or InProgress with the opposite mark to move.
        """
        line = self.find_line_through(board, last_move.row, last_move.col, last_move.player)
        if line is not None:
            return Win(player=last_move.player, winning_line=line)

        if self.is_draw(board):
            return Draw()

        return InProgress(next_to_move=last_move.player.opposite())

    def winning_moves(self, board: Board, player: Mark) -> List[Tuple[int, int]]:
        """Empty cells where player would win immediately, row-major."""
        return [
            (row, col)
            for row, col in board.empty_cells()
            if self.check_win_through(board, row, col, player)
        ]
