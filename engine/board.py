"""
Board for the N-in-a-row game.
Owns the grid of marks and the board geometry (size, win length).
"""

from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np

from .config import GameConfig
from .errors import ConfigError


class Mark(IntEnum):
    """The contents of a cell."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the opposing mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Mark.EMPTY: ".", Mark.X: "X", Mark.O: "O"}

# Characters accepted by Board.from_rows
_PARSE = {".": Mark.EMPTY, "_": Mark.EMPTY, " ": Mark.EMPTY, "X": Mark.X, "O": Mark.O}


class Board:
    """
    A size x size grid of marks.

    The board knows nothing about players or turns. Callers are expected
    to check legality (see MoveValidator) before calling set().
    """

    def __init__(self, size: int = GameConfig.DEFAULT_SIZE, win_length: Optional[int] = None):
        """
        Create an empty board.

        Args:
            size: Number of rows and columns (>= 3).
            win_length: Marks in a row needed to win. Defaults to size.
        """
        if win_length is None:
            win_length = size

        if size < GameConfig.MIN_SIZE:
            raise ConfigError(f"Board size {size} is too small. Must be at least {GameConfig.MIN_SIZE}.")
        if win_length < GameConfig.MIN_WIN_LENGTH or win_length > size:
            raise ConfigError(
                f"Win length {win_length} is invalid for a {size}x{size} board. "
                f"Must be {GameConfig.MIN_WIN_LENGTH}-{size}."
            )

        self.size = size
        self.win_length = win_length
        self.cells = np.full((size, size), Mark.EMPTY, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: List[str], win_length: Optional[int] = None) -> "Board":
        """
        Build a board from text rows, e.g. ["XX.", "OO.", "..."].

        '.', '_' and ' ' are empty cells.
        """
        board = cls(len(rows), win_length)
        for row, line in enumerate(rows):
            if len(line) != board.size:
                raise ConfigError(f"Row {row} has {len(line)} cells, expected {board.size}.")
            for col, char in enumerate(line.upper()):
                board.cells[row, col] = _PARSE[char]
        return board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Mark:
        return Mark(int(self.cells[row, col]))

    def set(self, row: int, col: int, mark: Mark):
        """
        Place a mark on an empty cell.

        Placing off the board or on an occupied cell is a programming error.
        """
        if not self.in_bounds(row, col):
            raise AssertionError(f"Cell ({row}, {col}) is off the {self.size}x{self.size} board")
        if self.cells[row, col] != Mark.EMPTY:
            raise AssertionError(f"Cell ({row}, {col}) is already occupied by {self.get(row, col).symbol}")
        self.cells[row, col] = mark

    def is_full(self) -> bool:
        return not np.any(self.cells == Mark.EMPTY)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        return [(int(r), int(c)) for r, c in np.argwhere(self.cells == Mark.EMPTY)]

    def move_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def clone(self) -> "Board":
        """Copy the board. The copy shares no mutable state with the original."""
        board = Board.__new__(Board)
        board.size = self.size
        board.win_length = self.win_length
        board.cells = self.cells.copy()
        return board

    def with_mark(self, row: int, col: int, mark: Mark) -> "Board":
        """Return a copy with one extra mark placed."""
        board = self.clone()
        board.set(row, col, mark)
        return board

    def snapshot(self) -> Dict[Tuple[int, int], Mark]:
        """Mapping of every coordinate to its mark, for rendering."""
        return {
            (row, col): self.get(row, col)
            for row in range(self.size)
            for col in range(self.size)
        }

    # ==================== GEOMETRY ====================

    def corners(self) -> List[Tuple[int, int]]:
        """Corners in fixed order: top-left, top-right, bottom-left, bottom-right."""
        last = self.size - 1
        return [(0, 0), (0, last), (last, 0), (last, last)]

    def center(self) -> Optional[Tuple[int, int]]:
        """The single center cell, or None when the size is even."""
        if self.size % 2 == 0:
            return None
        mid = self.size // 2
        return (mid, mid)

    def edge_cells(self) -> List[Tuple[int, int]]:
        """Border cells that are not corners, in row-major order."""
        last = self.size - 1
        corners = set(self.corners())
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if (row in (0, last) or col in (0, last)) and (row, col) not in corners
        ]

    # ==================== DISPLAY ====================

    def render(self) -> str:
        """Text picture of the board with row/column labels."""
        width = len(str(self.size - 1))
        header = " " * (width + 1) + " ".join(str(col).rjust(width) for col in range(self.size))
        lines = [header]
        for row in range(self.size):
            marks = " ".join(self.get(row, col).symbol.rjust(width) for col in range(self.size))
            lines.append(f"{str(row).rjust(width)} {marks}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(size={self.size}, win_length={self.win_length}, moves={self.move_count()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.win_length == other.win_length
            and bool(np.array_equal(self.cells, other.cells))
        )
