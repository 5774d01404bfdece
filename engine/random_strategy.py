"""
EASY strategy: uniform random choice among empty cells.
"""

from typing import Tuple

import numpy as np

from .board import Board


class RandomStrategy:
    """Picks any empty cell with equal probability. No look-ahead."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def choose(self, board: Board) -> Tuple[int, int]:
        empty_cells = board.empty_cells()
        if not empty_cells:
            raise AssertionError("No empty cells to choose from!")
        return empty_cells[int(self.rng.integers(len(empty_cells)))]
