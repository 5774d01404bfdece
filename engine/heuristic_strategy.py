"""
HARD strategy for boards too large for exhaustive search.
An ordered cascade: win, block, fork, block fork, center, corners, edges.
"""

from typing import Optional, Tuple

from .board import Board, Mark
from .config import GameConfig
from .random_strategy import RandomStrategy
from .win_checker import WinChecker


class HeuristicStrategy:
    """
    Rule-based player for any board size.

    Rules are tried in order and the first one that applies wins:
    1. Complete our own run
    2. Block the opponent's run
    3. Create a fork (two threats at once)
    4. Block the opponent's fork
    5. Take the center (odd sizes only)
    6. Take the corner opposite the opponent's
    7. Take any corner
    8. Take any edge
    9. Random cell
    """

    def __init__(self, fallback: RandomStrategy, config: Optional[GameConfig] = None):
        self.fallback = fallback
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

    def choose(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Tuple[int, int]:
        rules = [
            ("win", lambda: self._find_win(board, ai_mark)),
            ("block", lambda: self._find_win(board, human_mark)),
            ("fork", lambda: self._find_fork(board, ai_mark)),
            ("block fork", lambda: self._find_fork(board, human_mark)),
            ("center", lambda: self._find_center(board)),
            ("opposite corner", lambda: self._find_opposite_corner(board, human_mark)),
            ("corner", lambda: self._find_first_empty(board, board.corners())),
            ("edge", lambda: self._find_first_empty(board, board.edge_cells())),
        ]

        for name, rule in rules:
            move = rule()
            if move is not None:
                if self.config.DEBUG_MODE:
                    print(f"AI rule '{name}' picked {move}")
                return move

        return self.fallback.choose(board)

    def _find_win(self, board: Board, player: Mark) -> Optional[Tuple[int, int]]:
        """First empty cell (row-major) where player wins immediately."""
        moves = self.win_checker.winning_moves(board, player)
        return moves[0] if moves else None

    def _find_fork(self, board: Board, player: Mark) -> Optional[Tuple[int, int]]:
        """First empty cell (row-major) where player creates two threats at once."""
        for row, col in board.empty_cells():
            if self.win_checker.count_threats(board, row, col, player) >= 2:
                return (row, col)
        return None

    def _find_center(self, board: Board) -> Optional[Tuple[int, int]]:
        center = board.center()
        if center is not None and board.get(*center) == Mark.EMPTY:
            return center
        return None

    def _find_opposite_corner(self, board: Board, human_mark: Mark) -> Optional[Tuple[int, int]]:
        """Empty corner point-symmetric to a corner the opponent holds."""
        last = board.size - 1
        for row, col in board.corners():
            opposite = (last - row, last - col)
            if board.get(row, col) == human_mark and board.get(*opposite) == Mark.EMPTY:
                return opposite
        return None

    def _find_first_empty(self, board: Board, cells) -> Optional[Tuple[int, int]]:
        for row, col in cells:
            if board.get(row, col) == Mark.EMPTY:
                return (row, col)
        return None
