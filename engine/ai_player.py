"""
AI player for the N-in-a-row game.
Picks a move for the computer according to the difficulty level.
"""

from typing import Optional, Tuple

import numpy as np

from .board import Board, Mark
from .config import GameConfig
from .difficulty import Difficulty
from .heuristic_strategy import HeuristicStrategy
from .minimax_strategy import MinimaxStrategy
from .random_strategy import RandomStrategy


class AIPlayer:
    """
    The computer opponent.

    EASY plays random cells. MEDIUM flips a coin between HARD and EASY on
    every move. HARD solves 3x3 boards exactly with Minimax and uses a
    win/block/fork cascade on larger boards.

    The board passed in is never modified: all look-ahead works on copies.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI places (default: O).
            difficulty: How well the AI plays.
            rng: Randomness source shared by every strategy.
            config: Game configuration. Uses defaults if not provided.
        """
        self.player = player
        self.difficulty = difficulty
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.random_strategy = RandomStrategy(self.rng)
        self.heuristic_strategy = HeuristicStrategy(self.random_strategy, self.config)
        self.minimax_strategy = MinimaxStrategy(self.config)

    @property
    def opponent(self) -> Mark:
        return self.player.opposite()

    def reseed(self, rng: np.random.Generator):
        """Swap the randomness source for every strategy."""
        self.rng = rng
        self.random_strategy.rng = rng

    def get_best_move(self, board: Board) -> Tuple[int, int]:
        """
        Get a move for the current position.

        Args:
            board: Current board. Must have at least one empty cell.

        Returns:
            (row, col) of the chosen move.
        """
        if board.is_full():
            raise AssertionError("AI asked to move on a full board!")

        if self.difficulty == Difficulty.EASY:
            return self._get_easy_move(board)
        elif self.difficulty == Difficulty.MEDIUM:
            return self._get_medium_move(board)
        return self._get_hard_move(board)

    def _get_easy_move(self, board: Board) -> Tuple[int, int]:
        return self.random_strategy.choose(board)

    def _get_medium_move(self, board: Board) -> Tuple[int, int]:
        if self.rng.random() < self.config.MEDIUM_HARD_PROBABILITY:
            return self._get_hard_move(board)
        return self._get_easy_move(board)

    def _get_hard_move(self, board: Board) -> Tuple[int, int]:
        if board.size == self.config.EXHAUSTIVE_SIZE:
            return self.minimax_strategy.choose(board, self.player, self.opponent)
        return self.heuristic_strategy.choose(board, self.player, self.opponent)


def select_move(
    board: Board,
    difficulty: Difficulty,
    ai_mark: Mark,
    human_mark: Mark,
    rng: Optional[np.random.Generator] = None
) -> Tuple[int, int]:
    """
    Choose a move for ai_mark without keeping an AIPlayer around.

    Both marks must be X or O, and human_mark must be the opposite of ai_mark.
    """
    if ai_mark == Mark.EMPTY or human_mark == Mark.EMPTY:
        raise ValueError("Marks must be X or O, not empty")
    if human_mark != ai_mark.opposite():
        raise ValueError(f"Marks must differ: ai={ai_mark.symbol}, human={human_mark.symbol}")
    return AIPlayer(ai_mark, difficulty, rng).get_best_move(board)
