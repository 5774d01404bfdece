"""
Exhaustive search for small boards.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, Tuple

from .board import Board, Mark
from .config import GameConfig
from .win_checker import WinChecker


class MinimaxStrategy:
    """
    Plays optimally using Minimax with alpha-beta pruning.

    Only practical on 3x3 boards: it will win if possible,
    block the opponent if needed, and never lose.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the search.

        Args:
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def choose(self, board: Board, ai_mark: Mark, human_mark: Mark) -> Tuple[int, int]:
        """
        Get the best move for ai_mark.

        Each candidate is scored with a fresh search window so that root
        scores are exact and ties go to the first cell in row-major order.

        Returns:
            (row, col) of the best move.
        """
        self.moves_evaluated = 0

        valid_moves = board.empty_cells()
        if not valid_moves:
            raise AssertionError("No empty cells to choose from!")

        best_score = float('-inf')
        best_move = valid_moves[0]

        for row, col in valid_moves:
            new_board = board.with_mark(row, col, ai_mark)
            score = self._minimax(new_board, 0, False, ai_mark, human_mark)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        ai_mark: Mark,
        human_mark: Mark,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Score a position.

        Args:
            board: Position to evaluate.
            depth: Plies played since the root move.
            is_maximizing: True if it's the AI's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            WIN_SCORE - depth for an AI win, depth - WIN_SCORE for a loss,
            0 for a draw.
        """
        self.moves_evaluated += 1

        winner = self.win_checker.check_winner_full(board)

        if winner == ai_mark:
            return self.config.WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner == human_mark:
            return depth - self.config.WIN_SCORE  # Loss (prefer slower losses)

        valid_moves = board.empty_cells()

        if not valid_moves:
            return 0  # Draw

        if is_maximizing:
            max_score = float('-inf')
            for row, col in valid_moves:
                new_board = board.with_mark(row, col, ai_mark)
                score = self._minimax(new_board, depth + 1, False, ai_mark, human_mark, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for row, col in valid_moves:
                new_board = board.with_mark(row, col, human_mark)
                score = self._minimax(new_board, depth + 1, True, ai_mark, human_mark, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score
