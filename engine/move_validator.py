"""
Move validator for the N-in-a-row game.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .board import Board, Mark


def is_coordinate(value) -> bool:
    """True for Python or numpy integers, excluding bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    game_over: bool = False


class MoveValidator:
    """
    Validates moves.

    Rules:
    1. Coordinates must be integers on the board
    2. Can only place on empty cells
    3. Game must not be over
    """

    def is_legal_move(self, board: Board, row: int, col: int) -> bool:
        """True iff (row, col) is on the board and empty."""
        return (
            is_coordinate(row)
            and is_coordinate(col)
            and board.in_bounds(row, col)
            and board.get(row, col) == Mark.EMPTY
        )

    def validate_move(
        self,
        board: Board,
        row: int,
        col: int,
        game_over: bool = False
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark.
            col: Column to place the mark.
            game_over: Whether the game has already finished.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!",
                game_over=True
            )

        if not (is_coordinate(row) and is_coordinate(col)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row!r}, {col!r}). Row and column must be integers."
            )

        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{board.size - 1}."
            )

        if board.get(row, col) != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.get(row, col).symbol}"
            )

        return ValidationResult(is_valid=True)
