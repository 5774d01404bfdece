"""
Moves and game outcomes reported by the engine.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .board import Mark


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    row: int
    col: int
    player: Mark


@dataclass(frozen=True)
class InProgress:
    """Game continues; next_to_move plays next."""
    next_to_move: Mark


@dataclass(frozen=True)
class Win:
    """
    A player completed a run.

    winning_line holds the win_length coordinates of the run, in scan order.
    """
    player: Mark
    winning_line: Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class Draw:
    """Board is full and nobody won."""


GameOutcome = Union[InProgress, Win, Draw]


@dataclass
class MoveResult:
    """What the engine reports after every applied move."""
    move: Move
    outcome: GameOutcome
    board: Dict[Tuple[int, int], Mark] = field(default_factory=dict)

    @property
    def is_terminal(self) -> bool:
        return not isinstance(self.outcome, InProgress)


def describe(outcome: GameOutcome) -> str:
    """Short human-readable description of an outcome."""
    if isinstance(outcome, Win):
        return f"{outcome.player.symbol} wins"
    if isinstance(outcome, Draw):
        return "Draw"
    return f"{outcome.next_to_move.symbol} to move"
