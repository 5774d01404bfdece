"""
AI difficulty levels and game modes.
"""

from enum import Enum


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Half HARD, half EASY
    HARD = 3      # Win/block/fork cascade, full minimax on 3x3


class GameMode(Enum):
    """Who sits on the other side of the board."""
    PLAYER_VS_PLAYER = "pvp"
    PLAYER_VS_COMPUTER = "pvc"
