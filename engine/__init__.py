"""
Engine for the N-in-a-row game.
Handles the board, rules, game session, and AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import GameError, ConfigError, IllegalMoveError, GameOverError
from .board import Board, Mark
from .outcome import Move, InProgress, Win, Draw, MoveResult
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .difficulty import Difficulty, GameMode
from .ai_player import AIPlayer, select_move
from .move_clock import MoveClock
from .game_session import GameSession
