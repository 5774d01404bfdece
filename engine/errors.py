"""
Errors raised by the game engine.
"""


class GameError(Exception):
    """Base class for all engine errors."""


class ConfigError(GameError):
    """Invalid board size or win length."""


class IllegalMoveError(GameError):
    """Move is out of range or targets an occupied cell. State is unchanged."""


class GameOverError(GameError):
    """Move attempted after the game already finished."""
