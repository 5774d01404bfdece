"""
Engine configuration for the N-in-a-row game.
Board geometry defaults, presets, and debug settings.
"""

from .errors import ConfigError


class GameConfig:
    """
    Configuration class for the game engine.
    Change these values to tune the defaults!
    """

    # ==================== BOARD SETTINGS ====================
    # Presets offered to players as (size, win_length)
    BOARD_PRESETS = [(3, 3), (4, 4), (5, 4), (6, 5)]

    DEFAULT_SIZE = 3
    DEFAULT_WIN_LENGTH = 3

    # Smallest board / run the engine accepts
    MIN_SIZE = 3
    MIN_WIN_LENGTH = 3

    # ==================== AI SETTINGS ====================
    # Chance that MEDIUM plays a HARD move instead of a random one
    MEDIUM_HARD_PROBABILITY = 0.5

    # HARD solves boards of exactly this size with full minimax
    EXHAUSTIVE_SIZE = 3

    # Minimax terminal score (win = WIN_SCORE - depth)
    WIN_SCORE = 10

    # ==================== PRESENTATION ====================
    # Pause before an AI move is shown (seconds). Used by front-ends only.
    THINKING_DELAY_S = 0.6

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def preset(self, index: int):
        """
        Look up a board preset.

        Args:
            index: Position in BOARD_PRESETS.

        Returns:
            (size, win_length) tuple.
        """
        if not 0 <= index < len(self.BOARD_PRESETS):
            raise ConfigError(
                f"Unknown preset {index}. Must be 0-{len(self.BOARD_PRESETS) - 1}."
            )
        return self.BOARD_PRESETS[index]
