"""
Game session for the N-in-a-row game.
Tracks the board, whose turn it is, and the outcome.
"""

from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .ai_player import AIPlayer
from .board import Board, Mark
from .config import GameConfig
from .difficulty import Difficulty, GameMode
from .errors import GameOverError, IllegalMoveError
from .move_validator import MoveValidator
from .outcome import GameOutcome, InProgress, Move, MoveResult, describe
from .win_checker import WinChecker


class GameSession:
    """
    Orchestrates one game at a time.

    The session is the only owner of the board. Every move, human or AI,
    goes through the same guarded placement: it is validated, placed, and
    classified, and the resulting MoveResult is handed to every subscriber.
    In player vs computer mode apply() only accepts the human's moves; the
    computer's turn is played by play_ai_turn().

    X always moves first after a reset.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        win_length: Optional[int] = None,
        mode: GameMode = GameMode.PLAYER_VS_COMPUTER,
        difficulty: Difficulty = Difficulty.HARD,
        human_mark: Mark = Mark.X,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Start a new game.

        Args:
            size: Board size. Defaults to the config's DEFAULT_SIZE.
            win_length: Run length to win. Defaults to DEFAULT_WIN_LENGTH,
                or to size when only size is given.
            mode: Player vs player, or player vs computer.
            difficulty: AI difficulty (ignored in player vs player).
            human_mark: Mark the human plays against the computer.
            seed: Seed for the AI's randomness.
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.mode = mode
        self.human_mark = human_mark
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(human_mark.opposite(), difficulty, np.random.default_rng(seed), self.config)
        self._listeners: List[Callable[[MoveResult], None]] = []

        if size is None:
            size = self.config.DEFAULT_SIZE
            if win_length is None:
                win_length = self.config.DEFAULT_WIN_LENGTH

        self.board = Board(size, win_length)
        self.outcome: GameOutcome = InProgress(next_to_move=Mark.X)
        self.moves: List[Move] = []

    # ==================== STATE ====================

    @property
    def ai_mark(self) -> Mark:
        return self.ai.player

    @property
    def difficulty(self) -> Difficulty:
        return self.ai.difficulty

    @difficulty.setter
    def difficulty(self, value: Difficulty):
        self.ai.difficulty = value

    @property
    def is_finished(self) -> bool:
        return not isinstance(self.outcome, InProgress)

    @property
    def current_player(self) -> Optional[Mark]:
        """Mark to move, or None once the game is over."""
        if isinstance(self.outcome, InProgress):
            return self.outcome.next_to_move
        return None

    @property
    def is_ai_turn(self) -> bool:
        return (
            self.mode == GameMode.PLAYER_VS_COMPUTER
            and self.current_player == self.ai_mark
        )

    def board_snapshot(self) -> Dict[Tuple[int, int], Mark]:
        return self.board.snapshot()

    def subscribe(self, callback: Callable[[MoveResult], None]):
        """Register a callback that receives every MoveResult."""
        self._listeners.append(callback)

    # ==================== MOVES ====================

    def apply(self, row: int, col: int) -> MoveResult:
        """
        Place the current player's mark at (row, col).

        Raises:
            GameOverError: The game has already finished.
            IllegalMoveError: Off the board, the cell is taken, or it is the
                computer's turn. The session is left unchanged.
        """
        if self.is_ai_turn:
            raise IllegalMoveError("It's the computer's turn!")
        return self._apply(row, col)

    def _apply(self, row: int, col: int) -> MoveResult:
        result = self.validator.validate_move(self.board, row, col, self.is_finished)
        if not result.is_valid:
            if result.game_over:
                raise GameOverError(result.error_message)
            raise IllegalMoveError(result.error_message)

        move = Move(row=row, col=col, player=self.current_player)
        self.board.set(row, col, move.player)
        self.moves.append(move)
        self.outcome = self.win_checker.classify(self.board, move)

        if self.config.DEBUG_MODE:
            print(f"{move.player.symbol} played ({row}, {col}): {describe(self.outcome)}")

        move_result = MoveResult(move=move, outcome=self.outcome, board=self.board.snapshot())
        for listener in self._listeners:
            listener(move_result)
        return move_result

    def play_ai_turn(self) -> MoveResult:
        """
        Let the computer pick and play its move.

        Any pause before showing the move is up to the caller.
        """
        if self.is_finished:
            raise GameOverError("Game is already over!")
        if not self.is_ai_turn:
            raise AssertionError("It's not the AI's turn!")

        row, col = self.ai.get_best_move(self.board)

        if not self.validator.is_legal_move(self.board, row, col):
            raise AssertionError(f"AI picked an illegal cell ({row}, {col})")

        return self._apply(row, col)

    # ==================== RESET ====================

    def reset(
        self,
        size: Optional[int] = None,
        win_length: Optional[int] = None,
        seed: Optional[int] = None
    ):
        """
        Throw away the current game and start a fresh one with X to move.

        Args:
            size: New board size. Keeps the current size if omitted.
            win_length: New run length. Keeps the current one if neither
                argument is given, else defaults to size.
            seed: Reseed the AI's randomness for a reproducible game.
        """
        if size is None and win_length is None:
            size, win_length = self.board.size, self.board.win_length
        elif size is None:
            size = self.board.size

        # A bad size must leave the current game intact
        board = Board(size, win_length)

        self.board = board
        self.outcome = InProgress(next_to_move=Mark.X)
        self.moves = []

        if seed is not None:
            self.ai.reseed(np.random.default_rng(seed))

        if self.config.DEBUG_MODE:
            print(f"New game: {board.size}x{board.size}, {board.win_length} in a row")
