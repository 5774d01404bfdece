"""
Console front-end for the N-in-a-row game.

This script ties together:
- The game session (board, rules, turn order)
- The AI opponent (easy, medium, hard)
- The optional move clock for timed games

Run this script to play in the terminal!
"""

import time
from typing import Callable, Optional, Tuple

from engine import (
    Difficulty,
    GameConfig,
    GameError,
    GameMode,
    GameSession,
    Mark,
    MoveClock,
    MoveResult,
)
from engine.outcome import Draw, Win


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse "row col" (or "row,col") into a pair of ints.

    Raises:
        ValueError: Input is not two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'row col', got '{text.strip()}'")
    return int(parts[0]), int(parts[1])


class ConsoleGame:
    """
    Plays games in the terminal.

    Game flow:
    1. Whoever holds X moves first
    2. Human moves are read from input as "row col"
    3. The computer thinks for a moment, then moves
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        session: GameSession,
        timed: bool = False,
        config: Optional[GameConfig] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        sleep_fn: Optional[Callable[[float], None]] = None
    ):
        """
        Initialize the console game.

        Args:
            session: The game session to drive.
            timed: Track thinking time and break draws on it.
            config: Game configuration. Uses defaults if not provided.
            input_fn: Reads a line of input (swap out for scripted play).
            sleep_fn: Pauses before AI moves.
        """
        self.session = session
        self.config = config or GameConfig()
        self.clock = MoveClock() if timed else None
        self.input_fn = input_fn or input
        self.sleep_fn = sleep_fn or time.sleep

        self.session.subscribe(self._on_move)

    def _on_move(self, result: MoveResult):
        move = result.move
        print(f"\n>>> {move.player.symbol} plays ({move.row}, {move.col})")
        print(self.session.board.render())

    def play(self):
        """Play one game to the end."""
        board = self.session.board
        print(f"\nNew game: {board.size}x{board.size}, {board.win_length} in a row")
        print(board.render())

        while not self.session.is_finished:
            player = self.session.current_player

            if self.session.is_ai_turn:
                print(f"\n>>> Computer ({player.symbol}) is thinking...")
                self.sleep_fn(self.config.THINKING_DELAY_S)
                # The delay is for show, only the search is timed
                if self.clock is not None:
                    self.clock.start(player)
                self.session.play_ai_turn()
            else:
                if self.clock is not None:
                    self.clock.start(player)
                self._human_turn(player)

            if self.clock is not None:
                self.clock.stop()

        self._show_game_result()

    def _human_turn(self, player: Mark):
        """Prompt until a legal move is entered."""
        while True:
            text = self.input_fn(f"{player.symbol} to move (row col): ")
            try:
                row, col = parse_move(text)
                self.session.apply(row, col)
                return
            except ValueError as e:
                print(f"Invalid input: {e}")
            except GameError as e:
                print(f"Illegal move: {e}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        outcome = self.session.outcome
        if isinstance(outcome, Win):
            print(f"\n{outcome.player.symbol} wins with {list(outcome.winning_line)}")
        elif isinstance(outcome, Draw):
            print("\nIt's a draw!")
            if self.clock is not None:
                self._show_time_tiebreak()

    def _show_time_tiebreak(self):
        x_time = self.clock.total(Mark.X)
        o_time = self.clock.total(Mark.O)
        print(f"Time used - X: {x_time:.1f}s  O: {o_time:.1f}s")
        faster = self.clock.break_draw()
        if faster == Mark.EMPTY:
            print("Dead even on time too!")
        else:
            print(f"{faster.symbol} wins on time!")

    def play_again(self) -> bool:
        answer = self.input_fn("\nPlay again? (y/n): ")
        return answer.strip().lower().startswith("y")


def main(argv=None):
    """Main entry point."""
    import argparse

    config = GameConfig()

    parser = argparse.ArgumentParser(description="N-in-a-row")
    parser.add_argument(
        "--preset",
        type=int,
        choices=range(len(config.BOARD_PRESETS)),
        help="Board preset: " + ", ".join(
            f"{i}={size}x{size}/{win}" for i, (size, win) in enumerate(config.BOARD_PRESETS)
        )
    )
    parser.add_argument("--size", type=int, help="Board size (overrides --preset)")
    parser.add_argument("--win-length", type=int, help="Marks in a row needed to win")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.PLAYER_VS_COMPUTER.value,
        help="pvp = two humans, pvc = human vs computer"
    )
    parser.add_argument(
        "--difficulty",
        choices=[level.name.lower() for level in Difficulty],
        default="hard",
        help="Computer strength"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument("--seed", type=int, help="Seed for the computer's random choices")
    parser.add_argument(
        "--timed",
        action="store_true",
        help="Track thinking time and break draws on it"
    )
    parser.add_argument("--debug", action="store_true", help="Print engine diagnostics")

    args = parser.parse_args(argv)

    config.DEBUG_MODE = args.debug

    size, win_length = config.DEFAULT_SIZE, config.DEFAULT_WIN_LENGTH
    if args.preset is not None:
        size, win_length = config.preset(args.preset)
    if args.size is not None:
        size = args.size
        win_length = args.win_length
    elif args.win_length is not None:
        win_length = args.win_length

    try:
        session = GameSession(
            size=size,
            win_length=win_length,
            mode=GameMode(args.mode),
            difficulty=Difficulty[args.difficulty.upper()],
            human_mark=Mark.O if args.ai_first else Mark.X,
            seed=args.seed,
            config=config
        )
    except GameError as e:
        parser.error(str(e))

    game = ConsoleGame(session, timed=args.timed, config=config)

    try:
        while True:
            game.play()
            if not game.play_again():
                break
            session.reset()
            if game.clock is not None:
                game.clock.reset()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
