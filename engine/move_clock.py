"""
Per-player move timer.
Accumulates thinking time so a drawn timed game can be decided
in favour of the faster player.
"""

import time
from typing import Callable, Dict, Optional

from .board import Mark


class MoveClock:
    """
    Accumulates elapsed seconds per mark.

    The engine itself never reads the clock; front-ends start it when a
    player is prompted and stop it once the move is applied.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._totals: Dict[Mark, float] = {Mark.X: 0.0, Mark.O: 0.0}
        self._running: Optional[Mark] = None
        self._started_at = 0.0

    def start(self, mark: Mark):
        """Start timing mark's move. Stops any running timer first."""
        if self._running is not None:
            self.stop()
        self._running = mark
        self._started_at = self._clock()

    def stop(self) -> float:
        """
        Stop the running timer.

        Returns:
            Seconds added for this move (0.0 if nothing was running).
        """
        if self._running is None:
            return 0.0
        elapsed = self._clock() - self._started_at
        self.add(self._running, elapsed)
        self._running = None
        return elapsed

    def add(self, mark: Mark, seconds: float):
        if seconds < 0:
            raise ValueError(f"Elapsed time cannot be negative: {seconds}")
        self._totals[mark] += seconds

    def total(self, mark: Mark) -> float:
        return self._totals[mark]

    def reset(self):
        self._totals = {Mark.X: 0.0, Mark.O: 0.0}
        self._running = None

    def break_draw(self) -> Mark:
        """
        Decide a drawn game on time.

        Returns:
            The mark that used less time, or Mark.EMPTY on an exact tie.
        """
        x_time = self._totals[Mark.X]
        o_time = self._totals[Mark.O]
        if x_time < o_time:
            return Mark.X
        if o_time < x_time:
            return Mark.O
        return Mark.EMPTY
