"""
core/timer.py — Periodic countdown tick source for Chroma Vision.

The Ticker turns variable frame time into fixed-size ticks. While armed, it
accumulates dt from the frame loop and calls its callback once for every
whole TICK_INTERVAL_S that has passed, passing TICK_INTERVAL_S as the
elapsed time. It owns no game state; game.py wires the callback to
RoundEngine.tick and arms/disarms the ticker as the status changes.

Rules:
    - arm() always starts a fresh period with nothing accumulated.
    - disarm() drops any partial interval. No tick fires after it, even
      when disarm() is called from inside the callback mid-update.
    - Every arm() bumps a generation number; a loop started under an older
      generation stops as soon as it notices.

Usage:
    ticker = Ticker(engine.tick)
    ticker.arm()

    # each frame:
    ticker.update(dt)
"""

from __future__ import annotations
from typing import Callable

from settings import TICK_INTERVAL_S


class Ticker:
    """Fixed-cadence tick source driven by frame delta time.

    Attributes:
        interval:    Seconds per tick.
        _callback:   Called with `interval` once per tick.
        _armed:      True while ticks may fire.
        _elapsed:    Seconds accumulated toward the next tick.
        _generation: Incremented on every arm().
    """

    def __init__(
        self,
        callback: Callable[[float], object],
        interval: float = TICK_INTERVAL_S,
    ) -> None:
        """Initialise a disarmed ticker.

        Args:
            callback: Receives the tick size in seconds. Its return value
                      is ignored.
            interval: Tick cadence in seconds. Must be positive.

        Raises:
            ValueError: If interval is not positive.
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval:    float = interval
        self._callback          = callback
        self._armed:      bool  = False
        self._elapsed:    float = 0.0
        self._generation: int   = 0

    def arm(self) -> None:
        """Start a fresh ticking period, discarding any previous one."""
        self._generation += 1
        self._elapsed = 0.0
        self._armed = True

    def disarm(self) -> None:
        """Stop ticking. Safe to call when already disarmed."""
        self._armed = False
        self._elapsed = 0.0

    def is_armed(self) -> bool:
        """Return True if ticks may fire on the next update()."""
        return self._armed

    def update(self, dt: float) -> int:
        """Advance by dt seconds and fire any ticks that are due.

        Args:
            dt: Seconds since the last frame. Non-positive values are ignored.

        Returns:
            Number of ticks fired during this call.
        """
        if not self._armed or dt <= 0:
            return 0

        generation = self._generation
        self._elapsed += dt
        fired = 0
        while self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self._callback(self.interval)
            fired += 1
            # callback may have disarmed or re-armed us
            if not self._armed or self._generation != generation:
                break
        return fired
