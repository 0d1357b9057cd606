"""
core/session.py — Observable game state for Chroma Vision.

Holds the value types the engine hands out:
    - Status   — idle / playing / gameover lifecycle
    - Round    — one puzzle: base color, target color, target cell, level
    - Session  — the full snapshot: status, score, time left, current round

All three are immutable. RoundEngine (core/engine.py) builds a new Session
on every state change; the presentation layer only ever reads them.

Usage:
    session = engine.current_session()
    if session.status is Status.GAMEOVER:
        print(session.score, session.level, session.accuracy())
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum

from settings import GRID_SIZE, MAX_TIME_S
from utils.color import HSLColor


class Status(Enum):
    """Lifecycle states of a session."""
    IDLE     = "idle"
    PLAYING  = "playing"
    GAMEOVER = "gameover"


@dataclass(frozen=True)
class Round:
    """Configuration of the active level.

    Attributes:
        level:        0-based level index. Increments on each correct pick.
        base_color:   Color shared by every non-target swatch.
        target_color: The odd swatch's color. Differs from base_color in
                      exactly one of saturation or lightness.
        target_index: Cell holding target_color, in [0, GRID_SIZE**2).
        channel:      Which channel was perturbed, "s" or "l".
        delta:        Unsigned size of the perturbation in percentage points.
    """

    level:        int
    base_color:   HSLColor
    target_color: HSLColor
    target_index: int
    channel:      str
    delta:        float

    def color_at(self, index: int) -> HSLColor:
        """Return the color to draw at a grid cell."""
        return self.target_color if index == self.target_index else self.base_color


@dataclass(frozen=True)
class Session:
    """Read-only snapshot of the engine's state.

    Attributes:
        status:    Current lifecycle state.
        score:     Correct identifications this game.
        time_left: Seconds remaining, in [0, MAX_TIME_S].
        round:     The active Round, or None before the first start().
    """

    status:    Status       = Status.IDLE
    score:     int          = 0
    time_left: float        = MAX_TIME_S
    round:     Round | None = None

    @property
    def level(self) -> int:
        """Level reached; 0 before any round has been generated."""
        return self.round.level if self.round is not None else 0

    @property
    def grid_size(self) -> int:
        """Side length of the swatch grid; the grid holds grid_size**2 cells."""
        return GRID_SIZE

    def accuracy(self) -> int:
        """Return the end-of-game accuracy as a whole percentage.

        Computed as score / level, so it counts correct answers against
        rounds reached, not against attempts. Wrong picks never advance
        the level and therefore never enter the denominator.

        Returns:
            round(score / level * 100) rounded half-up, or 0 at level 0.
        """
        if self.level <= 0:
            return 0
        return math.floor(self.score / self.level * 100 + 0.5)
