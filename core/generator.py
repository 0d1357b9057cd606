"""
core/generator.py — Procedural level generator for Chroma Vision.

Each level is a fresh random base color plus one target swatch that differs
in saturation or lightness. The difference shrinks exponentially with level:

    delta(level) = max(MIN_DELTA, BASE_DELTA * DELTA_DECAY ** level)

The target channel always moves away from the 50% midpoint, so with the
sampling ranges in settings.py it can never leave [0, 100]. That bound is
checked once at import time; changing the constants in a way that breaks it
raises immediately instead of producing clipped, unsolvable puzzles.

Randomness comes from an injected random.Random, so tests can seed it.

Usage:
    generator = LevelGenerator(random.Random(7))
    rnd = generator.generate(level=0)
"""

from __future__ import annotations
import random

from core.session import Round
from settings import (
    BASE_DELTA, DELTA_DECAY, MIN_DELTA,
    HUE_RANGE, SATURATION_RANGE, LIGHTNESS_RANGE, CHANNEL_MIDPOINT,
    GRID_CELLS,
)
from utils.color import HSLColor


def random_color(rng: random.Random) -> HSLColor:
    """Sample a base color with three independent uniform draws.

    Args:
        rng: Random source. Consumed, never stored.

    Returns:
        HSLColor with h in HUE_RANGE, s in SATURATION_RANGE and l in
        LIGHTNESS_RANGE (all half-open).
    """
    return HSLColor(
        h=_uniform_half_open(rng, HUE_RANGE),
        s=_uniform_half_open(rng, SATURATION_RANGE),
        l=_uniform_half_open(rng, LIGHTNESS_RANGE),
    )


def _uniform_half_open(rng: random.Random, bounds: tuple[float, float]) -> float:
    # rng.random() is in [0, 1), unlike rng.uniform which may hit the top
    lo, hi = bounds
    return lo + rng.random() * (hi - lo)


def difficulty_delta(level: int) -> float:
    """Return the channel difference for a level, in percentage points.

    Non-increasing in level and never below MIN_DELTA, so every puzzle
    stays solvable however far the player gets.

    Args:
        level: 0-based level index.

    Raises:
        ValueError: If level is negative.
    """
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")
    return max(MIN_DELTA, BASE_DELTA * DELTA_DECAY ** level)


def perturb(base: HSLColor, channel: str, delta: float) -> HSLColor:
    """Shift one channel of base by delta, away from the midpoint.

    Values above CHANNEL_MIDPOINT move down, everything else moves up.
    """
    value = base.channel(channel)
    direction = -1.0 if value > CHANNEL_MIDPOINT else 1.0
    return base.with_channel(channel, value + direction * delta)


def _check_bounds() -> None:
    """Verify no base value in the sampling ranges can be pushed out of [0, 100].

    Worst cases per channel: both range endpoints, and when the range
    contains the midpoint, the midpoint itself (moves up) and values just
    above it (move down, toward CHANNEL_MIDPOINT - largest).

    Reads the module-level constants at call time.

    Raises:
        RuntimeError: If any worst case leaves [0, 100], or MIN_DELTA is
                      not positive.
    """
    largest = max(BASE_DELTA, MIN_DELTA)
    for name, (lo, hi) in (("s", SATURATION_RANGE), ("l", LIGHTNESS_RANGE)):
        shifted = []
        for edge in (lo, hi):
            direction = -1.0 if edge > CHANNEL_MIDPOINT else 1.0
            shifted.append((edge, edge + direction * largest))
        if lo <= CHANNEL_MIDPOINT < hi:
            shifted.append((CHANNEL_MIDPOINT, CHANNEL_MIDPOINT + largest))
            shifted.append((CHANNEL_MIDPOINT, CHANNEL_MIDPOINT - largest))

        for value, result in shifted:
            if not 0.0 <= result <= 100.0:
                raise RuntimeError(
                    f"Channel {name!r} base value {value} shifted by {largest} "
                    f"leaves [0, 100]. Check the difficulty and sampling "
                    f"constants in settings.py."
                )
    if MIN_DELTA <= 0:
        raise RuntimeError("MIN_DELTA must be positive or puzzles become unsolvable.")


_check_bounds()


class LevelGenerator:
    """Builds a Round for any level from an injected random source.

    Attributes:
        rng: The random.Random used for every draw. Seed it for
             reproducible sequences of rounds.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialise the generator.

        Args:
            rng: Random source. A fresh, OS-seeded random.Random if omitted.
        """
        self.rng: random.Random = rng if rng is not None else random.Random()

    def generate(self, level: int) -> Round:
        """Return a new Round for the given level.

        Draws, in order: base color, channel (lightness or saturation with
        equal probability), target cell. No state carries over from earlier
        rounds, so the target cell may repeat.

        Args:
            level: 0-based level index.

        Returns:
            A new, immutable Round.
        """
        base    = random_color(self.rng)
        delta   = difficulty_delta(level)
        channel = "l" if self.rng.random() < 0.5 else "s"
        target  = perturb(base, channel, delta)
        index   = self.rng.randrange(GRID_CELLS)

        return Round(
            level=level,
            base_color=base,
            target_color=target,
            target_index=index,
            channel=channel,
            delta=delta,
        )
