"""
utils/color.py — Color value type and conversion helpers for Chroma Vision.

The game thinks in HSL: the generator perturbs saturation or lightness of
a base color, never hue. pygame draws in RGB, so the renderer converts
with HSLColor.to_rgb() at draw time.
"""

import colorsys
from dataclasses import dataclass, replace
from typing import Tuple

RGBColor = Tuple[int, int, int]


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp a value to [lo, hi].

    Args:
        value: The number to clamp.
        lo:    Lower bound (inclusive). Defaults to 0.
        hi:    Upper bound (inclusive). Defaults to 100.

    Returns:
        The clamped value.
    """
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class HSLColor:
    """An immutable point in HSL space.

    Attributes:
        h: Hue in degrees, [0, 360).
        s: Saturation in percent, [0, 100].
        l: Lightness in percent, [0, 100].
    """

    h: float
    s: float
    l: float

    def channel(self, name: str) -> float:
        """Return the value of channel "h", "s" or "l"."""
        if name not in ("h", "s", "l"):
            raise ValueError(f"Unknown HSL channel: {name!r}")
        return getattr(self, name)

    def with_channel(self, name: str, value: float) -> "HSLColor":
        """Return a copy with one channel replaced.

        Args:
            name:  "h", "s" or "l".
            value: New value for that channel. Not clamped.

        Returns:
            A new HSLColor; self is untouched.
        """
        if name not in ("h", "s", "l"):
            raise ValueError(f"Unknown HSL channel: {name!r}")
        return replace(self, **{name: value})

    def to_rgb(self) -> RGBColor:
        """Convert to an 8-bit RGB tuple suitable for pygame.draw calls.

        Saturation and lightness are clamped to [0, 100] first so a
        hand-built color can never produce an invalid pygame color.
        """
        r, g, b = colorsys.hls_to_rgb(
            (self.h % 360.0) / 360.0,
            clamp(self.l) / 100.0,
            clamp(self.s) / 100.0,
        )
        return (round(r * 255), round(g * 255), round(b * 255))

    def to_css(self) -> str:
        """Return the color as a CSS hsl() string, e.g. "hsl(200, 70%, 50%)"."""
        return f"hsl({self.h:g}, {self.s:g}%, {self.l:g}%)"

