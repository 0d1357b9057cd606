"""
renderer/grid.py — Swatch grid layout and hit detection for Chroma Vision.

SwatchGrid lays out the GRID_SIZE x GRID_SIZE swatches, turns a click into
a cell index, and draws the current Round. It holds layout only; which cell
is the odd one out comes from the Round passed to render().

Cells are numbered row-major: index = row * cols + col.

The grid is centered horizontally and placed in the middle of the space
between the header and the help footer.
"""

import pygame
from settings import (
    SCREEN_W, SCREEN_H, HEADER_H, FOOTER_H,
    GRID_SIZE, SWATCH_PX, SWATCH_GAP, SWATCH_RADIUS,
    COLOR,
)
from core.session import Round


class SwatchGrid:
    """A clickable square grid of color swatches.

    Attributes:
        cols:      Number of columns (and rows).
        swatch:    Side length of each swatch in pixels.
        gap:       Gap between swatches in pixels.
        origin_x:  X pixel of the top-left swatch.
        origin_y:  Y pixel of the top-left swatch.
    """

    def __init__(
        self,
        cols: int = GRID_SIZE,
        swatch: int = SWATCH_PX,
        gap: int = SWATCH_GAP,
    ) -> None:
        self.cols = cols
        self.swatch = swatch
        self.gap = gap
        self._compute_origin()

    def _compute_origin(self) -> None:
        """Center the grid horizontally and between the header and the footer."""
        side = self.cols * self.swatch + (self.cols - 1) * self.gap
        usable_h = SCREEN_H - HEADER_H - FOOTER_H

        self.origin_x = (SCREEN_W - side) // 2
        self.origin_y = HEADER_H + (usable_h - side) // 2

    @property
    def cell_count(self) -> int:
        return self.cols * self.cols

    def bounds(self) -> pygame.Rect:
        """Return the rect enclosing the whole grid."""
        side = self.cols * self.swatch + (self.cols - 1) * self.gap
        return pygame.Rect(self.origin_x, self.origin_y, side, side)

    def cell_rect(self, index: int) -> pygame.Rect:
        """Return the pygame.Rect for a cell index.

        Args:
            index: Row-major cell index in [0, cols**2).
        """
        row, col = divmod(index, self.cols)
        x = self.origin_x + col * (self.swatch + self.gap)
        y = self.origin_y + row * (self.swatch + self.gap)
        return pygame.Rect(x, y, self.swatch, self.swatch)

    def hit_test(self, gx: int, gy: int) -> int | None:
        """Return the index of the swatch under a point, or None.

        Points in the gaps between swatches hit nothing.
        """
        for index in range(self.cell_count):
            if self.cell_rect(index).collidepoint(gx, gy):
                return index
        return None

    def render(self, surface: pygame.Surface, rnd: Round) -> None:
        """Draw every swatch of a round on a white rounded panel.

        Args:
            surface: Native-resolution game surface.
            rnd:     The round to draw. Its target cell gets target_color.
        """
        panel = self.bounds().inflate(self.gap * 3, self.gap * 3)
        pygame.draw.rect(surface, COLOR["panel"], panel, border_radius=SWATCH_RADIUS * 2)
        pygame.draw.rect(surface, COLOR["panel_border"], panel, width=1,
                         border_radius=SWATCH_RADIUS * 2)

        for index in range(self.cell_count):
            pygame.draw.rect(
                surface,
                rnd.color_at(index).to_rgb(),
                self.cell_rect(index),
                border_radius=SWATCH_RADIUS,
            )
