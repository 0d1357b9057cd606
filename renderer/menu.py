"""
renderer/menu.py — Intro screen for Chroma Vision.

Pure vector graphics. A white card with the game's eye badge, a one-line
explanation, a start button, and a row of five pulsing color dots.

Pulse animation state lives in a module-level clock so it persists across
render calls without needing an object. game.py calls draw_menu() every
frame while the status is IDLE.
"""

import math
import pygame
from settings import SCREEN_W, HEADER_H, COLOR, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_SM
from renderer.ui import font, blit_centered, draw_button, action_button_rect
from utils.color import HSLColor

# ── Animation state ───────────────────────────────────────────────────────────
_time: float = 0.0   # accumulated seconds of menu display

_PANEL = pygame.Rect(24, HEADER_H + 16, SCREEN_W - 48, 440)
_DOT_COUNT = 5


def advance(dt: float) -> None:
    """Advance the pulse animation clock by dt seconds."""
    global _time
    _time += dt


def start_button_rect() -> pygame.Rect:
    return action_button_rect(_PANEL.y + 300)


def _draw_badge(surface: pygame.Surface, cx: int, cy: int) -> None:
    """Draw the rounded eye badge at the top of the card."""
    badge = pygame.Rect(0, 0, 88, 88)
    badge.center = (cx, cy)
    pygame.draw.rect(surface, COLOR["accent"], badge, border_radius=24)
    eye = pygame.Rect(0, 0, 52, 28)
    eye.center = badge.center
    pygame.draw.ellipse(surface, COLOR["text_light"], eye)
    pygame.draw.circle(surface, COLOR["accent"], badge.center, 9)


def _draw_dots(surface: pygame.Surface, cx: int, y: int) -> None:
    """Draw the row of pulsing dots, hues stepping by 45 degrees from 200."""
    spacing = 20
    left = cx - spacing * (_DOT_COUNT - 1) // 2
    for i in range(_DOT_COUNT):
        pulse = 0.5 + 0.5 * math.sin((_time - i * 0.2) * math.tau / 2.0)
        color = HSLColor(i * 45 + 200, 70, 60).to_rgb()
        pygame.draw.circle(surface, color, (left + i * spacing, y), 5 + round(pulse))


def draw_menu(surface: pygame.Surface, hovered: bool = False) -> pygame.Rect:
    """Draw the intro card and return the start button rect.

    Args:
        surface: Native game surface.
        hovered: True if the mouse is over the start button.
    """
    cx = SCREEN_W // 2
    pygame.draw.rect(surface, COLOR["panel"], _PANEL, border_radius=24)
    pygame.draw.rect(surface, COLOR["panel_border"], _PANEL, width=1, border_radius=24)

    _draw_badge(surface, cx, _PANEL.y + 72)

    title = font(FONT_SIZE_LG, bold=True).render("Color Sensitivity Challenge",
                                                 True, COLOR["accent"])
    blit_centered(surface, title, cx, _PANEL.y + 140)

    lines = (
        "Find the one swatch in the 5x5 grid",
        "whose color is slightly different.",
    )
    for i, line in enumerate(lines):
        text = font(FONT_SIZE_MD).render(line, True, COLOR["text"])
        blit_centered(surface, text, cx, _PANEL.y + 190 + i * 24)
    hint = font(FONT_SIZE_SM).render("Color training for artists", True, COLOR["text_muted"])
    blit_centered(surface, hint, cx, _PANEL.y + 252)

    rect = draw_button(surface, start_button_rect(), "START", COLOR["accent"], hovered)
    _draw_dots(surface, cx, _PANEL.y + 396)
    return rect
