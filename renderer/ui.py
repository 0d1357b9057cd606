"""
renderer/ui.py — UI chrome rendering for Chroma Vision.

Draws everything around the swatch grid:
    - Header (title, info button, score card, time card)
    - Game over summary (final score, level, accuracy, retry button)
    - Help footer explaining how the odd swatch differs
    - Shared rounded buttons, also used by renderer/menu.py

All functions are stateless — they take explicit data arguments and draw
to the provided surface. Functions that draw a clickable element return
its rect so game.py can hit-test clicks.
"""

import pygame
from settings import (
    SCREEN_W, SCREEN_H, HEADER_H, FOOTER_H, INFO_BTN_R,
    BASE_DELTA, MIN_DELTA,
    BUTTON_W, BUTTON_H, LOW_TIME_S,
    COLOR, TITLE,
    FONT_FAMILY, FONT_SIZE_XL, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_SM,
)
from core.session import Session
from utils.color import RGBColor


# ── Font cache ────────────────────────────────────────────────────────────────
# Keyed by (size, bold). SysFont falls back to the default font if
# FONT_FAMILY is not installed.
_fonts: dict[tuple[int, bool], pygame.font.Font] = {}


def font(size: int, bold: bool = False) -> pygame.font.Font:
    """Return a cached font at the given size."""
    key = (size, bold)
    if key not in _fonts:
        _fonts[key] = pygame.font.SysFont(FONT_FAMILY, size, bold=bold)
    return _fonts[key]


def blit_centered(surface: pygame.Surface, text: pygame.Surface, cx: int, y: int) -> None:
    surface.blit(text, (cx - text.get_width() // 2, y))


# ── Layout helpers ────────────────────────────────────────────────────────────
# Fixed rects, shared with game.py for hit detection before the first render.

def info_button_rect() -> pygame.Rect:
    """Return the rect of the round info button in the header."""
    cx, cy = SCREEN_W - 24 - INFO_BTN_R, 32
    return pygame.Rect(cx - INFO_BTN_R, cy - INFO_BTN_R, INFO_BTN_R * 2, INFO_BTN_R * 2)


def action_button_rect(y: int) -> pygame.Rect:
    """Return the rect of a centered full-width action button at height y."""
    return pygame.Rect((SCREEN_W - BUTTON_W) // 2, y, BUTTON_W, BUTTON_H)


# ── Buttons ───────────────────────────────────────────────────────────────────

def draw_button(
    surface: pygame.Surface,
    rect: pygame.Rect,
    label: str,
    color: RGBColor,
    hovered: bool = False,
) -> pygame.Rect:
    """Draw a rounded action button and return its rect.

    Hovered buttons lift 2px, echoing the web original's hover translate.
    """
    draw_rect = rect.move(0, -2) if hovered else rect
    pygame.draw.rect(surface, color, draw_rect, border_radius=16)
    text = font(FONT_SIZE_MD, bold=True).render(label, True, COLOR["text_light"])
    surface.blit(text, (draw_rect.centerx - text.get_width() // 2,
                        draw_rect.centery - text.get_height() // 2))
    return rect


# ── Header ────────────────────────────────────────────────────────────────────

def _draw_card(
    surface: pygame.Surface,
    rect: pygame.Rect,
    label: str,
    value: str,
    accent: RGBColor,
    alert: bool = False,
) -> None:
    """Draw one header stat card: a label above a large value."""
    bg = (254, 242, 242) if alert else COLOR["panel"]
    border = (254, 202, 202) if alert else COLOR["panel_border"]
    pygame.draw.rect(surface, bg, rect, border_radius=16)
    pygame.draw.rect(surface, border, rect, width=1, border_radius=16)

    pygame.draw.rect(surface, accent, (rect.x + 12, rect.y + 14, 6, rect.h - 28),
                     border_radius=3)
    lbl = font(FONT_SIZE_SM).render(label.upper(), True, COLOR["text_muted"])
    val = font(FONT_SIZE_LG, bold=True).render(
        value, True, accent if alert else COLOR["text"]
    )
    surface.blit(lbl, (rect.x + 28, rect.y + 10))
    surface.blit(val, (rect.x + 28, rect.y + 24))


def draw_header(surface: pygame.Surface, session: Session) -> pygame.Rect:
    """Draw the title row and the score/time cards.

    The time card turns red below LOW_TIME_S.

    Args:
        surface: Native-resolution game surface.
        session: Snapshot to display.

    Returns:
        pygame.Rect of the info button for hit detection.
    """
    title = font(FONT_SIZE_LG, bold=True).render(TITLE, True, COLOR["text"])
    surface.blit(title, (24, 32 - title.get_height() // 2))

    info = info_button_rect()
    pygame.draw.circle(surface, COLOR["panel_border"], info.center, INFO_BTN_R)
    mark = font(FONT_SIZE_MD, bold=True).render("i", True, COLOR["text_muted"])
    surface.blit(mark, (info.centerx - mark.get_width() // 2,
                        info.centery - mark.get_height() // 2))

    card_w = (SCREEN_W - 24 * 2 - 12) // 2
    card_h = HEADER_H - 64
    score_rect = pygame.Rect(24, 56, card_w, card_h)
    time_rect  = pygame.Rect(24 + card_w + 12, 56, card_w, card_h)
    low = session.time_left < LOW_TIME_S

    _draw_card(surface, score_rect, "Score", str(session.score), COLOR["score"])
    _draw_card(surface, time_rect, "Time", f"{session.time_left:.1f}s",
               COLOR["time_low"] if low else COLOR["time"], alert=low)
    return info


# ── Game over screen ──────────────────────────────────────────────────────────

def draw_game_over(
    surface: pygame.Surface,
    session: Session,
    hovered: bool = False,
) -> pygame.Rect:
    """Draw the end-of-game summary and return the retry button rect.

    Shows the final score, the level reached, and accuracy as
    Session.accuracy() reports it.

    Args:
        surface: Native-resolution game surface.
        session: The frozen GAMEOVER snapshot.
        hovered: True if the mouse is over the retry button.
    """
    cx = SCREEN_W // 2
    panel = pygame.Rect(24, HEADER_H + 16, SCREEN_W - 48, 440)
    pygame.draw.rect(surface, COLOR["panel"], panel, border_radius=24)
    pygame.draw.rect(surface, COLOR["panel_border"], panel, width=1, border_radius=24)

    pygame.draw.circle(surface, COLOR["trophy"], (cx, panel.y + 56), 32)

    title = font(FONT_SIZE_LG, bold=True).render("Time's up!", True, COLOR["text"])
    blit_centered(surface, title, cx, panel.y + 104)
    sub = font(FONT_SIZE_MD).render("Your final score", True, COLOR["text_muted"])
    blit_centered(surface, sub, cx, panel.y + 140)
    score = font(FONT_SIZE_XL, bold=True).render(str(session.score), True, COLOR["text"])
    blit_centered(surface, score, cx, panel.y + 166)

    stat_w = (panel.w - 48 - 12) // 2
    stats = (
        ("Level", str(session.level)),
        ("Accuracy", f"{session.accuracy()}%"),
    )
    for i, (label, value) in enumerate(stats):
        rect = pygame.Rect(panel.x + 24 + i * (stat_w + 12), panel.y + 250, stat_w, 72)
        pygame.draw.rect(surface, COLOR["background"], rect, border_radius=16)
        lbl = font(FONT_SIZE_SM).render(label.upper(), True, COLOR["text_muted"])
        val = font(FONT_SIZE_LG, bold=True).render(value, True, COLOR["text"])
        blit_centered(surface, lbl, rect.centerx, rect.y + 12)
        blit_centered(surface, val, rect.centerx, rect.y + 32)

    return draw_button(surface, retry_button_rect(), "TRY AGAIN",
                       COLOR["button_dark"], hovered)


def retry_button_rect() -> pygame.Rect:
    return action_button_rect(HEADER_H + 16 + 352)


# ── Help footer ───────────────────────────────────────────────────────────────

def help_footer_rect() -> pygame.Rect:
    """Return the rect of the help panel pinned to the bottom of the screen."""
    return pygame.Rect(24, SCREEN_H - FOOTER_H + 8, SCREEN_W - 48, FOOTER_H - 16)


def draw_help_footer(surface: pygame.Surface) -> pygame.Rect:
    """Draw the "color difference" help panel shown on every screen.

    The difficulty range in the text comes from BASE_DELTA and MIN_DELTA,
    so it stays accurate if those constants change.

    Returns:
        The panel rect.
    """
    rect = help_footer_rect()
    pygame.draw.rect(surface, COLOR["panel"], rect, border_radius=20)
    pygame.draw.rect(surface, COLOR["panel_border"], rect, width=1, border_radius=20)

    title = font(FONT_SIZE_SM, bold=True).render("COLOR DIFFERENCE", True, COLOR["text_muted"])
    surface.blit(title, (rect.x + 16, rect.y + 12))

    items = (
        (COLOR["score"], (
            "Core challenge: the odd swatch differs",
            "only in lightness or saturation.",
        )),
        (COLOR["time"], (
            f"Difficulty: the difference starts near {BASE_DELTA:g}%",
            f"and shrinks toward {MIN_DELTA:g}% as you score.",
        )),
    )
    y = rect.y + 36
    for accent, lines in items:
        pygame.draw.rect(surface, accent, (rect.x + 16, y + 2, 6, 28), border_radius=3)
        for i, line in enumerate(lines):
            text = font(FONT_SIZE_SM).render(line, True, COLOR["text"])
            surface.blit(text, (rect.x + 32, y + i * 16))
        y += 42
    return rect
