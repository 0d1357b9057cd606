"""
settings.py — Global constants for Chroma Vision.

All magic numbers live here. No other module should hardcode colors,
dimensions, game rules, or timing values. Import what you need with:
    from settings import GRID_SIZE, MAX_TIME_S, ...

None of these are runtime-configurable.
"""

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 400
SCREEN_H = 780
FPS = 60
TITLE = "Chroma Vision"

# ── Grid ──────────────────────────────────────────────────────────────────────
GRID_SIZE     = 5                       # side length — 5x5 swatches
GRID_CELLS    = GRID_SIZE * GRID_SIZE
SWATCH_PX     = 64                      # px per swatch
SWATCH_GAP    = 8                       # gap between swatches
SWATCH_RADIUS = 12                      # rounded corner radius

# ── Timing ────────────────────────────────────────────────────────────────────
MAX_TIME_S       = 30.0   # starting allowance and hard cap
CORRECT_BONUS_S  = 2.0    # added on a correct pick, capped at MAX_TIME_S
WRONG_PENALTY_S  = 3.0    # removed on a wrong pick, floored at 0
TICK_INTERVAL_S  = 0.1    # countdown cadence (100 ms)
LOW_TIME_S       = 5.0    # header turns red below this

# ── Difficulty ────────────────────────────────────────────────────────────────
# delta(level) = max(MIN_DELTA, BASE_DELTA * DELTA_DECAY ** level),
# in percentage points of the perturbed channel.
BASE_DELTA  = 15.0
DELTA_DECAY = 0.92
MIN_DELTA   = 1.5

# ── Base color sampling (half-open ranges) ────────────────────────────────────
HUE_RANGE        = (0.0, 360.0)
SATURATION_RANGE = (50.0, 90.0)
LIGHTNESS_RANGE  = (40.0, 60.0)
CHANNEL_MIDPOINT = 50.0   # target moves away from this value

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "background":  (250, 250, 250),   # #FAFAFA
    "panel":       (255, 255, 255),   # #FFFFFF
    "panel_border":(229, 229, 229),   # #E5E5E5
    "text":        ( 23,  23,  23),   # #171717
    "text_muted":  (163, 163, 163),   # #A3A3A3
    "text_light":  (255, 255, 255),
    "accent":      ( 79,  70, 229),   # #4F46E5 — start button
    "button_dark": (  0,   0,   0),   # retry button
    "score":       (  5, 150, 105),   # #059669
    "time":        ( 37,  99, 235),   # #2563EB
    "time_low":    (220,  38,  38),   # #DC2626
    "trophy":      (245, 158,  11),   # #F59E0B
}

# ── UI Layout ─────────────────────────────────────────────────────────────────
HEADER_H   = 120   # px — title row plus score/time cards
FOOTER_H   = 140   # px — color difference help panel
INFO_BTN_R = 16    # px — radius of the info button in the header
BUTTON_W   = 240
BUTTON_H   = 56

# ── Fonts ─────────────────────────────────────────────────────────────────────
# pygame.font.SysFont name; falls back to the default font if missing
FONT_FAMILY  = "arial"
FONT_SIZE_XL = 56
FONT_SIZE_LG = 26
FONT_SIZE_MD = 18
FONT_SIZE_SM = 12
