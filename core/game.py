"""
core/game.py — Controller tying the round engine to pygame for Chroma Vision.

Game owns:
    - RoundEngine (all game state, see core/engine.py)
    - Ticker      (100 ms countdown source, see core/timer.py)
    - SwatchGrid  (layout and hit testing for the 5x5 grid)

It holds no game state of its own. After every engine call it syncs the
ticker to the engine status: armed exactly while PLAYING. A tick that ends
the game therefore disarms the ticker before another tick can fire, and a
fresh start() always gets a fresh arming.

Input routing:
    info button (header) → show_info()   in any state
    start button         → start_game()  while IDLE
    retry button         → start_game()  while GAMEOVER
    swatch               → select_cell() while PLAYING

game.py does NOT call pygame.display.flip() or manage the window.
That is main.py's responsibility.
"""

from __future__ import annotations
import pygame

from core.engine import RoundEngine
from core.session import Session, Status
from core.timer import Ticker
from renderer import menu, ui
from renderer.grid import SwatchGrid
from settings import COLOR


class Game:
    """Routes input and frame time to the engine and draws its state.

    Attributes:
        engine: RoundEngine that owns the session.
        ticker: Ticker whose callback is engine.tick.
        grid:   SwatchGrid used for drawing and hit testing.
        _hover: True if the mouse is over the current action button.
    """

    def __init__(self, engine: RoundEngine | None = None) -> None:
        """Initialise subsystems. The engine starts IDLE with the ticker disarmed."""
        self.engine: RoundEngine = engine or RoundEngine()
        self.ticker: Ticker      = Ticker(self._on_tick)
        self.grid:   SwatchGrid  = SwatchGrid(cols=self.engine.current_session().grid_size)
        self._hover: bool        = False

    @property
    def session(self) -> Session:
        """The engine's current snapshot."""
        return self.engine.current_session()

    # ── Timer ownership ───────────────────────────────────────────────────────

    def _sync_ticker(self) -> None:
        """Arm the ticker while PLAYING and disarm it otherwise."""
        playing = self.engine.status is Status.PLAYING
        if playing and not self.ticker.is_armed():
            self.ticker.arm()
        elif not playing and self.ticker.is_armed():
            self.ticker.disarm()

    def _on_tick(self, delta: float) -> None:
        self.engine.tick(delta)
        self._sync_ticker()

    # ── Commands ──────────────────────────────────────────────────────────────

    def start_game(self) -> Session:
        """Start or restart a game with a freshly armed ticker."""
        session = self.engine.start()
        self.ticker.arm()
        return session

    def show_info(self) -> Session:
        """Return to the intro screen, keeping score and level."""
        session = self.engine.show_idle()
        self._sync_ticker()
        return session

    def select_cell(self, index: int) -> Session:
        session = self.engine.select(index)
        self._sync_ticker()
        return session

    def close(self) -> None:
        """Disarm the ticker. Call before discarding the game."""
        self.ticker.disarm()

    # ── Per-frame update ──────────────────────────────────────────────────────

    def update(self, dt: float, game_mouse_pos: tuple[int, int]) -> None:
        """Advance the countdown and hover state by one frame.

        Args:
            dt:             Seconds since the last frame.
            game_mouse_pos: Mouse position in game coordinates.
        """
        self.ticker.update(dt)

        status = self.engine.status
        if status is Status.IDLE:
            menu.advance(dt)
            self._hover = menu.start_button_rect().collidepoint(game_mouse_pos)
        elif status is Status.GAMEOVER:
            self._hover = ui.retry_button_rect().collidepoint(game_mouse_pos)
        else:
            self._hover = False

    # ── Event handling ────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route a left click to the element under it for the current state.

        Args:
            event: A pygame event. Only MOUSEBUTTONDOWN with button 1 acts.
        """
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return

        if ui.info_button_rect().collidepoint(event.pos):
            self.show_info()
            return

        status = self.engine.status
        if status is Status.IDLE:
            if menu.start_button_rect().collidepoint(event.pos):
                self.start_game()

        elif status is Status.PLAYING:
            hit = self.grid.hit_test(*event.pos)
            if hit is not None:
                self.select_cell(hit)

        elif status is Status.GAMEOVER:
            if ui.retry_button_rect().collidepoint(event.pos):
                self.start_game()

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        """Draw the header, the help footer, and the screen for the current state.

        Args:
            surface: Native game surface. Written to each frame.
        """
        surface.fill(COLOR["background"])
        session = self.session
        ui.draw_header(surface, session)
        ui.draw_help_footer(surface)

        if session.status is Status.IDLE:
            menu.draw_menu(surface, hovered=self._hover)

        elif session.status is Status.PLAYING and session.round is not None:
            self.grid.render(surface, session.round)

        elif session.status is Status.GAMEOVER:
            ui.draw_game_over(surface, session, hovered=self._hover)
