"""
main.py — Entry point and game loop for Chroma Vision.

Responsibilities:
    - Initialise pygame and create the window
    - Run the main loop: handle events → update → render → flip
    - Manage pygame.Clock and delta time
    - Close the Game on exit so its countdown ticker is disarmed
    - Wrap the loop in async for pygbag (WASM export)

Architecture note:
    main.py is intentionally thin. It owns pygame lifecycle and the
    window — nothing else. All game logic lives in core/.

Scaling:
    The window uses pygame.SCALED, so pygame letterboxes the native
    surface and reports mouse positions in native coordinates already.

Usage (local):
    python main.py

Usage (WASM export):
    pygbag main.py
"""

import asyncio
import logging
import pygame
from settings import SCREEN_W, SCREEN_H, FPS, TITLE
from core.game import Game

logger = logging.getLogger(__name__)


async def main() -> None:
    """Async main loop — compatible with both CPython and pygbag WASM.

    Each iteration yields to the event loop via asyncio.sleep(0), which
    pygbag uses to hand control back to the browser.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()

    screen = pygame.display.set_mode(
        (SCREEN_W, SCREEN_H),
        pygame.SCALED | pygame.RESIZABLE,
    )
    pygame.display.set_caption(TITLE)

    clock = pygame.time.Clock()
    game  = Game()
    logger.info(f"{TITLE} ready at {SCREEN_W}x{SCREEN_H}")

    running = True
    try:
        while running:
            dt = clock.tick(FPS) / 1000.0   # seconds since last frame
            dt = min(dt, 0.25)              # a stalled frame must not eat the whole clock

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    game.handle_event(event)

            game.update(dt, pygame.mouse.get_pos())
            game.render(screen)
            pygame.display.flip()

            await asyncio.sleep(0)
    finally:
        game.close()
        pygame.quit()


if __name__ == "__main__":
    asyncio.run(main())
