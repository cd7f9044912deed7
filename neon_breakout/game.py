"""
pygame host: window, frame clock and event pump around the controller.
"""

import logging
import os

import pygame

from neon_breakout import settings
from neon_breakout.controller import GameController
from neon_breakout.controls import Controls, Key
from neon_breakout.render import PygameRenderer, draw_frame
from neon_breakout.session import GameState, Session
from neon_breakout.sound import SoundManager
from neon_breakout.ui import UI

logger = logging.getLogger(__name__)

KEY_MAP = {
    pygame.K_LEFT:  Key.LEFT,
    pygame.K_a:     Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_d:     Key.RIGHT,
}


class Game:
    """Owns the window and runs the frame loop."""

    def __init__(self, width=settings.CANVAS_W, height=settings.CANVAS_H, seed=None):
        pygame.init()
        pygame.display.set_caption("NEON BREAKOUT")

        self.window = pygame.display.set_mode(
            (width, height), pygame.RESIZABLE | pygame.SCALED
        )
        self.surface = pygame.Surface((width, height))
        self.clock   = pygame.time.Clock()

        self.session    = Session(width, height, seed=seed)
        self.ui         = UI(width, height)
        self.renderer   = PygameRenderer(self.surface)
        self.controller = GameController(self.session, SoundManager(), self.ui, self.ui)
        self.controls   = Controls(self.session)

        self.tick    = 0.0      # Monotonic time for menu animations
        self.running = True
        logger.info("Window %dx%d, audio %s", width, height,
                    "on" if self.controller.sound.enabled else "off")

    # ── Main loop ─────────────────────────────────────────────

    def run(self):
        while self.running:
            dt = self.clock.tick(settings.FPS) / 1000.0
            dt = min(dt, settings.MAX_FRAME_DT)
            self.tick += dt

            self._handle_events()
            self.controller.tick(dt)
            self._draw()
        pygame.quit()

    # ── Event handling ────────────────────────────────────────

    def _handle_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        w = self.session.width
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._on_key_down(event.key)
        elif event.type == pygame.KEYUP and event.key in KEY_MAP:
            self.controls.key_up(KEY_MAP[event.key])

        # Touch reports normalised coordinates
        elif event.type == pygame.FINGERDOWN:
            self.controls.touch_start(event.x * w)
        elif event.type == pygame.FINGERMOTION:
            self.controls.touch_move(event.x * w)
        elif event.type == pygame.FINGERUP:
            self.controls.touch_end()

        # Mouse drag behaves like touch; skip mouse events synthesized from touch
        elif getattr(event, "touch", False):
            return
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.controls.touch_start(event.pos[0])
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self.controls.touch_move(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.controls.touch_end()

    def _on_key_down(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self.controller.activate()
        elif key == pygame.K_p:
            self.controller.toggle_pause()
        elif key in KEY_MAP:
            self.controls.key_down(KEY_MAP[key])

    # ── Draw ──────────────────────────────────────────────────

    def _draw(self):
        if self.session.state == GameState.MENU:
            self.renderer.clear()
        else:
            # The field stays visible, frozen, under pause and end-of-level menus
            draw_frame(self.session, self.renderer)
        self.ui.draw(self.surface, self.tick)

        self.window.blit(self.surface, (0, 0))
        pygame.display.flip()


def main():
    logging.basicConfig(
        level=os.environ.get("NEON_BREAKOUT_LOG", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Game().run()


if __name__ == "__main__":
    main()
