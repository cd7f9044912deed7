"""
Frame drawing.

``draw_frame`` issues draw commands in a fixed order (clear, bricks,
paddle, balls, power-ups) to any ``Renderer``. ``PygameRenderer`` is the
pygame-backed implementation used by the game window.
"""

from typing import Dict

import pygame

from neon_breakout import settings
from neon_breakout.interfaces import Renderer


def draw_frame(session, renderer: Renderer):
    renderer.clear()

    for brick in session.bricks:
        if not brick.visible:
            continue
        renderer.draw_rect(brick.x, brick.y, brick.width, brick.height,
                           brick.color, settings.GLOW_BRICK)
        # Inner highlight across the top half
        renderer.draw_rect(brick.x + 2, brick.y + 2, brick.width - 4, brick.height / 2,
                           settings.C_HILITE)

    p = session.paddle
    renderer.draw_rect(p.x, p.y, p.width, p.height, p.color, settings.GLOW_PADDLE)

    for ball in session.balls:
        renderer.draw_circle(ball.x, ball.y, ball.radius, ball.color, settings.GLOW_BALL)

    for pu in session.powerups:
        renderer.draw_rect(pu.x, pu.y, pu.size, pu.size, pu.color, settings.GLOW_POWERUP)
        renderer.draw_text(pu.label, pu.x + pu.size / 2, pu.y + pu.size / 2, "label")


# ─────────────────────────────────────────────────────────────
# PYGAME RENDERER
# ─────────────────────────────────────────────────────────────

TEXT_STYLES = {
    # style: (font size, bold, colour)
    "label": (16, True,  settings.C_BLACK),
    "hud":   (20, False, settings.C_SCORE),
}


class PygameRenderer:
    """Draws onto a pygame surface; glow is a translucent halo behind the shape."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: Dict[str, pygame.font.Font] = {}

    def clear(self):
        self.surface.fill(settings.C_BG)

    def draw_rect(self, x, y, w, h, color, glow=0):
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        if glow:
            self._halo(rect, color, glow)
        if len(color) == 4:
            s = pygame.Surface(rect.size, pygame.SRCALPHA)
            s.fill(color)
            self.surface.blit(s, rect.topleft)
        else:
            pygame.draw.rect(self.surface, color, rect)

    def draw_circle(self, x, y, r, color, glow=0):
        cx, cy = int(x), int(y)
        if glow:
            size = int(r + glow) * 2
            glow_surf = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(glow_surf, (*color[:3], 50), (size // 2, size // 2), size // 2)
            self.surface.blit(glow_surf, (cx - size // 2, cy - size // 2))
        pygame.draw.circle(self.surface, color, (cx, cy), int(r))

    def draw_text(self, text, x, y, style="label"):
        size, bold, color = TEXT_STYLES.get(style, TEXT_STYLES["label"])
        img = self._font(style, size, bold).render(text, True, color)
        self.surface.blit(img, img.get_rect(center=(int(x), int(y))))

    def _halo(self, rect, color, glow):
        spread = glow // 2
        halo = rect.inflate(spread * 2, spread * 2)
        s = pygame.Surface(halo.size, pygame.SRCALPHA)
        pygame.draw.rect(s, (*color[:3], 60), s.get_rect(), border_radius=spread)
        self.surface.blit(s, halo.topleft)

    def _font(self, style, size, bold):
        font = self._fonts.get(style)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont("consolas,monospace", size, bold=bold)
            self._fonts[style] = font
        return font
