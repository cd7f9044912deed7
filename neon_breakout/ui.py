"""
Menu overlays and the score/lives/level readout, drawn with pygame.

The controller only calls ``show_menu``, ``hide_all_menus``, ``set_text``
and ``update_display``; ``draw`` renders whatever is current on top of
the playfield each frame.
"""

import math
from typing import Dict, Optional

import pygame

from neon_breakout import settings
from neon_breakout.controller import (MENU_GAME_OVER, MENU_LEVEL_COMPLETE, MENU_PAUSE,
                                      MENU_START, TEXT_FINAL_SCORE, TEXT_LEVEL_COMPLETE)


def draw_text_centered(surface, text, font, color, cx, cy, shadow=True):
    """Render text centred on (cx, cy) with optional drop shadow."""
    if shadow:
        s = font.render(text, True, (0, 0, 0))
        r = s.get_rect(center=(cx + 2, cy + 2))
        surface.blit(s, r)
    img = font.render(text, True, color)
    rect = img.get_rect(center=(cx, cy))
    surface.blit(img, rect)
    return rect


class UI:
    """Menu overlays plus the HUD readout."""

    def __init__(self, width=settings.CANVAS_W, height=settings.CANVAS_H):
        self.width  = width
        self.height = height
        self.menu: Optional[str] = None
        self.texts: Dict[str, str] = {}
        self.score = 0
        self.lives = settings.START_LIVES
        self.level = settings.START_LEVEL
        self._fonts = None

    # ── Collaborator interface ────────────────────────────────

    def show_menu(self, menu_id):
        self.menu = menu_id

    def hide_all_menus(self):
        self.menu = None

    def set_text(self, slot, text):
        self.texts[slot] = text

    def update_display(self, score, lives, level):
        self.score, self.lives, self.level = score, lives, level

    # ── Drawing ───────────────────────────────────────────────

    @property
    def fonts(self):
        if self._fonts is None:
            pygame.font.init()
            self._fonts = {
                "title":  pygame.font.SysFont("consolas,monospace", 48, bold=True),
                "large":  pygame.font.SysFont("consolas,monospace", 28, bold=True),
                "medium": pygame.font.SysFont("consolas,monospace", 20),
                "small":  pygame.font.SysFont("consolas,monospace", 14),
            }
        return self._fonts

    def draw(self, surface, tick):
        self.draw_hud(surface)
        if self.menu == MENU_START:
            self.draw_start_menu(surface, tick)
        elif self.menu == MENU_PAUSE:
            self.draw_pause(surface)
        elif self.menu == MENU_LEVEL_COMPLETE:
            self.draw_level_complete(surface, tick)
        elif self.menu == MENU_GAME_OVER:
            self.draw_game_over(surface, tick)

    def draw_hud(self, surface):
        f = self.fonts["medium"]
        for i, (label, value) in enumerate((("SCORE", self.score),
                                            ("LIVES", self.lives),
                                            ("LEVEL", self.level))):
            img = f.render(f"{label} {value}", True, settings.C_SCORE)
            surface.blit(img, img.get_rect(midtop=(self.width * (i + 1) // 4, 14)))

    def _dim(self, surface, rgba):
        dim = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        dim.fill(rgba)
        surface.blit(dim, (0, 0))

    def _prompt(self, surface, text, tick, cy):
        if int(tick * 2) % 2 == 0:
            draw_text_centered(surface, text, self.fonts["medium"],
                               settings.C_GOLD, self.width // 2, cy)

    def draw_start_menu(self, surface, tick):
        self._dim(surface, (0, 0, 15, 180))
        cx, cy = self.width // 2, self.height // 2
        pulse = abs(math.sin(tick * 1.5)) * 30
        draw_text_centered(surface, "NEON BREAKOUT", self.fonts["title"],
                           (int(pulse), 245, 255), cx, cy - 100)
        controls = [
            ("MOVE",  "ARROW KEYS / DRAG"),
            ("PAUSE", "P"),
            ("QUIT",  "ESC"),
        ]
        for i, (action, key) in enumerate(controls):
            draw_text_centered(surface, f"{action:<7} {key}", self.fonts["small"],
                               (160, 160, 190), cx, cy - 30 + i * 22)
        self._prompt(surface, "PRESS SPACE TO START", tick, cy + 70)

    def draw_pause(self, surface):
        self._dim(surface, (0, 0, 0, 140))
        draw_text_centered(surface, "PAUSED", self.fonts["title"],
                           settings.C_WHITE, self.width // 2, self.height // 2)
        draw_text_centered(surface, "P to resume  |  ESC to quit", self.fonts["small"],
                           (160, 160, 160), self.width // 2, self.height // 2 + 50)

    def draw_level_complete(self, surface, tick):
        self._dim(surface, (0, 15, 10, 180))
        cx, cy = self.width // 2, self.height // 2
        draw_text_centered(surface, "LEVEL COMPLETE", self.fonts["title"],
                           settings.BRICK_COLORS[2], cx, cy - 60)
        draw_text_centered(surface, self.texts.get(TEXT_LEVEL_COMPLETE, ""),
                           self.fonts["medium"], settings.C_SCORE, cx, cy)
        self._prompt(surface, "PRESS SPACE FOR NEXT LEVEL", tick, cy + 60)

    def draw_game_over(self, surface, tick):
        self._dim(surface, (20, 0, 0, 200))
        cx, cy = self.width // 2, self.height // 2
        draw_text_centered(surface, "GAME OVER", self.fonts["title"],
                           settings.C_RED, cx, cy - 60)
        draw_text_centered(surface, self.texts.get(TEXT_FINAL_SCORE, ""),
                           self.fonts["large"], settings.C_SCORE, cx, cy)
        self._prompt(surface, "PRESS SPACE TO RESTART", tick, cy + 60)
