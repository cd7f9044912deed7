"""
Collaborator protocols the game core talks to.

The simulation and state machine only ever see these narrow interfaces;
the pygame implementations live in ``render``, ``sound`` and ``ui``.
The ``Null*`` sinks accept everything and do nothing.
"""

from enum import Enum
from typing import Protocol, Tuple


class Cue(Enum):
    BOUNCE      = "bounce"
    BRICK_BREAK = "brick_break"
    LIFE_LOST   = "life_lost"
    POWER_UP    = "power_up"


class Renderer(Protocol):
    def clear(self) -> None: ...

    def draw_rect(self, x: float, y: float, w: float, h: float,
                  color: Tuple, glow: int = 0) -> None: ...

    def draw_circle(self, x: float, y: float, r: float,
                    color: Tuple, glow: int = 0) -> None: ...

    def draw_text(self, text: str, x: float, y: float, style: str = "label") -> None: ...


class Sound(Protocol):
    def play_cue(self, cue: Cue) -> None: ...


class MenuUI(Protocol):
    def show_menu(self, menu_id: str) -> None: ...

    def hide_all_menus(self) -> None: ...

    def set_text(self, slot: str, text: str) -> None: ...


class Display(Protocol):
    def update_display(self, score: int, lives: int, level: int) -> None: ...


class NullSound:
    def play_cue(self, cue):
        pass


class NullUI:
    def show_menu(self, menu_id):
        pass

    def hide_all_menus(self):
        pass

    def set_text(self, slot, text):
        pass


class NullDisplay:
    def update_display(self, score, lives, level):
        pass
