import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from neon_breakout.session import GameState, Session


class RecordingSound:
    def __init__(self):
        self.cues = []

    def play_cue(self, cue):
        self.cues.append(cue)


class RecordingUI:
    def __init__(self):
        self.menu = None
        self.shown = []
        self.texts = {}

    def show_menu(self, menu_id):
        self.menu = menu_id
        self.shown.append(menu_id)

    def hide_all_menus(self):
        self.menu = None

    def set_text(self, slot, text):
        self.texts[slot] = text


class RecordingDisplay:
    def __init__(self):
        self.updates = []

    def update_display(self, score, lives, level):
        self.updates.append((score, lives, level))


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_rect(self, x, y, w, h, color, glow=0):
        self.calls.append(("rect", x, y, w, h, color, glow))

    def draw_circle(self, x, y, r, color, glow=0):
        self.calls.append(("circle", x, y, r, color, glow))

    def draw_text(self, text, x, y, style="label"):
        self.calls.append(("text", text, x, y, style))


class FixedRandom:
    """Stands in for random.Random with a constant roll."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def sound():
    return RecordingSound()


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def session():
    """An 800x600 session mid-level: full brick grid, one fresh ball."""
    s = Session(800, 600, seed=1234)
    s.reset_field()
    s.state = GameState.PLAYING
    return s
