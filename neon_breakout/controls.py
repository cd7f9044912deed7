"""Keyboard and touch-drag input applied to the paddle."""

from enum import Enum

from neon_breakout import settings
from neon_breakout.session import GameState


class Key(Enum):
    LEFT  = "left"
    RIGHT = "right"


class Controls:
    """
    Translates discrete input events into paddle motion.

    Arrow keys set the paddle's velocity; a touch drag moves the paddle
    directly by half the finger's travel, bypassing ``dx``.
    """

    def __init__(self, session):
        self.session = session
        self.touch_x = None

    @property
    def playing(self) -> bool:
        return self.session.state == GameState.PLAYING

    def key_down(self, key: Key):
        if not self.playing:
            return
        paddle = self.session.paddle
        paddle.dx = -paddle.speed if key == Key.LEFT else paddle.speed

    def key_up(self, key: Key):
        self.session.paddle.dx = 0

    def touch_start(self, x):
        if not self.playing:
            return
        self.touch_x = x

    def touch_move(self, x):
        if not self.playing or self.touch_x is None:
            return
        delta = x - self.touch_x
        self.session.paddle.nudge(delta * settings.TOUCH_SCALE, self.session.width)
        self.touch_x = x

    def touch_end(self):
        self.touch_x = None
        self.session.paddle.dx = 0
