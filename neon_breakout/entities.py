"""
Game entities: paddle, balls, bricks and falling power-ups.

Entities are plain records with small update helpers. They know nothing
about drawing or sound; the simulation moves them and the renderer reads
them.
"""

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from neon_breakout import settings
from neon_breakout.geometry import clamp


# ─────────────────────────────────────────────────────────────
# PADDLE
# ─────────────────────────────────────────────────────────────

@dataclass
class Paddle:
    x: float = 0.0
    y: float = 0.0
    width: float = settings.PADDLE_W
    height: float = settings.PADDLE_H
    dx: float = 0.0
    speed: float = settings.PADDLE_SPEED
    color: Tuple = settings.C_PADDLE

    def reset(self, canvas_w, canvas_h):
        """Centre the paddle near the bottom at its default width."""
        self.width = settings.PADDLE_W
        self.x = canvas_w / 2 - self.width / 2
        self.y = canvas_h - settings.PADDLE_BOTTOM
        self.dx = 0.0

    def move(self, canvas_w):
        self.x += self.dx
        self.keep_inside(canvas_w)

    def nudge(self, delta, canvas_w):
        """Offset the paddle directly, independent of ``dx`` (touch drag)."""
        self.x += delta
        self.keep_inside(canvas_w)

    def keep_inside(self, canvas_w):
        self.x = clamp(self.x, 0, canvas_w - self.width)


# ─────────────────────────────────────────────────────────────
# BALL
# ─────────────────────────────────────────────────────────────

@dataclass
class Ball:
    x: float
    y: float
    dx: float = settings.BALL_DX
    dy: float = settings.BALL_DY
    radius: float = settings.BALL_RADIUS
    color: Tuple = settings.C_BALL

    @property
    def speed(self) -> float:
        return math.hypot(self.dx, self.dy)

    def advance(self):
        self.x += self.dx
        self.y += self.dy

    def scale(self, factor):
        self.dx *= factor
        self.dy *= factor

    def bounce_off(self, paddle: Paddle):
        """
        Re-aim the ball by where it struck the paddle.

        The hit offset from the paddle centre (-0.5..0.5) scales
        ``BOUNCE_ANGLE``, so the edges send the ball out at +/-30 degrees
        from vertical. The speed magnitude is kept, only the direction
        changes.
        """
        hit_pos = (self.x - paddle.x) / paddle.width
        angle = (hit_pos - 0.5) * math.radians(settings.BOUNCE_ANGLE)
        speed = self.speed
        self.dx = speed * math.sin(angle)
        self.dy = -speed * math.cos(angle)


def spawn_ball(canvas_w, canvas_h) -> Ball:
    """A fresh serve from the centre, just above the paddle."""
    return Ball(x=canvas_w / 2, y=canvas_h - settings.BALL_SPAWN_BOTTOM)


# ─────────────────────────────────────────────────────────────
# BRICKS
# ─────────────────────────────────────────────────────────────

@dataclass
class Brick:
    x: float
    y: float
    width: float
    height: float
    color: Tuple
    visible: bool = True
    has_powerup: bool = False

    def destroy(self):
        self.visible = False

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


def brick_columns(canvas_w) -> int:
    """How many columns fit the canvas, capped at ``BRICK_MAX_COLS``."""
    usable = canvas_w - settings.BRICK_OFFSET_LEFT * 2
    fitted = int(usable // (settings.BRICK_W + settings.BRICK_PADDING))
    return max(0, min(settings.BRICK_MAX_COLS, fitted))


def create_bricks(canvas_w, rng: Optional[random.Random] = None) -> List[Brick]:
    """Build a full brick grid; each brick rolls independently for a power-up."""
    rng = rng or random.Random()
    colors = settings.BRICK_COLORS
    bricks = []
    for row in range(settings.BRICK_ROWS):
        for col in range(brick_columns(canvas_w)):
            bricks.append(Brick(
                x=settings.BRICK_OFFSET_LEFT + col * (settings.BRICK_W + settings.BRICK_PADDING),
                y=settings.BRICK_OFFSET_TOP + row * (settings.BRICK_H + settings.BRICK_PADDING),
                width=settings.BRICK_W,
                height=settings.BRICK_H,
                color=colors[row % len(colors)],
                has_powerup=rng.random() < settings.POWERUP_CHANCE,
            ))
    return bricks


# ─────────────────────────────────────────────────────────────
# POWER-UP
# ─────────────────────────────────────────────────────────────

class PowerUpType(Enum):
    ENLARGE   = "enlarge"
    MULTIBALL = "multiball"
    SPEED     = "speed"
    SHRINK    = "shrink"


POWERUP_COLORS = {
    PowerUpType.ENLARGE:   (0,   255, 136),
    PowerUpType.MULTIBALL: (255, 0,   255),
    PowerUpType.SPEED:     (255, 170, 0),
    PowerUpType.SHRINK:    (255, 0,   128),
}

POWERUP_LABELS = {
    PowerUpType.ENLARGE:   "<>",
    PowerUpType.MULTIBALL: "oo",
    PowerUpType.SPEED:     ">>",
    PowerUpType.SHRINK:    "><",
}


class PowerUp:
    """A power-up capsule falling from a destroyed brick."""

    def __init__(self, x, y, kind: PowerUpType):
        self.x = x
        self.y = y
        self.kind  = kind
        self.size  = settings.POWERUP_SIZE
        self.speed = settings.POWERUP_SPEED
        self.color = POWERUP_COLORS[kind]
        self.label = POWERUP_LABELS[kind]

    @classmethod
    def from_brick(cls, brick: Brick, kind: PowerUpType) -> "PowerUp":
        """Drop centred under the brick, starting at its top edge."""
        return cls(brick.center_x - settings.POWERUP_SIZE / 2, brick.y, kind)

    # The catch test and the renderer both treat the capsule as a square box.
    @property
    def width(self):
        return self.size

    @property
    def height(self):
        return self.size

    def fall(self):
        self.y += self.speed

    def __repr__(self):
        return f"PowerUp({self.kind.value!r}, x={self.x:.1f}, y={self.y:.1f})"
