"""The single game-session context handed to every update call."""

import logging
import random
from enum import Enum, auto
from typing import List, Optional

from neon_breakout import settings
from neon_breakout.entities import Ball, Brick, Paddle, PowerUp, create_bricks, spawn_ball

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU           = auto()
    PLAYING        = auto()
    PAUSED         = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER      = auto()


class Session:
    """
    Everything one game needs: progress counters, entities, pending
    power-up reversals and the frame clock.

    ``clock`` counts seconds of simulated play; it only advances while
    the game is being stepped, so paused time does not run effects down.
    """

    def __init__(self, width=settings.CANVAS_W, height=settings.CANVAS_H,
                 seed: Optional[int] = None):
        self.width  = width
        self.height = height
        self.rng    = random.Random(seed)
        self.state  = GameState.MENU

        self.paddle = Paddle()
        self.balls:    List[Ball]    = []
        self.bricks:   List[Brick]   = []
        self.powerups: List[PowerUp] = []
        self.effects = []     # ScheduledEffect entries, see neon_breakout.effects
        self.clock   = 0.0

        self.reset_progress()
        self.paddle.reset(width, height)

    def reset_progress(self):
        self.score = 0
        self.lives = settings.START_LIVES
        self.level = settings.START_LEVEL

    def reset_field(self):
        """Fresh paddle, a single ball, no power-ups and a new brick grid."""
        self.paddle.reset(self.width, self.height)
        self.balls = [self.new_ball()]
        self.powerups = []
        self.bricks = create_bricks(self.width, self.rng)
        logger.info("Level %d: %d bricks (%d carrying power-ups)",
                    self.level, len(self.bricks),
                    sum(1 for b in self.bricks if b.has_powerup))

    def new_ball(self) -> Ball:
        return spawn_ball(self.width, self.height)

    def snapshot(self):
        return {
            "state": self.state.name,
            "score": self.score,
            "lives": self.lives,
            "level": self.level,
            "balls": len(self.balls),
            "bricks_left": sum(1 for b in self.bricks if b.visible),
            "powerups": len(self.powerups),
            "effects": len(self.effects),
        }
