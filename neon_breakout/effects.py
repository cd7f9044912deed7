"""
Power-up effect engine.

Catching a capsule applies its effect immediately. Effects that wear off
queue a ``ScheduledEffect``; ``expire_effects`` runs the due reversals at
the start of each frame. Every reversal applies its own delta and clamp,
so overlapping pickups are not coordinated with each other.
"""

import logging
from dataclasses import dataclass

from neon_breakout import settings
from neon_breakout.entities import Ball, PowerUpType
from neon_breakout.interfaces import Cue

logger = logging.getLogger(__name__)


@dataclass
class ScheduledEffect:
    kind: PowerUpType
    expires_at: float     # session clock, seconds

    def due(self, now) -> bool:
        return now >= self.expires_at


def apply_powerup(session, kind: PowerUpType, sound):
    paddle = session.paddle
    if kind == PowerUpType.ENLARGE:
        paddle.width = min(settings.PADDLE_MAX_W, paddle.width + settings.ENLARGE_DELTA)
        _schedule(session, kind, settings.ENLARGE_DURATION)
    elif kind == PowerUpType.MULTIBALL:
        # Strict "< MAX_BALLS": four balls in play still split into six.
        if session.balls and len(session.balls) < settings.MAX_BALLS:
            main = session.balls[0]
            session.balls.append(Ball(main.x, main.y, -main.dx, main.dy))
            session.balls.append(Ball(main.x, main.y, main.dx * settings.MULTIBALL_SPREAD, main.dy))
    elif kind == PowerUpType.SPEED:
        for ball in session.balls:
            ball.scale(settings.SPEED_FACTOR)
        _schedule(session, kind, settings.SPEED_DURATION)
    elif kind == PowerUpType.SHRINK:
        # Shrinking also costs a life.
        paddle.width = max(settings.PADDLE_MIN_W, paddle.width - settings.SHRINK_DELTA)
        session.lives = max(0, session.lives - 1)
        sound.play_cue(Cue.LIFE_LOST)
        _schedule(session, kind, settings.SHRINK_DURATION)
    else:
        raise ValueError(f"unknown power-up type: {kind!r}")
    paddle.keep_inside(session.width)
    logger.debug("Applied %s: paddle width %.0f, %d balls, %d lives",
                 kind.value, paddle.width, len(session.balls), session.lives)


def _revert(session, kind: PowerUpType):
    paddle = session.paddle
    if kind == PowerUpType.ENLARGE:
        paddle.width = max(settings.ENLARGE_REVERT_FLOOR, paddle.width - settings.ENLARGE_DELTA)
    elif kind == PowerUpType.SPEED:
        for ball in session.balls:
            ball.scale(1 / settings.SPEED_FACTOR)
    elif kind == PowerUpType.SHRINK:
        paddle.width = min(settings.SHRINK_REVERT_CAP, paddle.width + settings.SHRINK_DELTA)
    else:
        raise ValueError(f"{kind!r} has no timed reversal")
    paddle.keep_inside(session.width)


def _schedule(session, kind, delay):
    session.effects.append(ScheduledEffect(kind, session.clock + delay))


def expire_effects(session) -> int:
    """Run every reversal whose time has come, oldest first."""
    due = [e for e in session.effects if e.due(session.clock)]
    if not due:
        return 0
    session.effects = [e for e in session.effects if not e.due(session.clock)]
    for effect in due:
        _revert(session, effect.kind)
        logger.debug("Expired %s at t=%.2f", effect.kind.value, session.clock)
    return len(due)


def cancel_effects(session) -> int:
    """Drop all pending reversals without applying them."""
    count = len(session.effects)
    session.effects = []
    if count:
        logger.debug("Cancelled %d pending effect(s)", count)
    return count
