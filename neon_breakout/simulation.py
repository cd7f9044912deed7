"""
One frame of play: move, collide, spawn, cull, score.

``step`` never changes ``session.state``; it reports what happened in a
``FrameResult`` and leaves life loss and level transitions to the
controller.
"""

from dataclasses import dataclass

from neon_breakout import settings
from neon_breakout.effects import apply_powerup, expire_effects
from neon_breakout.entities import Ball, PowerUp, PowerUpType
from neon_breakout.geometry import Axis, circle_intersects_rect, rects_overlap, reflect
from neon_breakout.interfaces import Cue


@dataclass
class FrameResult:
    balls_lost:      int  = 0
    bricks_broken:   int  = 0
    powerups_caught: int  = 0
    effects_expired: int  = 0
    all_balls_lost:  bool = False
    cleared:         bool = False


# ─────────────────────────────────────────────────────────────
# BALLS
# ─────────────────────────────────────────────────────────────

def move_ball(session, ball: Ball, sound) -> bool:
    """Advance one ball and bounce it. Returns False once it drops out."""
    ball.advance()
    r = ball.radius

    # Walls
    if ball.x + r > session.width or ball.x - r < 0:
        reflect(ball, Axis.X)
        sound.play_cue(Cue.BOUNCE)
    if ball.y - r < 0:
        reflect(ball, Axis.Y)
        sound.play_cue(Cue.BOUNCE)

    # Paddle: only while falling, so an overlapping ball cannot re-trigger
    paddle = session.paddle
    if (ball.y + r > paddle.y and
            paddle.x < ball.x < paddle.x + paddle.width and
            ball.dy > 0):
        ball.bounce_off(paddle)
        sound.play_cue(Cue.BOUNCE)

    return ball.y + r <= session.height


# ─────────────────────────────────────────────────────────────
# POWER-UPS
# ─────────────────────────────────────────────────────────────

def move_powerups(session, sound) -> int:
    """Drop every capsule one step; apply caught ones, discard missed ones."""
    kept, caught = [], 0
    for powerup in list(session.powerups):
        powerup.fall()
        if rects_overlap(powerup, session.paddle):
            apply_powerup(session, powerup.kind, sound)
            sound.play_cue(Cue.POWER_UP)
            caught += 1
        elif powerup.y <= session.height:
            kept.append(powerup)
    session.powerups = kept
    return caught


# ─────────────────────────────────────────────────────────────
# BRICKS
# ─────────────────────────────────────────────────────────────

def detect_brick_collision(session, sound) -> int:
    """
    Test every ball against every standing brick.

    Each overlap is handled on its own: a ball touching two bricks in the
    same frame breaks both and has its vertical direction flipped twice.
    """
    broken = 0
    kinds = list(PowerUpType)
    for ball in session.balls:
        for brick in session.bricks:
            if not brick.visible or not circle_intersects_rect(ball, brick):
                continue
            reflect(ball, Axis.Y)
            brick.destroy()
            session.score += settings.POINTS_PER_BRICK * session.level
            sound.play_cue(Cue.BRICK_BREAK)
            broken += 1
            if brick.has_powerup:
                session.powerups.append(PowerUp.from_brick(brick, session.rng.choice(kinds)))
    return broken


def check_win(session) -> bool:
    return all(not brick.visible for brick in session.bricks)


# ─────────────────────────────────────────────────────────────
# FRAME
# ─────────────────────────────────────────────────────────────

def step(session, dt, sound) -> FrameResult:
    """Run one frame. ``dt`` (seconds) only drives the effect timers."""
    result = FrameResult()
    session.clock += dt
    result.effects_expired = expire_effects(session)

    session.paddle.move(session.width)
    result.powerups_caught = move_powerups(session, sound)

    in_play = [ball for ball in session.balls if move_ball(session, ball, sound)]
    result.balls_lost = len(session.balls) - len(in_play)
    session.balls = in_play
    if not in_play:
        # No ball left to hit anything; the controller serves the next one
        result.all_balls_lost = True
        return result

    result.bricks_broken = detect_brick_collision(session, sound)
    result.cleared = check_win(session)
    return result
