import pytest

from neon_breakout.effects import apply_powerup
from neon_breakout.entities import Ball, Brick, PowerUp, PowerUpType
from neon_breakout.interfaces import Cue
from neon_breakout.simulation import (check_win, detect_brick_collision, move_ball,
                                      move_powerups, step)


def brick(x, y, **kw):
    return Brick(x, y, 70, 25, (0, 255, 136), **kw)


# ── Ball motion ──────────────────────────────────────────────

def test_ball_bounces_off_right_wall(session, sound):
    ball = Ball(790, 300, dx=4, dy=-4)
    assert move_ball(session, ball, sound)
    assert (ball.x, ball.y) == (794, 296)
    assert ball.dx == -4
    assert ball.dy == -4
    assert sound.cues == [Cue.BOUNCE]


def test_ball_bounces_off_left_wall_and_ceiling(session, sound):
    ball = Ball(10, 6, dx=-4, dy=-4)
    move_ball(session, ball, sound)
    assert (ball.dx, ball.dy) == (4, 4)
    assert sound.cues == [Cue.BOUNCE, Cue.BOUNCE]


def test_dead_centre_paddle_hit_goes_straight_up(session, sound):
    ball = Ball(400, 560, dx=0, dy=5)
    assert move_ball(session, ball, sound)
    assert ball.dx == pytest.approx(0.0)
    assert ball.dy == pytest.approx(-5.0)
    assert sound.cues == [Cue.BOUNCE]


def test_paddle_bounce_preserves_speed(session, sound):
    ball = Ball(360, 560, dx=3, dy=4)
    move_ball(session, ball, sound)
    assert ball.dy < 0
    assert ball.speed == pytest.approx(5.0)


def test_rising_ball_does_not_retrigger_paddle(session, sound):
    ball = Ball(400, 575, dx=0, dy=-5)
    move_ball(session, ball, sound)
    assert ball.dy == -5
    assert sound.cues == []


def test_ball_outside_paddle_span_is_not_bounced(session, sound):
    ball = Ball(100, 560, dx=0, dy=5)
    move_ball(session, ball, sound)
    assert ball.dy == 5


def test_ball_past_floor_is_lost(session, sound):
    assert not move_ball(session, Ball(50, 590, dx=0, dy=4), sound)
    assert move_ball(session, Ball(50, 580, dx=0, dy=4), sound)


# ── Bricks ───────────────────────────────────────────────────

def test_brick_hit_scores_by_level(session, sound):
    session.level = 3
    session.score = 0
    target = brick(100, 100)
    session.bricks = [target]
    session.balls = [Ball(130, 120, dx=2, dy=-4)]

    assert detect_brick_collision(session, sound) == 1
    assert target.visible is False
    assert session.balls[0].dy == 4
    assert session.score == 30
    assert sound.cues == [Cue.BRICK_BREAK]
    assert session.powerups == []


def test_simultaneous_hits_are_each_processed(session, sound):
    session.score = 0
    left, right = brick(100, 100), brick(170, 100)
    session.bricks = [left, right]
    session.balls = [Ball(170, 130, dx=0, dy=-4)]

    assert detect_brick_collision(session, sound) == 2
    assert not left.visible and not right.visible
    # Flipped once per brick
    assert session.balls[0].dy == -4
    assert session.score == 20


def test_every_ball_checks_every_brick(session, sound):
    session.score = 0
    a, b = brick(100, 100), brick(400, 100)
    session.bricks = [a, b]
    session.balls = [Ball(130, 120), Ball(430, 120)]
    assert detect_brick_collision(session, sound) == 2


def test_hidden_brick_is_ignored(session, sound):
    gone = brick(100, 100, visible=False)
    session.bricks = [gone]
    session.balls = [Ball(130, 120, dy=-4)]
    assert detect_brick_collision(session, sound) == 0
    assert gone.visible is False
    assert session.balls[0].dy == -4


def test_powerup_brick_drops_capsule(session, sound):
    session.bricks = [brick(100, 100, has_powerup=True)]
    session.balls = [Ball(130, 120)]
    detect_brick_collision(session, sound)

    assert len(session.powerups) == 1
    pu = session.powerups[0]
    assert (pu.x, pu.y) == (120, 100)
    assert pu.kind in PowerUpType


def test_check_win(session):
    session.bricks = [brick(0, 0), brick(100, 0)]
    assert not check_win(session)
    session.bricks[0].destroy()
    assert not check_win(session)
    session.bricks[1].destroy()
    assert check_win(session)


# ── Power-ups ────────────────────────────────────────────────

def test_caught_powerup_applies_effect(session, sound):
    session.powerups = [PowerUp(380, 545, PowerUpType.ENLARGE)]
    assert move_powerups(session, sound) == 1
    assert session.powerups == []
    assert session.paddle.width == 130
    assert len(session.effects) == 1
    assert sound.cues == [Cue.POWER_UP]


def test_missed_powerup_is_discarded(session, sound):
    session.powerups = [PowerUp(10, 599, PowerUpType.SHRINK)]
    assert move_powerups(session, sound) == 0
    assert session.powerups == []
    assert session.lives == 3
    assert sound.cues == []


def test_falling_powerup_keeps_falling(session, sound):
    pu = PowerUp(10, 100, PowerUpType.SPEED)
    session.powerups = [pu]
    move_powerups(session, sound)
    assert session.powerups == [pu]
    assert pu.y == 102


def test_two_catches_in_one_frame_both_apply(session, sound):
    session.powerups = [PowerUp(360, 545, PowerUpType.ENLARGE),
                        PowerUp(400, 545, PowerUpType.ENLARGE)]
    assert move_powerups(session, sound) == 2
    assert session.paddle.width == 150
    assert len(session.effects) == 2


# ── Whole frame ──────────────────────────────────────────────

def test_step_reports_all_balls_lost(session, sound):
    session.balls = [Ball(50, 590, dx=0, dy=4)]
    result = step(session, 1 / 60, sound)
    assert result.all_balls_lost
    assert result.balls_lost == 1
    assert session.balls == []
    assert result.bricks_broken == 0


def test_losing_last_ball_skips_the_clear_check(session, sound):
    for b in session.bricks:
        b.destroy()
    session.balls = [Ball(50, 590, dx=0, dy=4)]
    result = step(session, 1 / 60, sound)
    assert result.all_balls_lost
    assert not result.cleared


def test_step_reports_cleared_field(session, sound):
    session.bricks = [brick(370, 520)]
    session.balls = [Ball(400, 550, dx=4, dy=-4)]
    result = step(session, 1 / 60, sound)
    assert result.bricks_broken == 1
    assert result.cleared


def test_step_runs_due_reversals_first(session, sound):
    session.balls = [Ball(400, 300, dx=4, dy=-4)]
    apply_powerup(session, PowerUpType.SPEED, sound)
    assert session.balls[0].dx == pytest.approx(5.2)

    result = step(session, 7.0, sound)
    assert result.effects_expired == 0
    result = step(session, 1.0, sound)
    assert result.effects_expired == 1
    assert session.balls[0].dx == pytest.approx(4.0)
    assert session.effects == []


def test_paddle_stays_in_bounds_over_many_frames(session, sound):
    session.paddle.dx = 8
    for _ in range(200):
        step(session, 1 / 60, sound)
        if not session.balls:
            session.balls = [session.new_ball()]
        p = session.paddle
        assert 60 <= p.width <= 150
        assert 0 <= p.x <= session.width - p.width
