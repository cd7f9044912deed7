from neon_breakout.entities import Ball, Brick
from neon_breakout.geometry import Axis, circle_intersects_rect, clamp, rects_overlap, reflect


def brick(x=100, y=100, w=70, h=25):
    return Brick(x, y, w, h, (0, 0, 0))


def test_circle_overlapping_rect_collides():
    assert circle_intersects_rect(Ball(95, 110, radius=8), brick())
    assert circle_intersects_rect(Ball(135, 112, radius=8), brick())


def test_circle_touching_edge_does_not_collide():
    # Right edge of the ball's box sits exactly on the brick's left edge
    assert not circle_intersects_rect(Ball(92, 110, radius=8), brick())
    # Ball's top exactly on the brick's bottom edge
    assert not circle_intersects_rect(Ball(130, 133, radius=8), brick())


def test_circle_far_from_rect():
    assert not circle_intersects_rect(Ball(400, 400, radius=8), brick())


def test_rects_overlap_is_strict():
    a = brick(0, 0, 10, 10)
    assert rects_overlap(a, brick(5, 5, 10, 10))
    assert not rects_overlap(a, brick(10, 0, 10, 10))
    assert not rects_overlap(a, brick(0, 10, 10, 10))


def test_reflect_negates_one_component():
    ball = Ball(0, 0, dx=3, dy=-2)
    reflect(ball, Axis.X)
    assert (ball.dx, ball.dy) == (-3, -2)
    reflect(ball, Axis.Y)
    assert (ball.dx, ball.dy) == (-3, 2)


def test_clamp():
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(7, 0, 10) == 7
