"""Axis-aligned collision tests and reflection helpers."""

from enum import Enum


class Axis(Enum):
    X = "x"
    Y = "y"


def clamp(val, lo, hi):
    return max(lo, min(hi, val))


def rects_overlap(a, b) -> bool:
    """Strict AABB overlap; boxes that only share an edge do not collide.

    Both arguments need ``x``, ``y``, ``width`` and ``height``.
    """
    return (a.x + a.width > b.x and a.x < b.x + b.width and
            a.y + a.height > b.y and a.y < b.y + b.height)


def circle_intersects_rect(ball, rect) -> bool:
    """Overlap of the ball's bounding box (centre +/- radius) with ``rect``."""
    r = ball.radius
    return (ball.x + r > rect.x and ball.x - r < rect.x + rect.width and
            ball.y + r > rect.y and ball.y - r < rect.y + rect.height)


def reflect(ball, axis: Axis):
    if axis is Axis.X:
        ball.dx = -ball.dx
    else:
        ball.dy = -ball.dy
