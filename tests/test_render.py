import pytest

pygame = pytest.importorskip("pygame")

from neon_breakout import settings  # noqa: E402
from neon_breakout.entities import Ball, Brick, PowerUp, PowerUpType  # noqa: E402
from neon_breakout.render import PygameRenderer, draw_frame  # noqa: E402


def test_draw_order(session, renderer):
    session.bricks = [Brick(35, 60, 70, 25, (1, 2, 3)),
                      Brick(115, 60, 70, 25, (1, 2, 3), visible=False)]
    session.balls = [Ball(400, 300)]
    session.powerups = [PowerUp(100, 200, PowerUpType.MULTIBALL)]
    draw_frame(session, renderer)

    kinds = [c[0] for c in renderer.calls]
    assert kinds == ["clear", "rect", "rect", "rect", "circle", "rect", "text"]

    brick, highlight, paddle, ball, capsule, label = renderer.calls[1:]
    assert brick[1:5] == (35, 60, 70, 25)
    assert highlight[1:5] == (37, 62, 66, 12.5)
    assert paddle[1:5] == (350, 570, 100, 15)
    assert paddle[6] == settings.GLOW_PADDLE
    assert ball[1:4] == (400, 300, 8)
    assert capsule[1:5] == (100, 200, 30, 30)
    assert label[1:4] == ("oo", 115, 215)


def test_pygame_renderer_draws_on_surface():
    surface = pygame.Surface((100, 100))
    r = PygameRenderer(surface)
    r.clear()
    assert surface.get_at((0, 0))[:3] == settings.C_BG

    r.draw_rect(20, 20, 30, 30, (255, 0, 0), glow=10)
    assert surface.get_at((35, 35))[:3] == (255, 0, 0)

    r.draw_circle(75, 75, 8, (0, 255, 0), glow=6)
    assert surface.get_at((75, 75))[:3] == (0, 255, 0)


def test_translucent_rect_blends():
    surface = pygame.Surface((10, 10))
    surface.fill((0, 0, 0))
    PygameRenderer(surface).draw_rect(0, 0, 10, 10, settings.C_HILITE)
    red = surface.get_at((5, 5))[0]
    assert 0 < red < 255
