"""
Tuning constants for Neon Breakout.

Velocities are in pixels per frame, timings in seconds.
"""

# ─────────────────────────────────────────────────────────────
# CANVAS
# ─────────────────────────────────────────────────────────────

CANVAS_W, CANVAS_H = 800, 600
FPS = 60
MAX_FRAME_DT = 0.05   # Cap on a single frame's dt after a stall

# ─────────────────────────────────────────────────────────────
# GAME BALANCE
# ─────────────────────────────────────────────────────────────

START_LIVES = 3
START_LEVEL = 1
POINTS_PER_BRICK = 10        # multiplied by the current level
LEVEL_SPEED_FACTOR = 1.1     # ball speed-up per cleared level

PADDLE_W        = 100
PADDLE_H        = 15
PADDLE_MIN_W    = 60
PADDLE_MAX_W    = 150
PADDLE_SPEED    = 8
PADDLE_BOTTOM   = 30         # paddle.y = canvas height - PADDLE_BOTTOM
TOUCH_SCALE     = 0.5

BALL_RADIUS     = 8
BALL_DX         = 4
BALL_DY         = -4
BALL_SPAWN_BOTTOM = 50       # ball.y = canvas height - BALL_SPAWN_BOTTOM
MAX_BALLS       = 5
BOUNCE_ANGLE    = 60         # degrees per unit of hit offset from the paddle centre

BRICK_ROWS      = 5
BRICK_MAX_COLS  = 8
BRICK_W         = 70
BRICK_H         = 25
BRICK_PADDING   = 10
BRICK_OFFSET_TOP  = 60
BRICK_OFFSET_LEFT = 35
POWERUP_CHANCE  = 0.15       # probability a brick carries a power-up

POWERUP_SIZE    = 30
POWERUP_SPEED   = 2

# ─────────────────────────────────────────────────────────────
# POWER-UP EFFECTS
# ─────────────────────────────────────────────────────────────

ENLARGE_DELTA     = 30
ENLARGE_REVERT_FLOOR = 100
ENLARGE_DURATION  = 10.0

SHRINK_DELTA      = 20
SHRINK_REVERT_CAP = 100
SHRINK_DURATION   = 8.0

SPEED_FACTOR      = 1.3
SPEED_DURATION    = 8.0

MULTIBALL_SPREAD  = 1.2

# ─────────────────────────────────────────────────────────────
# COLOURS (retro-neon palette)
# ─────────────────────────────────────────────────────────────

C_BG      = (10,  10,  26)
C_PADDLE  = (0,   245, 255)
C_BALL    = (255, 0,   255)
C_WHITE   = (255, 255, 255)
C_BLACK   = (0,   0,   0)
C_SCORE   = (255, 240, 180)
C_GOLD    = (255, 200, 50)
C_RED     = (255, 60,  60)
C_HILITE  = (255, 255, 255, 51)   # inner brick glow, 20% white

BRICK_COLORS = [
    (0,   245, 255),
    (255, 0,   255),
    (0,   255, 136),
    (255, 170, 0),
    (255, 0,   128),
]

# Glow radius (px) handed to the renderer for each entity kind
GLOW_PADDLE  = 20
GLOW_BALL    = 15
GLOW_BRICK   = 10
GLOW_POWERUP = 15
