"""
╔══════════════════════════════════════════════════════════════╗
║           NEON BREAKOUT — Brick-Breaker Arcade Game          ║
║           Built with Python + Pygame                         ║
╚══════════════════════════════════════════════════════════════╝

ARCHITECTURE OVERVIEW:
    Game            — pygame host: window, frame clock, event routing
    GameController  — State machine, lives, levels, menu and score readout
    Session         — Per-game context: progress, entities, effect clock
    simulation      — One frame: move, bounce, break bricks, catch power-ups
    effects         — Power-up application and timed reversals
    Paddle / Ball   — Player paddle and bouncing balls
    Brick / PowerUp — Brick grid and falling power-up capsules
    Controls        — Keyboard and touch/mouse drag input
    PygameRenderer  — Glowing neon drawing of the field
    UI              — Menus, HUD readout and overlay text
    SoundManager    — Synthesized tone cues (silent if no audio device)

STATE MACHINE:
    MENU → PLAYING ⇄ PAUSED
    PLAYING → LEVEL_COMPLETE → PLAYING (next level)
    PLAYING → GAME_OVER → PLAYING (restart)

DEPENDENCIES:
    pip install pygame
    python -m neon_breakout
"""

__version__ = "1.0.0"
