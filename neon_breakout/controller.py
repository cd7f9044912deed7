"""
Game state machine.

    MENU ──start──▶ PLAYING ◀──pause/resume──▶ PAUSED
                      │  ▲
       bricks cleared │  │ next_level
                      ▼  │
                  LEVEL_COMPLETE

    PLAYING ──lives hit 0──▶ GAME_OVER ──restart──▶ PLAYING

The controller owns level/life/score bookkeeping around the per-frame
``simulation.step`` and talks to the menu, sound and score readout
collaborators.
"""

import logging
from typing import Optional

from neon_breakout import settings
from neon_breakout.effects import cancel_effects
from neon_breakout.interfaces import Cue, Display, MenuUI, NullDisplay, NullSound, NullUI, Sound
from neon_breakout.session import GameState, Session
from neon_breakout.simulation import FrameResult, step

logger = logging.getLogger(__name__)

MENU_START          = "start-menu"
MENU_LEVEL_COMPLETE = "level-complete-menu"
MENU_GAME_OVER      = "game-over-menu"
MENU_PAUSE          = "pause-menu"

TEXT_LEVEL_COMPLETE = "level-complete-text"
TEXT_FINAL_SCORE    = "final-score"


class InvalidTransition(RuntimeError):
    """An action was requested in a state that does not offer it."""


class GameController:

    def __init__(self, session: Optional[Session] = None, sound: Optional[Sound] = None,
                 ui: Optional[MenuUI] = None, display: Optional[Display] = None):
        self.session = session or Session()
        self.sound   = sound or NullSound()
        self.ui      = ui or NullUI()
        self.display = display or NullDisplay()
        self._shown  = None

        self.ui.show_menu(MENU_START)
        self._push_display()

    @property
    def state(self) -> GameState:
        return self.session.state

    # ── Transitions ───────────────────────────────────────────

    def start(self):
        self._require(GameState.MENU, action="start")
        self._begin()

    def restart(self):
        self._require(GameState.GAME_OVER, GameState.LEVEL_COMPLETE,
                      GameState.PAUSED, GameState.PLAYING, action="restart")
        self.session.reset_progress()
        self._begin()

    def next_level(self):
        self._require(GameState.LEVEL_COMPLETE, action="next_level")
        s = self.session
        s.level += 1
        # Balls still in play speed up, then the new level serves a fresh one.
        for ball in s.balls:
            ball.scale(settings.LEVEL_SPEED_FACTOR)
        self._begin()

    def pause(self):
        self._require(GameState.PLAYING, action="pause")
        self._set_state(GameState.PAUSED)
        self.session.paddle.dx = 0
        self.ui.show_menu(MENU_PAUSE)

    def resume(self):
        self._require(GameState.PAUSED, action="resume")
        self.ui.hide_all_menus()
        self._set_state(GameState.PLAYING)

    def toggle_pause(self) -> bool:
        """Pause or resume; ignored outside play. Returns True if it acted."""
        if self.state == GameState.PLAYING:
            self.pause()
        elif self.state == GameState.PAUSED:
            self.resume()
        else:
            return False
        return True

    def activate(self) -> bool:
        """Press the current menu's button, if it has one."""
        if self.state == GameState.MENU:
            self.start()
        elif self.state == GameState.LEVEL_COMPLETE:
            self.next_level()
        elif self.state == GameState.GAME_OVER:
            self.restart()
        else:
            return False
        return True

    # ── Frame ─────────────────────────────────────────────────

    def tick(self, dt) -> Optional[FrameResult]:
        """Advance one frame. Does nothing unless the game is playing."""
        if self.state != GameState.PLAYING:
            return None

        result = step(self.session, dt, self.sound)
        if result.all_balls_lost:
            self._lose_life()
        elif self.session.lives <= 0:
            self._game_over()
        elif result.cleared:
            self._level_complete()
        self._push_display()
        return result

    # ── Internals ─────────────────────────────────────────────

    def _begin(self):
        """Shared initializer for a fresh game, a restart and a new level."""
        s = self.session
        cancel_effects(s)
        s.reset_field()
        self.ui.hide_all_menus()
        self._set_state(GameState.PLAYING)
        self._push_display(force=True)

    def _lose_life(self):
        s = self.session
        s.lives = max(0, s.lives - 1)
        self.sound.play_cue(Cue.LIFE_LOST)
        if s.lives <= 0:
            self._game_over()
        else:
            s.balls = [s.new_ball()]
            logger.info("Ball lost, %d lives left", s.lives)

    def _level_complete(self):
        s = self.session
        cancel_effects(s)
        self._set_state(GameState.LEVEL_COMPLETE)
        self.ui.set_text(TEXT_LEVEL_COMPLETE,
                         f"You cleared level {s.level}! Score: {s.score}")
        self.ui.show_menu(MENU_LEVEL_COMPLETE)

    def _game_over(self):
        s = self.session
        cancel_effects(s)
        self._set_state(GameState.GAME_OVER)
        logger.info("Game over: %s", s.snapshot())
        self.ui.set_text(TEXT_FINAL_SCORE, f"Final score: {s.score}")
        self.ui.show_menu(MENU_GAME_OVER)

    def _set_state(self, state: GameState):
        logger.info("%s -> %s", self.session.state.name, state.name)
        self.session.state = state

    def _require(self, *states, action):
        if self.state not in states:
            raise InvalidTransition(f"cannot {action} while {self.state.name}")

    def _push_display(self, force=False):
        s = self.session
        values = (s.score, s.lives, s.level)
        if force or values != self._shown:
            self._shown = values
            self.display.update_display(*values)
