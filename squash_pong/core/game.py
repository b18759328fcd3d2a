"""
Squash Pong game state machine

Countdown -> Playing -> GameOver -> Countdown. The game owns the score, the
entities and the timer queue used by the countdown and game over animations.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum

from squash_pong.core.collision import CollisionWorld
from squash_pong.core.collision import Contact
from squash_pong.core.entities import Arena
from squash_pong.core.entities import Ball
from squash_pong.core.entities import Paddle
from squash_pong.core.entities import Wall
from squash_pong.core.entities import create_walls
from squash_pong.core.input import Direction
from squash_pong.core.input import PointerInput
from squash_pong.core.timers import TimerQueue
from squash_pong.utils.config import game_config

logger = logging.getLogger(__name__)

GAME_OVER_TEXT = "Game Over"


class GameStatus(Enum):
    """Current phase of the game"""

    COUNTDOWN = "countdown"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class ScoreChanged:
    score: int


@dataclass(frozen=True)
class StateChanged:
    status: GameStatus


GameEvent = ScoreChanged | StateChanged


@dataclass(frozen=True)
class Overlay:
    """Label drawn over the arena during the countdown and game over animations"""

    text: str
    opacity: float
    rotation: float


class Game:
    """Game aggregate: entities, score, state and animation timers"""

    def __init__(self) -> None:
        # Snapshot of the configuration, the arena never changes during a game
        self.arena = Arena.from_config()
        radius = game_config.BALL_RADIUS
        racket_height = game_config.RACKET_HEIGHT

        self.walls: list[Wall] = create_walls(self.arena, radius)
        self.paddle = Paddle(
            self.arena.width - 2 * radius,
            self.arena.mid_y,
            width=radius,
            height=racket_height,
            max_y=self.arena.height - racket_height,
        )
        self.ball = Ball(
            game_config.BALL_START_X,
            self.arena.mid_y,
            game_config.BALL_START_VX,
            game_config.BALL_START_VY,
            radius=radius,
        )
        self.world = CollisionWorld(self.walls, self.ball, self.paddle)
        self.input = PointerInput(self.arena.mid_y)
        self.timers = TimerQueue()

        self.countdown_start = game_config.COUNTDOWN_START
        self.fade_in = game_config.COUNTDOWN_FADE_IN
        self.fade_out = game_config.COUNTDOWN_FADE_OUT
        self.phase_duration = game_config.countdown_phase_duration
        self.spin_duration = game_config.GAME_OVER_SPIN_DURATION
        self.game_over_duration = game_config.game_over_duration

        self.score = 0
        self.status = GameStatus.COUNTDOWN
        self.label: str | None = None
        self.started = False
        self.games_played = 0

        self._label_started_at = 0.0
        self._events: list[GameEvent] = []

    @property
    def score_text(self) -> str:
        return str(self.score)

    @property
    def direction(self) -> Direction:
        return self.input.direction

    def start(self, now: float) -> None:
        """Starts the first countdown at the given clock time"""
        if self.started:
            return
        self.started = True
        self.timers.advance(now)
        self._enter_countdown(now)

    def advance_timers(self, now: float) -> None:
        """Runs the animation callbacks that are due"""
        self.timers.advance(now)

    def tick(self, dt: float) -> list[Contact]:
        """Advances paddle and ball by dt seconds while playing"""
        if self.status is not GameStatus.PLAYING or dt <= 0:
            return []

        direction = self.input.direction
        if direction is not Direction.NONE:
            self.paddle.move_by(direction.sign * self.paddle.speed * dt)

        self.ball.advance(dt)
        contacts = self.world.step()

        if any(contact.is_paddle_hit for contact in contacts):
            self._set_score(self.score + 1)

        if self.ball.position.x > self.arena.width:
            self._enter_game_over(self.timers.now)

        return contacts

    def drain_events(self) -> list[GameEvent]:
        """Returns and forgets the events emitted since the last call"""
        events, self._events = self._events, []
        return events

    def overlay(self, now: float) -> Overlay | None:
        """Current animated label, if any"""
        if self.label is None:
            return None

        elapsed = max(0.0, now - self._label_started_at)

        if self.status is GameStatus.GAME_OVER:
            elapsed = min(elapsed, self.game_over_duration)
            rotation = 2 * math.pi * elapsed / self.spin_duration
            return Overlay(self.label, 1.0, rotation)

        return Overlay(self.label, self._countdown_opacity(elapsed), 0.0)

    def _countdown_opacity(self, elapsed: float) -> float:
        if elapsed < self.fade_in:
            return elapsed / self.fade_in
        if self.fade_out <= 0:
            return 1.0
        fading = min(elapsed - self.fade_in, self.fade_out)
        return 1.0 - fading / self.fade_out

    def _enter_countdown(self, now: float) -> None:
        self.score = 0
        self._events.append(ScoreChanged(0))
        self.paddle.reset()
        self.ball.reset()
        self.ball.in_play = False
        self._set_status(GameStatus.COUNTDOWN)
        self._show_countdown(now, self.countdown_start)

    def _show_countdown(self, now: float, value: int) -> None:
        self.label = str(value)
        self._label_started_at = now
        self.timers.at(now + self.phase_duration, lambda t: self._countdown_done(t, value))

    def _countdown_done(self, now: float, value: int) -> None:
        if value > 0:
            self._show_countdown(now, value - 1)
        else:
            self._enter_playing()

    def _enter_playing(self) -> None:
        self.label = None
        self.ball.in_play = True
        self.games_played += 1
        self._set_status(GameStatus.PLAYING)

    def _enter_game_over(self, now: float) -> None:
        self.ball.in_play = False
        self.label = GAME_OVER_TEXT
        self._label_started_at = now
        self._set_status(GameStatus.GAME_OVER)
        logger.info("Game over with score %d", self.score)
        self.timers.at(now + self.game_over_duration, self._enter_countdown)

    def _set_score(self, score: int) -> None:
        if score == self.score:
            return
        self.score = score
        self._events.append(ScoreChanged(score))

    def _set_status(self, status: GameStatus) -> None:
        self.status = status
        self._events.append(StateChanged(status))
        logger.info("Game state: %s", status.value)
