"""
Frame driver: the entry point called once per rendered frame
"""

import logging
import math

from squash_pong.core.game import Game
from squash_pong.core.game import GameEvent
from squash_pong.core.game import GameStatus
from squash_pong.core.input import Direction

logger = logging.getLogger(__name__)


class FrameDriver:
    """Turns frame timestamps and pointer events into game updates"""

    def __init__(self, game: Game | None = None):
        self.game = game if game is not None else Game()
        self.previous_time: float | None = None

    def on_frame(self, timestamp: float) -> list[GameEvent]:
        """
        Drives one simulation tick.

        Args:
            timestamp: Current clock time in seconds

        Returns:
            Events emitted since the previous frame
        """
        game = self.game
        if not math.isfinite(timestamp):
            logger.debug("Ignored frame with timestamp %r", timestamp)
            return game.drain_events()

        if not game.started:
            game.start(timestamp)
        else:
            game.advance_timers(timestamp)

        if game.status is GameStatus.PLAYING:
            # No previous frame right after entering Playing: nothing moves
            if self.previous_time is not None:
                dt = max(0.0, timestamp - self.previous_time)
                game.tick(dt)
                timestamp = max(timestamp, self.previous_time)
            self.previous_time = timestamp
        else:
            self.previous_time = None

        return game.drain_events()

    def on_input_start(self, y: float) -> Direction:
        return self.game.input.on_input_start(y)

    def on_input_end(self) -> None:
        self.game.input.on_input_end()
