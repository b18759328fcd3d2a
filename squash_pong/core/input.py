"""
Pointer/touch input mapped to a paddle direction
"""

import logging
import math
from enum import Enum

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Paddle movement intent"""

    NONE = 0
    UP = 1
    DOWN = 2

    @property
    def sign(self) -> int:
        """Vertical sign of the movement, UP goes toward increasing Y"""
        if self is Direction.UP:
            return 1
        if self is Direction.DOWN:
            return -1
        return 0


class PointerInput:
    """
    Sticky direction signal fed by pointer events.

    The last processed touch wins. The signal stays set until the touch ends.
    """

    def __init__(self, mid_y: float):
        self.mid_y = mid_y
        self.direction = Direction.NONE

    def on_input_start(self, y: float) -> Direction:
        """Touch began or moved at vertical coordinate y (arena units, y-up)"""
        try:
            y = float(y)
        except (TypeError, ValueError):
            y = math.nan

        if not math.isfinite(y):
            logger.debug("Rejected pointer coordinate %r", y)
            self.direction = Direction.NONE
        elif y > self.mid_y:
            self.direction = Direction.UP
        elif y < self.mid_y:
            self.direction = Direction.DOWN
        # Exactly on the midpoint keeps the current direction

        return self.direction

    def on_input_end(self) -> None:
        """Touch released"""
        self.direction = Direction.NONE
