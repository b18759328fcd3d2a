"""
Collision world for Squash Pong

Detects ball contacts with the walls and the paddle, pushes the ball back
to the contact boundary and reflects its velocity. There is no right wall:
the open side is where the ball escapes, which the game checks itself.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from squash_pong.core.entities import Ball
from squash_pong.core.entities import BodyCategory
from squash_pong.core.entities import Paddle
from squash_pong.core.entities import Wall
from squash_pong.core.entities import WallSide
from squash_pong.core.geometry import Axis
from squash_pong.core.geometry import Rect
from squash_pong.core.geometry import intersects
from squash_pong.core.geometry import reflect

logger = logging.getLogger(__name__)


class PaddleFace(Enum):
    """Paddle faces in arena coordinates, the front one faces the arena"""

    FRONT = "front"
    BACK = "back"
    BOTTOM = "bottom"
    TOP = "top"


@dataclass(frozen=True)
class Contact:
    """A ball contact resolved during one step"""

    category: BodyCategory
    axis: Axis
    side: WallSide | None = None

    @property
    def is_paddle_hit(self) -> bool:
        return self.category is BodyCategory.PADDLE


class CollisionWorld:
    """Tracks the static walls and the moving ball and paddle"""

    def __init__(self, walls: list[Wall], ball: Ball, paddle: Paddle):
        self.walls = list(walls)
        self.ball = ball
        self.paddle = paddle

    def step(self) -> list[Contact]:
        """Resolves the contacts of the current ball position, walls before paddle"""
        contacts = []

        for wall in self.walls:
            contact = self._resolve_wall(wall)
            if contact is not None:
                contacts.append(contact)

        contact = self._resolve_paddle()
        if contact is not None:
            contacts.append(contact)

        for contact in contacts:
            logger.debug("Ball contact: %s %s", contact.category.name, contact.side)

        return contacts

    def _resolve_wall(self, wall: Wall) -> Contact | None:
        ball = self.ball
        if not (intersects(ball.circle, wall.rect) or self._beyond(wall)):
            return None

        # Push the ball back to the wall boundary, bounce only when moving into it
        if wall.side is WallSide.LEFT:
            axis = Axis.X
            ball.position.x = wall.rect.right + ball.radius
            approaching = ball.velocity.x < 0
        elif wall.side is WallSide.TOP:
            axis = Axis.Y
            ball.position.y = wall.rect.bottom - ball.radius
            approaching = ball.velocity.y > 0
        else:
            axis = Axis.Y
            ball.position.y = wall.rect.top + ball.radius
            approaching = ball.velocity.y < 0

        if not approaching:
            return None

        ball.velocity = reflect(ball.velocity, axis)
        return Contact(wall.category, axis, wall.side)

    def _beyond(self, wall: Wall) -> bool:
        """Ball center past the outer face of the wall after a long step"""
        position = self.ball.position
        if wall.side is WallSide.LEFT:
            return position.x < wall.rect.left
        if wall.side is WallSide.TOP:
            return position.y > wall.rect.top
        return position.y < wall.rect.bottom

    def _resolve_paddle(self) -> Contact | None:
        ball = self.ball
        rect = self.paddle.get_rect()
        if not intersects(ball.circle, rect):
            return None

        # Push the ball out through the face it penetrates least
        face = self._paddle_exit_face(rect)
        if face is PaddleFace.FRONT:
            axis = Axis.X
            ball.position.x = rect.left - ball.radius
            approaching = ball.velocity.x > 0
        elif face is PaddleFace.BACK:
            # Already behind the paddle, on its way out of the arena
            ball.position.x = rect.right + ball.radius
            return None
        elif face is PaddleFace.BOTTOM:
            axis = Axis.Y
            ball.position.y = rect.bottom - ball.radius
            approaching = ball.velocity.y > 0
        else:
            axis = Axis.Y
            ball.position.y = rect.top + ball.radius
            approaching = ball.velocity.y < 0

        # A ball already moving away is leaving a previous contact
        if not approaching:
            return None

        ball.velocity = reflect(ball.velocity, axis)
        return Contact(self.paddle.category, axis)

    def _paddle_exit_face(self, rect: Rect) -> PaddleFace:
        """Paddle face with the smallest ball penetration, front face on ties"""
        x, y = self.ball.position.x, self.ball.position.y
        radius = self.ball.radius
        penetrations = {
            PaddleFace.FRONT: x + radius - rect.left,
            PaddleFace.BACK: rect.right - (x - radius),
            PaddleFace.BOTTOM: y + radius - rect.bottom,
            PaddleFace.TOP: rect.top - (y - radius),
        }
        return min(penetrations, key=penetrations.__getitem__)
