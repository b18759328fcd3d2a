"""
Squash Pong game entities: arena, walls, ball and paddle
"""

from dataclasses import dataclass
from enum import Enum
from enum import IntFlag

from squash_pong.core.geometry import Circle
from squash_pong.core.geometry import Rect
from squash_pong.core.geometry import Vector2D
from squash_pong.utils.config import game_config


class BodyCategory(IntFlag):
    """Collision categories of the bodies in the arena"""

    BALL = 1
    WALL = 2
    PADDLE = 4


class WallSide(Enum):
    """The three closed sides of the arena, the right side is open"""

    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Arena:
    """Fixed playfield size"""

    width: float
    height: float

    @classmethod
    def from_config(cls) -> "Arena":
        return cls(float(game_config.ARENA_WIDTH), float(game_config.ARENA_HEIGHT))

    @property
    def mid_y(self) -> float:
        return self.height / 2


@dataclass(frozen=True)
class Wall:
    """Static wall, never moves"""

    side: WallSide
    rect: Rect
    category: BodyCategory = BodyCategory.WALL


def create_walls(arena: Arena, thickness: float) -> list[Wall]:
    """Creates the left, top and bottom walls, in collision order"""
    return [
        Wall(WallSide.LEFT, Rect(0.0, 0.0, thickness, arena.height)),
        Wall(WallSide.TOP, Rect(0.0, arena.height - thickness, arena.width, thickness)),
        Wall(WallSide.BOTTOM, Rect(0.0, 0.0, arena.width, thickness)),
    ]


class Ball:
    """Game ball: frictionless, gravity-free and perfectly elastic"""

    category = BodyCategory.BALL

    def __init__(self, x: float, y: float, vx: float, vy: float, radius: float | None = None):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius if radius is not None else game_config.BALL_RADIUS
        self.start_position = self.position.copy()
        self.start_velocity = self.velocity.copy()
        # Only a ball in play is advanced and rendered
        self.in_play = False

    def advance(self, dt: float) -> None:
        """Updates the ball position by linear integration"""
        self.position = self.position + self.velocity * dt

    def reset(self) -> None:
        """Puts the ball back to its start position and velocity"""
        self.position = self.start_position.copy()
        self.velocity = self.start_velocity.copy()

    @property
    def circle(self) -> Circle:
        return Circle(self.position.copy(), self.radius)


class Paddle:
    """Player paddle, only moves vertically"""

    category = BodyCategory.PADDLE

    def __init__(
        self,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
        max_y: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.start_position = self.position.copy()
        self.speed = game_config.PADDLE_SPEED
        self.width = width if width is not None else game_config.BALL_RADIUS
        self.height = height if height is not None else game_config.RACKET_HEIGHT

        self.min_y = 0.0
        self.max_y = max_y if max_y is not None else game_config.ARENA_HEIGHT - self.height

    def move_by(self, delta_y: float, bounded_by_arena: bool = True) -> None:
        """Moves the paddle vertically, clamped to its movement bounds"""
        y = self.position.y + delta_y
        if bounded_by_arena:
            y = max(self.min_y, min(self.max_y, y))
        self.position.y = y

    def reset(self) -> None:
        """Puts the paddle back to its start position"""
        self.position = self.start_position.copy()

    def get_rect(self) -> Rect:
        """Returns the collision rectangle"""
        return Rect(self.position.x, self.position.y, self.width, self.height)
