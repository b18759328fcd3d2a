"""
Geometry and physics primitives: vectors, rectangles, circles and bounce math
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class Axis(Enum):
    """Axis along which a velocity component is reflected"""

    X = "x"
    Y = "y"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, (x, y) is the bottom-left corner"""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.x + self.width / 2, self.y + self.height / 2)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Circle:
    """Circle given by its center and radius"""

    center: Vector2D
    radius: float


def reflect(velocity: Vector2D, axis: Axis) -> Vector2D:
    """Negates the velocity component along the given axis (restitution 1.0)"""
    if axis is Axis.X:
        return Vector2D(-velocity.x, velocity.y)
    return Vector2D(velocity.x, -velocity.y)


def closest_point(point: Vector2D, rect: Rect) -> Vector2D:
    """Closest point of the rectangle to the given point"""
    return Vector2D(
        max(rect.left, min(point.x, rect.right)),
        max(rect.bottom, min(point.y, rect.top)),
    )


def intersects(circle: Circle, rect: Rect) -> bool:
    """Detects overlap between a circle and a rectangle"""
    closest = closest_point(circle.center, rect)
    distance = (circle.center - closest).magnitude()
    return distance < circle.radius
