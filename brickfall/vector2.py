"""Two-dimensional vectors in screen coordinates (y grows downwards)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from brickfall.constants import PI

_FLT_EPSILON = 1.1920929e-07


def _ratio(numerator: float, denominator: float) -> float:
    """Divide the way IEEE floats do, yielding inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    LEFT: ClassVar[Vector2]
    RIGHT: ClassVar[Vector2]
    DOWN: ClassVar[Vector2]
    UP: ClassVar[Vector2]

    def theta(self) -> float:
        """Angle in degrees, measured counter-clockwise on screen."""
        if self.x < 0:
            angle = PI - math.atan(_ratio(-self.y, -self.x))
            return angle * 180 / PI
        return math.atan(_ratio(-self.y, self.x)) * 180 / PI

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance(self, other: Vector2) -> float:
        return (self - other).length()

    def normalize(self) -> Vector2:
        """Unit vector in the same direction, or zero for a near-zero vector."""
        size = self.length()
        if size < _FLT_EPSILON:
            return Vector2.ZERO
        return self / size

    def is_zero(self) -> bool:
        return self == Vector2.ZERO

    def turn(self, alpha: float) -> Vector2:
        """Reflect off a surface tilted by ``alpha`` degrees, keeping the length.

        Nearly horizontal results are replaced by a plain upward bounce.
        """
        size = self.length()
        if size == 0:
            raise ValueError("cannot turn a zero vector")
        cosine = max(-1.0, min(1.0, self.reverse_up().dot(Vector2.RIGHT) / size))
        theta = 2.0 * PI - math.acos(cosine)
        theta_prime = PI + 2.0 * (alpha * PI / 180.0) - theta
        if abs(theta_prime - PI) < PI / 9.0 or abs(theta_prime) < PI / 9.0:
            return self.reverse_up()
        return Vector2(size * math.cos(theta_prime), -size * math.sin(theta_prime))

    def reverse(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def reverse_up(self) -> Vector2:
        return Vector2(self.x, -abs(self.y))

    def reverse_down(self) -> Vector2:
        return Vector2(self.x, abs(self.y))

    def reverse_left(self) -> Vector2:
        return Vector2(-abs(self.x), self.y)

    def reverse_right(self) -> Vector2:
        return Vector2(abs(self.x), self.y)

    def reverse_lu(self) -> Vector2:
        return Vector2(-abs(self.x), -abs(self.y))

    def reverse_ru(self) -> Vector2:
        return Vector2(abs(self.x), -abs(self.y))

    def reverse_rd(self) -> Vector2:
        return Vector2(abs(self.x), abs(self.y))

    def reverse_ld(self) -> Vector2:
        return Vector2(-abs(self.x), abs(self.y))

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __lt__(self, other: Vector2) -> bool:
        return self.x < other.x or self.y < other.y


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.LEFT = Vector2(-1.0, 0.0)
Vector2.RIGHT = Vector2(1.0, 0.0)
Vector2.DOWN = Vector2(0.0, 1.0)
Vector2.UP = Vector2(0.0, -1.0)


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle given by its top-left and bottom-right corners."""

    top_left: Vector2
    bottom_right: Vector2

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y

    @property
    def center(self) -> Vector2:
        return Vector2(
            self.width / 2.0 + self.top_left.x,
            self.height / 2.0 + self.top_left.y,
        )