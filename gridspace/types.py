"""
Type definitions for the plane.

Points are plain (x, y) pairs of integers. The Y axis grows downwards, as on a
screen or a tile grid: moving UP decreases y, moving DOWN increases it.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple, TypeVar

from .constants import DIRECTION_ARROWS, DIRECTION_DELTAS

V = TypeVar("V")


class Axis(StrEnum):
    """The axes of a plane"""

    Y = "y"
    X = "x"

    def __invert__(self) -> Axis:
        """The perpendicular axis."""
        return Axis.X if self is Axis.Y else Axis.Y


class Direction(StrEnum):
    """The four orthogonal directions"""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def axis(self) -> Axis:
        """Axis along which this direction moves."""
        return Axis.Y if self in (Direction.UP, Direction.DOWN) else Axis.X

    @property
    def delta(self) -> tuple[int, int]:
        return DIRECTION_DELTAS[self.value]

    @property
    def arrow(self) -> str:
        return DIRECTION_ARROWS[self.value]

    @property
    def is_forward(self) -> bool:
        """True if moving this way increases the coordinate."""
        return self in (Direction.DOWN, Direction.RIGHT)

    def __invert__(self) -> Direction:
        return _INVERSES[self]


_INVERSES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


class Point(NamedTuple):
    x: int
    y: int

    def coordinate(self, axis: Axis) -> int:
        return self.x if axis is Axis.X else self.y

    def move(self, direction: Direction, distance: int = 1) -> Point:
        dx, dy = direction.delta
        return Point(self.x + dx * distance, self.y + dy * distance)

    def direction_to(self, other: Point) -> Direction | None:
        """
        Straight direction leading from this point to other.

        Returns None if both points are equal or not aligned on a row or column.
        """
        if self.x == other.x:
            if self.y > other.y:
                return Direction.UP
            if self.y < other.y:
                return Direction.DOWN
        elif self.y == other.y:
            return Direction.LEFT if self.x > other.x else Direction.RIGHT
        return None

    def transpose(self) -> Point:
        return Point(self.y, self.x)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


type Edge = tuple[Point, Point]
type Bounds = tuple[int, int, int, int]  # (min_x, min_y, max_x, max_y)


def as_point(value: tuple[int, int]) -> Point:
    """Accept any (x, y) pair where a Point is expected."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


__all__ = [
    "V",
    "Axis",
    "Direction",
    "DIRECTIONS",
    "Point",
    "Edge",
    "Bounds",
    "as_point",
]
