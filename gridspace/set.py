"""
Ordered point set: a PointMap with no values.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet

from .map import PointMap
from .types import Bounds, Direction, Point


class PointSet(MutableSet[Point]):
    """
    Set of points with the same ordering and neighbour queries as PointMap.

    Compares equal to any set holding the same points, so plain set literals
    can be used in comparisons.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._map: PointMap[None] = PointMap()
        for point in points:
            self._map.insert(point, None)

    def add(self, point: Point) -> bool:  # type: ignore[override]
        """Returns True if the point was not already present."""
        return self._map.create(point, None)

    insert = add

    def discard(self, point: Point) -> None:
        self._map.remove(point)

    def remove(self, point: Point) -> bool:  # type: ignore[override]
        """Returns True if the point was present."""
        if point not in self._map:
            return False
        self._map.remove(point)
        return True

    def clear(self) -> None:
        self._map.clear()

    def __contains__(self, point: object) -> bool:
        return point in self._map

    def __iter__(self) -> Iterator[Point]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"PointSet([{', '.join(repr(point) for point in self)}])"

    def contains(self, point: Point) -> bool:
        return point in self._map

    def is_empty(self) -> bool:
        return self._map.is_empty()

    def copy(self) -> PointSet:
        clone = PointSet()
        clone._map = self._map.copy()
        return clone

    def neighbor(self, point: Point, direction: Direction) -> Point | None:
        return self._map.neighbor(point, direction)

    def neighbors(self, point: Point, direction: Direction) -> Iterator[Point]:
        return self._map.neighbors(point, direction)

    def neighbors_inclusive(self, point: Point, direction: Direction) -> Iterator[Point]:
        return self._map.neighbors_inclusive(point, direction)

    def last_neighbor(self, point: Point, direction: Direction) -> Point | None:
        return self._map.last_neighbor(point, direction)

    def rows(self) -> Iterator[tuple[int, list[Point]]]:
        return self._map.rows()

    def columns(self) -> Iterator[tuple[int, list[Point]]]:
        return self._map.columns()

    def row(self, y: int) -> list[Point]:
        return self._map.row(y)

    def column(self, x: int) -> list[Point]:
        return self._map.column(x)

    def column_major_points(self) -> Iterator[Point]:
        return self._map.column_major_points()

    def first(self) -> Point | None:
        return self._map.first()

    def last(self) -> Point | None:
        return self._map.last()

    def bounds(self) -> Bounds | None:
        return self._map.bounds()
