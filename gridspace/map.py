"""
Ordered point index.

A PointMap maps points to values while keeping two sorted indices over the
same keys: one in row-major order, (y, x), and one in column-major order,
(x, y). Values live once in a plain dict; the indices only hold coordinates.

The row-major index groups every row in a contiguous run, sorted by x, so the
left/right neighbour of a point is a binary search away. The column-major
index does the same for columns and up/down neighbours. Both indices are
SortedLists, so insertion and removal are logarithmic as well.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from itertools import groupby
from operator import itemgetter
from typing import Generic

from sortedcontainers import SortedList

from .ordering import column_major, row_major
from .types import Axis, Bounds, Direction, Point, V, as_point

_primary = itemgetter(0)


class _Above:
    """Sorts after any coordinate, to bound the end of a line."""

    def __lt__(self, other: object) -> bool:
        return False

    def __gt__(self, other: object) -> bool:
        return True


_ABOVE = _Above()


class PointMap(MutableMapping[Point, V], Generic[V]):
    """
    Mapping from points to values, ordered both by rows and by columns.

    Iteration follows row-major order. Lookups are dict lookups; insertion,
    removal and directional neighbour queries are O(log n).

    Example:
        >>> tiles = PointMap([(Point(3, 5), "door"), (Point(3, 9), "wall")])
        >>> tiles.neighbor(Point(3, 5), Direction.DOWN)
        Point(x=3, y=9)
    """

    def __init__(
        self, items: Mapping[Point, V] | Iterable[tuple[Point, V]] | None = None
    ) -> None:
        self._values: dict[Point, V] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for point, value in pairs:
                self._values[as_point(point)] = value
        # Bulk load sorts once
        self._by_row = SortedList(map(row_major, self._values))
        self._by_column = SortedList(map(column_major, self._values))

    # Mutation

    def insert(self, point: Point, value: V) -> V | None:
        """Add or overwrite, returning the previous value if there was one."""
        point = as_point(point)
        if point in self._values:
            previous = self._values[point]
            self._values[point] = value
            return previous

        self._values[point] = value
        self._by_row.add(row_major(point))
        self._by_column.add(column_major(point))
        return None

    def create(self, point: Point, value: V) -> bool:
        """Insert only if the point is absent. Returns whether it inserted."""
        if point in self._values:
            return False
        self.insert(point, value)
        return True

    def replace(self, point: Point, value: V) -> V | None:
        """
        Overwrite the value of a present point and return the old one.

        Absent points are left absent and None is returned.
        """
        if point not in self._values:
            return None
        previous = self._values[point]
        self._values[point] = value
        return previous

    def remove(self, point: Point) -> V | None:
        """Delete the point if present and return its value."""
        if point not in self._values:
            return None
        point = as_point(point)
        value = self._values.pop(point)
        self._by_row.remove(row_major(point))
        self._by_column.remove(column_major(point))
        return value

    def clear(self) -> None:
        self._values.clear()
        self._by_row.clear()
        self._by_column.clear()

    # Mapping protocol

    def __getitem__(self, point: Point) -> V:
        return self._values[point]

    def __setitem__(self, point: Point, value: V) -> None:
        self.insert(point, value)

    def __delitem__(self, point: Point) -> None:
        if point not in self._values:
            raise KeyError(point)
        self.remove(point)

    def __contains__(self, point: object) -> bool:
        return point in self._values

    def __iter__(self) -> Iterator[Point]:
        for y, x in self._by_row:
            yield Point(x, y)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        entries = ", ".join(f"{point!r}: {value!r}" for point, value in self.items())
        return f"{type(self).__name__}({{{entries}}})"

    def contains(self, point: Point) -> bool:
        return point in self._values

    def is_empty(self) -> bool:
        return not self._values

    def copy(self) -> PointMap[V]:
        clone: PointMap[V] = type(self)()
        clone._values = dict(self._values)
        clone._by_row = self._by_row.copy()
        clone._by_column = self._by_column.copy()
        return clone

    # Directional queries

    def _line(self, point: Point, direction: Direction) -> tuple[SortedList, int, int]:
        """
        Index holding the line of point along direction, with the line key
        (the shared coordinate) and the position of point on that line.
        """
        x, y = point
        if direction.axis is Axis.X:
            return self._by_row, y, x
        return self._by_column, x, y

    @staticmethod
    def _point_on(direction: Direction, line: int, position: int) -> Point:
        if direction.axis is Axis.X:
            return Point(position, line)
        return Point(line, position)

    def neighbors(self, point: Point, direction: Direction) -> Iterator[Point]:
        """Every point strictly in direction on the same line, nearest first."""
        keys, line, position = self._line(point, direction)
        if direction.is_forward:
            found = keys.irange((line, position), (line, _ABOVE), inclusive=(False, True))
        else:
            found = keys.irange((line,), (line, position), inclusive=(True, False), reverse=True)
        for _, other in found:
            yield self._point_on(direction, line, other)

    def neighbors_inclusive(self, point: Point, direction: Direction) -> Iterator[Point]:
        """Like neighbors, starting with point itself when it is present."""
        if point in self._values:
            yield as_point(point)
        yield from self.neighbors(point, direction)

    def neighbor(self, point: Point, direction: Direction) -> Point | None:
        """
        Closest other point strictly in direction sharing the perpendicular
        coordinate: same x for UP/DOWN, same y for LEFT/RIGHT.

        The query point does not need to be present.
        """
        return next(self.neighbors(point, direction), None)

    def neighbor_item(self, point: Point, direction: Direction) -> tuple[Point, V] | None:
        found = self.neighbor(point, direction)
        if found is None:
            return None
        return found, self._values[found]

    def last_neighbor(self, point: Point, direction: Direction) -> Point | None:
        """Farthest point strictly in direction on the same line."""
        keys, line, position = self._line(point, direction)
        if direction.is_forward:
            index = keys.bisect_left((line, _ABOVE)) - 1
            if index < 0:
                return None
        else:
            index = keys.bisect_left((line,))
            if index == len(keys):
                return None
        found_line, found = keys[index]
        if found_line != line or found == position:
            return None
        if (found > position) != direction.is_forward:
            return None
        return self._point_on(direction, line, found)

    def last_neighbor_item(self, point: Point, direction: Direction) -> tuple[Point, V] | None:
        found = self.last_neighbor(point, direction)
        if found is None:
            return None
        return found, self._values[found]

    # Ordered views

    def rows(self) -> Iterator[tuple[int, list[Point]]]:
        """Points grouped by row: ascending y, each row ascending x."""
        for y, keys in groupby(self._by_row, key=_primary):
            yield y, [Point(x, y) for _, x in keys]

    def columns(self) -> Iterator[tuple[int, list[Point]]]:
        """Points grouped by column: ascending x, each column ascending y."""
        for x, keys in groupby(self._by_column, key=_primary):
            yield x, [Point(x, y) for _, y in keys]

    def row(self, y: int) -> list[Point]:
        return [Point(x, y) for _, x in self._by_row.irange((y,), (y, _ABOVE))]

    def column(self, x: int) -> list[Point]:
        return [Point(x, y) for _, y in self._by_column.irange((x,), (x, _ABOVE))]

    def column_major_points(self) -> Iterator[Point]:
        for x, y in self._by_column:
            yield Point(x, y)

    def column_major_items(self) -> Iterator[tuple[Point, V]]:
        for point in self.column_major_points():
            yield point, self._values[point]

    def first(self) -> Point | None:
        """Smallest point in row-major order."""
        if not self._by_row:
            return None
        y, x = self._by_row[0]
        return Point(x, y)

    def last(self) -> Point | None:
        """Largest point in row-major order."""
        if not self._by_row:
            return None
        y, x = self._by_row[-1]
        return Point(x, y)

    def bounds(self) -> Bounds | None:
        """(min_x, min_y, max_x, max_y) of the stored points."""
        if not self._values:
            return None
        return (
            self._by_column[0][0],
            self._by_row[0][0],
            self._by_column[-1][0],
            self._by_row[-1][0],
        )
