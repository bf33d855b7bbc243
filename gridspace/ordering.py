"""
Total orders over points.

Row-major sorts by y then x (reading order on a grid), column-major by x
then y. Both are consistent with point equality and never tie on distinct
points, since the comparison falls through to the secondary coordinate.
"""

from collections.abc import Callable, Iterable

from .types import Axis, Point

type OrderKey = Callable[[Point], tuple[int, int]]


def row_major(point: Point) -> tuple[int, int]:
    x, y = point
    return (y, x)


def column_major(point: Point) -> tuple[int, int]:
    x, y = point
    return (x, y)


def _compare(left: tuple[int, int], right: tuple[int, int]) -> int:
    return (left > right) - (left < right)


def compare_row_major(a: Point, b: Point) -> int:
    """-1, 0 or 1 depending on how a sorts against b in row-major order."""
    return _compare(row_major(a), row_major(b))


def compare_column_major(a: Point, b: Point) -> int:
    """-1, 0 or 1 depending on how a sorts against b in column-major order."""
    return _compare(column_major(a), column_major(b))


def key_for(axis: Axis) -> OrderKey:
    """The order whose primary key is the given axis."""
    return row_major if axis is Axis.Y else column_major


def sorted_row_major(points: Iterable[Point]) -> list[Point]:
    return sorted(points, key=row_major)


def sorted_column_major(points: Iterable[Point]) -> list[Point]:
    return sorted(points, key=column_major)


__all__ = [
    "OrderKey",
    "row_major",
    "column_major",
    "compare_row_major",
    "compare_column_major",
    "key_for",
    "sorted_row_major",
    "sorted_column_major",
]
