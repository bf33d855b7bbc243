r"""
Bridges between array grids and point containers.

Grids are indexed grid[row][col], with row = y and col = x. They can be
nested lists or numpy arrays.

    1\ Grid -> containers: points_from_mask, map_from_grid
    2\ Containers -> grid: mask_from_points
    3\ Containers -> graph: adjacency_graph, sight_graph
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .graph import PointGraph
from .map import PointMap
from .set import PointSet
from .types import DIRECTIONS, Direction, Point, as_point

logger = logging.getLogger(__name__)


def _as_grid(grid: ArrayLike, dtype=None) -> np.ndarray:
    array = np.asarray(grid, dtype=dtype)
    if array.ndim != 2:
        raise ValueError(f"Expected a 2D grid, got an array with {array.ndim} dimension(s)")
    return array


# Grid -> containers


def points_from_mask(mask: ArrayLike) -> PointSet:
    """Points of every truthy cell."""
    rows, cols = np.nonzero(_as_grid(mask, dtype=bool))
    return PointSet(Point(int(col), int(row)) for row, col in zip(rows, cols))


def map_from_grid(grid: ArrayLike, background=None) -> PointMap:
    """Cell values keyed by point, leaving out cells equal to background."""
    array = _as_grid(grid)
    cells = PointMap()
    for (row, col), value in np.ndenumerate(array):
        if background is not None and value == background:
            continue
        if isinstance(value, np.generic):
            value = value.item()
        cells.insert(Point(int(col), int(row)), value)
    return cells


# Containers -> grid


def mask_from_points(
    points: Iterable[Point], height: int | None = None, width: int | None = None
) -> NDArray[np.bool_]:
    """
    Fit the points either in a given grid size, or in the smallest grid possible.
    """
    points = [as_point(point) for point in points]
    if any(x < 0 or y < 0 for x, y in points):
        raise ValueError("Some points have negative coordinates")

    # Beware of the off-by-one error
    nheight = max((y for _, y in points), default=-1) + 1
    nwidth = max((x for x, _ in points), default=-1) + 1

    height = nheight if height is None else height
    width = nwidth if width is None else width

    if width < nwidth:
        raise ValueError(
            f"Given width: {width} is too small, it should be at least: {nwidth}"
        )
    if height < nheight:
        raise ValueError(
            f"Given height: {height} is too small, it should be at least: {nheight}"
        )

    mask = np.zeros((height, width), dtype=bool)
    for x, y in points:
        mask[y, x] = True
    return mask


# Containers -> graph


def adjacency_graph(
    points: Iterable[Point], directions: Sequence[Direction] = DIRECTIONS
) -> PointGraph:
    """
    Graph linking points exactly one step apart along the given directions.

    With all four directions this is 4-connectivity on the grid.
    """
    universe = PointSet(points)
    graph = PointGraph(universe)
    for point in universe:
        for direction in directions:
            step = point.move(direction)
            if step in universe:
                graph.insert_edge(point, step)
    logger.debug(f"Adjacency graph: {len(graph)} nodes, {graph.edge_count()} edges")
    return graph


def sight_graph(points: Iterable[Point]) -> PointGraph:
    """
    Graph linking every point to the nearest other point on its row and on its
    column, in each direction, whatever the distance.
    """
    universe = points if isinstance(points, PointSet) else PointSet(points)
    graph = PointGraph(universe)
    for point in universe:
        # Left and up are covered from the other endpoint
        for direction in (Direction.RIGHT, Direction.DOWN):
            neighbour = universe.neighbor(point, direction)
            if neighbour is not None:
                graph.insert_edge(point, neighbour)
    logger.debug(f"Sight graph: {len(graph)} nodes, {graph.edge_count()} edges")
    return graph
