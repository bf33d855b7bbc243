"""
Integer 2D geometry containers for grid and tile based games.

**Types** (types.py)
    Point, Axis and Direction. Y grows downwards.

**Orders** (ordering.py)
    Row-major (y, then x) and column-major (x, then y) keys and comparators.

**Point index** (map.py, set.py)
    PointMap and PointSet: ordered by rows and by columns at once, with
    directional nearest-neighbour queries in logarithmic time.

**Graphs** (graph.py)
    PointGraph: undirected edges between points, connected components,
    shortest paths.

**Grids** (grid.py)
    Conversions from and to numpy arrays, graph builders from grid adjacency.

**Serialization** (serialization.py)
    JSON-ready layouts for all containers.
"""

import logging

from .constants import LOG_FORMAT
from .errors import GridspaceError, InvalidEdge
from .graph import PointGraph, connected_components
from .map import PointMap
from .ordering import (
    column_major,
    compare_column_major,
    compare_row_major,
    key_for,
    row_major,
    sorted_column_major,
    sorted_row_major,
)
from .set import PointSet
from .types import DIRECTIONS, Axis, Direction, Point


def configure_logging(level: int = logging.INFO) -> None:
    """Set up root logging for scripts. The library itself never calls this."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = [
    # Types
    "Point",
    "Axis",
    "Direction",
    "DIRECTIONS",
    # Orders
    "row_major",
    "column_major",
    "compare_row_major",
    "compare_column_major",
    "key_for",
    "sorted_row_major",
    "sorted_column_major",
    # Containers
    "PointMap",
    "PointSet",
    "PointGraph",
    "connected_components",
    # Errors
    "GridspaceError",
    "InvalidEdge",
    # Logging
    "configure_logging",
]
