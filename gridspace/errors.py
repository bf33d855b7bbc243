"""
Exceptions raised by the package.

Absence is never an error here: lookups on missing points return None,
False or an empty collection.
"""

from .types import Point


class GridspaceError(Exception):
    """Base class for all errors raised by gridspace"""


class InvalidEdge(GridspaceError, ValueError):
    """An edge was requested between a point and itself"""

    def __init__(self, point: Point) -> None:
        self.point = point
        super().__init__(f"Cannot connect {point} to itself: self-loops are not allowed")
