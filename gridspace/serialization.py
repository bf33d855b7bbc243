"""
JSON-ready encoding of point containers.

Layouts:
    - map:   [[[x, y], value], ...] in row-major order
    - set:   [[x, y], ...] in row-major order
    - graph: {"nodes": [[x, y], ...], "edges": [[[x, y], [x, y]], ...]}
"""

import json
import logging
from collections.abc import Callable
from typing import Any, Literal

from .constants import EDGES_KEY, NODES_KEY
from .graph import PointGraph
from .map import PointMap
from .set import PointSet
from .types import Point

logger = logging.getLogger(__name__)

type Json = None | int | float | str | bool | list[Json] | dict[str, Json]
type Kind = Literal["map", "set", "graph"]


def _identity(value: Any) -> Any:
    return value


def _point_to_data(point: Point) -> list[int]:
    return [point.x, point.y]


def _point_from_data(entry: Any) -> Point:
    if (
        not isinstance(entry, (list, tuple))
        or len(entry) != 2
        or not all(isinstance(coord, int) and not isinstance(coord, bool) for coord in entry)
    ):
        raise ValueError(f"Expected a point as [x, y] integers, got: {entry!r}")
    return Point(entry[0], entry[1])


def _pair_from_data(entry: Any, what: str) -> tuple[Any, Any]:
    if not isinstance(entry, (list, tuple)) or len(entry) != 2:
        raise ValueError(f"Expected {what} as a two-element list, got: {entry!r}")
    return entry[0], entry[1]


# Map


def map_to_data(point_map: PointMap, encode: Callable[[Any], Json] = _identity) -> list[Json]:
    return [[_point_to_data(point), encode(value)] for point, value in point_map.items()]


def map_from_data(data: Any, decode: Callable[[Json], Any] = _identity) -> PointMap:
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of [point, value] entries, got: {type(data).__name__}")
    point_map = PointMap()
    for entry in data:
        point, value = _pair_from_data(entry, "a [point, value] entry")
        point_map.insert(_point_from_data(point), decode(value))
    return point_map


# Set


def set_to_data(point_set: PointSet) -> list[Json]:
    return [_point_to_data(point) for point in point_set]


def set_from_data(data: Any) -> PointSet:
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of points, got: {type(data).__name__}")
    return PointSet(_point_from_data(entry) for entry in data)


# Graph


def graph_to_data(graph: PointGraph) -> dict[str, Json]:
    return {
        NODES_KEY: [_point_to_data(node) for node in graph.nodes()],
        EDGES_KEY: [[_point_to_data(a), _point_to_data(b)] for a, b in graph.edges()],
    }


def graph_from_data(data: Any) -> PointGraph:
    if not isinstance(data, dict) or NODES_KEY not in data or EDGES_KEY not in data:
        raise ValueError(f"Expected an object with '{NODES_KEY}' and '{EDGES_KEY}' keys")
    if not isinstance(data[EDGES_KEY], list):
        raise ValueError(f"Expected a list of edges, got: {type(data[EDGES_KEY]).__name__}")
    graph = PointGraph(set_from_data(data[NODES_KEY]))
    for entry in data[EDGES_KEY]:
        a, b = _pair_from_data(entry, "an edge")
        graph.insert_edge(_point_from_data(a), _point_from_data(b))
    return graph


# Text


def dumps(container: PointMap | PointSet | PointGraph, **kwargs) -> str:
    """Serialize a container to JSON text. kwargs are passed to json.dumps."""
    match container:
        case PointMap():
            data = map_to_data(container)
        case PointSet():
            data = set_to_data(container)
        case PointGraph():
            data = graph_to_data(container)
        case _:
            raise TypeError(f"Cannot serialize {type(container).__name__}")
    logger.debug(f"Serialized {type(container).__name__} with {len(container)} entries")
    return json.dumps(data, **kwargs)


def loads(text: str, kind: Kind) -> PointMap | PointSet | PointGraph:
    data = json.loads(text)
    match kind:
        case "map":
            return map_from_data(data)
        case "set":
            return set_from_data(data)
        case "graph":
            return graph_from_data(data)
        case _:
            raise ValueError(f"Unknown container kind: {kind!r}")
