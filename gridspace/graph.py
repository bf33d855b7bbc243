"""
Undirected graphs over points.

Edges are arbitrary: any two distinct points may be connected, the graph does
not have to be planar nor follow the grid. Adjacency is stored per node in a
PointMap, so nodes are always visited in row-major order and every output of
this module is deterministic.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TypeVar

from .errors import InvalidEdge
from .map import PointMap
from .ordering import row_major, sorted_row_major
from .set import PointSet
from .types import Edge, Point, as_point

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def _breadth_first(
    start: T, node_to_neighbours: Callable[[T], Iterable[T]], seen: set[T]
) -> list[T]:
    """Nodes reachable from start that are not in seen yet. Updates seen."""
    component = []
    queue = deque([start])
    while queue:
        current = queue.popleft()

        # Avoid cycles
        if current in seen:
            continue

        component.append(current)
        queue.extend(node_to_neighbours(current))

        # Mark the node as seen
        seen.add(current)
    return component


def connected_components(
    nodes: Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> Iterator[list[T]]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: nodes of the graph, in the order the scan should follow.
        node_to_neighbours: Function returning the nodes a given node is connected to.

    Yields:
        list[T]: one connected component at a time, in the order of its first
        scanned node
    """
    seen: set[T] = set()

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        # Avoid visiting an already seen component
        if node in seen:
            continue
        yield _breadth_first(node, node_to_neighbours, seen)


class PointGraph:
    """
    Undirected graph whose nodes are points.

    Invariants:
        - both endpoints of every edge are nodes of the graph
        - b is a neighbour of a iff a is a neighbour of b
        - no point is its own neighbour
    """

    def __init__(self, nodes: Iterable[Point] = ()) -> None:
        self._adjacency: PointMap[set[Point]] = PointMap()
        self._edge_count = 0
        for node in nodes:
            self.add_node(node)

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[Point, Point]], nodes: Iterable[Point] = ()
    ) -> PointGraph:
        graph = cls(nodes)
        for a, b in edges:
            graph.insert_edge(a, b)
        return graph

    # Nodes

    def add_node(self, point: Point) -> bool:
        """Returns True if the node was not already present."""
        return self._adjacency.create(as_point(point), set())

    def remove_node(self, point: Point) -> bool:
        """Remove the node along with all its edges. False if it was absent."""
        neighbours = self._adjacency.remove(point)
        if neighbours is None:
            return False
        for neighbour in neighbours:
            self._adjacency[neighbour].discard(point)
        self._edge_count -= len(neighbours)
        return True

    def contains(self, point: Point) -> bool:
        return point in self._adjacency

    def __contains__(self, point: object) -> bool:
        return point in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def is_empty(self) -> bool:
        return self._adjacency.is_empty()

    def nodes(self) -> PointSet:
        return PointSet(self._adjacency)

    # Edges

    def insert_edge(self, a: Point, b: Point) -> bool:
        """
        Connect a and b, creating them if needed.

        Returns True if the edge is new. Raises InvalidEdge if a == b, in
        which case the graph is left untouched.
        """
        a, b = as_point(a), as_point(b)
        if a == b:
            raise InvalidEdge(a)

        self.add_node(a)
        self.add_node(b)
        if b in self._adjacency[a]:
            return False
        self._adjacency[a].add(b)
        self._adjacency[b].add(a)
        self._edge_count += 1
        return True

    def remove_edge(self, a: Point, b: Point) -> bool:
        """
        Disconnect a and b. Both nodes stay in the graph.

        Raises InvalidEdge if a == b.
        """
        a, b = as_point(a), as_point(b)
        if a == b:
            raise InvalidEdge(a)
        if not self.are_connected(a, b):
            return False
        self._adjacency[a].discard(b)
        self._adjacency[b].discard(a)
        self._edge_count -= 1
        return True

    def are_connected(self, a: Point, b: Point) -> bool:
        """True if there is an edge between a and b."""
        neighbours = self._adjacency.get(a)
        return neighbours is not None and b in neighbours

    def neighbors(self, point: Point) -> frozenset[Point]:
        return frozenset(self._adjacency.get(point, ()))

    def degree(self, point: Point) -> int:
        return len(self._adjacency.get(point, ()))

    def edges(self) -> Iterator[Edge]:
        """Each edge once, as (a, b) with a before b in row-major order."""
        for node, neighbours in self._adjacency.items():
            for neighbour in sorted_row_major(neighbours):
                if row_major(node) < row_major(neighbour):
                    yield node, neighbour

    def edge_count(self) -> int:
        return self._edge_count

    # Connectivity

    def components(self) -> Iterator[PointSet]:
        """
        Connected components, as point sets.

        Components come in the row-major order of their first node. The node
        order is captured when iteration starts.
        """
        nodes = list(self._adjacency)
        for members in connected_components(nodes, self._adjacency.__getitem__):
            component = PointSet(members)
            logger.debug(f"Component from {members[0]}: {len(component)} nodes")
            yield component

    def component_of(self, point: Point) -> PointSet:
        """The component holding point, empty if the point is not a node."""
        if point not in self._adjacency:
            return PointSet()
        return PointSet(_breadth_first(as_point(point), self._adjacency.__getitem__, set()))

    def shortest_path(self, start: Point, goal: Point) -> list[Point] | None:
        """
        Path with the fewest edges from start to goal, both included.

        Neighbours are explored in row-major order, so ties always resolve to
        the same path. None if either point is absent or goal is unreachable.
        """
        if start not in self._adjacency or goal not in self._adjacency:
            return None
        start, goal = as_point(start), as_point(goal)

        parents: dict[Point, Point | None] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == goal:
                break
            for neighbour in sorted_row_major(self._adjacency[current]):
                if neighbour not in parents:
                    parents[neighbour] = current
                    queue.append(neighbour)
        else:
            return None

        path = [goal]
        while (parent := parents[path[-1]]) is not None:
            path.append(parent)
        path.reverse()
        return path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return f"PointGraph(nodes={len(self)}, edges={self._edge_count})"
