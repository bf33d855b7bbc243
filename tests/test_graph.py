"""
Tests for gridspace/graph.py.

Edge insertion and removal, symmetry, connected components and paths.
"""

import itertools
import logging
import random

import pytest

from gridspace import InvalidEdge, Point, PointGraph, configure_logging, connected_components
from gridspace.constants import LOG_FORMAT

A, B, C, D, E = Point(0, 0), Point(5, 0), Point(5, 7), Point(-3, 2), Point(9, 9)


class TestEdges:
    def test_insert_creates_nodes(self):
        graph = PointGraph()
        assert graph.insert_edge(A, B)
        assert graph.contains(A) and graph.contains(B)
        assert len(graph) == 2
        assert graph.edge_count() == 1

    def test_symmetry(self):
        graph = PointGraph.from_edges([(A, B), (B, C)])
        assert graph.neighbors(A) == {B}
        assert graph.neighbors(B) == {A, C}
        assert graph.neighbors(C) == {B}
        assert graph.are_connected(B, A)
        assert not graph.are_connected(A, C)

    def test_self_loop_is_rejected(self):
        graph = PointGraph.from_edges([(A, B)])
        with pytest.raises(InvalidEdge, match="itself"):
            graph.insert_edge(C, C)
        assert len(graph) == 2
        assert graph.edge_count() == 1
        assert C not in graph

    def test_invalid_edge_is_a_value_error(self):
        with pytest.raises(ValueError):
            PointGraph().insert_edge(A, A)

    def test_insert_is_idempotent(self):
        graph = PointGraph()
        assert graph.insert_edge(A, B)
        before = (graph.neighbors(A), graph.neighbors(B))
        assert not graph.insert_edge(A, B)
        assert not graph.insert_edge(B, A)
        assert (graph.neighbors(A), graph.neighbors(B)) == before
        assert graph.edge_count() == 1

    def test_remove_edge_keeps_nodes(self):
        graph = PointGraph.from_edges([(A, B)])
        assert graph.remove_edge(B, A)
        assert not graph.remove_edge(A, B)
        assert graph.neighbors(A) == frozenset()
        assert A in graph and B in graph
        assert graph.edge_count() == 0

    def test_remove_self_loop_raises(self):
        graph = PointGraph.from_edges([(A, B)])
        with pytest.raises(InvalidEdge, match="itself"):
            graph.remove_edge(A, A)
        assert graph.edge_count() == 1
        assert graph.neighbors(A) == {B}

    def test_remove_node_removes_incident_edges(self):
        graph = PointGraph.from_edges([(A, B), (B, C)])
        assert graph.remove_node(B)
        assert graph.neighbors(A) == frozenset()
        assert graph.neighbors(C) == frozenset()
        assert B not in graph
        assert graph.edge_count() == 0
        assert not graph.remove_node(B)

    def test_absent_point(self):
        graph = PointGraph()
        assert graph.neighbors(A) == frozenset()
        assert graph.degree(A) == 0
        assert not graph.are_connected(A, B)
        assert not graph.remove_edge(A, B)

    def test_edges_listed_once_in_order(self):
        graph = PointGraph.from_edges([(C, B), (B, A), (A, C), (D, E)])
        assert list(graph.edges()) == [(A, B), (A, C), (B, C), (D, E)]

    def test_non_planar_graph(self):
        """K5 is fine: edges do not have to follow the grid."""
        points = [Point(x, y) for x, y in [(0, 0), (4, 0), (2, 3), (0, 6), (4, 6)]]
        graph = PointGraph.from_edges(itertools.combinations(points, 2))
        assert graph.edge_count() == 10
        assert all(graph.degree(point) == 4 for point in points)

    def test_isolated_nodes(self):
        graph = PointGraph([A, B])
        assert not graph.add_node(A)
        assert graph.add_node(C)
        assert list(graph.nodes()) == [A, B, C]
        assert graph.edge_count() == 0

    def test_equality(self):
        assert PointGraph.from_edges([(A, B)]) == PointGraph.from_edges([(B, A)])
        assert PointGraph.from_edges([(A, B)]) != PointGraph([A, B])


class TestComponents:
    def test_two_components_any_order(self):
        edges = [(A, B), (B, C), (D, E)]
        for ordering in itertools.permutations(edges):
            graph = PointGraph.from_edges(ordering)
            components = list(graph.components())
            assert len(components) == 2
            assert {frozenset(component) for component in components} == {
                frozenset({A, B, C}),
                frozenset({D, E}),
            }

    def test_components_follow_row_major_order(self):
        graph = PointGraph.from_edges([(A, B), (B, C), (D, E)])
        # A = (0, 0) comes before D = (-3, 2) in row-major order
        assert [component.first() for component in graph.components()] == [A, D]

    def test_isolated_nodes_are_singletons(self):
        graph = PointGraph([A, B, C])
        assert list(graph.components()) == [{A}, {B}, {C}]

    def test_cycles_terminate(self):
        ring = [Point(x, 0) for x in range(6)]
        graph = PointGraph.from_edges(zip(ring, ring[1:] + ring[:1]))
        assert list(graph.components()) == [set(ring)]

    def test_empty_graph(self):
        assert list(PointGraph().components()) == []

    def test_every_node_in_exactly_one_component(self):
        rng = random.Random(11)
        nodes = [Point(rng.randint(0, 20), rng.randint(0, 20)) for _ in range(60)]
        graph = PointGraph(nodes)
        for _ in range(40):
            a, b = rng.sample(nodes, 2)
            if a != b:
                graph.insert_edge(a, b)
        components = list(graph.components())
        assert sum(len(component) for component in components) == len(graph)
        assert set().union(*components) == set(graph.nodes())
        for component in components:
            for node in component:
                assert graph.neighbors(node) <= component
        assert components == list(graph.components())

    def test_component_of(self):
        graph = PointGraph.from_edges([(A, B), (B, C), (D, E)])
        assert graph.component_of(C) == {A, B, C}
        assert graph.component_of(Point(100, 100)) == set()

    def test_generic_components(self):
        adjacency = {1: {2}, 2: {1}, 3: set()}
        components = connected_components([1, 2, 3], adjacency.__getitem__)
        assert list(components) == [[1, 2], [3]]


class TestShortestPath:
    def test_path(self):
        graph = PointGraph.from_edges([(A, B), (B, C), (A, D), (D, E), (E, C)])
        assert graph.shortest_path(A, C) == [A, B, C]
        assert graph.shortest_path(A, A) == [A]

    def test_unreachable(self):
        graph = PointGraph.from_edges([(A, B), (D, E)])
        assert graph.shortest_path(A, E) is None
        assert graph.shortest_path(A, Point(100, 100)) is None

    def test_ties_break_in_row_major_order(self):
        top, left, right, bottom = Point(1, 0), Point(0, 1), Point(2, 1), Point(1, 2)
        graph = PointGraph.from_edges([(top, right), (top, left), (left, bottom), (right, bottom)])
        assert graph.shortest_path(top, bottom) == [top, left, bottom]


class TestLogging:
    def test_logs_discovered_components(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="gridspace.graph"):
            list(PointGraph.from_edges([(A, B)]).components())
        assert "2 nodes" in caplog.text

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(logging.DEBUG)
        assert calls == [{"level": logging.DEBUG, "format": LOG_FORMAT}]
