"""Tests for the runtime-checkable graph and algorithm protocols."""

from __future__ import annotations

from conftest import DictGraph, build_graph

from graphalgo import (
    AStar,
    Bfs,
    CentralityAlgorithm,
    DegreeCentrality,
    Dijkstra,
    GraphView,
    KCore,
    PageRank,
    PathfindingAlgorithm,
    StronglyConnected,
    TopologicalSort,
)

# ======================================================================
# GraphView
# ======================================================================


class TestGraphViewProtocol:
    def test_plain_object_does_not_satisfy(self) -> None:
        assert not isinstance(object(), GraphView)

    def test_duck_typed_graph_satisfies(self) -> None:
        assert isinstance(DictGraph([], []), GraphView)

    def test_partial_graph_does_not_satisfy(self) -> None:
        class NodesOnly:
            def nodes(self):
                return []

        assert not isinstance(NodesOnly(), GraphView)


# ======================================================================
# Storage independence
# ======================================================================


class TestStorageIndependence:
    """The same graph held in two stores gives the same answers."""

    EDGES = [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 4.0), ("C", "D", 1.0), ("D", "B", 1.0)]

    def _pair(self):
        rx = build_graph(self.EDGES)
        plain = DictGraph(rx.nodes(), [(s, t, {"weight": w}) for s, t, w in self.EDGES])
        return rx, plain

    def test_traversal(self) -> None:
        rx, plain = self._pair()
        assert Bfs().traverse(rx, "A") == Bfs().traverse(plain, "A")

    def test_pathfinding(self) -> None:
        rx, plain = self._pair()
        finder: PathfindingAlgorithm
        for finder in (Dijkstra(), AStar()):
            assert finder.find(rx, "A", "D") == finder.find(plain, "A", "D")

    def test_centrality(self) -> None:
        rx, plain = self._pair()
        algorithm: CentralityAlgorithm
        for algorithm in (DegreeCentrality(), PageRank()):
            assert algorithm.compute(rx) == algorithm.compute(plain)

    def test_structure(self) -> None:
        rx, plain = self._pair()
        assert StronglyConnected().find_components(rx) == StronglyConnected().find_components(
            plain
        )
        assert KCore().compute(rx) == KCore().compute(plain)

    def test_topological_on_dag(self) -> None:
        dag = [("A", "B"), ("A", "C"), ("C", "B")]
        rx = build_graph(dag)
        plain = DictGraph(rx.nodes(), [(s, t, {}) for s, t in dag])
        assert TopologicalSort().sort(rx) == TopologicalSort().sort(plain) == ["A", "C", "B"]
