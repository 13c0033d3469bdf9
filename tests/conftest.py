"""Shared graph builders for graphalgo tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from graphalgo import RustworkxGraph

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def build_graph(
    edges: Iterable[tuple[Any, ...]],
    *,
    directed: bool = True,
    nodes: Sequence[Any] = (),
) -> RustworkxGraph:
    """Build a graph from ``(source, target)`` or ``(source, target, weight)`` tuples.

    *nodes* are added first, so they fix the start of the node order.
    """
    g = RustworkxGraph(directed=directed)
    for node in nodes:
        g.add_node(node)
    for edge in edges:
        if len(edge) == 3:
            g.add_edge(edge[0], edge[1], weight=edge[2])
        else:
            g.add_edge(edge[0], edge[1])
    return g


class DictGraph:
    """Plain-Python ``GraphView`` with no rustworkx underneath."""

    def __init__(
        self,
        nodes: Sequence[Any],
        edges: Sequence[tuple[Any, Any, dict[str, Any]]],
        *,
        directed: bool = True,
    ) -> None:
        self._nodes = list(nodes)
        self._edges = [(s, t, dict(attrs)) for s, t, attrs in edges]
        self._directed = directed

    def is_directed(self) -> bool:
        return self._directed

    def nodes(self) -> list[Any]:
        return list(self._nodes)

    def edges(self) -> list[tuple[Any, Any, dict[str, Any]]]:
        return [(s, t, dict(attrs)) for s, t, attrs in self._edges]

    def has_node(self, node: Any) -> bool:
        return node in self._nodes

    def successors(self, node: Any) -> list[Any]:
        out = []
        for s, t, _ in self._edges:
            if s == node:
                out.append(t)
            elif not self._directed and t == node:
                out.append(s)
        return out

    def predecessors(self, node: Any) -> list[Any]:
        if not self._directed:
            return self.successors(node)
        return [s for s, t, _ in self._edges if t == node]

    def edge_attrs(self, source: Any, target: Any) -> dict[str, Any]:
        for s, t, attrs in self._edges:
            if (s, t) == (source, target) or (not self._directed and (t, s) == (source, target)):
                return dict(attrs)
        msg = f"No edge from {source!r} to {target!r}"
        raise KeyError(msg)


# ======================================================================
# Fixtures
# ======================================================================


@pytest.fixture
def simple_path() -> RustworkxGraph:
    """A -> B -> C -> D"""
    return build_graph([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def simple_cycle() -> RustworkxGraph:
    """A -> B -> C -> A"""
    return build_graph([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def complete_triangle() -> RustworkxGraph:
    """Undirected A - B - C - A"""
    return build_graph([("A", "B"), ("B", "C"), ("C", "A")], directed=False)


@pytest.fixture
def star() -> RustworkxGraph:
    """Undirected hub H joined to four leaves."""
    return build_graph([("H", leaf) for leaf in ("L1", "L2", "L3", "L4")], directed=False)


@pytest.fixture
def weighted_square() -> RustworkxGraph:
    """Directed A->B (1), B->D (1), A->C (2), C->D (5); cheapest A..D is 2 via B."""
    return build_graph([("A", "B", 1.0), ("B", "D", 1.0), ("A", "C", 2.0), ("C", "D", 5.0)])


@pytest.fixture
def disconnected() -> RustworkxGraph:
    """Undirected A - B and C - D with no link between the pairs."""
    return build_graph([("A", "B"), ("C", "D")], directed=False)


@pytest.fixture
def empty_graph() -> RustworkxGraph:
    return RustworkxGraph()


@pytest.fixture
def single_node() -> RustworkxGraph:
    return build_graph([], nodes=["A"])
