"""Tests for Tarjan strongly connected components."""

from __future__ import annotations

import pytest
import rustworkx
from conftest import build_graph

from graphalgo import ComponentsFinder, InvalidArgumentError, StronglyConnected


def _as_sets(components) -> set[frozenset]:
    return {frozenset(c) for c in components}


class TestStronglyConnected:
    def test_single_cycle(self, simple_cycle) -> None:
        components = StronglyConnected().find_components(simple_cycle)
        assert len(components) == 1
        assert sorted(components[0]) == ["A", "B", "C"]

    def test_path_is_all_singletons_in_completion_order(self, simple_path) -> None:
        components = StronglyConnected().find_components(simple_path)
        assert components == [["D"], ["C"], ["B"], ["A"]]

    def test_downstream_component_completes_first(self) -> None:
        g = build_graph([("A", "B"), ("B", "A"), ("B", "C"), ("C", "D"), ("D", "C")])
        components = StronglyConnected().find_components(g)
        assert [set(c) for c in components] == [{"C", "D"}, {"A", "B"}]

    def test_self_loop_and_isolated(self) -> None:
        g = build_graph([("A", "A")], nodes=["Z"])
        assert _as_sets(StronglyConnected().find_components(g)) == {
            frozenset({"A"}),
            frozenset({"Z"}),
        }

    def test_directed_star_is_all_singletons(self) -> None:
        g = build_graph([("H", "L1"), ("H", "L2"), ("H", "L3")])
        components = StronglyConnected().find_components(g)
        assert len(components) == 4
        assert all(len(c) == 1 for c in components)

    def test_every_node_exactly_once(self) -> None:
        g = build_graph(
            [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 6), (6, 4), (7, 6), (7, 8), (8, 7)]
        )
        components = StronglyConnected().find_components(g)
        flat = [node for c in components for node in c]
        assert sorted(flat) == [1, 2, 3, 4, 5, 6, 7, 8]
        assert _as_sets(components) == {
            frozenset({1, 2, 3}),
            frozenset({4, 5, 6}),
            frozenset({7, 8}),
        }

    def test_matches_rustworkx(self) -> None:
        g = build_graph(
            [
                ("a", "b"),
                ("b", "c"),
                ("c", "a"),
                ("b", "d"),
                ("d", "e"),
                ("e", "f"),
                ("f", "d"),
                ("g", "f"),
                ("g", "h"),
                ("h", "i"),
                ("i", "g"),
                ("h", "h"),
            ]
        )
        expected = rustworkx.strongly_connected_components(g.rustworkx_graph)
        expected_sets = {frozenset(g.node_at(i) for i in c) for c in expected}
        assert _as_sets(StronglyConnected().find_components(g)) == expected_sets

    def test_long_cycle_without_recursion(self) -> None:
        n = 10_000
        g = build_graph([(i, (i + 1) % n) for i in range(n)])
        components = StronglyConnected().find_components(g)
        assert len(components) == 1
        assert len(components[0]) == n

    def test_undirected_rejected(self, complete_triangle) -> None:
        with pytest.raises(InvalidArgumentError, match="directed graph"):
            StronglyConnected().find_components(complete_triangle)

    def test_empty(self, empty_graph) -> None:
        assert StronglyConnected().find_components(empty_graph) == []

    def test_protocol(self) -> None:
        assert isinstance(StronglyConnected(), ComponentsFinder)
