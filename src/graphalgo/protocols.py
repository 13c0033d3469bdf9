"""Runtime-checkable interfaces for graphs and algorithms.

``GraphView`` is the only thing the algorithms require from caller
storage: a read-only view exposing nodes, edges with attributes,
adjacency lookups and a directedness flag.  Any object with these methods
works; nothing needs to subclass anything.

The algorithm protocols describe the call shape shared by each family so
that callers can swap implementations (``Dijkstra`` for ``AStar``,
``CommonNeighbors`` for ``AdamicAdar``) behind one annotation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from graphalgo.types import NodeId, PathResult


@runtime_checkable
class GraphView(Protocol):
    """Read contract consumed by every algorithm.

    ``nodes()`` must be finite and duplicate-free.  For undirected graphs
    ``successors()`` lists every adjacent node and ``edges()`` lists each
    edge once.
    """

    def is_directed(self) -> bool: ...
    def nodes(self) -> Iterable[NodeId]: ...
    def edges(self) -> Iterable[tuple[NodeId, NodeId, Mapping[str, Any]]]: ...
    def has_node(self, node: NodeId) -> bool: ...
    def successors(self, node: NodeId) -> Iterable[NodeId]: ...
    def predecessors(self, node: NodeId) -> Iterable[NodeId]: ...
    def edge_attrs(self, source: NodeId, target: NodeId) -> Mapping[str, Any]: ...


@runtime_checkable
class TraversalAlgorithm(Protocol):
    """Visitation order from a start node."""

    def traverse(self, graph: GraphView, start: NodeId) -> list[NodeId]: ...


@runtime_checkable
class PathfindingAlgorithm(Protocol):
    """Single-pair shortest path; ``None`` when *end* is unreachable."""

    def find(self, graph: GraphView, start: NodeId, end: NodeId) -> PathResult | None: ...


@runtime_checkable
class CentralityAlgorithm(Protocol):
    """Per-node centrality score."""

    def compute(self, graph: GraphView) -> dict[NodeId, float]: ...


@runtime_checkable
class ComponentsFinder(Protocol):
    """Partition of the nodes into components."""

    def find_components(self, graph: GraphView) -> list[list[NodeId]]: ...


@runtime_checkable
class CoreDecomposition(Protocol):
    """Core number per node."""

    def compute(self, graph: GraphView) -> dict[NodeId, int]: ...


@runtime_checkable
class LinkPredictor(Protocol):
    """Neighborhood-based link scoring."""

    def score(self, graph: GraphView, u: NodeId, v: NodeId) -> float: ...
    def scores_from(self, graph: GraphView, u: NodeId, k: int = 20) -> dict[NodeId, float]: ...
