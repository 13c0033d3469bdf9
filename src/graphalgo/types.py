"""Immutable algorithm result types."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TypeAlias

NodeId: TypeAlias = Hashable


@dataclass(frozen=True, slots=True)
class PathResult:
    """A path through a graph, start to end inclusive, with its total cost.

    A path from a node to itself is ``(node,)`` with cost ``0.0``.  "No
    path" is never a ``PathResult``; the pathfinders return ``None``.
    """

    nodes: tuple[NodeId, ...]
    cost: float

    @property
    def length(self) -> int:
        """Number of nodes on the path."""
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        """Number of edges on the path."""
        return max(0, len(self.nodes) - 1)

    @property
    def start(self) -> NodeId | None:
        return self.nodes[0] if self.nodes else None

    @property
    def end(self) -> NodeId | None:
        return self.nodes[-1] if self.nodes else None


@dataclass(frozen=True, slots=True)
class MstEdge:
    """One tree edge: ``source`` is the endpoint already in the tree."""

    source: NodeId
    target: NodeId
    weight: float


@dataclass(frozen=True, slots=True)
class MstResult:
    """Minimum spanning tree edges in the order Prim added them."""

    edges: tuple[MstEdge, ...]
    total_weight: float

    @property
    def edge_count(self) -> int:
        return len(self.edges)


def path_result(nodes: list[NodeId], cost: float) -> PathResult:
    """Build a ``PathResult`` from a node list."""
    return PathResult(nodes=tuple(nodes), cost=float(cost))
