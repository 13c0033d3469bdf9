"""Exception hierarchy for graph algorithm failures.

Unreachable targets and disconnected graphs are *not* errors: the
algorithms return ``None`` for those.  Everything here aborts the call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphalgo.types import NodeId


class GraphAlgorithmError(Exception):
    """Base exception for all graphalgo errors."""


class InvalidArgumentError(GraphAlgorithmError, ValueError):
    """Raised for bad configuration or a graph of the wrong orientation."""


class NegativeWeightError(GraphAlgorithmError):
    """Raised when Dijkstra or A* examine an edge with a negative weight."""

    def __init__(self, source: NodeId, target: NodeId, weight: float, algorithm: str) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"{algorithm} requires non-negative weights: "
            f"edge {source!r} -> {target!r} has weight {weight!r}"
        )


class NegativeCycleError(GraphAlgorithmError):
    """Raised when Bellman-Ford finds a negative cycle reachable from the source."""

    def __init__(self, message: str = "Graph contains a negative cycle") -> None:
        super().__init__(message)


class CycleDetectedError(GraphAlgorithmError):
    """Raised when a topological sort is impossible.

    ``remaining`` holds the nodes Kahn's algorithm could not emit: every
    node on a cycle plus everything downstream of one.
    """

    def __init__(self, remaining: tuple[NodeId, ...] = ()) -> None:
        self.remaining = remaining
        super().__init__("Graph contains a cycle - topological sort impossible")
