"""Degree and PageRank centrality."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph
from graphalgo.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId

logger = logging.getLogger(__name__)


class DegreeMode(str, Enum):
    """Which edges count toward a node's degree."""

    IN = "in"
    OUT = "out"
    TOTAL = "total"


class DegreeCentrality:
    """In-, out- or total-degree per node in one pass over the snapshot.

    Total degree is in + out for directed graphs and the adjacency count for
    undirected ones.  Parallel edges count once each.  With
    ``normalized=True`` scores are divided by ``N - 1``.
    """

    def __init__(
        self, mode: DegreeMode | str = DegreeMode.TOTAL, *, normalized: bool = False
    ) -> None:
        try:
            self._mode = DegreeMode(mode)
        except ValueError:
            msg = f"Mode must be one of 'in', 'out' or 'total', got {mode!r}"
            raise InvalidArgumentError(msg) from None
        self._normalized = normalized

    @property
    def mode(self) -> DegreeMode:
        return self._mode

    def compute(self, graph: GraphView) -> dict[NodeId, float]:
        ag = AlgorithmGraph.build(graph, need_predecessors=True)
        n = ag.node_count
        if n == 0:
            return {}

        successors = ag.successors
        predecessors = ag.predecessors
        scores: list[float] = []
        for u in range(n):
            in_degree = len(predecessors[u])
            out_degree = len(successors[u])
            if self._mode is DegreeMode.IN:
                score = in_degree
            elif self._mode is DegreeMode.OUT:
                score = out_degree
            else:
                score = in_degree + out_degree if ag.directed else out_degree
            scores.append(float(score))

        if self._normalized and n > 1:
            scores = [s / (n - 1) for s in scores]

        return dict(zip(ag.ids, scores, strict=True))


class PageRank:
    """PageRank by power iteration with dangling-mass redistribution.

    Ranks start at ``1/N``.  Each iteration the total rank held by nodes
    without out-edges is spread evenly over all nodes, so the vector keeps
    summing to 1.  Iteration stops once the L1 change falls below
    *tolerance* or after *max_iterations*.

    Time complexity: O(k * (V + E)) for k iterations.
    """

    def __init__(
        self,
        *,
        damping_factor: float = 0.85,
        max_iterations: int = 100,
        tolerance: float = 1e-6,
    ) -> None:
        if not 0.0 <= damping_factor <= 1.0:
            msg = f"Damping factor must be between 0 and 1, got {damping_factor!r}"
            raise InvalidArgumentError(msg)
        if max_iterations < 1:
            msg = f"max_iterations must be at least 1, got {max_iterations!r}"
            raise InvalidArgumentError(msg)
        if tolerance < 0:
            msg = f"tolerance must be non-negative, got {tolerance!r}"
            raise InvalidArgumentError(msg)
        self._damping = damping_factor
        self._max_iterations = max_iterations
        self._tolerance = tolerance

    def compute(self, graph: GraphView) -> dict[NodeId, float]:
        ag = AlgorithmGraph.build(graph, need_predecessors=True)
        n = ag.node_count
        if n == 0:
            return {}

        d = self._damping
        predecessors = ag.predecessors
        out_degree = [len(row) for row in ag.successors]
        dangling = [u for u in range(n) if out_degree[u] == 0]
        teleport = (1.0 - d) / n

        ranks = [1.0 / n] * n
        for iteration in range(1, self._max_iterations + 1):
            dangling_mass = sum(ranks[u] for u in dangling)
            base = teleport + d * dangling_mass / n
            new_ranks = [
                base + d * sum(ranks[v] / out_degree[v] for v in predecessors[u])
                for u in range(n)
            ]
            delta = sum(abs(new - old) for new, old in zip(new_ranks, ranks, strict=True))
            ranks = new_ranks
            if delta < self._tolerance:
                logger.debug(
                    "PageRank converged after %d iterations (delta=%.3g)", iteration, delta
                )
                break
        else:
            logger.debug("PageRank stopped at max_iterations=%d", self._max_iterations)

        return dict(zip(ag.ids, ranks, strict=True))
