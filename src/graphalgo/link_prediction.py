"""Neighborhood-based link prediction heuristics.

A node's neighbors are its distinct adjacent nodes, ignoring direction:
successors plus predecessors in a directed graph.  Degree means the size
of that set.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph
from graphalgo.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId

logger = logging.getLogger(__name__)


class _NeighborhoodPredictor(ABC):
    """Shared ``score`` / ``scores_from`` plumbing.

    Subclasses implement ``_pair_score`` over index-based neighbor sets.
    """

    name = "neighborhood"

    def score(self, graph: GraphView, u: NodeId, v: NodeId) -> float:
        """Score a potential ``u``-``v`` link.  Unknown nodes and ``u == v`` score 0."""
        if u == v:
            return 0.0
        ag = AlgorithmGraph.build(graph, need_predecessors=True)
        u_idx = ag.ids.get(u)
        v_idx = ag.ids.get(v)
        if u_idx is None or v_idx is None:
            return 0.0
        return self._pair_score(ag.neighbor_sets(), u_idx, v_idx)

    def scores_from(self, graph: GraphView, u: NodeId, k: int = 20) -> dict[NodeId, float]:
        """Top-*k* candidates for new links from *u*, best first.

        Candidates exclude *u* and its current neighbors; only positive
        scores are kept.  Equal scores keep first-seen node order.
        """
        if k < 0:
            msg = f"k must be non-negative, got {k!r}"
            raise InvalidArgumentError(msg)

        ag = AlgorithmGraph.build(graph, need_predecessors=True)
        u_idx = ag.ids.get(u)
        if u_idx is None or k == 0:
            return {}

        neighbors = ag.neighbor_sets()
        existing = neighbors[u_idx]
        scored: list[tuple[float, int]] = []
        for v_idx in range(ag.node_count):
            if v_idx == u_idx or v_idx in existing:
                continue
            s = self._pair_score(neighbors, u_idx, v_idx)
            if s > 0.0:
                scored.append((s, v_idx))

        scored.sort(key=lambda item: -item[0])
        logger.debug("%s: %d candidates for %r", self.name, len(scored), u)
        return {ag.ids.id(v_idx): s for s, v_idx in scored[:k]}

    @abstractmethod
    def _pair_score(self, neighbors: list[frozenset[int]], u: int, v: int) -> float:
        """Score the pair of indices *u*, *v* from index-based neighbor sets."""


class CommonNeighbors(_NeighborhoodPredictor):
    """|N(u) ∩ N(v)|"""

    name = "common_neighbors"

    def _pair_score(self, neighbors: list[frozenset[int]], u: int, v: int) -> float:
        return float(len(neighbors[u] & neighbors[v]))


class ResourceAllocation(_NeighborhoodPredictor):
    """Sum of ``1 / deg(w)`` over common neighbors *w*.

    Each node hands out one unit of resource split evenly over its
    neighbors, so rare (low-degree) shared neighbors weigh more.
    """

    name = "resource_allocation"

    def _pair_score(self, neighbors: list[frozenset[int]], u: int, v: int) -> float:
        total = 0.0
        for w in sorted(neighbors[u] & neighbors[v]):
            degree = len(neighbors[w])
            if degree > 0:
                total += 1.0 / degree
        return total


class AdamicAdar(_NeighborhoodPredictor):
    """Sum of ``1 / ln(deg(w))`` over common neighbors *w*.

    The term is undefined for ``deg(w) == 1`` (division by ``ln 1 == 0``),
    so such neighbors are skipped.
    """

    name = "adamic_adar"

    def _pair_score(self, neighbors: list[frozenset[int]], u: int, v: int) -> float:
        total = 0.0
        for w in sorted(neighbors[u] & neighbors[v]):
            degree = len(neighbors[w])
            if degree >= 2:
                total += 1.0 / math.log(degree)
        return total
