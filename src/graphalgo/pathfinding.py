"""Single-pair shortest paths: Dijkstra, A* and Bellman-Ford.

All three return a ``PathResult`` or ``None`` when the end node is
unreachable or either endpoint is missing.  Edge weights come from an
injected ``weight_fn`` applied once per edge of ``graph.edges()``;
undirected edges are usable in both directions.
"""

from __future__ import annotations

import heapq
import logging
import math
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph, weighted_adjacency
from graphalgo.exceptions import NegativeCycleError, NegativeWeightError
from graphalgo.types import path_result
from graphalgo.weights import resolve_weight_fn, zero_heuristic

if TYPE_CHECKING:
    from graphalgo._adapter import IndexMap
    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId, PathResult
    from graphalgo.weights import EdgeWeightFn, HeuristicFn, WeightFn

logger = logging.getLogger(__name__)


class Dijkstra:
    """Dijkstra's algorithm with a lazily-pruned binary heap.

    Time complexity: O((V + E) log V).  Requires non-negative weights; the
    first negative edge examined raises ``NegativeWeightError``.
    """

    def __init__(self, weight_fn: WeightFn | None = None) -> None:
        self._weight_fn = resolve_weight_fn(weight_fn)

    def find(self, graph: GraphView, start: NodeId, end: NodeId) -> PathResult | None:
        return _best_first(graph, start, end, self._weight_fn, None, "Dijkstra")


class AStar:
    """A* search: Dijkstra ordered by ``g + h(node, goal)``.

    Settled nodes are never reopened, so *heuristic* must be consistent
    (never overestimating, and monotone along edges) for the result to be
    optimal; that is not checked.  The default zero heuristic makes this
    identical to ``Dijkstra``.
    """

    def __init__(
        self,
        weight_fn: WeightFn | None = None,
        heuristic: HeuristicFn | None = None,
    ) -> None:
        self._weight_fn = resolve_weight_fn(weight_fn)
        self._heuristic = heuristic or zero_heuristic

    def find(self, graph: GraphView, start: NodeId, end: NodeId) -> PathResult | None:
        return _best_first(graph, start, end, self._weight_fn, self._heuristic, "A*")


class BellmanFord:
    """Bellman-Ford shortest path; negative weights allowed.

    Runs at most N-1 relaxation rounds, stopping early once a round changes
    nothing, then scans every edge once more.  An edge that still relaxes
    means a negative cycle reachable from *start* and raises
    ``NegativeCycleError``.  In an undirected graph a single negative edge
    already forms such a cycle.

    Time complexity: O(V * E).
    """

    def __init__(self, weight_fn: WeightFn | None = None) -> None:
        self._weight_fn = resolve_weight_fn(weight_fn)

    def find(self, graph: GraphView, start: NodeId, end: NodeId) -> PathResult | None:
        if not graph.has_node(start) or not graph.has_node(end):
            return None

        ag = AlgorithmGraph.build(graph)
        ids = ag.ids
        adjacency = weighted_adjacency(graph, ids, self._weight_fn)
        edges = [(u, v, w) for u, row in enumerate(adjacency) for v, w in row]

        n = ag.node_count
        source = ids.index(start)
        target = ids.index(end)
        dist = [math.inf] * n
        prev = [-1] * n
        dist[source] = 0.0

        for round_no in range(1, n):
            updated = False
            for u, v, w in edges:
                du = dist[u]
                if du == math.inf:
                    continue
                if du + w < dist[v]:
                    dist[v] = du + w
                    prev[v] = u
                    updated = True
            if not updated:
                logger.debug("Bellman-Ford settled after %d of %d rounds", round_no, n - 1)
                break

        for u, v, w in edges:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                logger.debug("Negative cycle through edge %r -> %r", ids.id(u), ids.id(v))
                msg = f"Graph contains a negative cycle reachable from {start!r}"
                raise NegativeCycleError(msg)

        if dist[target] == math.inf:
            return None
        return path_result(_walk_back(prev, target, ids), dist[target])


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _best_first(
    graph: GraphView,
    start: NodeId,
    end: NodeId,
    weight_fn: EdgeWeightFn,
    heuristic: HeuristicFn | None,
    algorithm: str,
) -> PathResult | None:
    """Shared Dijkstra / A* loop.

    Heap entries are ``(priority, index)`` so equal priorities resolve by
    first-seen node order.  A node is settled the first time it is popped;
    any later entry for it is stale and skipped.
    """
    if not graph.has_node(start) or not graph.has_node(end):
        return None

    ag = AlgorithmGraph.build(graph)
    ids = ag.ids
    adjacency = weighted_adjacency(graph, ids, weight_fn)

    n = ag.node_count
    source = ids.index(start)
    target = ids.index(end)
    dist = [math.inf] * n
    prev = [-1] * n
    settled = [False] * n
    dist[source] = 0.0

    h0 = heuristic(start, end) if heuristic is not None else 0.0
    frontier: list[tuple[float, int]] = [(h0, source)]

    while frontier:
        _, u = heapq.heappop(frontier)
        if settled[u]:
            continue
        settled[u] = True
        if u == target:
            break

        du = dist[u]
        for v, w in adjacency[u]:
            if w < 0:
                raise NegativeWeightError(ids.id(u), ids.id(v), w, algorithm)
            if settled[v]:
                continue
            alt = du + w
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                h = heuristic(ids.id(v), end) if heuristic is not None else 0.0
                heapq.heappush(frontier, (alt + h, v))

    if dist[target] == math.inf:
        return None
    return path_result(_walk_back(prev, target, ids), dist[target])


def _walk_back(prev: list[int], target: int, ids: IndexMap) -> list[NodeId]:
    """Follow predecessor pointers from *target* to the source, then reverse."""
    path: list[int] = []
    v = target
    while v != -1:
        path.append(v)
        if len(path) > len(prev):
            msg = "Predecessor chain does not terminate"
            raise RuntimeError(msg)
        v = prev[v]
    path.reverse()
    return ids.to_ids(path)
