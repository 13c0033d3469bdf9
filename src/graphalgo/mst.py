"""Prim's minimum spanning tree."""

from __future__ import annotations

import heapq
import logging
import math
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph, weighted_adjacency
from graphalgo.exceptions import InvalidArgumentError
from graphalgo.types import MstEdge, MstResult
from graphalgo.weights import resolve_weight_fn

if TYPE_CHECKING:
    from graphalgo.protocols import GraphView
    from graphalgo.weights import WeightFn

logger = logging.getLogger(__name__)


class Prim:
    """Prim's algorithm with lazy deletion.

    Grows the tree from the first node in ``nodes()`` order.  The frontier
    is a heap of ``(key, index)`` entries where *key* is the cheapest known
    edge into the tree; superseded entries stay in the heap and are skipped
    when popped.  Between parallel edges the cheapest one is used.

    Time complexity: O(E log V).
    """

    def __init__(self, weight_fn: WeightFn | None = None) -> None:
        self._weight_fn = resolve_weight_fn(weight_fn)

    def find_mst(self, graph: GraphView) -> MstResult | None:
        """Return the MST, or ``None`` if *graph* is disconnected.

        Raises ``InvalidArgumentError`` for directed graphs.
        """
        if graph.is_directed():
            msg = "Prim's algorithm requires an undirected graph"
            raise InvalidArgumentError(msg)

        ag = AlgorithmGraph.build(graph)
        n = ag.node_count
        if n <= 1:
            return MstResult(edges=(), total_weight=0.0)

        ids = ag.ids
        adjacency = weighted_adjacency(graph, ids, self._weight_fn)

        in_tree = [False] * n
        key = [math.inf] * n
        parent = [-1] * n
        key[0] = 0.0
        frontier: list[tuple[float, int]] = [(0.0, 0)]

        tree: list[MstEdge] = []
        total = 0.0
        while frontier:
            _, u = heapq.heappop(frontier)
            if in_tree[u]:
                continue
            in_tree[u] = True

            if parent[u] != -1:
                tree.append(MstEdge(source=ids.id(parent[u]), target=ids.id(u), weight=key[u]))
                total += key[u]

            for v, w in adjacency[u]:
                if not in_tree[v] and w < key[v]:
                    key[v] = w
                    parent[v] = u
                    heapq.heappush(frontier, (w, v))

        if len(tree) != n - 1:
            logger.debug("Spanning tree reached %d of %d nodes", len(tree) + 1, n)
            return None
        return MstResult(edges=tuple(tree), total_weight=total)
