"""k-core decomposition by bucket peeling."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph

if TYPE_CHECKING:
    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId

logger = logging.getLogger(__name__)


class KCore:
    """Core number of every node.

    The graph is viewed as undirected (a directed edge links both ends) and
    simple: parallel edges and self-loops do not add to a node's degree.

    Nodes are bin-sorted by degree and peeled lowest degree first.  A
    peeled node's core number is its degree at removal; each still-present
    neighbor loses one degree and moves down one bucket, but never below
    the degree currently being peeled, which keeps core numbers
    non-decreasing in peel order.

    Time complexity: O(V + E).
    """

    def compute(self, graph: GraphView) -> dict[NodeId, int]:
        ag = AlgorithmGraph.build(graph, need_predecessors=True)
        n = ag.node_count
        if n == 0:
            return {}

        neighbors = ag.neighbor_sets()
        degree = [len(s) for s in neighbors]
        max_degree = max(degree)

        # bucket_start[d]: first slot of degree-d nodes in ``order``
        counts = [0] * (max_degree + 1)
        for d in degree:
            counts[d] += 1
        bucket_start = [0] * (max_degree + 1)
        total = 0
        for d in range(max_degree + 1):
            bucket_start[d] = total
            total += counts[d]

        position = [0] * n
        order = [0] * n
        fill = bucket_start.copy()
        for v in range(n):
            position[v] = fill[degree[v]]
            order[position[v]] = v
            fill[degree[v]] += 1

        for i in range(n):
            v = order[i]
            dv = degree[v]
            for u in sorted(neighbors[v]):
                du = degree[u]
                if du <= dv:
                    continue
                # swap u with the first node of its bucket, then shrink the bucket
                first = bucket_start[du]
                w = order[first]
                if u != w:
                    pu = position[u]
                    order[first], order[pu] = u, w
                    position[u], position[w] = first, pu
                bucket_start[du] += 1
                degree[u] = du - 1

        logger.debug("k-core decomposition: max core %d over %d nodes", max(degree), n)
        return dict(zip(ag.ids, degree, strict=True))
