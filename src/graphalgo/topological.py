"""Topological ordering (Kahn)."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph
from graphalgo.exceptions import CycleDetectedError, InvalidArgumentError

if TYPE_CHECKING:
    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId

logger = logging.getLogger(__name__)


class TopologicalSort:
    """Kahn's algorithm.

    Nodes with in-degree zero are emitted first-seen first; removing a node
    decrements the in-degree of each successor entry, so parallel edges are
    accounted for.  A self-loop is a cycle.

    Time complexity: O(V + E).
    """

    def sort(self, graph: GraphView) -> list[NodeId]:
        """Return the nodes so that every edge points forward.

        Raises ``InvalidArgumentError`` for undirected graphs and
        ``CycleDetectedError`` if the graph is not acyclic.
        """
        if not graph.is_directed():
            msg = "Topological sort requires a directed graph"
            raise InvalidArgumentError(msg)

        ag = AlgorithmGraph.build(graph, need_predecessors=True)
        successors = ag.successors
        in_degree = [len(row) for row in ag.predecessors]

        queue: deque[int] = deque(u for u, deg in enumerate(in_degree) if deg == 0)
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in successors[u]:
                in_degree[v] -= 1
                if in_degree[v] == 0:
                    queue.append(v)

        if len(order) != ag.node_count:
            remaining = tuple(ag.ids.id(u) for u, deg in enumerate(in_degree) if deg > 0)
            logger.debug("Cycle detected: %d of %d nodes unsorted", len(remaining), ag.node_count)
            raise CycleDetectedError(remaining)

        return ag.ids.to_ids(order)
