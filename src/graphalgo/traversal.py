"""Breadth-first and depth-first visitation order.

Both run in O(V + E) over the successor lists and return an empty list when
the start node is not in the graph.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph

if TYPE_CHECKING:
    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId


class Bfs:
    """Breadth-first search using a FIFO frontier."""

    def traverse(self, graph: GraphView, start: NodeId) -> list[NodeId]:
        if not graph.has_node(start):
            return []

        ag = AlgorithmGraph.build(graph)
        successors = ag.successors
        start_idx = ag.ids.index(start)

        visited = [False] * ag.node_count
        visited[start_idx] = True
        queue: deque[int] = deque([start_idx])
        order: list[int] = []

        while queue:
            u = queue.popleft()
            order.append(u)
            for v in successors[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)

        return ag.ids.to_ids(order)


class Dfs:
    """Depth-first search with an explicit stack.

    Neighbors are pushed in reverse so the pop order matches a recursive,
    left-to-right DFS.
    """

    def traverse(self, graph: GraphView, start: NodeId) -> list[NodeId]:
        if not graph.has_node(start):
            return []

        ag = AlgorithmGraph.build(graph)
        successors = ag.successors

        visited = [False] * ag.node_count
        stack: list[int] = [ag.ids.index(start)]
        order: list[int] = []

        while stack:
            u = stack.pop()
            if visited[u]:
                continue
            visited[u] = True
            order.append(u)
            for v in reversed(successors[u]):
                if not visited[v]:
                    stack.append(v)

        return ag.ids.to_ids(order)
