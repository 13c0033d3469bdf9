"""Strongly connected components (Tarjan)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphalgo._adapter import AlgorithmGraph
from graphalgo.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId

logger = logging.getLogger(__name__)

_UNVISITED = -1


class StronglyConnected:
    """Tarjan's single-pass SCC algorithm, without recursion.

    The DFS call stack is simulated with ``(node, next-neighbor position)``
    frames, so graph depth is bounded by memory rather than the interpreter
    recursion limit.  All bookkeeping lives inside ``find_components``;
    instances hold no state and may be shared across threads.

    Components come out in completion order, which is a reverse
    topological order of the condensation.

    Time complexity: O(V + E).
    """

    def find_components(self, graph: GraphView) -> list[list[NodeId]]:
        if not graph.is_directed():
            msg = "Strongly connected components require a directed graph"
            raise InvalidArgumentError(msg)

        ag = AlgorithmGraph.build(graph)
        n = ag.node_count
        successors = ag.successors

        discovery = [_UNVISITED] * n
        lowlink = [0] * n
        on_stack = [False] * n
        path: list[int] = []
        components: list[list[int]] = []
        counter = 0

        for root in range(n):
            if discovery[root] != _UNVISITED:
                continue

            discovery[root] = lowlink[root] = counter
            counter += 1
            path.append(root)
            on_stack[root] = True
            frames: list[list[int]] = [[root, 0]]

            while frames:
                frame = frames[-1]
                v, pos = frame
                row = successors[v]

                if pos < len(row):
                    frame[1] = pos + 1
                    w = row[pos]
                    if discovery[w] == _UNVISITED:
                        discovery[w] = lowlink[w] = counter
                        counter += 1
                        path.append(w)
                        on_stack[w] = True
                        frames.append([w, 0])
                    elif on_stack[w]:
                        lowlink[v] = min(lowlink[v], discovery[w])
                    continue

                # All successors of v explored: return to the caller frame.
                frames.pop()
                if frames:
                    caller = frames[-1][0]
                    lowlink[caller] = min(lowlink[caller], lowlink[v])

                if lowlink[v] == discovery[v]:
                    component: list[int] = []
                    while True:
                        w = path.pop()
                        on_stack[w] = False
                        component.append(w)
                        if w == v:
                            break
                    components.append(component)

        logger.debug("Found %d strongly connected components in %d nodes", len(components), n)
        return [ag.ids.to_ids(c) for c in components]
