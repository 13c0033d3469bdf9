"""Dense integer snapshot of a ``GraphView``.

Every algorithm call builds one of these first and then works purely on
``0..N-1`` indices.  Indices are assigned in the order ``nodes()`` yields
identifiers, which is what makes tie-breaking reproducible across calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphalgo.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphalgo.protocols import GraphView
    from graphalgo.types import NodeId
    from graphalgo.weights import EdgeWeightFn

logger = logging.getLogger(__name__)


class IndexMap:
    """Bijection between node identifiers and dense integers in first-seen order."""

    __slots__ = ("_frozen", "_id_to_idx", "_idx_to_id")

    def __init__(self) -> None:
        self._id_to_idx: dict[NodeId, int] = {}
        self._idx_to_id: list[NodeId] = []
        self._frozen = False

    def add(self, node: NodeId) -> int:
        """Return the index of *node*, assigning the next free one if new.

        Raises ``RuntimeError`` for a new node once the map is frozen.
        """
        idx = self._id_to_idx.get(node)
        if idx is None:
            if self._frozen:
                msg = f"IndexMap is frozen; cannot add {node!r}"
                raise RuntimeError(msg)
            idx = len(self._idx_to_id)
            self._id_to_idx[node] = idx
            self._idx_to_id.append(node)
        return idx

    def freeze(self) -> None:
        """Stop accepting new nodes."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def index(self, node: NodeId) -> int:
        """Return the index of *node*.  Raises ``KeyError`` if unknown."""
        try:
            return self._id_to_idx[node]
        except KeyError:
            msg = f"Node not indexed: {node!r}"
            raise KeyError(msg) from None

    def get(self, node: NodeId) -> int | None:
        return self._id_to_idx.get(node)

    def id(self, idx: int) -> NodeId:
        """Return the identifier stored at *idx*."""
        return self._idx_to_id[idx]

    def to_ids(self, indices: list[int]) -> list[NodeId]:
        """Translate a list of indices back to identifiers."""
        lookup = self._idx_to_id
        return [lookup[i] for i in indices]

    def __contains__(self, node: object) -> bool:
        return node in self._id_to_idx

    def __len__(self) -> int:
        return len(self._idx_to_id)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._idx_to_id)

    def __repr__(self) -> str:
        return f"IndexMap(size={len(self)})"


@dataclass(frozen=True, slots=True)
class AlgorithmGraph:
    """Read-only, integer-indexed adjacency snapshot.

    ``successors[u]`` lists the successor indices of ``u`` in the order the
    source graph reported them; parallel edges appear repeatedly.
    ``predecessors`` is empty unless requested at build time, and is always
    derived by inverting ``successors`` so the two views agree.
    ``ids`` is frozen by ``build`` and rejects new nodes.
    """

    ids: IndexMap
    directed: bool
    successors: tuple[tuple[int, ...], ...]
    predecessors: tuple[tuple[int, ...], ...] = ()

    @classmethod
    def build(cls, graph: GraphView, *, need_predecessors: bool = False) -> AlgorithmGraph:
        """Snapshot *graph* in O(V + E)."""
        ids = IndexMap()
        node_ids = list(graph.nodes())
        for node in node_ids:
            ids.add(node)
        ids.freeze()

        successors: list[tuple[int, ...]] = []
        for node in node_ids:
            row: list[int] = []
            for succ in graph.successors(node):
                v = ids.get(succ)
                if v is None:
                    msg = f"Successor {succ!r} of {node!r} is not a node of the graph"
                    raise InvalidArgumentError(msg)
                row.append(v)
            successors.append(tuple(row))

        predecessors: tuple[tuple[int, ...], ...] = ()
        if need_predecessors:
            preds: list[list[int]] = [[] for _ in node_ids]
            for u, row in enumerate(successors):
                for v in row:
                    preds[v].append(u)
            predecessors = tuple(tuple(p) for p in preds)

        logger.debug(
            "Built snapshot: %d nodes, %d successor entries", len(ids), sum(map(len, successors))
        )
        return cls(
            ids=ids,
            directed=bool(graph.is_directed()),
            successors=tuple(successors),
            predecessors=predecessors,
        )

    @property
    def node_count(self) -> int:
        return len(self.successors)

    @property
    def edge_count(self) -> int:
        """Number of successor entries (undirected edges count once per side)."""
        return sum(len(row) for row in self.successors)

    def neighbor_sets(self) -> list[frozenset[int]]:
        """Undirected neighborhoods: distinct neighbors, self excluded.

        Directed graphs merge successors and predecessors, so the snapshot
        must have been built with ``need_predecessors=True``.
        """
        if self.directed and len(self.predecessors) != self.node_count:
            msg = "neighbor_sets() on a directed snapshot requires predecessors"
            raise RuntimeError(msg)
        result: list[frozenset[int]] = []
        for u, row in enumerate(self.successors):
            merged = set(row)
            if self.directed:
                merged.update(self.predecessors[u])
            merged.discard(u)
            result.append(frozenset(merged))
        return result

    def __repr__(self) -> str:
        return (
            f"AlgorithmGraph(nodes={self.node_count}, edges={self.edge_count}, "
            f"directed={self.directed})"
        )


def weighted_adjacency(
    graph: GraphView,
    ids: IndexMap,
    weight: EdgeWeightFn,
) -> list[list[tuple[int, float]]]:
    """Per-node ``(neighbor, weight)`` lists built from ``graph.edges()``.

    Undirected edges are added in both directions (a self-loop once).
    Weights are extracted once per edge, up front.
    """
    directed = graph.is_directed()
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(len(ids))]
    for source, target, attrs in graph.edges():
        u = ids.get(source)
        v = ids.get(target)
        if u is None or v is None:
            msg = f"Edge {source!r} -> {target!r} references a node outside the graph"
            raise InvalidArgumentError(msg)
        w = weight(attrs, source, target)
        adjacency[u].append((v, w))
        if not directed and u != v:
            adjacency[v].append((u, w))
    return adjacency
