"""Rustworkx-backed graph store implementing ``GraphView``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import rustworkx

if TYPE_CHECKING:
    from graphalgo.types import NodeId


class RustworkxGraph:
    """Mutable graph over arbitrary hashable node identifiers.

    Wraps a ``rustworkx.PyDiGraph`` (``directed=True``, the default) or a
    ``rustworkx.PyGraph``.  Parallel edges are kept.  Node and edge data
    are plain dicts; edge attributes are what ``edges()`` and
    ``edge_attrs()`` report and what weight extractors receive.

    Adjacency is reported in edge insertion order, so the dense indices the
    algorithms assign (and therefore their tie-breaking) follow the order
    in which the graph was built.
    """

    def __init__(self, *, directed: bool = True) -> None:
        self._directed = directed
        self._graph: rustworkx.PyDiGraph | rustworkx.PyGraph = (
            rustworkx.PyDiGraph() if directed else rustworkx.PyGraph()
        )
        self._id_to_idx: dict[NodeId, int] = {}
        self._idx_to_id: dict[int, NodeId] = {}
        # Edge indices per node.  Directed: outgoing / incoming.
        # Undirected: every incident edge lives in ``_out`` (a self-loop once).
        self._out: dict[int, list[int]] = {}
        self._in: dict[int, list[int]] = {}

    # ------------------------------------------------------------------
    # Node operations
    # ------------------------------------------------------------------

    def add_node(self, node: NodeId, **attrs: Any) -> None:
        """Add or update a node.  Merges *attrs* if the node already exists."""
        if node in self._id_to_idx:
            existing: dict[str, Any] = self._graph[self._id_to_idx[node]]
            existing.update(attrs)
            return
        idx = self._graph.add_node({"node": node, **attrs})
        self._id_to_idx[node] = idx
        self._idx_to_id[idx] = node
        self._out[idx] = []
        self._in[idx] = []

    def has_node(self, node: NodeId) -> bool:
        """Return whether *node* is in the graph."""
        return node in self._id_to_idx

    def get_node(self, node: NodeId) -> dict[str, Any]:
        """Return the node data dict.  Raises ``KeyError`` if missing."""
        return dict(self._graph[self._require_node(node)])

    def nodes(self) -> list[NodeId]:
        """Return all nodes in insertion order."""
        return list(self._id_to_idx.keys())

    # ------------------------------------------------------------------
    # Edge operations
    # ------------------------------------------------------------------

    def add_edge(self, source: NodeId, target: NodeId, **attrs: Any) -> None:
        """Add an edge, auto-creating missing endpoints.

        Repeated calls for the same pair add parallel edges.
        """
        if source not in self._id_to_idx:
            self.add_node(source)
        if target not in self._id_to_idx:
            self.add_node(target)

        src_idx = self._id_to_idx[source]
        tgt_idx = self._id_to_idx[target]
        edge_idx = self._graph.add_edge(src_idx, tgt_idx, dict(attrs))

        self._out[src_idx].append(edge_idx)
        if self._directed:
            self._in[tgt_idx].append(edge_idx)
        elif tgt_idx != src_idx:
            self._out[tgt_idx].append(edge_idx)

    def edges(self) -> list[tuple[NodeId, NodeId, dict[str, Any]]]:
        """Return all edges as ``(source, target, attrs)`` triples."""
        return [
            (self._idx_to_id[src_idx], self._idx_to_id[tgt_idx], dict(data))
            for src_idx, tgt_idx, data in self._graph.weighted_edge_list()
        ]

    def edge_attrs(self, source: NodeId, target: NodeId) -> dict[str, Any]:
        """Attributes of the first *source*-*target* edge.  Raises ``KeyError``."""
        src_idx = self._require_node(source)
        tgt_idx = self._require_node(target)
        for edge_idx in self._out[src_idx]:
            if self._other_end(edge_idx, src_idx) == tgt_idx:
                return dict(self._graph.get_edge_data_by_index(edge_idx))
        msg = f"No edge from {source!r} to {target!r}"
        raise KeyError(msg)

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def is_directed(self) -> bool:
        return self._directed

    def successors(self, node: NodeId) -> list[NodeId]:
        """Nodes this node points *to*, one entry per edge."""
        idx = self._require_node(node)
        return [self._idx_to_id[self._other_end(e, idx)] for e in self._out[idx]]

    def predecessors(self, node: NodeId) -> list[NodeId]:
        """Nodes with edges pointing *to* this node, one entry per edge."""
        if not self._directed:
            return self.successors(node)
        idx = self._require_node(node)
        return [
            self._idx_to_id[self._graph.get_edge_endpoints_by_index(e)[0]]
            for e in self._in[idx]
        ]

    # ------------------------------------------------------------------
    # Graph-level
    # ------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return self._graph.num_edges()

    @property
    def rustworkx_graph(self) -> rustworkx.PyDiGraph | rustworkx.PyGraph:
        """The underlying rustworkx graph, for interop with rustworkx algorithms."""
        return self._graph

    def index_of(self, node: NodeId) -> int:
        """Return the rustworkx node index of *node*.  Raises ``KeyError``."""
        return self._require_node(node)

    def node_at(self, idx: int) -> NodeId:
        """Return the node stored at rustworkx index *idx*."""
        return self._idx_to_id[idx]

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"RustworkxGraph({kind}, nodes={self.node_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_node(self, node: NodeId) -> int:
        """Return the rustworkx index for *node*, or raise ``KeyError``."""
        try:
            return self._id_to_idx[node]
        except KeyError:
            msg = f"Node not found: {node!r}"
            raise KeyError(msg) from None

    def _other_end(self, edge_idx: int, idx: int) -> int:
        """The endpoint of *edge_idx* opposite *idx* (the target, when directed)."""
        src_idx, tgt_idx = self._graph.get_edge_endpoints_by_index(edge_idx)
        if self._directed:
            return tgt_idx
        return tgt_idx if src_idx == idx else src_idx
