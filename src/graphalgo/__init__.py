"""graphalgo: classical graph algorithms over any read-only graph.

Traversal, shortest paths, spanning trees, centrality, components,
topological order, k-cores and link prediction, all running on a dense
integer snapshot of whatever graph object the caller supplies.
"""

__version__ = "0.1.0"

from graphalgo._rustworkx import RustworkxGraph
from graphalgo.centrality import DegreeCentrality, DegreeMode, PageRank
from graphalgo.components import StronglyConnected
from graphalgo.decomposition import KCore
from graphalgo.exceptions import (
    CycleDetectedError,
    GraphAlgorithmError,
    InvalidArgumentError,
    NegativeCycleError,
    NegativeWeightError,
)
from graphalgo.link_prediction import AdamicAdar, CommonNeighbors, ResourceAllocation
from graphalgo.mst import Prim
from graphalgo.pathfinding import AStar, BellmanFord, Dijkstra
from graphalgo.protocols import (
    CentralityAlgorithm,
    ComponentsFinder,
    CoreDecomposition,
    GraphView,
    LinkPredictor,
    PathfindingAlgorithm,
    TraversalAlgorithm,
)
from graphalgo.topological import TopologicalSort
from graphalgo.traversal import Bfs, Dfs
from graphalgo.types import MstEdge, MstResult, PathResult
from graphalgo.weights import default_weight, resolve_weight_fn, weight_by, zero_heuristic

__all__ = [
    "AStar",
    "AdamicAdar",
    "BellmanFord",
    "Bfs",
    "CentralityAlgorithm",
    "CommonNeighbors",
    "ComponentsFinder",
    "CoreDecomposition",
    "CycleDetectedError",
    "DegreeCentrality",
    "DegreeMode",
    "Dfs",
    "Dijkstra",
    "GraphAlgorithmError",
    "GraphView",
    "InvalidArgumentError",
    "KCore",
    "LinkPredictor",
    "MstEdge",
    "MstResult",
    "NegativeCycleError",
    "NegativeWeightError",
    "PageRank",
    "PathResult",
    "PathfindingAlgorithm",
    "Prim",
    "ResourceAllocation",
    "RustworkxGraph",
    "StronglyConnected",
    "TopologicalSort",
    "TraversalAlgorithm",
    "__version__",
    "default_weight",
    "resolve_weight_fn",
    "weight_by",
    "zero_heuristic",
]
