"""spgraph: shortest paths over undirected weighted graphs.

spgraph computes single-source shortest paths with Dijkstra's algorithm over
graphs with non-negative edge weights and reconstructs the full path. Graphs
can be given as an adjacency map (`UndirectedGraph`, a strict
``networkx.Graph``) or as a dense adjacency matrix (`MatrixGraph`).

Primary API:
    find_shortest_path() - Minimum-weight path between two vertices
    shortest_path_tree() - Distances and paths from one source to all vertices
    UndirectedGraph, MatrixGraph - Graph representations
    knapsack - 0/1 knapsack value and item selection
    make_matrix() - Owned 2D buffer allocation

Example:
    from spgraph import UndirectedGraph, find_shortest_path

    graph = UndirectedGraph()
    graph.add_edge(0, 1, 2)
    graph.add_edge(1, 2, 3)

    path, distance = find_shortest_path(graph, 0, 2)  # [0, 1, 2], 5
"""

from __future__ import annotations

from spgraph import cli, logging
from spgraph._version import __version__
from spgraph.algorithms import knapsack
from spgraph.algorithms.base import INF_DISTANCE
from spgraph.algorithms.spf import (
    ShortestPath,
    ShortestPathTree,
    TraversalRecord,
    find_shortest_path,
    path_distance,
    shortest_path_tree,
)
from spgraph.config import SolverConfig
from spgraph.errors import (
    EdgeExistsError,
    EdgeNotFoundError,
    InvalidArgumentError,
    PathValidationError,
    SpGraphError,
)
from spgraph.graph.matrix import UNREACHABLE, MatrixGraph
from spgraph.graph.undirected import UndirectedGraph
from spgraph.lib.matrix import make_matrix

__all__ = [
    # Version
    "__version__",
    # Graphs
    "UndirectedGraph",
    "MatrixGraph",
    "UNREACHABLE",
    # Shortest paths
    "find_shortest_path",
    "shortest_path_tree",
    "path_distance",
    "ShortestPath",
    "ShortestPathTree",
    "TraversalRecord",
    "INF_DISTANCE",
    "SolverConfig",
    # Errors
    "SpGraphError",
    "InvalidArgumentError",
    "EdgeExistsError",
    "EdgeNotFoundError",
    "PathValidationError",
    # Utilities
    "knapsack",
    "make_matrix",
    "cli",
    "logging",
]
