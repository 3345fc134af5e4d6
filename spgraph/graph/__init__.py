"""Graph primitives and helpers.

This package provides the adjacency-map graph `UndirectedGraph`, the dense
`MatrixGraph`, and conversions between them and NetworkX (`convert`).
"""

from spgraph.graph.matrix import UNREACHABLE, MatrixGraph
from spgraph.graph.undirected import UndirectedGraph

__all__ = [
    "UNREACHABLE",
    "MatrixGraph",
    "UndirectedGraph",
]
