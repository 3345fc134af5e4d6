"""Conversions between graph representations.

Supports the adjacency-map `UndirectedGraph`, the dense `MatrixGraph` and plain
NetworkX graphs.
"""

from __future__ import annotations

import networkx as nx
import numpy as np

from spgraph.errors import InvalidArgumentError
from spgraph.graph.matrix import UNREACHABLE, MatrixGraph
from spgraph.graph.undirected import WEIGHT_ATTR, UndirectedGraph


def to_matrix_graph(graph: UndirectedGraph) -> MatrixGraph:
    """Convert an `UndirectedGraph` to a `MatrixGraph`.

    Row ``i`` corresponds to vertex ``i``, so the vertex ids must be exactly
    ``0..n-1``. Self-loops have no place in the matrix and are dropped.

    Args:
        graph: Source graph.

    Returns:
        MatrixGraph: Dense equivalent of ``graph``.

    Raises:
        InvalidArgumentError: If the vertex ids are not contiguous from zero.
    """
    n = graph.vertices_count()
    if sorted(graph.nodes) != list(range(n)):
        raise InvalidArgumentError(
            "Vertex ids must be exactly 0..n-1 to build an adjacency matrix."
        )

    matrix = np.full((n, n), UNREACHABLE, dtype=float)
    np.fill_diagonal(matrix, 0.0)
    for u, v, weight in graph.iter_edges():
        if u == v:
            continue
        matrix[u, v] = weight
        matrix[v, u] = weight
    return MatrixGraph(matrix)


def from_matrix_graph(matrix_graph: MatrixGraph) -> UndirectedGraph:
    """Convert a `MatrixGraph` to an `UndirectedGraph`.

    Every row becomes a vertex, including rows without edges.
    """
    graph = UndirectedGraph()
    n = matrix_graph.vertices_count()
    graph.add_nodes_from(range(n))
    for u in range(n):
        for v in matrix_graph.adjacent_vertices(u):
            if u < v:
                graph.add_edge(u, v, _plain_number(matrix_graph.distance(u, v)))
    return graph


def to_networkx(graph: UndirectedGraph) -> nx.Graph:
    """Return a plain ``networkx.Graph`` copy with ``weight`` edge attributes."""
    nx_graph = nx.Graph()
    nx_graph.add_nodes_from(graph.nodes)
    nx_graph.add_weighted_edges_from(graph.iter_edges(), weight=WEIGHT_ATTR)
    return nx_graph


def from_networkx(nx_graph: nx.Graph, weight: str = WEIGHT_ATTR) -> UndirectedGraph:
    """Build an `UndirectedGraph` from an undirected NetworkX graph.

    Args:
        nx_graph: Simple undirected graph with integer nodes.
        weight: Edge attribute holding the weight.

    Returns:
        UndirectedGraph: Strict copy of ``nx_graph``.

    Raises:
        InvalidArgumentError: For directed or multi graphs, missing weights,
            or invalid vertex ids and weights.
    """
    if nx_graph.is_directed():
        raise InvalidArgumentError("Directed graphs are not supported.")
    if nx_graph.is_multigraph():
        raise InvalidArgumentError("Multigraphs are not supported.")

    graph = UndirectedGraph()
    graph.add_nodes_from(nx_graph.nodes)
    for u, v, data in nx_graph.edges(data=True):
        if weight not in data:
            raise InvalidArgumentError(f"Edge ({u}, {v}) has no '{weight}' attribute.")
        graph.add_edge(u, v, data[weight])
    return graph


def _plain_number(value: float) -> float | int:
    # Matrices store floats; keep integral weights as ints.
    return int(value) if float(value).is_integer() else value
