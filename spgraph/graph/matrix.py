"""Dense adjacency-matrix graph.

`MatrixGraph` wraps a square ``numpy`` array where cell ``(u, v)`` holds the
weight of edge ``{u, v}`` and `UNREACHABLE` marks a missing edge. Vertices are
the row indices ``0..n-1``. Diagonal cells are never treated as edges.

The array is copied on construction and frozen, so a `MatrixGraph` is
read-only and safe to share between concurrent queries.
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, List

import numpy as np

from spgraph.errors import EdgeNotFoundError, InvalidArgumentError

#: Cell value meaning "no edge between these vertices".
UNREACHABLE = math.inf


class MatrixGraph:
    """Undirected weighted graph stored as a symmetric adjacency matrix.

    Attributes:
        matrix: Read-only ``(n, n)`` float array of edge weights.
    """

    def __init__(self, matrix: Any) -> None:
        """Validate and freeze ``matrix``.

        Args:
            matrix: Square 2D array-like of non-negative weights, with
                `UNREACHABLE` for missing edges.

        Raises:
            InvalidArgumentError: If the matrix is not square, not symmetric,
                or has NaN or negative off-diagonal entries.
        """
        try:
            array = np.array(matrix, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Adjacency matrix must be square with numeric cells: {e}"
            ) from e
        if array.size == 0:
            array = array.reshape(0, 0)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise InvalidArgumentError(
                f"Adjacency matrix must be square, got shape {array.shape}."
            )
        if np.isnan(array).any():
            raise InvalidArgumentError("Adjacency matrix must not contain NaN.")

        off_diagonal = ~np.eye(array.shape[0], dtype=bool)
        if (array[off_diagonal] < 0).any():
            raise InvalidArgumentError("Edge weights must be non-negative.")
        if not np.array_equal(array, array.T):
            raise InvalidArgumentError("Adjacency matrix must be symmetric.")

        array.setflags(write=False)
        self.matrix: np.ndarray = array
        self._size: int = array.shape[0]
        self._edge_count: int = int(
            np.count_nonzero(np.triu(array != UNREACHABLE, k=1))
        )

    @classmethod
    def empty(cls) -> MatrixGraph:
        """Return a graph with no vertices."""
        return cls(np.empty((0, 0), dtype=float))

    def __repr__(self) -> str:
        return f"MatrixGraph(vertices={self._size}, edges={self._edge_count})"

    def _contains(self, vertex: Any) -> bool:
        return (
            isinstance(vertex, Integral)
            and not isinstance(vertex, bool)
            and 0 <= vertex < self._size
        )

    def has_edge(self, u: int, v: int) -> bool:
        if u == v or not (self._contains(u) and self._contains(v)):
            return False
        return bool(self.matrix[u, v] != UNREACHABLE)

    def distance(self, u: int, v: int) -> float:
        """Return the weight of edge ``{u, v}``.

        Raises:
            EdgeNotFoundError: For diagonal, out-of-range or unreachable cells.
        """
        if not self.has_edge(u, v):
            raise EdgeNotFoundError(u, v)
        return float(self.matrix[u, v])

    def adjacent_vertices(self, u: int) -> List[int]:
        """Return the neighbours of ``u`` in ascending order."""
        if not self._contains(u):
            return []
        reachable = np.flatnonzero(self.matrix[u] != UNREACHABLE)
        return [int(v) for v in reachable if v != u]

    def vertices_count(self) -> int:
        return self._size

    def edges_count(self) -> int:
        return self._edge_count
