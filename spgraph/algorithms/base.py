"""Base types shared by the spgraph algorithms."""

from __future__ import annotations

import math
from typing import List, Protocol, Union

#: Vertex identifier. Always a non-negative integer.
Vertex = int

#: Numeric path or edge length.
Distance = Union[int, float]

#: Distance of a vertex that has not been reached. Larger than any real path sum.
INF_DISTANCE: float = math.inf


class WeightedGraph(Protocol):
    """Read-only view of a graph as consumed by the shortest-path solver.

    Implemented by both `UndirectedGraph` and `MatrixGraph`.
    """

    def adjacent_vertices(self, u: Vertex) -> List[Vertex]: ...

    def distance(self, u: Vertex, v: Vertex) -> Distance: ...

    def vertices_count(self) -> int: ...
