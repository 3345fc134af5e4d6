"""Undirected weighted graph with strict edge rules.

`UndirectedGraph` extends `networkx.Graph` so it can be handed to networkx
tooling, but tightens the contract used by the shortest-path solver:

  - Vertices are non-negative integers.
  - Every edge carries a finite, non-negative ``weight``.
  - An unordered vertex pair holds at most one edge; adding it again raises
    `EdgeExistsError` instead of overwriting the weight.
  - `distance()` on a missing edge raises `EdgeNotFoundError`.
  - Size queries are constant time.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, Iterable, Iterator, List, Tuple, Union

import networkx as nx

from spgraph.errors import EdgeExistsError, EdgeNotFoundError, InvalidArgumentError

Vertex = int
Weight = Union[int, float]
WeightedEdge = Tuple[Vertex, Vertex, Weight]

WEIGHT_ATTR = "weight"


def check_vertex(vertex: Any) -> None:
    """Raise `InvalidArgumentError` unless ``vertex`` is a non-negative integer."""
    if isinstance(vertex, bool) or not isinstance(vertex, Integral):
        raise InvalidArgumentError(f"Vertex must be an integer, got {vertex!r}.")
    if vertex < 0:
        raise InvalidArgumentError(f"Vertex must be non-negative, got {vertex}.")


def check_weight(weight: Any) -> None:
    """Raise `InvalidArgumentError` unless ``weight`` is finite and non-negative."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidArgumentError(f"Edge weight must be a number, got {weight!r}.")
    if not math.isfinite(weight) or weight < 0:
        raise InvalidArgumentError(
            f"Edge weight must be finite and non-negative, got {weight}."
        )


class UndirectedGraph(nx.Graph):
    """An undirected graph keyed by integer vertices with one weight per pair.

    Inherits from:
        networkx.Graph
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize an UndirectedGraph.

        Args:
            *args: Positional arguments forwarded to the Graph constructor.
            **kwargs: Keyword arguments forwarded to the Graph constructor.

        Attributes:
            _edge_count: Number of stored edges, kept in sync on every mutation.
        """
        self._edge_count: int = 0
        super().__init__(*args, **kwargs)

    def copy(self, as_view: bool = False) -> UndirectedGraph:  # type: ignore[override]
        """Return an independent copy with the same strict behaviour.

        Args:
            as_view: If True, return a read-only networkx view instead.
        """
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        graph = self.__class__()
        graph.graph.update(self.graph)
        graph.add_nodes_from(self.nodes)
        for u, v, weight in self.iter_edges():
            graph.add_edge(u, v, weight)
        return graph

    #
    # Vertex management
    #
    def add_node(self, node_for_adding: Vertex, **attr: Any) -> None:
        """Add an isolated vertex (no-op if it already exists).

        Raises:
            InvalidArgumentError: If the vertex id is not a non-negative integer.
        """
        check_vertex(node_for_adding)
        super().add_node(node_for_adding, **attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        for item in nodes_for_adding:
            if isinstance(item, tuple):
                node, node_attr = item
                self.add_node(node, **{**attr, **node_attr})
            else:
                self.add_node(item, **attr)

    def remove_node(self, n: Vertex) -> None:
        super().remove_node(n)
        self._edge_count = super().number_of_edges()

    def remove_nodes_from(self, nodes: Iterable[Vertex]) -> None:
        super().remove_nodes_from(nodes)
        self._edge_count = super().number_of_edges()

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: Vertex,
        v_for_edge: Vertex,
        weight: Weight,
        **attr: Any,
    ) -> None:
        """Add the undirected edge ``{u_for_edge, v_for_edge}``.

        Both vertices are registered if new. All arguments are validated before
        the graph is touched, so a failed call leaves it unchanged.

        Args:
            u_for_edge: One endpoint.
            v_for_edge: The other endpoint.
            weight: Finite, non-negative edge weight.
            **attr: Extra edge attributes stored alongside the weight.

        Raises:
            InvalidArgumentError: If a vertex id or the weight is invalid.
            EdgeExistsError: If the unordered pair already has an edge.
        """
        check_vertex(u_for_edge)
        check_vertex(v_for_edge)
        check_weight(weight)
        if self.has_edge(u_for_edge, v_for_edge):
            raise EdgeExistsError(u_for_edge, v_for_edge)

        super().add_edge(u_for_edge, v_for_edge, **{**attr, WEIGHT_ATTR: weight})
        self._edge_count += 1

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        """Add edges given as ``(u, v, weight)`` or ``(u, v, {"weight": w, ...})``."""
        for edge in ebunch_to_add:
            if len(edge) != 3:
                raise InvalidArgumentError(
                    f"Edge must be (u, v, weight) or (u, v, attrs), got {edge!r}."
                )
            u, v, data = edge
            if isinstance(data, dict):
                data = {**attr, **data}
                if WEIGHT_ATTR not in data:
                    raise InvalidArgumentError(f"Edge ({u}, {v}) has no weight.")
                weight = data.pop(WEIGHT_ATTR)
                self.add_edge(u, v, weight, **data)
            else:
                self.add_edge(u, v, data, **attr)

    def add_weighted_edges_from(
        self, ebunch_to_add: Iterable[WeightedEdge], weight: str = WEIGHT_ATTR, **attr: Any
    ) -> None:
        if weight != WEIGHT_ATTR:
            raise InvalidArgumentError(
                f"Edge weights are stored under '{WEIGHT_ATTR}', not '{weight}'."
            )
        self.add_edges_from(ebunch_to_add, **attr)

    def add_edges_from_weighted(self, edges: Iterable[WeightedEdge]) -> None:
        """Add ``(u, v, weight)`` triples one at a time.

        Stops at the first failing triple; edges added before it are kept.
        """
        for u, v, weight in edges:
            self.add_edge(u, v, weight)

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        if not self.has_edge(u, v):
            raise EdgeNotFoundError(u, v)
        super().remove_edge(u, v)
        self._edge_count -= 1

    def remove_edges_from(self, ebunch: Iterable[Any]) -> None:
        super().remove_edges_from(ebunch)
        self._edge_count = super().number_of_edges()

    def clear(self) -> None:
        super().clear()
        self._edge_count = 0

    def clear_edges(self) -> None:
        super().clear_edges()
        self._edge_count = 0

    #
    # Queries used by the solver
    #
    def distance(self, u: Vertex, v: Vertex) -> Weight:
        """Return the weight of edge ``{u, v}``.

        Raises:
            EdgeNotFoundError: If the pair has no edge.
        """
        try:
            return self._adj[u][v][WEIGHT_ATTR]
        except KeyError:
            raise EdgeNotFoundError(u, v) from None

    def adjacent_vertices(self, u: Vertex) -> List[Vertex]:
        """Return the neighbours of ``u`` in ascending order.

        Unknown vertices have no neighbours.
        """
        neighbors = self._adj.get(u)
        if neighbors is None:
            return []
        return sorted(neighbors)

    def vertices_count(self) -> int:
        return len(self._node)

    def edges_count(self) -> int:
        return self._edge_count

    def number_of_edges(self, u: Any = None, v: Any = None) -> int:
        if u is None:
            return self._edge_count
        return super().number_of_edges(u, v)

    def iter_edges(self) -> Iterator[WeightedEdge]:
        """Yield every edge once as ``(u, v, weight)`` with ``u <= v``, sorted."""
        edges = (
            (min(u, v), max(u, v), weight)
            for u, v, weight in self.edges(data=WEIGHT_ATTR)
        )
        yield from sorted(edges)
