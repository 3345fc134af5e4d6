"""Shortest-path-first (SPF) search over undirected weighted graphs.

Implements single-source Dijkstra with lazy decrease-key: a vertex is pushed
onto a binary heap every time its distance strictly improves, and entries whose
distance no longer matches the vertex's best known distance are skipped when
popped.

Notes:
    Per-query state lives in an arena mapping each visited vertex to a
    `TraversalRecord`. Predecessors are stored as vertex ids, so following them
    from any vertex walks a tree back to the source. A predecessor changes only
    on strict improvement; among equal-cost paths the first one found wins.
    Neighbours are visited in ascending vertex order, which makes that choice
    deterministic.

    By default the frontier is drained completely. With
    ``SolverConfig.stop_at_target`` the search stops as soon as the target is
    popped, at which point its distance is final.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from spgraph.algorithms.base import INF_DISTANCE, Distance, Vertex, WeightedGraph
from spgraph.config import SOLVER_CONFIG, SolverConfig
from spgraph.errors import PathValidationError
from spgraph.logging import get_logger

logger = get_logger(__name__)

Frontier = List[Tuple[Distance, Vertex]]


@dataclass
class TraversalRecord:
    """Best known route to one vertex during a single query.

    Attributes:
        vertex: The vertex this record describes.
        distance: Best known distance from the source.
        predecessor: Previous vertex on the best known path, or None for the
            source and for vertices not reached yet.
    """

    vertex: Vertex
    distance: Distance = INF_DISTANCE
    predecessor: Optional[Vertex] = None


class ShortestPath(NamedTuple):
    """Result of a shortest-path query.

    Compares equal to a plain ``(path, distance)`` tuple. An unreachable target
    is reported as ``([], 0)``.
    """

    path: List[Vertex]
    distance: Distance

    @property
    def found(self) -> bool:
        return bool(self.path)


def _no_path() -> ShortestPath:
    return ShortestPath([], 0)


@dataclass(frozen=True)
class ShortestPathTree:
    """All shortest paths from one source, as produced by a full traversal.

    Attributes:
        source: Source vertex of the traversal.
        records: Arena of traversal records keyed by vertex. Contains every
            vertex the search touched.
    """

    source: Vertex
    records: Dict[Vertex, TraversalRecord] = field(default_factory=dict)

    def distance_to(self, vertex: Vertex) -> Distance:
        """Return the shortest distance to ``vertex``, or `INF_DISTANCE`."""
        record = self.records.get(vertex)
        return INF_DISTANCE if record is None else record.distance

    def path_to(self, vertex: Vertex) -> ShortestPath:
        """Return the path to ``vertex`` using the same rules as `find_shortest_path`."""
        if not self.records:
            return _no_path()
        if vertex == self.source:
            return ShortestPath([vertex], 0)
        return _reconstruct(self.records, vertex)

    def reachable(self) -> List[Vertex]:
        """Return the vertices with a finite distance, in ascending order."""
        return sorted(
            v for v, record in self.records.items() if record.distance != INF_DISTANCE
        )


def _get_record(records: Dict[Vertex, TraversalRecord], vertex: Vertex) -> TraversalRecord:
    record = records.get(vertex)
    if record is None:
        record = records[vertex] = TraversalRecord(vertex)
    return record


def _relax(
    graph: WeightedGraph,
    records: Dict[Vertex, TraversalRecord],
    frontier: Frontier,
    vertex: Vertex,
) -> int:
    """Relax every edge of ``vertex``; return how many neighbours improved."""
    origin = records[vertex]
    improved = 0
    for neighbor in graph.adjacent_vertices(vertex):
        candidate = origin.distance + graph.distance(vertex, neighbor)
        record = _get_record(records, neighbor)
        # Strict comparison: equal-cost alternatives never replace the first path.
        if candidate < record.distance:
            record.distance = candidate
            record.predecessor = vertex
            heappush(frontier, (candidate, neighbor))
            improved += 1
    return improved


def _traverse(
    graph: WeightedGraph,
    source: Vertex,
    stop_at: Optional[Vertex] = None,
) -> Dict[Vertex, TraversalRecord]:
    """Run Dijkstra from ``source`` and return the record arena.

    Args:
        graph: Graph to search.
        source: Start vertex. Need not exist in the graph.
        stop_at: If given, stop once this vertex is popped with its final
            distance.
    """
    records: Dict[Vertex, TraversalRecord] = {}
    _get_record(records, source).distance = 0
    frontier: Frontier = []

    pushes = _relax(graph, records, frontier, source)
    pops = 0
    stale = 0

    while frontier:
        distance, vertex = heappop(frontier)
        if distance > records[vertex].distance:
            stale += 1
            continue
        pops += 1
        if stop_at is not None and vertex == stop_at:
            break
        pushes += _relax(graph, records, frontier, vertex)

    logger.debug(
        f"SPF from {source}: {pops} pops, {pushes} pushes, {stale} stale entries, "
        f"{len(records)} records"
    )
    return records


def _reconstruct(records: Dict[Vertex, TraversalRecord], target: Vertex) -> ShortestPath:
    target_record = records.get(target)
    if target_record is None or target_record.predecessor is None:
        return _no_path()

    path = [target]
    record = target_record
    while record.predecessor is not None:
        path.append(record.predecessor)
        record = records[record.predecessor]
    path.reverse()
    return ShortestPath(path, target_record.distance)


def path_distance(graph: WeightedGraph, path: Sequence[Vertex]) -> Distance:
    """Return the total weight of walking ``path`` through ``graph``.

    Args:
        graph: Graph providing edge weights.
        path: Vertex sequence. Paths with fewer than two vertices cost 0.

    Raises:
        EdgeNotFoundError: If two consecutive vertices are not adjacent.
    """
    total: Distance = 0
    for u, v in zip(path[:-1], path[1:]):
        total += graph.distance(u, v)
    return total


def _validate(
    graph: WeightedGraph, result: ShortestPath, source: Vertex, target: Vertex
) -> None:
    if not result.found:
        return
    if result.path[0] != source or result.path[-1] != target:
        raise PathValidationError(
            f"Path {result.path} does not run from {source} to {target}."
        )
    walked = path_distance(graph, result.path)
    if not math.isclose(walked, result.distance, rel_tol=1e-9, abs_tol=1e-12):
        raise PathValidationError(
            f"Path {result.path} weighs {walked}, but distance {result.distance} "
            "was reported."
        )


def shortest_path_tree(
    graph: WeightedGraph,
    source: Vertex,
    config: Optional[SolverConfig] = None,
) -> ShortestPathTree:
    """Compute shortest distances from ``source`` to every reachable vertex.

    Always drains the frontier; ``config.stop_at_target`` does not apply.

    Args:
        graph: Graph to search (`UndirectedGraph` or `MatrixGraph`).
        source: Source vertex.
        config: Solver configuration; defaults to the global `SOLVER_CONFIG`.

    Returns:
        ShortestPathTree: Records for every vertex touched by the search. Empty
        when the graph has no vertices.
    """
    config = config or SOLVER_CONFIG
    if graph.vertices_count() == 0:
        return ShortestPathTree(source)
    tree = ShortestPathTree(source, _traverse(graph, source))
    if config.validate_result:
        for vertex in tree.reachable():
            _validate(graph, tree.path_to(vertex), source, vertex)
    return tree


def find_shortest_path(
    graph: WeightedGraph,
    source: Vertex,
    target: Vertex,
    config: Optional[SolverConfig] = None,
) -> ShortestPath:
    """Find the minimum-weight path from ``source`` to ``target``.

    Args:
        graph: Graph to search (`UndirectedGraph` or `MatrixGraph`).
        source: Start vertex.
        target: End vertex.
        config: Solver configuration; defaults to the global `SOLVER_CONFIG`.

    Returns:
        ShortestPath: ``(path, distance)`` where ``path`` runs from ``source``
        to ``target``. An empty graph or an unreachable target gives
        ``([], 0)``; ``source == target`` gives ``([source], 0)`` without
        looking at the graph. Vertices missing from the graph are unreachable.

    Raises:
        PathValidationError: Only with ``config.validate_result``, if the
            path does not match the graph.
    """
    config = config or SOLVER_CONFIG

    if graph.vertices_count() == 0:
        return _no_path()
    if source == target:
        return ShortestPath([source], 0)

    records = _traverse(graph, source, target if config.stop_at_target else None)
    result = _reconstruct(records, target)

    if result.found:
        logger.debug(
            f"Shortest path {source} -> {target}: {result.path} (distance {result.distance})"
        )
    else:
        logger.debug(f"No path from {source} to {target}")

    if config.validate_result:
        _validate(graph, result, source, target)
    return result
