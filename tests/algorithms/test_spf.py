import logging

import pytest

from spgraph.algorithms.base import INF_DISTANCE
from spgraph.algorithms.spf import (
    ShortestPath,
    TraversalRecord,
    find_shortest_path,
    path_distance,
    shortest_path_tree,
)
from spgraph.config import SOLVER_CONFIG, SolverConfig
from spgraph.errors import EdgeNotFoundError, PathValidationError
from spgraph.graph.convert import to_matrix_graph
from spgraph.graph.matrix import UNREACHABLE, MatrixGraph
from spgraph.graph.undirected import UndirectedGraph


class TestFindShortestPath:
    def test_empty_graph(self, empty_graph):
        assert find_shortest_path(empty_graph, 0, 0) == ([], 0)
        assert find_shortest_path(empty_graph, 0, 1) == ([], 0)
        assert find_shortest_path(MatrixGraph.empty(), 3, 3) == ([], 0)

    def test_one_edge(self, one_edge):
        assert find_shortest_path(one_edge, 0, 1) == ([0, 1], 1)
        assert find_shortest_path(one_edge, 1, 0) == ([1, 0], 1)

    def test_six_node(self, six_node):
        result = find_shortest_path(six_node, 0, 5)
        assert result == ([0, 1, 4, 2, 3, 5], 8)
        assert result.path == [0, 1, 4, 2, 3, 5]
        assert result.distance == 8
        assert result.found

    def test_six_node_reverse(self, six_node):
        assert find_shortest_path(six_node, 5, 0) == ([5, 3, 2, 4, 1, 0], 8)

    def test_source_equals_target(self, six_node):
        for v in range(6):
            assert find_shortest_path(six_node, v, v) == ([v], 0)

    def test_source_equals_target_absent_vertex(self, six_node):
        assert find_shortest_path(six_node, 42, 42) == ([42], 0)

    def test_unreachable(self, two_components):
        result = find_shortest_path(two_components, 0, 8)
        assert result == ([], 0)
        assert not result.found
        assert find_shortest_path(two_components, 8, 2) == ([], 0)

    def test_absent_vertices_are_unreachable(self, six_node):
        assert find_shortest_path(six_node, 0, 99) == ([], 0)
        assert find_shortest_path(six_node, 99, 0) == ([], 0)

    def test_detour_beats_direct_edge(self, triangle_with_cycle):
        assert find_shortest_path(triangle_with_cycle, 0, 2) == ([0, 1, 2], 2)
        assert find_shortest_path(triangle_with_cycle, 3, 2) == ([3, 0, 1, 2], 3)

    def test_equal_cost_first_found_wins(self, square_tie):
        # Neighbours are relaxed in ascending order, so the route through 1
        # is found first and the equal-cost route through 2 never replaces it.
        assert find_shortest_path(square_tie, 0, 3) == ([0, 1, 3], 2)
        assert find_shortest_path(square_tie, 3, 0) == ([3, 1, 0], 2)

    def test_zero_weight_edges(self):
        g = UndirectedGraph()
        g.add_edge(0, 1, 0)
        g.add_edge(1, 2, 0)
        g.add_edge(0, 2, 1)
        assert find_shortest_path(g, 0, 2) == ([0, 1, 2], 0)

    def test_self_loop_ignored(self):
        g = UndirectedGraph()
        g.add_edge(0, 0, 1)
        g.add_edge(0, 1, 3)
        assert find_shortest_path(g, 0, 1) == ([0, 1], 3)

    def test_float_weights(self):
        g = UndirectedGraph()
        g.add_edge(0, 1, 0.5)
        g.add_edge(1, 2, 0.25)
        g.add_edge(0, 2, 1.0)
        assert find_shortest_path(g, 0, 2) == ([0, 1, 2], 0.75)

    def test_result_is_named_tuple(self, one_edge):
        path, distance = find_shortest_path(one_edge, 0, 1)
        assert path == [0, 1]
        assert distance == 1
        assert isinstance(find_shortest_path(one_edge, 0, 1), ShortestPath)

    def test_results_do_not_share_state(self, two_components):
        first = find_shortest_path(two_components, 0, 8)
        first.path.append(123)
        assert find_shortest_path(two_components, 0, 8) == ([], 0)

    def test_graph_not_mutated(self, six_node):
        before = list(six_node.iter_edges())
        find_shortest_path(six_node, 0, 5)
        assert list(six_node.iter_edges()) == before

    def test_path_edges_match_distance(self, six_node):
        result = find_shortest_path(six_node, 0, 5)
        assert result.path[0] == 0 and result.path[-1] == 5
        for u, v in zip(result.path, result.path[1:]):
            assert six_node.has_edge(u, v)
        assert path_distance(six_node, result.path) == result.distance


class TestMatrixGraph:
    def test_six_node_matrix_matches_map(self, six_node):
        m = to_matrix_graph(six_node)
        assert find_shortest_path(m, 0, 5) == ([0, 1, 4, 2, 3, 5], 8)
        for s in range(6):
            for t in range(6):
                assert find_shortest_path(m, s, t) == find_shortest_path(six_node, s, t)

    def test_unreachable_in_matrix(self):
        m = MatrixGraph(
            [
                [0, 1, UNREACHABLE],
                [1, 0, UNREACHABLE],
                [UNREACHABLE, UNREACHABLE, 0],
            ]
        )
        assert find_shortest_path(m, 0, 2) == ([], 0)
        assert find_shortest_path(m, 0, 1) == ([0, 1], 1)

    def test_single_vertex_matrix(self):
        m = MatrixGraph([[0]])
        assert find_shortest_path(m, 0, 0) == ([0], 0)


class TestStopAtTarget:
    def test_same_results_as_full_drain(self, six_node, triangle_with_cycle, square_tie):
        early = SolverConfig(stop_at_target=True)
        for graph in (six_node, triangle_with_cycle, square_tie):
            for s in graph.nodes:
                for t in graph.nodes:
                    assert find_shortest_path(graph, s, t, early) == find_shortest_path(
                        graph, s, t
                    )

    def test_unreachable_with_early_exit(self, two_components):
        early = SolverConfig(stop_at_target=True)
        assert find_shortest_path(two_components, 0, 7, early) == ([], 0)


class TestShortestPathTree:
    def test_distances(self, six_node):
        tree = shortest_path_tree(six_node, 0)
        assert {v: tree.distance_to(v) for v in range(6)} == {
            0: 0,
            1: 2,
            2: 6,
            3: 7,
            4: 5,
            5: 8,
        }
        assert tree.reachable() == [0, 1, 2, 3, 4, 5]

    def test_records_form_tree_to_source(self, six_node):
        tree = shortest_path_tree(six_node, 0)
        assert tree.records[0] == TraversalRecord(0, 0, None)
        assert tree.records[3] == TraversalRecord(3, 7, 2)
        for vertex in tree.reachable():
            seen = set()
            record = tree.records[vertex]
            while record.predecessor is not None:
                assert record.vertex not in seen
                seen.add(record.vertex)
                record = tree.records[record.predecessor]
            assert record.vertex == 0

    def test_path_to_matches_find_shortest_path(self, six_node):
        tree = shortest_path_tree(six_node, 0)
        for t in range(6):
            assert tree.path_to(t) == find_shortest_path(six_node, 0, t)

    def test_unreachable_vertices(self, two_components):
        tree = shortest_path_tree(two_components, 0)
        assert tree.reachable() == [0, 1, 2]
        assert tree.distance_to(7) == INF_DISTANCE
        assert tree.path_to(7) == ([], 0)

    def test_empty_graph(self, empty_graph):
        tree = shortest_path_tree(empty_graph, 0)
        assert tree.records == {}
        assert tree.path_to(0) == ([], 0)
        assert tree.reachable() == []


class TestPathDistance:
    def test_short_paths_cost_nothing(self, six_node):
        assert path_distance(six_node, []) == 0
        assert path_distance(six_node, [3]) == 0

    def test_sum(self, six_node):
        assert path_distance(six_node, [0, 3, 5]) == 10

    def test_missing_hop(self, six_node):
        with pytest.raises(EdgeNotFoundError):
            path_distance(six_node, [0, 5])


class _LyingGraph(UndirectedGraph):
    """Reports a different weight on the second lookup of an edge."""

    def __init__(self):
        super().__init__()
        self.lookups = 0

    def distance(self, u, v):
        self.lookups += 1
        weight = super().distance(u, v)
        return weight if self.lookups == 1 else weight + 100


class TestValidation:
    def test_default_config(self):
        assert SOLVER_CONFIG.stop_at_target is False
        assert SOLVER_CONFIG.validate_result is False

    def test_valid_result_passes(self, six_node):
        config = SolverConfig(validate_result=True)
        assert find_shortest_path(six_node, 0, 5, config) == ([0, 1, 4, 2, 3, 5], 8)
        shortest_path_tree(six_node, 0, config)

    def test_mismatch_is_reported(self):
        g = _LyingGraph()
        g.add_edge(0, 1, 1)
        with pytest.raises(PathValidationError):
            find_shortest_path(g, 0, 1, SolverConfig(validate_result=True))


def test_debug_logging(six_node, caplog):
    with caplog.at_level(logging.DEBUG, logger="spgraph"):
        find_shortest_path(six_node, 0, 5)
        find_shortest_path(six_node, 0, 99)
    messages = [r.getMessage() for r in caplog.records]
    assert any("SPF from 0" in m for m in messages)
    assert any("Shortest path 0 -> 5" in m for m in messages)
    assert any("No path from 0 to 99" in m for m in messages)
