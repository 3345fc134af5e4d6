"""Shared graph fixtures."""

from __future__ import annotations

import pytest

from spgraph.graph.undirected import UndirectedGraph


@pytest.fixture
def empty_graph():
    return UndirectedGraph()


@pytest.fixture
def one_edge():
    #     [1]
    #  0───────1
    g = UndirectedGraph()
    g.add_edge(0, 1, 1)
    return g


@pytest.fixture
def six_node():
    # Edges (weight in brackets):
    #   0-1 [2], 0-3 [9], 1-4 [3], 2-3 [1], 2-4 [1], 3-5 [1], 4-5 [9]
    #
    # Shortest 0 -> 5: 0-1-4-2-3-5, distance 8.
    g = UndirectedGraph()
    for u, v, w in [(0, 1, 2), (0, 3, 9), (1, 4, 3), (2, 3, 1), (2, 4, 1), (3, 5, 1), (4, 5, 9)]:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def square_tie():
    # Two equal-cost routes from 0 to 3:
    #       [1]        [1]
    #   ┌───────►1─────────┐
    #   │                  ▼
    #   0                  3
    #   │                  ▲
    #   │   [1]        [1] │
    #   └───────►2─────────┘
    g = UndirectedGraph()
    g.add_edge(0, 1, 1)
    g.add_edge(1, 3, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 3, 1)
    return g


@pytest.fixture
def two_components():
    # 0──1──2     7──8
    g = UndirectedGraph()
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, 5)
    g.add_edge(7, 8, 1)
    return g


@pytest.fixture
def triangle_with_cycle():
    # The direct edge 0-2 [10] loses to 0-1-2 [1+1]; vertex 3 hangs off the
    # source so the search also relaxes edges leading back to 0.
    g = UndirectedGraph()
    g.add_edge(0, 2, 10)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 3, 1)
    return g
