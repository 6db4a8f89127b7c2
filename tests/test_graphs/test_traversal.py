"""Tests for breadth-first traversals."""

import logging
import math
from io import StringIO

import numpy as np
import pytest

from conftest import random_graph, reference_distances
from graphwalk.graphs import BreadthFirstPaths, BreadthFirstSearch, Graph
from graphwalk.logging import configure_logging


class TestBreadthFirstSearch:
    """Tests for reachability-only BFS."""

    def test_bfs_connected(self, cg_graph):
        """Test BFS on a connected graph."""
        bfs = BreadthFirstSearch(cg_graph, 0)
        assert all(bfs.visited(v) for v in range(cg_graph.V))
        assert bfs.count() == 6

    def test_bfs_discovery_order(self, cg_graph):
        """Test that vertices are discovered level by level in adjacency order."""
        bfs = BreadthFirstSearch(cg_graph, 0)
        assert bfs.order() == (0, 2, 1, 5, 3, 4)

    def test_bfs_disjoint_triangles(self, triangles_graph):
        """Test BFS does not cross into another component."""
        bfs = BreadthFirstSearch(triangles_graph, 0)
        assert bfs.reachable() == [0, 1, 2]
        for v in (3, 4, 5):
            assert not bfs.visited(v)

        bfs = BreadthFirstSearch(triangles_graph, 4)
        assert bfs.reachable() == [3, 4, 5]

    def test_bfs_isolated_source(self):
        """Test BFS from a vertex without edges."""
        G = Graph(3, [(1, 2)])
        bfs = BreadthFirstSearch(G, 0)
        assert bfs.reachable() == [0]
        assert bfs.order() == (0,)

    def test_bfs_self_loop_and_parallel_edges(self):
        """Test that self-loops and parallel edges do not duplicate discoveries."""
        G = Graph(3, [(0, 0), (0, 1), (0, 1), (1, 2)])
        bfs = BreadthFirstSearch(G, 0)
        assert bfs.order() == (0, 1, 2)

    def test_bfs_order_non_decreasing_distance(self, rng):
        """Test the level-order property on random graphs."""
        for _ in range(20):
            G = random_graph(rng, 30, 40)
            s = int(rng.integers(0, 30))
            dist = reference_distances(G, s)
            order = BreadthFirstSearch(G, s).order()

            assert set(order) == set(dist)
            levels = [dist[v] for v in order]
            assert levels == sorted(levels)

    def test_bfs_invalid_source(self, cg_graph):
        """Test that an out-of-range source raises IndexError."""
        with pytest.raises(IndexError):
            BreadthFirstSearch(cg_graph, 6)
        with pytest.raises(IndexError):
            BreadthFirstSearch(cg_graph, -1)

    @pytest.mark.parametrize("v", [-1, 6])
    def test_bfs_visited_out_of_range(self, cg_graph, v):
        """Test that visited validates its argument."""
        bfs = BreadthFirstSearch(cg_graph, 0)
        with pytest.raises(IndexError):
            bfs.visited(v)

    def test_bfs_logs_discoveries(self, cg_graph):
        """Test that each discovery is logged at DEBUG level."""
        stream = StringIO()
        configure_logging(level=logging.DEBUG, stream=stream)
        try:
            BreadthFirstSearch(cg_graph, 0)
        finally:
            configure_logging(level=logging.WARNING)

        output = stream.getvalue()
        assert "visit 2 from 0" in output
        assert "visit 3 from 2" in output
        assert "visit 0 from" not in output


class TestBreadthFirstPaths:
    """Tests for BFS with shortest paths."""

    def test_bfp_distances(self, cg_graph):
        """Test shortest distances on the six-vertex graph."""
        bfp = BreadthFirstPaths(cg_graph, 0)
        assert [bfp.dist_to(v) for v in range(6)] == [0, 1, 1, 2, 2, 1]

    def test_bfp_paths(self, cg_graph):
        """Test reconstructed paths."""
        bfp = BreadthFirstPaths(cg_graph, 0)
        assert bfp.path_to(0) == [0]
        assert bfp.path_to(1) == [0, 1]
        assert bfp.path_to(3) == [0, 2, 3]
        assert bfp.path_to(4) == [0, 2, 4]
        assert bfp.path_to(5) == [0, 5]

    def test_bfp_unreachable(self, triangles_graph):
        """Test the no-path outcome."""
        bfp = BreadthFirstPaths(triangles_graph, 0)
        for v in (3, 4, 5):
            assert not bfp.has_path_to(v)
            assert bfp.path_to(v) is None
            assert bfp.dist_to(v) == math.inf
        assert bfp.path_to(2) == [0, 2]

    def test_bfp_dist_is_int(self, cg_graph):
        """Test that finite distances come back as ints."""
        bfp = BreadthFirstPaths(cg_graph, 0)
        assert type(bfp.dist_to(3)) is int

    def test_bfp_multiple_sources(self, triangles_graph):
        """Test multi-source BFS attributes vertices to the nearest source."""
        bfp = BreadthFirstPaths(triangles_graph, [0, 3])
        assert bfp.sources == (0, 3)
        assert all(bfp.has_path_to(v) for v in range(6))
        assert bfp.dist_to(0) == 0
        assert bfp.dist_to(3) == 0
        assert bfp.path_to(4) == [3, 4]
        assert bfp.path_to(2) == [0, 2]

    def test_bfp_numpy_sources(self, triangles_graph):
        """Test that numpy source arrays come back as plain ints."""
        bfp = BreadthFirstPaths(triangles_graph, np.array([0, 3]))
        assert bfp.sources == (0, 3)
        assert all(type(s) is int for s in bfp.sources)
        assert bfp.path_to(4) == [3, 4]

    def test_bfp_multiple_sources_same_component(self):
        """Test that a path starts at whichever source is closer."""
        G = Graph(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
        bfp = BreadthFirstPaths(G, (0, 4))
        assert bfp.path_to(1) == [0, 1]
        assert bfp.path_to(3) == [4, 3]
        assert bfp.dist_to(2) == 2

    def test_bfp_duplicate_sources(self, cg_graph):
        """Test that repeating a source is harmless."""
        bfp = BreadthFirstPaths(cg_graph, [0, 0])
        assert bfp.dist_to(4) == 2

    def test_bfp_no_sources(self, cg_graph):
        """Test that an empty source list is rejected."""
        with pytest.raises(ValueError):
            BreadthFirstPaths(cg_graph, [])

    def test_bfp_invalid_source(self, cg_graph):
        """Test that every source is validated."""
        with pytest.raises(IndexError):
            BreadthFirstPaths(cg_graph, [0, 9])

    def test_bfp_matches_reference(self, rng):
        """Test distances against an independent BFS on random graphs."""
        for _ in range(20):
            G = random_graph(rng, 25, 30)
            s = int(rng.integers(0, 25))
            expected = reference_distances(G, s)
            bfp = BreadthFirstPaths(G, s)
            for v in range(G.V):
                assert bfp.dist_to(v) == expected.get(v, math.inf)
