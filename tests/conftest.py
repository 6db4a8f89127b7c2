"""Pytest configuration and shared fixtures for graphwalk tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graphs
- The small reference graphs used across the traversal tests
- A reference reachability/distance oracle independent of graphwalk
"""

import os
from collections import deque
from typing import Dict, List, Set

import numpy as np
import pytest

from graphwalk import Graph
from graphwalk.diagnostics import is_debug_enabled, set_debug_enabled

# Edge order chosen so that adj(0) == [2, 1, 5], adj(2) == [0, 1, 3, 4]
CG_EDGES = [(0, 2), (0, 1), (0, 5), (1, 2), (2, 3), (2, 4), (3, 5), (3, 4)]

TRIANGLES_EDGES = [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Make sure no test leaks a debug-mode change into the next one."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def cg_graph() -> Graph:
    """Six-vertex connected graph with eight edges."""
    return Graph(6, CG_EDGES)


@pytest.fixture
def triangles_graph() -> Graph:
    """Two disjoint triangles {0, 1, 2} and {3, 4, 5}."""
    return Graph(6, TRIANGLES_EDGES)


def random_graph(rng: np.random.Generator, V: int, E: int) -> Graph:
    """Random multigraph with V vertices and E edges (self-loops allowed)."""
    ends = rng.integers(0, V, size=(E, 2))
    return Graph(V, [(int(v), int(w)) for v, w in ends])


def reference_distances(G: Graph, s: int) -> Dict[int, int]:
    """Shortest edge counts from s, computed from G.edges() only."""
    neighbours: Dict[int, Set[int]] = {v: set() for v in range(G.V)}
    for v, w in G.edges():
        neighbours[v].add(w)
        neighbours[w].add(v)

    dist = {s: 0}
    queue = deque([s])
    while queue:
        u = queue.popleft()
        for x in sorted(neighbours[u]):
            if x not in dist:
                dist[x] = dist[u] + 1
                queue.append(x)
    return dist


def is_walk(G: Graph, path: List[int]) -> bool:
    """True if consecutive vertices of path are adjacent in G."""
    return all(w in set(G.adjacent(v)) for v, w in zip(path, path[1:]))
