"""Invariant checks for graphs and finished traversal queries."""

from __future__ import annotations

import math
from collections import Counter
from typing import TYPE_CHECKING, AbstractSet, Any, Mapping, Optional, Sequence

if TYPE_CHECKING:
    from graphwalk.graphs.core import Graph


def assert_symmetric_adjacency(graph: Graph) -> None:
    """
    Assert that w appears in adj(v) exactly as often as v appears in adj(w).

    Parameters
    ----------
    graph:
        Graph to check.

    Raises
    ------
    ValueError
        If some pair of vertices has asymmetric adjacency entries.
    """
    counts = [Counter(graph.adjacent(v)) for v in range(graph.V)]
    for v in range(graph.V):
        for w, n in counts[v].items():
            if counts[w][v] != n:
                raise ValueError(
                    f"Adjacency is not symmetric: {w} appears {n} times in adj({v}) "
                    f"but {v} appears {counts[w][v]} times in adj({w})."
                )


def assert_valid_path(
    graph: Graph,
    path: Sequence[int],
    source: Optional[int] = None,
    target: Optional[int] = None,
) -> None:
    """
    Assert that consecutive vertices of path are joined by edges of graph.

    Parameters
    ----------
    graph:
        Graph the path should live in.
    path:
        Vertex sequence, first element is the start.
    source:
        If given, the required first vertex.
    target:
        If given, the required last vertex.

    Raises
    ------
    ValueError
        If the path is empty, has the wrong endpoints or uses a missing edge.
    """
    neighbours = {v: set(graph.adjacent(v)) for v in set(path[:-1])}
    _check_path(neighbours, path, source, target)


def _check_path(
    neighbours: Mapping[int, AbstractSet[int]],
    path: Sequence[int],
    source: Optional[int],
    target: Optional[int],
) -> None:
    if len(path) == 0:
        raise ValueError("Path is empty.")
    if source is not None and path[0] != source:
        raise ValueError(f"Path starts at {path[0]}, expected {source}.")
    if target is not None and path[-1] != target:
        raise ValueError(f"Path ends at {path[-1]}, expected {target}.")

    for v, w in zip(path, path[1:]):
        if w not in neighbours[v]:
            raise ValueError(f"Path uses {v}-{w}, which is not an edge.")


def assert_traversal_consistent(query: Any) -> None:
    """
    Assert that a finished traversal query is internally consistent.

    Checks, through the public query API only:

    - every source is visited;
    - the visited set is closed under adjacency (nothing reachable was
      missed);
    - for path-tracking queries, visited(v) agrees with a finite dist_to(v),
      and path_to(v) is a valid path whose edge count equals dist_to(v).

    Parameters
    ----------
    query:
        A constructed traversal query exposing ``graph``, ``sources`` and
        ``visited``; path-tracking queries also expose ``dist_to`` and
        ``path_to``.

    Raises
    ------
    ValueError
        On the first violated invariant.
    """
    graph = query.graph
    tracks_paths = hasattr(query, "path_to")
    neighbours = [set(graph.adjacent(v)) for v in range(graph.V)]

    for s in query.sources:
        if not query.visited(s):
            raise ValueError(f"Source {s} is not marked visited.")
        if tracks_paths and query.dist_to(s) != 0:
            raise ValueError(f"Source {s} has distance {query.dist_to(s)}, expected 0.")

    for v in range(graph.V):
        if not query.visited(v):
            if tracks_paths and query.dist_to(v) != math.inf:
                raise ValueError(f"Unvisited vertex {v} has finite distance.")
            continue

        for w in neighbours[v]:
            if not query.visited(w):
                raise ValueError(f"Vertex {w} is adjacent to visited {v} but unvisited.")

        if tracks_paths:
            path = query.path_to(v)
            if path is None:
                raise ValueError(f"Visited vertex {v} has no path.")
            _check_path(neighbours, path, None, v)
            if path[0] not in query.sources:
                raise ValueError(f"Path to {v} starts at non-source {path[0]}.")
            if len(path) - 1 != query.dist_to(v):
                raise ValueError(
                    f"Path to {v} has {len(path) - 1} edges but dist_to is {query.dist_to(v)}."
                )
