"""
Shared state and read-only accessors for traversal queries.

A query runs its traversal once, inside ``__init__``, and afterwards only
answers questions about the result. The per-vertex state lives in numpy
arrays preallocated with one slot per vertex.
"""

import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from graphwalk.diagnostics import assert_traversal_consistent, is_debug_enabled

from .core import Graph
from .utils import reconstruct_path, validate_vertex


class VertexQuery:
    """
    Base for queries that record which vertices a traversal reached.

    Attributes:
        graph: The traversed graph (borrowed, never modified).
        sources: Tuple of source vertices.
    """

    def __init__(self, graph: Graph, sources: Iterable[int]):
        self.graph = graph
        sources = tuple(sources)
        for s in sources:
            validate_vertex(s, graph.V)
        self.sources: Tuple[int, ...] = tuple(int(s) for s in sources)
        self._visited = np.zeros(graph.V, dtype=bool)

    def _validate_vertex(self, v: int) -> None:
        validate_vertex(v, len(self._visited))

    def _finish(self) -> None:
        self._visited.setflags(write=False)
        if is_debug_enabled():
            assert_traversal_consistent(self)

    def visited(self, v: int) -> bool:
        """
        Is vertex v connected to the source?

        Raises:
            IndexError: Unless 0 <= v < V.
        """
        self._validate_vertex(v)
        return bool(self._visited[v])

    def count(self) -> int:
        """Number of vertices reached, sources included."""
        return int(np.count_nonzero(self._visited))

    def reachable(self) -> List[int]:
        """Reached vertices in ascending order."""
        return [int(v) for v in np.flatnonzero(self._visited)]


class PathQuery(VertexQuery):
    """
    Base for queries that also record predecessors and distances.

    ``edge_to[v]`` is the previous vertex on the recorded path to v (-1 while
    unset) and ``dist_to[v]`` its edge count (inf while unreached).
    """

    def __init__(self, graph: Graph, sources: Iterable[int]):
        super().__init__(graph, sources)
        self._edge_to = np.full(graph.V, -1, dtype=np.int64)
        self._dist_to = np.full(graph.V, np.inf)

    def _finish(self) -> None:
        self._edge_to.setflags(write=False)
        self._dist_to.setflags(write=False)
        super()._finish()

    def has_path_to(self, v: int) -> bool:
        """
        Is there a path between the source and vertex v?

        Raises:
            IndexError: Unless 0 <= v < V.
        """
        return self.visited(v)

    def dist_to(self, v: int) -> float:
        """
        Number of edges on the recorded path from the source to v.

        Returns:
            The edge count as an int, or math.inf if v is unreached.

        Raises:
            IndexError: Unless 0 <= v < V.
        """
        self._validate_vertex(v)
        d = self._dist_to[v]
        return int(d) if np.isfinite(d) else math.inf

    def path_to(self, v: int) -> Optional[List[int]]:
        """
        Recorded path from the source to v.

        Returns:
            List of vertices from the source to v (inclusive), or None if
            there is no such path.

        Raises:
            IndexError: Unless 0 <= v < V.
        """
        self._validate_vertex(v)
        if not self._visited[v]:
            return None
        return reconstruct_path(self._edge_to, self._dist_to, v)
