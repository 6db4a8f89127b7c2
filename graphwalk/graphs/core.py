"""
Core graph data structure.

Provides an undirected, unweighted Graph over the integer vertices 0..V-1
with an adjacency-list representation. Neighbours are kept in insertion
order, so every traversal built on top of it is deterministic.
"""

import numbers
from typing import Iterable, Iterator, List, Optional, Tuple

from .utils import validate_vertex

Edge = Tuple[int, int]


class Graph:
    """
    Undirected graph on a fixed vertex set with adjacency lists.

    The vertex count is fixed at construction. Adding the edge (v, w) appends
    w to v's adjacency list and v to w's, so adjacency is always symmetric.
    Parallel edges and self-loops are allowed; a self-loop shows up twice in
    its vertex's own list.

    A graph is meant to be filled once and then only read while traversal
    queries hold on to it.

    Attributes:
        V: Number of vertices.
        E: Number of edges.

    Complexity:
        - add_edge: O(1) amortized
        - adjacent: O(1) to create, O(deg(v)) to exhaust
        - edges: O(V + E)

    Example:
        >>> G = Graph(3, [(0, 1), (1, 2)])
        >>> G.V, G.E
        (3, 2)
        >>> list(G.adjacent(1))
        [0, 2]
    """

    def __init__(self, V: int, edges: Optional[Iterable[Edge]] = None):
        """
        Initialize a graph with V vertices and optional initial edges.

        Args:
            V: Number of vertices. Vertices are addressed 0..V-1.
            edges: Optional iterable of (v, w) pairs, inserted in order.

        Raises:
            TypeError: If V is not an integer.
            ValueError: If V is negative.
        """
        if isinstance(V, bool) or not isinstance(V, numbers.Integral):
            raise TypeError(f"number of vertices must be an integer, got {type(V).__name__}")
        if V < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {V}")

        self._V = int(V)
        self._E = 0
        self._adj: List[List[int]] = [[] for _ in range(self._V)]

        if edges is not None:
            self.add_edges(edges)

    @classmethod
    def from_edges(cls, V: int, edges: Iterable[Edge]) -> "Graph":
        """Build a graph with V vertices from an edge list."""
        return cls(V, edges)

    @property
    def V(self) -> int:
        """Number of vertices."""
        return self._V

    @property
    def E(self) -> int:
        """Number of edges."""
        return self._E

    def add_edge(self, v: int, w: int) -> None:
        """
        Add the undirected edge v-w.

        Args:
            v: One endpoint.
            w: The other endpoint.

        Raises:
            IndexError: Unless both 0 <= v < V and 0 <= w < V.
        """
        validate_vertex(v, self._V)
        validate_vertex(w, self._V)
        self._E += 1
        self._adj[v].append(w)
        self._adj[w].append(v)

    def add_edges(self, edges: Iterable[Edge]) -> None:
        """
        Add every (v, w) pair of an edge list, in order.

        Args:
            edges: Iterable of (v, w) pairs.

        Raises:
            IndexError: If any endpoint is out of range. Edges before the
                offending one have already been added.
        """
        for v, w in edges:
            self.add_edge(v, w)

    def adjacent(self, v: int) -> Iterator[int]:
        """
        Return an iterator over the neighbours of v in insertion order.

        Each call returns a fresh iterator.

        Raises:
            IndexError: Unless 0 <= v < V.
        """
        validate_vertex(v, self._V)
        return iter(self._adj[v])

    def degree(self, v: int) -> int:
        """
        Return the number of adjacency entries of v.

        Raises:
            IndexError: Unless 0 <= v < V.
        """
        validate_vertex(v, self._V)
        return len(self._adj[v])

    def edges(self) -> Iterator[Edge]:
        """
        Yield every edge once as (v, w) with v <= w.

        Parallel edges are yielded once per insertion. A self-loop occupies
        two adjacency entries, so only every other entry is reported.
        """
        for v in range(self._V):
            self_loops = 0
            for w in self._adj[v]:
                if w > v:
                    yield (v, w)
                elif w == v:
                    if self_loops % 2 == 0:
                        yield (v, w)
                    self_loops += 1

    def __repr__(self) -> str:
        return f"Graph(V={self._V}, E={self._E})"

    def __str__(self) -> str:
        lines = [f"{self._V} vertices, {self._E} edges"]
        for v in range(self._V):
            neighbours = " ".join(str(w) for w in self._adj[v])
            lines.append(f"{v}: {neighbours}".rstrip())
        return "\n".join(lines) + "\n"
