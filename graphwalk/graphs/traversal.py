"""
Breadth-first traversals.

BreadthFirstSearch answers reachability only. BreadthFirstPaths also keeps
predecessors and distances, which for breadth-first order are shortest
paths by edge count.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.1.
"""

import numbers
from collections import deque
from typing import Iterable, List, Tuple, Union

from graphwalk.logging import get_logger

from .core import Graph
from .query import PathQuery, VertexQuery

logger = get_logger(__name__)


class BreadthFirstSearch(VertexQuery):
    """
    Vertices connected to a source vertex, found in level order.

    The traversal runs once in the constructor. Each vertex is discovered at
    most once, and discovery order is non-decreasing in distance from the
    source.

    Complexity: O(V + E) time, O(V) extra space.

    Example:
        >>> G = Graph(4, [(0, 1), (1, 2)])
        >>> bfs = BreadthFirstSearch(G, 0)
        >>> bfs.visited(2), bfs.visited(3)
        (True, False)
        >>> bfs.order()
        (0, 1, 2)
    """

    def __init__(self, graph: Graph, s: int):
        """
        Compute the vertices connected to s.

        Args:
            graph: Graph to traverse.
            s: Source vertex.

        Raises:
            IndexError: Unless 0 <= s < V.
        """
        super().__init__(graph, (s,))
        self.source = s
        order: List[int] = [s]

        self._visited[s] = True
        queue = deque([s])
        while queue:
            curr = queue.popleft()
            for w in graph.adjacent(curr):
                if not self._visited[w]:
                    logger.debug("visit %d from %d", w, curr)
                    self._visited[w] = True
                    order.append(w)
                    queue.append(w)

        self._order: Tuple[int, ...] = tuple(order)
        logger.debug("bfs from %d reached %d of %d vertices", s, len(order), graph.V)
        self._finish()

    def order(self) -> Tuple[int, ...]:
        """Vertices in discovery order, source first."""
        return self._order


class BreadthFirstPaths(PathQuery):
    """
    Shortest paths (by edge count) from one or more sources.

    With several sources, every source starts at distance 0 and each vertex
    is attributed to its nearest source; path_to(v) then starts at that
    source.

    Complexity: O(V + E) time, O(V) extra space.

    Example:
        >>> G = Graph(6, [(0, 2), (0, 1), (0, 5), (1, 2),
        ...               (2, 3), (2, 4), (3, 5), (3, 4)])
        >>> bfp = BreadthFirstPaths(G, 0)
        >>> [bfp.dist_to(v) for v in range(G.V)]
        [0, 1, 1, 2, 2, 1]
        >>> bfp.path_to(4)
        [0, 2, 4]
    """

    def __init__(self, graph: Graph, sources: Union[int, Iterable[int]]):
        """
        Compute shortest paths from the given source(s) to every vertex.

        Args:
            graph: Graph to traverse.
            sources: A source vertex or an iterable of source vertices.

        Raises:
            IndexError: Unless every source satisfies 0 <= s < V.
            ValueError: If an empty iterable of sources is given.
        """
        if isinstance(sources, numbers.Integral):
            sources = (sources,)
        super().__init__(graph, sources)
        if not self.sources:
            raise ValueError("BreadthFirstPaths needs at least one source")

        queue = deque()
        for s in self.sources:
            if not self._visited[s]:
                self._visited[s] = True
                self._dist_to[s] = 0
                queue.append(s)

        while queue:
            curr = queue.popleft()
            for w in graph.adjacent(curr):
                if not self._visited[w]:
                    logger.debug("visit %d from %d", w, curr)
                    self._visited[w] = True
                    self._edge_to[w] = curr
                    self._dist_to[w] = self._dist_to[curr] + 1
                    queue.append(w)

        self._finish()
