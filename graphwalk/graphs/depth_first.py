"""
Depth-first traversals.

Three variants with deliberately different guarantees:

- DepthFirstPaths walks depth-first with an explicit stack of
  (vertex, level) entries but re-opens a vertex whenever a strictly shorter
  route to it turns up, so its distances are true shortest edge counts.
- DepthFirstPathsRecursive is classic recursive DFS. It never revisits a
  vertex, so its paths are valid but not necessarily shortest.
- DepthFirstSearchRecursive is classic recursive DFS that only marks.

The recursive variants keep one frame per open vertex on an explicit stack
(vertex plus the iterator over its remaining neighbours). The visit order is
identical to a recursive implementation, but long chains do not run into the
interpreter's recursion limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.3 (DFS).
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.1.
"""

from typing import Callable, Iterator, List, Optional, Tuple

import numpy as np

from graphwalk.logging import get_logger

from .core import Graph
from .query import PathQuery, VertexQuery

logger = get_logger(__name__)


def _descend(
    graph: Graph,
    s: int,
    visited: np.ndarray,
    on_tree_edge: Optional[Callable[[int, int], None]] = None,
) -> None:
    """
    Recursive-order depth-first descent from s, marking into visited.

    on_tree_edge(curr, w) is called right before descending from curr into a
    newly discovered w.
    """
    visited[s] = True
    stack: List[Tuple[int, Iterator[int]]] = [(s, graph.adjacent(s))]

    while stack:
        curr, neighbours = stack[-1]
        for w in neighbours:
            if not visited[w]:
                visited[w] = True
                if on_tree_edge is not None:
                    on_tree_edge(curr, w)
                stack.append((w, graph.adjacent(w)))
                break
        else:
            # curr has no unvisited neighbours left: return from its frame
            stack.pop()


class DepthFirstPaths(PathQuery):
    """
    Shortest paths from a source found by stack-driven depth-first search.

    Pops (curr, level) entries from a stack. A neighbour w is (re)opened if it
    is unvisited or if its recorded distance exceeds level + 1; it then gets
    curr as predecessor, distance dist_to[curr] + 1, and (w, level + 1) is
    pushed. A vertex may therefore be revised and pushed several times, and
    edge_to/dist_to are only final once the stack has drained. Every revision
    strictly lowers a distance that is bounded below by the true distance, so
    the loop terminates with shortest distances.

    Complexity: O(V + E) without revisions; each revision re-scans the
    revised vertex's neighbours. O(V) extra space.

    Example:
        >>> G = Graph(6, [(0, 2), (0, 1), (0, 5), (1, 2),
        ...               (2, 3), (2, 4), (3, 5), (3, 4)])
        >>> dfp = DepthFirstPaths(G, 0)
        >>> [dfp.dist_to(v) for v in range(G.V)]
        [0, 1, 1, 2, 2, 1]
        >>> dfp.path_to(4)
        [0, 2, 4]
    """

    def __init__(self, graph: Graph, s: int):
        """
        Compute shortest paths from s to every vertex.

        Args:
            graph: Graph to traverse.
            s: Source vertex.

        Raises:
            IndexError: Unless 0 <= s < V.
        """
        super().__init__(graph, (s,))
        self.source = s
        visited = self._visited
        edge_to = self._edge_to
        dist_to = self._dist_to

        dist_to[s] = 0
        visited[s] = True
        stack: List[Tuple[int, int]] = [(s, 0)]
        revisions = 0

        while stack:
            curr, level = stack.pop()
            for w in graph.adjacent(curr):
                if not visited[w] or dist_to[w] > level + 1:
                    if visited[w]:
                        revisions += 1
                        logger.debug(
                            "revise %d via %d: %d -> %d", w, curr, dist_to[w], level + 1
                        )
                    visited[w] = True
                    edge_to[w] = curr
                    dist_to[w] = dist_to[curr] + 1
                    stack.append((w, level + 1))

        logger.debug(
            "dfs paths from %d reached %d of %d vertices with %d revisions",
            s,
            self.count(),
            graph.V,
            revisions,
        )
        self._finish()


class DepthFirstPathsRecursive(PathQuery):
    """
    Paths from a source found by plain recursive depth-first search.

    Every vertex is entered once, the first time it is seen. dist_to(v) is
    the depth at which v was entered, which can be larger than the shortest
    distance; path_to(v) is a simple path but not necessarily a shortest one.

    Complexity: O(V + E) time, O(V) extra space.

    Example:
        >>> G = Graph(6, [(0, 2), (0, 1), (0, 5), (1, 2),
        ...               (2, 3), (2, 4), (3, 5), (3, 4)])
        >>> dfp = DepthFirstPathsRecursive(G, 0)
        >>> dfp.path_to(1)
        [0, 2, 1]
        >>> dfp.dist_to(4)
        3
    """

    def __init__(self, graph: Graph, s: int):
        """
        Compute a path between s and every other vertex.

        Args:
            graph: Graph to traverse.
            s: Source vertex.

        Raises:
            IndexError: Unless 0 <= s < V.
        """
        super().__init__(graph, (s,))
        self.source = s
        self._dist_to[s] = 0
        _descend(graph, s, self._visited, self._tree_edge)
        self._finish()

    def _tree_edge(self, curr: int, w: int) -> None:
        self._edge_to[w] = curr
        self._dist_to[w] = self._dist_to[curr] + 1


class DepthFirstSearchRecursive(VertexQuery):
    """
    Vertices connected to a source, found by recursive depth-first search.

    Complexity: O(V + E) time, O(V) extra space.

    Example:
        >>> G = Graph(5, [(0, 1), (1, 2), (3, 4)])
        >>> dfs = DepthFirstSearchRecursive(G, 0)
        >>> dfs.reachable()
        [0, 1, 2]
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
        _descend(graph, s, self._visited)
        self._finish()

    def marked(self, v: int) -> bool:
        """
        Is vertex v connected to the source?

        Raises:
            IndexError: Unless 0 <= v < V.
        """
        return self.visited(v)
