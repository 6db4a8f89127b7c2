"""
Graph traversal package for graphwalk.

This package provides:
- Graph: undirected, unweighted adjacency-list graph over vertices 0..V-1
- Breadth-first traversals (BreadthFirstSearch, BreadthFirstPaths)
- Depth-first traversals (DepthFirstPaths, DepthFirstPathsRecursive,
  DepthFirstSearchRecursive)

Every query object runs its traversal once at construction and then answers
read-only questions. Neighbours are visited in insertion order, so results
are deterministic.
"""

from .core import Edge, Graph
from .depth_first import DepthFirstPaths, DepthFirstPathsRecursive, DepthFirstSearchRecursive
from .query import PathQuery, VertexQuery
from .traversal import BreadthFirstPaths, BreadthFirstSearch
from .utils import reconstruct_path, validate_vertex

__all__ = [
    "Edge",
    "Graph",
    "VertexQuery",
    "PathQuery",
    "BreadthFirstSearch",
    "BreadthFirstPaths",
    "DepthFirstPaths",
    "DepthFirstPathsRecursive",
    "DepthFirstSearchRecursive",
    "validate_vertex",
    "reconstruct_path",
]

# Example usage:
# from graphwalk.graphs import Graph, DepthFirstPaths
#
# G = Graph(4, [(0, 1), (1, 2), (0, 3), (3, 2)])
# paths = DepthFirstPaths(G, 0)
# paths.dist_to(2)   # 2
# paths.path_to(2)   # [0, 3, 2]
