"""
Utility functions for graph traversals.

Provides vertex bounds checking and predecessor-walk path reconstruction.
"""

import numbers
from typing import List, Optional

import numpy as np


def validate_vertex(v: int, V: int) -> None:
    """
    Check that v names a vertex of a graph with V vertices.

    Args:
        v: Vertex to check.
        V: Number of vertices.

    Raises:
        TypeError: If v is not an integer.
        IndexError: Unless 0 <= v < V.

    Example:
        >>> validate_vertex(2, 6)
        >>> validate_vertex(6, 6)
        Traceback (most recent call last):
        ...
        IndexError: vertex 6 is not between 0 and 5
    """
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise TypeError(f"vertex must be an integer, got {type(v).__name__}")
    if v < 0 or v >= V:
        raise IndexError(f"vertex {v} is not between 0 and {V - 1}")


def reconstruct_path(
    edge_to: np.ndarray, dist_to: np.ndarray, target: int
) -> Optional[List[int]]:
    """
    Reconstruct the path from the source to target by walking edge_to.

    The walk stops at the first vertex whose distance is 0, which is the
    source (or, for multi-source searches, the nearest source).

    Args:
        edge_to: Predecessor of each vertex on its recorded path.
        dist_to: Edge count from the source, inf where unreached.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from source to target (inclusive), or None if
        target is unreached.

    Example:
        >>> edge_to = np.array([-1, 2, 0])
        >>> dist_to = np.array([0.0, 2.0, 1.0])
        >>> reconstruct_path(edge_to, dist_to, 1)
        [0, 2, 1]
    """
    if not np.isfinite(dist_to[target]):
        return None

    path = []
    x = target
    while dist_to[x] != 0:
        path.append(x)
        x = int(edge_to[x])
    path.append(x)

    path.reverse()
    return path
