"""Text rendering of traversal query results.

Queries return plain data (booleans, ints, vertex lists); this module turns
them into the classic console report lines, e.g.::

    0 to 4 (2): 0-2-4
    0 to 7 (-): not connected
"""

from __future__ import annotations

from typing import List, Optional

from graphwalk.graphs import PathQuery, VertexQuery


def format_reachable(search: VertexQuery) -> str:
    """
    List the vertices a search reached.

    Parameters
    ----------
    search : VertexQuery
        Any finished traversal query.

    Returns
    -------
    str
        Reached vertices in ascending order, each followed by a comma, then a
        newline (``"0,1,2,\\n"``).
    """
    return "".join(f"{v}," for v in search.reachable()) + "\n"


def format_path(path: List[int]) -> str:
    """Join a vertex sequence with dashes (``[0, 2, 4]`` -> ``"0-2-4"``)."""
    return "-".join(str(v) for v in path)


def format_paths(paths: PathQuery, source: Optional[int] = None) -> str:
    """
    Render one report line per vertex of the traversed graph.

    Reachable lines start with the vertex their path actually starts from,
    so multi-source queries attribute each vertex to its nearest source.

    Parameters
    ----------
    paths : PathQuery
        Finished path-tracking query.
    source : int, optional
        Source printed on "not connected" lines. Must be one of
        ``paths.sources``; defaults to the first of them.

    Returns
    -------
    str
        ``"s to v (d): s-...-v"`` for reachable vertices and
        ``"s to v (-): not connected"`` otherwise, newline-terminated.

    Raises
    ------
    ValueError
        If source is not a source of the query.
    """
    if source is None:
        source = paths.sources[0]
    elif source not in paths.sources:
        raise ValueError(f"{source} is not a source of this query {paths.sources}")

    lines = []
    for v in range(paths.graph.V):
        path = paths.path_to(v)
        if path is None:
            lines.append(f"{source} to {v} (-): not connected")
        else:
            lines.append(f"{path[0]} to {v} ({paths.dist_to(v)}): {format_path(path)}")
    return "\n".join(lines) + "\n" if lines else ""


__all__ = [
    "format_reachable",
    "format_path",
    "format_paths",
]
