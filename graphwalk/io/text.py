"""Plain-text graph reader and writer.

The format is a stream of whitespace-separated integers::

    6        <- number of vertices V
    8        <- number of edges E
    0 5      <- E pairs "v w", one edge each
    2 4
    ...

Tokens may be spread over lines freely. Blank lines are ignored and ``#``
starts a comment running to the end of the line.
"""

from __future__ import annotations

from typing import List

from graphwalk.graphs import Graph
from graphwalk.logging import get_logger

logger = get_logger(__name__)


def parse_graph_string(text: str) -> Graph:
    """
    Parse graph text into a Graph.

    Parameters
    ----------
    text : str
        Graph source in the V / E / pairs format.

    Returns
    -------
    Graph
        Graph with the edges added in file order.

    Raises
    ------
    ValueError
        If a token is not an integer, a count is negative, or the number of
        edge tokens does not match E.
    IndexError
        If an edge endpoint is outside 0..V-1.
    """
    tokens = _tokenize(text)

    if len(tokens) < 2:
        raise ValueError("Graph text must start with the vertex count and the edge count.")

    V, E = tokens[0], tokens[1]
    if V < 0:
        raise ValueError(f"Number of vertices must be non-negative, got {V}")
    if E < 0:
        raise ValueError(f"Number of edges must be non-negative, got {E}")

    endpoints = tokens[2:]
    if len(endpoints) != 2 * E:
        raise ValueError(
            f"Expected {E} edges ({2 * E} endpoints), found {len(endpoints)} endpoints."
        )

    graph = Graph(V)
    for i in range(E):
        graph.add_edge(endpoints[2 * i], endpoints[2 * i + 1])

    logger.info("parsed graph with %d vertices and %d edges", graph.V, graph.E)
    return graph


def parse_graph_file(path: str) -> Graph:
    """
    Parse a graph file into a Graph.

    Parameters
    ----------
    path : str
        Path to the graph file.

    Returns
    -------
    Graph
        Parsed graph.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file cannot be read or its contents are malformed.
    IndexError
        If an edge endpoint is outside 0..V-1.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Graph file not found: {path}")
    except OSError as e:
        raise ValueError(f"Error reading graph file {path}: {e}")

    return parse_graph_string(content)


def export_graph_to_text(graph: Graph) -> str:
    """
    Render a Graph in the V / E / pairs format.

    Parameters
    ----------
    graph : Graph
        Graph to export.

    Returns
    -------
    str
        Text that parse_graph_string turns back into an equal graph, with
        edges listed as Graph.edges() yields them.
    """
    lines = [str(graph.V), str(graph.E)]
    lines.extend(f"{v} {w}" for v, w in graph.edges())
    return "\n".join(lines) + "\n"


def _tokenize(text: str) -> List[int]:
    """Split graph text into integer tokens, dropping comments."""
    tokens: List[int] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0]
        for tok in line.split():
            try:
                tokens.append(int(tok))
            except ValueError:
                raise ValueError(f"Line {lineno}: expected an integer, got {tok!r}")
    return tokens


__all__ = [
    "parse_graph_string",
    "parse_graph_file",
    "export_graph_to_text",
]
