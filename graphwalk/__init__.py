"""graphwalk - breadth-first and depth-first traversal of undirected graphs."""

__version__ = "0.1.0"

from .diagnostics import (
    assert_symmetric_adjacency,
    assert_traversal_consistent,
    assert_valid_path,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .graphs import (
    BreadthFirstPaths,
    BreadthFirstSearch,
    DepthFirstPaths,
    DepthFirstPathsRecursive,
    DepthFirstSearchRecursive,
    Graph,
)
from .io import (
    export_graph_to_text,
    format_path,
    format_paths,
    format_reachable,
    parse_graph_file,
    parse_graph_string,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph and traversals
    "Graph",
    "BreadthFirstSearch",
    "BreadthFirstPaths",
    "DepthFirstPaths",
    "DepthFirstPathsRecursive",
    "DepthFirstSearchRecursive",
    # Text I/O
    "parse_graph_string",
    "parse_graph_file",
    "export_graph_to_text",
    "format_reachable",
    "format_path",
    "format_paths",
    # Diagnostics
    "assert_symmetric_adjacency",
    "assert_valid_path",
    "assert_traversal_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
