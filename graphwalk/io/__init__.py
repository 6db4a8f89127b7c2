"""Text input and output around the traversal core."""

from .report import format_path, format_paths, format_reachable
from .text import export_graph_to_text, parse_graph_file, parse_graph_string

__all__ = [
    "parse_graph_string",
    "parse_graph_file",
    "export_graph_to_text",
    "format_reachable",
    "format_path",
    "format_paths",
]
