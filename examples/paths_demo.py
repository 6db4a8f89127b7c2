"""
Example: breadth-first versus depth-first paths

Loads a small graph from examples/data, runs every traversal from vertex 0
and prints the classic report for each. The last section lists the vertices
for which plain recursive DFS found a longer path than the shortest one.

Usage:
    python examples/paths_demo.py [graph-file] [source]
"""

import sys
from pathlib import Path

from graphwalk import (
    BreadthFirstPaths,
    BreadthFirstSearch,
    DepthFirstPaths,
    DepthFirstPathsRecursive,
    DepthFirstSearchRecursive,
    format_paths,
    format_reachable,
    parse_graph_file,
)

DATA_DIR = Path(__file__).resolve().parent / "data"


def section(title: str) -> None:
    print("=" * 60)
    print(title)
    print("=" * 60)


def main(argv: list) -> int:
    path = argv[1] if len(argv) > 1 else str(DATA_DIR / "tinyCG.txt")
    s = int(argv[2]) if len(argv) > 2 else 0

    G = parse_graph_file(path)

    section(f"Graph ({path})")
    print(G)

    section("Reachable vertices")
    print("bfs:", format_reachable(BreadthFirstSearch(G, s)), end="")
    print("dfs:", format_reachable(DepthFirstSearchRecursive(G, s)), end="")

    shortest = BreadthFirstPaths(G, s)
    section("Breadth-first paths")
    print(format_paths(shortest, s), end="")

    section("Depth-first paths (explicit stack, shortest)")
    print(format_paths(DepthFirstPaths(G, s), s), end="")

    recursive = DepthFirstPathsRecursive(G, s)
    section("Depth-first paths (recursive)")
    print(format_paths(recursive, s), end="")

    longer = [
        v for v in range(G.V)
        if recursive.has_path_to(v) and recursive.dist_to(v) > shortest.dist_to(v)
    ]
    section("Recursive DFS detours")
    print("vertices reached by a longer path:", longer)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
