"""Benchmark traversal query construction."""

import time
from typing import Dict, Type

import numpy as np

from graphwalk.graphs import (
    BreadthFirstPaths,
    BreadthFirstSearch,
    DepthFirstPaths,
    DepthFirstPathsRecursive,
    DepthFirstSearchRecursive,
    Graph,
    VertexQuery,
)


def benchmark_query_construction(
    query_cls: Type[VertexQuery],
    n_vertices: int,
    n_edges: int,
    repeats: int = 20,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark building one traversal query on a random graph.

    Args:
        query_cls: Traversal class to construct.
        n_vertices: Number of vertices.
        n_edges: Number of random edges.
        repeats: Number of timed constructions.
        seed: Seed for the random graph.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(seed)
    ends = rng.integers(0, n_vertices, size=(n_edges, 2))
    G = Graph(n_vertices, [(int(v), int(w)) for v, w in ends])

    # Warmup
    query_cls(G, 0)

    start = time.perf_counter()
    for _ in range(repeats):
        query_cls(G, 0)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "total_time_sec": total_time,
        "time_per_query_sec": total_time / repeats,
    }


if __name__ == "__main__":
    print("Benchmarking traversal construction (10k vertices, 30k edges)...")

    for cls in (
        BreadthFirstSearch,
        BreadthFirstPaths,
        DepthFirstPaths,
        DepthFirstPathsRecursive,
        DepthFirstSearchRecursive,
    ):
        results = benchmark_query_construction(cls, n_vertices=10_000, n_edges=30_000)
        print(f"  {cls.__name__:<28} {results['time_per_query_sec']*1e3:8.2f} ms")
