"""Integration tests for the top-level graphwalk package."""

import graphwalk


def test_top_level_exports():
    """Test that the main entry points are importable from the package."""
    from graphwalk import (
        BreadthFirstPaths,
        BreadthFirstSearch,
        DepthFirstPaths,
        DepthFirstPathsRecursive,
        DepthFirstSearchRecursive,
        Graph,
        parse_graph_string,
    )

    G = parse_graph_string("3\n2\n0 1\n1 2\n")
    assert isinstance(G, Graph)
    for query_cls in (
        BreadthFirstSearch,
        BreadthFirstPaths,
        DepthFirstPaths,
        DepthFirstPathsRecursive,
        DepthFirstSearchRecursive,
    ):
        assert query_cls(G, 0).visited(2)


def test_all_exports_resolve():
    """Test that every name in __all__ exists."""
    for name in graphwalk.__all__:
        assert hasattr(graphwalk, name), name


def test_version():
    """Test the version string."""
    assert isinstance(graphwalk.__version__, str)


def test_shared_graph_between_queries():
    """Test that several queries may read one graph."""
    G = graphwalk.Graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    bfp = graphwalk.BreadthFirstPaths(G, 0)
    dfp = graphwalk.DepthFirstPaths(G, 0)
    rec = graphwalk.DepthFirstPathsRecursive(G, 0)

    assert bfp.dist_to(2) == dfp.dist_to(2) == 2
    assert rec.dist_to(3) == 3
    assert bfp.dist_to(3) == 1
