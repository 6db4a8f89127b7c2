"""Performance benchmarks for graphwalk.

Microbenchmarks for traversal query construction on random graphs.
"""
