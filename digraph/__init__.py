"""
digraph: directed graphs with single-source shortest paths.

A mutable directed graph over vertices 1..n with breadth-first
(unweighted) and Dijkstra (non-negative weighted) shortest paths,
path reconstruction and plain-text reports.
"""

from digraph.errors import (
    EdgeNotFoundError,
    GraphError,
    InvalidGraphSizeError,
    NoShortestPathRunError,
    VertexRangeError,
)
from digraph.graph import Digraph, Edge
from digraph.paths import PathResult, ShortestPathTree, validate_tree

__version__ = "0.1.0"

__all__ = [
    "Digraph",
    "Edge",
    "PathResult",
    "ShortestPathTree",
    "validate_tree",
    "GraphError",
    "InvalidGraphSizeError",
    "VertexRangeError",
    "EdgeNotFoundError",
    "NoShortestPathRunError",
]
