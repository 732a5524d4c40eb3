"""
Graph module.

Provides the directed graph data structure:
- Edge: Directed, weighted edge
- Digraph: Graph over vertices 1..n with adjacency lists
"""

from digraph.graph.digraph import Digraph
from digraph.graph.edge import Edge

__all__ = ["Digraph", "Edge"]
