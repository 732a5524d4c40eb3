"""
Shortest paths module.

Provides single-source shortest-path algorithms and their results:
- unweighted_sssp: BFS hop-count distances
- weighted_sssp: Dijkstra with scan or heap frontier
- ShortestPathTree / PathResult: Run results and path reconstruction
- validate_tree: Consistency checks for a computed tree
"""

from digraph.paths.bfs import unweighted_sssp
from digraph.paths.dijkstra import find_smallest_undone_vertex, weighted_sssp
from digraph.paths.tree import PathResult, ShortestPathTree
from digraph.paths.verify import validate_tree

__all__ = [
    "unweighted_sssp",
    "weighted_sssp",
    "find_smallest_undone_vertex",
    "PathResult",
    "ShortestPathTree",
    "validate_tree",
]
