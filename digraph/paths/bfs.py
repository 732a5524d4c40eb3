"""
Unweighted single-source shortest paths (breadth-first search).
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from digraph.paths.tree import ShortestPathTree

if TYPE_CHECKING:
    from digraph.graph.digraph import Digraph

logger = logging.getLogger(__name__)


def unweighted_sssp(graph: Digraph, source: int) -> ShortestPathTree:
    """
    Compute hop-count distances from source to every vertex.

    Edge weights are ignored. Neighbors are visited in adjacency-list
    order, so the first edge discovered into a vertex becomes its
    predecessor link.

    Args:
        graph: Graph to search
        source: Start vertex, in [1, n]

    Returns:
        Shortest-path tree rooted at source

    Raises:
        VertexRangeError: If source is out of range
    """
    graph.check_vertex(source)
    n = graph.vertex_count

    dist: list[int | None] = [None] * (n + 1)
    pred: list[int | None] = [None] * (n + 1)

    dist[source] = 0
    queue = deque([source])

    while queue:
        v = queue.popleft()

        for edge in graph.edges_from(v):
            u = edge.end
            if dist[u] is None:  # u has not been visited
                dist[u] = dist[v] + 1
                pred[u] = v
                queue.append(u)

    tree = ShortestPathTree(source=source, algorithm="bfs", dist=tuple(dist), pred=tuple(pred))
    logger.debug(f"BFS from {source}: reached {len(tree.reachable())}/{n} vertices")
    return tree
