"""
Non-negative weighted single-source shortest paths (Dijkstra).

Two frontier strategies are provided:
- scan: pick the next vertex by a linear scan over all vertices, O(V^2 + E)
- heap: keep candidates in a binary heap, O((V + E) log V)

Both settle vertices in the same order: smallest tentative distance
first, lowest vertex index among equal distances. Relaxation only
replaces a distance that is strictly larger, so the two strategies
build identical trees.
"""

from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING

from digraph.config import validate_strategy
from digraph.paths.tree import ShortestPathTree

if TYPE_CHECKING:
    from digraph.graph.digraph import Digraph

logger = logging.getLogger(__name__)


def weighted_sssp(
    graph: Digraph, source: int, strategy: str | None = None
) -> ShortestPathTree:
    """
    Compute least-weight distances from source to every vertex.

    Weights must be non-negative. This is not enforced: a graph with a
    negative edge is searched anyway (with a warning) and the result is
    undefined.

    Args:
        graph: Graph to search
        source: Start vertex, in [1, n]
        strategy: "scan" or "heap" (default: config.DIJKSTRA_STRATEGY)

    Returns:
        Shortest-path tree rooted at source

    Raises:
        VertexRangeError: If source is out of range
        ValueError: If strategy is unknown
    """
    graph.check_vertex(source)
    strategy = validate_strategy(strategy)

    if any(edge.weight < 0 for edge in graph.edges()):
        logger.warning("Dijkstra run on a graph with negative edge weights; results are undefined")

    if strategy == "heap":
        dist, pred = _heap_sssp(graph, source)
    else:
        dist, pred = _scan_sssp(graph, source)

    tree = ShortestPathTree(source=source, algorithm="dijkstra", dist=tuple(dist), pred=tuple(pred))
    logger.debug(
        f"Dijkstra ({strategy}) from {source}: "
        f"reached {len(tree.reachable())}/{graph.vertex_count} vertices"
    )
    return tree


def find_smallest_undone_vertex(dist: list[int | None], done: list[bool]) -> int | None:
    """
    Return the unsettled vertex with the smallest finite distance.

    Scans vertices 1..n in order and keeps the first minimum, so ties
    go to the lowest index. Returns None when every reachable vertex
    has been settled.
    """
    best_vertex = None
    best_distance = None

    for v in range(1, len(dist)):
        d = dist[v]
        if done[v] or d is None:
            continue
        if best_distance is None or d < best_distance:
            best_distance = d
            best_vertex = v

    return best_vertex


def _scan_sssp(graph: Digraph, source: int) -> tuple[list[int | None], list[int | None]]:
    n = graph.vertex_count
    dist: list[int | None] = [None] * (n + 1)
    pred: list[int | None] = [None] * (n + 1)
    done = [False] * (n + 1)

    dist[source] = 0
    done[source] = True
    v = source

    while True:
        _relax(graph, v, dist, pred, done)
        v = find_smallest_undone_vertex(dist, done)
        if v is None:
            break
        done[v] = True

    return dist, pred


def _heap_sssp(graph: Digraph, source: int) -> tuple[list[int | None], list[int | None]]:
    n = graph.vertex_count
    dist: list[int | None] = [None] * (n + 1)
    pred: list[int | None] = [None] * (n + 1)
    done = [False] * (n + 1)

    dist[source] = 0
    pq = [(0, source)]  # (distance, vertex); ties pop lowest vertex first

    while pq:
        d_v, v = heapq.heappop(pq)

        # Skip settled vertices and outdated entries
        if done[v] or d_v != dist[v]:
            continue
        done[v] = True

        for u in _relax(graph, v, dist, pred, done):
            heapq.heappush(pq, (dist[u], u))

    return dist, pred


def _relax(
    graph: Digraph,
    v: int,
    dist: list[int | None],
    pred: list[int | None],
    done: list[bool],
) -> list[int]:
    """Relax every edge leaving v; return the vertices whose distance improved."""
    improved = []
    for edge in graph.edges_from(v):
        u = edge.end
        if done[u]:
            continue
        candidate = dist[v] + edge.weight
        if dist[u] is None or candidate < dist[u]:
            dist[u] = candidate
            pred[u] = v
            improved.append(u)
    return improved
