"""
Mutable directed graph with per-vertex adjacency lists.

Vertices are numbered 1..n; there is no vertex 0. Each vertex keeps its
outgoing edges in insertion order and at most one edge per ordered pair.

Usage:
    from digraph import Digraph, Edge

    g = Digraph.from_edges([(1, 2, 1), (2, 3, 1), (1, 3, 5)], 3)
    g.pwsssp(1)
    g.dist(3)            # 2
    g.shortest_path(3)   # PathResult(vertices=(1, 2, 3), length=2)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from digraph.errors import (
    EdgeNotFoundError,
    InvalidGraphSizeError,
    NoShortestPathRunError,
    VertexRangeError,
)
from digraph.graph.edge import Edge
from digraph.paths.bfs import unweighted_sssp
from digraph.paths.dijkstra import weighted_sssp
from digraph.paths.tree import PathResult, ShortestPathTree

logger = logging.getLogger(__name__)

EdgeLike = Edge | tuple[int, ...]


class Digraph:
    """
    Directed graph over vertices 1..n.

    Shortest-path methods return a fresh ShortestPathTree and also keep
    it as the graph's most recent run, which dist(), path() and
    shortest_path() read from. A new run replaces it; editing edges does
    not.

    Attributes:
        vertex_count: Number of vertices (fixed at construction)
        edge_count: Number of edges currently in the graph
        last_tree: Result of the most recent shortest-path run, if any
    """

    def __init__(self, n: int, edges: Iterable[EdgeLike] | None = None) -> None:
        """
        Create a graph with n vertices and no edges.

        Args:
            n: Number of vertices, at least 1
            edges: Optional edges to insert, in order

        Raises:
            InvalidGraphSizeError: If n < 1
        """
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise InvalidGraphSizeError(f"Graph needs at least 1 vertex, got {n!r}")

        self._size = n
        self._n_edges = 0
        self._table: list[list[Edge]] = [[] for _ in range(n + 1)]  # slot zero not used
        self._last_tree: ShortestPathTree | None = None

        if edges is not None:
            for e in edges:
                self.insert_edge(e)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeLike], n: int) -> Digraph:
        """Create a graph with n vertices and insert each of edges in order."""
        return cls(n, edges)

    # =========================================================================
    # Core Accessors
    # =========================================================================

    @property
    def vertex_count(self) -> int:
        return self._size

    @property
    def edge_count(self) -> int:
        return self._n_edges

    @property
    def last_tree(self) -> ShortestPathTree | None:
        return self._last_tree

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Digraph(vertices={self._size}, edges={self._n_edges})"

    def check_vertex(self, v: int) -> None:
        """Raise VertexRangeError unless v is an int in [1, n]."""
        if not isinstance(v, int) or isinstance(v, bool) or not 1 <= v <= self._size:
            raise VertexRangeError(v, self._size)

    def vertices(self) -> range:
        return range(1, self._size + 1)

    def edges_from(self, v: int) -> tuple[Edge, ...]:
        """Outgoing edges of v in insertion order."""
        self.check_vertex(v)
        return tuple(self._table[v])

    def edges(self) -> Iterator[Edge]:
        """All edges, grouped by start vertex, each group in insertion order."""
        for v in range(1, self._size + 1):
            yield from self._table[v]

    def has_edge(self, start: int, end: int) -> bool:
        return self._find(start, end) is not None

    def weight(self, start: int, end: int) -> int:
        """
        Weight of the edge start -> end.

        Raises:
            EdgeNotFoundError: If there is no such edge
        """
        i = self._find(start, end)
        if i is None:
            raise EdgeNotFoundError(start, end)
        return self._table[start][i].weight

    def _find(self, start: int, end: int) -> int | None:
        """Position of the edge start -> end in start's adjacency list."""
        self.check_vertex(start)
        self.check_vertex(end)
        for i, edge in enumerate(self._table[start]):
            if edge.end == end:
                return i
        return None

    # =========================================================================
    # Mutation
    # =========================================================================

    def insert_edge(self, e: EdgeLike) -> None:
        """
        Insert directed edge e, or update its weight if the link exists.

        An existing edge keeps its position in the adjacency list.

        Raises:
            VertexRangeError: If either end is out of range
        """
        e = Edge.coerce(e)
        i = self._find(e.start, e.end)

        if i is None:
            self._table[e.start].append(e)
            self._n_edges += 1
            logger.debug(f"Inserted edge {e.start} -> {e.end} (weight {e.weight})")
        else:
            self._table[e.start][i] = e
            logger.debug(f"Updated edge {e.start} -> {e.end} to weight {e.weight}")

    def remove_edge(self, e: EdgeLike) -> None:
        """
        Remove the edge linking e.start -> e.end (its weight is ignored).

        Raises:
            VertexRangeError: If either end is out of range
            EdgeNotFoundError: If there is no such edge
        """
        e = Edge.coerce(e)
        i = self._find(e.start, e.end)
        if i is None:
            raise EdgeNotFoundError(e.start, e.end)

        del self._table[e.start][i]
        self._n_edges -= 1
        logger.debug(f"Removed edge {e.start} -> {e.end}")

    # =========================================================================
    # Shortest Paths
    # =========================================================================

    def uwsssp(self, s: int) -> ShortestPathTree:
        """Unweighted single-source shortest paths from s (BFS)."""
        self._last_tree = unweighted_sssp(self, s)
        return self._last_tree

    def pwsssp(self, s: int, strategy: str | None = None) -> ShortestPathTree:
        """Non-negative weighted single-source shortest paths from s (Dijkstra)."""
        self._last_tree = weighted_sssp(self, s, strategy)
        return self._last_tree

    def _require_tree(self) -> ShortestPathTree:
        if self._last_tree is None:
            raise NoShortestPathRunError("No shortest-path run yet; call uwsssp() or pwsssp() first")
        return self._last_tree

    def dist(self, v: int) -> int | None:
        """Distance to v from the most recent run's source (None if unreachable)."""
        return self._require_tree().distance(v)

    def path(self, v: int) -> int | None:
        """Predecessor of v in the most recent run (None for the source or if unreachable)."""
        return self._require_tree().predecessor(v)

    def shortest_path(self, t: int) -> PathResult | None:
        """Path from the most recent run's source to t, or None if unreachable."""
        return self._require_tree().path_to(t)
