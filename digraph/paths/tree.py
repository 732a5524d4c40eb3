"""
Immutable results of a single-source shortest-path run.

A run produces a ShortestPathTree: per-vertex best distances from the
source plus the predecessor of each vertex on its best path. Paths are
rebuilt from the predecessor links on demand.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from digraph.config import NO_PREDECESSOR, UNREACHABLE_DISTANCE
from digraph.errors import VertexRangeError


@dataclass(frozen=True)
class PathResult:
    """
    A reconstructed shortest path.

    Attributes:
        vertices: Vertices from source to target (both included)
        length: Hop count (BFS) or total weight (Dijkstra)
    """

    vertices: tuple[int, ...]
    length: int

    @property
    def source(self) -> int:
        return self.vertices[0]

    @property
    def target(self) -> int:
        return self.vertices[-1]

    @property
    def hops(self) -> int:
        """Number of edges on the path."""
        return len(self.vertices) - 1


@dataclass(frozen=True)
class ShortestPathTree:
    """
    Distances and predecessors produced by one shortest-path run.

    Both tuples have n + 1 slots; slot 0 is unused so they can be indexed
    by vertex directly. None marks an infinite distance or a missing
    predecessor (unreached vertices and the source itself).

    Attributes:
        source: Vertex the run started from
        algorithm: "bfs" or "dijkstra"
        dist: Best known distance per vertex
        pred: Predecessor per vertex on the shortest-path tree
    """

    source: int
    algorithm: str
    dist: tuple[int | None, ...]
    pred: tuple[int | None, ...]

    @property
    def size(self) -> int:
        """Number of vertices in the graph the tree was computed on."""
        return len(self.dist) - 1

    def _check_vertex(self, v: int) -> None:
        if not isinstance(v, int) or isinstance(v, bool) or not 1 <= v <= self.size:
            raise VertexRangeError(v, self.size)

    # =========================================================================
    # Per-vertex Accessors
    # =========================================================================

    def distance(self, v: int) -> int | None:
        """Distance from the source to v, or None if v is unreachable."""
        self._check_vertex(v)
        return self.dist[v]

    def predecessor(self, v: int) -> int | None:
        """Vertex before v on its shortest path, or None for the source and unreached vertices."""
        self._check_vertex(v)
        return self.pred[v]

    def is_reachable(self, v: int) -> bool:
        self._check_vertex(v)
        return self.dist[v] is not None

    def reachable(self) -> list[int]:
        """All vertices with a finite distance, ascending."""
        return [v for v in range(1, self.size + 1) if self.dist[v] is not None]

    # =========================================================================
    # Path Reconstruction
    # =========================================================================

    def path_to(self, target: int) -> PathResult | None:
        """
        Rebuild the shortest path from the source to target.

        Returns:
            The path and its length, or None if target is unreachable
        """
        self._check_vertex(target)
        length = self.dist[target]
        if length is None:
            return None

        # Walk predecessors back to the source, then reverse
        path = []
        v: int | None = target
        while v is not None:
            path.append(v)
            v = self.pred[v]
        return PathResult(vertices=tuple(reversed(path)), length=length)

    # =========================================================================
    # Array Export
    # =========================================================================

    def dist_array(self) -> np.ndarray:
        """Distances as an int64 array of size n + 1, -1 for unreached vertices."""
        return np.array(
            [UNREACHABLE_DISTANCE if d is None else d for d in self.dist],
            dtype=np.int64,
        )

    def path_array(self) -> np.ndarray:
        """Predecessors as an int64 array of size n + 1, 0 where there is none."""
        return np.array(
            [NO_PREDECESSOR if p is None else p for p in self.pred],
            dtype=np.int64,
        )
