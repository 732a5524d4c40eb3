"""
Directed, weighted edge between two vertices.
"""

from __future__ import annotations

from dataclasses import dataclass

from digraph.config import DEFAULT_EDGE_WEIGHT


@dataclass(frozen=True)
class Edge:
    """
    A directed edge start -> end.

    Attributes:
        start: Vertex the edge leaves from
        end: Vertex the edge points to
        weight: Edge cost (must be non-negative for Dijkstra)
    """

    start: int
    end: int
    weight: int = DEFAULT_EDGE_WEIGHT

    def links_same_nodes(self, other: Edge) -> bool:
        """Whether both edges connect the same ordered pair, ignoring weight."""
        return self.start == other.start and self.end == other.end

    def with_weight(self, weight: int) -> Edge:
        return Edge(self.start, self.end, weight)

    @classmethod
    def coerce(cls, item: Edge | tuple[int, ...]) -> Edge:
        """
        Build an Edge from an Edge or a (start, end[, weight]) tuple.

        Raises:
            ValueError: If a tuple has the wrong number of fields
        """
        if isinstance(item, Edge):
            return item
        if len(item) == 2:
            return cls(item[0], item[1])
        if len(item) == 3:
            return cls(item[0], item[1], item[2])
        raise ValueError(f"Expected (start, end[, weight]), got {item!r}")
