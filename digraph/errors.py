"""
Exceptions raised by the digraph library.

Every precondition violation raises one of these; the built-in base each
one also derives from lets callers catch them the usual way
(e.g. ``except IndexError``).
"""


class GraphError(Exception):
    """Base class for all digraph errors."""


class InvalidGraphSizeError(GraphError, ValueError):
    """A graph was constructed with fewer than one vertex."""


class VertexRangeError(GraphError, IndexError):
    """A vertex index lies outside [1, n]."""

    def __init__(self, vertex: int, size: int) -> None:
        self.vertex = vertex
        self.size = size
        super().__init__(f"Vertex {vertex} out of range [1, {size}]")


class EdgeNotFoundError(GraphError, LookupError):
    """No edge links the requested pair of vertices."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"No edge ({start}, {end}) in graph")


class NoShortestPathRunError(GraphError, RuntimeError):
    """Run state was read before any shortest-path run."""
