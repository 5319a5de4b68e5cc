"""
Exceptions raised by graph operations.

Missing vertices and edges are precondition violations and raise.
Expected outcomes such as an unreachable vertex are returned as values
instead (see traversal.get_path).
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for graph errors."""


class VertexNotFoundError(GraphError, KeyError):
    """A vertex required by an operation is not in the graph."""

    def __init__(self, vertex: object) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex not found: {vertex!r}")

    def __str__(self) -> str:
        return f"Vertex not found: {self.vertex!r}"


class EdgeNotFoundError(GraphError, KeyError):
    """No edge exists between the two vertices."""

    def __init__(self, u: object, v: object) -> None:
        self.u = u
        self.v = v
        super().__init__(f"Edge not found: {u!r} -> {v!r}")

    def __str__(self) -> str:
        return f"Edge not found: {self.u!r} -> {self.v!r}"
