"""
Adjacency-map graph with labeled edges.

Vertices can be any hashable value; edge labels can be anything. The same
class serves both the undirected collaboration graph (every edge stored in
both directions, sharing one label object) and the directed BFS path tree.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from bacon.graph.errors import EdgeNotFoundError, VertexNotFoundError

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")


class Graph(Generic[V, E]):
    """
    Mutable graph storing, for each vertex, maps of its out- and in-edges.

    Enumeration of vertices and neighbors follows insertion order, so
    traversals over the same graph always visit vertices in the same order.

    Attributes:
        _out: Maps vertex u to {v: label} for every edge u -> v
        _in: Maps vertex v to {u: label} for every edge u -> v
    """

    def __init__(self) -> None:
        self._out: dict[V, dict[V, E]] = {}
        self._in: dict[V, dict[V, E]] = {}

    # =========================================================================
    # Vertices
    # =========================================================================

    def insert_vertex(self, v: V) -> None:
        """Add a vertex. Does nothing if it is already present."""
        if v not in self._out:
            self._out[v] = {}
            self._in[v] = {}

    def has_vertex(self, v: V) -> bool:
        return v in self._out

    def vertices(self) -> Iterator[V]:
        """Iterate over all vertices in insertion order."""
        return iter(self._out)

    def num_vertices(self) -> int:
        return len(self._out)

    # =========================================================================
    # Edges
    # =========================================================================

    def insert_directed(self, u: V, v: V, label: E) -> None:
        """
        Add (or relabel) the edge u -> v.

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph
        """
        self._require(u)
        self._require(v)
        self._out[u][v] = label
        self._in[v][u] = label

    def insert_undirected(self, u: V, v: V, label: E) -> None:
        """
        Add the edge between u and v in both directions.

        Both directions share the same label object, so mutating the label
        through get_label(u, v) is visible through get_label(v, u).

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph
        """
        self.insert_directed(u, v, label)
        self.insert_directed(v, u, label)

    def has_edge(self, u: V, v: V) -> bool:
        return u in self._out and v in self._out[u]

    def get_label(self, u: V, v: V) -> E:
        """
        Get the label on edge u -> v.

        Raises:
            EdgeNotFoundError: If there is no such edge
        """
        try:
            return self._out[u][v]
        except KeyError:
            raise EdgeNotFoundError(u, v) from None

    def num_edges(self) -> int:
        """Number of directed edges (undirected edges count twice)."""
        return sum(len(nbrs) for nbrs in self._out.values())

    # =========================================================================
    # Neighbors and Degrees
    # =========================================================================

    def out_neighbors(self, v: V) -> Iterator[V]:
        """Iterate over vertices w with an edge v -> w."""
        self._require(v)
        return iter(self._out[v])

    def in_neighbors(self, v: V) -> Iterator[V]:
        """Iterate over vertices w with an edge w -> v."""
        self._require(v)
        return iter(self._in[v])

    def out_degree(self, v: V) -> int:
        self._require(v)
        return len(self._out[v])

    def in_degree(self, v: V) -> int:
        self._require(v)
        return len(self._in[v])

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require(self, v: V) -> None:
        if v not in self._out:
            raise VertexNotFoundError(v)

    def __contains__(self, v: object) -> bool:
        return v in self._out

    def __iter__(self) -> Iterator[V]:
        return self.vertices()

    def __len__(self) -> int:
        return len(self._out)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertices={self.num_vertices()}, "
            f"edges={self.num_edges()})"
        )
