"""
Game state and result dataclasses for Bacon Game queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bacon.graph.graph import Graph


@dataclass
class GameSession:
    """
    Mutable state of a game: the current center and its path tree.

    The tree is derived state. It is replaced wholesale whenever the
    center changes, never updated in place.

    Attributes:
        center: Current center of the acting universe
        tree: BFS path tree rooted at center
    """

    center: str
    tree: Graph[str, set[str]]

    @property
    def connected_count(self) -> int:
        """Number of actors connected to the center (excluding the center)."""
        return max(self.tree.num_vertices() - 1, 0)


@dataclass
class PathStep:
    """
    One hop on a path toward the center.

    Attributes:
        actor: Actor at this end of the hop
        costar: Next actor toward the center
        movies: Movies the two appeared in together (sorted)
    """

    actor: str
    costar: str
    movies: list[str]


@dataclass
class PathResult:
    """
    Shortest path from an actor to the current center.

    Attributes:
        actor: Actor the path was requested for
        center: Center at the time of the query
        path: Actors from actor to center (empty if unreachable)
        steps: Hops along the path, starting at actor
    """

    actor: str
    center: str
    path: list[str] = field(default_factory=list)
    steps: list[PathStep] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        """Whether the actor is connected to the center at all."""
        return bool(self.path)

    @property
    def separation(self) -> int | None:
        """The actor's Bacon number, or None if infinite."""
        if not self.path:
            return None
        return len(self.path) - 1


@dataclass
class CenterChange:
    """
    Outcome of choosing a new center.

    Attributes:
        center: The new center
        connected: Actors reachable from the new center (excluding it)
        total: Actors in the whole graph
    """

    center: str
    connected: int
    total: int
