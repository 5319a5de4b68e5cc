"""
Query engine for the Bacon Game.

BaconGame owns the collaboration graph and the current session, and
answers the console's queries with result objects. It never prints;
presentation is left to the caller.
"""

from __future__ import annotations

import logging

from bacon.config import DEFAULT_CENTER
from bacon.game.state import CenterChange, GameSession, PathResult, PathStep
from bacon.graph.analytics import (
    average_separation,
    missing_vertices,
    rank_by_average_separation,
    ranking_window,
    vertices_by_in_degree,
)
from bacon.graph.errors import VertexNotFoundError
from bacon.graph.graph import Graph
from bacon.graph.traversal import bfs, get_path

logger = logging.getLogger(__name__)


def rebuild_tree(graph: Graph[str, set[str]], center: str) -> Graph[str, set[str]]:
    """Build a fresh path tree for center (empty if center is unknown)."""
    return bfs(graph, center)


def shortest_path(tree: Graph[str, set[str]], target: str) -> list[str] | None:
    """Path from the tree's root to target, or None if unreachable."""
    return get_path(tree, target)


def unreachable_set(graph: Graph[str, set[str]], tree: Graph[str, set[str]]) -> set[str]:
    """Actors in graph with no path to the tree's root."""
    return missing_vertices(graph, tree)


class BaconGame:
    """
    Answers separation queries around a center of the acting universe.

    The engine handles:
    - Rebuilding the path tree when the center changes
    - Paths from any actor to the center, with shared movies per hop
    - Unreachable actors and average separation for the current center
    - Best and worst centers by average separation or by degree
    """

    def __init__(self, graph: Graph[str, set[str]], center: str = DEFAULT_CENTER) -> None:
        """
        Initialize the game around a starting center.

        Args:
            graph: The actor collaboration graph
            center: Initial center of the universe

        Raises:
            VertexNotFoundError: If center is not an actor in graph
        """
        self._graph = graph
        self._require_actor(center)
        self._session = GameSession(center=center, tree=rebuild_tree(graph, center))

    @property
    def graph(self) -> Graph[str, set[str]]:
        return self._graph

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def center(self) -> str:
        return self._session.center

    def _require_actor(self, name: str) -> None:
        if not self._graph.has_vertex(name):
            raise VertexNotFoundError(name)

    def describe_center(self) -> CenterChange:
        """Summarize how connected the current center is."""
        return CenterChange(
            center=self._session.center,
            connected=self._session.connected_count,
            total=self._graph.num_vertices(),
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def set_center(self, name: str) -> CenterChange:
        """
        Make name the new center of the universe.

        Raises:
            VertexNotFoundError: If name is not an actor in the graph
        """
        self._require_actor(name)
        self._session = GameSession(center=name, tree=rebuild_tree(self._graph, name))
        logger.info(
            f"New center '{name}' connected to "
            f"{self._session.connected_count:,}/{self._graph.num_vertices():,} actors"
        )
        return self.describe_center()

    def path_to(self, name: str) -> PathResult:
        """
        Find the shortest path from name to the current center.

        Returns:
            PathResult; reachable is False if there is no path

        Raises:
            VertexNotFoundError: If name is not an actor in the graph
        """
        self._require_actor(name)
        tree = self._session.tree
        result = PathResult(actor=name, center=self._session.center)

        path = shortest_path(tree, name)
        if path is None:
            logger.debug(f"'{name}' is unreachable from '{self._session.center}'")
            return result

        # Tree paths run center-first; report them starting from the actor
        result.path = list(reversed(path))
        for actor, costar in zip(result.path, result.path[1:]):
            movies = sorted(tree.get_label(actor, costar))
            result.steps.append(PathStep(actor=actor, costar=costar, movies=movies))

        return result

    def unreachable(self) -> list[str]:
        """Actors with infinite separation from the current center, sorted."""
        return sorted(unreachable_set(self._graph, self._session.tree))

    def average_separation(self) -> float | None:
        """Average separation of the center from its connected actors."""
        return average_separation(self._session.tree, self._session.center)

    def best_centers(self, n: int) -> list[tuple[str, float]]:
        """
        Rank actors connected to the current center by average separation.

        Args:
            n: Positive for the n best (smallest average) centers, negative
                for the |n| worst

        Raises:
            ValueError: If n is 0
        """
        if n == 0:
            raise ValueError("Ranking size must be non-zero")
        ranked = rank_by_average_separation(self._graph, list(self._session.tree.vertices()))
        return ranking_window(ranked, n)

    def best_by_degree(self, n: int) -> list[tuple[str, int]]:
        """
        Rank all actors by number of costars.

        Args:
            n: Positive for the n best (largest degree) actors, negative
                for the |n| worst

        Raises:
            ValueError: If n is 0
        """
        ranked = [(v, self._graph.in_degree(v)) for v in vertices_by_in_degree(self._graph)]
        return ranking_window(ranked, n)
