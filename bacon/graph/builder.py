"""
Collaboration graph construction.

Actors are vertices; two actors share an edge if they appeared in at least
one movie together. The edge label is the set of movies they share.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from bacon.graph.graph import Graph

logger = logging.getLogger(__name__)


def build_graph(
    vertices: Iterable[str],
    groups: Mapping[str, Iterable[str]],
) -> Graph[str, set[str]]:
    """
    Build the undirected collaboration graph.

    Args:
        vertices: Every actor, in the order they should be enumerated
        groups: Maps each movie to the actors who appeared in it

    Returns:
        Graph with an edge between every pair of distinct actors sharing a
        movie, labelled with the set of all movies they share. Actors that
        appear in groups but not in vertices are added as vertices.
    """
    graph: Graph[str, set[str]] = Graph()

    for actor in vertices:
        graph.insert_vertex(actor)

    for movie, cast in groups.items():
        members = list(dict.fromkeys(cast))

        for actor in members:
            if not graph.has_vertex(actor):
                logger.debug(f"Adding '{actor}' from cast of '{movie}'")
                graph.insert_vertex(actor)

        for i, actor1 in enumerate(members):
            for actor2 in members[i + 1:]:
                if graph.has_edge(actor1, actor2):
                    graph.get_label(actor1, actor2).add(movie)
                else:
                    graph.insert_undirected(actor1, actor2, {movie})

    logger.info(
        f"Built graph with {graph.num_vertices():,} actors and "
        f"{graph.num_edges() // 2:,} collaborations"
    )
    return graph
