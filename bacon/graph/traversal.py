"""
Breadth-first shortest path trees.

bfs() builds a directed tree whose edges point from each vertex to the
vertex it was discovered from, so following out-edges from any vertex
walks a shortest path back to the source.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable
from typing import TypeVar

from bacon.graph.graph import Graph

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")

logger = logging.getLogger(__name__)


def bfs(graph: Graph[V, E], source: V) -> Graph[V, E]:
    """
    Build the shortest path tree rooted at source.

    Args:
        graph: The original (undirected) graph
        source: The root of the tree (the center of the universe)

    Returns:
        A new directed graph containing exactly the vertices reachable from
        source. Each non-root vertex has one out-edge, to its parent, carrying
        the same label object as the corresponding edge in graph. If source
        is not in graph, the tree is empty.
    """
    tree: Graph[V, E] = Graph()

    if not graph.has_vertex(source):
        logger.warning(f"BFS source '{source}' not in graph")
        return tree

    tree.insert_vertex(source)

    queue = deque([source])
    visited = {source}

    while queue:
        u = queue.popleft()

        for v in graph.out_neighbors(u):
            if v in visited:
                continue

            visited.add(v)
            queue.append(v)

            # v was discovered from u
            tree.insert_vertex(v)
            tree.insert_directed(v, u, graph.get_label(v, u))

    logger.debug(f"BFS from '{source}' reached {tree.num_vertices():,} vertices")
    return tree


def get_path(tree: Graph[V, E], v: V) -> list[V] | None:
    """
    Get the shortest path from the tree root to v.

    Returns:
        Vertices ordered root-first and v-last, or None if v is not in the
        tree (its separation from the root is infinite)
    """
    if not tree.has_vertex(v):
        return None

    path = [v]
    current = v

    # Only the root has no parent
    while tree.out_degree(current) != 0:
        current = next(tree.out_neighbors(current))
        path.append(current)

    path.reverse()
    return path
