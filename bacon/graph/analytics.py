"""
Graph analytics over collaboration graphs and their BFS path trees.

Path trees come from traversal.bfs(): edges point child -> parent, so the
children of a vertex are its in-neighbors.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import TypeVar

import numpy as np

from bacon.config import DEFAULT_KEEP_ON, DEFAULT_NUM_WALKS
from bacon.graph.errors import VertexNotFoundError
from bacon.graph.graph import Graph
from bacon.graph.traversal import bfs

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")
T = TypeVar("T")

logger = logging.getLogger(__name__)


# =============================================================================
# Reachability and Separation
# =============================================================================

def missing_vertices(graph: Graph[V, E], tree: Graph[V, E]) -> set[V]:
    """Vertices of graph that are not in tree (infinite separation)."""
    return {v for v in graph.vertices() if not tree.has_vertex(v)}


def sum_of_paths(tree: Graph[V, E], vertex: V, depth_so_far: int = 0) -> int:
    """
    Sum the depths of every vertex in the subtree rooted at vertex.

    vertex itself contributes depth_so_far, its children depth_so_far + 1,
    and so on. Uses an explicit stack, so deep trees are fine.

    Raises:
        VertexNotFoundError: If vertex is not in the tree
    """
    if not tree.has_vertex(vertex):
        raise VertexNotFoundError(vertex)

    total = 0
    stack = [(vertex, depth_so_far)]
    while stack:
        current, depth = stack.pop()
        total += depth
        for child in tree.in_neighbors(current):
            stack.append((child, depth + 1))

    return total


def average_separation(tree: Graph[V, E], root: V) -> float | None:
    """
    Average number of edges between root and every other vertex in tree.

    Returns None if the tree has no vertices besides the root, since the
    average over zero vertices is undefined.
    """
    others = tree.num_vertices() - 1
    if others < 1:
        return None
    return sum_of_paths(tree, root) / others


def separations(tree: Graph[V, E], root: V) -> dict[V, int]:
    """
    Map every vertex in the tree to its separation from root.

    Raises:
        VertexNotFoundError: If root is not in the tree
    """
    if not tree.has_vertex(root):
        raise VertexNotFoundError(root)

    depths = {root: 0}
    queue = deque([root])
    while queue:
        current = queue.popleft()
        for child in tree.in_neighbors(current):
            depths[child] = depths[current] + 1
            queue.append(child)

    return depths


# =============================================================================
# Ranking
# =============================================================================

def vertices_by_in_degree(graph: Graph[V, E]) -> list[V]:
    """
    Vertices sorted by in-degree, largest first.

    Ties keep the graph's enumeration order.
    """
    return sorted(graph.vertices(), key=graph.in_degree, reverse=True)


def vertices_by_frequency(graph: Graph[V, E], freqs: Mapping[V, int]) -> list[V]:
    """
    Vertices sorted by frequency, largest first.

    Vertices missing from freqs count as 0. Ties keep the graph's
    enumeration order.
    """
    return sorted(graph.vertices(), key=lambda v: freqs.get(v, 0), reverse=True)


def rank_by_average_separation(
    graph: Graph[V, E],
    centers: Iterable[V] | None = None,
) -> list[tuple[V, float]]:
    """
    Rank candidate centers by the average separation of their path trees.

    Builds a fresh BFS tree for every candidate, so this is O(C * (V + E)).
    Candidates whose average is undefined (isolated or unknown vertices)
    are left out.

    Args:
        graph: The collaboration graph
        centers: Candidate centers (default: every vertex in graph)

    Returns:
        List of (center, average) tuples, smallest average first. Ties keep
        candidate order.
    """
    candidates = list(graph.vertices()) if centers is None else list(centers)
    logger.info(f"Ranking {len(candidates):,} centers by average separation...")

    ranked_centers: list[V] = []
    averages: list[float] = []
    for center in candidates:
        avg = average_separation(bfs(graph, center), center)
        if avg is None:
            logger.debug(f"Skipping '{center}': no other vertices reachable")
            continue
        ranked_centers.append(center)
        averages.append(avg)

    order = np.argsort(np.asarray(averages, dtype=np.float64), kind="stable")
    return [(ranked_centers[i], averages[i]) for i in order]


def ranking_window(ranked: Sequence[T], n: int) -> list[T]:
    """
    Take the top or bottom of a ranking.

    Args:
        ranked: Best-first ranking
        n: Positive for the best n entries (best first), negative for the
            worst |n| entries (worst first)

    Raises:
        ValueError: If n is 0
    """
    if n == 0:
        raise ValueError("Ranking size must be non-zero")
    if n > 0:
        return list(ranked[:n])
    return list(reversed(ranked))[:-n]


# =============================================================================
# Random Walks
# =============================================================================

def _check_keep_on(keep_on: float) -> None:
    if not 0 < keep_on < 1:
        raise ValueError(f"keep_on must be between 0 and 1 (exclusive), got {keep_on}")


def random_walk(
    graph: Graph[V, E],
    start: V,
    keep_on: float = DEFAULT_KEEP_ON,
    rng: random.Random | None = None,
) -> list[V]:
    """
    Take a random walk from start along out-edges.

    Before each step the walk continues with probability keep_on. It stops
    early at a vertex with no out-edges.

    Returns:
        Vertices visited, starting with start; each has an edge to the next

    Raises:
        VertexNotFoundError: If start is not in graph
        ValueError: If keep_on is not strictly between 0 and 1
    """
    _check_keep_on(keep_on)
    if not graph.has_vertex(start):
        raise VertexNotFoundError(start)
    rng = rng or random.Random()

    path = [start]
    current = start
    while rng.random() < keep_on:
        if graph.out_degree(current) == 0:
            break
        current = rng.choice(list(graph.out_neighbors(current)))
        path.append(current)

    return path


def random_walks(
    graph: Graph[V, E],
    keep_on: float = DEFAULT_KEEP_ON,
    num_walks: int = DEFAULT_NUM_WALKS,
    rng: random.Random | None = None,
) -> dict[V, int]:
    """
    Count how often vertices are stepped onto over many random walks.

    Each walk starts at a uniformly random vertex; the start itself is not
    counted. The walks themselves are not kept.

    Returns:
        Mapping from every vertex in graph to its hit count

    Raises:
        ValueError: If keep_on is not strictly between 0 and 1, or
            num_walks is negative
    """
    _check_keep_on(keep_on)
    if num_walks < 0:
        raise ValueError(f"num_walks must be non-negative, got {num_walks}")
    rng = rng or random.Random()

    freqs = {v: 0 for v in graph.vertices()}
    if not freqs:
        return freqs

    starts = list(freqs)
    for _ in range(num_walks):
        current = rng.choice(starts)
        while rng.random() < keep_on and graph.out_degree(current) > 0:
            current = rng.choice(list(graph.out_neighbors(current)))
            freqs[current] += 1

    return freqs
