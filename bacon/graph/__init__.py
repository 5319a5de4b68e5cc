"""
Graph algorithms module.

Provides the labeled graph and the analyses run on it:
- Graph: Adjacency-map graph with labeled edges
- build_graph: Actor collaboration graph from movie casts
- bfs / get_path: Shortest path trees and paths back to the center
- analytics: Average separation, degree and frequency ranking, random walks
"""

from bacon.graph.analytics import (
    average_separation,
    missing_vertices,
    random_walk,
    random_walks,
    rank_by_average_separation,
    ranking_window,
    separations,
    sum_of_paths,
    vertices_by_frequency,
    vertices_by_in_degree,
)
from bacon.graph.builder import build_graph
from bacon.graph.errors import EdgeNotFoundError, GraphError, VertexNotFoundError
from bacon.graph.graph import Graph
from bacon.graph.traversal import bfs, get_path

__all__ = [
    "Graph",
    "GraphError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "build_graph",
    "bfs",
    "get_path",
    "average_separation",
    "missing_vertices",
    "random_walk",
    "random_walks",
    "rank_by_average_separation",
    "ranking_window",
    "separations",
    "sum_of_paths",
    "vertices_by_frequency",
    "vertices_by_in_degree",
]
