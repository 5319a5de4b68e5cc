"""
Data loading module.

Reads the pipe-delimited actor, movie, and cast files.

Usage:
    from bacon.data import BaconData

    data = BaconData.from_dir("data")
    data.cast["Footloose"]
    graph = data.build_graph()
"""

from bacon.data.loader import (
    BaconData,
    movie_to_actors,
    read_id_map,
    read_membership,
)

__all__ = ["BaconData", "movie_to_actors", "read_id_map", "read_membership"]
