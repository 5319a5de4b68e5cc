"""
Loader for the pipe-delimited actor and movie files.

Three input files are expected:
    actors.txt        actor_id|actor name
    movies.txt        movie_id|movie title
    movie-actors.txt  movie_id|actor_id   (one line per cast member)

Usage:
    from bacon.data.loader import BaconData

    data = BaconData()
    graph = data.build_graph()
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path

from bacon.config import (
    ACTORS_PATH,
    FIELD_SEPARATOR,
    FILE_ENCODING,
    MOVIE_ACTORS_PATH,
    MOVIES_PATH,
    data_paths,
)
from bacon.graph.builder import build_graph
from bacon.graph.graph import Graph

logger = logging.getLogger(__name__)


def _read_pairs(path: Path) -> Iterator[tuple[str, str]]:
    """
    Yield (key, value) pairs from a pipe-delimited file.

    Blank lines are skipped. Only the first separator splits, so values
    may themselves contain '|'.

    Raises:
        ValueError: If a non-blank line has no separator
    """
    with open(path, encoding=FILE_ENCODING) as f:
        for line_no, line in enumerate(f, 1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            key, sep, value = line.partition(FIELD_SEPARATOR)
            if not sep:
                raise ValueError(f"{path}:{line_no}: expected '{FIELD_SEPARATOR}' in {line!r}")
            yield key.strip(), value.strip()


def read_id_map(path: Path) -> dict[str, str]:
    """Load an id|name file into a dict mapping id to name."""
    logger.info(f"Loading names from {path}...")
    id_map = dict(_read_pairs(path))
    logger.info(f"Loaded {len(id_map):,} names")
    return id_map


def read_membership(path: Path) -> dict[str, list[str]]:
    """
    Load a movie_id|actor_id file into a dict mapping movie id to actor ids.

    Actor ids keep the order of their first line in the file, so graphs
    built from the same files always enumerate costars the same way.
    """
    logger.info(f"Loading cast membership from {path}...")
    membership: dict[str, list[str]] = {}
    for movie_id, actor_id in _read_pairs(path):
        actor_ids = membership.setdefault(movie_id, [])
        if actor_id not in actor_ids:
            actor_ids.append(actor_id)
    logger.info(f"Loaded casts for {len(membership):,} movies")
    return membership


def movie_to_actors(
    actors: Mapping[str, str],
    movies: Mapping[str, str],
    membership: Mapping[str, Sequence[str]],
) -> dict[str, list[str]]:
    """
    Resolve ids to names: movie title -> names of actors in it.

    Every movie appears, with an empty list if it has no listed cast.
    Names keep membership order without duplicates. Actor ids with no
    name in actors are skipped.
    """
    cast: dict[str, list[str]] = {}
    for movie_id, title in movies.items():
        names = cast.setdefault(title, [])
        for actor_id in membership.get(movie_id, ()):
            name = actors.get(actor_id)
            if name is None:
                logger.warning(f"Unknown actor id '{actor_id}' in cast of '{title}'")
                continue
            if name not in names:
                names.append(name)

    unknown_movies = membership.keys() - movies.keys()
    if unknown_movies:
        logger.warning(f"Ignoring cast lists for {len(unknown_movies):,} unknown movie ids")

    return cast


class BaconData:
    """
    Lazy loader for the actor, movie, and cast files.

    Files are read on first access to any property.

    Attributes:
        actors_path: Path to the actor id|name file
        movies_path: Path to the movie id|title file
        movie_actors_path: Path to the movie id|actor id file
    """

    def __init__(
        self,
        actors_path: Path = ACTORS_PATH,
        movies_path: Path = MOVIES_PATH,
        movie_actors_path: Path = MOVIE_ACTORS_PATH,
    ) -> None:
        self.actors_path = Path(actors_path)
        self.movies_path = Path(movies_path)
        self.movie_actors_path = Path(movie_actors_path)
        self._initialized = False

    @classmethod
    def from_dir(cls, data_dir: Path) -> BaconData:
        """Create a loader for the standard file names inside data_dir."""
        paths = data_paths(data_dir)
        return cls(paths["actors"], paths["movies"], paths["movie_actors"])

    def _ensure_loaded(self) -> None:
        """Load all files on first access."""
        if self._initialized:
            return

        self._actors = read_id_map(self.actors_path)
        self._movies = read_id_map(self.movies_path)
        self._membership = read_membership(self.movie_actors_path)
        self._cast = movie_to_actors(self._actors, self._movies, self._membership)

        self._initialized = True

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def actors(self) -> dict[str, str]:
        """Actor id -> actor name."""
        self._ensure_loaded()
        return self._actors

    @property
    def movies(self) -> dict[str, str]:
        """Movie id -> movie title."""
        self._ensure_loaded()
        return self._movies

    @property
    def cast(self) -> dict[str, list[str]]:
        """Movie title -> names of actors in it."""
        self._ensure_loaded()
        return self._cast

    def build_graph(self) -> Graph[str, set[str]]:
        """Build the collaboration graph over every actor."""
        self._ensure_loaded()
        return build_graph(self._actors.values(), self._cast)

    def stats(self) -> dict:
        """Get statistics about the loaded data."""
        self._ensure_loaded()
        return {
            "actors": len(self._actors),
            "movies": len(self._movies),
            "cast_entries": sum(len(ids) for ids in self._membership.values()),
            "movies_without_cast": sum(1 for names in self._cast.values() if not names),
        }
