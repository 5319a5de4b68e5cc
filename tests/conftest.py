"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from bacon.graph import Graph, build_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the bundled sample data directory."""
    return project_root / "data"


@pytest.fixture
def chain_graph() -> Graph:
    """A - B - C, connected through movie1 and movie2."""
    return build_graph(["A", "B", "C"], {"movie1": {"A", "B"}, "movie2": {"B", "C"}})


@pytest.fixture
def chain_with_isolated() -> Graph:
    """The chain graph plus an actor D who shares no movies."""
    return build_graph(["A", "B", "C", "D"], {"movie1": {"A", "B"}, "movie2": {"B", "C"}})


@pytest.fixture
def bacon_graph() -> Graph:
    """
    Small universe mirroring data/:

        Kevin Bacon - Alice, Kevin Bacon - Bob       (A Movie, B Movie)
        Alice - Bob - Charlie                         (C Movie)
        Charlie - Dartmouth                           (D Movie)
        Nobody - Nobody's Friend                      (E Movie)
    """
    actors = [
        "Kevin Bacon",
        "Alice",
        "Bob",
        "Charlie",
        "Dartmouth (Earl thereof)",
        "Nobody",
        "Nobody's Friend",
    ]
    cast = {
        "A Movie": ["Kevin Bacon", "Alice"],
        "B Movie": ["Kevin Bacon", "Bob"],
        "C Movie": ["Alice", "Bob", "Charlie"],
        "D Movie": ["Charlie", "Dartmouth (Earl thereof)"],
        "E Movie": ["Nobody", "Nobody's Friend"],
        "F Movie": [],
    }
    return build_graph(actors, cast)


@pytest.fixture
def write_data(tmp_path: Path):
    """Write the three input files into tmp_path and return the directory."""

    def _write(actors: str, movies: str, movie_actors: str) -> Path:
        (tmp_path / "actors.txt").write_text(actors, encoding="utf-8")
        (tmp_path / "movies.txt").write_text(movies, encoding="utf-8")
        (tmp_path / "movie-actors.txt").write_text(movie_actors, encoding="utf-8")
        return tmp_path

    return _write
