"""
Unit tests for the actor/movie file loader.

The TestBundledData class uses the sample files in data/ and is skipped
if they are missing.
"""

import pytest

from bacon.config import validate_data_files
from bacon.data import BaconData, movie_to_actors, read_id_map, read_membership
from bacon.game import BaconGame

ACTORS = "1|Kevin Bacon\n2|Alice\n3|Bob\n"
MOVIES = "10|Footloose\n20|Apollo 13\n30|Lost Reel\n"
MOVIE_ACTORS = "10|1\n10|2\n20|1\n20|3\n20|2\n"


class TestReaders:
    """Test the individual file readers."""

    def test_read_id_map(self, tmp_path):
        path = tmp_path / "actors.txt"
        path.write_text(ACTORS, encoding="utf-8")
        assert read_id_map(path) == {"1": "Kevin Bacon", "2": "Alice", "3": "Bob"}

    def test_read_id_map_preserves_file_order(self, tmp_path):
        path = tmp_path / "actors.txt"
        path.write_text("3|Bob\n1|Kevin Bacon\n", encoding="utf-8")
        assert list(read_id_map(path).values()) == ["Bob", "Kevin Bacon"]

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "actors.txt"
        path.write_text("1|Kevin Bacon\n\n   \n2|Alice\n", encoding="utf-8")
        assert len(read_id_map(path)) == 2

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "actors.txt"
        path.write_bytes(b"1|Kevin Bacon\r\n2|Alice\r\n")
        assert read_id_map(path) == {"1": "Kevin Bacon", "2": "Alice"}

    def test_split_on_first_separator_only(self, tmp_path):
        path = tmp_path / "movies.txt"
        path.write_text("1|Face|Off\n", encoding="utf-8")
        assert read_id_map(path) == {"1": "Face|Off"}

    def test_malformed_line_raises(self, tmp_path):
        path = tmp_path / "actors.txt"
        path.write_text("1|Kevin Bacon\nno separator here\n", encoding="utf-8")
        with pytest.raises(ValueError, match=":2:"):
            read_id_map(path)

    def test_unicode_names(self, tmp_path):
        path = tmp_path / "actors.txt"
        path.write_text("1|Penélope Cruz\n2|渡辺謙\n", encoding="utf-8")
        assert read_id_map(path)["1"] == "Penélope Cruz"

    def test_read_membership(self, tmp_path):
        path = tmp_path / "movie-actors.txt"
        path.write_text(MOVIE_ACTORS, encoding="utf-8")
        assert read_membership(path) == {"10": ["1", "2"], "20": ["1", "3", "2"]}


class TestMovieToActors:
    """Test id resolution."""

    def test_resolves_names(self):
        actors = {"1": "Kevin Bacon", "2": "Alice"}
        movies = {"10": "Footloose"}
        cast = movie_to_actors(actors, movies, {"10": ["2", "1"]})
        assert cast == {"Footloose": ["Alice", "Kevin Bacon"]}

    def test_movie_without_cast_is_empty(self):
        cast = movie_to_actors({"1": "Kevin Bacon"}, {"10": "Footloose"}, {})
        assert cast == {"Footloose": []}

    def test_unknown_actor_skipped(self):
        cast = movie_to_actors({"1": "Kevin Bacon"}, {"10": "Footloose"}, {"10": ["1", "99"]})
        assert cast == {"Footloose": ["Kevin Bacon"]}

    def test_unknown_movie_ignored(self):
        cast = movie_to_actors({"1": "Kevin Bacon"}, {"10": "Footloose"}, {"99": ["1"]})
        assert cast == {"Footloose": []}


class TestBaconData:
    """Test the lazy loader end to end."""

    def test_from_dir(self, write_data):
        data = BaconData.from_dir(write_data(ACTORS, MOVIES, MOVIE_ACTORS))
        assert data.actors["1"] == "Kevin Bacon"
        assert data.movies["20"] == "Apollo 13"
        assert data.cast["Apollo 13"] == ["Kevin Bacon", "Bob", "Alice"]
        assert data.cast["Lost Reel"] == []

    def test_lazy_loading(self, tmp_path):
        # Nothing is read until first access
        data = BaconData.from_dir(tmp_path)
        with pytest.raises(FileNotFoundError):
            _ = data.actors

    def test_build_graph(self, write_data):
        graph = BaconData.from_dir(write_data(ACTORS, MOVIES, MOVIE_ACTORS)).build_graph()
        assert list(graph.vertices()) == ["Kevin Bacon", "Alice", "Bob"]
        assert graph.get_label("Kevin Bacon", "Alice") == {"Footloose", "Apollo 13"}
        assert graph.get_label("Bob", "Alice") == {"Apollo 13"}

    def test_duplicate_membership_lines_collapse(self, tmp_path):
        path = tmp_path / "movie-actors.txt"
        path.write_text("10|2\n10|1\n10|2\n", encoding="utf-8")
        assert read_membership(path) == {"10": ["2", "1"]}

    @pytest.mark.parametrize(
        ("cast_lines", "costars", "path"),
        [
            ("1|2\n1|3\n1|1\n", ["B", "C"], ["D", "B", "A"]),
            ("1|3\n1|2\n1|1\n", ["C", "B"], ["D", "C", "A"]),
        ],
    )
    def test_costar_order_follows_file_order(self, write_data, cast_lines, costars, path):
        actors = "1|A\n2|B\n3|C\n4|D\n"
        movies = "1|m1\n2|m2\n3|m3\n"
        movie_actors = cast_lines + "2|2\n2|4\n3|3\n3|4\n"
        graph = BaconData.from_dir(write_data(actors, movies, movie_actors)).build_graph()

        assert list(graph.out_neighbors("A")) == costars
        game = BaconGame(graph, center="A")
        assert game.path_to("D").path == path

    def test_stats(self, write_data):
        stats = BaconData.from_dir(write_data(ACTORS, MOVIES, MOVIE_ACTORS)).stats()
        assert stats == {
            "actors": 3,
            "movies": 3,
            "cast_entries": 5,
            "movies_without_cast": 1,
        }


@pytest.mark.skipif(
    not all(validate_data_files().values()),
    reason="Data files not available",
)
class TestBundledData:
    """Test against the sample files shipped in data/."""

    @pytest.fixture
    def graph(self, data_dir):
        return BaconData.from_dir(data_dir).build_graph()

    def test_all_actors_loaded(self, graph):
        assert graph.num_vertices() == 7
        assert graph.has_vertex("Kevin Bacon")

    def test_collaborations(self, graph):
        assert graph.get_label("Alice", "Charlie") == {"C Movie"}
        assert graph.get_label("Kevin Bacon", "Bob") == {"B Movie"}
        assert not graph.has_edge("Kevin Bacon", "Charlie")

    def test_nobodies_disconnected_from_bacon(self, graph):
        assert graph.has_edge("Nobody", "Nobody's Friend")
        assert graph.out_degree("Nobody") == 1
