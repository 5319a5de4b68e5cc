"""
Unit tests for the BaconGame query engine.
"""

import pytest

from bacon.game import (
    BaconGame,
    GameSession,
    rebuild_tree,
    shortest_path,
    unreachable_set,
)
from bacon.graph import VertexNotFoundError

DARTMOUTH = "Dartmouth (Earl thereof)"


@pytest.fixture
def game(bacon_graph) -> BaconGame:
    return BaconGame(bacon_graph, center="Kevin Bacon")


class TestEntryPoints:
    """Test the functional query entry points."""

    def test_rebuild_tree(self, chain_graph):
        tree = rebuild_tree(chain_graph, "A")
        assert tree.num_vertices() == 3

    def test_shortest_path(self, chain_graph):
        tree = rebuild_tree(chain_graph, "A")
        assert shortest_path(tree, "C") == ["A", "B", "C"]

    def test_shortest_path_unreachable(self, chain_with_isolated):
        tree = rebuild_tree(chain_with_isolated, "A")
        assert shortest_path(tree, "D") is None

    def test_unreachable_set(self, chain_with_isolated):
        tree = rebuild_tree(chain_with_isolated, "A")
        assert unreachable_set(chain_with_isolated, tree) == {"D"}


class TestSession:
    """Test center management."""

    def test_initial_center(self, game):
        assert game.center == "Kevin Bacon"
        assert isinstance(game.session, GameSession)
        assert game.session.connected_count == 4

    def test_unknown_initial_center(self, bacon_graph):
        with pytest.raises(VertexNotFoundError):
            BaconGame(bacon_graph, center="Nobody Famous")

    def test_describe_center(self, game):
        change = game.describe_center()
        assert (change.center, change.connected, change.total) == ("Kevin Bacon", 4, 7)

    def test_set_center_rebuilds_tree(self, game):
        old_tree = game.session.tree
        change = game.set_center("Nobody")
        assert change.center == "Nobody"
        assert change.connected == 1
        assert game.session.tree is not old_tree
        assert game.unreachable() == [
            "Alice",
            "Bob",
            "Charlie",
            DARTMOUTH,
            "Kevin Bacon",
        ]

    def test_set_unknown_center_keeps_session(self, game):
        with pytest.raises(VertexNotFoundError):
            game.set_center("Nobody Famous")
        assert game.center == "Kevin Bacon"


class TestPathQueries:
    """Test path queries."""

    def test_path_with_movies(self, game):
        result = game.path_to(DARTMOUTH)
        assert result.reachable
        assert result.separation == 3
        assert result.path == [DARTMOUTH, "Charlie", "Alice", "Kevin Bacon"]
        assert [(s.actor, s.costar, s.movies) for s in result.steps] == [
            (DARTMOUTH, "Charlie", ["D Movie"]),
            ("Charlie", "Alice", ["C Movie"]),
            ("Alice", "Kevin Bacon", ["A Movie"]),
        ]

    def test_path_to_center(self, game):
        result = game.path_to("Kevin Bacon")
        assert result.separation == 0
        assert result.path == ["Kevin Bacon"]
        assert result.steps == []

    def test_unreachable_actor(self, game):
        result = game.path_to("Nobody")
        assert not result.reachable
        assert result.separation is None
        assert result.path == []

    def test_unknown_actor_raises(self, game):
        with pytest.raises(VertexNotFoundError):
            game.path_to("Nobody Famous")

    def test_path_follows_center_change(self, game):
        game.set_center("Charlie")
        assert game.path_to("Kevin Bacon").separation == 2


class TestStatistics:
    """Test separation statistics and rankings."""

    def test_unreachable(self, game):
        assert game.unreachable() == ["Nobody", "Nobody's Friend"]

    def test_average_separation(self, game):
        assert game.average_separation() == pytest.approx(1.75)

    def test_average_separation_undefined(self, bacon_graph):
        bacon_graph.insert_vertex("Hermit")
        game = BaconGame(bacon_graph, center="Hermit")
        assert game.average_separation() is None

    def test_best_centers(self, game):
        assert game.best_centers(2) == [
            ("Alice", pytest.approx(1.25)),
            ("Bob", pytest.approx(1.25)),
        ]

    def test_worst_centers(self, game):
        assert game.best_centers(-2) == [
            (DARTMOUTH, pytest.approx(2.0)),
            ("Kevin Bacon", pytest.approx(1.75)),
        ]

    def test_centers_limited_to_component(self, game):
        centers = [name for name, _ in game.best_centers(100)]
        assert len(centers) == 5
        assert "Nobody" not in centers

    def test_best_by_degree(self, game):
        assert game.best_by_degree(2) == [("Alice", 3), ("Bob", 3)]

    def test_worst_by_degree(self, game):
        assert game.best_by_degree(-2) == [("Nobody's Friend", 1), ("Nobody", 1)]

    @pytest.mark.parametrize("method", ["best_centers", "best_by_degree"])
    def test_zero_rejected(self, game, method):
        with pytest.raises(ValueError):
            getattr(game, method)(0)
