"""
Game module.

Provides the Bacon Game on top of the collaboration graph:
- GameSession: Current center and its path tree
- PathResult / PathStep: Answer to a path query
- CenterChange: Answer to a change of center
- BaconGame: Query engine
- BaconConsole: Interactive command loop
"""

from bacon.game.console import BaconConsole, Command, parse_command
from bacon.game.engine import BaconGame, rebuild_tree, shortest_path, unreachable_set
from bacon.game.state import CenterChange, GameSession, PathResult, PathStep

__all__ = [
    "BaconGame",
    "BaconConsole",
    "Command",
    "parse_command",
    "CenterChange",
    "GameSession",
    "PathResult",
    "PathStep",
    "rebuild_tree",
    "shortest_path",
    "unreachable_set",
]
