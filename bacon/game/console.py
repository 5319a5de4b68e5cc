"""
Interactive console for the Bacon Game.

Reads one command per line, dispatches it to a BaconGame, and prints the
result. This is the only layer that talks to the user.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from bacon.config import PROMPT
from bacon.game.engine import BaconGame
from bacon.graph.errors import GraphError

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
c <#>: list top (positive number) or bottom (negative) <#> centers of the universe, sorted by average separation
d <#>: list top (positive number) or bottom (negative) <#> actors sorted by degree
i: list actors with infinite separation from the current center
p <name>: find path from <name> to current center of the universe
s: show the average separation between current center and all actors connected to them
u <name>: make <name> the center of the universe
h: show this help
q: quit game"""

NAME_MODES = {"p", "u"}
COUNT_MODES = {"c", "d"}
PLAIN_MODES = {"i", "s", "h", "q"}


@dataclass
class Command:
    """
    A parsed console command.

    Attributes:
        mode: Single-letter command
        name: Actor name for 'p' and 'u'
        count: Signed ranking size for 'c' and 'd'
    """

    mode: str
    name: str | None = None
    count: int | None = None


def parse_command(line: str) -> Command:
    """
    Parse one line of console input.

    Raises:
        ValueError: If the command is unknown, a name is missing, or the
            count is not a non-zero integer
    """
    mode, _, rest = line.strip().partition(" ")
    rest = rest.strip()

    if mode in NAME_MODES:
        # Names may contain spaces; keep everything after the command
        name = " ".join(rest.split())
        if not name:
            raise ValueError("Missing name. Please check commands.")
        return Command(mode=mode, name=name)

    if mode in COUNT_MODES:
        terms = rest.split()
        if len(terms) != 1:
            raise ValueError("Invalid numeric input. Please check commands.")
        try:
            count = int(terms[0])
        except ValueError:
            raise ValueError("Invalid numeric input. Please check commands.") from None
        if count == 0:
            raise ValueError("Invalid numeric input. Please check commands.")
        return Command(mode=mode, count=count)

    if mode in PLAIN_MODES:
        return Command(mode=mode)

    raise ValueError("Invalid feature. Please check commands.")


class BaconConsole:
    """
    Command loop around a BaconGame.

    Example:
        console = BaconConsole(game)
        console.run()
    """

    def __init__(
        self,
        game: BaconGame,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._game = game
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._running = False

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def run(self) -> None:
        """Print the menu and process commands until 'q' or end of input."""
        self._print(HELP_TEXT)
        self._print_center()

        self._running = True
        while self._running:
            self._print()
            self._print(PROMPT)
            line = self._in.readline()
            if not line:
                break
            if not line.strip():
                continue
            self.handle(line)

    def handle(self, line: str) -> None:
        """Parse and execute one command, reporting errors to the user."""
        try:
            command = parse_command(line)
        except ValueError as e:
            self._print(str(e))
            return

        logger.debug(f"Command: {command}")
        try:
            self._dispatch(command)
        except GraphError as e:
            logger.debug(f"Query failed: {e}")
            self._print("Name not found. Please try again.")

    def _dispatch(self, command: Command) -> None:
        handlers = {
            "c": self._cmd_centers,
            "d": self._cmd_degree,
            "i": self._cmd_infinite,
            "p": self._cmd_path,
            "s": self._cmd_separation,
            "u": self._cmd_center,
            "h": self._cmd_help,
            "q": self._cmd_quit,
        }
        handlers[command.mode](command)

    # =========================================================================
    # Command Handlers
    # =========================================================================

    def _print_center(self) -> None:
        change = self._game.describe_center()
        self._print(
            f"{change.center} is now the center of the acting universe, "
            f"connected to {change.connected}/{change.total} actors."
        )

    def _cmd_centers(self, command: Command) -> None:
        ranked = self._game.best_centers(command.count)
        if not ranked:
            self._print(f"{self._game.center} is not connected to any other actor.")
            return

        if command.count > 0:
            self._print("Best possible Bacons (with smallest average separation):")
        else:
            self._print("Worst possible Bacons (with largest average separation):")
        for actor, avg in ranked:
            self._print(f"{actor}  {avg}")

    def _cmd_degree(self, command: Command) -> None:
        if command.count > 0:
            self._print("Best possible Bacons (with largest degree):")
        else:
            self._print("Worst possible Bacons (with smallest degree):")
        for actor, degree in self._game.best_by_degree(command.count):
            self._print(f"{actor}    {degree}")

    def _cmd_infinite(self, command: Command) -> None:
        self._print(f"The actors with infinite separation from {self._game.center}:")
        for actor in self._game.unreachable():
            self._print(actor)

    def _cmd_path(self, command: Command) -> None:
        result = self._game.path_to(command.name)
        if not result.reachable:
            self._print(f"The separation between {result.center} and {result.actor} is infinite.")
            return
        if result.separation == 0:
            self._print("They're the same person!")
            return

        self._print(f"{result.actor}'s number is {result.separation}")
        for step in result.steps:
            self._print(f"{step.actor} appeared in [{', '.join(step.movies)}] with {step.costar}")

    def _cmd_separation(self, command: Command) -> None:
        avg = self._game.average_separation()
        if avg is None:
            self._print(f"{self._game.center} is not connected to any other actor.")
        else:
            self._print(f"Average separation with center {self._game.center}: {avg}")

    def _cmd_center(self, command: Command) -> None:
        self._game.set_center(command.name)
        self._print_center()

    def _cmd_help(self, command: Command) -> None:
        self._print(HELP_TEXT)

    def _cmd_quit(self, command: Command) -> None:
        self._print()
        self._print("Game over. Thank you for playing!")
        self._running = False
