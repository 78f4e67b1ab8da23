"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

PathType = Union[str, "PathLike[str]"]

WALL = "1"
FREE = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "N"

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """A map file is missing, malformed or breaks one of the map rules."""


@dataclass(frozen=True)
class Counts:
    """How many of each map component a map holds."""

    free: int
    walls: int
    collectibles: int
    exits: int
    players: int
    enemies: int


@dataclass(frozen=True)
class GameMap:
    """A map as a tuple of rows, top row first."""

    rows: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "GameMap":
        """Build a map from file contents; empty lines are dropped."""
        return cls(tuple(line for line in text.split("\n") if line))

    @classmethod
    def load(cls, path: PathType) -> "GameMap":
        """Read a map from a file without validating it."""
        return cls(tuple(read_map_lines(path)))

    @property
    def width(self) -> int:
        """Length of the first row, 0 for an empty map."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def counts(self) -> Counts:
        """Count every kind of component on the map."""
        tally = Counter("".join(self.rows))
        return Counts(
            free=tally[FREE],
            walls=tally[WALL],
            collectibles=tally[COLLECTIBLE],
            exits=tally[EXIT],
            players=tally[PLAYER],
            enemies=tally[ENEMY],
        )

    def _scan(self) -> Iterator[tuple[int, int, str]]:
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                yield x, y, cell

    def find(self, char: str) -> tuple[int, int] | None:
        """Return ``(x, y)`` of the first ``char`` in the last row that has one."""
        for y in range(self.height - 1, -1, -1):
            x = self.rows[y].find(char)
            if x != -1:
                return x, y
        return None

    def positions(self, char: str) -> list[tuple[int, int]]:
        """Every ``(x, y)`` holding ``char``, row by row."""
        return [(x, y) for x, y, cell in self._scan() if cell == char]

    def is_rectangular(self) -> bool:
        """True if all rows share the first row's length and the map is not square."""
        if self.width == self.height:
            return False
        return all(len(row) == self.width for row in self.rows)

    def is_closed(self) -> bool:
        """True if the first and last rows and columns are all walls."""
        if not self.rows:
            return True
        last = self.width - 1
        top, bottom = self.rows[0], self.rows[-1]
        border = [top, bottom]
        if last >= 0:
            border.append("".join(row[0] for row in self.rows))
            border.append("".join(row[last] for row in self.rows))
        return all(set(line) <= {WALL} for line in border)


def has_map_extension(filename: str) -> bool:
    """True if the part from the last dot starts with ``.be``.

    Only the first three characters of the extension are compared.
    """
    dot = filename.rfind(".")
    if dot == -1:
        return False
    return filename[dot:dot + 3] == MAP_EXTENSION[:3]


def read_map_lines(path: PathType) -> list[str]:
    """Read a map file and return its non-empty lines."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("Invalide file!") from exc
    return [line for line in text.split("\n") if line]


def load_map(path: PathType) -> GameMap:
    """Load a map and check extension, shape, components and walls."""
    if not has_map_extension(str(path)):
        raise MapError("Invalide extension of map! (.ber)")
    game_map = GameMap.load(path)
    if not game_map.is_rectangular():
        raise MapError("The map is not rectangular!")
    counts = game_map.counts()
    if not (
        counts.walls > 0
        and counts.collectibles > 0
        and counts.exits == 1
        and counts.players == 1
    ):
        raise MapError("Invalide components in the map!")
    if not game_map.is_closed():
        raise MapError("The map not closed by walls!")
    return game_map