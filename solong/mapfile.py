"""Loading, parsing and validating game map files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Union

from solong.lines import read_all
from solong.strings import split, strchr, strncmp, strrchr

TILE_SIZE = 64

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
ENEMY = "X"
FILLED = "F"

MAP_SUFFIX = ".ber"

_KNOWN_TILES = frozenset({WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT, ENEMY})


class MapError(Exception):
    """A map file or its contents cannot be used."""


@dataclass
class GameMap:
    """A grid of tiles, indexed as layout[y][x]."""

    layout: list[list[str]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.layout)

    @property
    def cols(self) -> int:
        return len(self.layout[0]) if self.layout else 0

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self.cols * TILE_SIZE

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self.rows * TILE_SIZE

    def find(self, tile: str) -> Optional[tuple[int, int]]:
        """Return (x, y) of the first tile in row order, or None."""
        for y, row in enumerate(self.layout):
            for x, cell in enumerate(row):
                if cell == tile:
                    return x, y
        return None

    def count(self, tile: str) -> int:
        """Return how many cells hold tile."""
        return sum(row.count(tile) for row in self.layout)

    def copy(self) -> "GameMap":
        """Return an independent copy of the map."""
        return GameMap([list(row) for row in self.layout])

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.layout)


def parse_map(text: str) -> GameMap:
    """Build a map from text, one row per line; blank lines are dropped."""
    rows = split(text, "\n")
    if not rows:
        raise MapError("map is empty")
    return GameMap([list(row) for row in rows])


def load_map(path: Union[str, os.PathLike]) -> GameMap:
    """Read and parse the map file at path."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            text = read_all(stream)
    except OSError as exc:
        raise MapError(f"cannot read map file {os.fspath(path)}: {exc}") from exc
    return parse_map(text)


def check_map_name(path: Union[str, os.PathLike]) -> str:
    """Check that path names a readable map file and return it as a string.

    The file must open, the path must hold exactly one dot, not at its
    start, and the text from that dot must begin with the map suffix.
    """
    name = os.fspath(path)
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise MapError("Invalid map file") from exc
    first_dot = strchr(name, ".")
    last_dot = strrchr(name, ".")
    if last_dot is None or last_dot == 0 or first_dot != last_dot:
        raise MapError("Invalid arguments or map name")
    if strncmp(name[last_dot:], MAP_SUFFIX, len(MAP_SUFFIX)) != 0:
        raise MapError("Invalid arguments or map name")
    return name


def flood_fill(grid: list[list[str]], x: int, y: int) -> None:
    """Mark every cell reachable from (x, y) without crossing walls as filled.

    Bounds are taken from the number of rows and the length of the first row.
    """
    if not grid:
        return
    rows = len(grid)
    cols = len(grid[0])
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not (0 <= cx < cols and 0 <= cy < rows) or cx >= len(grid[cy]):
            continue
        if grid[cy][cx] in (WALL, FILLED):
            continue
        grid[cy][cx] = FILLED
        pending.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))


def _check_objects(game_map: GameMap) -> None:
    unknown = {cell for row in game_map.layout for cell in row} - _KNOWN_TILES
    if unknown:
        raise MapError(f"unexpected tiles: {''.join(sorted(unknown))!r}")
    if game_map.count(COLLECTIBLE) < 1:
        raise MapError("map needs at least one collectible")
    if game_map.count(PLAYER) != 1:
        raise MapError("map needs exactly one player")
    if game_map.count(EXIT) != 1:
        raise MapError("map needs exactly one exit")
    if game_map.count(ENEMY) > 1:
        raise MapError("map may hold at most one enemy")


def _check_limits(game_map: GameMap) -> None:
    layout = game_map.layout
    if any(cell != WALL for cell in layout[0]):
        raise MapError("top row must be all walls")
    for row in layout[1:-1]:
        if row[0] != WALL or row[-1] != WALL:
            raise MapError("side columns must be walls")
    if any(cell != WALL for cell in layout[-1]):
        raise MapError("bottom row must be all walls")


def _check_reachable(game_map: GameMap) -> None:
    grid = game_map.copy().layout
    x, y = game_map.find(PLAYER)
    flood_fill(grid, x, y)
    if any(cell in (COLLECTIBLE, EXIT) for row in grid for cell in row):
        raise MapError("collectibles or exit cannot be reached")


def validate_map(game_map: GameMap) -> None:
    """Raise MapError unless the map is playable; the map is not changed."""
    _check_objects(game_map)
    cols = game_map.cols
    if any(len(row) != cols for row in game_map.layout):
        raise MapError("map must be rectangular")
    _check_limits(game_map)
    _check_reachable(game_map)