"""Loading, checking and path-finding on tile maps stored in .ber files."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Union

from solong.linereader import LineReader

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
PLAYER = "P"
EXIT = "E"
FILLED = "F"

VALID_TILES = frozenset((WALL, FLOOR, COLLECTIBLE, PLAYER, EXIT))
_FLOODABLE = frozenset((FLOOR, COLLECTIBLE, PLAYER))
_MAP_SUFFIX = ".ber"

Grid = Sequence[Sequence[str]]
PathLike = Union[str, "os.PathLike[str]"]


class MapError(Exception):
    """A map file that cannot be read or does not describe a playable map."""


class _Counts(NamedTuple):
    players: int
    exits: int
    collectibles: int
    player: Optional[tuple[int, int]]


@dataclass
class GameMap:
    """A rectangular grid of tiles with the positions the game tracks."""

    grid: list[list[str]] = field(default_factory=list)
    collectibles: int = 0
    player_x: int = 0
    player_y: int = 0
    exit_x: int = -1
    exit_y: int = -1

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def _check_inside(self, x: int, y: int) -> None:
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")

    def tile(self, x: int, y: int) -> str:
        """The tile at column x, row y."""
        self._check_inside(x, y)
        return self.grid[y][x]

    def set_tile(self, x: int, y: int, tile: str) -> None:
        """Replace the tile at column x, row y."""
        if not isinstance(tile, str) or len(tile) != 1:
            raise ValueError(f"a tile is a single character, got {tile!r}")
        self._check_inside(x, y)
        self.grid[y][x] = tile

    def rows(self) -> list[str]:
        """The map as one string per row."""
        return ["".join(row) for row in self.grid]


def check_map_name(filename: PathLike) -> bool:
    """True when the file name ends with the .ber extension."""
    return os.fspath(filename).endswith(_MAP_SUFFIX)


def read_map_lines(filename: PathLike) -> list[str]:
    """The rows of a map file, without their line endings.

    An empty line anywhere in the file is an error, as is a file that
    cannot be opened.
    """
    name = os.fspath(filename)
    try:
        handle = open(name, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise MapError(f"Erreur : fichier {name} introuvable") from exc
    lines = []
    with handle:
        for line in LineReader(handle):
            if line == "\n":
                raise MapError("Erreur : ligne vide détectée dans la map")
            lines.append(line[:-1] if line.endswith("\n") else line)
    return lines


def check_map_characters(lines: Sequence[str]) -> None:
    """Raise MapError if any row holds a character that is not a tile."""
    for line in lines:
        if any(ch != "\n" and ch not in VALID_TILES for ch in line):
            raise MapError("Erreur : caractère invalide dans la map")


def is_rectangular(lines: Sequence[Sequence[str]]) -> bool:
    """True when there is at least one row and every row has the same width."""
    if not lines:
        return False
    width = len(lines[0])
    return all(len(line) == width for line in lines)


def is_map_enclosed(grid: Grid) -> None:
    """Raise MapError unless the outer border is made of walls only."""
    if not grid:
        return
    width = len(grid[0])
    top, bottom = grid[0], grid[-1]
    edges_ok = all(top[x] == WALL and bottom[x] == WALL for x in range(width))
    sides_ok = all(row[0] == WALL and row[width - 1] == WALL for row in grid)
    if not (edges_ok and sides_ok):
        raise MapError("Error\nMap pas valide")


def count_elements(grid: Grid) -> _Counts:
    """Count players, exits and collectibles.

    Returns a named tuple (players, exits, collectibles, player) where player
    is the (x, y) of the last player tile found, or None.
    """
    players = exits = collectibles = 0
    player = None
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                players += 1
                player = (x, y)
            elif tile == EXIT:
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1
    return _Counts(players, exits, collectibles, player)


def flood(grid: list[list[str]], x: int, y: int) -> None:
    """Mark with F every floor, collectible or player tile reachable from (x, y).

    Walls and the exit stop the fill. The grid is changed in place.
    """
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if cx < 0 or cy < 0 or cy >= len(grid) or cx >= len(grid[cy]):
            continue
        if grid[cy][cx] not in _FLOODABLE:
            continue
        grid[cy][cx] = FILLED
        pending.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))


def _tile_at(grid: Grid, x: int, y: int) -> Optional[str]:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def is_exit_reachable(grid: Grid, x: int, y: int) -> bool:
    """True when a neighbour of (x, y) has been reached by the fill."""
    neighbours = ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y))
    return any(_tile_at(grid, nx, ny) == FILLED for nx, ny in neighbours)


def find_exit_position(grid: Grid) -> Optional[tuple[int, int]]:
    """The (x, y) of the last exit tile in row order, or None."""
    found = None
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == EXIT:
                found = (x, y)
    return found


def is_valid_path(grid: Grid, x: int, y: int) -> bool:
    """True when, starting at (x, y), every collectible and the exit can be reached.

    The fill does not cross the exit. The grid itself is left unchanged.
    """
    exit_position = find_exit_position(grid)
    if exit_position is None:
        return False
    copy = [list(row) for row in grid]
    flood(copy, x, y)
    if not is_exit_reachable(copy, *exit_position):
        return False
    return not any(COLLECTIBLE in row for row in copy)


def parse_map(filename: PathLike) -> GameMap:
    """Read a .ber file and check its name, tiles, shape, border and contents.

    Whether the player can actually reach everything is left to
    is_valid_path.
    """
    if not check_map_name(filename):
        raise MapError("Erreur : le fichier doit se terminer par .ber")
    lines = read_map_lines(filename)
    check_map_characters(lines)
    if not is_rectangular(lines):
        raise MapError("Erreur : map non rectangulaire")
    grid = [list(line) for line in lines]
    is_map_enclosed(grid)
    counts = count_elements(grid)
    if counts.players != 1 or counts.exits != 1 or counts.collectibles < 1:
        raise MapError("Error\nMap must contain 1 P, 1 E and at least 1 C")
    player_x, player_y = counts.player
    exit_x, exit_y = find_exit_position(grid)
    return GameMap(
        grid=grid,
        collectibles=counts.collectibles,
        player_x=player_x,
        player_y=player_y,
        exit_x=exit_x,
        exit_y=exit_y,
    )