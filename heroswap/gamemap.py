"""Reading and validating the rectangular tile maps of the hero game."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

WALL = "1"
FLOOR = "0"
HERO = "P"
EXIT = "E"
COLLECTIBLE = "C"

_CANNOT_OPEN = "Je refuse d'ouvrir une map aussi nulle"
_BAD_EXTENSION = "ceci n'est pas une map"
_EMPTY = "the map is empty"
_NOT_RECTANGULAR = "Have you read the subject? Map must be rectangular"
_BAD_WALLS = "WHAT HAPPENS WITH MY WALLS???"
_ONE_EXIT = "La Map doit avoir une seule entree"
_NO_COLLECTIBLE = "Il doit y avoir au minimun un collectible"
_ONE_HERO = "La map doit avoir un point de depart"
_UNREACHABLE = "une eruption empeche votre hero de partir en mission"


class MapError(ValueError):
    """The map file cannot be used."""


class GameMap:
    """A mutable rectangular grid of single-character tiles."""

    def __init__(self, rows: Iterable[str]) -> None:
        rows = list(rows)
        if not rows:
            raise MapError(_EMPTY)
        width = len(rows[0])
        if width == 0 or any(len(row) != width for row in rows):
            raise MapError(_NOT_RECTANGULAR)
        self.tiles: list[list[str]] = [list(row) for row in rows]
        self.height = len(rows)
        self.width = width

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self.tiles]

    @property
    def collectibles(self) -> int:
        return self.count(COLLECTIBLE)

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        return self.tiles[row][col]

    def __setitem__(self, position: tuple[int, int], tile: str) -> None:
        row, col = position
        self.tiles[row][col] = tile

    def __iter__(self) -> Iterator[tuple[tuple[int, int], str]]:
        for r, row in enumerate(self.tiles):
            for c, tile in enumerate(row):
                yield (r, c), tile

    def __str__(self) -> str:
        return "\n".join(self.rows)

    def __repr__(self) -> str:
        return f"GameMap({self.rows!r})"

    def count(self, tile: str) -> int:
        """Number of cells holding ``tile``."""
        return sum(row.count(tile) for row in self.tiles)

    def find(self, tile: str) -> tuple[int, int] | None:
        """Position of the first cell holding ``tile``, row by row."""
        return next((pos for pos, cell in self if cell == tile), None)

    def on_border(self, position: tuple[int, int]) -> bool:
        row, col = position
        return row in (0, self.height - 1) or col in (0, self.width - 1)


def check_extension(path: str | PathLike[str]) -> None:
    """Require the file name to end in ``.ber``."""
    if not str(path).endswith(".ber"):
        raise MapError(_BAD_EXTENSION)


def read_rows(path: str | PathLike[str]) -> list[str]:
    """Read a map file and return its lines without line breaks."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(_CANNOT_OPEN) from exc
    check_extension(path)
    if not text:
        raise MapError(_EMPTY)
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def check_walls(game_map: GameMap) -> None:
    """Require every border cell to be a wall."""
    if any(
        tile != WALL for pos, tile in game_map if game_map.on_border(pos)
    ):
        raise MapError(_BAD_WALLS)


def check_config(game_map: GameMap) -> None:
    """Require one exit, at least one collectible and one hero."""
    if game_map.count(EXIT) != 1:
        raise MapError(_ONE_EXIT)
    if game_map.collectibles == 0:
        raise MapError(_NO_COLLECTIBLE)
    if game_map.count(HERO) != 1:
        raise MapError(_ONE_HERO)


def flood_fill(game_map: GameMap) -> None:
    """Require the hero to reach every collectible and the exit.

    The walk stays off walls and border cells; the map is left unchanged.
    """
    start = game_map.find(HERO)
    if start is None:
        raise MapError(_ONE_HERO)
    seen: set[tuple[int, int]] = set()
    queue = deque([start])
    reached = 0
    while queue:
        pos = queue.popleft()
        if pos in seen or game_map.on_border(pos) or game_map[pos] == WALL:
            continue
        seen.add(pos)
        if game_map[pos] in (COLLECTIBLE, EXIT):
            reached += 1
        row, col = pos
        queue.extend(
            ((row, col + 1), (row, col - 1), (row + 1, col), (row - 1, col))
        )
    if reached != game_map.collectibles + 1:
        raise MapError(_UNREACHABLE)


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read a ``.ber`` file and return it once every check has passed."""
    game_map = GameMap(read_rows(path))
    check_walls(game_map)
    check_config(game_map)
    flood_fill(game_map)
    return game_map