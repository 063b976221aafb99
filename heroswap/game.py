"""Playing the hero game on a validated map: moves, enemies and the prompt."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum

from .gamemap import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    HERO,
    WALL,
    GameMap,
    MapError,
    load_map,
)
from .printf import printf

ENEMY = "M"
DEAD_ENEMY = "D"

_KNOWN_TILES = frozenset({WALL, FLOOR, HERO, EXIT, COLLECTIBLE, ENEMY, DEAD_ENEMY})

_BAD_ARGUMENTS = "Ya comme un petit probleme d'arguments ici."
_UNKNOWN_TILE = "la map contient des caracteres inconnus"
_NO_HERO = "the map has no hero"
_GAME_OVER = "the game is over"
_WIN = "GOOD JOB YOU ARE A TRUE HERO"
_DEFEAT = "YOU FORCE SUBIT A DEFEAT"
_QUIT = "PLEUTRE, COUARD, LACHE"

_EXPLODE_KEYS = frozenset({" ", "x"})
_PROVOKE_KEYS = frozenset({"r"})
_QUIT_KEYS = frozenset({"q", "esc"})


class Direction(Enum):
    """A move of the hero, valued by the key that triggers it."""

    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.RIGHT: (0, 1),
}

# Order in which neighbours are examined by explode and provoke.
_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Outcome(Enum):
    """What a move attempt led to."""

    MOVED = "moved"
    COLLECTED = "collected"
    BLOCKED = "blocked"
    WON = "won"
    DEFEATED = "defeated"


class Game:
    """State of one game: the map, the move counter and the collectibles taken."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.total_collectibles = game_map.collectibles
        self.collected = 0
        self.moves = 0
        self.outcome: Outcome | None = None

    @property
    def finished(self) -> bool:
        return self.outcome in (Outcome.WON, Outcome.DEFEATED)

    def hero_position(self) -> tuple[int, int]:
        """Row and column of the hero."""
        position = self.map.find(HERO)
        if position is None:
            raise MapError(_NO_HERO)
        return position

    def _inside(self, position: tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.map.height and 0 <= col < self.map.width

    def _neighbours(self) -> list[tuple[int, int]]:
        row, col = self.hero_position()
        cells = [(row + dr, col + dc) for dr, dc in _NEIGHBOURS]
        return [cell for cell in cells if self._inside(cell)]

    def move(self, direction: Direction) -> Outcome:
        """Try to move the hero one cell and report what happened.

        Stepping on a collectible takes it and moves; stepping on an enemy
        loses; the exit wins once every collectible is taken and blocks
        otherwise, as do walls.
        """
        if self.finished:
            raise RuntimeError(_GAME_OVER)
        row, col = self.hero_position()
        dr, dc = direction.delta
        target = (row + dr, col + dc)
        if not self._inside(target):
            return Outcome.BLOCKED
        collected = False
        if self.map[target] == COLLECTIBLE:
            self.collected += 1
            self.map[target] = FLOOR
            collected = True
        tile = self.map[target]
        if tile == ENEMY:
            self.outcome = Outcome.DEFEATED
            return self.outcome
        if tile == EXIT and self.collected == self.total_collectibles:
            self.outcome = Outcome.WON
            return self.outcome
        if tile in (WALL, EXIT):
            return Outcome.BLOCKED
        self.map[row, col] = FLOOR
        self.map[target] = HERO
        self.moves += 1
        self.outcome = Outcome.COLLECTED if collected else Outcome.MOVED
        return self.outcome

    def explode(self) -> tuple[int, int] | None:
        """Kill the first enemy next to the hero (left, right, up, down)."""
        for cell in self._neighbours():
            if self.map[cell] == ENEMY:
                self.map[cell] = DEAD_ENEMY
                return cell
        return None

    def provoke(self) -> list[tuple[int, int]]:
        """Kill every enemy next to the hero and return their positions."""
        killed = [cell for cell in self._neighbours() if self.map[cell] == ENEMY]
        for cell in killed:
            self.map[cell] = DEAD_ENEMY
        return killed

    def render(self) -> str:
        """Return the map as text, one row per line."""
        if any(tile not in _KNOWN_TILES for _, tile in self.map):
            raise MapError(_UNKNOWN_TILE)
        return str(self.map)


def _error(message: str) -> int:
    sys.stdout.write(f"Error\n{message}\n")
    return 1


def _finish(game: Game) -> int:
    if game.outcome is Outcome.WON:
        sys.stdout.write(_WIN + "\n")
        return 1
    return _error(_DEFEAT)


def main(argv: Sequence[str] | None = None) -> int:
    """Play a ``.ber`` map from commands read on standard input.

    Commands: w, a, s, d to move, x or a space to explode, r to provoke,
    q or esc to give up. Every ending returns status 1.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _error(_BAD_ARGUMENTS)
    try:
        game = Game(load_map(args[0]))
        sys.stdout.write(game.render() + "\n")
        for line in sys.stdin:
            command = line.rstrip("\r\n")
            key = command if command == " " else command.strip().lower()
            if key in _QUIT_KEYS:
                break
            if key in {d.value for d in Direction}:
                outcome = game.move(Direction(key))
                if game.finished:
                    return _finish(game)
                if outcome is Outcome.BLOCKED:
                    continue
                printf("%d\n", game.moves)
            elif key in _EXPLODE_KEYS:
                game.explode()
            elif key in _PROVOKE_KEYS:
                game.provoke()
            else:
                continue
            sys.stdout.write(game.render() + "\n")
    except MapError as error:
        return _error(str(error))
    return _error(_QUIT)


if __name__ == "__main__":
    sys.exit(main())