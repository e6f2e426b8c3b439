"""Game state and movement rules for a loaded map."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

from tilequest.mapfile import MapError

PIXEL = 64

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_ESC = 65307

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"


class Direction(Enum):
    """A step on the grid as (dx, dy)."""

    UP = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Outcome(Enum):
    """What a key press or move led to."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"
    CLOSED = "closed"

    @property
    def message(self) -> str:
        """The text shown when the game ends this way, or an empty string."""
        return _MESSAGES.get(self, "")

    @property
    def ends_game(self) -> bool:
        return self in _MESSAGES


_MESSAGES = {Outcome.WON: "Win", Outcome.QUIT: "Exit_Game", Outcome.CLOSED: "Exit"}

_KEYS = {
    KEY_W: Direction.UP,
    KEY_A: Direction.LEFT,
    KEY_S: Direction.DOWN,
    KEY_D: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    """The direction bound to ``key``, or None for any other key."""
    return _KEYS.get(key)


class Game:
    """A player moving over a map, collecting items and heading for the exit."""

    def __init__(
        self,
        rows: Sequence[str],
        player: tuple[int, int],
        collectibles: int,
        output: TextIO | None = None,
    ) -> None:
        self._grid = [list(row) for row in rows]
        self.x, self.y = player
        self.collectibles = collectibles
        self.moves = 0
        self.output = output
        self.finished = False

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Game:
        """Start a game on ``rows``, at the player tile, counting collectibles."""
        player: tuple[int, int] | None = None
        collectibles = 0
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    player = (x, y)
                elif tile == COLLECTIBLE:
                    collectibles += 1
        if player is None:
            raise MapError("Invalid Map")
        return cls(rows, player, collectibles)

    @property
    def width(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    @property
    def height(self) -> int:
        return len(self._grid)

    @property
    def player(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def rows(self) -> list[str]:
        """The current map, with collected items replaced by floor."""
        return ["".join(row) for row in self._grid]

    def tile_at(self, x: int, y: int) -> str:
        """The tile at column ``x`` and row ``y``."""
        if not (0 <= y < self.height and 0 <= x < len(self._grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self._grid[y][x]

    def _passable(self, x: int, y: int) -> bool:
        try:
            return self.tile_at(x, y) != WALL
        except IndexError:
            return False

    def _report_progress(self) -> None:
        stream = sys.stdout if self.output is None else self.output
        stream.write(f"\rMover: {self.moves}")
        stream.flush()

    def move(self, direction: Direction) -> Outcome:
        """Step one tile in ``direction`` unless a wall is in the way."""
        if self.finished:
            raise RuntimeError("the game is over")
        nx, ny = self.x + direction.dx, self.y + direction.dy
        if not self._passable(nx, ny):
            return Outcome.BLOCKED
        self.x, self.y = nx, ny
        self._report_progress()
        self.moves += 1
        tile = self._grid[ny][nx]
        if tile == COLLECTIBLE:
            self.collectibles -= 1
            self._grid[ny][nx] = FLOOR
        elif tile == EXIT and self.collectibles == 0:
            self.finished = True
            return Outcome.WON
        return Outcome.MOVED

    def press(self, key: int) -> Outcome:
        """Handle a key: movement keys move, escape quits, others do nothing."""
        if self.finished:
            raise RuntimeError("the game is over")
        if key == KEY_ESC:
            self.finished = True
            return Outcome.QUIT
        direction = direction_for_key(key)
        if direction is None:
            return Outcome.IGNORED
        return self.move(direction)