"""Validating map rows and loading a playable map."""

from __future__ import annotations

import os
from collections import Counter, deque
from collections.abc import Sequence
from dataclasses import dataclass

from tilequest.mapfile import MapError, read_map

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
VALID_TILES = frozenset((WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE))


@dataclass(frozen=True)
class MapInfo:
    """A validated map: its rows, size, player start and collectible count."""

    rows: tuple[str, ...]
    width: int
    height: int
    player: tuple[int, int]
    collectibles: int


def is_rectangular(rows: Sequence[str]) -> bool:
    """True when there is at least one row and all rows share its length."""
    if not rows:
        return False
    width = len(rows[0])
    return all(len(row) == width for row in rows)


def is_walled(rows: Sequence[str]) -> bool:
    """True when the top and bottom rows and both side columns are all walls."""
    if not rows or not rows[0]:
        return False
    if any(top != WALL or bottom != WALL for top, bottom in zip(rows[0], rows[-1])):
        return False
    width = len(rows[0])
    return all(
        len(row) >= width and row[0] == WALL and row[width - 1] == WALL
        for row in rows
    )


def count_pieces(rows: Sequence[str]) -> tuple[int, int, int]:
    """Count players, exits and collectibles, in that order."""
    counts = Counter("".join(rows))
    return counts[PLAYER], counts[EXIT], counts[COLLECTIBLE]


def has_valid_tiles(rows: Sequence[str]) -> bool:
    """True when every tile is one of the known map characters."""
    return all(tile in VALID_TILES for row in rows for tile in row)


def check_map(rows: Sequence[str]) -> bool:
    """True for a rectangular, walled map with one player, one exit,
    at least one collectible and no unknown tiles."""
    if not (is_rectangular(rows) and is_walled(rows)):
        return False
    players, exits, collectibles = count_pieces(rows)
    if players != 1 or exits != 1 or collectibles == 0:
        return False
    return has_valid_tiles(rows)


def _find_player(rows: Sequence[str]) -> tuple[int, int]:
    found: tuple[int, int] | None = None
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                found = (x, y)
    if found is None:
        raise MapError("Invalid Map")
    return found


def check_reachable(
    rows: Sequence[str], start: tuple[int, int], collectibles: int
) -> None:
    """Require that the exit and every collectible can be reached from ``start``.

    Walls block movement; every other tile, the exit included, can be crossed.
    """
    seen: set[tuple[int, int]] = set()
    queue = deque([start])
    found_collectibles = 0
    found_exits = 0
    while queue:
        x, y = queue.popleft()
        if (x, y) in seen:
            continue
        if not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            continue
        tile = rows[y][x]
        if tile == WALL:
            continue
        seen.add((x, y))
        if tile == COLLECTIBLE:
            found_collectibles += 1
        elif tile == EXIT:
            found_exits += 1
        queue.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    if found_collectibles < collectibles or found_exits < 1:
        raise MapError("Map is not accessible")


def load_map(path: str | os.PathLike[str]) -> MapInfo:
    """Read, validate and check the reachability of the map at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            first_line = stream.readline()
    except OSError as exc:
        raise MapError("Fd open Error") from exc
    except UnicodeDecodeError as exc:
        raise MapError("Invalid Map") from exc
    if not first_line:
        raise MapError("NULL Map")
    rows = read_map(path)
    if not check_map(rows):
        raise MapError("Invalid Map")
    player = _find_player(rows)
    _, _, collectibles = count_pieces(rows)
    check_reachable(rows, player, collectibles)
    return MapInfo(
        rows=tuple(rows),
        width=len(rows[0]),
        height=len(rows),
        player=player,
        collectibles=collectibles,
    )