"""Checking command arguments and assets, and reading map files."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

from tilequest.textutil import split

ASSET_NAMES = (
    "background.xpm",
    "collectibe.xpm",
    "exit.xpm",
    "player.xpm",
    "wall.xpm",
)
MAP_EXTENSION = ".ber"


class MapError(Exception):
    """Raised when the arguments, assets or map file are unusable."""


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each keeping its trailing newline."""
    yield from iter(stream.readline, "")


def _openable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK | os.W_OK)


def check_extension(path: str | os.PathLike[str]) -> str:
    """Require a file name longer than the extension and ending in ``.ber``.

    Returns the path as a string.
    """
    text = os.fspath(path)
    name = text.rsplit("/", 1)[-1]
    if len(name) <= len(MAP_EXTENSION) or not name.endswith(MAP_EXTENSION):
        raise MapError("Wrong File Extension")
    return text


def check_assets(image_dir: str | os.PathLike[str]) -> None:
    """Require every tile image to be present in ``image_dir``."""
    base = Path(image_dir)
    if not all(_openable(base / name) for name in ASSET_NAMES):
        raise MapError("Missing XPM File")


def check_arguments(argv: Sequence[str], image_dir: str | os.PathLike[str]) -> str:
    """Validate the argument list (the map path alone) and return the path."""
    if len(argv) != 1:
        raise MapError("Accessibility Error")
    check_assets(image_dir)
    path = argv[0]
    if not _openable(Path(path)):
        raise MapError("Wrong File Path")
    return check_extension(path)


def _check_blank_lines(text: str) -> None:
    if "\n\n" in text or text == "\n":
        raise MapError("Map is not rectangular")


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file and return its rows without newlines.

    A blank line anywhere, except a single leading one, is an error.
    """
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            text = "".join(iter_lines(stream))
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError("Invalid Map") from exc
    _check_blank_lines(text)
    return split(text, "\n")