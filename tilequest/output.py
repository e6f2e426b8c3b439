"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(ch: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _target(stream).write(ch)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; nothing is written for None or an empty string."""
    if text:
        _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of ``n``."""
    _target(stream).write(str(int(n)))