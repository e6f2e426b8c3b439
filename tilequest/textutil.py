"""String helpers used when reading and reporting on map files."""

from __future__ import annotations

from collections.abc import Callable

_SPACE = " \t\n\v\f\r"


def _single_char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def atoi(text: str) -> int:
    """Parse a leading integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; no digits give 0.
    """
    stripped = text.lstrip(_SPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _single_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code point difference."""
    if n <= 0:
        return 0
    a, b = first[:n], second[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) < len(b):
        return -ord(b[len(a)])
    if len(a) > len(b):
        return ord(a[len(b)])
    return 0


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``; NUL finds the end."""
    ch = _single_char(ch)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``; NUL finds the end."""
    ch = _single_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` slots (one kept for the terminator).

    Returns the copied text and the full length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would need,
    or ``size + len(src)`` when ``dst`` is already longer than ``size``.
    """
    room = max(size - 1 - len(dst), 0) if size > 0 else 0
    result = dst + src[:room]
    if len(dst) > size:
        return result, size + len(src)
    return result, len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))