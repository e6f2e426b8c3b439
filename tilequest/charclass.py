"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code point.
The predicates return a bool. The converters return a value of the same
kind as their argument.
"""

from __future__ import annotations

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_ZERO, _NINE = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return _ZERO <= _code(c) <= _NINE


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: str | int) -> bool:
    """True for a code point from 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: str | int) -> str | int:
    """Turn an ASCII lower-case letter into upper case; leave others alone."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: str | int) -> str | int:
    """Turn an ASCII upper-case letter into lower case; leave others alone."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        code += _CASE_OFFSET
    return _same_kind(c, code)