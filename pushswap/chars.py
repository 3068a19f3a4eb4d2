"""ASCII character classification and case conversion."""

from __future__ import annotations


def _code(char: str) -> int:
    if not isinstance(char, str):
        raise TypeError(f"expected a one-character string, got {char!r}")
    if len(char) != 1:
        raise ValueError(f"expected exactly one character, got {char!r}")
    return ord(char)


def is_alpha(char: str) -> bool:
    """Tell whether ``char`` is an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str) -> bool:
    """Tell whether ``char`` is an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str) -> bool:
    """Tell whether ``char`` is an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(code: int) -> bool:
    """Tell whether ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """Tell whether ``code`` is a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_upper(char: str) -> str:
    """Return the upper-case form of an ASCII letter; other characters as is."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        return chr(code - 32)
    return char


def to_lower(char: str) -> str:
    """Return the lower-case form of an ASCII letter; other characters as is."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        return chr(code + 32)
    return char