"""Small string helpers with the bounded-copy semantics of C string routines."""

from __future__ import annotations

from itertools import zip_longest

_INT_MIN = -2147483648
_INT_MAX = 2147483647


def cat(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if first is None or second is None:
        raise TypeError("cannot concatenate a missing string")
    return first + second


def remove_chars(text: str, chars: str) -> str:
    """Return ``text`` with every character found in ``chars`` removed."""
    if text is None or chars is None:
        raise TypeError("text and chars are required")
    unwanted = set(chars)
    return "".join(char for char in text if char not in unwanted)


def itoa(number: int) -> str:
    """Return the decimal form of a 32-bit signed integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    if text is None:
        raise TypeError("text is required")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove the characters of ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("text and charset are required")
    return text.strip(charset) if charset else text


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 for an empty ``little``, or
    None when there is no match.
    """
    if not little:
        return 0
    index = big[:max(length, 0)].find(little)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering.

    The end of a string compares as a NUL character, and comparison stops
    there.
    """
    pairs = zip_longest(first[:n], second[:n], fillvalue="\0")
    for left, right in pairs:
        if left != right or left == "\0":
            return ord(left) - ord(right)
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text and the full length of ``src``, so truncation
    shows as a length of at least ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``dst`` already fills the buffer it is left as it is and the
    length reported is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    len_dst = min(len(dst), size)
    if len_dst == size:
        return dst, size + len(src)
    room = size - len_dst - 1
    return dst[:len_dst] + src[:room], len_dst + len(src)


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    if len(first) < n or len(second) < n:
        raise ValueError(f"both buffers must hold at least {n} bytes")
    for left, right in zip(first[:n], second[:n]):
        if left != right:
            return left - right
    return 0