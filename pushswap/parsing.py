"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""


def _wrap_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - 0x100000000 if number > _INT_MAX else number


def _sign_and_digits(text: str, start: int) -> tuple[int, str, int]:
    index = start
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    end = index
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return sign, text[index:end], end


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` as a 32-bit ``int``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and a missing number gives 0.
    """
    start = 0
    while start < len(text) and text[start] in _WHITESPACE:
        start += 1
    sign, digits, _ = _sign_and_digits(text, start)
    return _wrap_int32(sign * int(digits or "0"))


def is_int(text: str) -> bool:
    """Tell whether ``text`` is entirely an optionally signed 32-bit integer."""
    sign, digits, end = _sign_and_digits(text, 0)
    if end != len(text):
        return False
    number = sign * int(digits or "0")
    return _INT_MIN <= number <= _INT_MAX


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def _check_words(words: Sequence[str]) -> None:
    seen: set[int] = set()
    for word in words:
        if not is_int(word):
            raise InputError(f"not an integer: {word!r}")
        number = atoi(word)
        if number in seen:
            raise InputError(f"duplicate number: {number}")
        seen.add(number)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the command-line arguments into the numbers for stack a.

    The numbers are either given one per argument, or all in a single
    argument separated by spaces. Raises InputError on anything else.
    """
    try:
        _check_words(args)
    except InputError as separate_error:
        if len(args) != 1:
            raise separate_error
        words = split_words(args[0], " ")
        _check_words(words)
        return [atoi(word) for word in words]
    return [atoi(word) for word in args]