"""Formatted output with the conversions ``c s p d i u x X`` and ``%``.

A conversion specification is ``%[flags][width][.precision]conversion``,
with the flags ``-``, ``0``, ``+``, space and ``#``.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TextIO

from .printf_format import (
    alternate_form,
    format_width,
    place_sign,
    precision_hex,
    precision_numeric,
    precision_string,
)
from .textutil import itoa

_CONVERSIONS = "cspdiuxX%"
_SPEC = re.compile(r"%[^cspdiuxX%]*[cspdiuxX%]")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def _as_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value > 0x7FFFFFFF else value


def to_base(number: int, radix: int) -> str:
    """Write a non-negative ``number`` in ``radix``, with lower-case digits."""
    if not 2 <= radix <= len(_DIGITS):
        raise ValueError(f"unsupported radix: {radix}")
    if number < 0:
        raise ValueError("number must not be negative")
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(_DIGITS[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def format_integer(spec: str, value: int) -> str:
    """Format a signed 32-bit integer (``%d`` and ``%i``)."""
    text = itoa(_as_int32(value))
    text = precision_numeric(spec, text)
    text = format_width(spec, text)
    return place_sign(spec, text)


def format_char(spec: str, value: int | str) -> str:
    """Format one character (``%c``); a NUL character is kept as it is."""
    code = ord(value) if isinstance(value, str) else value
    return format_width(spec, chr(code & 0xFF))


def format_string(spec: str, value: str | None) -> str:
    """Format a string (``%s``); None prints as ``(null)``."""
    text = "(null)" if value is None else value
    text = precision_string(spec, text)
    return format_width(spec, text)


def format_unsigned(spec: str, value: int) -> str:
    """Format an unsigned 32-bit integer (``%u``)."""
    text = to_base(value & _UINT32, 10)
    text = precision_numeric(spec, text)
    return format_width(spec, text)


def format_hex(spec: str, value: int, upper: bool = False) -> str:
    """Format an unsigned 32-bit integer in hexadecimal (``%x``, ``%X``)."""
    number = value & _UINT32
    text = precision_hex(spec, to_base(number, 16))
    if number != 0:
        text = alternate_form(spec, text)
    if upper:
        text = text.upper()
    return format_width(spec, text)


def format_pointer(spec: str, value: int) -> str:
    """Format an address (``%p``); zero prints as ``(nil)``."""
    address = value & _UINT64
    text = "(nil)" if address == 0 else "0x" + to_base(address, 16)
    return format_width(spec, text)


def _convert(spec: str, take: Callable[[], Any]) -> str:
    conversion = spec[-1]
    if conversion == "%":
        return "%"
    if conversion == "c":
        return format_char(spec, take())
    if conversion == "s":
        return format_string(spec, take())
    if conversion in "di":
        return format_integer(spec, take())
    if conversion == "u":
        return format_unsigned(spec, take())
    if conversion == "x":
        return format_hex(spec, take(), False)
    if conversion == "X":
        return format_hex(spec, take(), True)
    return format_pointer(spec, take())


def _pieces(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    if fmt is None:
        raise FormatError("no format string")
    pending = iter(args)

    def take() -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise FormatError("not enough arguments for format") from None

    index = 0
    while index < len(fmt):
        percent = fmt.find("%", index)
        if percent < 0:
            yield fmt[index:]
            return
        if percent > index:
            yield fmt[index:percent]
        match = _SPEC.match(fmt, percent)
        if match is None:
            if fmt[percent:] == "%":
                yield "%"
            raise FormatError(f"unterminated conversion: {fmt[percent:]!r}")
        yield _convert(match.group(), take)
        index = match.end()


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted args."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write the formatted text and return the number of characters written.

    Text before a malformed conversion is written before FormatError is
    raised.
    """
    stream = out if out is not None else sys.stdout
    count = 0
    for piece in _pieces(fmt, args):
        stream.write(piece)
        count += len(piece)
    return count