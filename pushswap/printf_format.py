"""Flag, width and precision handling for printf conversions.

Each function takes the conversion specification (for example ``"%-+5d"``)
and the text converted so far, and returns the adjusted text.
"""

from __future__ import annotations

from .chars import is_alnum, is_digit, to_lower
from .parsing import atoi
from .textutil import cat, remove_chars

_HEX_DIGITS = "0123456789abcdef"


def _starts_empty(text: str) -> bool:
    return not text or text[0] == "\0"


def _precision(spec: str) -> int | None:
    dot = spec.find(".")
    return None if dot < 0 else atoi(spec[dot + 1:])


def hex_to_int(text: str) -> int:
    """Read a hexadecimal number, with an optional ``0x`` prefix.

    Characters that are not hexadecimal digits are skipped.
    """
    digits = text
    if len(text) >= 2 and text[0] == "0" and to_lower(text[1]) == "x":
        digits = text[2:]
    result = 0
    for char in map(to_lower, digits):
        value = _HEX_DIGITS.find(char)
        if value >= 0:
            result = result * 16 + value
    return result


def pad_precision_digits(text: str, count: int) -> str:
    """Insert ``count`` zeros after the leading non-alphanumeric characters.

    Nothing is inserted when no alphanumeric character follows them.
    """
    start = next(
        (index for index, char in enumerate(text) if is_alnum(char)),
        len(text),
    )
    prefix, rest = text[:start], text[start:]
    if not rest or count <= 0:
        return text
    return prefix + "0" * count + rest


def precision_numeric(spec: str, text: str) -> str:
    """Apply a decimal precision: the minimum number of digits.

    A zero value with precision zero becomes empty.
    """
    if _starts_empty(text):
        return text
    precision = _precision(spec)
    if precision is None:
        return text
    if precision == 0 and atoi(text) == 0:
        text = ""
    digits = sum(1 for char in text if is_digit(char))
    if precision > digits:
        text = pad_precision_digits(text, precision - digits)
    return text


def precision_hex(spec: str, text: str) -> str:
    """Apply a precision to hexadecimal text: the minimum number of digits."""
    if _starts_empty(text):
        return text
    precision = _precision(spec)
    if precision is None:
        return text
    if precision == 0 and hex_to_int(text) == 0:
        text = ""
    digits = sum(1 for char in text if is_alnum(char))
    if precision > digits:
        text = pad_precision_digits(text, precision - digits)
    return text


def precision_string(spec: str, text: str) -> str:
    """Apply a string precision: the maximum number of characters.

    The text ``(null)`` is dropped entirely when it does not fit.
    """
    if _starts_empty(text):
        return text
    precision = _precision(spec)
    if precision is None:
        return text
    if text == "(null)" and precision < 6:
        precision = 0
    return text[:max(precision, 0)]


def alternate_form(spec: str, text: str) -> str:
    """Prefix ``0x`` when the flags of ``spec`` hold ``#``."""
    for char in spec:
        if char == "." or "1" <= char <= "9":
            break
        if char == "#":
            return cat("0x", text)
    return text


def _wants_plus(spec: str) -> bool:
    for char in spec:
        if char == "." or "1" <= char <= "9":
            break
        if char == "+":
            return True
    return False


def _slide_sign(text: str) -> str:
    if not text or is_alnum(text[0]):
        return text
    rest = text[1:]
    spaces = len(rest) - len(rest.lstrip(" "))
    return " " * spaces + text[0] + rest[spaces:]


def place_sign(spec: str, text: str) -> str:
    """Put the sign of padded decimal text next to its digits.

    A minus sign moves to the front of zero padding and behind space
    padding; the ``+`` flag adds a plus sign to non-negative values.
    """
    if "-" in text:
        text = cat("-", remove_chars(text, "-"))
    if not _wants_plus(spec):
        return _slide_sign(text)
    if not text:
        return "+"
    if text[0] == "0":
        return cat("+", text)
    if text[0] == "-":
        return _slide_sign(text)
    if is_digit(text[0]):
        text = cat("+", text)
    return _slide_sign("+" + text[1:])


def _width_and_padding(spec: str) -> tuple[int, str]:
    padding = " "
    width = 0
    for index, char in enumerate(spec):
        if char == ".":
            break
        if char == "0" and "s" not in spec and "-" not in spec:
            padding = "0"
        elif is_digit(char):
            width = atoi(spec[index:])
            break
    if "." in spec:
        padding = " "
    return width, padding


def format_width(spec: str, text: str) -> str:
    """Pad ``text`` to the field width of ``spec``.

    A ``-`` flag aligns left, a ``0`` flag pads with zeros, and a space
    flag on a decimal conversion that fills its field adds a leading space.
    A NUL character (as printed by ``%c``) counts as one character.
    """
    width, padding = _width_and_padding(spec)
    visible = text.partition("\0")[0]
    empty = _starts_empty(text)
    length = len(visible) + (1 if empty else 0)
    if "+" in spec and width > length and "-" in spec and atoi(text) > 0:
        width -= 1
    if width >= length:
        if empty and "c" not in spec:
            text = padding * width
        else:
            piece = "\0" if empty else visible
            fill = padding * (width - length)
            text = piece + fill if "-" in spec else fill + piece
    if (
        "+" not in spec
        and " " in spec
        and atoi(text) >= 0
        and ("d" in spec or "i" in spec)
        and width <= length
    ):
        text = cat(" ", text)
    return text