"""Order queries over the values of a stack."""

from __future__ import annotations

from collections.abc import Sequence


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("empty stack has no order statistics")


def maximum_below(values: Sequence[int], border: int) -> int:
    """Return the largest value strictly below ``border``.

    When no value lies below ``border`` the smallest value is returned.
    """
    _require_values(values)
    below = [value for value in values if value < border]
    return max(below) if below else min(values)


def minimum_above(values: Sequence[int], border: int) -> int:
    """Return the smallest value strictly above ``border``.

    When no value lies above ``border`` the largest value is returned.
    """
    _require_values(values)
    above = [value for value in values if value > border]
    return min(above) if above else max(values)


def _truncating_half(total: int) -> int:
    half = abs(total) // 2
    return half if total >= 0 else -half


def median(values: Sequence[int]) -> int:
    """Return the median, averaging the two middle values for even sizes.

    The average is truncated toward zero.
    """
    _require_values(values)
    length = len(values)
    steps = length // 2 - 1 if length % 2 == 0 else (length - 1) // 2
    middle = max(values)
    for _ in range(steps):
        middle = maximum_below(values, middle)
    if length % 2 == 0:
        middle = _truncating_half(middle + maximum_below(values, middle))
    return middle


def nth_smallest(values: Sequence[int], n: int) -> int:
    """Return the value ``n`` ranks above the minimum (0 gives the minimum).

    Ranks past the end stay at the maximum.
    """
    _require_values(values)
    current = min(values)
    for _ in range(max(n, 0)):
        current = minimum_above(values, current)
    return current