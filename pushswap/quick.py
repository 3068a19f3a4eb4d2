"""Sorting strategy for stacks of more than three values."""

from __future__ import annotations

from dataclasses import dataclass

from .order import maximum_below, median, minimum_above, nth_smallest
from .small import sort_small
from .stacks import Stacks

_DIVISIONS = 4


@dataclass(frozen=True)
class Move:
    """A planned insertion of a value from stack b into stack a.

    ``next_a`` and ``next_b`` are 1-based positions; ``reverse`` tells
    whether the stacks are aligned by rotating down instead of up.
    """

    cost: int
    next_a: int
    next_b: int
    reverse: bool


def _note(stacks: Stacks, text: str) -> None:
    stacks._say(text)


def _show_state(stacks: Stacks) -> None:
    if stacks.verbose:
        _note(stacks, stacks.render())


def _costs(len_a: int, len_b: int, pos_a: int, pos_b: int) -> tuple[int, int]:
    forward = max(pos_a, pos_b)
    backward = max(len_a - pos_a + 2, len_b - pos_b + 2)
    if pos_a == 1:
        backward = len_b - pos_b + 2
    if pos_b == 1:
        forward = pos_a
    return forward, backward


def _plan(len_a: int, len_b: int, pos_a: int, pos_b: int) -> Move:
    forward, backward = _costs(len_a, len_b, pos_a, pos_b)
    reverse = backward < forward
    return Move(backward if reverse else forward, pos_a, pos_b, reverse)


def _cheapest(stacks: Stacks) -> Move:
    a = stacks.stack("a")
    b = stacks.stack("b")
    best = Move(len(a) + len(b) + 2, 1, 1, False)
    if not a or not b:
        return best
    lowest = min(a)
    for pos_a, value_a in enumerate(a, 1):
        if value_a == lowest:
            continue
        below = maximum_below(b, value_a)
        for pos_b, value_b in enumerate(b, 1):
            if value_b == below and value_a == minimum_above(a, value_b):
                candidate = _plan(len(a), len(b), pos_a, pos_b)
                if best.cost > candidate.cost:
                    best = candidate
    return best


def cheapest_move(stacks: Stacks) -> Move:
    """Find the cheapest value of b to insert above its successor in a.

    When no pair qualifies the move pushes the top of b as it stands.
    """
    _note(stacks, "\033[34mEconomic analysis\033[0m\n")
    move = _cheapest(stacks)
    if stacks.verbose and stacks.stack("a") and stacks.stack("b"):
        target = stacks.value_at("a", move.next_a)
        found = maximum_below(stacks.stack("b"), target)
        answer = "yes" if move.reverse else "no"
        _note(
            stacks,
            f"Found {found} to place above {target}\t\t"
            f"    cost: {move.cost} step. Reverse: {answer}\n",
        )
    return move


def _align_backward(stacks: Stacks, move: Move) -> None:
    len_a = len(stacks.stack("a"))
    len_b = len(stacks.stack("b"))
    steps_a = 0 if move.next_a == 1 else len_a - move.next_a + 1
    target = maximum_below(stacks.stack("b"), stacks.value_at("a", move.next_a))
    steps_b = 1 + len_b - stacks.position_of("b", target)
    while steps_a > 0 or steps_b > 0:
        if steps_a > 0 and steps_b > 0:
            stacks.rrr()
        elif steps_a > 0:
            stacks.rra()
        else:
            stacks.rrb()
        steps_a -= 1
        steps_b -= 1


def _align_forward(stacks: Stacks, move: Move) -> None:
    steps_a = move.next_a - 1
    steps_b = 0 if move.next_b == 1 else move.next_b - 1
    while steps_a > 0 or steps_b > 0:
        _note(stacks, f"stack a needs to rotate {steps_a} times\n")
        _note(stacks, f"stack b needs to rotate {steps_b} times\n")
        if steps_a > 0 and steps_b > 0:
            stacks.rr()
        elif steps_a > 0:
            stacks.ra()
        else:
            stacks.rb()
        steps_a -= 1
        steps_b -= 1


def _apply(stacks: Stacks, move: Move) -> None:
    if move.reverse:
        _align_backward(stacks, move)
    else:
        _align_forward(stacks, move)
    stacks.pa()


def _rotate_into_minimum(stacks: Stacks, name: str) -> None:
    values = stacks.stack(name)
    if not values:
        return
    lowest = min(values)
    if values[0] != lowest:
        steps = stacks.position_of(name, lowest)
        length = len(values)
        if steps > length // 2:
            for _ in range(length - steps + 1):
                stacks.reverse(name)
                _show_state(stacks)
        else:
            for _ in range(steps):
                stacks.rotate(name)
                _show_state(stacks)
    if stacks.verbose:
        stacks.check_order(name)


def move_to_b(stacks: Stacks) -> None:
    """Push everything but three values of a, keeping a's min and max.

    Values above the median of a are rotated to the bottom of b.
    """
    values = stacks.stack("a")
    middle = median(values) if values else 0
    _note(stacks, "\033[34mMoving to stack b\033[0m\n")
    while len(stacks.stack("a")) > 3:
        top = stacks.value_at("a", 1)
        if top != stacks.largest("a") and top != stacks.smallest("a"):
            stacks.pb()
            if stacks.value_at("b", 1) > middle:
                stacks.rb()
        else:
            stacks.ra()


def quick_move(stacks: Stacks) -> None:
    """Push a to b in four passes, each taking the smallest quarter.

    Within a pass, values above the middle of that quarter are rotated to
    the bottom of b.
    """
    chunk = len(stacks.stack("a")) // _DIVISIONS
    for _ in range(_DIVISIONS):
        values = stacks.stack("a")
        if not values:
            break
        middle = nth_smallest(values, chunk // 2)
        limit = nth_smallest(values, chunk)
        _note(stacks, "\033[34mMoving to stack b\033[0m\n")
        for _ in range(len(values)):
            if stacks.value_at("a", 1) < limit:
                stacks.pb()
                if stacks.value_at("b", 1) > middle:
                    stacks.rb()
            else:
                stacks.ra()


def sort_large(stacks: Stacks) -> None:
    """Sort a stack of more than three values using both stacks."""
    quick_move(stacks)
    sort_small(stacks)
    while stacks.stack("b"):
        _apply(stacks, cheapest_move(stacks))
    stacks.rra()
    _rotate_into_minimum(stacks, "a")