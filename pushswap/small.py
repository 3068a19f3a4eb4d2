"""Sorting strategies for short stacks."""

from __future__ import annotations

from .stacks import OrderStatus, Stacks


def _note(stacks: Stacks, text: str) -> None:
    stacks._say(text)


def _sort_three(stacks: Stacks) -> None:
    first, second, third = stacks.stack("a")
    if first > second and first > third:
        stacks.ra()
        if stacks.check_order("a") != OrderStatus.ORDERED:
            stacks.sa()
            stacks.check_order("a")
    elif first < second and first < third:
        stacks.rra()
        stacks.sa()
        stacks.check_order("a")
    elif second < third:
        stacks.sa()
        stacks.check_order("a")
    else:
        stacks.rra()
        stacks.check_order("a")


def sort_small(stacks: Stacks) -> None:
    """Sort stack a when it holds at most three values."""
    _note(stacks, "\033[34mOrdering stack a\033[0m\n")
    size = len(stacks.stack("a"))
    if size == 1:
        _note(stacks, "There's only one. Must be ordered\n")
    elif size == 2:
        if stacks.check_order("a") != OrderStatus.ORDERED:
            stacks.sa()
            stacks.check_order("a")
    elif size == 3 and stacks.check_order("a") != OrderStatus.ORDERED:
        _sort_three(stacks)


def bubble_sort(stacks: Stacks, name: str) -> None:
    """Sort stack ``name`` with swaps and rotations only.

    The top two values are swapped when they are out of order and the top
    one is not the largest; otherwise the stack is rotated. This repeats
    until the stack is in ascending order.
    """
    operations = {"a": (stacks.sa, stacks.ra), "b": (stacks.sb, stacks.rb)}
    if name not in operations:
        raise ValueError(f"no stack named {name!r}")
    swap, rotate = operations[name]
    _note(stacks, f"Iniciating BUBLE SORT at {name}\n")
    while True:
        top = stacks.value_at(name, 1)
        second = stacks.value_at(name, 2)
        _note(
            stacks,
            f"Buble sort: comparing postions 1 ({top}) and 2 ({second})\n",
        )
        if top > second and top != stacks.largest(name):
            swap()
        else:
            rotate()
        if stacks.check_order(name) == OrderStatus.ORDERED:
            break
    _note(stacks, f"Ending buble sort at {name}\n")