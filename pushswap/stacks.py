"""The two push_swap stacks and the operations allowed on them."""

from __future__ import annotations

import enum
import sys
from collections import deque
from collections.abc import Iterable
from typing import TextIO

_NAMES = ("a", "b")


class OrderStatus(enum.IntEnum):
    """Result of checking whether a stack is in ascending order."""

    ORDERED = 0
    UNORDERED = 1
    TOO_SHORT = 2


class Stacks:
    """Stacks ``a`` and ``b``, with the top of each stack first.

    The named operations (``sa``, ``pb``, ``rra`` ...) write their own name
    to the output when they change something. In verbose mode they write a
    description of each step and the state of both stacks instead.
    """

    def __init__(
        self,
        numbers: Iterable[int] = (),
        verbose: bool = False,
        out: TextIO | None = None,
    ) -> None:
        self.verbose = verbose
        self._out = out
        self._stacks: dict[str, deque[int]] = {"a": deque(), "b": deque()}
        if verbose:
            self._emit("Adding to the bottom of stack a: ")
        for number in numbers:
            if verbose:
                self._emit(f"{number} ")
            self._stacks["a"].append(number)
        if verbose:
            self._emit("\n")

    # -- helpers ---------------------------------------------------------

    def _emit(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def _get(self, name: str) -> deque[int]:
        if name not in _NAMES:
            raise ValueError(f"no stack named {name!r}")
        return self._stacks[name]

    def _say(self, text: str) -> None:
        if self.verbose:
            self._emit(text)

    def _announce(self, label: str, changed: bool) -> None:
        if not self.verbose and changed:
            self._emit(f"{label}\n")
        self._show()

    def _show(self) -> None:
        if self.verbose:
            self._emit(self.render())

    # -- primitive moves -------------------------------------------------

    def push(self, name: str) -> bool:
        """Move the top of the other stack onto stack ``name``."""
        target = self._get(name)
        source = self._stacks["b" if name == "a" else "a"]
        if not source:
            self._say(f"\t\tno element on top to push to {name}\n")
            return False
        self._say(f"\tPushing the top element into {name}\n")
        target.appendleft(source.popleft())
        return True

    def swap(self, name: str) -> bool:
        """Swap the two top elements of stack ``name``."""
        stack = self._get(name)
        self._say(
            f"\tswaping the first 2 elements at the top of stack {name}\n"
        )
        if len(stack) < 2:
            self._say(f"\t\tno elements to swap in stack {name}!\n")
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    def rotate(self, name: str) -> bool:
        """Shift stack ``name`` up by one: the top goes to the bottom."""
        stack = self._get(name)
        self._say(f"\tShifting UP the elments of stack {name}\n")
        if len(stack) < 2:
            self._say(f"\t\tno elements to rotate in stack {name}!\n")
            return False
        stack.rotate(-1)
        return True

    def reverse(self, name: str) -> bool:
        """Shift stack ``name`` down by one: the bottom goes to the top."""
        stack = self._get(name)
        self._say(f"\tShifting DOWN the elments of stack {name}\n")
        if len(stack) < 2:
            self._say(
                f"\t\tno elements to reverse rotate in stack {name}!\n"
            )
            return False
        stack.rotate(1)
        return True

    # -- named operations ------------------------------------------------

    def pa(self) -> None:
        """Push the top of b onto a."""
        self._say("PA")
        self._announce("pa", self.push("a"))

    def pb(self) -> None:
        """Push the top of a onto b."""
        self._say("PB")
        self._announce("pb", self.push("b"))

    def sa(self) -> None:
        """Swap the top two of a."""
        self._say("SA")
        self._announce("sa", self.swap("a"))

    def sb(self) -> None:
        """Swap the top two of b."""
        self._say("SB")
        self._announce("sb", self.swap("b"))

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self._say("SS")
        changed_a = self.swap("a")
        changed_b = self.swap("b")
        self._announce("ss", changed_a or changed_b)

    def ra(self) -> None:
        """Rotate a up."""
        self._say("RA")
        self._announce("ra", self.rotate("a"))

    def rb(self) -> None:
        """Rotate b up."""
        self._say("RB")
        self._announce("rb", self.rotate("b"))

    def rr(self) -> None:
        """Rotate both stacks up."""
        self._say("RR")
        changed_a = self.rotate("a")
        changed_b = self.rotate("b")
        self._announce("rr", changed_a or changed_b)

    def rra(self) -> None:
        """Rotate a down."""
        self._say("RRA")
        self._announce("rra", self.reverse("a"))

    def rrb(self) -> None:
        """Rotate b down."""
        self._say("RRB")
        self._announce("rrb", self.reverse("b"))

    def rrr(self) -> None:
        """Rotate both stacks down."""
        self._say("RRR")
        changed_a = self.reverse("a")
        changed_b = self.reverse("b")
        self._announce("rrr", changed_a or changed_b)

    # -- queries ---------------------------------------------------------

    def stack(self, name: str) -> tuple[int, ...]:
        """Return the contents of stack ``name``, top first."""
        return tuple(self._get(name))

    def value_at(self, name: str, position: int) -> int:
        """Return the value at 1-based ``position`` from the top."""
        stack = self._get(name)
        if not 1 <= position <= len(stack):
            raise IndexError(f"stack {name} has no position {position}")
        return stack[position - 1]

    def position_of(self, name: str, value: int) -> int:
        """Return the 1-based position of ``value`` from the top."""
        stack = self._get(name)
        try:
            return stack.index(value) + 1
        except ValueError:
            raise ValueError(f"{value} is not in stack {name}") from None

    def smallest(self, name: str) -> int:
        """Return the smallest value of stack ``name``."""
        stack = self._get(name)
        if not stack:
            raise ValueError(f"stack {name} is empty")
        return min(stack)

    def largest(self, name: str) -> int:
        """Return the largest value of stack ``name``."""
        stack = self._get(name)
        if not stack:
            raise ValueError(f"stack {name} is empty")
        return max(stack)

    def check_order(self, name: str) -> OrderStatus:
        """Tell whether stack ``name`` is strictly ascending from the top.

        Stack a with fewer than two values, and an empty stack b, give
        ``TOO_SHORT``.
        """
        stack = self._get(name)
        if not stack or (name == "a" and len(stack) < 2):
            return OrderStatus.TOO_SHORT
        values = list(stack)
        if any(cur <= prev for prev, cur in zip(values, values[1:])):
            self._say(f"\033[33mStack {name} is not in order\033[0m\n")
            return OrderStatus.UNORDERED
        if self.verbose:
            colour = "\033[42m" if not self._stacks["b"] else "\033[32m"
            self._emit(
                f"{colour}Stack {name} looks to be in the correct order!"
                "\033[0m\n"
            )
        return OrderStatus.ORDERED

    def render(self) -> str:
        """Return both stacks as the coloured two-line listing."""
        a = self._stacks["a"]
        b = self._stacks["b"]
        a_text = "".join(f"{value} " for value in a)
        b_text = "".join(f"{value} " for value in b)
        return (
            f"\033[1;90ma({len(a)}): {a_text}\n"
            f"b({len(b)}): {b_text}\033[0m\n"
        )