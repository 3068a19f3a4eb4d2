import io
import random

import pytest

from pushswap.quick import Move, cheapest_move, move_to_b, quick_move, sort_large
from pushswap.stacks import Stacks

_OPS = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _is_rotation(first, second):
    if len(first) != len(second):
        return False
    if not first:
        return True
    doubled = first + first
    return any(doubled[i:i + len(second)] == second for i in range(len(first)))


def _shuffled(size, seed):
    numbers = list(range(-size, size * 3, 4))[:size]
    random.Random(seed).shuffle(numbers)
    return numbers


def test_cheapest_move_default_when_a_is_empty():
    stacks = Stacks([2, 1], out=io.StringIO())
    stacks.pb()
    stacks.pb()
    move = cheapest_move(stacks)
    assert (move.next_a, move.next_b, move.reverse) == (1, 1, False)
    assert move.cost == len(stacks.stack("a")) + len(stacks.stack("b")) + 2


def test_cheapest_move_finds_successor_pair():
    stacks = Stacks([5, 1, 3, 9], out=io.StringIO())
    stacks.pb()
    assert cheapest_move(stacks) == Move(cost=2, next_a=3, next_b=1, reverse=True)


def test_cheapest_move_does_not_change_stacks():
    stacks = Stacks([5, 1, 3, 9], out=io.StringIO())
    stacks.pb()
    before = (stacks.stack("a"), stacks.stack("b"))
    cheapest_move(stacks)
    assert (stacks.stack("a"), stacks.stack("b")) == before


@pytest.mark.parametrize("seed", range(5))
def test_move_to_b_keeps_extremes_in_a(seed):
    numbers = _shuffled(11, seed)
    stacks = Stacks(numbers, out=io.StringIO())
    move_to_b(stacks)
    a = stacks.stack("a")
    assert len(a) == 3
    assert min(numbers) in a and max(numbers) in a
    assert sorted(a + stacks.stack("b")) == sorted(numbers)


@pytest.mark.parametrize("size", [4, 5, 7, 10, 20, 33])
def test_sort_large_invariants(size):
    numbers = _shuffled(size, size * 7)
    out = io.StringIO()
    stacks = Stacks(numbers, out=out)
    sort_large(stacks)
    assert stacks.stack("b") == ()
    assert sorted(stacks.stack("a")) == sorted(numbers)
    printed = out.getvalue().split()
    assert set(printed) <= _OPS
    replayed = Stacks(numbers, out=io.StringIO())
    for op in printed:
        getattr(replayed, op)()
    assert replayed.stack("b") == ()
    assert _is_rotation(replayed.stack("a"), stacks.stack("a"))


def test_sort_large_four_descending_final_state():
    stacks = Stacks([4, 3, 2, 1], out=io.StringIO())
    sort_large(stacks)
    assert stacks.stack("a") == (2, 3, 4, 1)