import pytest

from pushswap.order import maximum_below, median, minimum_above, nth_smallest


VALUES = [5, -3, 9, 0, 7, 2]


def test_maximum_below_picks_closest_lower_value():
    assert maximum_below(VALUES, 7) == 5
    assert maximum_below(VALUES, 0) == -3


def test_maximum_below_without_lower_value_returns_minimum():
    assert maximum_below(VALUES, -3) == -3
    assert maximum_below(VALUES, -100) == min(VALUES)


def test_minimum_above_picks_closest_higher_value():
    assert minimum_above(VALUES, 2) == 5
    assert minimum_above(VALUES, -3) == 0


def test_minimum_above_without_higher_value_returns_maximum():
    assert minimum_above(VALUES, 9) == 9
    assert minimum_above(VALUES, 100) == max(VALUES)


@pytest.mark.parametrize("border", [-4, -3, 0, 1, 5, 6, 9, 10])
def test_below_and_above_are_consistent_with_sorted_order(border):
    ordered = sorted(VALUES)
    lower = [v for v in ordered if v < border]
    higher = [v for v in ordered if v > border]
    assert maximum_below(VALUES, border) == (lower[-1] if lower else ordered[0])
    assert minimum_above(VALUES, border) == (higher[0] if higher else ordered[-1])


def test_median_odd_length_is_middle_element():
    assert median([9, 1, 5]) == 5
    assert median([4, 8, 1, 3, 7]) == 4


def test_median_even_length_truncates_average():
    assert median([1, 2, 3, 4]) == 2
    assert median([10, 20]) == 15


def test_median_single_value():
    assert median([42]) == 42


def test_median_lies_between_extremes():
    data = [17, -4, 33, 8, 0, 12, -20, 5]
    result = median(data)
    assert min(data) <= result <= max(data)


def test_nth_smallest_walks_sorted_order():
    ordered = sorted(VALUES)
    for rank, expected in enumerate(ordered):
        assert nth_smallest(VALUES, rank) == expected


def test_nth_smallest_saturates_at_maximum():
    assert nth_smallest(VALUES, len(VALUES) + 5) == max(VALUES)


@pytest.mark.parametrize(
    "func",
    [
        lambda v: maximum_below(v, 0),
        lambda v: minimum_above(v, 0),
        median,
        lambda v: nth_smallest(v, 1),
    ],
)
def test_empty_values_raise(func):
    with pytest.raises(ValueError):
        func([])