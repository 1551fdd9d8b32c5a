import pytest

from dsakit.searching import binary_search, bubble_sort, linear_search

SAMPLES = [
    [],
    [7],
    [3, 2, 1],
    [5, -1, 3, 3, 0, 12, -7],
    [1, 2, 3, 4, 5],
    [9, 1, 12, 5, 7, 20],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_bubble_sort_orders_values(values):
    assert bubble_sort(values) == sorted(values)


def test_bubble_sort_leaves_input_untouched():
    values = [4, 3, 2, 1]
    original = list(values)
    result = bubble_sort(values)
    assert values == original
    assert result == sorted(original)


def test_bubble_sort_accepts_iterables():
    assert bubble_sort(iter([3, 1, 2])) == sorted([3, 1, 2])


@pytest.mark.parametrize("values", SAMPLES)
def test_binary_search_finds_every_item(values):
    ordered = bubble_sort(values)
    for target in ordered:
        index = binary_search(ordered, target)
        assert ordered[index] == target


@pytest.mark.parametrize("values", SAMPLES)
def test_binary_search_reports_missing(values):
    ordered = bubble_sort(values)
    missing = max(ordered, default=0) + 1
    assert binary_search(ordered, missing) is None
    assert binary_search(ordered, min(ordered, default=0) - 1) is None


@pytest.mark.parametrize("values", SAMPLES)
def test_linear_search_returns_first_match(values):
    for target in values:
        index = linear_search(values, target)
        assert values[index] == target
        assert target not in values[:index]


def test_linear_search_reports_missing():
    assert linear_search([4, 5, 6], 99) is None
    assert linear_search([], 1) is None