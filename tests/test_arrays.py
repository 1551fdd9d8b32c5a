import pytest

from dsakit.arrays import (
    column_totals,
    insert_at,
    insert_sorted,
    merge_sorted,
    multiply_matrices,
    remove_at,
    remove_value,
    row_totals,
    swap_min_max,
)


@pytest.mark.parametrize(
    "values, item",
    [([], 5), ([1, 3, 5], 4), ([1, 3, 5], 0), ([1, 3, 5], 9), ([2, 2, 2], 2)],
)
def test_insert_sorted_keeps_order(values, item):
    result = insert_sorted(values, item)
    assert result == sorted(values + [item])
    assert len(result) == len(values) + 1


def test_insert_sorted_does_not_mutate():
    values = [1, 2, 3]
    insert_sorted(values, 0)
    assert values == [1, 2, 3]


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_insert_at_places_item(position):
    values = [10, 20, 30]
    result = insert_at(values, 99, position)
    assert result[position] == 99
    assert remove_at(result, position) == values


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_at_rejects_bad_position(position):
    with pytest.raises(IndexError):
        insert_at([1, 2, 3], 0, position)


@pytest.mark.parametrize(
    "first, second",
    [([], []), ([1, 4, 9], []), ([], [2, 3]), ([1, 4, 9], [2, 4, 10, 11]), ([5], [1, 2, 3])],
)
def test_merge_sorted(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


def test_multiply_matrices_by_identity():
    a = [[1, 2, 3], [4, 5, 6]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert multiply_matrices(a, identity) == a


def test_multiply_matrices_value():
    assert multiply_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_matrices_rejects_mismatch():
    with pytest.raises(ValueError):
        multiply_matrices([[1, 2]], [[1, 2]])


def test_swap_min_max_moves_extremes():
    values = [4, 9, 1, 7, 3]
    result = swap_min_max(values)
    assert sorted(result) == sorted(values)
    assert result[values.index(max(values))] == min(values)
    assert result[values.index(min(values))] == max(values)


def test_swap_min_max_rejects_empty():
    with pytest.raises(ValueError):
        swap_min_max([])


def test_remove_value_removes_all_occurrences():
    values = [1, 2, 2, 3, 2]
    result = remove_value(values, 2)
    assert 2 not in result
    assert result == [v for v in values if v != 2]


def test_remove_value_missing_keeps_list():
    assert remove_value([1, 2, 3], 7) == [1, 2, 3]


@pytest.mark.parametrize("position", [0, 2, 4])
def test_remove_at_round_trip(position):
    values = [5, 6, 7, 8, 9]
    result = remove_at(values, position)
    assert len(result) == len(values) - 1
    assert insert_at(result, values[position], position) == values


@pytest.mark.parametrize("position", [-1, 3])
def test_remove_at_rejects_bad_position(position):
    with pytest.raises(IndexError):
        remove_at([1, 2, 3], position)


def test_totals_values():
    table = [[1, 2, 3], [4, 5, 6]]
    assert row_totals(table) == [6, 15]
    assert column_totals(table) == [5, 7, 9]


def test_totals_agree_on_grand_total():
    table = [[3, 8, 1], [0, 4, 4], [9, 2, 7], [5, 5, 5], [1, 1, 1]]
    assert sum(row_totals(table)) == sum(column_totals(table))
    assert len(row_totals(table)) == len(table)
    assert len(column_totals(table)) == len(table[0])