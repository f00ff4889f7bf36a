import pytest

from dsakit.sorting import bubble_sort, insertion_sort, quick_sort, selection_sort

CASES = [
    ([3, 4, 1, 2], [1, 2, 3, 4]),
    ([12, 7, 64, 52, 1], [1, 7, 12, 52, 64]),
    ([2, 52, 1, 32, 24], [1, 2, 24, 32, 52]),
    ([-3, -5, 2, 13, 12], [-5, -3, 2, 12, 13]),
    ([], []),
    ([1], [1]),
    ([5, 5, 5], [5, 5, 5]),
    ([1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 5, 6]),
    ([6, 5, 4, 3, 2, 1], [1, 2, 3, 4, 5, 6]),
    ([3, -1, 3, 0, -1, 7, 2, 2], [-1, -1, 0, 2, 2, 3, 3, 7]),
]

LONG_INPUT = [(i * 37) % 101 - 50 for i in range(200)]


def _is_ordered(result):
    return all(a <= b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("values, expected", CASES)
def test_bubble_sort(values, expected):
    assert bubble_sort(values) == expected


@pytest.mark.parametrize("values, expected", CASES)
def test_insertion_sort(values, expected):
    assert insertion_sort(values) == expected


@pytest.mark.parametrize("values, expected", CASES)
def test_selection_sort(values, expected):
    assert selection_sort(values) == expected


@pytest.mark.parametrize("values, expected", CASES)
def test_quick_sort(values, expected):
    assert quick_sort(values) == expected


def test_bubble_sort_does_not_mutate_input():
    values = [9, 3, 7, 1]
    assert bubble_sort(values) == [1, 3, 7, 9]
    assert values == [9, 3, 7, 1]


def test_insertion_sort_does_not_mutate_input():
    values = [9, 3, 7, 1]
    assert insertion_sort(values) == [1, 3, 7, 9]
    assert values == [9, 3, 7, 1]


def test_selection_sort_does_not_mutate_input():
    values = [9, 3, 7, 1]
    assert selection_sort(values) == [1, 3, 7, 9]
    assert values == [9, 3, 7, 1]


def test_quick_sort_does_not_mutate_input():
    values = [9, 3, 7, 1]
    assert quick_sort(values) == [1, 3, 7, 9]
    assert values == [9, 3, 7, 1]


def test_bubble_sort_accepts_iterator():
    assert bubble_sort(iter((4, 2, 8, 6))) == [2, 4, 6, 8]


def test_insertion_sort_accepts_iterator():
    assert insertion_sort(iter((4, 2, 8, 6))) == [2, 4, 6, 8]


def test_selection_sort_accepts_iterator():
    assert selection_sort(iter((4, 2, 8, 6))) == [2, 4, 6, 8]


def test_quick_sort_accepts_iterator():
    assert quick_sort(iter((4, 2, 8, 6))) == [2, 4, 6, 8]


def test_bubble_sort_long_input_is_ordered_permutation():
    result = bubble_sort(LONG_INPUT)
    assert sorted(result) == sorted(LONG_INPUT)
    assert _is_ordered(result)


def test_insertion_sort_long_input_is_ordered_permutation():
    result = insertion_sort(LONG_INPUT)
    assert sorted(result) == sorted(LONG_INPUT)
    assert _is_ordered(result)


def test_selection_sort_long_input_is_ordered_permutation():
    result = selection_sort(LONG_INPUT)
    assert sorted(result) == sorted(LONG_INPUT)
    assert _is_ordered(result)


def test_quick_sort_long_input_is_ordered_permutation():
    result = quick_sort(LONG_INPUT)
    assert sorted(result) == sorted(LONG_INPUT)
    assert _is_ordered(result)


def test_quick_sort_long_sorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values
    assert quick_sort(reversed(values)) == values