import pytest

from dsakit.arrays import delete_at, insert_at, second_largest


def test_delete_at_source_example():
    assert delete_at([0, 1, 2, 3, 4, 5], 2) == [0, 1, 3, 4, 5]


def test_delete_at_leaves_input_untouched():
    items = [4, 8, 15, 16, 23, 42]
    result = delete_at(items, 0)
    assert items == [4, 8, 15, 16, 23, 42]
    assert len(result) == len(items) - 1
    assert result == items[1:]


def test_delete_last_element():
    items = [1, 2, 3]
    assert delete_at(items, len(items) - 1) == items[:-1]


@pytest.mark.parametrize("index", [-1, 6, 100])
def test_delete_at_out_of_range(index):
    with pytest.raises(IndexError):
        delete_at([0, 1, 2, 3, 4, 5], index)


def test_insert_at_source_example():
    assert insert_at([7, 8, 12, 27, 88], 45, 4, 100) == [7, 8, 12, 27, 45, 88]


def test_insert_at_ends():
    items = [7, 8, 12]
    assert insert_at(items, 99, 0, 10)[0] == 99
    assert insert_at(items, 99, len(items), 10)[-1] == 99
    assert items == [7, 8, 12]


def test_insert_at_full_raises():
    with pytest.raises(OverflowError):
        insert_at([1, 2, 3], 4, 1, 3)


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_at_bad_index(index):
    with pytest.raises(IndexError):
        insert_at([1, 2, 3], 9, index, 10)


def test_insert_then_delete_round_trip():
    items = [7, 8, 12, 27, 88]
    for index in range(len(items) + 1):
        inserted = insert_at(items, 45, index, 100)
        assert inserted[index] == 45
        assert delete_at(inserted, index) == items


def test_second_largest_source_example():
    assert second_largest([12, 34, 1, 43, 65, 76, 89, 89]) == 76


def test_second_largest_ignores_repeated_maximum():
    values = [9, 9, 9, 4, 2]
    result = second_largest(values)
    assert result < max(values)
    assert result in values
    assert all(v <= result for v in values if v != max(values))


def test_second_largest_accepts_iterator():
    values = [3, 1, 2]
    assert second_largest(iter(values)) == second_largest(values)


@pytest.mark.parametrize("values", [[], [5], [5, 5, 5]])
def test_second_largest_needs_two_distinct(values):
    with pytest.raises(ValueError):
        second_largest(values)