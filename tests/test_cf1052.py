import pytest

from cpsolve.cf1052 import (
    build_permutation,
    can_remove_two,
    max_equal_count,
    max_xor_pairing,
)


def test_max_equal_count_all_same():
    assert max_equal_count([7, 7, 7]) == 3


def test_max_equal_count_all_distinct():
    values = [4, 1, 9, 2]
    assert max_equal_count(values) == len(values)


@pytest.mark.parametrize("values", [[1, 1, 2, 3, 3, 3], [5, 5, 6, 6, 7], [2, 2, 2, 2, 8]])
def test_max_equal_count_bounds(values):
    result = max_equal_count(values)
    assert max(values.count(v) for v in values) <= result <= len(values)


def test_max_equal_count_empty_raises():
    with pytest.raises(ValueError):
        max_equal_count([])


def test_can_remove_two_missing_number():
    assert can_remove_two([[1], [1], [1]], 2) is False


def test_can_remove_two_redundant_sets():
    assert can_remove_two([[1, 2], [1, 2], [1, 2]], 2) is True


def test_can_remove_two_needs_every_set():
    assert can_remove_two([[1], [2]], 2) is False


@pytest.mark.parametrize("s", ["0", "101", "1011"])
def test_build_permutation_lone_zero(s):
    assert build_permutation(s) is None


def test_max_xor_pairing_small():
    assert max_xor_pairing(0, 3) == (12, [3, 2, 1, 0])


@pytest.mark.parametrize("low,high", [(0, 10), (3, 17), (5, 5), (1, 32)])
def test_max_xor_pairing_involution(low, high):
    total, partners = max_xor_pairing(low, high)
    numbers = list(range(low, high + 1))
    assert sorted(partners) == numbers
    for value, partner in zip(numbers, partners):
        assert partners[partner - low] == value
    assert total == sum(v + p for v, p in zip(numbers, partners))