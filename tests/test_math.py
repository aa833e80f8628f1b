import pytest

from cpsolve.math import MOD, can_fold, divisor_sum, min_days, plus_minus_possible


@pytest.mark.parametrize("length,width,area", [(2, 4, 1), (2, 4, 8), (3, 4, 3), (1, 1, 1)])
def test_can_fold_power_of_two_multiples(length, width, area):
    assert can_fold(length, width, area)


@pytest.mark.parametrize("length,width,area", [(3, 3, 2), (2, 2, 5), (3, 4, 5)])
def test_can_fold_impossible(length, width, area):
    assert not can_fold(length, width, area)


def test_can_fold_rejects_non_positive_area():
    with pytest.raises(ValueError):
        can_fold(2, 2, 0)


def test_min_days_dominated_by_largest():
    assert min_days([5], 3) == 5


def test_min_days_even_split():
    assert min_days([2, 2, 2, 2], 4) == 2


@pytest.mark.parametrize(
    "counts,k", [([3, 3, 3], 2), ([1, 7, 2], 3), ([4, 4, 4, 4, 1], 3), ([10, 1], 1)]
)
def test_min_days_bounds(counts, k):
    days = min_days(counts, k)
    assert days >= max(counts)
    assert days * k >= sum(counts)
    assert days == max(counts) or (days - 1) * k < sum(counts)


def test_min_days_rejects_bad_k():
    with pytest.raises(ValueError):
        min_days([1, 2], 0)


@pytest.mark.parametrize("n", [3, 4, 7, 8, 11, 12])
def test_plus_minus_possible(n):
    assert plus_minus_possible(n)


@pytest.mark.parametrize("n", [1, 2, 5, 6, 9, 10])
def test_plus_minus_impossible(n):
    assert not plus_minus_possible(n)


def test_plus_minus_matches_parity_of_total():
    for n in range(1, 40):
        assert plus_minus_possible(n) == (n * (n + 1) // 2 % 2 == 0)


def test_divisor_sum_small_values():
    assert divisor_sum(1) == 1
    assert divisor_sum(4) == 15
    assert divisor_sum(5) == 21


@pytest.mark.parametrize("n", [2, 3, 10, 97, 10**12, 10**12 + 1])
def test_divisor_sum_in_range(n):
    assert 0 <= divisor_sum(n) < MOD


def test_divisor_sum_rejects_zero():
    with pytest.raises(ValueError):
        divisor_sum(0)