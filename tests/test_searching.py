import pytest

from cpsolve.searching import gifts_needed


def test_small_target_needs_one_gift():
    assert gifts_needed([5, 5], 1) == 1


def test_target_equal_to_doubled_best_needs_one_gift():
    assert gifts_needed([3, 7, 2], 14) == 1


@pytest.mark.parametrize("values", [[5, 5], [1, 2, 3], [4, 9, 1, 8], [10, 1, 1, 1]])
def test_monotone_in_target(values):
    answers = [gifts_needed(values, target) for target in range(1, 120)]
    assert answers == sorted(answers)
    assert answers[0] >= 1


@pytest.mark.parametrize("values", [[5, 5], [2, 6, 3], [4, 9, 1, 8]])
def test_growth_is_bounded(values):
    previous = gifts_needed(values, 1)
    for target in range(2, 200):
        current = gifts_needed(values, target)
        assert current - previous <= 2
        previous = current


def test_order_of_values_does_not_matter():
    for target in range(1, 60):
        assert gifts_needed([1, 9, 4], target) == gifts_needed([9, 4, 1], target)


def test_requires_two_values():
    with pytest.raises(ValueError):
        gifts_needed([5], 10)


def test_requires_positive_values():
    with pytest.raises(ValueError):
        gifts_needed([0, 5], 10)