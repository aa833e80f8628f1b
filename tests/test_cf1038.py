import pytest

from cpsolve.cf1038 import grid_possible, min_pile_operations


@pytest.mark.parametrize(
    "n, m, expected",
    [
        (1, 5, False),
        (5, 1, False),
        (1, 1, False),
        (2, 2, False),
        (2, 3, True),
        (3, 2, True),
        (3, 3, True),
    ],
)
def test_grid_possible(n, m, expected):
    assert grid_possible(n, m) is expected


@pytest.mark.parametrize("n, m", [(2, 5), (4, 7), (1, 9), (2, 2)])
def test_grid_possible_symmetric(n, m):
    assert grid_possible(n, m) == grid_possible(m, n)


def test_no_piles_cost_nothing():
    assert min_pile_operations([]) == 0


def test_satisfied_piles_cost_nothing():
    assert min_pile_operations([(1, 2, 3, 4), (0, 0, 0, 0), (5, 5, 5, 5)]) == 0


def test_only_top_part_excess():
    assert min_pile_operations([(9, 1, 4, 1)]) == 9 - 4


def test_empty_top_with_excess_bottom():
    assert min_pile_operations([(0, 5, 0, 2)]) == 5 - 2


def test_both_parts_excess():
    assert min_pile_operations([(3, 5, 1, 2)]) == 6


def test_cost_is_additive_over_piles():
    first = [(3, 5, 1, 2), (0, 7, 2, 1)]
    second = [(4, 4, 0, 0), (2, 9, 5, 3)]
    assert min_pile_operations(first + second) == min_pile_operations(
        first
    ) + min_pile_operations(second)