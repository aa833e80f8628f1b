import pytest

from cpsolve.icpc_wf2025 import find_start, sunshine_distance


def test_find_start_single():
    assert find_start(["...", ".S.", "..."]) == (1, 1)


def test_find_start_first_row():
    assert find_start(["S..", "..."]) == (0, 0)


def test_find_start_prefers_last_row():
    assert find_start(["S..", "..S"]) == (1, 2)


def test_find_start_first_in_row():
    assert find_start(["...", ".SS"]) == (1, 1)


def test_find_start_missing():
    with pytest.raises(ValueError):
        find_start(["...", "..."])


def test_sunshine_no_shades():
    assert sunshine_distance(10, 2, []) == 10 - 2


def test_sunshine_going_up():
    assert sunshine_distance(2, 10, [(0, 3, 1, 5)]) == 0.0


def test_sunshine_fully_shaded():
    assert sunshine_distance(10, 0, [(0, -5, 1, 20)]) == 0.0


def test_sunshine_partial_shade():
    assert sunshine_distance(10, 0, [(0, 3, 1, 5)]) == 10 - (5 - 3)


def test_sunshine_shade_outside_range():
    assert sunshine_distance(10, 0, [(0, 20, 1, 30)]) == 10 - 0


@pytest.mark.parametrize(
    "shades",
    [
        [(0, 3, 1, 5)],
        [(0, 1, 2, 4), (3, 6, 4, 9)],
        [(0, 2, 1, 8), (0, 4, 1, 6)],
        [(0, -3, 1, 2)],
    ],
)
def test_sunshine_bounded(shades):
    result = sunshine_distance(10, 0, shades)
    assert 0 <= result <= 10


def test_sunshine_nested_shade_same_as_outer():
    outer = sunshine_distance(10, 0, [(0, 2, 1, 8)])
    nested = sunshine_distance(10, 0, [(0, 2, 1, 8), (0, 4, 1, 6)])
    assert outer == nested