import pytest

from galgo.exercises.stairs import (
    climb_stairs_v1,
    climb_stairs_v2,
    climb_stairs_v3,
    min_cost_climbing_stairs_v1,
    min_cost_climbing_stairs_v2,
    min_cost_climbing_stairs_v3,
)


@pytest.mark.parametrize("n", range(-3, 30))
def test_table_and_rolling_counts_agree(n):
    assert climb_stairs_v2(n) == climb_stairs_v3(n)


@pytest.mark.parametrize("n", range(-3, 3))
def test_small_counts_equal_step_count(n):
    assert climb_stairs_v2(n) == n
    assert climb_stairs_v3(n) == n


@pytest.mark.parametrize("n", range(3, 30))
def test_counts_follow_recurrence(n):
    assert climb_stairs_v3(n) == climb_stairs_v3(n - 1) + climb_stairs_v3(n - 2)
    assert climb_stairs_v2(n) > climb_stairs_v2(n - 1)


def test_five_steps():
    assert climb_stairs_v3(5) == 8


@pytest.mark.parametrize("n", range(-1, 20))
def test_memoised_recurrence_seeded_with_zero(n):
    assert climb_stairs_v1(n) == 0


@pytest.mark.parametrize("n", range(2, 20))
def test_memoised_recurrence_holds(n):
    assert climb_stairs_v1(n) == climb_stairs_v1(n - 1) + climb_stairs_v1(n - 2)


COSTS = [
    [10, 15, 20],
    [1, 100, 1, 1, 1, 100, 1, 1, 100, 1],
    [0, 0],
    [5],
    [3, 3, 3, 3],
    [7, 1, 7, 1, 7],
    [2, 9, 4, 4, 8, 1],
]


@pytest.mark.parametrize("cost", COSTS)
def test_min_cost_versions_agree(cost):
    expected = min_cost_climbing_stairs_v3(cost)
    assert min_cost_climbing_stairs_v1(cost) == expected
    assert min_cost_climbing_stairs_v2(cost) == expected


@pytest.mark.parametrize("cost", COSTS)
def test_min_cost_is_bounded_by_total(cost):
    result = min_cost_climbing_stairs_v2(cost)
    assert 0 <= result <= sum(cost)


def test_min_cost_example():
    assert min_cost_climbing_stairs_v2([10, 15, 20]) == 15


def test_min_cost_of_free_steps_is_zero():
    assert min_cost_climbing_stairs_v1([0] * 6) == 0
    assert min_cost_climbing_stairs_v3([0] * 6) == 0


def test_min_cost_single_step_is_free():
    assert min_cost_climbing_stairs_v1([42]) == 0
    assert min_cost_climbing_stairs_v2([42]) == 0


def test_min_cost_empty():
    assert min_cost_climbing_stairs_v1([]) == 0
    assert min_cost_climbing_stairs_v3([]) == 0
    with pytest.raises(ValueError):
        min_cost_climbing_stairs_v2([])