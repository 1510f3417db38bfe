import pytest

from galgo.exercises.grid_paths import (
    minimum_path_sum_v1,
    minimum_path_sum_v2,
    unique_path_obstacle_v1,
    unique_path_obstacle_v2,
    unique_path_obstacle_v3,
    unique_paths_v1,
    unique_paths_v2,
    unique_paths_v3,
)

OBSTACLE_CASES = [
    ([[0, 0, 0], [0, 1, 0], [0, 0, 0]], 2),
    ([[0, 0], [0, 1]], 0),
    ([[0, 1], [0, 0]], 1),
    ([[1]], 0),
    ([[0, 0], [1, 0]], 1),
    (
        [
            [0, 0, 0, 0],
            [0, 1, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 0],
        ],
        7,
    ),
]


def _copy_grid(grid):
    return [list(row) for row in grid]


def test_minimum_path_sum_v1():
    assert minimum_path_sum_v1([[1, 2, 5], [3, 2, 1]]) == 6


@pytest.mark.parametrize(
    "grid, expected",
    [
        ([[1, 2, 5], [3, 2, 1]], 6),
        ([[1, 3, 1], [1, 5, 1], [4, 2, 1]], 7),
    ],
)
def test_minimum_path_sum_v2(grid, expected):
    assert minimum_path_sum_v2(grid) == expected


def test_minimum_path_sum_versions_agree():
    grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
    assert minimum_path_sum_v1(grid) == minimum_path_sum_v2(grid)


def test_minimum_path_sum_single_cell():
    assert minimum_path_sum_v1([[9]]) == 9
    assert minimum_path_sum_v2([[9]]) == 9


@pytest.mark.parametrize("solution", [minimum_path_sum_v1, minimum_path_sum_v2])
def test_minimum_path_sum_empty_grid(solution):
    with pytest.raises(ValueError):
        solution([])


@pytest.mark.parametrize("grid, expected", OBSTACLE_CASES)
def test_unique_path_obstacle(grid, expected):
    assert unique_path_obstacle_v1(_copy_grid(grid)) == expected
    assert unique_path_obstacle_v2(_copy_grid(grid)) == expected
    assert unique_path_obstacle_v3(_copy_grid(grid)) == expected


def test_unique_path_obstacle_v3_leaves_input_alone():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    unique_path_obstacle_v3(grid)
    assert grid == [[0, 0, 0], [0, 1, 0], [0, 0, 0]]


@pytest.mark.parametrize("m, n", [(1, 1), (2, 3), (3, 7), (5, 4)])
def test_unique_paths_versions_agree(m, n):
    assert unique_paths_v1(m, n) == unique_paths_v2(m, n)


@pytest.mark.parametrize("m, n", [(2, 3), (4, 6)])
def test_unique_paths_symmetric(m, n):
    assert unique_paths_v1(m, n) == unique_paths_v1(n, m)
    assert unique_paths_v2(m, n) == unique_paths_v2(n, m)


@pytest.mark.parametrize("m, n", [(3, 3), (4, 5), (2, 6)])
def test_unique_paths_match_free_obstacle_grid(m, n):
    free = [[0] * n for _ in range(m)]
    assert unique_paths_v2(m, n) == unique_path_obstacle_v1(free)
    assert unique_paths_v1(m, n) == unique_path_obstacle_v2(free)


def test_unique_paths_single_row():
    assert unique_paths_v1(1, 5) == 1
    assert unique_paths_v2(5, 1) == 1


def test_unique_paths_v3_loses_start():
    assert unique_paths_v3(3, 7) == 0
    assert unique_paths_v3(1, 1) == 0


@pytest.mark.parametrize("solution", [unique_paths_v1, unique_paths_v2, unique_paths_v3])
def test_unique_paths_rejects_empty(solution):
    with pytest.raises(ValueError):
        solution(0, 3)