import pytest

from galgo.exercises.last_stone_weight import last_stone_weight_v1


@pytest.mark.parametrize(
    "stones, expected",
    [
        ([2, 7, 4, 1, 8, 1], 1),
        ([1], 1),
        ([9, 10, 4, 5, 7, 1], 0),
        ([10, 5, 4, 10, 3, 1, 7, 8], 0),
    ],
)
def test_last_stone_weight_v1(stones, expected):
    assert last_stone_weight_v1(stones) == expected


def test_no_stones():
    assert last_stone_weight_v1([]) == 0


def test_input_left_untouched():
    stones = [2, 7, 4, 1, 8, 1]
    last_stone_weight_v1(stones)
    assert stones == [2, 7, 4, 1, 8, 1]