import pytest

from interview_drills.arrays import (
    alt_check_if_array_sorted_rotated,
    check_if_array_sorted_rotated,
    concat_array,
    concat_array1,
    concat_array2,
    contains_key,
    diagonal_longest,
    find_town_judge,
    folder_count,
    generate,
    generate_opt,
    interval_problem_meeting,
    left_right,
    left_right_two_pass,
    lost_stone_weight,
    one_pass_soln,
    plus_one,
    plus_one_inplace,
    shortest_distance_to_char,
    single_find_town_judge,
    two_sum,
    width_of_matrix,
)

ROTATION_CASES = [
    ([3, 4, 5, 1, 2], True),
    ([], True),
    ([1], True),
    ([1, 2, 3], True),
    ([2, 1, 3, 4], False),
    ([1, 1, 1], True),
    ([2, 3, 4, 1, 5], False),
]


@pytest.mark.parametrize("nums, expected", ROTATION_CASES)
def test_check_if_array_sorted_rotated(nums, expected):
    assert check_if_array_sorted_rotated(nums) is expected
    assert alt_check_if_array_sorted_rotated(nums) is expected


@pytest.mark.parametrize("func", [concat_array, concat_array1, concat_array2])
@pytest.mark.parametrize(
    "nums, expected", [([1, 2, 1], [1, 2, 1, 1, 2, 1]), ([], []), ([4], [4, 4])]
)
def test_concat_array(func, nums, expected):
    assert func(nums) == expected


@pytest.mark.parametrize(
    "nums, expected", [([1, 2, 3, 1], True), ([1, 2, 3, 4], False), ([], False)]
)
def test_contains_key(nums, expected):
    assert contains_key(nums) is expected


@pytest.mark.parametrize(
    "dimensions, expected",
    [([[9, 3], [8, 6]], 48), ([[3, 4], [4, 3]], 12), ([], 0), ([[2, 6], [5, 1], [3, 10]], 30)],
)
def test_diagonal_longest(dimensions, expected):
    assert diagonal_longest(dimensions) == expected


@pytest.mark.parametrize("func", [find_town_judge, single_find_town_judge])
@pytest.mark.parametrize(
    "n, trust, expected",
    [
        (2, [[1, 2]], 2),
        (3, [[1, 3], [2, 3]], 3),
        (3, [[1, 3], [2, 3], [3, 1]], -1),
        (1, [], 1),
        (3, [], -1),
    ],
)
def test_find_town_judge(func, n, trust, expected):
    assert func(n, trust) == expected


@pytest.mark.parametrize(
    "logs, expected",
    [
        (["d1/", "d2/", "../", "d21/", "./"], 2),
        (["d1/", "d2/", "./", "d3/", "../", "d31/"], 3),
        (["d1/", "../", "../", "../"], 0),
    ],
)
def test_folder_count(logs, expected):
    assert folder_count(logs) == expected


@pytest.mark.parametrize(
    "intervals, expected",
    [
        ([], True),
        ([[1, 2]], True),
        ([[0, 30], [5, 10], [15, 20]], False),
        ([[7, 10], [2, 4]], False),
    ],
)
def test_interval_problem_meeting(intervals, expected):
    assert interval_problem_meeting(intervals) is expected


@pytest.mark.parametrize("func", [left_right, left_right_two_pass, one_pass_soln])
@pytest.mark.parametrize(
    "nums, expected", [([10, 4, 8, 3], [15, 1, 11, 22]), ([1], [0]), ([], [])]
)
def test_left_right(func, nums, expected):
    assert func(nums) == expected


@pytest.mark.parametrize("stones, expected", [([2, 7, 4, 1, 8, 1], 1), ([3], 3), ([5, 2], 3)])
def test_lost_stone_weight(stones, expected):
    assert lost_stone_weight(stones) == expected


@pytest.mark.parametrize("stones", [[2, 2], []])
def test_lost_stone_weight_nothing_left(stones):
    with pytest.raises(ValueError):
        lost_stone_weight(stones)


def test_generate():
    assert generate(5) == [
        [1],
        [1, 1],
        [1, 2, 1],
        [1, 3, 3, 1],
        [1, 4, 6, 4, 1],
    ]


@pytest.mark.parametrize("num_rows", [0, -3])
def test_generate_non_positive(num_rows):
    assert generate(num_rows) == []
    assert generate_opt(num_rows) == []


def test_generate_opt_leaves_first_row_empty():
    assert generate_opt(5) == [
        [],
        [1, 1],
        [1, 2, 1],
        [1, 3, 3, 1],
        [1, 4, 6, 4, 1],
    ]


@pytest.mark.parametrize("func", [plus_one, plus_one_inplace])
@pytest.mark.parametrize(
    "digits, expected",
    [([1, 2, 3], [1, 2, 4]), ([4, 3, 2, 1], [4, 3, 2, 2]), ([9], [1, 0]), ([9, 9], [1, 0, 0])],
)
def test_plus_one(func, digits, expected):
    assert func(digits) == expected


def test_plus_one_empty():
    assert plus_one([]) == [1]
    with pytest.raises(ValueError):
        plus_one_inplace([])


def test_plus_one_does_not_mutate_input():
    digits = [1, 9]
    plus_one(digits)
    plus_one_inplace(digits)
    assert digits == [1, 9]


def test_shortest_distance_to_char():
    assert shortest_distance_to_char("loveleetcode", "e") == [
        3, 2, 1, 0, 1, 0, 0, 1, 2, 2, 1, 0,
    ]


def test_shortest_distance_short_string():
    assert shortest_distance_to_char("aaab", "b") == [3, 2, 1, 0]
    assert shortest_distance_to_char("", "x") == []


def test_shortest_distance_missing_char():
    with pytest.raises(ValueError):
        shortest_distance_to_char("abc", "z")


@pytest.mark.parametrize(
    "nums, target, expected",
    [([2, 7, 11, 15], 9, [0, 1]), ([3, 2, 4], 6, [1, 2]), ([3, 3], 6, [0, 1]), ([1, 2], 10, [])],
)
def test_two_sum(nums, target, expected):
    assert two_sum(nums, target) == expected


@pytest.mark.parametrize(
    "grid, expected",
    [
        ([[1], [22], [333]], [3]),
        ([[-15, 1, 3], [15, 7, 12], [5, 6, -2]], [3, 1, 2]),
        ([[0]], [1]),
        ([], []),
        ([[]], []),
    ],
)
def test_width_of_matrix(grid, expected):
    assert width_of_matrix(grid) == expected