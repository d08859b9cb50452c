import math

import pytest

from algodrills.arrays import (
    longest_consecutive,
    min_sub_array_len,
    product_except_self,
    remove_duplicates,
    remove_element,
    rotate,
    summary_ranges,
    three_sum,
    two_sum,
    two_sum_sorted,
)


def _expand(ranges):
    values = []
    for item in ranges:
        first, _, last = item.partition("->")
        stop = int(last) if last else int(first)
        values.extend(range(int(first), stop + 1))
    return values


# min_sub_array_len


def test_min_sub_array_len_example():
    assert min_sub_array_len(7, [2, 3, 1, 2, 4, 3]) == 2


def test_min_sub_array_len_long_window():
    nums = [12, 28, 83, 4, 25, 26, 25, 2, 25, 25, 25, 12]
    assert min_sub_array_len(213, nums) == 8


def test_min_sub_array_len_unreachable():
    assert min_sub_array_len(100, [1, 2, 3]) == 0


def test_min_sub_array_len_needs_everything():
    nums = [1, 2, 3, 4, 5]
    assert min_sub_array_len(sum(nums), nums) == len(nums)


def test_min_sub_array_len_single_element():
    assert min_sub_array_len(5, [5]) == 1
    assert min_sub_array_len(6, [5]) == 0


def test_min_sub_array_len_large_element_alone():
    assert min_sub_array_len(50, [1, 1, 50, 1]) == 1


# product_except_self


def test_product_except_self_example():
    assert product_except_self([1, 2, 3, 4]) == [24, 12, 8, 6]


def test_product_except_self_pair_swaps():
    assert product_except_self([5, 7]) == [7, 5]


def test_product_except_self_invariant():
    nums = [3, -2, 5, 7, 11]
    total = math.prod(nums)
    result = product_except_self(nums)
    assert len(result) == len(nums)
    for value, product in zip(nums, result):
        assert value * product == total


def test_product_except_self_with_zero():
    result = product_except_self([2, 0, 3])
    assert result[0] == 0
    assert result[2] == 0
    assert result[1] == 2 * 3


def test_product_except_self_too_short():
    with pytest.raises(ValueError):
        product_except_self([1])


# remove_duplicates


def test_remove_duplicates_example():
    nums = [1, 1, 1, 2, 2, 3]
    count = remove_duplicates(nums)
    assert count == 5
    assert nums[:count] == [1, 1, 2, 2, 3]


def test_remove_duplicates_keeps_at_most_two():
    original = [0, 0, 1, 1, 1, 1, 2, 3, 3, 3]
    nums = list(original)
    count = remove_duplicates(nums)
    kept = nums[:count]
    assert set(kept) == set(original)
    assert all(kept.count(value) == min(2, original.count(value)) for value in set(original))
    assert kept == sorted(kept)
    assert len(nums) == len(original)


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0
    assert nums == []


def test_remove_duplicates_counts_runs_only():
    nums = [1, 1, 2, 1]
    assert remove_duplicates(nums) == 4
    assert nums == [1, 1, 2, 1]


# remove_element


def test_remove_element_example():
    original = [3, 2, 2, 3, 2, 4, 3]
    nums = list(original)
    count = remove_element(nums, 3)
    assert count == len(original) - original.count(3)
    assert 3 not in nums
    assert len(nums) == count
    assert sorted(nums) == sorted(v for v in original if v != 3)


def test_remove_element_absent_value():
    nums = [1, 2, 3]
    assert remove_element(nums, 9) == 3
    assert nums == [1, 2, 3]


# rotate


def test_rotate_example():
    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 3)
    assert nums == [5, 6, 7, 1, 2, 3, 4]


def test_rotate_full_turn_is_identity():
    nums = [1, 2, 3, 4]
    rotate(nums, 4)
    assert nums == [1, 2, 3, 4]


def test_rotate_round_trip():
    original = [9, 8, 7, 6, 5]
    nums = list(original)
    rotate(nums, 2)
    assert nums[2:] == original[:3]
    rotate(nums, len(nums) - 2)
    assert nums == original


def test_rotate_zero_and_empty():
    nums = [1, 2]
    rotate(nums, 0)
    assert nums == [1, 2]
    empty = []
    rotate(empty, 3)
    assert empty == []


# summary_ranges


def test_summary_ranges_example():
    assert summary_ranges([0, 1, 2, 4, 5, 7]) == ["0->2", "4->5", "7"]


def test_summary_ranges_round_trip():
    nums = [0, 2, 3, 4, 6, 8, 9]
    ranges = summary_ranges(nums)
    assert _expand(ranges) == nums
    assert len(ranges) == 4


def test_summary_ranges_unsorted_input():
    assert _expand(summary_ranges([1, 2, 0, 1])) == [1, 2, 0, 1]


def test_summary_ranges_empty_and_single():
    assert summary_ranges([]) == []
    assert summary_ranges([5]) == ["5"]


# three_sum


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_zeros():
    assert three_sum([0, 0, 0]) == [[0, 0, 0]]
    assert three_sum([0, 0, 0, 0, 0]) == [[0, 0, 0]]


def test_three_sum_exactly_three_keeps_order():
    assert three_sum([1, -1, 0]) == [[1, -1, 0]]
    assert three_sum([1, 2, 3]) == []


def test_three_sum_all_negative():
    assert three_sum([-3, -2, -1, -5]) == []


def test_three_sum_invariants():
    nums = [-5, -3, -1, 0, 1, 2, 3, 4, -2, 5]
    before = list(nums)
    result = three_sum(nums)
    assert nums == before
    assert result == sorted(result)
    assert len({tuple(t) for t in result}) == len(result)
    for triple in result:
        assert sum(triple) == 0
        assert triple == sorted(triple)
        assert all(triple.count(v) <= nums.count(v) for v in triple)


# two_sum


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == [0, 1]


@pytest.mark.parametrize(
    ("nums", "target"),
    [([3, 2, 4], 6), ([3, 3], 6), ([-4, 10, 1, 8], 4)],
)
def test_two_sum_pair_adds_up(nums, target):
    first, second = two_sum(nums, target)
    assert first < second
    assert nums[first] + nums[second] == target


def test_two_sum_missing():
    with pytest.raises(ValueError):
        two_sum([1, 2, 3], 100)


# two_sum_sorted


@pytest.mark.parametrize(
    ("numbers", "target"),
    [
        ([2, 7, 11, 15], 9),
        ([2, 3, 4], 6),
        ([-1, 0], -1),
        ([0, 0, 3, 4], 0),
        ([-3, 3, 4, 90], 0),
    ],
)
def test_two_sum_sorted_pair_adds_up(numbers, target):
    first, second = two_sum_sorted(numbers, target)
    assert 1 <= first < second <= len(numbers)
    assert numbers[first - 1] + numbers[second - 1] == target


def test_two_sum_sorted_missing():
    with pytest.raises(ValueError):
        two_sum_sorted([1, 2, 3], 100)
    with pytest.raises(ValueError):
        two_sum_sorted([], 0)


# longest_consecutive


def test_longest_consecutive_examples():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([0, 3, 7, 2, 5, 8, 4, 6, 0, 1]) == 9


def test_longest_consecutive_whole_range():
    nums = [7, 3, 5, 0, 9, 1, 8, 2, 6, 4]
    assert longest_consecutive(nums) == len(nums)


def test_longest_consecutive_duplicates_do_not_count():
    assert longest_consecutive([1, 1, 1]) == 1
    assert longest_consecutive([1, 2, 0, 1]) == len({1, 2, 0})


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0