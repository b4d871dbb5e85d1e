from bisect import bisect_left

import pytest

from katas.arrays import (
    majority_element,
    merge_sorted,
    remove_duplicates,
    remove_element,
    search_insert,
    single_number,
)


def test_remove_duplicates_worked_example():
    nums = [1, 1, 2]
    k = remove_duplicates(nums)
    assert k == 2
    assert nums[:k] == [1, 2]


@pytest.mark.parametrize(
    "values",
    [[0, 0, 1, 1, 1, 2, 2, 3, 3, 4], [5], [1, 2, 3], [7, 7, 7, 7]],
)
def test_remove_duplicates_keeps_distinct_in_order(values):
    nums = list(values)
    k = remove_duplicates(nums)
    assert nums[:k] == sorted(set(values))
    assert len(nums) == len(values)


def test_remove_duplicates_empty():
    nums: list[int] = []
    assert remove_duplicates(nums) == 0
    assert nums == []


def test_remove_element_worked_example():
    nums = [3, 2, 2, 3]
    k = remove_element(nums, 3)
    assert k == 2
    assert nums[:k] == [2, 2]


@pytest.mark.parametrize(
    ("values", "val"),
    [([0, 1, 2, 2, 3, 0, 4, 2], 2), ([1, 1, 1], 1), ([4, 5], 9), ([], 0)],
)
def test_remove_element_invariants(values, val):
    nums = list(values)
    k = remove_element(nums, val)
    assert k == len(values) - values.count(val)
    assert val not in nums[:k]
    assert sorted(nums[:k] + [val] * values.count(val)) == sorted(values)


@pytest.mark.parametrize("target", [0, 1, 2, 3, 4, 5, 6, 7])
def test_search_insert_matches_insertion_point(target):
    nums = [1, 3, 5, 6]
    assert search_insert(nums, target) == bisect_left(nums, target)


def test_search_insert_finds_present_value():
    nums = [1, 3, 5, 6]
    assert nums[search_insert(nums, 5)] == 5


def test_search_insert_empty():
    assert search_insert([], 10) == 0


def test_merge_sorted_worked_example():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3] + nums2)


def test_merge_sorted_into_empty_prefix():
    nums1 = [0]
    merge_sorted(nums1, 0, [1], 1)
    assert nums1 == [1]


def test_merge_sorted_nothing_to_add():
    nums1 = [1]
    merge_sorted(nums1, 1, [], 0)
    assert nums1 == [1]


def test_merge_sorted_without_room_raises():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


def test_single_number_finds_unpaired():
    assert single_number([4, 1, 2, 1, 2]) == 4
    assert single_number([2, 2, 1]) == 1


def test_single_number_without_unique_gives_zero():
    assert single_number([2, 2]) == 0


def test_majority_element():
    assert majority_element([3, 2, 3]) == 3
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_without_majority_gives_zero():
    assert majority_element([1, 2, 3, 4]) == 0