"""In-place edits and searches over integer lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from heapq import merge
from itertools import groupby


def remove_duplicates(nums: list[int]) -> int:
    """Compact runs of equal values to the front of ``nums``; return how many remain.

    Values past the returned count are left as they were.
    """
    kept = [value for value, _ in groupby(nums)]
    nums[: len(kept)] = kept
    return len(kept)


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front of ``nums``, in order.

    Returns how many values were kept; values past that count are left as they were.
    """
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Binary-search ascending ``nums`` for ``target``.

    Returns an index holding ``target`` if there is one, else where it would go.
    """
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place.

    ``nums1`` must have room for ``m + n`` values.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for m + n values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")
    nums1[: m + n] = list(merge(nums1[:m], nums2[:n]))


def single_number(nums: Sequence[int]) -> int:
    """Return the first value that occurs exactly once, or 0 if there is none."""
    counts = Counter(nums)
    return next((value for value in nums if counts[value] == 1), 0)


def majority_element(nums: Sequence[int]) -> int:
    """Return the first value seen more than ``len(nums) // 2`` times, or 0."""
    threshold = len(nums) // 2
    counts: Counter[int] = Counter()
    for value in nums:
        counts[value] += 1
        if counts[value] > threshold:
            return value
    return 0