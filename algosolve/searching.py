"""Binary-search problems over sorted and rotated arrays."""

from __future__ import annotations

import math
from collections.abc import Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted arrays, by partitioning the shorter one."""
    short, long_ = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    m, n = len(short), len(long_)
    total = m + n
    if total == 0:
        raise ValueError("both arrays are empty")
    half = total // 2
    low, high = 0, m
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        left1 = short[cut1 - 1] if cut1 > 0 else -math.inf
        right1 = short[cut1] if cut1 < m else math.inf
        left2 = long_[cut2 - 1] if cut2 > 0 else -math.inf
        right2 = long_[cut2] if cut2 < n else math.inf
        if left1 <= right2 and left2 <= right1:
            if total % 2 == 0:
                return (max(left1, left2) + min(right1, right2)) / 2
            return float(min(right1, right2))
        if left1 > right2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("input arrays are not valid")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of target in a rotated sorted array of distinct values, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def _find_bound(nums: Sequence[int], target: int, first: bool) -> int:
    left, right = 0, len(nums) - 1
    found = -1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            found = mid
            if first:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of target in a sorted array, or (-1, -1)."""
    return _find_bound(nums, target, True), _find_bound(nums, target, False)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of target in a sorted array, or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return right + 1