"""Array problems: pair and tuple sums, in-place edits and permutations."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import combinations


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find indices i < j with nums[i] + nums[j] == target using a hash map."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None


def two_sum_brute_force(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find the first index pair i < j, in lexicographic order, summing to target."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def two_sum_two_pointers(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find an index pair summing to target by scanning a sorted copy from both ends."""
    values = list(nums)
    ordered = sorted(values)
    low, high = 0, len(ordered) - 1
    while low < high:
        total = ordered[low] + ordered[high]
        if total > target:
            high -= 1
        elif total < target:
            low += 1
        else:
            break
    else:
        return None
    first = values.index(ordered[low])
    second = next(
        k for k, value in enumerate(values) if value == ordered[high] and k != first
    )
    return min(first, second), max(first, second)


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the given lines."""
    left, right = 0, len(height) - 1
    best = 0
    while right > left:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triples that sum to zero."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        goal = -first
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = ordered[left] + ordered[right]
            if total == goal:
                result.append([first, ordered[left], ordered[right]])
                while left < right and ordered[left] == ordered[left + 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < goal:
                left += 1
            else:
                right -= 1
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three elements closest to target."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    best = nums[0] + nums[1] + nums[2]
    ordered = sorted(nums)
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total > target:
                right -= 1
            elif total < target:
                left += 1
            else:
                return target
            if abs(total - target) < abs(best - target):
                best = total
    return best


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruples that sum to target."""
    ordered = sorted(nums)
    size = len(ordered)
    result: list[list[int]] = []
    for i in range(size):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, size):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            goal = target - ordered[i] - ordered[j]
            left, right = j + 1, size - 1
            while left < right:
                total = ordered[left] + ordered[right]
                if total == goal:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    while left < right and ordered[left] == ordered[left + 1]:
                        left += 1
                    while left < right and ordered[right] == ordered[right - 1]:
                        right -= 1
                    left += 1
                    right -= 1
                elif total < goal:
                    left += 1
                else:
                    right -= 1
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    unique = [value for i, value in enumerate(nums) if i == 0 or value != nums[i - 1]]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Remove every occurrence of val in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange nums in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    n = len(nums)
    if n <= 1:
        return
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    swap_index = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap_index] = nums[swap_index], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def first_missing_positive(nums: Sequence[int]) -> int:
    """Smallest positive integer that does not occur in nums."""
    present = set(nums)
    return next(i for i in range(1, len(nums) + 2) if i not in present)