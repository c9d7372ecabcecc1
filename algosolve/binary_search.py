"""Binary search over integers and sorted or rotated sequences."""

from __future__ import annotations

from collections.abc import Sequence


def my_sqrt(x: int) -> int:
    """Integer square root of a non-negative integer, rounded down."""
    if x < 0:
        raise ValueError("square root of a negative number")
    left, right = 0, x
    while left <= right:
        mid = left + (right - left) // 2
        if mid == 0:
            return 1 if x == 1 else 0
        quotient = x // mid
        if mid == quotient:
            return mid
        if mid < quotient:
            left = mid + 1
        else:
            right = mid - 1
    return right


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of target in a sorted sequence, or (-1, -1)."""
    left, right = 0, len(nums) - 1
    found = None
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            found = mid
            break
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    if found is None:
        return -1, -1
    first = last = found
    while first > 0 and nums[first - 1] == target:
        first -= 1
    while last < len(nums) - 1 and nums[last + 1] == target:
        last += 1
    return first, last


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Whether target is in a rotated sorted sequence that may hold duplicates."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return True
        if nums[left] == nums[mid] == nums[right]:
            left += 1
            right -= 1
        elif nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element greater than its neighbours, or -1 if none is found."""
    if not nums:
        raise ValueError("sequence is empty")
    size = len(nums)
    if size == 1:
        return 0
    if nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return size - 1
    left, right = 1, size - 2
    while left <= right:
        mid = left + (right - left) // 2
        rising = nums[mid] > nums[mid - 1]
        if rising and nums[mid] > nums[mid + 1]:
            return mid
        if rising:
            left = mid + 1
        else:
            right = mid - 1
    return -1