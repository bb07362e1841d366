"""Binary searches over ascending sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def binary_search(nums: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def left_bound_binary_search(nums: Sequence[Any], target: Any) -> int:
    """Return the first index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index == len(nums) or nums[index] != target:
        return -1
    return index


def right_bound_binary_search(nums: Sequence[Any], target: Any) -> int:
    """Return the last index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_right(nums, target) - 1
    if index < 0 or nums[index] != target:
        return -1
    return index