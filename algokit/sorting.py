"""Classic comparison sorts that reorder a mutable sequence in place."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def bubble_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by repeatedly swapping adjacent inversions."""
    end = len(nums) - 1
    while end > 0:
        swapped = False
        for j in range(end):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
                swapped = True
        if not swapped:
            break
        end -= 1


def selection_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by moving the smallest remaining item forward."""
    n = len(nums)
    for i in range(n - 1):
        min_index = min(range(i, n), key=nums.__getitem__)
        if min_index != i:
            nums[i], nums[min_index] = nums[min_index], nums[i]


def insertion_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(nums)):
        key = nums[i]
        j = i - 1
        while j >= 0 and nums[j] > key:
            nums[j + 1] = nums[j]
            j -= 1
        nums[j + 1] = key


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place with a stable top-down merge sort."""
    if not nums:
        return
    nums[:] = _merge_sorted(list(nums))


def _partition(nums: MutableSequence[Any], left: int, right: int) -> int:
    pivot = nums[right]
    smaller = left - 1
    for i in range(left, right):
        if nums[i] <= pivot:
            smaller += 1
            nums[smaller], nums[i] = nums[i], nums[smaller]
    nums[smaller + 1], nums[right] = nums[right], nums[smaller + 1]
    return smaller + 1


def quick_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place with quicksort using the last element as pivot."""
    pending = [(0, len(nums) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot_index = _partition(nums, left, right)
        pending.append((pivot_index + 1, right))
        pending.append((left, pivot_index - 1))


def _sift_down(nums: MutableSequence[Any], heap_size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < heap_size and nums[left] > nums[largest]:
            largest = left
        if right < heap_size and nums[right] > nums[largest]:
            largest = right
        if largest == root:
            return
        nums[root], nums[largest] = nums[largest], nums[root]
        root = largest


def heap_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by building a max-heap and draining it."""
    n = len(nums)
    for root in reversed(range(n // 2)):
        _sift_down(nums, n, root)
    for end in reversed(range(1, n)):
        nums[0], nums[end] = nums[end], nums[0]
        _sift_down(nums, end, 0)