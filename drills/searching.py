"""Searches over sorted sequences and monotone predicates."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    Positions outside the sequence count as minus infinity.
    """
    if not nums:
        raise ValueError("cannot find a peak in an empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        if nums[mid] > nums[mid + 1]:
            high = mid
        else:
            low = mid + 1
    return low


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """Return the first version in ``1..n`` for which ``is_bad`` holds.

    ``is_bad`` must be monotone: once true, true for every later version.
    Returns ``n + 1`` when no version is bad.
    """
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        if is_bad(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions of two entries of sorted ``numbers`` adding to ``target``.

    Returns ``None`` when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return left + 1, right + 1
        if total < target:
            left += 1
        else:
            right -= 1
    return None