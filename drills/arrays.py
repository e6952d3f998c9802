"""In-place array manipulation and pair lookup."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any


def remove_duplicates(nums: MutableSequence[Any]) -> int:
    """Compact the distinct values of sorted ``nums`` to its front.

    Returns the count ``k`` of distinct values; ``nums[:k]`` then holds them
    in order and the rest of ``nums`` is left as it was.
    """
    if not nums:
        return 0
    k = 1
    for previous, current in zip(list(nums), list(nums)[1:]):
        if current != previous:
            nums[k] = current
            k += 1
    return k


def reverse_in_place(chars: MutableSequence[Any]) -> None:
    """Reverse ``chars`` in place."""
    chars.reverse()


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices of two entries of ``nums`` adding to ``target``, or ``None``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None