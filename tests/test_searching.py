import bisect

import pytest

from drills.searching import (
    binary_search,
    find_peak_element,
    first_bad_version,
    search_insert,
    two_sum_sorted,
)

SORTED = [-1, 0, 3, 5, 9, 12]


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_every_element(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("target", [-5, 2, 4, 100])
def test_binary_search_missing_returns_minus_one(target):
    assert binary_search(SORTED, target) == -1


def test_binary_search_empty():
    assert binary_search([], 7) == -1


@pytest.mark.parametrize(
    "nums",
    [[1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [5], [1, 2], [2, 1], [1, 2, 3, 4, 5], [5, 4, 3, 2, 1]],
)
def test_find_peak_element_is_a_peak(nums):
    peak = find_peak_element(nums)
    assert 0 <= peak < len(nums)
    if peak > 0:
        assert nums[peak - 1] < nums[peak]
    if peak < len(nums) - 1:
        assert nums[peak + 1] < nums[peak]


def test_find_peak_element_empty_raises():
    with pytest.raises(ValueError):
        find_peak_element([])


@pytest.mark.parametrize("n", [1, 2, 5, 17])
def test_first_bad_version_every_position(n):
    for bad in range(1, n + 1):
        assert first_bad_version(n, lambda v, bad=bad: v >= bad) == bad


def test_first_bad_version_none_bad():
    n = 9
    assert first_bad_version(n, lambda v: False) == n + 1


def test_first_bad_version_call_count_is_logarithmic():
    calls = []

    def is_bad(version):
        calls.append(version)
        return version >= 1_702_766_719

    n = 2_126_753_390
    assert first_bad_version(n, is_bad) == 1_702_766_719
    assert len(calls) <= n.bit_length() + 1


@pytest.mark.parametrize("target", [-3, -1, 0, 1, 3, 4, 5, 9, 10, 12, 20])
def test_search_insert_matches_bisect(target):
    assert search_insert(SORTED, target) == bisect.bisect_left(SORTED, target)


def test_search_insert_empty():
    assert search_insert([], 4) == bisect.bisect_left([], 4)


@pytest.mark.parametrize(
    "numbers, target",
    [([2, 7, 11, 15], 9), ([2, 3, 4], 6), ([-1, 0], -1), ([1, 2, 3, 4, 4, 9, 56, 90], 8)],
)
def test_two_sum_sorted_finds_pair(numbers, target):
    result = two_sum_sorted(numbers, target)
    assert result is not None
    first, second = result
    assert 1 <= first < second <= len(numbers)
    assert numbers[first - 1] + numbers[second - 1] == target


def test_two_sum_sorted_no_pair():
    assert two_sum_sorted([1, 2, 3], 100) is None
    assert two_sum_sorted([], 0) is None