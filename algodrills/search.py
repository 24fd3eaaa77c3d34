"""Searching and selection over sequences of integers."""

import heapq
import math


def binary_search(nums, target):
    """Return an index of ``target`` in the sorted ``nums``, or -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def _nearest_distance(house, heaters):
    begin, end = 0, len(heaters)
    distance = math.inf
    while begin < end:
        mid = (begin + end) // 2
        distance = min(distance, abs(heaters[mid] - house))
        if heaters[mid] > house:
            end = mid
        else:
            begin = mid + 1
    return distance


def find_radius(houses, heaters):
    """Return the smallest heater radius that warms every house."""
    if not houses or not heaters:
        raise ValueError("houses and heaters must both be non-empty")
    ordered = sorted(heaters)
    return max(_nearest_distance(house, ordered) for house in houses)


def find_kth_largest(nums, k):
    """Return the k-th largest element of ``nums`` (1-based)."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must lie between 1 and {len(nums)}")
    return heapq.nlargest(k, nums)[-1]


def majority_element(nums):
    """Return the element that fills more than half of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    return sorted(nums)[len(nums) // 2]