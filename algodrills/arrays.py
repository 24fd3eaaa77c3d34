"""Puzzles over integer arrays: sums, pairings, patterns, intervals and windows."""

import heapq
from collections import Counter
from itertools import pairwise


def three_sum(nums):
    """Return every distinct sorted triplet of ``nums`` that sums to zero."""
    ordered = sorted(nums)
    if len(ordered) < 3 or ordered[0] > 0:
        return []
    result = []
    for i, first in enumerate(ordered):
        if first > 0:
            break
        if i > 0 and first == ordered[i - 1]:
            continue
        low, high = i + 1, len(ordered) - 1
        while low < high:
            total = first + ordered[low] + ordered[high]
            if total > 0:
                high -= 1
            elif total < 0:
                low += 1
            else:
                low_value, high_value = ordered[low], ordered[high]
                result.append([first, low_value, high_value])
                while low < high and ordered[low] == low_value:
                    low += 1
                while low < high and ordered[high] == high_value:
                    high -= 1
    return result


def _partner(value):
    """Return the value ``value`` must be paired with next in its chain, if any."""
    if value > 0:
        return value * 2
    if value % 2:
        return None
    return value // 2


def can_reorder_doubled(arr):
    """Tell whether ``arr`` can be split into pairs (x, 2x)."""
    counts = Counter(arr)
    for value in sorted(counts):
        if value == 0:
            if counts[0] % 2:
                return False
            continue
        if counts[value] == 0:
            continue
        chain = [value]
        partner = _partner(value)
        while partner is not None and partner in counts:
            chain.append(partner)
            partner = _partner(partner)
        for current, following in pairwise(chain):
            matched = min(counts[current], counts[following])
            counts[current] -= matched
            counts[following] -= matched
            if counts[current]:
                return False
        if counts[chain[-1]]:
            return False
    return True


def contains_pattern(arr, m, k):
    """Tell whether a block of length ``m`` repeats ``k`` or more times in a row."""
    if len(arr) < m * k:
        return False
    run = 0
    for current, ahead in zip(arr, arr[m:]):
        run = run + 1 if current == ahead else 0
        if run >= (k - 1) * m:
            return True
    return False


def duplicate_zeros(arr):
    """Duplicate each zero of ``arr`` in place, dropping what shifts past the end."""
    size = len(arr)
    result = []
    for value in arr:
        if len(result) >= size:
            break
        result.append(value)
        if len(result) >= size:
            break
        if value == 0:
            result.append(0)
    arr[:] = result


def find_disappeared_numbers(nums):
    """Return, in ascending order, the numbers 1..len(nums) missing from ``nums``."""
    return sorted(set(range(1, len(nums) + 1)).difference(nums))


def maximum_product(nums):
    """Return the largest product of three elements of ``nums``."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    largest = heapq.nlargest(3, nums)
    smallest = heapq.nsmallest(2, nums)
    return max(
        largest[0] * largest[1] * largest[2],
        smallest[0] * smallest[1] * largest[0],
    )


def minimum_abs_difference(arr):
    """Return, in ascending order, every pair of elements at the smallest distance."""
    ordered = sorted(arr)
    gaps = [(b - a, a, b) for a, b in pairwise(ordered)]
    if not gaps:
        return []
    smallest = min(gap for gap, _, _ in gaps)
    return [[a, b] for gap, a, b in gaps if gap == smallest]


def merge_intervals(intervals):
    """Merge overlapping closed intervals and return them in ascending order."""
    merged = []
    for start, end in sorted(intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def total_fruit(fruits):
    """Return the longest run of ``fruits`` holding at most two distinct kinds."""
    first = second = None
    second_run = 0
    current = 0
    best = 0
    for fruit in fruits:
        if fruit == first or fruit == second:
            current += 1
        else:
            current = second_run + 1
        if fruit == second:
            second_run += 1
        else:
            second_run = 1
            first, second = second, fruit
        best = max(best, current)
    return best


def count_servers(grid):
    """Count the servers sharing a row or a column with another server."""
    row_counts = [sum(row) for row in grid]
    column_counts = [sum(column) for column in zip(*grid)]
    return sum(
        1
        for row, row_count in zip(grid, row_counts)
        for cell, column_count in zip(row, column_counts)
        if cell == 1 and (row_count >= 2 or column_count >= 2)
    )