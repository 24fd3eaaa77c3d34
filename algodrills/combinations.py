"""Puzzles that choose elements: combination sums, smallest pair sums and teams."""

import heapq
from itertools import combinations


def _combinations_from(ordered, target, start, chosen):
    """Yield, in depth-first order, the combinations of ``ordered[start:]`` summing to ``target``."""
    if target == 0:
        yield list(chosen)
        return
    tried = set()
    for index, value in enumerate(ordered[start:], start):
        if value in tried:
            continue
        if value > target:
            break
        yield from _combinations_from(ordered, target - value, index + 1, chosen + (value,))
        tried.add(value)


def combination_sum2(candidates, target):
    """Return every distinct combination of ``candidates`` (each used once) summing to ``target``."""
    ordered = sorted(candidates)
    return list(_combinations_from(ordered, target, 0, ()))


def k_smallest_pairs(nums1, nums2, k):
    """Return the ``k`` pairs (a, b), a from ``nums1`` and b from ``nums2``, with the smallest sums.

    Both inputs must be sorted in ascending order. The pairs come back ordered
    by sum, then by their first and second elements.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    heap = []
    for a in nums1:
        for b in nums2:
            total = a + b
            entry = (-total, -a, -b)
            if len(heap) < k:
                heapq.heappush(heap, entry)
            elif total < -heap[0][0]:
                heapq.heapreplace(heap, entry)
            else:
                break
    return [[-neg_a, -neg_b] for _, neg_a, neg_b in sorted(heap, reverse=True)]


def num_teams(rating):
    """Count the index triples i < j < k whose ratings strictly rise or fall."""
    greater_after = [
        sum(later > value for later in rating[index + 1:])
        for index, value in enumerate(rating)
    ]
    smaller_after = [
        len(rating) - index - 1 - greater
        for index, greater in enumerate(greater_after)
    ]
    return sum(
        greater_after[j] if second > first else smaller_after[j]
        for (_, first), (j, second) in combinations(enumerate(rating), 2)
    )