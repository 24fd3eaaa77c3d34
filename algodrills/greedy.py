"""Greedy and single-pass optimisation puzzles."""

import math


def max_profit(prices):
    """Return the best profit from one purchase followed by one sale."""
    best = 0
    lowest = math.inf
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_with_fee(prices, fee):
    """Return the best profit from any number of trades, paying ``fee`` per trade."""
    if not prices:
        raise ValueError("prices must not be empty")
    free = 0
    holding = -prices[0] - fee
    for price in prices[1:]:
        free = max(free, holding + price)
        holding = max(holding, free - price - fee)
    return free


def can_complete_circuit(gas, cost):
    """Return the station from which the circuit can be driven, or -1 if none."""
    total = 0
    tank = 0
    start = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost, strict=True)):
        difference = fuel - spend
        total += difference
        tank += difference
        if tank < 0:
            start = index + 1
            tank = 0
    return -1 if total < 0 else start


def get_last_moment(n, left, right):
    """Return the moment the last ant falls off a plank of length ``n``."""
    leftward = max(left, default=0)
    rightward = max((n - position for position in right), default=0)
    return max(0, leftward, rightward)


def maximum_units(box_types, truck_size):
    """Return the most units that fit on a truck carrying ``truck_size`` boxes."""
    total = 0
    for count, units in sorted(box_types, key=lambda box: box[1], reverse=True):
        if truck_size <= 0:
            break
        taken = min(count, truck_size)
        total += taken * units
        truck_size -= taken
    return total


def min_domino_rotations(tops, bottoms):
    """Return the fewest rotations making one row uniform, or -1 if impossible."""
    if len(tops) != len(bottoms):
        raise ValueError("tops and bottoms must have the same length")
    if not tops:
        raise ValueError("at least one domino is required")
    pairs = list(zip(tops, bottoms))
    for target in (tops[0], bottoms[0]):
        if all(target in pair for pair in pairs):
            top_swaps = sum(top != target for top, _ in pairs)
            bottom_swaps = sum(bottom != target for _, bottom in pairs)
            return min(top_swaps, bottom_swaps)
    return -1