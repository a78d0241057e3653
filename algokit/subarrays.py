"""Subarray and window problems: products, runs, profits, water, jumps."""

from dataclasses import dataclass


def max_product_subarray(values):
    """Largest product of a non-empty contiguous run of values.

    Raises ValueError for an empty sequence.
    """
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    best = highest = lowest = items[0]
    for value in items[1:]:
        candidates = (value, highest * value, lowest * value)
        highest, lowest = max(candidates), min(candidates)
        best = max(best, highest)
    return best


def longest_consecutive_run(values):
    """Length of the longest set of consecutive integers among values."""
    present = set(values)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end in present:
            end += 1
        best = max(best, end - value)
    return best


def longest_consecutive_present(values):
    """Length of the longest run of consecutive non-negative integers present,
    found by scanning a presence table from zero to the largest value.

    Raises ValueError if any value is negative.
    """
    present = set(values)
    if not present:
        return 0
    if min(present) < 0:
        raise ValueError("values must not be negative")
    best = current = 1
    for number in range(max(present)):
        if number in present and number + 1 in present:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def max_profit_two_transactions(prices):
    """Best total profit from at most two non-overlapping buy-then-sell trades."""
    items = list(prices)
    size = len(items)
    if size < 2:
        return 0
    profit = [0] * size
    highest = items[-1]
    for i in range(size - 2, -1, -1):
        highest = max(highest, items[i])
        profit[i] = max(profit[i + 1], highest - items[i])
    lowest = items[0]
    for i in range(1, size):
        lowest = min(lowest, items[i])
        profit[i] = max(profit[i - 1], profit[i] + items[i] - lowest)
    return profit[-1]


def max_profit_single(prices):
    """Best profit from one buy followed by one later sell, never negative."""
    lowest = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def find_triplet(values, total):
    """First ascending triple of elements summing to total, or None."""
    items = sorted(values)
    size = len(items)
    for i in range(size - 2):
        left, right = i + 1, size - 1
        while left < right:
            current = items[i] + items[left] + items[right]
            if current == total:
                return items[i], items[left], items[right]
            if current < total:
                left += 1
            else:
                right -= 1
    return None


def trapped_water(heights):
    """Units of rain water held between bars of the given heights."""
    items = list(heights)
    if not items:
        return 0
    left_max = []
    tallest = items[0]
    for height in items:
        tallest = max(tallest, height)
        left_max.append(tallest)
    right_max = []
    tallest = items[-1]
    for height in reversed(items):
        tallest = max(tallest, height)
        right_max.append(tallest)
    right_max.reverse()
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, items)
    )


def shortest_subarray_exceeding(values, limit):
    """Length of the shortest contiguous run of non-negative values whose sum
    is greater than limit, or None when no run is.
    """
    items = list(values)
    best = None
    running = 0
    start = 0
    for i, value in enumerate(items):
        running += value
        while running > limit and start <= i:
            length = i - start + 1
            if best is None or length < best:
                best = length
            running -= items[start]
            start += 1
    return best


@dataclass(frozen=True)
class MaxSubarray:
    """The best contiguous run: inclusive bounds and its sum."""

    start: int
    end: int
    total: int


def max_subarray(values):
    """Kadane's search for the contiguous run with the largest sum.

    Raises ValueError for an empty sequence.
    """
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    best = None
    running = 0
    candidate_start = 0
    for i, value in enumerate(items):
        running += value
        if best is None or running > best.total:
            best = MaxSubarray(candidate_start, i, running)
        if running < 0:
            running = 0
            candidate_start = i + 1
    return best


def min_jumps(values):
    """Fewest jumps from the first to the last index, where each element is
    the longest jump allowed from it; None when the end cannot be reached.
    """
    items = list(values)
    last = len(items) - 1
    reach = 0
    jumps = 0
    boundary = 0
    for i, step in enumerate(items[:-1]):
        reach = max(reach, i + step)
        if i == boundary:
            jumps += 1
            boundary = reach
        if boundary >= last:
            break
    if boundary < last:
        return None
    return jumps


def min_swaps_to_group(values, k):
    """Fewest swaps that bring every element not above k next to each other."""
    items = list(values)
    window = sum(1 for value in items if value <= k)
    if window == 0 or window == len(items):
        return 0
    outsiders = sum(1 for value in items[:window] if value > k)
    best = outsiders
    for right in range(window, len(items)):
        if items[right - window] > k:
            outsiders -= 1
        if items[right] > k:
            outsiders += 1
        best = min(best, outsiders)
    return best


def longest_zero_sum_subarray(values):
    """Length of the longest contiguous run summing to zero; 0 if none."""
    first_seen = {0: -1}
    running = 0
    best = 0
    for i, value in enumerate(values):
        running += value
        if running in first_seen:
            best = max(best, i - first_seen[running])
        else:
            first_seen[running] = i
    return best


def shortest_subarray_with_sum(values, k):
    """Length of the shortest contiguous run summing exactly to k, or None."""
    latest = {0: -1}
    running = 0
    best = None
    for i, value in enumerate(values):
        running += value
        earlier = latest.get(running - k)
        if earlier is not None:
            length = i - earlier
            if best is None or length < best:
                best = length
        latest[running] = i
    return best