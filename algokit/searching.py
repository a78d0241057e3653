"""Searching and two-pointer problems over integer sequences."""

from bisect import bisect_left
from collections import defaultdict


def _find_pivot(values):
    """Index of the largest element of a rotated sorted list, or -1 if unrotated."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if mid - 1 >= low and values[mid] < values[mid - 1]:
            return mid - 1
        if mid + 1 <= high and values[mid + 1] < values[mid]:
            return mid
        if values[mid] < values[low]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def _binary_search(values, target, low, high):
    """Index of target within values[low..high] (inclusive), or -1."""
    if high < low:
        return -1
    index = bisect_left(values, target, low, high + 1)
    if index <= high and values[index] == target:
        return index
    return -1


def search_rotated(values, target):
    """Index of target in a rotated ascending list, or -1 when it is absent."""
    values = list(values)
    if not values:
        return -1
    pivot = _find_pivot(values)
    found = _binary_search(values, target, 0, pivot)
    if found != -1:
        return found
    return _binary_search(values, target, pivot + 1, len(values) - 1)


def majority_element(values):
    """The value occurring more than half the time, or None if there is none."""
    values = list(values)
    if not values:
        return None
    candidate, count = values[0], 1
    for value in values[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate, count = value, 1
    if values.count(candidate) * 2 > len(values):
        return candidate
    return None


def has_pair_with_difference(values, difference):
    """Whether two distinct elements differ by exactly ``difference``."""
    items = sorted(values)
    i, j = 0, 1
    while j < len(items):
        if i == j:
            j += 1
            continue
        gap = items[j] - items[i]
        if gap > difference:
            i += 1
        elif gap < difference:
            j += 1
        else:
            return True
    return False


def four_sum(values, target):
    """All distinct ascending quadruplets of elements summing to target."""
    items = sorted(values)
    size = len(items)
    found = []
    for i in range(size - 3):
        if i > 0 and items[i] == items[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and items[j] == items[j - 1]:
                continue
            left, right = j + 1, size - 1
            while left < right:
                total = items[i] + items[j] + items[left] + items[right]
                if total == target:
                    found.append((items[i], items[j], items[left], items[right]))
                    left += 1
                    right -= 1
                    while left < right and items[left] == items[left - 1]:
                        left += 1
                    while left < right and items[right] == items[right + 1]:
                        right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return found


def max_loot(values):
    """Largest total of non-negative amounts with no two adjacent ones taken."""
    skipped, best = 0, 0
    for value in values:
        skipped, best = best, max(best, skipped + value)
    return best


def count_triplets_below(values, limit):
    """Number of index triplets whose elements sum to less than limit."""
    items = sorted(values)
    size = len(items)
    count = 0
    for i in range(size - 2):
        j, k = i + 1, size - 1
        while j < k:
            if items[i] + items[j] + items[k] < limit:
                count += k - j
                j += 1
            else:
                k -= 1
    return count


def zero_sum_subarrays(values):
    """(start, end) index pairs, inclusive, of every subarray summing to zero.

    Pairs come ordered by end index, and for one end by start index.
    """
    ends_by_sum = defaultdict(list)
    found = []
    running = 0
    for index, value in enumerate(values):
        running += value
        if running == 0:
            found.append((0, index))
        found.extend((earlier + 1, index) for earlier in ends_by_sum[running])
        ends_by_sum[running].append(index)
    return found


def largest_min_distance(positions, k):
    """Largest possible minimum gap when choosing k of the given positions.

    Raises ValueError unless 2 <= k <= len(positions).
    """
    items = sorted(positions)
    if k < 2 or k > len(items):
        raise ValueError(f"k must be between 2 and {len(items)}, got {k}")

    def fits(gap):
        placed, last = 1, items[0]
        for position in items[1:]:
            if position - last >= gap:
                placed += 1
                last = position
                if placed == k:
                    return True
        return False

    best = 0
    low, high = 1, items[-1] - items[0]
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best