"""Array rearrangements: min/max, intervals, permutations, rotations and more."""


def min_max(values):
    """Return (minimum, maximum) using pairwise comparisons.

    Raises ValueError for an empty sequence.
    """
    items = list(values)
    if not items:
        raise ValueError("min_max needs at least one value")
    if len(items) % 2:
        low = high = items[0]
        start = 1
    else:
        low, high = sorted(items[:2])
        start = 2
    for a, b in zip(items[start::2], items[start + 1::2]):
        small, large = (a, b) if a < b else (b, a)
        if small < low:
            low = small
        if large > high:
            high = large
    return low, high


def merge_intervals(intervals):
    """Merge overlapping or touching (start, end) intervals, sorted by start."""
    merged = []
    for start, end in sorted(tuple(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            if end > merged[-1][1]:
                merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def next_permutation(values):
    """The next lexicographic arrangement; the last one wraps to the first."""
    items = list(values)
    i = len(items) - 1
    while i > 0 and items[i - 1] >= items[i]:
        i -= 1
    if i == 0:
        return sorted(items)
    pivot = i - 1
    j = len(items) - 1
    while items[j] <= items[pivot]:
        j -= 1
    items[pivot], items[j] = items[j], items[pivot]
    items[i:] = reversed(items[i:])
    return items


def partition_negatives(values):
    """Move negatives to the front by swapping; order is not preserved."""
    items = list(values)
    boundary = 0
    for i, value in enumerate(items):
        if value < 0:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    return items


def stable_partition_negatives(values):
    """Negatives first, then the rest, each group keeping its original order."""
    items = list(values)
    return [v for v in items if v < 0] + [v for v in items if v >= 0]


def rotate_right(values, k):
    """Rotate the sequence k places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    split = len(items) - k
    return items[split:] + items[:split]


def min_height_difference(heights, k):
    """Smallest spread of heights after raising or lowering each one by k,
    never letting a lowered height go negative.

    Raises ValueError for an empty sequence.
    """
    items = sorted(heights)
    if not items:
        raise ValueError("at least one height is required")
    best = items[-1] - items[0]
    for current, following in zip(items, items[1:]):
        if following < k:
            continue
        highest = max(current + k, items[-1] - k)
        lowest = min(items[0] + k, following - k)
        best = min(best, highest - lowest)
    return best


def find_duplicate(values):
    """The smallest value occurring more than once, or None."""
    seen = set()
    repeated = set()
    for value in values:
        if value in seen:
            repeated.add(value)
        seen.add(value)
    return min(repeated) if repeated else None


def _is_ascending(items):
    return all(a <= b for a, b in zip(items, items[1:]))


def merge_without_extra_space(first, second):
    """Redistribute two ascending sequences so the first holds the smallest
    elements; return both as new lists of their original lengths.

    Raises ValueError if either input is not ascending.
    """
    a, b = list(first), list(second)
    if not (_is_ascending(a) and _is_ascending(b)):
        raise ValueError("both sequences must be in ascending order")
    if not a or not b:
        return a, b
    size = len(a)
    for i in reversed(range(len(b))):
        last = a[-1]
        j = size - 2
        while j >= 0 and a[j] > b[i]:
            a[j + 1] = a[j]
            j -= 1
        if j != size - 2 or last > b[i]:
            a[j + 1] = b[i]
            b[i] = last
    return a, b


def min_swaps_to_sort(values):
    """Fewest swaps of two elements that leave the sequence sorted."""
    items = list(values)
    order = sorted(range(len(items)), key=lambda i: (items[i], i))
    visited = [False] * len(items)
    swaps = 0
    for start in range(len(items)):
        if visited[start] or order[start] == start:
            continue
        cycle = 0
        position = start
        while not visited[position]:
            visited[position] = True
            position = order[position]
            cycle += 1
        swaps += cycle - 1
    return swaps


def next_greater_elements(values):
    """For each element, the first strictly greater one to its right, or -1."""
    items = list(values)
    result = [-1] * len(items)
    waiting = []
    for i, value in enumerate(items):
        while waiting and items[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(i)
    return result