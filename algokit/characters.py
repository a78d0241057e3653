"""Character-level puzzles: distinct runs and prime-priority ordering."""

from algokit.numbers import primes_between

_PRIME_CODES = frozenset(primes_between(2, 150))


def longest_distinct_substring(text):
    """Length of the longest run of text with no repeated character."""
    last_seen = {}
    window_start = 0
    best = 0
    for i, char in enumerate(text):
        window_start = max(window_start, last_seen.get(char, -1) + 1)
        best = max(best, i - window_start + 1)
        last_seen[char] = i
    return best


def _priority(char):
    code = ord(char)
    if code in _PRIME_CODES:
        return (0, code)
    return (1, -code)


def prime_priority_order(text):
    """Reorder printable ASCII characters: those whose codes are prime come
    first in ascending code order, the rest follow in descending code order.

    Raises ValueError for empty text or characters outside '!'..'~'.
    """
    if not text:
        raise ValueError("text must not be empty")
    for char in text:
        if not 33 <= ord(char) <= 126:
            raise ValueError(f"unsupported character {char!r}")
    return "".join(sorted(text, key=_priority))