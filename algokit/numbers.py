"""Number puzzles: nearest palindrome, same-popcount successor, prime ranges."""

from math import isqrt


def _mirror(prefix, length):
    text = str(prefix)
    tail = text[::-1] if length % 2 == 0 else text[-2::-1]
    return int(text + tail)


def nearest_palindrome(number):
    """Closest palindromic integer other than number; the smaller wins a tie.

    Raises ValueError for a negative number.
    """
    if number < 0:
        raise ValueError("number must not be negative")
    if number < 10:
        return 1 if number == 0 else number - 1
    digits = str(number)
    length = len(digits)
    prefix = int(digits[: (length + 1) // 2])
    candidates = {10 ** (length - 1) - 1, 10**length + 1}
    candidates.update(_mirror(prefix + delta, length) for delta in (-1, 0, 1))
    candidates.discard(number)
    return min(candidates, key=lambda candidate: (abs(candidate - number), candidate))


def next_same_popcount(number):
    """Smallest integer above number with as many set bits, or None for zero.

    Raises ValueError for a negative number.
    """
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return None
    lowest = number & -number
    ripple = number + lowest
    ones = ((number ^ ripple) >> 2) // lowest
    return ripple | ones


def primes_between(low, high):
    """Primes p with low <= p <= high, ascending."""
    low = max(low, 2)
    if high < low:
        return []
    sieve = bytearray([1]) * (high + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(high) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, high + 1, i)))
    return [n for n in range(low, high + 1) if sieve[n]]