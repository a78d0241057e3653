"""Recursive classics: grid paths, Tower of Hanoi, string permutations."""

from itertools import permutations
from math import comb


def count_grid_paths(size):
    """Number of right/down paths from the top-left to the bottom-right
    corner of a size x size grid; zero for a grid with no cells.
    """
    if size <= 0:
        return 0
    return comb(2 * (size - 1), size - 1)


def hanoi_moves(n, source="A", destination="C", helper="B"):
    """List of (from, to) moves that carry n discs from source to destination."""
    moves = []

    def solve(count, start, end, spare):
        if count <= 0:
            return
        solve(count - 1, start, spare, end)
        moves.append((start, end))
        solve(count - 1, spare, end, start)

    solve(n, source, destination, helper)
    return moves


def string_permutations(text):
    """All orderings of the characters of text, repeats included, in the
    order produced by picking each position's character left to right.
    """
    return ["".join(order) for order in permutations(text)]