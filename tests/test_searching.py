from itertools import combinations
from math import comb

import pytest

from algokit.searching import (
    count_triplets_below,
    four_sum,
    has_pair_with_difference,
    largest_min_distance,
    majority_element,
    max_loot,
    search_rotated,
    zero_sum_subarrays,
)


@pytest.mark.parametrize(
    "values",
    [
        [4, 5, 6, 7, 0, 1, 2],
        [0, 1, 2, 4, 5, 6, 7],
        [7, 0, 1, 2, 4, 5, 6],
        [2, 3, 1],
        [9],
    ],
)
def test_search_rotated_finds_every_element(values):
    for value in values:
        assert values[search_rotated(values, value)] == value


def test_search_rotated_missing_target():
    assert search_rotated([4, 5, 6, 7, 0, 1, 2], 3) == -1
    assert search_rotated([9], 3) == -1
    assert search_rotated([], 3) == -1


def test_majority_element_present():
    assert majority_element([3, 1, 3, 3, 2]) == 3
    assert majority_element([8]) == 8


def test_majority_element_absent():
    assert majority_element([1, 2, 3]) is None
    assert majority_element([1, 1, 2, 2]) is None
    assert majority_element([]) is None


def test_has_pair_with_difference_found():
    values = [5, 20, 3, 2, 50, 80]
    for a, b in combinations(values, 2):
        assert has_pair_with_difference(values, abs(a - b))


def test_has_pair_with_difference_not_found():
    values = [5, 20, 3, 2, 50, 80]
    assert not has_pair_with_difference(values, max(values) - min(values) + 1)
    assert not has_pair_with_difference(values, -3)


def test_has_pair_zero_difference_needs_two_elements():
    assert not has_pair_with_difference([1, 5], 0)
    assert has_pair_with_difference([1, 5, 1], 0)


def test_four_sum_known():
    result = four_sum([1, 0, -1, 0, -2, 2], 0)
    assert set(result) == {(-2, -1, 1, 2), (-2, 0, 0, 2), (-1, 0, 0, 1)}
    assert len(result) == len(set(result))


def test_four_sum_invariants():
    values = [2, 2, 2, 2, 2, 1, 3, 4, -1, 0]
    target = 8
    result = four_sum(values, target)
    assert result
    assert len(result) == len(set(result))
    for quad in result:
        assert sum(quad) == target
        assert list(quad) == sorted(quad)
        for element in set(quad):
            assert quad.count(element) <= values.count(element)


def test_four_sum_too_short():
    assert four_sum([1, 2, 3], 6) == []


def test_max_loot_known():
    assert max_loot([5, 5, 10, 100, 10, 5]) == 110


def test_max_loot_small():
    assert max_loot([]) == 0
    assert max_loot([7]) == 7
    assert max_loot([3, 9]) == 9


def test_max_loot_bounds():
    values = [6, 7, 1, 3, 8, 2, 4]
    result = max_loot(values)
    assert max(values) <= result <= sum(values)
    assert max_loot(values + [0]) == result


def test_count_triplets_known():
    assert count_triplets_below([-2, 0, 1, 3], 2) == 2


def test_count_triplets_extremes():
    values = [5, 1, 3, 4, 7]
    assert count_triplets_below(values, 10**6) == comb(len(values), 3)
    assert count_triplets_below(values, -(10**6)) == 0
    assert count_triplets_below([1, 2], 100) == 0


def test_zero_sum_subarrays_sum_to_zero():
    values = [6, 3, -1, -3, 4, -2, 2, 4, 6, -12, -7]
    result = zero_sum_subarrays(values)
    assert result
    for start, end in result:
        assert sum(values[start : end + 1]) == 0
    expected = {
        (s, e)
        for s in range(len(values))
        for e in range(s, len(values))
        if sum(values[s : e + 1]) == 0
    }
    assert set(result) == expected
    assert [end for _, end in result] == sorted(end for _, end in result)


def test_zero_sum_subarrays_none():
    assert zero_sum_subarrays([1, 2, 3]) == []


def test_largest_min_distance_from_source_comment():
    assert largest_min_distance([9, 12], 2) == 3


def test_largest_min_distance_invariants():
    positions = [1, 2, 8, 4, 9]
    gap = largest_min_distance(positions, 3)
    assert any(
        min(b - a for a, b in zip(chosen, chosen[1:])) == gap
        for chosen in combinations(sorted(positions), 3)
    )
    assert all(
        min(b - a for a, b in zip(chosen, chosen[1:])) <= gap
        for chosen in combinations(sorted(positions), 3)
    )


def test_largest_min_distance_all_equal():
    assert largest_min_distance([4, 4, 4], 2) == 0


@pytest.mark.parametrize("k", [0, 1, 4])
def test_largest_min_distance_bad_k(k):
    with pytest.raises(ValueError):
        largest_min_distance([1, 2, 3], k)