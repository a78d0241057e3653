import pytest

from algokit.characters import longest_distinct_substring, prime_priority_order


def test_longest_distinct_all_distinct():
    text = "abcdef"
    assert longest_distinct_substring(text) == len(text)


def test_longest_distinct_examples():
    assert longest_distinct_substring("") == 0
    assert longest_distinct_substring("aaaa") == 1
    assert longest_distinct_substring("abcabcbb") == 3


def test_longest_distinct_bounded_by_alphabet():
    text = "xyzxyzzyxw"
    assert longest_distinct_substring(text) <= len(set(text))


def test_longest_distinct_monotone_under_extension():
    text = "pwwkew"
    assert longest_distinct_substring(text + "q") >= longest_distinct_substring(text)


def test_prime_priority_order_example():
    assert prime_priority_order("cbea") == "aecb"


def test_prime_priority_order_is_permutation():
    text = "Hello!World~42"
    assert sorted(prime_priority_order(text)) == sorted(text)


def test_prime_priority_order_idempotent():
    text = "zyx{}[]()ABC123"
    once = prime_priority_order(text)
    assert prime_priority_order(once) == once


@pytest.mark.parametrize("text", ["", "a b", "ab\n", "caf\u00e9"])
def test_prime_priority_order_rejects_bad_input(text):
    with pytest.raises(ValueError):
        prime_priority_order(text)