# algokit

A library of classic algorithms and data structures written in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.searching` | `search_rotated`, `majority_element`, `has_pair_with_difference`, `four_sum`, `max_loot`, `count_triplets_below`, `zero_sum_subarrays`, `largest_min_distance` |
| `algokit.recursion` | `count_grid_paths`, `hanoi_moves`, `string_permutations` |
| `algokit.numbers` | `nearest_palindrome`, `next_same_popcount`, `primes_between` |
| `algokit.array_ops` | `min_max`, `merge_intervals`, `next_permutation`, `partition_negatives`, `stable_partition_negatives`, `rotate_right`, `min_height_difference`, `find_duplicate`, `merge_without_extra_space`, `min_swaps_to_sort`, `next_greater_elements` |
| `algokit.subarrays` | `max_subarray` (returns a `MaxSubarray`), `max_product_subarray`, `longest_consecutive_run`, `longest_consecutive_present`, `max_profit_single`, `max_profit_two_transactions`, `find_triplet`, `trapped_water`, `shortest_subarray_exceeding`, `min_jumps`, `min_swaps_to_group`, `longest_zero_sum_subarray`, `shortest_subarray_with_sum` |
| `algokit.characters` | `longest_distinct_substring`, `prime_priority_order` |
| `algokit.strings` | `reverse_string`, `reverse_words`, `reverse_alnum_runs`, `generate_ip_addresses`, `users_signed_out_within` |
| `algokit.linked_list` | `Node`, `SinglyLinkedList`, `DoublyNode`, `DoublyLinkedList`, `add_numbers` |
| `algokit.lru` | `LRUCache` |
| `algokit.greedy` | `Item`, `fractional_knapsack`, `PageStats`, `optimal_page_replacement`, `Process`, `ScheduledProcess`, `shortest_job_first` |
| `algokit.graphs` | `Graph` (with `add_edge`, `bfs`, `dfs`, `greedy_coloring`), `min_connecting_values` |

## Examples

```python
from algokit.searching import search_rotated
from algokit.numbers import nearest_palindrome, primes_between
from algokit.subarrays import max_subarray
from algokit.strings import generate_ip_addresses
from algokit.greedy import Item, fractional_knapsack
from algokit.lru import LRUCache
from algokit.graphs import Graph

search_rotated([4, 5, 6, 7, 0, 1, 2], 0)            # 4
nearest_palindrome(123)                             # 121
primes_between(10, 30)                              # [11, 13, 17, 19, 23, 29]
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])       # MaxSubarray(start=3, end=6, total=6)
generate_ip_addresses("25525511135")                # ['255.255.11.135', '255.255.111.35']

fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])  # 240.0

cache = LRUCache(2)
for key in (1, 2, 3):
    cache.insert(key)
list(cache)                                         # [3, 2]

graph = Graph(3)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.bfs()                                         # [0, 1, 2]
```

Functions take their input as arguments and return new values; list-valued
inputs are copied rather than modified. Functions that cannot give an answer
for their input raise `ValueError` (and `IndexError` for out-of-range
positions or vertices).

## What it does not do

algokit is a library only. It has no command-line program and reads nothing
from standard input or files; every problem is solved by calling its function
with Python values.

## Running the tests

```
pytest
```