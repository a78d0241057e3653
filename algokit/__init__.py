"""Classic algorithms and data structures in plain Python: searching, array
and subarray problems, strings, numbers, recursion, linked lists, an LRU
cache, greedy methods and graphs."""

__version__ = "0.1.0"