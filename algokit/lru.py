"""A fixed-capacity set that remembers keys in least-recently-used order."""

from collections import OrderedDict


class LRUCache:
    """Keeps at most ``capacity`` keys, dropping the least recently inserted
    one when full. Iteration yields the most recent key first.
    """

    def __init__(self, capacity):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._keys = OrderedDict()

    def insert(self, key):
        """Mark key as most recently used, evicting the oldest key if needed."""
        if key in self._keys:
            self._keys.move_to_end(key)
            return
        if len(self._keys) == self.capacity:
            self._keys.popitem(last=False)
        self._keys[key] = None

    def __iter__(self):
        return reversed(self._keys)

    def __len__(self):
        return len(self._keys)

    def __contains__(self, key):
        return key in self._keys

    def __repr__(self):
        return f"LRUCache(capacity={self.capacity}, keys={list(self)!r})"