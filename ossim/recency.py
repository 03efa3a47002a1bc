# recency.py
from collections import OrderedDict


class RecencyMap:
    """
    Ordered map of key -> last access time, oldest first.

    touch() moves a key to the most recent end; evict_oldest() pops from the
    other end. Times passed to touch() must be non-decreasing, which keeps the
    head of the map the entry with the smallest recency.
    """

    def __init__(self):
        self._order = OrderedDict()

    def touch(self, key, time):
        """Insert key or refresh its recency, making it the most recent entry"""
        self._order[key] = time
        self._order.move_to_end(key)

    def evict_oldest(self):
        """
        Remove and return (key, time) of the least recently used entry
        Raises: KeyError if the map is empty
        """
        if not self._order:
            raise KeyError("evict_oldest(): recency map is empty")
        return self._order.popitem(last=False)

    def oldest(self):
        if not self._order:
            return None
        key = next(iter(self._order))
        return key, self._order[key]

    def recency(self, key):
        return self._order[key]

    def keys(self):
        return list(self._order)

    def clear(self):
        self._order.clear()

    def __contains__(self, key):
        return key in self._order

    def __len__(self):
        return len(self._order)

    def __repr__(self):
        return f"RecencyMap({dict(self._order)})"
