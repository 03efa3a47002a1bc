# Least Recently Used (LRU) Page Replacement
# paging/lru.py

from ossim import PageManager, RecencyMap


class LRUPageManager(PageManager):
    """
    LRU page replacement.
    - Every reference stamps the page with the current logical time
    - On a fault that pushes occupancy over capacity, the page with the
      oldest stamp is evicted
    """

    name = "LRU"

    def _clear(self):
        self.pages = RecencyMap()

    def resident(self):
        return self.pages.keys()

    def _access(self, page, time):
        if page in self.pages:
            self.pages.touch(page, time)
            self._hit(page)
            return True

        self.faults += 1
        self.pages.touch(page, time)
        if len(self.pages) > self.max_pages:
            victim, _ = self.pages.evict_oldest()
            self._evicted(victim)
        self._inserted(page)
        return False
