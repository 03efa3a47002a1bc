# First-In, First-Out (FIFO) Page Replacement
# paging/fifo.py

from collections import deque

from ossim import PageManager


class FIFOPageManager(PageManager):
    """
    FIFO page replacement.
    - Resident pages are kept in insertion order
    - A hit does not reorder anything; on a fault with a full queue the
      oldest inserted page is evicted
    """

    name = "FIFO"

    def _clear(self):
        self.queue = deque()

    def resident(self):
        return list(self.queue)

    def _access(self, page, time):
        if page in self.queue:
            self._hit(page)
            return True

        self.faults += 1
        if len(self.queue) >= self.max_pages:
            self._evicted(self.queue.popleft())
        self.queue.append(page)
        self._inserted(page)
        return False
