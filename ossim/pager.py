# pager.py
from .config import validate_max_pages


class PageManager:
    """
    Base class for the page replacement engines

    Attributes:
        max_pages: resident page capacity
        time: logical reference counter, advances by one per reference
        hits / faults: counters accumulated over the whole run
        evictions: evicted pages in eviction order
        log: human-readable operation log, one entry per hit, eviction and insertion
        verbose: if True, print log entries to console
    Methods:
        reference(page): reference one page, returns True on a hit
        replay(pages): reference every page of an iterable in order
        resident(): resident pages in the engine's own order
        hit_rate: hits / (hits + faults), 0 without references
    """

    name = "BASE"

    def __init__(self, max_pages, verbose=False):
        self.max_pages = validate_max_pages(max_pages)
        self.verbose = verbose
        self.reset()

    def reset(self):
        self.time = 0
        self.hits = 0
        self.faults = 0
        self.evictions = []
        self.log = []
        self._clear()

    def _clear(self):
        raise NotImplementedError

    def _access(self, page, time):
        """Handle one reference at the given logical time, return True on a hit"""
        raise NotImplementedError

    def resident(self):
        raise NotImplementedError

    def reference(self, page):
        hit = self._access(page, self.time)
        self.time += 1
        return hit

    def replay(self, pages):
        for page in pages:
            self.reference(page)
        return self

    def _record(self, message):
        entry = f"{self.name}: {message}"
        self.log.append(entry)
        if self.verbose:
            print(f"{entry}  | {' | '.join(str(p) for p in self.resident())} |")

    def _hit(self, page):
        self.hits += 1
        self._record(f"page {page} already resident (hit)")

    def _evicted(self, page):
        self.evictions.append(page)
        self._record(f"page {page} evicted")

    def _inserted(self, page):
        self._record(f"page {page} added")

    @property
    def total_refs(self):
        return self.hits + self.faults

    @property
    def hit_rate(self):
        if self.total_refs == 0:
            return 0.0
        return self.hits / self.total_refs

    def get_stats(self):
        return {
            "hits": self.hits,
            "faults": self.faults,
            "hit_rate": round(self.hit_rate, 4),
            "total_refs": self.total_refs,
        }

    def __repr__(self):
        return f"{self.__class__.__name__}(max_pages={self.max_pages}, resident={self.resident()})"
