from .fifo import FIFOPageManager
from .lru import LRUPageManager
from .pipeline import PAGE_MANAGERS, SOURCES, make_page_manager, simulate_paging

__all__ = [
    "FIFOPageManager",
    "LRUPageManager",
    "PAGE_MANAGERS",
    "SOURCES",
    "make_page_manager",
    "simulate_paging",
]
