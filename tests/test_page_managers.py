import pytest

from ossim import InvalidConfiguration
from paging import FIFOPageManager, LRUPageManager, make_page_manager


def test_fifo_example():
    manager = FIFOPageManager(2).replay([1, 2, 1, 3])

    assert manager.faults == 3
    assert manager.hits == 1
    assert manager.evictions == [1]
    assert manager.resident() == [2, 3]
    assert manager.log == [
        "FIFO: page 1 added",
        "FIFO: page 2 added",
        "FIFO: page 1 already resident (hit)",
        "FIFO: page 1 evicted",
        "FIFO: page 3 added",
    ]


def test_fifo_evicts_in_insertion_order():
    manager = FIFOPageManager(3).replay([5, 6, 7, 5, 6, 8, 9, 10])
    assert manager.evictions == [5, 6, 7]


def test_fifo_hit_never_evicts():
    manager = FIFOPageManager(2).replay([1, 2])
    before = list(manager.evictions)
    assert manager.reference(2) is True
    assert manager.reference(1) is True
    assert manager.evictions == before


def test_lru_evicts_least_recent():
    # same trace as the FIFO example: the hit on 1 makes 2 the victim
    manager = LRUPageManager(2).replay([1, 2, 1, 3])

    assert manager.faults == 3
    assert manager.hits == 1
    assert manager.evictions == [2]
    assert manager.resident() == [1, 3]


def test_lru_hit_updates_recency():
    manager = LRUPageManager(3).replay([1, 2, 3])
    assert manager.pages.recency(1) == 0

    manager.reference(1)
    assert manager.pages.recency(1) == 3
    assert manager.resident() == [2, 3, 1]


def test_lru_victim_has_smallest_recency():
    manager = LRUPageManager(3)
    for page in [4, 7, 4, 1, 9, 7, 2, 4, 1, 3]:
        if page not in manager.pages and len(manager.pages) == manager.max_pages:
            expected = min(manager.resident(), key=manager.pages.recency)
            manager.reference(page)
            assert manager.evictions[-1] == expected
        else:
            manager.reference(page)


def test_lru_logs_eviction_before_insertion():
    manager = LRUPageManager(1).replay([1, 2])
    assert manager.log == ["LRU: page 1 added", "LRU: page 1 evicted", "LRU: page 2 added"]


@pytest.mark.parametrize("cls", [FIFOPageManager, LRUPageManager])
def test_hit_rate_bounds(cls):
    manager = cls(2)
    assert manager.hit_rate == 0.0

    manager.replay([1, 1, 1, 2, 3, 1])
    assert 0.0 <= manager.hit_rate <= 1.0
    assert manager.hit_rate == pytest.approx(manager.hits / (manager.hits + manager.faults))


@pytest.mark.parametrize("cls", [FIFOPageManager, LRUPageManager])
def test_zero_capacity_rejected(cls):
    with pytest.raises(InvalidConfiguration):
        cls(0)


def test_reset_clears_counters():
    manager = LRUPageManager(2).replay([1, 2, 3])
    manager.reset()
    assert (manager.hits, manager.faults, manager.time) == (0, 0, 0)
    assert manager.resident() == []
    assert manager.log == []


def test_make_page_manager():
    assert isinstance(make_page_manager("fifo", 2), FIFOPageManager)
    assert isinstance(make_page_manager("LRU", 2), LRUPageManager)
    with pytest.raises(InvalidConfiguration):
        make_page_manager("clock", 2)
