from collections import OrderedDict

import pytest

from cache_trace import AccessResult, CacheSim


class LRU(CacheSim):
    """
    Classic Least-Recently-Used cache, capacity counted in objects.
    """
    def __init__(self, capacity: int = 0):
        self.cache = OrderedDict()
        super().__init__(capacity)

    def cache_access(self, obj_id) -> AccessResult:
        if obj_id in self.cache:
            self.cache.move_to_end(obj_id)
            return AccessResult.HIT
        while len(self.cache) >= self.capacity and self.cache:
            self.cache.popitem(last=False)
        if self.capacity > 0:
            self.cache[obj_id] = True
        return AccessResult.MISS


class BoolInfinite:
    """Never evicts; answers with plain bools and no CacheSim base."""
    def __init__(self):
        self.seen = set()
        self.capacity = None

    def cache_access(self, obj_id) -> bool:
        hit = obj_id in self.seen
        self.seen.add(obj_id)
        return hit

    def set_capacity(self, capacity):
        self.capacity = capacity
        return self


@pytest.fixture
def lru():
    return LRU


@pytest.fixture
def infinite():
    return BoolInfinite
