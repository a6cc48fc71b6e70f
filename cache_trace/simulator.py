# cache_trace/simulator.py
"""
Replay a trace through any simulator implementing cache_access() and
set_capacity(). The replay is a strict left-to-right fold: access i sees
the simulator state left by accesses 0..i-1.
"""
import logging
import math
from dataclasses import dataclass

from . import config
from .ids import check_obj_id, iter_checked
from .policies.base import AccessResult, ensure_cache_sim

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayStats:
    total:  int
    misses: int

    @property
    def hits(self) -> int:
        return self.total - self.misses

    @property
    def miss_ratio(self) -> float:
        """nan for an empty replay, never a made-up 0."""
        return self.misses / self.total if self.total else math.nan

    @property
    def hit_ratio(self) -> float:
        return self.hits / self.total if self.total else math.nan


def replay(sim, trace, validate=None) -> ReplayStats:
    """
    Feed trace to sim one access at a time.

    A list or tuple is checked in full before the first access, so a bad
    id leaves sim untouched. Any other iterable is checked lazily: a bad id
    at position k raises after accesses 0..k-1 have reached sim.
    """
    ensure_cache_sim(sim)
    if validate is None:
        validate = config.VALIDATE_IDS
    if validate and isinstance(trace, (list, tuple)):
        for obj_id in trace:
            check_obj_id(obj_id)
        validate = False

    total = misses = 0
    for obj_id in iter_checked(trace, validate):
        result = AccessResult.coerce(sim.cache_access(obj_id))
        total += 1
        if result is AccessResult.MISS:
            misses += 1
    logger.debug("replay %s: %d accesses, %d misses", type(sim).__name__, total, misses)
    return ReplayStats(total, misses)


def get_total_miss(sim, trace, validate=None):
    """(total accesses, misses) after feeding the whole trace to sim."""
    stats = replay(sim, trace, validate)
    return stats.total, stats.misses


def get_mr(sim, trace, validate=None) -> float:
    """Miss ratio; nan when the trace is empty."""
    return replay(sim, trace, validate).miss_ratio
