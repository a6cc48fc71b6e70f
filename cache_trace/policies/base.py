# cache_trace/policies/base.py
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from ..errors import InvalidCapacityError, SimulatorContractError


class AccessResult(Enum):
    HIT  = True
    MISS = False

    def __bool__(self):
        return self.value

    @classmethod
    def coerce(cls, value) -> "AccessResult":
        """
        Accept either an AccessResult or a plain bool (True on hit), which is
        what most byte-aware policies return from request().
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls.HIT if value else cls.MISS
        raise SimulatorContractError(
            f"cache_access returned {value!r}; expected AccessResult or bool")


class CacheSim(ABC):
    """
    Capability contract for any cache simulator driven by the replay engine.
    Subclasses implement cache_access(); set_capacity() just records the
    size and hands back self so calls can be chained.
    """
    def __init__(self, capacity: int = 0):
        self.capacity = 0
        self.set_capacity(capacity)

    @abstractmethod
    def cache_access(self, obj_id) -> AccessResult: ...

    def set_capacity(self, capacity: int) -> "CacheSim":
        self.capacity = check_capacity(capacity)
        return self


def check_capacity(capacity) -> int:
    if isinstance(capacity, (bool, np.bool_)) or not isinstance(capacity, (int, np.integer)):
        raise InvalidCapacityError(capacity)
    if capacity < 0:
        raise InvalidCapacityError(capacity)
    return int(capacity)


def ensure_cache_sim(sim):
    """Duck-typed check: anything with callable cache_access/set_capacity will do."""
    for name in ("cache_access", "set_capacity"):
        if not callable(getattr(sim, name, None)):
            raise SimulatorContractError(
                f"{type(sim).__name__} has no callable {name}()")
    return sim
