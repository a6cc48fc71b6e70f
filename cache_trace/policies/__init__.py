from .base import AccessResult, CacheSim, check_capacity, ensure_cache_sim  # noqa: F401
