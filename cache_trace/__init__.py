"""cache-trace: reuse intervals, access spans, average footprint and cache replay."""

from .analysis import access_times, footprint, reuse_histogram, reuse_interval  # noqa: F401
from .config import REUSE_INF, configure_logging  # noqa: F401
from .errors import (  # noqa: F401
    CacheTraceError,
    InvalidCapacityError,
    InvalidIdentifierError,
    SimulatorContractError,
)
from .frames import footprint_frame, miss_ratio_curve, trace_from_frame  # noqa: F401
from .ids import check_obj_id, is_obj_id, materialize  # noqa: F401
from .policies.base import AccessResult, CacheSim, ensure_cache_sim  # noqa: F401
from .simulator import ReplayStats, get_mr, get_total_miss, replay  # noqa: F401

__version__ = "0.1.0"
