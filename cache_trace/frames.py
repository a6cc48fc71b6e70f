# cache_trace/frames.py
"""pandas glue: traces out of DataFrames, results back into DataFrames."""
import logging

import pandas as pd

from .analysis import footprint
from .config import KEY_COLUMN
from .ids import materialize
from .policies.base import ensure_cache_sim
from .simulator import replay

logger = logging.getLogger(__name__)


def trace_from_frame(df: pd.DataFrame, key_func=None, key_col=KEY_COLUMN,
                     sort_by=None, validate=None) -> list:
    """
    Turn a request log into a list of ids.

    key_func(row) builds the id from an itertuples() row, e.g.
    ``lambda r: f"{r.video}_{r.ladder}"``; otherwise ``key_col`` is used as is.
    """
    if sort_by is not None:
        df = df.sort_values(sort_by, kind="stable")
    if key_func is None:
        keys = df[key_col].tolist()
    else:
        keys = [key_func(row) for row in df.itertuples(index=False)]
    return materialize(keys, validate)


def footprint_frame(trace, validate=None) -> pd.DataFrame:
    fp = footprint(trace, validate)
    return pd.DataFrame({"window": range(len(fp)), "footprint": fp})


def miss_ratio_curve(sim_factory, trace, capacities, validate=None) -> pd.DataFrame:
    """
    Replay the same trace once per capacity, each time on a fresh simulator
    from sim_factory() sized with set_capacity().
    """
    t = materialize(trace, validate)
    rows = []
    for cap in capacities:
        sim = ensure_cache_sim(sim_factory())
        sim.set_capacity(cap)
        stats = replay(sim, t, validate=False)
        rows.append((cap, stats.total, stats.misses, stats.miss_ratio))
        logger.debug("capacity %s -> miss ratio %.4f", cap, stats.miss_ratio)
    return pd.DataFrame(rows, columns=["capacity", "total", "misses", "miss_ratio"])
