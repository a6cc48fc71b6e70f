# cache_trace/analysis.py
"""
Policy-independent structure of a trace: reuse intervals, access spans and
the average footprint fp(w), i.e. the number of distinct identifiers in a
window of length w averaged over all n - w + 1 placements.

fp(w) is computed in closed form from the reuse-interval histogram plus
two boundary corrections (first and last access of every identifier):

    fp(w) = m - (interior(w) + start(w) + end(w)) / (n - w + 1)

    interior(w) = sum_{r > w}      (r - w)            * H[r]
    start(w)    = sum_k  max(0, (f_k + 1) - w)
    end(w)      = sum_k  max(0, (n - l_k) - w)

All three terms have the form sum_{v > w} (v - w) * count[v], so they are
evaluated for every w at once with integer suffix sums.
"""
import logging
from collections import Counter

import numpy as np

from .config import REUSE_INF
from .ids import iter_checked, materialize

logger = logging.getLogger(__name__)


def reuse_interval(trace, validate=None) -> list:
    """
    One entry per access: distance to the previous access of the same id,
    or REUSE_INF on the first-ever access.
    """
    last_seen = {}
    out = []
    for i, x in enumerate(iter_checked(trace, validate)):
        prev = last_seen.get(x)
        out.append(REUSE_INF if prev is None else i - prev)
        last_seen[x] = i
    return out


def access_times(trace, validate=None) -> dict:
    """
    Map every distinct id to (first_index, last_index).
    Keys come out in first-occurrence order.
    """
    spans = {}
    for t, x in enumerate(iter_checked(trace, validate)):
        span = spans.get(x)
        if span is None:
            spans[x] = (t, t)
        else:
            spans[x] = (min(span[0], t), max(span[1], t))
    return spans


def reuse_histogram(intervals) -> Counter:
    """Count of each finite reuse interval; REUSE_INF entries are dropped."""
    return Counter(r for r in intervals if r != REUSE_INF)


# ----------------------------------------------------------
_INT64_MAX = np.iinfo(np.int64).max


def _count_dtype(n: int):
    """
    Every intermediate sum is at most 3 * (n + 1) ** 2, which fits int64 up to
    n of about 1.7e9; beyond that fall back to exact Python ints (object).
    """
    return np.int64 if 3 * (n + 1) ** 2 <= _INT64_MAX else object


def _excess_sums(values, n: int) -> np.ndarray:
    """
    For w = 0..n return sum over v in values with v > w of (v - w).
    values must lie in [0, n]; the v > w filter is the max(0, .) guard.
    """
    counts = np.bincount(np.asarray(values, dtype=np.int64), minlength=n + 1)
    return _excess_from_counts(counts.astype(_count_dtype(n)))


def _excess_from_counts(counts: np.ndarray) -> np.ndarray:
    idx = np.arange(len(counts)).astype(counts.dtype)
    ge_count  = np.cumsum(counts[::-1])[::-1]
    ge_weight = np.cumsum((counts * idx)[::-1])[::-1]
    # shift "v >= w" to "v > w"
    gt_count  = np.append(ge_count[1:], 0)
    gt_weight = np.append(ge_weight[1:], 0)
    return gt_weight - idx * gt_count


def footprint(trace, validate=None) -> list:
    """
    Average footprint for every window length w = 0..n (fp(0) = 0).

    The trace is buffered once. Everything up to the last step is exact
    integer arithmetic; fp(w) is (m * windows - total) / windows, a single
    rounding of the exact rational value.
    """
    t = materialize(trace, validate)
    n = len(t)
    if n == 0:
        return [0.0]

    spans     = access_times(t, validate=False)
    intervals = reuse_interval(t, validate=False)
    m = len(spans)

    dtype = _count_dtype(n)
    hist = np.zeros(n + 1, dtype=dtype)
    for r, c in reuse_histogram(intervals).items():
        hist[r] = c
    interior = _excess_from_counts(hist)
    start    = _excess_sums([f + 1 for f, _ in spans.values()], n)
    end      = _excess_sums([n - l for _, l in spans.values()], n)

    total   = interior + start + end
    windows = n - np.arange(n + 1).astype(dtype) + 1
    fp = (m * windows - total) / windows
    fp[0] = 0.0

    logger.debug("footprint: n=%d m=%d distinct reuse intervals=%d", n, m, int(np.count_nonzero(hist)))
    return fp.tolist()
