# cache_trace/config.py
import logging
import os
import sys

# usize-style "infinity" for first-ever accesses in a reuse-interval sequence
REUSE_INF = sys.maxsize

# default DataFrame key column (same naming as the replay traces)
KEY_COLUMN = "key"

VALIDATE_IDS = os.environ.get("CACHE_TRACE_VALIDATE_IDS", "1").lower() not in {"0", "false", "no"}
LOG_LEVEL    = os.environ.get("CACHE_TRACE_LOG_LEVEL", "WARNING").upper()


def configure_logging(level=None) -> logging.Logger:
    """
    Attach a bare message handler to the package logger.
    Safe to call more than once.
    """
    logger = logging.getLogger("cache_trace")
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level or LOG_LEVEL)
    logger.propagate = False
    return logger
