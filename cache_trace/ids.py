# cache_trace/ids.py
"""
Identifier contract.

A trace element is only ever hashed, compared and printed, never used in
arithmetic. Accepted: ints, strings, bytes (numpy scalars of those kinds
included) and flat tuples of them, e.g. ``("video_12", "720p")``.
Floats, bools, None and nested structures are rejected.
"""
import numpy as np

from . import config
from .errors import InvalidIdentifierError

_SCALARS = (int, str, bytes, np.integer, np.str_, np.bytes_)


def _is_scalar(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, _SCALARS)


def is_obj_id(value) -> bool:
    if isinstance(value, tuple):
        return len(value) > 0 and all(_is_scalar(v) for v in value)
    return _is_scalar(value)


def check_obj_id(value):
    if not is_obj_id(value):
        raise InvalidIdentifierError(value)
    return value


def materialize(trace, validate=None) -> list:
    """
    Buffer a trace once into a list so it can be walked several times.
    Every element is checked against the identifier contract unless
    ``validate`` (default: config.VALIDATE_IDS) is false.
    """
    if validate is None:
        validate = config.VALIDATE_IDS
    if validate:
        return [check_obj_id(x) for x in trace]
    return list(trace)


def iter_checked(trace, validate=None):
    """Lazy counterpart of materialize() for single-pass consumers."""
    if validate is None:
        validate = config.VALIDATE_IDS
    if not validate:
        yield from trace
        return
    for x in trace:
        yield check_obj_id(x)
