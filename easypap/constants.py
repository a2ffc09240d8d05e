"""Default run settings and wall-clock helpers."""

from __future__ import annotations

import time
from typing import Tuple, Union

DEFAULT_DIM = 1024
DEFAULT_KERNEL = "none"
DEFAULT_VARIANT = "seq"
DEFAULT_OCL_VARIANT = "ocl"

USEC_PER_SEC = 1_000_000

TimeValue = Union[int, Tuple[int, int]]


def _to_usec(t: TimeValue) -> int:
    """Convert microseconds or a (seconds, microseconds) pair to microseconds."""
    if isinstance(t, tuple):
        seconds, microseconds = t
        return int(seconds) * USEC_PER_SEC + int(microseconds)
    return int(t)


def what_time_is_it() -> int:
    """Return the current wall-clock time in microseconds."""
    return time.time_ns() // 1000


def time_diff(t1: TimeValue, t2: TimeValue) -> int:
    """Return the duration from ``t1`` to ``t2`` in microseconds."""
    return _to_usec(t2) - _to_usec(t1)