"""Queries about the machine and the threading environment."""

from __future__ import annotations

import os
import re
from typing import Mapping, Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way, yielding 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def number_of_cores() -> int:
    """Return the number of processing units of the machine."""
    return os.cpu_count() or 1


def requested_number_of_threads(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return OMP_NUM_THREADS if set, else the number of cores."""
    env = os.environ if environ is None else environ
    value = env.get("OMP_NUM_THREADS")
    if value is None:
        return number_of_cores()
    return _atoi(value)


def omp_schedule(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return OMP_SCHEDULE, or an empty string when it is not set."""
    env = os.environ if environ is None else environ
    return env.get("OMP_SCHEDULE", "")