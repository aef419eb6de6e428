"""Bucket grid construction."""

from __future__ import annotations

import numbers
from typing import Iterable, List

from core.errors import EmptyInput, InvalidBucketWidth
from core.series import Bucket, Observation


def check_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, numbers.Integral) or width <= 0:
        raise InvalidBucketWidth(f"bucket width must be a positive integer, got {width!r}")
    return int(width)


def align(ts: int, width: int) -> int:
    """Largest multiple of ``width`` that is <= ``ts``."""
    return ts - ts % width


def anchor(
    observations: Iterable[Observation], start: int | None = None, end: int | None = None
) -> tuple[int, int]:
    """Return the earliest and latest timestamps inside ``[start, end)``."""
    lo = hi = None
    for obs in observations:
        ts = int(obs.ts)
        if start is not None and ts < start:
            continue
        if end is not None and ts >= end:
            continue
        if lo is None or ts < lo:
            lo = ts
        if hi is None or ts > hi:
            hi = ts
    if lo is None:
        raise EmptyInput("no observation inside the requested window")
    return lo, hi


def build_grid(
    observations: Iterable[Observation],
    width: int,
    start: int | None = None,
    end: int | None = None,
) -> List[Bucket]:
    """Return contiguous ``[start, end)`` buckets covering the observations.

    The first bucket is aligned to the earliest observation rather than to
    ``start`` so boundaries stay put when the window slides. With an explicit
    ``end`` the grid runs up to the first boundary at or past it, otherwise it
    closes after the bucket of the latest observation.
    """
    width = check_width(width)
    first, last = anchor(observations, start, end)
    grid_start = align(first, width)
    if end is None:
        count = (last - grid_start) // width + 1
    else:
        count = -(-(int(end) - grid_start) // width)
    return [
        Bucket(grid_start + i * width, grid_start + (i + 1) * width)
        for i in range(count)
    ]
