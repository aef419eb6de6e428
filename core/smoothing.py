"""Trailing moving average over an already bucketed series."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from core.errors import InvalidWindow
from core.series import SmoothedPoint


def moving_average(values: Sequence[float], window: int) -> np.ndarray:
    """Return the trailing mean of ``values`` over ``window`` points.

    Position ``i`` averages ``values[max(0, i - window + 1) : i + 1]``, so the
    first points use shorter windows and the output has the input's length.
    A NaN turns every window that contains it into NaN.
    """
    if window < 1:
        raise InvalidWindow(f"window must be >= 1, got {window}")
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError("values must be 1-D")
    n = arr.size
    if n == 0 or window == 1:
        return arr.copy()
    window = min(int(window), n)

    nan = np.isnan(arr)
    csum = np.concatenate(([0.0], np.cumsum(np.where(nan, 0.0, arr), dtype=float)))
    nans = np.concatenate(([0], np.cumsum(nan)))
    hi = np.arange(1, n + 1)
    lo = np.maximum(hi - window, 0)
    out = (csum[hi] - csum[lo]) / (hi - lo)
    out[nans[hi] - nans[lo] > 0] = np.nan
    return out


def smooth(timestamps: Iterable[int], values: Sequence[float], window: int) -> list[SmoothedPoint]:
    timestamps = list(timestamps)
    if len(timestamps) != len(values):
        raise ValueError("timestamps and values must have the same length")
    averaged = moving_average(values, window)
    return [SmoothedPoint(ts, float(v)) for ts, v in zip(timestamps, averaged)]
