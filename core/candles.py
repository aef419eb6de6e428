"""Fold irregular observations into fixed-width OHLC candles."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Sequence

from core.errors import EmptyInput
from core.grid import build_grid, check_width
from core.series import Bucket, Candle, Observation, as_observation

logger = logging.getLogger(__name__)


class FillPolicy(Enum):
    CARRY_FORWARD = "carry_forward"
    SKIP = "skip"


class _Slot:
    """Running OHLC/volume/count state of one bucket."""

    __slots__ = ("open", "high", "low", "close", "volume", "count")

    def __init__(self) -> None:
        self.open: float | None = None
        self.high: float | None = None
        self.low: float | None = None
        self.close: float | None = None
        self.volume = 0.0
        self.count = 0

    def add(self, price: float, volume: float) -> None:
        if self.open is None:
            self.open = self.high = self.low = price
        else:
            if price > self.high:
                self.high = price
            if price < self.low:
                self.low = price
        self.close = price
        self.volume += volume
        self.count += 1


def resample(
    observations: Iterable[Observation],
    grid: Sequence[Bucket],
    fill: FillPolicy = FillPolicy.CARRY_FORWARD,
) -> List[Candle]:
    """Return one candle per bucket of ``grid``.

    Observations are folded in timestamp order (ties keep input order), so the
    result does not depend on arrival order. Observations outside the grid are
    dropped. Empty buckets either inherit the previous close or are skipped,
    depending on ``fill``; leading empty buckets are never emitted.
    """
    if not grid:
        return []
    grid_start = grid[0].start
    grid_end = grid[-1].end
    width = check_width(grid[0].end - grid[0].start)

    slots = [_Slot() for _ in grid]
    dropped = 0
    for obs in sorted(map(as_observation, observations), key=lambda o: o.ts):
        ts = int(obs.ts)
        if ts < grid_start or ts >= grid_end:
            dropped += 1
            continue
        slots[(ts - grid_start) // width].add(float(obs.value), float(obs.volume))
    if dropped:
        logger.debug("dropped %d observations outside [%d, %d)", dropped, grid_start, grid_end)

    out: List[Candle] = []
    last_close: float | None = None
    for bucket, slot in zip(grid, slots):
        if slot.count:
            out.append(
                Candle(bucket, slot.open, slot.high, slot.low, slot.close, slot.volume, slot.count)
            )
            last_close = slot.close
        elif fill is FillPolicy.CARRY_FORWARD and last_close is not None:
            out.append(Candle(bucket, last_close, last_close, last_close, last_close, 0.0, 0))
    return out


def aggregate(
    observations: Iterable[Observation],
    width: int,
    start: int | None = None,
    end: int | None = None,
    fill: FillPolicy = FillPolicy.CARRY_FORWARD,
) -> List[Candle]:
    """Build the grid for ``observations`` and resample them onto it.

    An empty input (or one with nothing inside ``[start, end)``) yields an
    empty list. The last bucket may extend past ``end``; observations at or
    after ``end`` are still excluded from it.
    """
    observations = [as_observation(o) for o in observations]
    if end is not None:
        observations = [o for o in observations if int(o.ts) < end]
    try:
        grid = build_grid(observations, width, start, end)
    except EmptyInput:
        logger.debug("no observations to aggregate (width=%s start=%s end=%s)", width, start, end)
        return []
    return resample(observations, grid, fill)


def closes(candles: Iterable[Candle]) -> list[float]:
    return [c.close for c in candles]
