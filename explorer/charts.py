"""Chart pipelines used by the explorer pages.

Every chart goes through the same engine: the range resolver picks the window
and bucket width, the aggregator folds observations into candles, and the
smoother averages an already regular series.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Literal, Mapping, Sequence

from core.candles import FillPolicy, aggregate
from core.ranges import lookup, resolve_range
from core.rolling import RollingMean
from core.series import Candle, SmoothedPoint
from core.smoothing import smooth
from explorer.config import Settings, settings as default_settings
from helpers.feeds import block_time_deltas, price_observations, tvl_observations

logger = logging.getLogger(__name__)


def price_candles(
    swaps: Iterable[Mapping[str, Any]],
    range_token: str,
    now: int,
    settings: Settings | None = None,
    invert: bool = False,
    fill: FillPolicy = FillPolicy.CARRY_FORWARD,
) -> list[Candle]:
    """Return OHLC candles for a pool's swaps over ``range_token``."""
    settings = settings or default_settings
    window = resolve_range(range_token, now, settings.range_table())
    observations = price_observations(swaps, invert=invert)
    candles = aggregate(observations, window.width, window.start, window.end, fill)
    logger.debug(
        "price candles %s: %d swaps -> %d candles", range_token, len(observations), len(candles)
    )
    return candles


def tvl_series(
    swaps: Iterable[Mapping[str, Any]],
    range_token: str,
    now: int,
    price: float,
    side: Literal["A", "B"] = "A",
    settings: Settings | None = None,
) -> list[SmoothedPoint]:
    """Return the smoothed TVL line for a pool over ``range_token``."""
    settings = settings or default_settings
    table = settings.range_table()
    window = resolve_range(range_token, now, table)
    policy = lookup(range_token, table)
    points = sorted(
        (o for o in tvl_observations(swaps, price, side) if window.start <= o.ts < window.end),
        key=lambda o: o.ts,
    )
    return smooth([p.ts for p in points], [p.value for p in points], policy.smoothing)


class BlockTimeTracker:
    """Average block time over the most recent block intervals."""

    def __init__(self, capacity: int | None = None, settings: Settings | None = None) -> None:
        settings = settings or default_settings
        self._stat = RollingMean(capacity if capacity is not None else settings.block_time.capacity)
        self.blocks_analyzed = 0
        self.latest_block: int | None = None

    def update(self, block_timestamps: Sequence[int], latest_block: int | None = None) -> float:
        """Admit intervals from one refresh of block headers (newest first)."""
        self._stat.extend(block_time_deltas(block_timestamps))
        self.blocks_analyzed = len(block_timestamps)
        if latest_block is not None:
            self.latest_block = latest_block
        return self.average

    @property
    def average(self) -> float:
        return self._stat.mean()

    @property
    def samples(self) -> int:
        return len(self._stat)

    @property
    def is_calculating(self) -> bool:
        return len(self._stat) == 0

    def reset(self) -> None:
        self._stat.reset()
        self.blocks_analyzed = 0
        self.latest_block = None
