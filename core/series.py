"""Value types shared by the resampling engine."""

from __future__ import annotations

from collections import namedtuple


Observation = namedtuple("Observation", "ts value volume", defaults=(0.0,))
Bucket = namedtuple("Bucket", "start end")
SmoothedPoint = namedtuple("SmoothedPoint", "ts value")


class Candle(namedtuple("Candle", "bucket open high low close volume count")):
    """OHLC summary of one bucket.

    ``volume`` and ``count`` are folded in the same pass as the prices, so a
    carry-forward candle has ``count == 0`` and ``volume == 0.0``.
    """

    __slots__ = ()

    @property
    def start(self) -> int:
        return self.bucket.start

    @property
    def end(self) -> int:
        return self.bucket.end

    @property
    def is_filled(self) -> bool:
        return self.count == 0


def as_observation(item) -> Observation:
    """Coerce ``(ts, value[, volume])`` tuples into an :class:`Observation`."""
    if isinstance(item, Observation):
        return item
    return Observation(*item)
