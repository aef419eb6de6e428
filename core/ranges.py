"""Map a named chart range onto a concrete time window and bucket width."""

from __future__ import annotations

from collections import namedtuple
from typing import Mapping

from core.errors import InvalidBucketWidth, InvalidRange, InvalidWindow

RangePolicy = namedtuple("RangePolicy", "window width smoothing")
TimeWindow = namedtuple("TimeWindow", "start end width")

# token -> (lookback seconds, bucket width seconds, smoothing window)
DEFAULT_RANGES: dict[str, RangePolicy] = {
    "1H": RangePolicy(3_600, 60, 5),
    "24H": RangePolicy(86_400, 900, 12),
    "7D": RangePolicy(604_800, 3_600, 7),
    "30D": RangePolicy(2_592_000, 14_400, 7),
}


def normalize_token(token: str) -> str:
    return str(token).strip().upper()


def validate_table(table: Mapping[str, RangePolicy]) -> None:
    """Raise for rows that cannot build a grid or smooth a series."""
    for token, policy in table.items():
        if policy.width <= 0:
            raise InvalidBucketWidth(f"range {token!r}: bucket width must be > 0, got {policy.width}")
        if policy.window <= 0:
            raise InvalidBucketWidth(f"range {token!r}: window must be > 0, got {policy.window}")
        if policy.smoothing < 1:
            raise InvalidWindow(f"range {token!r}: smoothing must be >= 1, got {policy.smoothing}")


def lookup(token: str, table: Mapping[str, RangePolicy] | None = None) -> RangePolicy:
    table = DEFAULT_RANGES if table is None else table
    policy = table.get(normalize_token(token))
    if policy is None:
        raise InvalidRange(token)
    return policy


def resolve_range(
    token: str, now: int, table: Mapping[str, RangePolicy] | None = None
) -> TimeWindow:
    """Return the ``[start, end)`` window and bucket width for ``token``.

    >>> resolve_range("1h", 7200)
    TimeWindow(start=3600, end=7200, width=60)
    """
    policy = lookup(token, table)
    if policy.width <= 0:
        raise InvalidBucketWidth(f"bucket width must be > 0, got {policy.width}")
    now = int(now)
    return TimeWindow(now - policy.window, now, policy.width)
