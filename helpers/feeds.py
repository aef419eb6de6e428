"""Turn raw indexer records into engine observations."""

from __future__ import annotations

from typing import Any, Iterable, Literal, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from core.series import Observation


class SwapRecord(BaseModel):
    """One DEX swap as returned by the indexer's ``/dex/swaps`` endpoint."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    timestamp: int
    price: float | None = None
    pool_bal_a: float = Field(0.0, alias="poolBalA")
    pool_bal_b: float = Field(0.0, alias="poolBalB")
    in_bal_a: float = Field(0.0, alias="inBalA")
    in_bal_b: float = Field(0.0, alias="inBalB")
    out_bal_a: float = Field(0.0, alias="outBalA")
    out_bal_b: float = Field(0.0, alias="outBalB")

    @property
    def volume_a(self) -> float:
        return self.in_bal_a + self.out_bal_a


def parse_swaps(raw: Iterable[Mapping[str, Any] | SwapRecord]) -> list[SwapRecord]:
    return [r if isinstance(r, SwapRecord) else SwapRecord.model_validate(r) for r in raw]


def price_observations(
    swaps: Iterable[Mapping[str, Any] | SwapRecord], invert: bool = False
) -> list[Observation]:
    """Return one price observation per swap that carries a positive price."""
    out: list[Observation] = []
    for swap in parse_swaps(swaps):
        if swap.price is None or swap.price <= 0:
            continue
        price = 1.0 / swap.price if invert else swap.price
        out.append(Observation(swap.timestamp, price, swap.volume_a))
    return out


def tvl_observations(
    swaps: Iterable[Mapping[str, Any] | SwapRecord],
    price: float,
    side: Literal["A", "B"] = "A",
) -> list[Observation]:
    """Value the pool after each swap as twice one side's balance over ``price``."""
    if price <= 0:
        raise ValueError(f"price must be > 0, got {price}")
    side = side.upper()
    if side not in ("A", "B"):
        raise ValueError(f"side must be 'A' or 'B', got {side!r}")
    out: list[Observation] = []
    for swap in parse_swaps(swaps):
        balance = swap.pool_bal_a if side == "A" else swap.pool_bal_b
        out.append(Observation(swap.timestamp, balance / price * 2))
    return out


def block_time_deltas(timestamps: Sequence[int]) -> list[float]:
    """Return positive gaps between consecutive block timestamps (newest first)."""
    deltas: list[float] = []
    for newer, older in zip(timestamps, timestamps[1:]):
        diff = float(newer) - float(older)
        if diff > 0:
            deltas.append(diff)
    return deltas
