import pytest
from pydantic import ValidationError

from core.series import Observation
from helpers.feeds import (
    SwapRecord,
    block_time_deltas,
    parse_swaps,
    price_observations,
    tvl_observations,
)


def test_swap_record_coerces_strings():
    rec = SwapRecord.model_validate({"timestamp": "1700000000", "price": "0.25", "poolBalA": "12.5", "round": 9})
    assert rec.timestamp == 1_700_000_000
    assert rec.price == 0.25
    assert rec.pool_bal_a == 12.5
    assert rec.pool_bal_b == 0.0


def test_swap_record_requires_timestamp():
    with pytest.raises(ValidationError):
        parse_swaps([{"price": 1.0}])


def test_price_observations(swaps):
    obs = price_observations(swaps)
    assert obs[0] == Observation(0, 10.0, 1.0)
    assert [o.value for o in obs] == [10.0, 12.0, 8.0, 9.0]
    assert [o.volume for o in obs] == [1.0, 2.0, 3.0, 4.0]


def test_price_observations_inverted():
    obs = price_observations([{"timestamp": 5, "price": 4.0}], invert=True)
    assert obs == [Observation(5, 0.25, 0.0)]


def test_price_observations_skip_missing_prices():
    raw = [{"timestamp": 1, "price": None}, {"timestamp": 2, "price": 0}, {"timestamp": 3, "price": 2}]
    assert [o.ts for o in price_observations(raw)] == [3]


def test_tvl_observations(swaps):
    assert [o.value for o in tvl_observations(swaps, 2.0, "A")] == [100.0, 200.0, 300.0, 400.0]
    assert [o.value for o in tvl_observations(swaps, 2.0, "b")] == [50.0, 60.0, 70.0, 80.0]


@pytest.mark.parametrize("price,side", [(0.0, "A"), (-1.0, "A"), (1.0, "C")])
def test_tvl_observations_bad_args(swaps, price, side):
    with pytest.raises(ValueError):
        tvl_observations(swaps, price, side)


def test_block_time_deltas_keep_positive_gaps():
    assert block_time_deltas([110, 105, 105, 100, 102]) == [5.0, 5.0]
    assert block_time_deltas([100]) == []
