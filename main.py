"""
Run:  python main.py candles swaps.json --range 24H --now 1735689600
      python main.py tvl swaps.json --range 7D --price 0.5 --side A
"""
import argparse
import json
import logging
import time

from explorer.charts import price_candles, tvl_series
from explorer.config import settings
from explorer.logging_config import setup_logging

logger = logging.getLogger(__name__)


def load_swaps(path: str) -> list[dict]:
    with open(path) as f:
        data = json.load(f)
    return data["swaps"] if isinstance(data, dict) else data


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Resample indexer swaps into chart series")
    p.add_argument("chart", choices=["candles", "tvl"])
    p.add_argument("swaps", help="JSON file: indexer response or list of swaps")
    p.add_argument("--range", dest="range_token", default="24H")
    p.add_argument("--now", type=int, default=None)
    p.add_argument("--invert", action="store_true")
    p.add_argument("--price", type=float, default=1.0)
    p.add_argument("--side", choices=["A", "B"], default="A")
    p.add_argument("--log-level", default=None)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, cfg=settings.logging)
    now = args.now if args.now is not None else int(time.time())
    swaps = load_swaps(args.swaps)
    if args.chart == "candles":
        candles = price_candles(swaps, args.range_token, now, settings, invert=args.invert)
        rows = [
            {"start": c.start, "open": c.open, "high": c.high, "low": c.low,
             "close": c.close, "volume": c.volume, "count": c.count}
            for c in candles
        ]
    else:
        points = tvl_series(swaps, args.range_token, now, args.price, args.side, settings)
        rows = [p._asdict() for p in points]
    logger.info("%s %s: %d rows", args.chart, args.range_token, len(rows))
    print(json.dumps(rows, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
