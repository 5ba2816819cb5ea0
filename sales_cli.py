# sales_cli.py

from __future__ import annotations

import argparse
import json
from pathlib import Path

from listify.core.fetch import HtmlFetcherError
from listify.core.log import setup_logging
from listify.core.normalize import coerce_timeframe_days
from listify.inputs.settings import SettingsLoader
from listify.tools.seller_sales import fetch_seller_sales


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Seller sold-listings extractor")
    p.add_argument("--seller", type=str, required=True)
    p.add_argument("--days", type=int, default=None, help="Recency window in days (default from settings, else 7)")
    p.add_argument("--file", type=str, default=None, help="Parse a saved search-results HTML file instead of fetching")
    p.add_argument("--online", type=int, choices=(0, 1), default=None, help="Allow network fetches")
    p.add_argument("--config", type=str, default=None, help="Optional settings JSON")
    p.add_argument("--json", type=int, choices=(0, 1), default=0, help="Print the full JSON payload")

    args = p.parse_args(argv)

    loader = SettingsLoader()
    try:
        settings = loader.load(args.config)
        settings = loader.with_overrides(
            settings,
            timeframe_days=coerce_timeframe_days(args.days) if args.days is not None else None,
            allow_network=bool(args.online) if args.online is not None else None,
        )
    except (ValueError, FileNotFoundError) as exc:
        setup_logging().error("invalid settings: %s", exc)
        return 1

    logger = setup_logging(settings.log_level, log_file=settings.log_file)

    try:
        result = fetch_seller_sales(
            seller=args.seller,
            timeframe_days=settings.timeframe_days,
            policy=settings.fetch,
            html=Path(args.file) if args.file else None,
        )
    except (HtmlFetcherError, ValueError) as exc:
        logger.error("seller sales failed for %s: %s", args.seller, exc)
        return 1

    if args.json:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
        return 0

    # Minimal console summary
    print(result.summary())
    for sale in result.sales:
        print(f"  {sale.summary()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
