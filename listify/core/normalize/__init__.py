# listify/core/normalize/__init__.py
from __future__ import annotations

from .dedupe import Deduplicator, dedupe_key
from .price import currency_from_marker, detect_currency_marker, parse_price
from .sold_date import correct_future_date, parse_sold_date
from .sold_listings import extract_sale, iter_listing_nodes, load_document, parse_sold_listings
from .text import normalize_text
from .window import DEFAULT_TIMEFRAME_DAYS, coerce_timeframe_days, compute_cutoff, is_within_window

__all__ = [
    "normalize_text",
    "parse_price",
    "detect_currency_marker",
    "currency_from_marker",
    "parse_sold_date",
    "correct_future_date",
    "coerce_timeframe_days",
    "compute_cutoff",
    "is_within_window",
    "DEFAULT_TIMEFRAME_DAYS",
    "Deduplicator",
    "dedupe_key",
    "load_document",
    "iter_listing_nodes",
    "extract_sale",
    "parse_sold_listings",
]
