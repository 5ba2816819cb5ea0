# listify/tools/seller_sales.py
"""
Seller sales tool (seller + window → SellerSalesResult).

Pipeline:
  1) HTML: caller-supplied markup, or core.fetch.fetch_html(policy) on the
     seller's sold/completed search URL
  2) core.normalize.parse_sold_listings(html, timeframe_days) → list[SaleRecord]
  3) wrap with the echoed request metadata (seller, window, totalFound, source)

This tool is the single integration point for the CLI and API/agent callers.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any
from urllib.parse import urlencode

from listify.core.fetch import fetch_html
from listify.core.log import get_logger
from listify.core.normalize import coerce_timeframe_days, parse_sold_listings
from listify.core.normalize.window import DEFAULT_TIMEFRAME_DAYS
from listify.schemas.models import FetchPolicy, SellerSalesResult

logger = get_logger(__name__)

EBAY_SEARCH_URL = "https://www.ebay.com/sch/i.html"

SOURCE_LIVE = "ebay-sold-search"
SOURCE_HTML = "html-input"


def build_seller_search_url(seller: str) -> str:
    """Sold + completed listings for one seller."""
    query = urlencode({"_ssn": seller, "LH_Sold": "1", "LH_Complete": "1"})
    return f"{EBAY_SEARCH_URL}?{query}"


def _validate_seller(seller: Any) -> str:
    if not isinstance(seller, str) or not seller.strip():
        raise ValueError("seller (non-empty string) is required")
    return seller.strip()


def fetch_seller_sales(
    *,
    seller: str,
    timeframe_days: int | str | None = DEFAULT_TIMEFRAME_DAYS,
    policy: FetchPolicy | None = None,
    html: str | bytes | Path | None = None,
    now: datetime | date | None = None,
) -> SellerSalesResult:
    """
    Return the seller's sold listings within the window.

    When `html` is given, no network access happens and the result's source is
    "html-input"; otherwise the sold-search page is fetched under `policy`.
    Fetch errors (OfflineRequiredError, NetworkError, CaptchaBlockedError) and
    InvalidHtmlError propagate to the caller.
    """
    name = _validate_seller(seller)
    days = coerce_timeframe_days(timeframe_days)

    if html is not None:
        source = SOURCE_HTML
        markup = html
    else:
        url = build_seller_search_url(name)
        logger.info("fetching sold listings for seller=%s window=%dd", name, days)
        markup = fetch_html(url, policy=policy or FetchPolicy())
        source = SOURCE_LIVE

    sales = parse_sold_listings(markup, days, now=now)
    return SellerSalesResult(
        seller=name,
        timeframe_days=days,
        total_found=len(sales),
        sales=sales,
        source=source,
    )


# ---------------------------
# Agent/API-facing wrapper
# ---------------------------


def _policy_from_dict(d: dict[str, Any] | FetchPolicy | None) -> FetchPolicy:
    """
    Normalize an incoming policy that may be:
      - a FetchPolicy instance,
      - a plain dict of policy fields,
      - or None (use defaults).
    """
    if isinstance(d, FetchPolicy):
        return d
    if not d:
        return FetchPolicy()
    return FetchPolicy.model_validate(d)


def run_seller_sales_tool(
    *,
    seller: str,
    timeframe_days: int | str | None = None,
    fetch_policy: dict[str, Any] | FetchPolicy | None = None,
    html: str | None = None,
) -> dict[str, Any]:
    """
    Callable entrypoint for API handlers and agents.
    Returns the JSON-ready payload with camelCase keys.
    """
    result = fetch_seller_sales(
        seller=seller,
        timeframe_days=timeframe_days,
        policy=_policy_from_dict(fetch_policy),
        html=html,
    )
    return result.model_dump(mode="json", by_alias=True)
