# listify/schemas/models.py

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =========================
# Currency
# =========================


class CurrencyCode(str, Enum):
    """Currencies a sold-listing price can resolve to."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    JPY = "JPY"
    CAD = "CAD"
    AUD = "AUD"


class PriceInfo(BaseModel):
    """Numeric amount + resolved currency parsed from raw price text."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    amount: float = Field(..., gt=0, description="Price rounded to 2 decimals.")
    currency: CurrencyCode = Field(CurrencyCode.USD, description="Resolved currency; USD when ambiguous.")


# =========================
# Sold listings
# =========================


class SaleRecord(BaseModel):
    """
    One sold listing extracted from a search-results page.

    Serializes with camelCase keys (``dateSold``, ``listingUrl``) so the JSON shape
    matches what API consumers already read.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, description="Whitespace-normalized listing title.")
    price: float = Field(..., gt=0, description="Sale price rounded to 2 decimals.")
    currency: CurrencyCode = Field(..., description="Currency of the sale price.")
    date_sold: date = Field(..., description="Calendar date the item sold (no time component).")
    listing_url: str | None = Field(None, description="Listing link exactly as found on the page, if any.")

    def summary(self) -> str:
        return f"{self.date_sold.isoformat()} | {self.price:,.2f} {self.currency.value} | {self.title}"


class SellerSalesResult(BaseModel):
    """Sales for one seller plus the request metadata echoed back to callers."""

    model_config = ConfigDict(frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True)

    seller: str = Field(..., min_length=1, description="Seller username the sales belong to.")
    timeframe_days: int = Field(..., ge=1, description="Window size (days) used for the recency filter.")
    total_found: int = Field(..., ge=0, description="Number of sales returned (always len(sales)).")
    sales: list[SaleRecord] = Field(default_factory=list, description="Sales in document order.")
    source: str = Field(..., description="Which fetch path produced the HTML (e.g. 'ebay-sold-search').")

    def summary(self) -> str:
        return f"{self.seller}: {self.total_found} sale(s) in the last {self.timeframe_days} day(s) via {self.source}"

    def __str__(self) -> str:
        return self.summary()


# ============================================================
# Fetch policy
# ============================================================

DEFAULT_USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_5) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.5 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
)


class FetchPolicy(BaseModel):
    """
    Policy for `html_fetcher.fetch_html`.

    Networking is off by default so that parsing runs stay offline unless a
    caller opts in (CLI ``--online 1`` or ``LISTIFY_ONLINE=1``).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    captcha_mode: Literal["strict", "soft", "off"] = Field(
        "soft",
        description=(
            "Captcha/WAF handling mode:\n"
            " - 'strict': raise CaptchaBlockedError\n"
            " - 'soft': log a warning and return the body anyway\n"
            " - 'off': ignore captcha/WAF signals"
        ),
    )
    allow_network: bool = Field(
        False,
        description="If False, fetch_html refuses to touch the network.",
    )
    allow_non_200: bool = Field(
        False,
        description="If False, raise on any HTTP status >= 400.",
    )
    timeout_s: float = Field(
        20.0,
        gt=0,
        description="HTTP timeout in seconds.",
    )
    user_agent: str | None = Field(
        None,
        description="Fixed User-Agent. When None, one is picked at random from `user_agents`.",
    )
    user_agents: tuple[str, ...] = Field(
        DEFAULT_USER_AGENTS,
        min_length=1,
        description="Pool of browser User-Agent strings used for rotation.",
    )
    accept_language: str = Field(
        "en-US,en;q=0.9",
        description="Accept-Language header sent with every request.",
    )
    proxy_url: str | None = Field(
        None,
        description="Optional HTTP(S) proxy URL, e.g. 'http://proxy.host:8080'.",
    )
    proxy_user: str | None = Field(None, description="Proxy username (applied only together with proxy_pass).")
    proxy_pass: str | None = Field(None, description="Proxy password.")
