"""
Sold-listings pipeline (search-results HTML → list[SaleRecord]).

Walks every listing card in document order and runs it through:
  title → price → sold date → recency window → dedupe
A card that fails any step is skipped (soft rejection, logged at DEBUG). Only a
document that cannot be parsed at all raises (InvalidHtmlError).

Supports both eBay result layouts:
  - classic: li.s-item with .s-item__title / .s-item__price / tag-block status
  - card:    li.s-card with .s-card__title / .s-card__price / .s-card__caption
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from datetime import date, datetime
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from listify.core.fetch.errors import InvalidHtmlError
from listify.core.log import get_logger
from listify.schemas.labels import is_placeholder_title
from listify.schemas.models import SaleRecord

from .dedupe import Deduplicator, dedupe_key
from .price import parse_price
from .sold_date import parse_sold_date
from .text import normalize_text
from .window import (
    DEFAULT_TIMEFRAME_DAYS,
    coerce_timeframe_days,
    compute_cutoff,
    is_within_window,
    resolve_today,
)

logger = get_logger(__name__)

HtmlInput = str | bytes | Path

# ---------- Selector tables ----------

_NODE_SELECTOR = ".s-item, li.s-card"
_TITLE_SELECTORS = (".s-item__title", ".s-card__title")
_PRICE_SELECTORS = (".s-item__price", ".s-card__price")
# Most specific first; the card's full text is appended as the last resort.
_DATE_SELECTORS = (
    ".s-item__title--tagblock .POSITIVE",
    ".s-item__title--tagblock",
    ".s-item__caption--signal",
    ".s-item__caption",
    ".s-card__caption",
)
_LINK_SELECTORS = ("a.s-item__link", "a.s-card__link", "a[href]")

# Rejection reasons (used for the per-run summary log)
REJECT_TITLE = "title"
REJECT_PRICE = "price"
REJECT_DATE = "date"
REJECT_STALE = "stale"
REJECT_DUPLICATE = "duplicate"

# ---------- Node readers ----------


def _text_of(node: Tag, selector: str) -> str:
    el = node.select_one(selector)
    if el is None:
        return ""
    return normalize_text(el.get_text(" ", strip=True))


def _first_text(node: Tag, selectors: tuple[str, ...]) -> str:
    return next((t for t in (_text_of(node, s) for s in selectors) if t), "")


def read_title(node: Tag) -> str:
    return _first_text(node, _TITLE_SELECTORS)


def read_price_text(node: Tag) -> str:
    return _first_text(node, _PRICE_SELECTORS)


def read_date_fragments(node: Tag) -> list[str]:
    fragments = [_text_of(node, s) for s in _DATE_SELECTORS]
    fragments.append(normalize_text(node.get_text(" ", strip=True)))
    return [f for f in fragments if f]


def read_listing_url(node: Tag) -> str | None:
    for selector in _LINK_SELECTORS:
        el = node.select_one(selector)
        if el is None:
            continue
        href = el.get("href")
        if isinstance(href, str) and href:
            return href
    return None


# ---------- Document handling ----------


def load_document(html: HtmlInput) -> BeautifulSoup:
    """Parse `html` (markup string/bytes or a Path to a file) into a soup."""
    if isinstance(html, Path):
        try:
            html = html.read_bytes()
        except OSError as e:
            raise InvalidHtmlError(f"Cannot read HTML file {html}: {e}") from e
    if not isinstance(html, (str, bytes)):
        raise InvalidHtmlError(f"Expected HTML markup as str/bytes/Path, got {type(html).__name__}")
    try:
        return BeautifulSoup(html, "lxml")
    except Exception as e:
        raise InvalidHtmlError(f"Failed to parse HTML: {type(e).__name__}: {e}") from e


def iter_listing_nodes(soup: BeautifulSoup | Tag) -> Iterator[Tag]:
    """Yield candidate listing cards in document order."""
    yield from soup.select(_NODE_SELECTOR)


# ---------- Per-node state machine ----------


def _evaluate(node: Tag, *, cutoff: date, seen: Deduplicator, today: date) -> tuple[SaleRecord | None, str | None]:
    title = read_title(node)
    if not title or is_placeholder_title(title):
        return None, REJECT_TITLE

    price = parse_price(read_price_text(node))
    if price is None:
        return None, REJECT_PRICE

    sold = parse_sold_date(read_date_fragments(node), now=today)
    if sold is None:
        return None, REJECT_DATE

    if not is_within_window(sold, cutoff):
        return None, REJECT_STALE

    if not seen.admit(dedupe_key(title, price.amount, sold)):
        return None, REJECT_DUPLICATE

    record = SaleRecord(
        title=title,
        price=price.amount,
        currency=price.currency,
        date_sold=sold,
        listing_url=read_listing_url(node),
    )
    return record, None


def extract_sale(node: Tag, *, cutoff: date, seen: Deduplicator, now: datetime | date | None = None) -> SaleRecord | None:
    """Run one listing card through the pipeline; None means the card was rejected."""
    today = resolve_today(now)
    record, _reason = _evaluate(node, cutoff=cutoff, seen=seen, today=today)
    return record


# ---------- Public API ----------


def parse_sold_listings(
    html: HtmlInput,
    timeframe_days: int | str | None = DEFAULT_TIMEFRAME_DAYS,
    *,
    now: datetime | date | None = None,
) -> list[SaleRecord]:
    """
    Extract deduplicated, time-windowed sold listings from search-results HTML.

    Records keep document order. `timeframe_days` is coerced (absent or
    non-positive → 7). Raises InvalidHtmlError only when `html` is not a parseable
    document.
    """
    soup = load_document(html)
    today = resolve_today(now)
    days = coerce_timeframe_days(timeframe_days)
    cutoff = compute_cutoff(days, now=today)
    seen = Deduplicator()

    sales: list[SaleRecord] = []
    rejected: Counter[str] = Counter()
    for idx, node in enumerate(iter_listing_nodes(soup)):
        record, reason = _evaluate(node, cutoff=cutoff, seen=seen, today=today)
        if record is None:
            rejected[reason or "unknown"] += 1
            logger.debug("listing #%d rejected (%s)", idx, reason)
            continue
        sales.append(record)

    logger.info(
        "parsed %d sold listing(s) since %s; rejected %d %s",
        len(sales),
        cutoff.isoformat(),
        sum(rejected.values()),
        dict(rejected) if rejected else "",
    )
    return sales
