"""
Price/currency normalizer (raw price text → PriceInfo).

Handles the notations seen on sold-listing pages:
  - symbols and codes: "$12.50", "US $45.00", "C$20", "£9.99", "EUR 12,50", "¥1,200"
  - thousands commas ("1,299.00") vs. decimal commas ("12,50")
Anything that does not reduce to a positive number is "no price" (None).
"""

from __future__ import annotations

import math
import re

from listify.schemas.labels import (
    CURRENCY_BY_MARKER,
    CURRENCY_MARKER_PATTERNS,
    DEFAULT_CURRENCY_MARKER,
)
from listify.schemas.models import CurrencyCode, PriceInfo

_NON_NUMERIC_RE = re.compile(r"[^\d.,\-]")
_LEADING_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def detect_currency_marker(raw: str) -> str:
    """Return the first currency marker found in `raw` (ordered patterns), else "$"."""
    for marker, pattern in CURRENCY_MARKER_PATTERNS:
        if pattern.search(raw):
            return marker
    return DEFAULT_CURRENCY_MARKER


def currency_from_marker(marker: str | None) -> CurrencyCode:
    """Map a marker to its currency code; unknown markers fall back to USD."""
    if not marker:
        return CurrencyCode.USD
    return CURRENCY_BY_MARKER.get(marker.strip().upper(), CurrencyCode.USD)


def _clean_amount(raw: str) -> float | None:
    t = _NON_NUMERIC_RE.sub("", raw)
    if "," in t and "." not in t:
        t = t.replace(",", ".")  # 12,50 → 12.50
    else:
        t = t.replace(",", "")  # 1,299.00 → 1299.00
    # Leading number only: "10.0020.00" (a "$10.00 to $20.00" range) → 10.00
    m = _LEADING_NUMBER_RE.match(t)
    if m is None:
        return None
    value = float(m.group(0))
    if not math.isfinite(value):
        return None
    return round(value, 2)


def parse_price(raw: str | None) -> PriceInfo | None:
    """
    Parse raw price text into a PriceInfo.

    Only the leading number counts, so a range like "$10.00 to $20.00" yields
    10.00. Returns None when there is no text, no leading number, or the amount
    is not positive.
    """
    if not raw or not raw.strip():
        return None

    marker = detect_currency_marker(raw)
    amount = _clean_amount(raw)
    if amount is None or amount <= 0:
        return None

    return PriceInfo(amount=amount, currency=currency_from_marker(marker))
