# listify/schemas/labels.py
from __future__ import annotations

import re
from collections.abc import Mapping
from re import Pattern
from types import MappingProxyType

from listify.schemas.models import CurrencyCode

# =========================
# Currency markers
# =========================

# Order matters: multi-letter codes before prefixed dollars, prefixed dollars
# before the bare "$" (so "CA$" is not read as "A$" or "$").
CURRENCY_MARKERS: tuple[str, ...] = (
    "USD",
    "CAD",
    "AUD",
    "GBP",
    "EUR",
    "US$",
    "CA$",
    "AU$",
    "C$",
    "A$",
    "£",
    "€",
    "¥",
    "$",
)

DEFAULT_CURRENCY_MARKER = "$"


def _marker_pattern(marker: str) -> Pattern[str]:
    # Prefixed dollars also match with a space ("AU $15.00", "C $20").
    if len(marker) > 1 and marker.endswith("$"):
        return re.compile(rf"\b{re.escape(marker[:-1])}\s*\$", re.IGNORECASE)
    return re.compile(re.escape(marker), re.IGNORECASE)


CURRENCY_MARKER_PATTERNS: tuple[tuple[str, Pattern[str]], ...] = tuple(
    (marker, _marker_pattern(marker)) for marker in CURRENCY_MARKERS
)

# Keys are upper-cased markers.
CURRENCY_BY_MARKER: Mapping[str, CurrencyCode] = MappingProxyType(
    {
        "USD": CurrencyCode.USD,
        "US$": CurrencyCode.USD,
        "$": CurrencyCode.USD,
        "CAD": CurrencyCode.CAD,
        "CA$": CurrencyCode.CAD,
        "C$": CurrencyCode.CAD,
        "AUD": CurrencyCode.AUD,
        "AU$": CurrencyCode.AUD,
        "A$": CurrencyCode.AUD,
        "GBP": CurrencyCode.GBP,
        "£": CurrencyCode.GBP,
        "EUR": CurrencyCode.EUR,
        "€": CurrencyCode.EUR,
        "¥": CurrencyCode.JPY,
    }
)

# =========================
# Listing titles
# =========================

# Ghost cards eBay renders in result grids; compared case-insensitively.
PLACEHOLDER_TITLES: frozenset[str] = frozenset(
    {
        "shop on ebay",
        "new listing",
    }
)


def is_placeholder_title(title: str) -> bool:
    return title.strip().casefold() in PLACEHOLDER_TITLES


__all__ = [
    "CURRENCY_MARKERS",
    "CURRENCY_MARKER_PATTERNS",
    "CURRENCY_BY_MARKER",
    "DEFAULT_CURRENCY_MARKER",
    "PLACEHOLDER_TITLES",
    "is_placeholder_title",
]
