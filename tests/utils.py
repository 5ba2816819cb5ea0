# tests/utils.py
"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_NOW = datetime(2024, 5, 5, 14, 30)
DEFAULT_URL = "https://www.ebay.com/itm/1234567890"

# -----------------------------
# Search-results HTML factories
# -----------------------------


def make_item(
    title: str | None = "Widget A",
    price: str | None = "$19.99",
    sold: str | None = "Sold May 1, 2024",
    url: str | None = DEFAULT_URL,
) -> str:
    """One classic-layout result card (li.s-item). Pass None to omit a part."""
    parts = ['<li class="s-item"><div class="s-item__info">']
    if sold is not None:
        parts.append(f'<div class="s-item__title--tagblock"><span class="POSITIVE">{sold}</span></div>')
    title_html = f'<div class="s-item__title"><span role="heading">{title}</span></div>' if title is not None else ""
    if url is not None:
        parts.append(f'<a class="s-item__link" href="{url}">{title_html}</a>')
    else:
        parts.append(title_html)
    if price is not None:
        parts.append(f'<div class="s-item__details"><span class="s-item__price">{price}</span></div>')
    parts.append("</div></li>")
    return "".join(parts)


def make_card(
    title: str | None = "Widget A",
    price: str | None = "$19.99",
    sold: str | None = "Sold May 1, 2024",
    url: str | None = DEFAULT_URL,
) -> str:
    """One card-layout result (li.s-card)."""
    parts = ['<li class="s-card">']
    if sold is not None:
        parts.append(f'<div class="s-card__caption"><span>{sold}</span></div>')
    title_html = f'<div class="s-card__title"><span>{title}</span></div>' if title is not None else ""
    if url is not None:
        parts.append(f'<a class="s-card__link" href="{url}">{title_html}</a>')
    else:
        parts.append(title_html)
    if price is not None:
        parts.append(f'<div class="s-card__attribute-row"><span class="s-card__price">{price}</span></div>')
    parts.append("</li>")
    return "".join(parts)


def make_results_page(*items: str) -> str:
    body = "".join(items)
    return f'<!doctype html><html><head><title>Sold items</title></head><body><ul class="srp-results">{body}</ul></body></html>'


def sold_text(d: date) -> str:
    """'Sold May 1, 2024' style status text for a given date."""
    return f"Sold {d:%b} {d.day}, {d.year}"


def make_document(tmp: Path, html: str, filename: str = "results.html") -> Path:
    p = tmp / filename
    p.write_text(html, encoding="utf-8")
    return p
