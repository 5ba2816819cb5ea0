"""
Sold-date extraction ("Sold Mar 2", "Sold 03/02/24", ... → datetime.date).

Candidate fragments come from several parts of a listing card, most specific
first (status tag) and the card's full text last. Each fragment is matched
against the patterns below in order; the first (fragment, pattern) pair that
builds a real calendar date wins.

Year-less dates take the current year. Any date landing more than
FUTURE_TOLERANCE_DAYS after today is moved back one year ("Sold Dec 30" read on
Jan 3 belongs to last December).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from datetime import date, datetime
from re import Match, Pattern

from .window import resolve_today

FUTURE_TOLERANCE_DAYS = 15

_MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_FULL_MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# ---------- Patterns (most specific first) ----------

_SOLD_MDY_COMMA_RE = re.compile(r"(?i)\bsold\s+([a-z]+)\.?\s+(\d{1,2}),\s*(\d{4})\b")
_SOLD_MDY_RE = re.compile(r"(?i)\bsold\s+([a-z]+)\.?\s+(\d{1,2})\s+(\d{4})\b")
_SOLD_MD_RE = re.compile(r"(?i)\bsold\s+([a-z]+)\.?\s+(\d{1,2})\b")
_SOLD_NUMERIC_RE = re.compile(r"(?i)\bsold\s+(\d{1,2})/(\d{1,2})/(\d{4}|\d{2})\b")
_SOLD_ABBR_DASH_RE = re.compile(r"(?i)\bsold\s+([a-z]{3})-(\d{1,2})-(\d{4}|\d{2})\b")

# ---------- Helpers ----------


def _month_number(name: str) -> int | None:
    key = name.lower()
    if key in _MONTHS:
        return _MONTHS[key]
    if key in _FULL_MONTHS:
        return _FULL_MONTHS.index(key) + 1
    return None


def _expand_year(text: str) -> int:
    year = int(text)
    return 2000 + year if len(text) == 2 else year


def _safe_date(year: int, month: int | None, day: int) -> date | None:
    if month is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _shift_back_one_year(d: date) -> date:
    try:
        return d.replace(year=d.year - 1)
    except ValueError:
        # Feb 29 → Feb 28 of the non-leap previous year
        return d.replace(year=d.year - 1, day=28)


def correct_future_date(d: date, today: date) -> date:
    """Move `d` back one year when it lies more than FUTURE_TOLERANCE_DAYS after `today`."""
    if (d - today).days > FUTURE_TOLERANCE_DAYS:
        return _shift_back_one_year(d)
    return d


# ---------- Pattern builders ----------

DateBuilder = Callable[[Match[str], int], date | None]


def _build_month_day_year(m: Match[str], _current_year: int) -> date | None:
    return _safe_date(int(m.group(3)), _month_number(m.group(1)), int(m.group(2)))


def _build_month_day(m: Match[str], current_year: int) -> date | None:
    return _safe_date(current_year, _month_number(m.group(1)), int(m.group(2)))


def _build_numeric(m: Match[str], _current_year: int) -> date | None:
    return _safe_date(_expand_year(m.group(3)), int(m.group(1)), int(m.group(2)))


def _build_abbr_dash(m: Match[str], _current_year: int) -> date | None:
    return _safe_date(_expand_year(m.group(3)), _month_number(m.group(1)), int(m.group(2)))


SOLD_DATE_PATTERNS: tuple[tuple[Pattern[str], DateBuilder], ...] = (
    (_SOLD_MDY_COMMA_RE, _build_month_day_year),
    (_SOLD_MDY_RE, _build_month_day_year),
    (_SOLD_MD_RE, _build_month_day),
    (_SOLD_NUMERIC_RE, _build_numeric),
    (_SOLD_ABBR_DASH_RE, _build_abbr_dash),
)


def _candidates(fragments: Iterable[str | None], current_year: int) -> Iterator[date | None]:
    for fragment in fragments:
        if not fragment:
            continue
        for pattern, build in SOLD_DATE_PATTERNS:
            for m in pattern.finditer(fragment):
                yield build(m, current_year)


# ---------- Public API ----------


def parse_sold_date(fragments: Iterable[str | None], *, now: datetime | date | None = None) -> date | None:
    """
    Return the sold date from the first fragment/pattern pair that yields a valid
    date, with the future-date correction applied; None when nothing matches.
    """
    today = resolve_today(now)
    found = next((d for d in _candidates(fragments, today.year) if d is not None), None)
    if found is None:
        return None
    return correct_future_date(found, today)
