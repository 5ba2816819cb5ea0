# listify/core/normalize/text.py

from __future__ import annotations

import re

# \s covers NBSP and the thin/narrow spaces that show up in scraped markup.
_WS_RE = re.compile(r"\s+")


def normalize_text(value: str | None) -> str:
    """Collapse whitespace runs to a single space and trim. None → ""."""
    if not value:
        return ""
    return _WS_RE.sub(" ", value).strip()
