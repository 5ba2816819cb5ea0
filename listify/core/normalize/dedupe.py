# listify/core/normalize/dedupe.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

DedupeKey = tuple[str, float, date]


def dedupe_key(title: str, price: float, date_sold: date) -> DedupeKey:
    return (title, price, date_sold)


@dataclass
class Deduplicator:
    """
    Seen-set for a single pipeline run. First occurrence wins.

    Build one per invocation; instances are not meant to be shared between runs.
    """

    _seen: set[DedupeKey] = field(default_factory=set)

    def admit(self, key: DedupeKey) -> bool:
        """Record `key` and return True if it is new; return False for repeats."""
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def __len__(self) -> int:
        return len(self._seen)
