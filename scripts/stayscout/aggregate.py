"""
Price Aggregation

Deduplicates provider quotes (lowest price per provider) and ranks them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .schema import PriceQuote


@dataclass(frozen=True)
class Aggregation:
    deduped: tuple[PriceQuote, ...] = ()
    lowest: Optional[PriceQuote] = None


def aggregate(quotes: Iterable[PriceQuote]) -> Aggregation:
    """
    Keep the cheapest quote per provider and sort ascending by amount.

    Providers are grouped by their trimmed, case-sensitive name. On equal
    amounts the quote seen first is kept, and the sort is stable so equal
    amounts across providers stay in first-seen order. Re-aggregating the
    deduped quotes returns the same Aggregation.
    """
    by_provider: dict[str, PriceQuote] = {}
    for quote in quotes:
        key = (quote.provider or "").strip()
        kept = by_provider.get(key)
        if kept is None or quote.amount < kept.amount:
            by_provider[key] = quote

    deduped = tuple(sorted(by_provider.values(), key=lambda q: q.amount))
    return Aggregation(deduped=deduped, lowest=deduped[0] if deduped else None)
