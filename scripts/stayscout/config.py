"""
Search Configuration

Everything a run needs is carried in a SearchConfig built by the CLI and
passed by value into the orchestrator. Page timing lives in one place so the
UI steps never hard-code their own timeouts.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional


NIGHTS = 5
MAX_FRAGMENTS = 80


@dataclass(frozen=True)
class Guests:
    """Fixed guest composition: two adults and one infant."""

    adults: int = 2
    infants: int = 1
    infant_age: int = 1

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Timing:
    """Per-step timeouts (seconds) and settle delays (milliseconds)."""

    navigate: float = 30.0
    consent: float = 2.0
    star_filter: float = 14.0
    sort: float = 8.0
    open_result: float = 6.0
    compare_prices: float = 4.0
    read: float = 3.0

    settle_results_ms: int = 1500
    settle_hotel_ms: int = 2000
    settle_prices_ms: int = 1500


@dataclass(frozen=True)
class SearchConfig:
    city: str
    checkin: Optional[str] = None
    headless: bool = True
    guests: Guests = field(default_factory=Guests)
    timing: Timing = field(default_factory=Timing)
    max_fragments: int = MAX_FRAGMENTS
