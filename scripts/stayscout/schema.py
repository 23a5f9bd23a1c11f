"""
Search Result Schema

Value objects passed between the search stages, and the JSON shape of the
final result printed by find_lowest_price.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from .config import NIGHTS, Guests


UNKNOWN_HOTEL = "Unknown Hotel"

Amount = Union[Decimal, int, float]


def _json_amount(amount: Amount) -> Union[int, float]:
    """Integral amounts serialize as ints, everything else as floats."""
    value = Decimal(str(amount)) if not isinstance(amount, Decimal) else amount
    if value == value.to_integral_value():
        return int(value)
    return float(value)


@dataclass(frozen=True)
class StayWindow:
    """Check-in/check-out pair for a fixed-length stay."""

    check_in: date
    check_out: date
    nights: int = NIGHTS


@dataclass(frozen=True)
class RawFragment:
    """Text of one candidate price row, with its click-out link if any."""

    text: str
    href: Optional[str] = None


@dataclass(frozen=True)
class PriceQuote:
    """A single provider's advertised price for the stay."""

    provider: str
    amount: Amount
    currency: str
    url: Optional[str] = None
    raw_text: str = ""

    def to_dict(self) -> dict:
        return {
            "provider": self.provider,
            "amount": _json_amount(self.amount),
            "currency": self.currency,
            "url": self.url,
            "raw_text": self.raw_text,
        }


@dataclass(frozen=True)
class SearchQuery:
    city: str
    check_in: date
    check_out: date
    nights: int = NIGHTS
    guests: Guests = field(default_factory=Guests)

    @classmethod
    def from_window(cls, city: str, window: StayWindow, guests: Guests) -> SearchQuery:
        return cls(
            city=city,
            check_in=window.check_in,
            check_out=window.check_out,
            nights=window.nights,
            guests=guests,
        )


@dataclass(frozen=True)
class HotelInfo:
    """Hotel metadata read opportunistically from the result page."""

    name: str = UNKNOWN_HOTEL
    rating: Optional[float] = None
    stars: int = 5

    @property
    def is_populated(self) -> bool:
        return bool(self.name) and self.name != UNKNOWN_HOTEL


@dataclass(frozen=True)
class AggregatedResult:
    """
    Final search output.

    `quotes` is sorted ascending by amount and `lowest` is its first element,
    or None when no provider quote was found.
    """

    query: SearchQuery
    hotel: HotelInfo = field(default_factory=HotelInfo)
    lowest: Optional[PriceQuote] = None
    quotes: tuple[PriceQuote, ...] = ()

    def to_dict(self) -> dict:
        return {
            "query_city": self.query.city,
            "checkin": self.query.check_in.isoformat(),
            "checkout": self.query.check_out.isoformat(),
            "nights": self.query.nights,
            "guests": self.query.guests.to_dict(),
            "hotel": {
                "name": self.hotel.name,
                "rating": self.hotel.rating,
                "stars": self.hotel.stars,
                "city": self.query.city,
            },
            "lowest": self.lowest.to_dict() if self.lowest else None,
            "all_providers": [q.to_dict() for q in self.quotes],
        }


def validate_result(result: AggregatedResult) -> list[str]:
    """
    Validate an AggregatedResult and return a list of warnings.

    Does not raise: the page is scraped best-effort, so we report
    what's missing rather than failing hard.
    """
    warnings = []

    if not result.hotel.is_populated:
        warnings.append("Hotel name not found")
    if result.hotel.rating is None:
        warnings.append("Hotel rating not found")
    if not result.quotes:
        warnings.append("No provider quotes extracted")

    return warnings
