"""
Hotel Lowest-Price Search

Finds a top-rated hotel in a city on Google Hotels and reports the lowest
provider price for a 5-night stay.
"""

from .schema import StayWindow, RawFragment, PriceQuote, HotelInfo, SearchQuery, AggregatedResult
from .config import SearchConfig, Guests, Timing
from .errors import (
    StayScoutError, InvalidDateError, NoResultError, DependencyMissingError, StepError,
    SearchFailedError,
)
from .dates import select_window
from .parsing import parse_price, resolve_provider, quote_from_fragment
from .aggregate import Aggregation, aggregate
from .search import find_lowest_price, search_hotel

__all__ = [
    "StayWindow",
    "RawFragment",
    "PriceQuote",
    "HotelInfo",
    "SearchQuery",
    "AggregatedResult",
    "SearchConfig",
    "Guests",
    "Timing",
    "StayScoutError",
    "InvalidDateError",
    "NoResultError",
    "DependencyMissingError",
    "StepError",
    "SearchFailedError",
    "select_window",
    "parse_price",
    "resolve_provider",
    "quote_from_fragment",
    "Aggregation",
    "aggregate",
    "find_lowest_price",
    "search_hotel",
]
