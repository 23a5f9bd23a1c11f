"""
Price Row Parsing

Pure functions turning the text of a price-comparison row into a
PriceQuote. Testable without a browser.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Optional

from .schema import PriceQuote, RawFragment


logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = ("₹", "$", "€", "£", "¥")
CURRENCY_CODES = ("USD", "EUR", "GBP", "JPY", "INR")

# Ordered: an earlier brand wins when a row mentions several.
KNOWN_PROVIDERS = (
    "Google",
    "Booking.com",
    "Expedia",
    "Agoda",
    "Hotels.com",
    "MakeMyTrip",
    "Trip.com",
    "Priceline",
    "Travelocity",
    "Cleartrip",
    "Goibibo",
    "Easemytrip",
)

UNKNOWN_PROVIDER = "Unknown"
MAX_PROVIDER_NAME = 60

_PRICE_RE = re.compile(
    r"([" + "".join(re.escape(s) for s in CURRENCY_SYMBOLS) + r"]|"
    + "|".join(CURRENCY_CODES)
    + r")\s*([0-9][0-9,.]*)",
    re.IGNORECASE,
)
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_RATING_RE = re.compile(r"\b([0-9]\.[0-9])\b")


def parse_price(text: str) -> Optional[dict]:
    """
    Extract the first currency + amount pair from a text fragment.

    Returns {"currency": str, "amount": Decimal}, or None when the text has
    no recognized currency followed by a well-formed number.

    >>> parse_price("Booking.com ₹12,345 per night")
    {'currency': '₹', 'amount': Decimal('12345')}
    """
    if not text:
        return None

    m = _PRICE_RE.search(text)
    if not m:
        return None

    currency = m.group(1)
    if currency.upper() in CURRENCY_CODES:
        currency = currency.upper()

    # "$120." at the end of a sentence; "1.2.3" stays malformed
    number = m.group(2).rstrip(".,").replace(",", "")
    if not _NUMBER_RE.fullmatch(number):
        return None

    return {"currency": currency, "amount": Decimal(number)}


def resolve_provider(text: str) -> str:
    """
    Name the provider a price row belongs to.

    Rows usually start with the provider on its own line. When they don't
    (single-line rows, blank or overlong first lines) fall back to the
    first known brand mentioned anywhere in the row.
    """
    lines = (text or "").split("\n")
    first = lines[0].strip()
    if first and len(first) <= MAX_PROVIDER_NAME and len(lines) > 1:
        return first

    lowered = (text or "").lower()
    for brand in KNOWN_PROVIDERS:
        if brand.lower() in lowered:
            return brand

    return UNKNOWN_PROVIDER


def parse_rating(text: str) -> Optional[float]:
    """Parse a review score like '4.6' from hotel header text."""
    m = _RATING_RE.search(text or "")
    return float(m.group(1)) if m else None


def quote_from_fragment(fragment: RawFragment) -> Optional[PriceQuote]:
    """Build a PriceQuote from a row, or None if the row carries no price."""
    price = parse_price(fragment.text)
    if price is None:
        logger.debug("No price in row, skipping: %r", fragment.text[:80])
        return None

    return PriceQuote(
        provider=resolve_provider(fragment.text),
        amount=price["amount"],
        currency=price["currency"],
        url=fragment.href,
        raw_text=fragment.text,
    )
