"""
Tests for stayscout.parsing — price, provider and rating extraction.
"""

from decimal import Decimal

import pytest

from stayscout.parsing import (
    KNOWN_PROVIDERS, parse_price, parse_rating, quote_from_fragment, resolve_provider,
)
from stayscout.schema import PriceQuote, RawFragment


class TestParsePrice:
    def test_rupee_with_thousands(self):
        assert parse_price("Booking.com ₹12,345 per night") == {"currency": "₹", "amount": 12345}

    def test_no_price(self):
        assert parse_price("no price here") is None

    def test_empty_text(self):
        assert parse_price("") is None

    def test_amount_is_decimal(self):
        price = parse_price("Total: USD 1,234.50")
        assert price["currency"] == "USD"
        assert price["amount"] == Decimal("1234.50")
        assert isinstance(price["amount"], Decimal)

    def test_code_is_case_insensitive_and_normalized(self):
        assert parse_price("from eur 99 tonight") == {"currency": "EUR", "amount": 99}

    @pytest.mark.parametrize(
        "text,currency,amount",
        [
            ("$120", "$", 120),
            ("€ 89", "€", 89),
            ("£1,050", "£", 1050),
            ("¥15,800", "¥", 15800),
            ("INR 4,999", "INR", 4999),
            ("GBP 75.5", "GBP", Decimal("75.5")),
            ("JPY 21000", "JPY", 21000),
        ],
    )
    def test_recognized_currencies(self, text, currency, amount):
        assert parse_price(text) == {"currency": currency, "amount": amount}

    def test_first_occurrence_wins(self):
        assert parse_price("£80 was £120")["amount"] == 80

    def test_dollar_after_country_prefix(self):
        assert parse_price("Expedia US$230") == {"currency": "$", "amount": 230}

    def test_trailing_period_ignored(self):
        assert parse_price("Only $120.")["amount"] == 120

    def test_multiple_decimal_points_is_no_match(self):
        assert parse_price("€1.2.3") is None

    def test_unknown_currency(self):
        assert parse_price("CHF 200") is None

    def test_currency_without_number(self):
        assert parse_price("Prices in USD") is None


class TestResolveProvider:
    def test_first_line(self):
        assert resolve_provider("Expedia\nBest rate") == "Expedia"

    def test_first_line_is_trimmed(self):
        assert resolve_provider("  Hotel Direct  \n₹9,000") == "Hotel Direct"

    def test_unbranded_row(self):
        assert resolve_provider("random unbranded row") == "Unknown"

    def test_single_line_row_uses_brand(self):
        assert resolve_provider("Booking.com ₹12,345 per night") == "Booking.com"

    def test_blank_first_line_falls_back(self):
        assert resolve_provider("\nDeal on Hotels.com\n$99") == "Hotels.com"

    def test_long_first_line_falls_back(self):
        text = "x" * 61 + " via agoda\n$80"
        assert resolve_provider(text) == "Agoda"

    def test_sixty_chars_accepted(self):
        name = "y" * 60
        assert resolve_provider(f"{name}\n$80") == name

    def test_earlier_brand_wins(self):
        text = "Compare Agoda and Expedia rates for this stay " * 2
        assert resolve_provider(text) == "Expedia"

    def test_brand_match_is_case_insensitive(self):
        assert resolve_provider("deal via MAKEMYTRIP ₹5,000") == "MakeMyTrip"

    def test_empty(self):
        assert resolve_provider("") == "Unknown"

    def test_known_provider_order(self):
        assert KNOWN_PROVIDERS[0] == "Google"
        assert KNOWN_PROVIDERS[-1] == "Easemytrip"
        assert len(KNOWN_PROVIDERS) == 12


class TestParseRating:
    def test_rating_with_reviews(self):
        assert parse_rating("4.7 (12,345 reviews)") == 4.7

    def test_rating_in_sentence(self):
        assert parse_rating("Rated 4.5/5 by guests") == 4.5

    def test_no_rating(self):
        assert parse_rating("5-star hotel") is None

    def test_longer_number_is_not_a_rating(self):
        assert parse_rating("12.50") is None


class TestQuoteFromFragment:
    def test_builds_quote(self):
        fragment = RawFragment(text="Agoda\n₹17,900\nFree cancellation", href="https://www.agoda.com/taj")
        quote = quote_from_fragment(fragment)
        assert quote == PriceQuote(
            provider="Agoda",
            amount=Decimal("17900"),
            currency="₹",
            url="https://www.agoda.com/taj",
            raw_text="Agoda\n₹17,900\nFree cancellation",
        )

    def test_row_without_price_is_skipped(self):
        assert quote_from_fragment(RawFragment(text="Prices include taxes and fees")) is None

    def test_unknown_provider(self):
        quote = quote_from_fragment(RawFragment(text="$150 tonight only"))
        assert quote.provider == "Unknown"
        assert quote.url is None
