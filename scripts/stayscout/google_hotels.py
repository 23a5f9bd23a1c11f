"""
Google Hotels Page (google.com/travel/hotels)

Search URL builder, element targets and the individual page steps used by
the search. Markup on this page changes often; targets match on ARIA roles
and visible text rather than class names.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote, urljoin

from .config import Guests, Timing
from .dates import format_date
from .driver import PageDriver, Target, pattern
from .parsing import parse_rating
from .schema import RawFragment, StayWindow


logger = logging.getLogger(__name__)

SEARCH_BASE = "https://www.google.com/travel/hotels/"

COOKIE_ACCEPT = Target("cookie_accept", role="button", name=pattern(r"Accept all|I agree|Accept"))
FILTERS_BUTTON = Target("filters", role="button", name=pattern(r"Filters|All filters"))
FIVE_STAR_CHIP = Target("five_star", role="button", name=pattern(r"5-star"))
FILTERS_DONE = Target("filters_done", role="button", name=pattern(r"Done|Apply|Show results"))
SORT_BUTTON = Target("sort", role="button", name=pattern(r"Sort"))
SORT_BY_RATING = Target(
    "sort_by_rating", role="menuitem", name=pattern(r"Top-rated|Rating high to low|Rating")
)
FIVE_STAR_LINK = Target("five_star_link", role="link", has_text=pattern(r"5-star|★★★★★|5\s*stars"))
ANY_LINK = Target("any_link", role="link")
HEADING = Target("heading", role="heading")
RATING_TEXT = Target("rating_text", selector=r"text=/\b[0-9]\.[0-9]\b/")
COMPARE_PRICES = Target(
    "compare_prices",
    role="button",
    name=pattern(r"Prices|Compare prices|View more rates|More prices"),
)
PROVIDER_ROWS = Target("provider_rows", selector='[role="row"], [data-provider], a[role="link"]')


def build_search_url(city: str, window: StayWindow, guests: Optional[Guests] = None) -> str:
    """
    Build a Google Hotels search URL for a city and stay window.

    Args:
        city: Free-text city name (e.g., "Mumbai")
        window: Stay window supplying check-in/check-out
        guests: Guest composition; infants are sent as children with ages
    """
    guests = guests or Guests()
    return (
        f"{SEARCH_BASE}{quote(city, safe='')}"
        f"?hl=en"
        f"&checkin={format_date(window.check_in)}"
        f"&checkout={format_date(window.check_out)}"
        f"&adults={guests.adults}"
        f"&children={guests.infants}"
        f"&childrenAges={guests.infant_age}"
    )


# ---------------------------------------------------------------------------
# Page steps
# ---------------------------------------------------------------------------

async def accept_cookies(driver: PageDriver) -> None:
    if await driver.count(COOKIE_ACCEPT):
        await driver.click(COOKIE_ACCEPT)


async def apply_star_filter(driver: PageDriver) -> None:
    await driver.click(FILTERS_BUTTON)
    await driver.click(FIVE_STAR_CHIP)
    await driver.click(FILTERS_DONE)


async def sort_by_rating(driver: PageDriver) -> None:
    await driver.click(SORT_BUTTON)
    if await driver.count(SORT_BY_RATING):
        await driver.click(SORT_BY_RATING)


async def open_first_result(driver: PageDriver) -> None:
    """Open the first 5-star looking result, else the first link at all."""
    if await driver.count(FIVE_STAR_LINK):
        await driver.click(FIVE_STAR_LINK)
    else:
        await driver.click(ANY_LINK)


async def open_price_comparison(driver: PageDriver) -> None:
    if await driver.count(COMPARE_PRICES):
        await driver.click(COMPARE_PRICES)


async def read_hotel_name(driver: PageDriver) -> str:
    return (await driver.inner_text(HEADING)).strip()


async def read_hotel_rating(driver: PageDriver) -> Optional[float]:
    if not await driver.count(RATING_TEXT):
        return None
    return parse_rating(await driver.inner_text(RATING_TEXT))


# ---------------------------------------------------------------------------
# Price rows
# ---------------------------------------------------------------------------

async def collect_fragments(driver: PageDriver, timing: Timing, limit: int) -> list[RawFragment]:
    """
    Read up to `limit` candidate price rows with their click-out links.

    A failed row count yields no rows; a row whose text can't be read is
    skipped.
    """
    counted = await driver.with_timeout("count price rows", driver.count(PROVIDER_ROWS), timing.read)
    if not counted.ok:
        logger.debug("Could not count price rows: %s", counted.error)
        return []

    fragments = []
    for i in range(min(counted.value or 0, limit)):
        text = await driver.with_timeout(
            f"read price row {i}", driver.inner_text(PROVIDER_ROWS, i), timing.read
        )
        if not text.ok or not text.value:
            continue

        link = await driver.with_timeout(
            f"read price row {i} link",
            driver.attribute(PROVIDER_ROWS, "href", nth=i, child="a[href]"),
            timing.read,
        )
        href = link.value if link.ok else None
        if href and href.startswith("/"):
            href = urljoin(driver.url, href)

        fragments.append(RawFragment(text=text.value, href=href))

    logger.debug("Collected %d price rows", len(fragments))
    return fragments
