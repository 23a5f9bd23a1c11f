"""
Lowest-Price Search

Sequences one search: stay window, Google Hotels page steps, price row
parsing and aggregation. Page actions run one at a time; best-effort steps
are logged and never change the flow.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional

from . import google_hotels as gh
from .aggregate import aggregate
from .browser import open_session
from .config import SearchConfig
from .dates import select_window
from .driver import PageDriver, StepResult
from .errors import NoResultError, SearchFailedError, StayScoutError
from .parsing import quote_from_fragment
from .schema import UNKNOWN_HOTEL, AggregatedResult, HotelInfo, SearchQuery, StayWindow


logger = logging.getLogger(__name__)

SessionFactory = Callable[..., Any]


def _log_step(result: StepResult) -> None:
    if result.ok:
        logger.debug("%s: done", result.step)
    else:
        logger.debug("%s: skipped (%s)", result.step, result.error)


async def _best_effort(
    driver: PageDriver, step: str, operation: Awaitable[Any], timeout: float
) -> StepResult:
    result = await driver.with_timeout(step, operation, timeout)
    _log_step(result)
    return result


async def search_hotel(
    driver: PageDriver, config: SearchConfig, window: StayWindow
) -> AggregatedResult:
    """Run the page flow on an open driver and assemble the result."""
    timing = config.timing
    url = gh.build_search_url(config.city, window, config.guests)
    logger.debug("Searching %s", url)

    loaded = await driver.with_timeout("load search page", driver.navigate(url), timing.navigate)
    if not loaded.ok:
        raise NoResultError(config.city, str(loaded.error))

    await _best_effort(driver, "accept cookies", gh.accept_cookies(driver), timing.consent)
    await _best_effort(driver, "apply 5-star filter", gh.apply_star_filter(driver), timing.star_filter)
    await _best_effort(driver, "sort by rating", gh.sort_by_rating(driver), timing.sort)

    await driver.wait(timing.settle_results_ms)
    opened = await driver.with_timeout("open result", gh.open_first_result(driver), timing.open_result)
    if not opened.ok:
        raise NoResultError(config.city, str(opened.error))

    await driver.wait(timing.settle_hotel_ms)
    name = await _best_effort(driver, "read hotel name", gh.read_hotel_name(driver), timing.read)
    rating = await _best_effort(driver, "read hotel rating", gh.read_hotel_rating(driver), timing.read)
    hotel = HotelInfo(
        name=name.value if name.ok and name.value else UNKNOWN_HOTEL,
        rating=rating.value if rating.ok else None,
    )

    await _best_effort(driver, "open price comparison", gh.open_price_comparison(driver), timing.compare_prices)
    await driver.wait(timing.settle_prices_ms)

    fragments = await gh.collect_fragments(driver, timing, config.max_fragments)
    quotes = [q for q in (quote_from_fragment(f) for f in fragments) if q is not None]
    result = aggregate(quotes)
    logger.debug(
        "%d rows, %d priced, %d providers", len(fragments), len(quotes), len(result.deduped)
    )

    return AggregatedResult(
        query=SearchQuery.from_window(config.city, window, config.guests),
        hotel=hotel,
        lowest=result.lowest,
        quotes=result.deduped,
    )


async def find_lowest_price(
    config: SearchConfig,
    session_factory: Optional[SessionFactory] = None,
    now: Optional[datetime] = None,
) -> AggregatedResult:
    """
    Find the lowest 5-night price at a top-rated hotel in `config.city`.

    The stay window is validated before any browser is launched.
    `session_factory` is an async context manager factory yielding a
    PageDriver (default: a headless Chromium session). Browser failures
    outside the guarded page steps are raised as SearchFailedError.
    """
    window = select_window(now or datetime.now(), config.checkin)
    session_factory = session_factory or open_session

    try:
        async with session_factory(headless=config.headless) as driver:
            return await search_hotel(driver, config, window)
    except StayScoutError:
        raise
    except Exception as e:
        raise SearchFailedError(e) from e
