"""
Stay Window Selection

Picks a 5-night stay that starts in the future and inside the current
calendar year, either from a requested check-in or automatically.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union

from .config import NIGHTS
from .errors import InvalidDateError
from .schema import StayWindow


LEAD_DAYS = 14
FALLBACK_MONTH, FALLBACK_DAY = 12, 10
MONDAY = 1  # Sunday = 0 numbering


def format_date(d: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return d.strftime("%Y-%m-%d")


def _today(now: Union[datetime, date]) -> date:
    return now.date() if isinstance(now, datetime) else now


def _parse_checkin(value: str) -> date:
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidDateError("Invalid --checkin date (YYYY-MM-DD).") from e


def select_window(
    now: Union[datetime, date],
    requested_checkin: Optional[str] = None,
) -> StayWindow:
    """
    Compute the stay window for a search.

    With a requested check-in, it must parse, lie strictly after today and
    fall in the current year; check-out is five nights later regardless of
    its year.

    Without one, start from today + 14 days, move forward to the next
    Monday, fall back to December 10 if that leaves the year, then shift
    the stay back so check-out is no later than December 31.
    """
    today = _today(now)
    year = today.year
    stay = timedelta(days=NIGHTS)

    if requested_checkin is not None:
        check_in = _parse_checkin(requested_checkin)
        if check_in <= today:
            raise InvalidDateError("Check-in must be in the future.")
        if check_in.year != year:
            raise InvalidDateError(f"Check-in must be within the current year {year}.")
        return StayWindow(check_in=check_in, check_out=check_in + stay)

    earliest = today + timedelta(days=LEAD_DAYS)
    js_weekday = earliest.isoweekday() % 7
    days_until_monday = (MONDAY - js_weekday + 7) % 7
    check_in = earliest + timedelta(days=days_until_monday)
    if check_in.year != year:
        check_in = date(year, FALLBACK_MONTH, FALLBACK_DAY)
    check_out = check_in + stay

    last_day = date(year, 12, 31)
    if check_out > last_day:
        shift = timedelta(days=(check_out - last_day).days)
        check_in -= shift
        check_out -= shift

    if check_in <= today:
        raise InvalidDateError(
            f"No {NIGHTS}-night stay after {format_date(today)} fits in {year}."
        )

    return StayWindow(check_in=check_in, check_out=check_out)
