#!/usr/bin/env python3
"""
Find the Lowest Hotel Price

Opens Google Hotels for a city, picks a top-rated 5-star hotel and prints
the lowest provider price for a 5-night stay (2 adults + 1 infant) as JSON.

Usage:
    python scripts/find_lowest_price.py --city "Mumbai"
    python scripts/find_lowest_price.py --city "Paris" --checkin 2026-11-10

Options:
    --checkin   Check-in date YYYY-MM-DD (this year, in the future).
                Default: the first Monday at least 14 days out.
    --headful   Show the browser window
    --verbose   Log every page step to stderr

Requirements:
    pip install playwright
    playwright install chromium
"""

import argparse
import asyncio
import json
import logging
import sys

from stayscout import SearchConfig, StayScoutError, find_lowest_price
from stayscout.schema import validate_result


logger = logging.getLogger("find_lowest_price")


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors on one line and exits 1 like every other failure."""

    def error(self, message):
        print(f"ERROR: {message}", file=sys.stderr)
        sys.exit(1)


def parse_args(argv=None) -> argparse.Namespace:
    parser = _ArgumentParser(
        description="Find the lowest 5-night price at a top-rated hotel"
    )
    parser.add_argument("--city", required=True, help="City to search (e.g., 'Mumbai')")
    parser.add_argument(
        "--checkin",
        metavar="YYYY-MM-DD",
        help="Optional check-in date (must be this year & in future)",
    )
    parser.add_argument("--headful", action="store_true", help="Show the browser window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None, session_factory=None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    config = SearchConfig(city=args.city, checkin=args.checkin, headless=not args.headful)

    try:
        result = asyncio.run(find_lowest_price(config, session_factory=session_factory))
    except StayScoutError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for warning in validate_result(result):
        logger.warning(warning)

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
