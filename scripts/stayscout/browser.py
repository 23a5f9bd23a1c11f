"""
Playwright Browser Session

PageDriver implementation over a Playwright page, plus the scoped session
that launches Chromium and always closes it.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from .driver import PageDriver, Target
from .errors import DependencyMissingError


USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


async def create_browser(playwright, headless: bool = True, viewport: dict | None = None):
    """Create a browser + context with standard settings."""
    browser = await playwright.chromium.launch(headless=headless)
    context = await browser.new_context(
        viewport=viewport or {"width": 1920, "height": 1080},
        locale="en-US",
        user_agent=USER_AGENT,
    )
    page = await context.new_page()
    return browser, context, page


class PlaywrightDriver(PageDriver):
    def __init__(self, page):
        self.page = page

    @property
    def url(self) -> str:
        return self.page.url

    def _locate(self, target: Target):
        if target.role:
            if target.name is not None:
                locator = self.page.get_by_role(target.role, name=target.name)
            else:
                locator = self.page.get_by_role(target.role)
        else:
            locator = self.page.locator(target.selector)
        if target.has_text is not None:
            locator = locator.filter(has_text=target.has_text)
        return locator

    async def navigate(self, url: str) -> None:
        await self.page.goto(url, wait_until="domcontentloaded")

    async def count(self, target: Target) -> int:
        return await self._locate(target).count()

    async def click(self, target: Target, nth: int = 0) -> None:
        await self._locate(target).nth(nth).click()

    async def inner_text(self, target: Target, nth: int = 0) -> str:
        return await self._locate(target).nth(nth).inner_text()

    async def attribute(
        self, target: Target, name: str, nth: int = 0, child: Optional[str] = None
    ) -> Optional[str]:
        element = self._locate(target).nth(nth)
        if child:
            element = element.locator(child)
            if not await element.count():
                return None
            element = element.first
        return await element.get_attribute(name)

    async def wait(self, ms: int) -> None:
        await self.page.wait_for_timeout(ms)


@asynccontextmanager
async def open_session(headless: bool = True) -> AsyncIterator[PlaywrightDriver]:
    """
    Launch Chromium and yield a driver for a fresh page.

    The browser is closed on every exit path, including errors and
    cancellation.
    """
    try:
        from playwright.async_api import Error as PlaywrightError
        from playwright.async_api import async_playwright
    except ImportError as e:
        raise DependencyMissingError(
            "Playwright not installed. Run: pip install playwright && playwright install chromium"
        ) from e

    async with async_playwright() as p:
        try:
            browser, _context, page = await create_browser(p, headless=headless)
        except PlaywrightError as e:
            raise DependencyMissingError(
                f"Could not launch Chromium ({e}). Run: playwright install chromium"
            ) from e

        try:
            yield PlaywrightDriver(page)
        finally:
            await browser.close()
