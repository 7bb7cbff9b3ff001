"""
Headless browser page acquisition.

A PageSession owns one Playwright tab for the duration of a single command.
DOM operations on it are sequential; callers pass the session down rather
than sharing a global tab.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from lolbot.config import Config
from lolbot.utils.exceptions import ElementNotFoundError, NoDataForQueryError, PageLoadError

logger = logging.getLogger(__name__)


class PageSession:
    """Sequential DOM queries against one live browser tab."""

    def __init__(self, page: Page, timeout_ms: int = None):
        self.page = page
        self.timeout_ms = timeout_ms or Config.PAGE_TIMEOUT_MS

    async def navigate(self, url: str) -> None:
        logger.info(f"Navigating to {url}")
        try:
            await self.page.goto(url, wait_until="commit", timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise PageLoadError(url, str(e)) from e

    async def wait_until_loaded(self) -> None:
        try:
            await self.page.wait_for_load_state("domcontentloaded", timeout=self.timeout_ms)
        except PlaywrightError as e:
            raise PageLoadError(self.page.url, str(e)) from e

    async def wait_for_selector(self, selector: str, timeout_ms: Optional[int] = None) -> None:
        try:
            await self.page.wait_for_selector(
                selector, state="attached", timeout=timeout_ms or self.timeout_ms
            )
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, "timed out waiting for element") from e
        except PlaywrightError as e:
            raise PageLoadError(self.page.url, str(e)) from e

    async def has_element(self, selector: str) -> bool:
        try:
            return await self.page.query_selector(selector) is not None
        except PlaywrightError as e:
            raise PageLoadError(self.page.url, str(e)) from e

    async def count(self, selector: str) -> int:
        try:
            return await self.page.locator(selector).count()
        except PlaywrightError as e:
            raise PageLoadError(self.page.url, str(e)) from e

    async def snapshot_html(self, root_selector: str) -> BeautifulSoup:
        """Serialize the first element matching `root_selector` and parse it."""
        try:
            handle = await self.page.query_selector(root_selector)
            if handle is None:
                raise ElementNotFoundError(root_selector)
            html = await handle.evaluate("element => element.outerHTML")
        except PlaywrightError as e:
            raise PageLoadError(self.page.url, str(e)) from e
        return BeautifulSoup(html, "html.parser")

    async def hover_and_read(self, target_selector: str, index: int, tooltip_selector: str) -> str:
        """Hover the `index`-th match of `target_selector` and return the tooltip text."""
        try:
            await self.page.locator(target_selector).nth(index).hover(timeout=self.timeout_ms)
            tooltip = self.page.locator(tooltip_selector).first
            await tooltip.wait_for(state="visible", timeout=self.timeout_ms)
            text = await tooltip.inner_text()
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(tooltip_selector, f"no tooltip for {target_selector} #{index}") from e
        except PlaywrightError as e:
            raise PageLoadError(self.page.url, str(e)) from e
        return text.strip()

    async def ensure_data_present(self, marker_selector: str, champion: str, opponent: Optional[str] = None) -> None:
        """Raise NoDataForQueryError if the site rendered its "no data" marker."""
        if await self.has_element(marker_selector):
            logger.info(f"u.gg reports no data for {champion} vs {opponent}")
            raise NoDataForQueryError(champion, opponent)


@asynccontextmanager
async def open_page_session(headless: bool = None, timeout_ms: int = None) -> AsyncIterator[PageSession]:
    """Launch a browser with a single tab; both are closed on exit."""
    if headless is None:
        headless = Config.BROWSER_HEADLESS

    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless)
        try:
            context = await browser.new_context(locale="en-US")
            page = await context.new_page()
            yield PageSession(page, timeout_ms)
        finally:
            await browser.close()
